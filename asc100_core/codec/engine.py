"""
Codec Engine
============
The public encode/decode contract.

encode: text -> filter -> sentinel parse -> indices -> bit pack -> symbols
decode: symbols -> bit unpack -> indices -> strategy check -> expansion -> text

The module-level functions are pure and do no logging. Asc100Codec binds a
CodecConfig for repeated use and logs at debug level. Call
``asc100_core.logging.setup_logging`` (INFO or above) before heavy use;
unconfigured structlog prints every debug event to stdout.
"""

from typing import List, Optional, Tuple, Union

import structlog

from ..charset import Charset, DEFAULT_CHARSET
from .bitpack import OutputAlphabet, DEFAULT_ALPHABET, pack_indices, unpack_indices
from .filters import FilterResult, apply_filter
from .models import CodecConfig, EncodingStrategy, FilterPolicy
from .sentinels import expand_indices, parse_sentinels, sentinels_to_indices

logger = structlog.get_logger(__name__)


def _filter_and_index(text: str, config: CodecConfig) -> Tuple[FilterResult, List[int]]:
    filtered = apply_filter(text, config.charset, config.filter_policy)
    sentinels = parse_sentinels(filtered.text, config.strategy, config.markers)
    return filtered, sentinels_to_indices(sentinels, config.charset)


def encode_with_config(text: str, config: CodecConfig) -> str:
    """Encode ``text`` with an already validated configuration."""
    _, indices = _filter_and_index(text, config)
    return pack_indices(indices, config.alphabet)


def decode_with_config(encoded: str, config: CodecConfig) -> str:
    """Decode ``encoded`` with an already validated configuration."""
    indices = unpack_indices(encoded, config.alphabet, strict_padding=config.strict_padding)
    return expand_indices(indices, config.charset, config.strategy, config.markers)


def encode(
    text: str,
    charset: Union[str, Charset] = DEFAULT_CHARSET,
    strategy: Union[str, EncodingStrategy] = EncodingStrategy.CORE,
    filter_policy: Union[str, FilterPolicy] = FilterPolicy.STRICT,
    alphabet: Union[str, OutputAlphabet] = DEFAULT_ALPHABET,
) -> str:
    """
    Encode text into URL-safe ASC100 symbols.

    Args:
        text: Input text
        charset: Charset or version name
        strategy: CORE (0-99) or EXTENSIONS (0-127, markers)
        filter_policy: STRICT, STRIP or SANITIZE
        alphabet: Output alphabet or its name

    Returns:
        Encoded text

    Raises:
        ConfigurationError: For an invalid combination (e.g. SANITIZE under CORE)
        InvalidCharacter: Under STRICT, for the first character outside the charset
    """
    config = CodecConfig(
        charset=charset,
        strategy=strategy,
        filter_policy=filter_policy,
        alphabet=alphabet,
    )
    return encode_with_config(text, config)


def decode(
    encoded: str,
    charset: Union[str, Charset] = DEFAULT_CHARSET,
    strategy: Union[str, EncodingStrategy] = EncodingStrategy.CORE,
    alphabet: Union[str, OutputAlphabet] = DEFAULT_ALPHABET,
    strict_padding: bool = False,
) -> str:
    """
    Decode ASC100 symbols back into text.

    Raises:
        MalformedEncoding: If a symbol is not in the output alphabet
        StrategyMismatch: If an index is not valid for the strategy
    """
    config = CodecConfig(
        charset=charset,
        strategy=strategy,
        alphabet=alphabet,
        strict_padding=strict_padding,
    )
    return decode_with_config(encoded, config)


class Asc100Codec:
    """
    Encoder/decoder bound to one configuration.

    Instances hold no per-call state and can be shared across threads.
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    @classmethod
    def core(
        cls,
        charset: Union[str, Charset] = DEFAULT_CHARSET,
        filter_policy: Union[str, FilterPolicy] = FilterPolicy.STRICT,
        **kwargs,
    ) -> "Asc100Codec":
        """Codec limited to the 100 charset indices."""
        return cls(CodecConfig(
            charset=charset,
            strategy=EncodingStrategy.CORE,
            filter_policy=filter_policy,
            **kwargs,
        ))

    @classmethod
    def extensions(
        cls,
        charset: Union[str, Charset] = DEFAULT_CHARSET,
        filter_policy: Union[str, FilterPolicy] = FilterPolicy.STRICT,
        **kwargs,
    ) -> "Asc100Codec":
        """Codec that also encodes marker tokens."""
        return cls(CodecConfig(
            charset=charset,
            strategy=EncodingStrategy.EXTENSIONS,
            filter_policy=filter_policy,
            **kwargs,
        ))

    @classmethod
    def from_settings(cls, settings=None) -> "Asc100Codec":
        """Build a codec from CodecSettings (defaults to the environment)."""
        from ..config import load_settings

        settings = settings or load_settings()
        return cls(settings.to_config())

    def filter(self, text: str) -> FilterResult:
        """Run only the filter stage."""
        return apply_filter(text, self.config.charset, self.config.filter_policy)

    def encode_indices(self, text: str) -> List[int]:
        """Encode to the index sequence without bit packing."""
        _, indices = _filter_and_index(text, self.config)
        return indices

    def encode(self, text: str) -> str:
        filtered, indices = _filter_and_index(text, self.config)
        encoded = pack_indices(indices, self.config.alphabet)

        if filtered.changed:
            logger.debug(
                "asc100 input filtered",
                policy=self.config.filter_policy.value,
                replaced=filtered.replaced,
                removed=filtered.removed,
            )
        logger.debug(
            "asc100 encoded",
            input_length=len(text),
            tokens=len(indices),
            output_length=len(encoded),
            **self.config.describe(),
        )
        return encoded

    def decode(self, encoded: str) -> str:
        decoded = decode_with_config(encoded, self.config)
        logger.debug(
            "asc100 decoded",
            input_length=len(encoded),
            output_length=len(decoded),
            **self.config.describe(),
        )
        return decoded

    def __repr__(self) -> str:
        details = ", ".join(f"{k}={v!r}" for k, v in self.config.describe().items())
        return f"Asc100Codec({details})"
