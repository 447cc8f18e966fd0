"""
Codec Models
============
Strategy and filter enums, sentinel symbols, and the validated codec
configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..charset import Charset, MarkerDefinition, MarkerRegistry, MARKERS, DEFAULT_CHARSET, get_charset
from ..charset.markers import INVALID_CHARACTER_TOKEN, MARKER_INDEX_MAX
from ..exceptions import ConfigurationError
from .bitpack import OutputAlphabet, DEFAULT_ALPHABET, get_alphabet


class EncodingStrategy(str, Enum):
    """Which index range an encode/decode call may use."""
    CORE = "core"              # 0-99, markers are plain text
    EXTENSIONS = "extensions"  # 0-127, markers encode to 100-127

    @property
    def max_index(self) -> int:
        return 99 if self is EncodingStrategy.CORE else MARKER_INDEX_MAX

    @property
    def supports_markers(self) -> bool:
        return self is EncodingStrategy.EXTENSIONS

    def supports_index(self, index: int) -> bool:
        return 0 <= index <= self.max_index


class FilterPolicy(str, Enum):
    """What to do with characters that are not in the charset."""
    STRICT = "strict"      # raise InvalidCharacter
    SANITIZE = "sanitize"  # replace with the #INV# marker
    STRIP = "strip"        # drop silently


def _coerce(enum_cls, value, label: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"Unknown {label} '{value}'. Available: {choices}") from None


@dataclass(frozen=True)
class Sentinel:
    """One parsed symbol: a literal character or a whole marker token."""
    text: str
    position: int
    marker: Optional[MarkerDefinition] = None

    @property
    def is_marker(self) -> bool:
        return self.marker is not None


@dataclass(frozen=True)
class CodecConfig:
    """
    Immutable, validated configuration shared by encode and decode calls.

    Names are accepted for every field and resolved on construction, so an
    inconsistent combination fails here rather than at encode time.
    """
    charset: Union[str, Charset] = DEFAULT_CHARSET
    strategy: Union[str, EncodingStrategy] = EncodingStrategy.CORE
    filter_policy: Union[str, FilterPolicy] = FilterPolicy.STRICT
    alphabet: Union[str, OutputAlphabet] = DEFAULT_ALPHABET
    markers: MarkerRegistry = MARKERS
    strict_padding: bool = False

    def __post_init__(self):
        object.__setattr__(self, "charset", get_charset(self.charset))
        object.__setattr__(self, "strategy", _coerce(EncodingStrategy, self.strategy, "strategy"))
        object.__setattr__(
            self, "filter_policy", _coerce(FilterPolicy, self.filter_policy, "filter policy")
        )
        object.__setattr__(self, "alphabet", get_alphabet(self.alphabet))

        if self.filter_policy is FilterPolicy.SANITIZE:
            if not self.strategy.supports_markers:
                raise ConfigurationError(
                    f"The sanitize filter needs the {INVALID_CHARACTER_TOKEN} marker, "
                    f"which the '{self.strategy.value}' strategy does not provide"
                )
            if INVALID_CHARACTER_TOKEN not in self.markers:
                raise ConfigurationError(
                    f"The sanitize filter needs {INVALID_CHARACTER_TOKEN} in the marker registry"
                )
            # the replacement token itself must be encodable
            if any(c not in self.charset for c in INVALID_CHARACTER_TOKEN):
                raise ConfigurationError(
                    f"Charset '{self.charset.name}' cannot represent {INVALID_CHARACTER_TOKEN}"
                )

    def describe(self) -> dict:
        """Flat summary used for logging and metrics labels."""
        return {
            "charset": self.charset.name,
            "strategy": self.strategy.value,
            "filter_policy": self.filter_policy.value,
            "alphabet": self.alphabet.name,
        }
