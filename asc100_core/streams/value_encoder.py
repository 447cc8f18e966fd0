"""
Value Encoder
=============
Encodes individual token values and marks them so a reader can find them
again. Keys stay readable; only values are transformed.
"""

from typing import Optional, Tuple

import structlog

from ..codec import Asc100Codec
from .models import (
    KEY_SUFFIX,
    VALUE_SUFFIX,
    EncodingMarkMode,
    is_marked,
    join_tokens,
    split_tokens,
    strip_marks,
)

logger = structlog.get_logger(__name__)


class ValueEncoder:
    """Encode/decode token values with a bound codec."""

    def __init__(
        self,
        codec: Optional[Asc100Codec] = None,
        mode: EncodingMarkMode = EncodingMarkMode.KEY_SUFFIX,
    ):
        self.codec = codec or Asc100Codec.core()
        self.mode = EncodingMarkMode(mode)

    def encode_value(self, value: str) -> str:
        return self.codec.encode(value)

    def decode_value(self, encoded_value: str) -> str:
        """Decode a value, dropping a trailing ``:a`` mark if present."""
        if encoded_value.endswith(VALUE_SUFFIX):
            encoded_value = encoded_value[:-len(VALUE_SUFFIX)]
        return self.codec.decode(encoded_value)

    def encode_pair(self, key: str, value: str) -> Tuple[str, str]:
        encoded = self.encode_value(value)
        if self.mode is EncodingMarkMode.KEY_SUFFIX:
            return f"{key}{KEY_SUFFIX}", encoded
        if self.mode is EncodingMarkMode.VALUE_SUFFIX:
            return key, f"{encoded}{VALUE_SUFFIX}"
        return f"{key}{KEY_SUFFIX}", f"{encoded}{VALUE_SUFFIX}"

    def decode_pair(self, key: str, value: str) -> Tuple[str, str]:
        """Decode a marked pair; unmarked pairs pass through unchanged."""
        if not is_marked(key, value):
            return key, value
        clean_key, clean_value = strip_marks(key, value)
        return clean_key, self.codec.decode(clean_value)

    def encode_token_string(self, stream: str) -> str:
        """Encode every value in a ``k=v; k=v`` stream."""
        pairs = [self.encode_pair(key, value) for key, value in split_tokens(stream)]
        logger.debug("token stream encoded", tokens=len(pairs), mode=self.mode.value)
        return join_tokens(pairs)

    def decode_token_string(self, stream: str) -> str:
        """Decode every marked value in a ``k=v; k=v`` stream."""
        pairs = [self.decode_pair(key, value) for key, value in split_tokens(stream)]
        logger.debug("token stream decoded", tokens=len(pairs))
        return join_tokens(pairs)


# Presets

def core_key() -> ValueEncoder:
    """Core strategy, key suffix marking."""
    return ValueEncoder(Asc100Codec.core(), EncodingMarkMode.KEY_SUFFIX)


def core_value() -> ValueEncoder:
    """Core strategy, value suffix marking."""
    return ValueEncoder(Asc100Codec.core(), EncodingMarkMode.VALUE_SUFFIX)


def extensions_key() -> ValueEncoder:
    """Extensions strategy (markers), key suffix marking."""
    return ValueEncoder(Asc100Codec.extensions(), EncodingMarkMode.KEY_SUFFIX)


def extensions_both() -> ValueEncoder:
    """Extensions strategy with both marks."""
    return ValueEncoder(Asc100Codec.extensions(), EncodingMarkMode.BOTH)
