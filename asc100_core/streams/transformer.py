"""
Stream Transformer
==================
Pipeline stage applying the codec to ``key=value`` token streams.
"""

from typing import Callable, Iterable, Optional, Tuple, TypeVar

import structlog

from ..codec import Asc100Codec
from .models import (
    KEY_SUFFIX,
    VALUE_SUFFIX,
    TransformMode,
    bare_key,
    is_marked,
    join_tokens,
    split_tokens,
    strip_marks,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class StreamTransformer:
    """Encode, decode, or toggle token values according to a TransformMode."""

    def __init__(
        self,
        codec: Optional[Asc100Codec] = None,
        mode: TransformMode = TransformMode.ENCODE_KEY_MARKED,
    ):
        self.codec = codec or Asc100Codec.core()
        self.mode = TransformMode(mode)

    def transform_pair(self, key: str, value: str) -> Tuple[str, str]:
        if self.mode is TransformMode.ENCODE_KEY_MARKED:
            return f"{key}{KEY_SUFFIX}", self.codec.encode(value)
        if self.mode is TransformMode.ENCODE_VALUE_MARKED:
            return key, f"{self.codec.encode(value)}{VALUE_SUFFIX}"
        if self.mode is TransformMode.DECODE:
            return self._decode_pair(key, value)
        # bidirectional
        if is_marked(key, value):
            return self._decode_pair(key, value)
        return f"{key}{KEY_SUFFIX}", self.codec.encode(value)

    def _decode_pair(self, key: str, value: str) -> Tuple[str, str]:
        if not is_marked(key, value):
            return key, value
        clean_key, clean_value = strip_marks(key, value)
        return clean_key, self.codec.decode(clean_value)

    def transform_stream(self, stream: str) -> str:
        """Transform every pair in the stream."""
        pairs = [self.transform_pair(key, value) for key, value in split_tokens(stream)]
        logger.debug("token stream transformed", mode=self.mode.value, tokens=len(pairs))
        return join_tokens(pairs)

    def transform_selective(self, stream: str, keys: Iterable[str]) -> str:
        """
        Transform only pairs whose key (ignoring a ``namespace:`` prefix)
        is in ``keys``; the rest pass through unchanged.
        """
        wanted = set(keys)
        pairs = []
        for key, value in split_tokens(stream):
            if bare_key(key) in wanted:
                pairs.append(self.transform_pair(key, value))
            else:
                pairs.append((key, value))
        return join_tokens(pairs)

    def chain_transform(self, stream: str, next_operation: Callable[[str], T]) -> T:
        """Transform the stream, then hand the result to the next stage."""
        return next_operation(self.transform_stream(stream))

    def compression_gate(self, stream: str, min_size: int) -> str:
        """Transform only streams at least ``min_size`` characters long."""
        if len(stream) >= min_size:
            return self.transform_stream(stream)
        logger.debug("compression gate skipped", length=len(stream), min_size=min_size)
        return stream

    def fork_encode(self, stream: str) -> Tuple[str, str]:
        """Return ``(original, transformed)``."""
        return stream, self.transform_stream(stream)


# Presets

def encoder_key() -> StreamTransformer:
    return StreamTransformer(Asc100Codec.core(), TransformMode.ENCODE_KEY_MARKED)


def encoder_value() -> StreamTransformer:
    return StreamTransformer(Asc100Codec.core(), TransformMode.ENCODE_VALUE_MARKED)


def decoder() -> StreamTransformer:
    return StreamTransformer(Asc100Codec.core(), TransformMode.DECODE)


def bidirectional() -> StreamTransformer:
    return StreamTransformer(Asc100Codec.core(), TransformMode.BIDIRECTIONAL)


def extensions_encoder() -> StreamTransformer:
    return StreamTransformer(Asc100Codec.extensions(), TransformMode.ENCODE_KEY_MARKED)


def extensions_decoder() -> StreamTransformer:
    return StreamTransformer(Asc100Codec.extensions(), TransformMode.DECODE)
