"""
Token Stream Models
===================
Marking conventions for encoded values inside ``key=value; ...`` streams.
"""

from enum import Enum
from typing import List, Tuple

from ..exceptions import TokenFormatError

KEY_SUFFIX = "_asc"
VALUE_SUFFIX = ":a"
TOKEN_SEPARATOR = ";"
TOKEN_JOINER = "; "
NAMESPACE_SEPARATOR = ":"


class EncodingMarkMode(str, Enum):
    """How an encoded pair advertises that its value is encoded."""
    KEY_SUFFIX = "key_suffix"      # content_asc=<encoded>
    VALUE_SUFFIX = "value_suffix"  # content=<encoded>:a
    BOTH = "both"                  # content_asc=<encoded>:a


class TransformMode(str, Enum):
    """What a stream transformer does with each pair."""
    ENCODE_KEY_MARKED = "encode_key_marked"
    ENCODE_VALUE_MARKED = "encode_value_marked"
    DECODE = "decode"
    BIDIRECTIONAL = "bidirectional"  # encode unmarked, decode marked


def split_tokens(stream: str) -> List[Tuple[str, str]]:
    """
    Split ``"k=v; ns:k=v"`` into ``(key, value)`` pairs.

    Empty entries are skipped; each entry splits on its first ``=``.

    Raises:
        TokenFormatError: If an entry has no ``=``
    """
    pairs = []
    for token in stream.split(TOKEN_SEPARATOR):
        token = token.strip()
        if not token:
            continue
        key, sep, value = token.partition("=")
        if not sep:
            raise TokenFormatError(token)
        pairs.append((key, value))
    return pairs


def join_tokens(pairs: List[Tuple[str, str]]) -> str:
    return TOKEN_JOINER.join(f"{key}={value}" for key, value in pairs)


def is_marked(key: str, value: str) -> bool:
    """True when the pair carries either encoding mark."""
    return key.endswith(KEY_SUFFIX) or value.endswith(VALUE_SUFFIX)


def strip_marks(key: str, value: str) -> Tuple[str, str]:
    """Remove the key and value marks, once each."""
    if key.endswith(KEY_SUFFIX):
        key = key[:-len(KEY_SUFFIX)]
    if value.endswith(VALUE_SUFFIX):
        value = value[:-len(VALUE_SUFFIX)]
    return key, value


def bare_key(key: str) -> str:
    """Key without an optional ``namespace:`` prefix."""
    return key.split(NAMESPACE_SEPARATOR, 1)[1] if NAMESPACE_SEPARATOR in key else key
