"""
Random Data Generators
======================
Random strings, tokens and token streams for exercising the codec.
"""

import random
import secrets
import string
import uuid
from enum import Enum
from typing import Iterable, List, Optional, Sequence, TypeVar

from .charset import MARKERS, MarkerRegistry

T = TypeVar("T")

ALNUM = string.ascii_letters + string.digits
HEX_DIGITS = "0123456789abcdef"

TOKEN_KEYS = (
    "user", "host", "path", "mode", "level", "region", "content",
    "version", "status", "message", "session", "query",
)
TOKEN_NAMESPACES = ("app", "sys", "net", "db", "auth")
WORDS = (
    "alpha", "bravo", "charlie", "delta", "echo", "fox", "golf",
    "hotel", "india", "kilo", "lima", "mike", "oscar", "tango",
)


def rand_string(length: int, charset: str) -> str:
    """Random string of ``length`` characters drawn from ``charset``."""
    if not charset:
        raise ValueError("charset must not be empty")
    return "".join(secrets.choice(charset) for _ in range(length))


def rand_alnum(length: int) -> str:
    return rand_string(length, ALNUM)


def rand_alpha(length: int) -> str:
    return rand_string(length, string.ascii_letters)


def rand_hex(length: int) -> str:
    return rand_string(length, HEX_DIGITS)


def rand_uuid() -> str:
    return str(uuid.uuid4())


def rand_choice(items: Sequence[T]) -> T:
    """Pick one element. Raises IndexError on an empty sequence."""
    if not items:
        raise IndexError("cannot choose from an empty sequence")
    return secrets.choice(items)


def rand_range(low: int, high: int) -> int:
    """Random int in ``[low, high)``."""
    return random.randrange(low, high)


class ValueType(str, Enum):
    """Shape of generated token values."""
    ALNUM = "alnum"
    ALPHA = "alpha"
    HEX = "hex"
    UUID = "uuid"
    NUMBER = "number"
    SENTENCE = "sentence"


def gen_value(value_type: ValueType = ValueType.ALNUM, length: int = 8) -> str:
    value_type = ValueType(value_type)
    if value_type is ValueType.ALPHA:
        return rand_alpha(length)
    if value_type is ValueType.HEX:
        return rand_hex(length)
    if value_type is ValueType.UUID:
        return rand_uuid()
    if value_type is ValueType.NUMBER:
        return str(rand_range(0, 10 ** max(length, 1)))
    if value_type is ValueType.SENTENCE:
        return " ".join(rand_choice(WORDS) for _ in range(max(length // 4, 1)))
    return rand_alnum(length)


def gen_token(
    key: Optional[str] = None,
    value_type: ValueType = ValueType.ALNUM,
    namespace: Optional[str] = None,
    length: int = 8,
) -> str:
    """
    Generate one ``key=value`` token.

    Args:
        key: Token key (random when omitted)
        value_type: Shape of the value
        namespace: Optional ``ns:`` prefix for the key
        length: Value length for string-like types

    Returns:
        Token such as ``"app:user=Xk3p9aQz"``
    """
    key = key or rand_choice(TOKEN_KEYS)
    if namespace:
        key = f"{namespace}:{key}"
    return f"{key}={gen_value(value_type, length)}"


def gen_token_stream(count: int, namespaced: bool = False) -> str:
    """``count`` random tokens joined as ``"k=v; k=v"``."""
    tokens = []
    for _ in range(count):
        namespace = rand_choice(TOKEN_NAMESPACES) if namespaced else None
        tokens.append(
            gen_token(
                value_type=rand_choice(list(ValueType)),
                namespace=namespace,
                length=rand_range(4, 17),
            )
        )
    return "; ".join(tokens)


def gen_marker_text(
    words: int,
    markers: Optional[Iterable[str]] = None,
    registry: MarkerRegistry = MARKERS,
) -> str:
    """
    Random words with marker tokens mixed in.

    Args:
        words: Number of plain words
        markers: Marker tokens to draw from (all registered when omitted)
        registry: Registry the default tokens come from

    Returns:
        Text suitable for the Extensions strategy
    """
    tokens: List[str] = list(markers if markers is not None else registry.tokens)
    parts = []
    for _ in range(words):
        parts.append(rand_choice(WORDS))
        if tokens and rand_range(0, 3) == 0:
            parts.append(rand_choice(tokens))
    return " ".join(parts)
