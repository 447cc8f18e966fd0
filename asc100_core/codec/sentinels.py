"""
Sentinel Parsing
================
Splits filtered text into literal-character and marker symbols, then maps
those symbols to indices and back.

A literal is always 0-99 and a marker is always 100-127; the parser decides
syntactically which kind each span is before any numeric mapping happens.
"""

from typing import Iterable, List, Sequence

from ..charset import Charset, MarkerRegistry, MARKERS
from ..exceptions import InvalidCharacter, NonAsciiInput, StrategyMismatch
from .filters import ASCII_MAX
from .models import EncodingStrategy, Sentinel


def parse_sentinels(
    text: str,
    strategy: EncodingStrategy,
    markers: MarkerRegistry = MARKERS,
) -> List[Sentinel]:
    """
    Tokenize filtered text into sentinel symbols.

    Under CORE every character is a literal, including ones that spell a
    marker. Under EXTENSIONS a registered token starting at the current
    position is consumed whole as a single marker symbol.
    """
    if not strategy.supports_markers:
        return [Sentinel(char, position) for position, char in enumerate(text)]

    sentinels: List[Sentinel] = []
    position = 0
    length = len(text)
    while position < length:
        marker = markers.match_at(text, position)
        if marker is not None:
            sentinels.append(Sentinel(marker.token, position, marker))
            position += len(marker.token)
        else:
            sentinels.append(Sentinel(text[position], position))
            position += 1
    return sentinels


def sentinels_to_indices(sentinels: Iterable[Sentinel], charset: Charset) -> List[int]:
    """
    Map sentinel symbols to 7-bit indices.

    Raises:
        InvalidCharacter: If a literal escaped filtering and is not in the charset
    """
    lookup = charset.lookup
    indices: List[int] = []
    for sentinel in sentinels:
        if sentinel.marker is not None:
            indices.append(sentinel.marker.index)
            continue
        index = lookup.get(sentinel.text)
        if index is None:
            if ord(sentinel.text) > ASCII_MAX:
                raise NonAsciiInput(sentinel.text, sentinel.position)
            raise InvalidCharacter(sentinel.text, sentinel.position)
        indices.append(index)
    return indices


def expand_indices(
    indices: Sequence[int],
    charset: Charset,
    strategy: EncodingStrategy,
    markers: MarkerRegistry = MARKERS,
) -> str:
    """
    Turn decoded indices back into text.

    Indices 0-99 become charset characters; marker indices are restored to
    their full token text.

    Raises:
        StrategyMismatch: If an index is outside the strategy's range, or sits
            in the reserved marker range without an assigned token
    """
    parts: List[str] = []
    chars = charset.chars
    limit = len(chars)
    for index in indices:
        if not strategy.supports_index(index):
            raise StrategyMismatch(index, strategy.value)
        if index < limit:
            parts.append(chars[index])
            continue
        marker = markers.for_index(index)
        if marker is None:
            raise StrategyMismatch(
                index,
                strategy.value,
                reason=f"Index {index} is a reserved marker slot with no assigned token",
            )
        parts.append(marker.token)
    return "".join(parts)
