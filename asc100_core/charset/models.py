"""
Charset Models
==============
Immutable character tables for the ASC100 codec.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

CHARSET_SIZE = 100


class Charset:
    """
    A fixed bijection between 100 characters and the indices 0-99.

    The position of a character in the table is its encoding index.
    The reverse lookup is built once and cannot be mutated.
    """

    __slots__ = ("_name", "_chars", "_lookup")

    def __init__(self, name: str, chars: Iterable[str]):
        chars = tuple(chars)
        if len(chars) != CHARSET_SIZE:
            raise ValueError(
                f"Charset '{name}' must have exactly {CHARSET_SIZE} characters, got {len(chars)}"
            )

        lookup = {}
        for index, char in enumerate(chars):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Charset '{name}' entry {index} is not a single character: {char!r}")
            if char in lookup:
                raise ValueError(
                    f"Charset '{name}' repeats {char!r} at indices {lookup[char]} and {index}"
                )
            lookup[char] = index

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_chars", chars)
        object.__setattr__(self, "_lookup", MappingProxyType(lookup))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def chars(self) -> Tuple[str, ...]:
        return self._chars

    @property
    def lookup(self) -> Mapping[str, int]:
        """Read-only character -> index mapping."""
        return self._lookup

    def char_for(self, index: int) -> str:
        """Return the character at ``index`` (0-99)."""
        if not 0 <= index < CHARSET_SIZE:
            raise IndexError(f"Charset index out of range: {index}")
        return self._chars[index]

    def index_for(self, char: str) -> Optional[int]:
        """Return the index of ``char``, or None when it is not in the table."""
        return self._lookup.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self._lookup

    def __len__(self) -> int:
        return CHARSET_SIZE

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Charset):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"Charset(name={self._name!r})"

    def preview(self, count: int = 20) -> str:
        """Printable listing of the first ``count`` entries."""
        lines = []
        for index in range(min(count, CHARSET_SIZE)):
            lines.append(f"[{index:2d}] {self._chars[index]!r}")
        return "\n".join(lines)
