"""
Filter Policies
===============
Per-character handling of input that falls outside the active charset.

Filtering runs before sentinel parsing and never looks at marker tokens.
"""

from dataclasses import dataclass

from ..charset import Charset, INVALID_CHARACTER_TOKEN
from ..exceptions import InvalidCharacter, NonAsciiInput
from .models import FilterPolicy

ASCII_MAX = 127


@dataclass(frozen=True)
class FilterResult:
    """Filtered text plus counts of what the policy changed."""
    text: str
    replaced: int = 0
    removed: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.replaced or self.removed)


def _invalid(char: str, position: int) -> InvalidCharacter:
    if ord(char) > ASCII_MAX:
        return NonAsciiInput(char, position)
    return InvalidCharacter(char, position)


def apply_filter(
    text: str,
    charset: Charset,
    policy: FilterPolicy,
    replacement: str = INVALID_CHARACTER_TOKEN,
) -> FilterResult:
    """
    Apply a filter policy to raw input.

    Args:
        text: Raw input text
        charset: Active charset
        policy: STRICT, STRIP or SANITIZE
        replacement: Token substituted for each invalid character under SANITIZE

    Returns:
        FilterResult with the filtered text

    Raises:
        InvalidCharacter: Under STRICT, for the first character not in the charset
        NonAsciiInput: Under STRICT, when that character is above U+007F
    """
    lookup = charset.lookup

    if policy is FilterPolicy.STRICT:
        for position, char in enumerate(text):
            if char not in lookup:
                raise _invalid(char, position)
        return FilterResult(text)

    parts = []
    replaced = 0
    removed = 0
    for char in text:
        if char in lookup:
            parts.append(char)
        elif policy is FilterPolicy.SANITIZE:
            parts.append(replacement)
            replaced += 1
        else:
            removed += 1

    return FilterResult("".join(parts), replaced=replaced, removed=removed)
