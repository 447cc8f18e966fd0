"""
Charset Versions
================
Named orderings of the ASC100 base alphabet.

Every version is a permutation of the same 100 characters, so the codec
algorithm never changes; only the index assignment does.
"""

from typing import Dict, List, Sequence, Union

from ..exceptions import ConfigurationError
from .models import Charset


def create_base_charset() -> List[str]:
    """
    Build the base ordering.

    Printable ASCII (space through tilde) sits at index = code - 32, followed
    by tab, newline, carriage return, NUL and the reserved SOH control.
    """
    chars = [chr(code) for code in range(32, 127)]
    chars.extend(["\t", "\n", "\r", "\0", "\x01"])
    return chars


def swap_ranges(chars: Sequence[str], start_a: int, start_b: int, length: int) -> List[str]:
    """Return a copy of ``chars`` with two equal-length, non-overlapping ranges swapped."""
    if start_a + length > start_b and start_b + length > start_a:
        raise ValueError("Ranges must not overlap")

    result = list(chars)
    result[start_a:start_a + length], result[start_b:start_b + length] = (
        result[start_b:start_b + length],
        result[start_a:start_a + length],
    )
    return result


def _numbers_first() -> List[str]:
    # '0'-'9' live at 16-25 in the base ordering
    return swap_ranges(create_base_charset(), 0, 16, 10)


def _lowercase_first() -> List[str]:
    # 'a'-'z' live at 65-90 in the base ordering
    return swap_ranges(create_base_charset(), 0, 65, 26)


def _url_optimized() -> List[str]:
    chars = _lowercase_first()
    # after the lowercase swap the digits sit at 81-90
    return swap_ranges(chars, 26, 81, 10)


V1_STANDARD = Charset("v1_standard", create_base_charset())
V2_NUMBERS = Charset("v2_numbers_first", _numbers_first())
V3_LOWERCASE = Charset("v3_lowercase_first", _lowercase_first())
V4_URL = Charset("v4_url_optimized", _url_optimized())

DEFAULT_CHARSET = V1_STANDARD

_VERSIONS: Dict[str, Charset] = {
    charset.name: charset
    for charset in (V1_STANDARD, V2_NUMBERS, V3_LOWERCASE, V4_URL)
}

# Short aliases accepted wherever a version name is
_ALIASES = {
    "v1": V1_STANDARD.name,
    "v2": V2_NUMBERS.name,
    "v3": V3_LOWERCASE.name,
    "v4": V4_URL.name,
}


def list_charsets() -> List[str]:
    """Names of all registered charset versions."""
    return list(_VERSIONS)


def get_charset(charset: Union[str, Charset]) -> Charset:
    """
    Resolve a charset version.

    Args:
        charset: A Charset instance or a version name ("v1_standard", "v2", ...)

    Returns:
        The matching Charset

    Raises:
        ConfigurationError: If the name is not registered
    """
    if isinstance(charset, Charset):
        return charset

    name = str(charset).strip().lower()
    name = _ALIASES.get(name, name)
    try:
        return _VERSIONS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown charset version '{charset}'. Available: {', '.join(_VERSIONS)}"
        ) from None
