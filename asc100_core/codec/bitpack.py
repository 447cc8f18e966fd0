"""
Bit Packing
===========
7-bit index sequences to and from 6-bit output symbols.

Indices are written most-significant bit first into one bitstream, which is
zero-padded on the right to a multiple of 6 bits and read back out in 6-bit
groups. Decoding takes floor(6M / 7) fields and drops the remainder.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Union

from ..exceptions import ConfigurationError, MalformedEncoding

INDEX_BITS = 7
SYMBOL_BITS = 6
INDEX_MASK = (1 << INDEX_BITS) - 1
SYMBOL_MASK = (1 << SYMBOL_BITS) - 1

_BASE62 = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
)


@dataclass(frozen=True)
class OutputAlphabet:
    """A 64-symbol output alphabet with its inverse lookup."""
    name: str
    symbols: str
    lookup: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.symbols) != 64 or len(set(self.symbols)) != 64:
            raise ValueError(f"Alphabet '{self.name}' must have 64 distinct symbols")
        object.__setattr__(
            self,
            "lookup",
            MappingProxyType({symbol: value for value, symbol in enumerate(self.symbols)}),
        )

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.lookup


URL_SAFE = OutputAlphabet("url_safe", _BASE62 + "-_")
STANDARD = OutputAlphabet("standard", _BASE62 + "+/")

DEFAULT_ALPHABET = URL_SAFE

_ALPHABETS: Dict[str, OutputAlphabet] = {
    URL_SAFE.name: URL_SAFE,
    STANDARD.name: STANDARD,
}


def get_alphabet(alphabet: Union[str, OutputAlphabet]) -> OutputAlphabet:
    """Resolve an output alphabet by name."""
    if isinstance(alphabet, OutputAlphabet):
        return alphabet
    try:
        return _ALPHABETS[str(alphabet).strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown output alphabet '{alphabet}'. Available: {', '.join(_ALPHABETS)}"
        ) from None


def encoded_length(token_count: int) -> int:
    """Number of output symbols for ``token_count`` indices: ceil(7N / 6)."""
    return (token_count * INDEX_BITS + SYMBOL_BITS - 1) // SYMBOL_BITS


def pack_indices(indices: Sequence[int], alphabet: OutputAlphabet = DEFAULT_ALPHABET) -> str:
    """
    Pack 7-bit indices into output symbols.

    Args:
        indices: Values in 0-127
        alphabet: Output alphabet

    Returns:
        Encoded text of length ceil(7N / 6)

    Raises:
        ValueError: If an index does not fit in 7 bits
    """
    symbols = alphabet.symbols
    out: List[str] = []
    acc = 0
    nbits = 0

    for index in indices:
        if not 0 <= index <= INDEX_MASK:
            raise ValueError(f"Index {index} does not fit in {INDEX_BITS} bits")
        acc = (acc << INDEX_BITS) | index
        nbits += INDEX_BITS
        while nbits >= SYMBOL_BITS:
            nbits -= SYMBOL_BITS
            out.append(symbols[(acc >> nbits) & SYMBOL_MASK])
        acc &= (1 << nbits) - 1

    if nbits:
        out.append(symbols[(acc << (SYMBOL_BITS - nbits)) & SYMBOL_MASK])

    return "".join(out)


def unpack_indices(
    encoded: str,
    alphabet: OutputAlphabet = DEFAULT_ALPHABET,
    strict_padding: bool = False,
) -> List[int]:
    """
    Unpack output symbols back into 7-bit indices.

    Trailing bits that do not fill a whole 7-bit field are padding and are
    discarded. Index 0 is a real value, so a field is only emitted once all
    seven of its bits are present.

    Args:
        encoded: Encoded text
        alphabet: Output alphabet used when packing
        strict_padding: Also reject non-zero padding and non-canonical lengths

    Returns:
        List of indices in 0-127

    Raises:
        MalformedEncoding: On unknown symbols, or padding violations when strict
    """
    lookup = alphabet.lookup
    indices: List[int] = []
    acc = 0
    nbits = 0

    for position, symbol in enumerate(encoded):
        value = lookup.get(symbol)
        if value is None:
            raise MalformedEncoding(position, symbol)
        acc = (acc << SYMBOL_BITS) | value
        nbits += SYMBOL_BITS
        if nbits >= INDEX_BITS:
            nbits -= INDEX_BITS
            indices.append((acc >> nbits) & INDEX_MASK)
            acc &= (1 << nbits) - 1

    if strict_padding:
        if acc:
            raise MalformedEncoding(
                len(encoded) - 1,
                reason=f"{nbits} padding bits are not zero",
            )
        if len(encoded) != encoded_length(len(indices)):
            raise MalformedEncoding(
                len(encoded) - 1,
                reason=(
                    f"length {len(encoded)} is not canonical for "
                    f"{len(indices)} indices"
                ),
            )

    return indices
