"""
ASC100 Codec
============
7-bit character encoding packed into URL-safe 6-bit symbols.

Usage:
    from asc100_core.codec import encode, decode, Asc100Codec

    token = encode("user=alice")
    assert decode(token) == "user=alice"

    # Markers under the extensions strategy
    codec = Asc100Codec.extensions(filter_policy="sanitize")
    codec.decode(codec.encode("Helloé #EOF#"))  # 'Hello#INV# #EOF#'
"""

# Re-export all public APIs
from .models import (
    EncodingStrategy,
    FilterPolicy,
    Sentinel,
    CodecConfig,
)
from .bitpack import (
    OutputAlphabet,
    URL_SAFE,
    STANDARD,
    DEFAULT_ALPHABET,
    get_alphabet,
    encoded_length,
    pack_indices,
    unpack_indices,
)
from .filters import FilterResult, apply_filter
from .sentinels import parse_sentinels, sentinels_to_indices, expand_indices
from .engine import (
    encode,
    decode,
    encode_with_config,
    decode_with_config,
    Asc100Codec,
)

__all__ = [
    # Models
    "EncodingStrategy",
    "FilterPolicy",
    "Sentinel",
    "CodecConfig",
    # Bit packing
    "OutputAlphabet",
    "URL_SAFE",
    "STANDARD",
    "DEFAULT_ALPHABET",
    "get_alphabet",
    "encoded_length",
    "pack_indices",
    "unpack_indices",
    # Filtering
    "FilterResult",
    "apply_filter",
    # Sentinels
    "parse_sentinels",
    "sentinels_to_indices",
    "expand_indices",
    # Engine
    "encode",
    "decode",
    "encode_with_config",
    "decode_with_config",
    "Asc100Codec",
]
