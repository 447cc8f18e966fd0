"""
ASC100 Core Library
===================
Compact 7-bit text encoding for URLs, tokens and config streams.
"""

__version__ = "0.3.0"

# Exceptions
from asc100_core.exceptions import (
    Asc100Error,
    InvalidCharacter,
    NonAsciiInput,
    ConfigurationError,
    MalformedEncoding,
    StrategyMismatch,
    TokenFormatError,
)

# Charsets
from asc100_core.charset import (
    Charset,
    MarkerDefinition,
    MarkerRegistry,
    MARKERS,
    V1_STANDARD,
    V2_NUMBERS,
    V3_LOWERCASE,
    V4_URL,
    get_charset,
    list_charsets,
)

# Codec
from asc100_core.codec import (
    encode,
    decode,
    Asc100Codec,
    CodecConfig,
    EncodingStrategy,
    FilterPolicy,
    OutputAlphabet,
    URL_SAFE,
    STANDARD,
)

# Config
from asc100_core.config import CodecSettings, load_settings

# Logging
from asc100_core.logging import setup_logging, log_error

# Metrics
from asc100_core.metrics import EncodingMetrics, timed_encode, timed_decode

# Streams
from asc100_core.streams import ValueEncoder, StreamTransformer, EncodingMarkMode, TransformMode

# API
from asc100_core.api import create_codec_router

__all__ = [
    "__version__",
    # Exceptions
    "Asc100Error",
    "InvalidCharacter",
    "NonAsciiInput",
    "ConfigurationError",
    "MalformedEncoding",
    "StrategyMismatch",
    "TokenFormatError",
    # Charsets
    "Charset",
    "MarkerDefinition",
    "MarkerRegistry",
    "MARKERS",
    "V1_STANDARD",
    "V2_NUMBERS",
    "V3_LOWERCASE",
    "V4_URL",
    "get_charset",
    "list_charsets",
    # Codec
    "encode",
    "decode",
    "Asc100Codec",
    "CodecConfig",
    "EncodingStrategy",
    "FilterPolicy",
    "OutputAlphabet",
    "URL_SAFE",
    "STANDARD",
    # Config
    "CodecSettings",
    "load_settings",
    # Logging
    "setup_logging",
    "log_error",
    # Metrics
    "EncodingMetrics",
    "timed_encode",
    "timed_decode",
    # Streams
    "ValueEncoder",
    "StreamTransformer",
    "EncodingMarkMode",
    "TransformMode",
    # API
    "create_codec_router",
]
