"""
ASC100 Charsets and Markers
===========================
Character tables, named charset versions and the marker registry.
"""

# Re-export all public APIs
from .models import Charset, CHARSET_SIZE
from .versions import (
    V1_STANDARD,
    V2_NUMBERS,
    V3_LOWERCASE,
    V4_URL,
    DEFAULT_CHARSET,
    create_base_charset,
    swap_ranges,
    get_charset,
    list_charsets,
)
from .markers import (
    MarkerDefinition,
    MarkerRegistry,
    MARKERS,
    MARKER_INDEX_MIN,
    MARKER_INDEX_MAX,
    INVALID_CHARACTER_TOKEN,
    is_extension_index,
)

__all__ = [
    # Models
    "Charset",
    "CHARSET_SIZE",
    # Versions
    "V1_STANDARD",
    "V2_NUMBERS",
    "V3_LOWERCASE",
    "V4_URL",
    "DEFAULT_CHARSET",
    "create_base_charset",
    "swap_ranges",
    "get_charset",
    "list_charsets",
    # Markers
    "MarkerDefinition",
    "MarkerRegistry",
    "MARKERS",
    "MARKER_INDEX_MIN",
    "MARKER_INDEX_MAX",
    "INVALID_CHARACTER_TOKEN",
    "is_extension_index",
]
