"""
Marker Registry
===============
Reserved sentinel tokens mapped to the extension indices 100-127.

Markers are only meaningful under the extensions strategy. They are
process-wide constants; nothing mutates them after import.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

MARKER_INDEX_MIN = 100
MARKER_INDEX_MAX = 127


@dataclass(frozen=True)
class MarkerDefinition:
    """A sentinel token and the index it encodes to."""
    token: str
    index: int
    description: str = ""

    def __post_init__(self):
        if not self.token:
            raise ValueError("Marker token must not be empty")
        if not MARKER_INDEX_MIN <= self.index <= MARKER_INDEX_MAX:
            raise ValueError(
                f"Marker {self.token!r} index {self.index} outside "
                f"{MARKER_INDEX_MIN}-{MARKER_INDEX_MAX}"
            )


class MarkerRegistry:
    """
    Ordered, immutable set of marker definitions.

    The token set must be prefix-free so that a left-to-right scan can
    never match two markers at the same position.
    """

    __slots__ = ("_markers", "_by_token", "_by_index", "_lead_chars")

    def __init__(self, markers: Iterable[MarkerDefinition]):
        markers = tuple(markers)
        by_token = {}
        by_index = {}

        for marker in markers:
            if marker.token in by_token:
                raise ValueError(f"Duplicate marker token {marker.token!r}")
            if marker.index in by_index:
                raise ValueError(
                    f"Marker index {marker.index} assigned to both "
                    f"{by_index[marker.index].token!r} and {marker.token!r}"
                )
            by_token[marker.token] = marker
            by_index[marker.index] = marker

        for marker in markers:
            for other in markers:
                if other is not marker and other.token.startswith(marker.token):
                    raise ValueError(
                        f"Marker {marker.token!r} is a prefix of {other.token!r}"
                    )

        object.__setattr__(self, "_markers", markers)
        object.__setattr__(self, "_by_token", MappingProxyType(by_token))
        object.__setattr__(self, "_by_index", MappingProxyType(by_index))
        object.__setattr__(self, "_lead_chars", frozenset(m.token[0] for m in markers))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def by_token(self) -> Mapping[str, MarkerDefinition]:
        return self._by_token

    @property
    def by_index(self) -> Mapping[int, MarkerDefinition]:
        return self._by_index

    def get(self, token: str) -> Optional[MarkerDefinition]:
        return self._by_token.get(token)

    def for_index(self, index: int) -> Optional[MarkerDefinition]:
        return self._by_index.get(index)

    def match_at(self, text: str, position: int) -> Optional[MarkerDefinition]:
        """
        Return the marker whose token starts at ``position`` in ``text``.

        Tokens are tried in registration order; the first match wins.
        """
        if position >= len(text) or text[position] not in self._lead_chars:
            return None
        for marker in self._markers:
            if text.startswith(marker.token, position):
                return marker
        return None

    def __contains__(self, token: object) -> bool:
        return token in self._by_token

    def __iter__(self) -> Iterator[MarkerDefinition]:
        return iter(self._markers)

    def __len__(self) -> int:
        return len(self._markers)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(m.token for m in self._markers)


# Canonical index assignments
MARKER_INV = 100
MARKER_EOF = 101
MARKER_NL = 102
MARKER_V = 103
MARKER_Q = 104
MARKER_E = 105
MARKER_X = 106
MARKER_SSX = 107
MARKER_ESX = 108
MARKER_MEM = 109
MARKER_CTX = 110
MARKER_FX = 111
MARKER_ARG = 112
MARKER_TR = 113
MARKER_DNT = 114
MARKER_BRK = 115
MARKER_HSO = 116
MARKER_HSI = 117
MARKER_ACK = 118
# 119-127 reserved

INVALID_CHARACTER_TOKEN = "#INV#"

MARKERS = MarkerRegistry([
    MarkerDefinition(INVALID_CHARACTER_TOKEN, MARKER_INV, "Invalid character placeholder"),
    MarkerDefinition("#EOF#", MARKER_EOF, "End of file"),
    MarkerDefinition("#NL#", MARKER_NL, "Newline hint"),
    MarkerDefinition("#V#", MARKER_V, "Variable placeholder"),
    MarkerDefinition("#Q#", MARKER_Q, "Double quote"),
    MarkerDefinition("#E#", MARKER_E, "Escape / single quote"),
    MarkerDefinition("#X#", MARKER_X, "Control / validation marker"),
    MarkerDefinition("#SSX#", MARKER_SSX, "Start stream"),
    MarkerDefinition("#ESX#", MARKER_ESX, "End stream"),
    MarkerDefinition("#MEM#", MARKER_MEM, "Encoding / transmission metadata"),
    MarkerDefinition("#CTX#", MARKER_CTX, "Content / payload context"),
    MarkerDefinition("#FX#", MARKER_FX, "Function / code block"),
    MarkerDefinition("#ARG#", MARKER_ARG, "Arguments / parameters"),
    MarkerDefinition("#TR#", MARKER_TR, "Trusted content"),
    MarkerDefinition("#DNT#", MARKER_DNT, "Do not trust"),
    MarkerDefinition("#BRK#", MARKER_BRK, "Break / separator"),
    MarkerDefinition("#HSO#", MARKER_HSO, "Handshake out"),
    MarkerDefinition("#HSI#", MARKER_HSI, "Handshake in"),
    MarkerDefinition("#ACK#", MARKER_ACK, "Acknowledge"),
])


def is_extension_index(index: int) -> bool:
    """True for indices in the marker range (100-127)."""
    return MARKER_INDEX_MIN <= index <= MARKER_INDEX_MAX
