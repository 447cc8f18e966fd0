"""
Codec Exceptions
================
Exception classes raised by the encode/decode engine.

Every error is terminal: the engine never returns partial output.
"""

from typing import Optional


class Asc100Error(Exception):
    """Base exception for all ASC100 codec errors."""
    pass


class InvalidCharacter(Asc100Error):
    """Raised when a character outside the active charset reaches encoding."""

    label = "Invalid character"

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"{self.label} {character!r} (U+{ord(character):04X}) at position {position}"
        )


class NonAsciiInput(InvalidCharacter):
    """Raised when the input carries a code point above 127."""

    label = "Non-ASCII character"


class ConfigurationError(Asc100Error):
    """Raised when a codec configuration is inconsistent."""
    pass


class MalformedEncoding(Asc100Error):
    """Raised when encoded text cannot be unpacked."""

    def __init__(
        self,
        position: int,
        character: Optional[str] = None,
        reason: str = "symbol is not in the output alphabet",
    ):
        self.position = position
        self.character = character
        self.reason = reason
        if character is not None:
            message = f"Malformed encoding at position {position}: {character!r} {reason}"
        else:
            message = f"Malformed encoding at position {position}: {reason}"
        super().__init__(message)


class StrategyMismatch(Asc100Error):
    """Raised when a decoded index is outside the active strategy's range."""

    def __init__(self, index: int, strategy: str, reason: Optional[str] = None):
        self.index = index
        self.strategy = strategy
        super().__init__(
            reason or f"Index {index} is not valid under the '{strategy}' strategy"
        )


class TokenFormatError(Asc100Error):
    """Raised when a token-stream entry is not a ``key=value`` pair."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Token must contain '=': {token!r}")
