"""
Codec Configuration
===================
Environment-driven settings for services that embed the codec.
"""

import os
from dataclasses import dataclass, field

from .codec.models import CodecConfig


def _env(name: str, default: str):
    return field(default_factory=lambda: os.environ.get(name, default))


def _env_flag(name: str, default: bool):
    def read() -> bool:
        raw = os.environ.get(name)
        if raw is None:
            return default
        return raw.strip().lower() in ("1", "true", "yes", "on")
    return field(default_factory=read)


@dataclass
class CodecSettings:
    """Codec and logging settings, read from the environment on creation."""
    charset: str = _env("ASC100_CHARSET", "v1_standard")
    strategy: str = _env("ASC100_STRATEGY", "core")
    filter_policy: str = _env("ASC100_FILTER", "strict")
    alphabet: str = _env("ASC100_ALPHABET", "url_safe")
    strict_padding: bool = _env_flag("ASC100_STRICT_PADDING", False)
    log_level: str = _env("ASC100_LOG_LEVEL", "INFO")
    json_logs: bool = _env_flag("ASC100_JSON_LOGS", True)

    def to_config(self) -> CodecConfig:
        """
        Build the validated codec configuration.

        Raises:
            ConfigurationError: If any name is unknown or the combination is invalid
        """
        return CodecConfig(
            charset=self.charset,
            strategy=self.strategy,
            filter_policy=self.filter_policy,
            alphabet=self.alphabet,
            strict_padding=self.strict_padding,
        )


def load_settings() -> CodecSettings:
    """Read settings from the current environment."""
    return CodecSettings()
