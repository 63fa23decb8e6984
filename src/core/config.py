"""Runtime configuration model for mdcver.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    ALLOW_LEGACY_ENV_VAR,
    DEFAULT_LOG_LEVEL,
    FALSE_WORDS,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    TRUE_WORDS,
)
from core.errors import MdcverConfigError


@dataclass(frozen=True)
class MdcverConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level.
        allow_legacy_reads: Whether content stamped with an older format
            version may be read.
    """

    log_level: str
    allow_legacy_reads: bool

    @classmethod
    def from_env(cls) -> "MdcverConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            MdcverConfigError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        allow_legacy_reads = _parse_bool(os.getenv(ALLOW_LEGACY_ENV_VAR, "true"))
        return cls(log_level=log_level, allow_legacy_reads=allow_legacy_reads)


def _parse_log_level(raw_value: str) -> str:
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise MdcverConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: got '{raw_value}'. "
            f"Use one of {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _parse_bool(raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        MdcverConfigError: If value is not a recognized boolean word.
    """
    word = raw_value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise MdcverConfigError(
        f"Invalid {ALLOW_LEGACY_ENV_VAR} value: expected boolean, got '{raw_value}'. "
        "Set it to true or false."
    )
