"""Core constants used across mdcver modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

VERSION_COMPONENT_COUNT = 4
VERSION_COMPONENT_MIN = 0
VERSION_COMPONENT_MAX = 0xFFFF
VERSION_SEPARATOR = "."
LOG_LEVEL_ENV_VAR = "MDCVER_LOG_LEVEL"
ALLOW_LEGACY_ENV_VAR = "MDCVER_ALLOW_LEGACY"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TRUE_WORDS = ("1", "true", "yes", "on")
FALSE_WORDS = ("0", "false", "no", "off")
STAMP_MANIFEST_KEY = "stamps"
