"""Public SDK surface for mdcver.

This module provides a stable import path for the MDC I/O layer.
It re-exports the version table, comparison helpers, and format gate.
"""

from __future__ import annotations

from core.config import MdcverConfig
from core.errors import (
    MdcverError,
    RegistryIntegrityError,
    StampManifestError,
    UnknownOperatorError,
    UnsupportedFormatError,
    VersionFormatError,
)
from mdc.format_gate import (
    StampAssessment,
    WriteFormat,
    assess_stamp,
    require_readable,
    write_format,
)
from mdc.record_types import RecordType
from mdc.stamp_manifest import load_stamp_manifest
from mdc.version_compare import CompareOp, compare, compare_literal, parse_operator
from mdc.version_id import VersionId, parse_version_string, version_to_string
from mdc.version_registry import (
    DEFAULT_REGISTRY,
    MDC_VERSION_TABLE,
    VersionEntry,
    VersionRegistry,
    comment_for,
    current_version,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "MDC_VERSION_TABLE",
    "CompareOp",
    "MdcverConfig",
    "MdcverError",
    "RecordType",
    "RegistryIntegrityError",
    "StampAssessment",
    "StampManifestError",
    "UnknownOperatorError",
    "UnsupportedFormatError",
    "VersionEntry",
    "VersionFormatError",
    "VersionId",
    "VersionRegistry",
    "WriteFormat",
    "assess_stamp",
    "comment_for",
    "compare",
    "compare_literal",
    "current_version",
    "load_stamp_manifest",
    "parse_operator",
    "parse_version_string",
    "require_readable",
    "version_to_string",
    "write_format",
]
