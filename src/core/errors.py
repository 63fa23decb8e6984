"""Mdcver exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Lookups that simply miss return None; only caller mistakes and
unreadable formats raise.
"""

from __future__ import annotations


class MdcverError(Exception):
    """Base exception for all mdcver failures."""


class MdcverConfigError(MdcverError):
    """Raised for invalid runtime configuration."""


class MdcverDependencyError(MdcverError):
    """Raised when an optional runtime dependency is missing."""


class VersionFormatError(MdcverError):
    """Raised for malformed or out-of-range version identifiers."""


class UnknownOperatorError(MdcverError):
    """Raised when a comparison operator token is not recognized."""


class RegistryIntegrityError(MdcverError):
    """Raised when a version table is empty or not strictly increasing."""


class UnsupportedFormatError(MdcverError):
    """Raised when MDC content is in a format this binary must not read."""


class StampManifestError(MdcverError):
    """Raised for unreadable or invalid stamp manifest files."""
