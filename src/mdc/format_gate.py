"""Read/write format gate for MDC content.

The MDC I/O layer asks this module which version to stamp on content it
writes, and whether a stamp read back from media is one it may parse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from core.errors import UnsupportedFormatError
from core.logging_config import get_logger
from mdc.record_types import RecordType
from mdc.version_compare import CompareOp, compare
from mdc.version_id import VersionId
from mdc.version_registry import DEFAULT_REGISTRY, VersionEntry, VersionRegistry

StampVerdict = Literal["current", "legacy", "future"]

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class WriteFormat:
    """Format used when this binary writes MDC content.

    Attributes:
        version: Version stamp to persist ahead of the records.
        record_types: Record types legal to emit.
    """

    version: VersionId
    record_types: frozenset[RecordType]


@dataclass(frozen=True)
class StampAssessment:
    """Classification of a version stamp read from media.

    Attributes:
        stamp: Version read from media.
        verdict: current, legacy (older format) or future (newer format).
        current_version: Newest version this binary understands.
        governing_entry: Table entry whose format applies, None for future
            stamps and stamps older than every entry.
    """

    stamp: VersionId
    verdict: StampVerdict
    current_version: VersionId
    governing_entry: VersionEntry | None

    @property
    def readable(self) -> bool:
        """Whether this binary understands the stamped format."""
        return self.verdict != "future"


def write_format(registry: VersionRegistry = DEFAULT_REGISTRY) -> WriteFormat:
    """Return the version stamp and record types for newly written content."""
    latest = registry.entries[-1]
    return WriteFormat(version=latest.version, record_types=latest.record_types)


def assess_stamp(
    stamp: VersionId,
    registry: VersionRegistry = DEFAULT_REGISTRY,
) -> StampAssessment:
    """Classify a stamp against the newest version in the registry."""
    current = registry.current_version()
    if compare(stamp, CompareOp.GT, current):
        verdict: StampVerdict = "future"
        governing = None
    elif compare(stamp, CompareOp.EQ, current):
        verdict = "current"
        governing = registry.entries[-1]
    else:
        verdict = "legacy"
        governing = registry.governing_entry(stamp)
    return StampAssessment(
        stamp=stamp,
        verdict=verdict,
        current_version=current,
        governing_entry=governing,
    )


def require_readable(
    stamp: VersionId,
    registry: VersionRegistry = DEFAULT_REGISTRY,
    allow_legacy: bool = True,
) -> StampAssessment:
    """Assess a stamp and reject formats this binary must not read.

    Args:
        stamp: Version read from media.
        registry: Version table to check against.
        allow_legacy: Whether older formats are accepted.

    Returns:
        Assessment of a readable stamp.

    Raises:
        UnsupportedFormatError: If stamp is newer than the current version,
            or older while legacy reads are disabled.
    """
    assessment = assess_stamp(stamp, registry)
    if assessment.verdict == "future":
        _LOGGER.warning(
            "mdc_stamp_future",
            stamp=str(stamp),
            current_version=str(assessment.current_version),
        )
        raise UnsupportedFormatError(
            f"MDC content version {stamp} is newer than {assessment.current_version}, "
            "the latest format this binary understands. Upgrade the binary."
        )
    if assessment.verdict == "legacy" and not allow_legacy:
        _LOGGER.warning("mdc_stamp_legacy_rejected", stamp=str(stamp))
        raise UnsupportedFormatError(
            f"MDC content version {stamp} is older than {assessment.current_version} "
            "and legacy reads are disabled."
        )
    _LOGGER.debug("mdc_stamp_accepted", stamp=str(stamp), verdict=assessment.verdict)
    return assessment
