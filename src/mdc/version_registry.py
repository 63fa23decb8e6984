"""Table of MDC content versions understood by this binary.

An entry is appended each time the MDC content semantic or format changes
in a way earlier binaries cannot read. A release that keeps the format adds
no entry. The last entry is the newest format understood and the one
stamped on content this binary writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from core.errors import RegistryIntegrityError
from mdc.record_types import RecordType
from mdc.version_compare import CompareOp, compare
from mdc.version_id import VersionId


@dataclass(frozen=True)
class VersionEntry:
    """One MDC content format.

    Attributes:
        version: Version of the first binary that introduced this format.
        record_types: Record types legal when writing at this version.
        comment: Description of what changed.
    """

    version: VersionId
    record_types: frozenset[RecordType]
    comment: str


class VersionRegistry:
    """Read-only, strictly increasing sequence of version entries."""

    def __init__(self, entries: Iterable[VersionEntry]) -> None:
        self._entries = tuple(entries)
        _validate_entries(self._entries)

    @property
    def entries(self) -> tuple[VersionEntry, ...]:
        """Entries in definition order."""
        return self._entries

    def __iter__(self) -> Iterator[VersionEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def current_version(self) -> VersionId:
        """Return the version this binary writes."""
        return self._entries[-1].version

    def comment_for(self, version: VersionId) -> str | None:
        """Return the comment of the entry exactly matching version."""
        entry = self._find_exact(version)
        return entry.comment if entry is not None else None

    def record_types_for(self, version: VersionId) -> frozenset[RecordType] | None:
        """Return the record types of the entry exactly matching version."""
        entry = self._find_exact(version)
        return entry.record_types if entry is not None else None

    def governing_entry(self, version: VersionId) -> VersionEntry | None:
        """Return the newest entry not newer than version.

        Content stamped by a release that added no entry is governed by the
        last entry preceding it. Returns None when version predates the
        first entry.
        """
        governing = None
        for entry in self._entries:
            if compare(entry.version, CompareOp.LE, version):
                governing = entry
            else:
                break
        return governing

    def _find_exact(self, version: VersionId) -> VersionEntry | None:
        for entry in self._entries:
            if compare(version, CompareOp.EQ, entry.version):
                return entry
        return None


def _validate_entries(entries: tuple[VersionEntry, ...]) -> None:
    if not entries:
        raise RegistryIntegrityError(
            "Version table is empty. Define at least the initial content format."
        )
    for previous, entry in zip(entries, entries[1:]):
        if not compare(previous.version, CompareOp.LT, entry.version):
            raise RegistryIntegrityError(
                f"Version table is not strictly increasing: {entry.version} "
                f"follows {previous.version}. Append new formats at the end."
            )


MDC_VERSION_TABLE: tuple[VersionEntry, ...] = (
    VersionEntry(
        version=VersionId(major=1, minor=0, patch=0, dev=0),
        record_types=frozenset(
            {
                RecordType.OCREATE,
                RecordType.OUPDATE,
                RecordType.ODELETE,
                RecordType.OIDCKPT,
                RecordType.OERASE,
                RecordType.MCCONFIG,
                RecordType.MCSPARE,
                RecordType.VERSION,
                RecordType.MPCONFIG,
            }
        ),
        comment="Initial mpool MDCs content",
    ),
)

DEFAULT_REGISTRY = VersionRegistry(MDC_VERSION_TABLE)


def current_version() -> VersionId:
    """Return the version this binary stamps on MDC content it writes."""
    return DEFAULT_REGISTRY.current_version()


def comment_for(version: VersionId) -> str | None:
    """Return the shipped comment for an exact version, or None."""
    return DEFAULT_REGISTRY.comment_for(version)
