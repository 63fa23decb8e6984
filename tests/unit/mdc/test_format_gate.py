"""Unit tests for the MDC read/write format gate."""

from __future__ import annotations

import pytest

from core.errors import UnsupportedFormatError
from core.logging_config import configure_logging
from mdc.format_gate import assess_stamp, require_readable, write_format
from mdc.record_types import RecordType
from mdc.version_id import VersionId
from mdc.version_registry import VersionEntry, VersionRegistry


def _two_entry_registry() -> VersionRegistry:
    return VersionRegistry(
        [
            VersionEntry(
                version=VersionId(1, 0, 0, 0),
                record_types=frozenset({RecordType.OCREATE}),
                comment="Initial",
            ),
            VersionEntry(
                version=VersionId(1, 1, 0, 0),
                record_types=frozenset({RecordType.OCREATE, RecordType.OERASE}),
                comment="Erase records",
            ),
        ]
    )


def test_write_format_uses_current_version_and_types() -> None:
    """Writers should stamp the current version with its record types."""
    fmt = write_format(_two_entry_registry())

    assert fmt.version == VersionId(1, 1, 0, 0)
    assert fmt.record_types == frozenset({RecordType.OCREATE, RecordType.OERASE})


def test_write_format_defaults_to_shipped_table() -> None:
    """The default registry should write 1.0.0.0 content."""
    assert write_format().version == VersionId(1, 0, 0, 0)


def test_assess_stamp_marks_current_version() -> None:
    """A stamp equal to the current version should be current."""
    assessment = assess_stamp(VersionId(1, 1, 0, 0), _two_entry_registry())

    assert assessment.verdict == "current" and assessment.readable


def test_assess_stamp_marks_newer_version_as_future() -> None:
    """A stamp above the current version should be unreadable."""
    assessment = assess_stamp(VersionId(1, 1, 0, 1), _two_entry_registry())

    assert assessment.verdict == "future"
    assert not assessment.readable and assessment.governing_entry is None


def test_assess_stamp_marks_older_version_as_legacy() -> None:
    """An older stamp should be legacy and governed by its format entry."""
    assessment = assess_stamp(VersionId(1, 0, 5, 0), _two_entry_registry())

    assert assessment.verdict == "legacy"
    assert assessment.governing_entry is not None
    assert assessment.governing_entry.comment == "Initial"


def test_require_readable_rejects_future_stamp() -> None:
    """Reading content from a newer format should fail."""
    with pytest.raises(UnsupportedFormatError):
        require_readable(VersionId(2, 0, 0, 0))


def test_require_readable_accepts_legacy_by_default() -> None:
    """Legacy content should be readable unless disabled."""
    assessment = require_readable(VersionId(1, 0, 0, 0), _two_entry_registry())

    assert assessment.verdict == "legacy"


def test_require_readable_rejects_legacy_when_disabled() -> None:
    """Strict readers should refuse older formats."""
    with pytest.raises(UnsupportedFormatError):
        require_readable(VersionId(1, 0, 0, 0), _two_entry_registry(), allow_legacy=False)


def test_require_readable_accepts_current_when_legacy_disabled() -> None:
    """Strict readers should still accept the current format."""
    assessment = require_readable(VersionId(1, 0, 0, 0), allow_legacy=False)

    assert assessment.verdict == "current"


def test_require_readable_logs_future_stamp(capsys) -> None:
    """Rejecting a future stamp should emit a structured warning."""
    configure_logging("WARNING")

    with pytest.raises(UnsupportedFormatError):
        require_readable(VersionId(2, 0, 0, 0))

    assert "mdc_stamp_future" in capsys.readouterr().err


def test_require_readable_logs_legacy_rejection(capsys) -> None:
    """Rejecting a legacy stamp should emit a structured warning."""
    configure_logging("WARNING")

    with pytest.raises(UnsupportedFormatError):
        require_readable(VersionId(1, 0, 0, 0), _two_entry_registry(), allow_legacy=False)

    assert "mdc_stamp_legacy_rejected" in capsys.readouterr().err
