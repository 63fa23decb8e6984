"""MDC record-type markers.

Values are the on-media record codes, so a decoded byte maps directly
onto a member.
"""

from __future__ import annotations

from enum import IntEnum


class RecordType(IntEnum):
    """Kind of a single MDC record."""

    OCREATE = 1
    OUPDATE = 2
    ODELETE = 3
    OIDCKPT = 4
    OERASE = 5
    MCCONFIG = 6
    MCSPARE = 7
    VERSION = 8
    MPCONFIG = 9
