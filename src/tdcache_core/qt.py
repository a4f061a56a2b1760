"""tdcache - Qt value adapters.

The cache writer streams a handful of Qt types. These helpers turn their raw
fields into native Python values. Both are pure and never raise.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from .protocol import JULIAN_DAY_ORDINAL_OFFSET, MSECS_PER_DAY

_MIN_ORDINAL = date.min.toordinal()
_MAX_ORDINAL = date.max.toordinal()


def qdatetime(julian_day: int, msecs: int) -> datetime | None:
    """Convert a streamed QDateTime (Julian day, ms since midnight) to UTC.

    Days outside what ``datetime`` can represent (Qt's null date among them)
    give ``None``. An out-of-range time of day, Qt's null time included, is
    taken as midnight.
    """
    ordinal = julian_day - JULIAN_DAY_ORDINAL_OFFSET
    if not _MIN_ORDINAL <= ordinal <= _MAX_ORDINAL:
        return None
    base = datetime.combine(date.fromordinal(ordinal), time.min, tzinfo=timezone.utc)
    if not 0 <= msecs < MSECS_PER_DAY:
        return base
    return base + timedelta(milliseconds=msecs)


def convert_utf16(raw: bytes) -> str:
    """Decode QString bytes; unpaired surrogates become U+FFFD."""
    if not raw:
        return ""
    return bytes(raw).decode("utf-16-le", errors="replace")
