# FILE: admission_reports/utils/timezone.py
from __future__ import annotations

import logging
from datetime import datetime, date, timezone
from typing import Any
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

IST = ZoneInfo("Asia/Kolkata")

DATE_FMT = "%d/%m/%Y"
DATETIME_FMT = "%d/%m/%Y, %I:%M %p"
TIME_FMT = "%I:%M %p"

# already-localised strings typed in by staff (read as IST wall-clock)
_LOCAL_FORMATS = (
    "%d/%m/%Y, %I:%M %p",
    "%d/%m/%Y %I:%M %p",
    "%d/%m/%Y",
    "%d-%m-%Y",
)


class DateFormatError(ValueError):
    """Raised when a value cannot be read as a date/time."""


def now_ist() -> datetime:
    """
    Returns a *naive* datetime representing IST time.
    """
    return datetime.now(IST).replace(tzinfo=None)


def today_ist() -> date:
    return now_ist().date()


def parse_datetime(value: Any) -> datetime:
    """
    Read a stored date/time value as an aware IST datetime.

    Accepts datetime/date objects, epoch milliseconds and ISO-8601 strings
    (naive values are UTC, as stored by the data layer), plus the
    DD/MM/YYYY forms staff type in (IST wall-clock).
    """
    if value is None or isinstance(value, bool):
        raise DateFormatError(f"not a date: {value!r}")

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).astimezone(IST)
        except (OverflowError, OSError, ValueError) as e:
            raise DateFormatError(f"bad epoch value: {value!r}") from e
    else:
        s = str(value).strip()
        if not s:
            raise DateFormatError("empty date string")
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError:
            for fmt in _LOCAL_FORMATS:
                try:
                    return datetime.strptime(s, fmt).replace(tzinfo=IST)
                except ValueError:
                    continue
            raise DateFormatError(f"unrecognised date: {s!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(IST)
    except (OverflowError, ValueError) as e:
        # e.g. 9999-12-31T23:00Z has no IST equivalent
        raise DateFormatError(f"date out of range: {value!r}") from e


def _fmt(value: Any, pattern: str, default: str) -> str:
    if value is None or value == "":
        return default
    try:
        return parse_datetime(value).strftime(pattern)
    except DateFormatError as e:
        logger.warning("Date formatting error: %s", e)
        raw = str(value)
        return raw if raw.strip() else default


def fmt_date_ist(value: Any, default: str = "N/A") -> str:
    """DD/MM/YYYY in IST; unparseable input comes back as-is."""
    return _fmt(value, DATE_FMT, default)


def fmt_datetime_ist(value: Any, default: str = "N/A") -> str:
    """DD/MM/YYYY, hh:mm AM in IST; unparseable input comes back as-is."""
    return _fmt(value, DATETIME_FMT, default)


def fmt_time_ist(value: Any, default: str = "") -> str:
    return _fmt(value, TIME_FMT, default)
