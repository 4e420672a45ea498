"""
Conversions between stored values (DATE / TIME columns) and the strings the
site displays.

    date(2025, 1, 25)            <-> "January 25, 2025"
    time(10, 0), time(12, 0)     <-> "10:00 AM - 12:00 PM"

Display strings keep minutes but not seconds, so parse(format(x)) gives
back x truncated to the minute.
"""

import re
from datetime import date, datetime, time
from typing import Optional, Tuple, Union

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_MONTH_LOOKUP = {name[:3].lower(): index for index, name in enumerate(MONTHS, start=1)}

_DISPLAY_DATE_RE = re.compile(r"^([A-Za-z]+)\.?\s+(\d{1,2}),?\s+(\d{4})$")
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp])?\.?(?:[Mm]\.?)?$")
_RANGE_SPLIT_RE = re.compile(r"\s*(?:-|–|—|\bto\b)\s*")


def format_date_for_display(value: date) -> str:
    """date(2025, 1, 25) -> "January 25, 2025"."""
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def parse_display_date(value: Union[str, date]) -> date:
    """
    Accepts the display form ("January 25, 2025", "Jan 25 2025") or ISO
    ("2025-01-25", optionally followed by a time part).

    Raises ValueError when the string matches neither.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()

    match = _ISO_DATE_RE.match(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return date(year, month, day)

    match = _DISPLAY_DATE_RE.match(text)
    if match:
        month_name, day, year = match.groups()
        month = _MONTH_LOOKUP.get(month_name[:3].lower())
        if month is None or (len(month_name) > 3 and not MONTHS[month - 1].lower().startswith(month_name.lower())):
            raise ValueError(f"Unknown month in date: {value!r}")
        return date(int(year), month, int(day))

    raise ValueError(f"Unrecognized date: {value!r}")


def format_time(value: time) -> str:
    """time(14, 5) -> "2:05 PM"."""
    suffix = "PM" if value.hour >= 12 else "AM"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {suffix}"


def format_time_range(start: time, end: Optional[time] = None) -> str:
    if end is not None:
        return f"{format_time(start)} - {format_time(end)}"
    return format_time(start)


def parse_time(value: Union[str, time]) -> time:
    """
    Parses "H:MM", "H:MM:SS" (24-hour) or "H:MM AM/PM" (12-hour).

    Raises ValueError for anything else, including out-of-range hours.
    """
    if isinstance(value, time):
        return value

    match = _TIME_RE.match(value.strip())
    if not match:
        raise ValueError(f"Unrecognized time: {value!r}")

    hours, minutes, seconds, meridiem = match.groups()
    hour = int(hours)
    minute = int(minutes)
    second = int(seconds) if seconds else 0

    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"Hour out of range for 12-hour time: {value!r}")
        if meridiem.upper() == "P" and hour != 12:
            hour += 12
        elif meridiem.upper() == "A" and hour == 12:
            hour = 0

    return time(hour, minute, second)


def parse_time_range(value: str) -> Tuple[time, Optional[time]]:
    """
    "10:00 AM - 12:00 PM" -> (time(10, 0), time(12, 0))
    "10:00 AM"            -> (time(10, 0), None)
    """
    parts = _RANGE_SPLIT_RE.split(value.strip(), maxsplit=1)
    start = parse_time(parts[0])
    end = parse_time(parts[1]) if len(parts) > 1 and parts[1] else None
    return start, end


def normalize_time_string(value: str) -> str:
    """Normalizes "H:MM" / "H:MM AM/PM" to 24-hour "HH:MM:SS"."""
    return parse_time(value).strftime("%H:%M:%S")


def format_iso_date(value: date) -> str:
    return value.isoformat()
