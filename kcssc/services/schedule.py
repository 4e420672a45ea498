import calendar
import re
from dataclasses import dataclass
from datetime import date, time
from typing import FrozenSet, List, Optional

from kcssc.services.formatting import format_time_range, parse_time

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_WEEKDAY_TOKENS = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tues": 1, "tue": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thurs": 3, "thur": 3, "thu": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

# longest alternatives first so "tuesday" wins over "tue"
_WEEKDAY_RE = re.compile(
    r"\b(" + "|".join(sorted(_WEEKDAY_TOKENS, key=len, reverse=True)) + r")s?\b",
    re.IGNORECASE,
)
_TIME_RE = re.compile(r"\d{1,2}:\d{2}(?:\s*[AaPp]\.?[Mm]\.?)?")


def parse_weekdays(text: str) -> FrozenSet[int]:
    """Weekday numbers (Monday=0) named in free text, e.g. "Mon/Wed/Fri" -> {0, 2, 4}."""
    return frozenset(_WEEKDAY_TOKENS[m.group(1).lower()] for m in _WEEKDAY_RE.finditer(text or ""))


@dataclass(frozen=True)
class Recurrence:
    """Weekly recurrence of a program: the weekdays it meets on and its time slot."""

    weekdays: FrozenSet[int]
    start: Optional[time] = None
    end: Optional[time] = None

    @classmethod
    def parse(cls, text: str) -> "Recurrence":
        times = []
        for token in _TIME_RE.findall(text or ""):
            try:
                times.append(parse_time(token))
            except ValueError:
                continue
        start = times[0] if times else None
        end = times[1] if len(times) > 1 else None
        return cls(weekdays=parse_weekdays(text), start=start, end=end)

    @classmethod
    def from_storage(cls, days: Optional[str], start: Optional[time] = None, end: Optional[time] = None) -> "Recurrence":
        weekdays = frozenset(int(d) for d in (days or "").split(",") if d.strip().isdigit())
        return cls(weekdays=weekdays, start=start, end=end)

    def storage_days(self) -> str:
        return ",".join(str(d) for d in sorted(self.weekdays))

    def occurs_on(self, day: date) -> bool:
        return day.weekday() in self.weekdays

    def dates_in_month(self, year: int, month: int) -> List[date]:
        """Month is 1-12 (January=1); anything else raises ValueError."""
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be 1-12, got {month}")
        if not self.weekdays:
            return []
        _, days_in_month = calendar.monthrange(year, month)
        return [
            date(year, month, d)
            for d in range(1, days_in_month + 1)
            if date(year, month, d).weekday() in self.weekdays
        ]

    def render(self) -> str:
        """
        {1}, 10:00-12:00        -> "Tuesdays, 10:00 AM - 12:00 PM"
        {1, 3}                  -> "Tuesdays/Thursdays"
        {0, 2, 4}, 9:00-10:00   -> "Mon/Wed/Fri, 9:00 AM - 10:00 AM"
        """
        days = sorted(self.weekdays)
        if len(days) <= 2:
            day_text = "/".join(f"{WEEKDAY_NAMES[d]}s" for d in days)
        else:
            day_text = "/".join(WEEKDAY_NAMES[d][:3] for d in days)

        if self.start is None:
            return day_text
        time_text = format_time_range(self.start, self.end)
        return f"{day_text}, {time_text}" if day_text else time_text
