"""
Calendar matching for the events page: which events fall on a day and
which weekly programs meet on it.
"""
import logging
from datetime import date
from typing import Iterable, List

from kcssc.services.formatting import parse_display_date
from kcssc.services.schedule import Recurrence

logger = logging.getLogger(__name__)


def _event_date(event):
    value = getattr(event, "date", None)
    if isinstance(value, date):
        return value
    try:
        return parse_display_date(value)
    except ValueError:
        logger.debug(f"Unparseable event date {value!r}, skipping")
        return None


def events_on_date(events: Iterable, day: date) -> List:
    """Events whose display date ("January 25, 2025" or ISO) is `day`. Unparseable dates never match."""
    return [e for e in events if _event_date(e) == day]


def program_recurrence(program) -> Recurrence:
    """The stored recurrence when the program carries one, else parsed from its schedule text."""
    recurrence = getattr(program, "recurrence", None)
    if isinstance(recurrence, Recurrence):
        return recurrence
    return Recurrence.parse(getattr(program, "schedule", "") or "")


def program_occurrences_in_month(program, year: int, month: int) -> List[date]:
    """
    Dates in `month` the program meets on; empty when its schedule names no weekday.

    Months are 1-12 like `datetime.date`; 0 or 13 raise ValueError.
    """
    return program_recurrence(program).dates_in_month(year, month)


def programs_on_date(programs: Iterable, day: date) -> List:
    return [p for p in programs if program_recurrence(p).occurs_on(day)]
