from datetime import date, time

import pytest

from kcssc.services.schedule import Recurrence, parse_weekdays


@pytest.mark.parametrize("text,expected", [
    ("Tuesdays, 10:00 AM - 12:00 PM", {1}),
    ("Mon/Wed/Fri, 9:00 AM - 10:00 AM", {0, 2, 4}),
    ("Tuesdays/Thursdays, 11:00 AM - 12:00 PM", {1, 3}),
    ("tues & thurs", {1, 3}),
    ("SATURDAY", {5}),
    ("Sun", {6}),
    ("Open enrollment", set()),
])
def test_parse_weekdays(text, expected):
    assert parse_weekdays(text) == frozenset(expected)


def test_parse_weekdays_needs_word_boundaries():
    # "sun" inside "sunset", "mon" inside "month", "wed" inside "wedding"
    assert parse_weekdays("Sunset walk every month after the wedding") == frozenset()


def test_recurrence_parse_reads_times():
    recurrence = Recurrence.parse("Mon/Wed/Fri, 9:00 AM - 10:00 AM")
    assert recurrence.weekdays == frozenset({0, 2, 4})
    assert recurrence.start == time(9)
    assert recurrence.end == time(10)


def test_recurrence_parse_without_times():
    recurrence = Recurrence.parse("Wednesdays")
    assert recurrence.weekdays == frozenset({2})
    assert recurrence.start is None
    assert recurrence.end is None


@pytest.mark.parametrize("text", [
    "Tuesdays, 10:00 AM - 12:00 PM",
    "Mon/Wed/Fri, 9:00 AM - 10:00 AM",
    "Tuesdays/Thursdays, 11:00 AM - 12:00 PM",
])
def test_render_gives_back_canonical_text(text):
    assert Recurrence.parse(text).render() == text


def test_storage_round_trip():
    recurrence = Recurrence.parse("Tuesdays/Thursdays, 11:00 AM - 12:00 PM")
    assert recurrence.storage_days() == "1,3"
    restored = Recurrence.from_storage("1,3", recurrence.start, recurrence.end)
    assert restored == recurrence


def test_dates_in_month():
    tuesdays = Recurrence.parse("Tuesdays").dates_in_month(2025, 1)
    assert tuesdays == [date(2025, 1, 7), date(2025, 1, 14), date(2025, 1, 21), date(2025, 1, 28)]


def test_dates_in_month_empty_without_weekdays():
    assert Recurrence.parse("By appointment").dates_in_month(2025, 1) == []


def test_occurs_on():
    recurrence = Recurrence.parse("Saturdays, 11:00 AM - 1:00 PM")
    assert recurrence.occurs_on(date(2025, 1, 25))
    assert not recurrence.occurs_on(date(2025, 1, 26))
