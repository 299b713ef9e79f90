"""Tests for core calendar logic."""

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

import pytest

from daybook.core.calendar import Event
from daybook.core.errors import MalformedTimestampError
from daybook.core.window import DayWindow


# Fixtures
@pytest.fixture
def today():
    return date(2026, 1, 15)


@pytest.fixture
def make_event(today):
    """Factory for creating events."""
    def _make(title: str, start_hour: int, end_hour: int | None = None) -> Event:
        start = datetime.combine(today, time(start_hour, 0))
        end = datetime.combine(today, time(end_hour, 0)) if end_hour else None
        return Event(id=title.lower(), title=title, start_at=start, end_at=end)
    return _make


class TestEvent:
    def test_starts_within_day(self, make_event, today):
        assert make_event("Standup", 9, 10).starts_within(DayWindow.for_date(today)) is True

    def test_starts_on_other_day(self, make_event, today):
        tomorrow = date(2026, 1, 16)
        assert make_event("Standup", 9, 10).starts_within(DayWindow.for_date(tomorrow)) is False

    def test_starts_within_reference_zone(self):
        # 02:00 UTC on the 16th is the evening of the 15th in Toronto
        event = Event(id="e1", title="Late call", start_at="2026-01-16T02:00:00Z")
        window = DayWindow.for_date(date(2026, 1, 15), ZoneInfo("America/Toronto"))
        assert event.starts_within(window) is True

    def test_malformed_start_raises(self, today):
        event = Event(id="e1", title="Broken", start_at="tomorrow-ish")
        with pytest.raises(MalformedTimestampError):
            event.starts_within(DayWindow.for_date(today))


class TestEventFromRecord:
    def test_maps_columns(self):
        event = Event.from_record({
            "id": 7,
            "title": "Dentist",
            "start_at": "2026-01-15T10:00:00",
            "end_at": "2026-01-15T11:00:00",
            "location": "Main St",
            "notes": "bring forms",
        })
        assert event.id == "7"
        assert event.title == "Dentist"
        assert event.start_at == "2026-01-15T10:00:00"
        assert event.location == "Main St"
        assert event.notes == "bring forms"

    def test_null_optional_columns(self):
        event = Event.from_record({"id": "e1", "title": "X", "start_at": "2026-01-15", "location": None})
        assert event.end_at is None
        assert event.location == ""
        assert event.notes == ""

    def test_missing_id_raises(self):
        with pytest.raises(KeyError):
            Event.from_record({"title": "No id"})
