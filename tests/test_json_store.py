"""Tests for the JSON record store adapter."""

import json
import logging

import pytest

from daybook.adapters.json_store import JsonRecordStore
from daybook.core.recurrence import NO_REPEAT, Repeat
from daybook.core.tasks import TodoStatus


@pytest.fixture
def records():
    return {
        "reminders": [
            {
                "id": "r1",
                "title": "Water plants",
                "remind_at": "2026-01-01T08:00:00",
                "repeat_type": "weekly",
                "repeat_interval": 2,
                "repeat_end_date": None,
                "repeat_count": None,
                "event_id": None,
                "is_completed": False,
            },
            {"id": "r2", "title": "One-off", "remind_at": "2026-01-05T09:00:00"},
            {"title": "No id"},
        ],
        "events": [
            {"id": "e1", "title": "Standup", "start_at": "2026-01-05T09:30:00", "location": "Zoom"},
        ],
        "todos": [
            {"id": "t1", "title": "Taxes", "status": "pending", "due_at": "2026-04-30"},
            {"id": "t2", "title": "Archived", "status": "archived"},
            "not a row",
        ],
    }


@pytest.fixture
def store(tmp_path, records):
    path = tmp_path / "records.json"
    path.write_text(json.dumps(records))
    return JsonRecordStore(path)


class TestJsonRecordStore:
    def test_fetch_reminders(self, store):
        reminders = store.fetch_reminders()
        assert [r.id for r in reminders] == ["r1", "r2"]
        assert reminders[0].repeat_rule == Repeat("weekly", interval=2)
        assert reminders[1].repeat_rule is NO_REPEAT

    def test_fetch_events(self, store):
        events = store.fetch_events()
        assert len(events) == 1
        assert events[0].location == "Zoom"

    def test_fetch_todos_skips_bad_rows(self, store):
        todos = store.fetch_todos()
        assert [t.id for t in todos] == ["t1"]
        assert todos[0].status == TodoStatus.PENDING

    def test_missing_file(self, tmp_path):
        store = JsonRecordStore(tmp_path / "missing.json")
        assert store.fetch_reminders() == []
        assert store.fetch_events() == []
        assert store.fetch_todos() == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text("{not json")
        assert JsonRecordStore(path).fetch_events() == []

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text("[]")
        assert JsonRecordStore(path).fetch_todos() == []

    def test_missing_section(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({"events": None}))
        store = JsonRecordStore(path)
        assert store.fetch_events() == []
        assert store.fetch_reminders() == []

    def test_expands_user(self):
        store = JsonRecordStore("~/records.json")
        assert "~" not in str(store.path)

    def test_file_read_once(self, store):
        assert [r.id for r in store.fetch_reminders()] == ["r1", "r2"]
        store.path.unlink()
        assert [e.id for e in store.fetch_events()] == ["e1"]
        assert [t.id for t in store.fetch_todos()] == ["t1"]

    def test_skipped_rows_logged_as_warnings(self, store, caplog):
        with caplog.at_level(logging.WARNING, logger="daybook.adapters.json_store"):
            store.fetch_todos()
        skipped = [r for r in caplog.records if "Skipping malformed todos row" in r.getMessage()]
        assert len(skipped) == 2
        assert all(r.levelno == logging.WARNING for r in skipped)
