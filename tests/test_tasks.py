"""Tests for core task logic."""

from datetime import date

import pytest

from daybook.core.errors import MalformedTimestampError
from daybook.core.tasks import TaskScope, Todo, TodoStatus
from daybook.core.window import DayWindow


# Fixtures
@pytest.fixture
def today():
    return date(2026, 1, 15)


@pytest.fixture
def window(today):
    return DayWindow.for_date(today)


class TestTodo:
    def test_pending_by_default(self):
        assert Todo(id="1", title="Test").is_pending is True

    def test_completed(self):
        assert Todo(id="1", title="Test", status=TodoStatus.COMPLETED).is_pending is False

    def test_due_date(self):
        todo = Todo(id="1", title="Test", due_at="2026-01-20T17:00:00")
        assert todo.due_date() == date(2026, 1, 20)

    def test_due_date_none(self):
        assert Todo(id="1", title="Test").due_date() is None

    def test_days_until_due(self, today):
        todo = Todo(id="1", title="Test", due_at="2026-01-20T17:00:00")
        assert todo.days_until_due(today) == 5

    def test_days_until_due_overdue(self, today):
        todo = Todo(id="1", title="Test", due_at="2026-01-12")
        assert todo.days_until_due(today) == -3


class TestInScope:
    def test_all_scope_includes_undated(self, window):
        assert Todo(id="1", title="Test").in_scope(window, TaskScope.ALL) is True

    def test_all_scope_includes_other_days(self, window):
        todo = Todo(id="1", title="Test", due_at="2026-03-01T09:00:00")
        assert todo.in_scope(window, TaskScope.ALL) is True

    def test_due_scope_only_same_day(self, window):
        due_today = Todo(id="1", title="Today", due_at="2026-01-15T18:00:00")
        due_later = Todo(id="2", title="Later", due_at="2026-01-16T09:00:00")
        undated = Todo(id="3", title="Someday")
        assert due_today.in_scope(window, TaskScope.DUE) is True
        assert due_later.in_scope(window, TaskScope.DUE) is False
        assert undated.in_scope(window, TaskScope.DUE) is False

    @pytest.mark.parametrize("scope", list(TaskScope))
    def test_completed_never_in_scope(self, window, scope):
        todo = Todo(id="1", title="Done", due_at="2026-01-15T09:00:00", status=TodoStatus.COMPLETED)
        assert todo.in_scope(window, scope) is False

    @pytest.mark.parametrize("scope", list(TaskScope))
    def test_malformed_due_raises_in_any_scope(self, window, scope):
        todo = Todo(id="1", title="Broken", due_at="next week")
        with pytest.raises(MalformedTimestampError):
            todo.in_scope(window, scope)


class TestTodoFromRecord:
    def test_maps_columns(self):
        todo = Todo.from_record({
            "id": "t1",
            "title": "File taxes",
            "due_at": "2026-04-30T17:00:00",
            "status": "completed",
            "priority": 2,
            "tags": ["money"],
        })
        assert todo.status == TodoStatus.COMPLETED
        assert todo.priority == 2
        assert todo.tags == ["money"]

    def test_defaults(self):
        todo = Todo.from_record({"id": "t1", "title": "Call mom", "status": None, "tags": None})
        assert todo.status == TodoStatus.PENDING
        assert todo.due_at is None
        assert todo.tags == []

    def test_unknown_status_raises(self):
        with pytest.raises(ValueError):
            Todo.from_record({"id": "t1", "title": "X", "status": "archived"})
