"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, tzinfo
from enum import Enum

from .window import DayWindow, Timestamp, localize, parse_timestamp


class TodoStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class TaskScope(Enum):
    """Which pending todos a day surfaces."""

    ALL = "all"  # Every pending todo, whatever its due date
    DUE = "due"  # Only pending todos due within the day


@dataclass
class Todo:
    """A todo item."""

    id: str
    title: str
    due_at: Timestamp | None = None
    status: TodoStatus = TodoStatus.PENDING
    priority: int | None = None
    tags: list[str] = field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return self.status == TodoStatus.PENDING

    def due_date(self, tz: tzinfo | None = None) -> date | None:
        """Calendar date the todo is due, or None if undated."""
        if not self.due_at:
            return None
        return localize(parse_timestamp(self.due_at), tz).date()

    def days_until_due(self, as_of: date, tz: tzinfo | None = None) -> int | None:
        """Days until due date (negative if overdue)."""
        due = self.due_date(tz)
        if due is None:
            return None
        return (due - as_of).days

    def in_scope(self, window: DayWindow, scope: TaskScope) -> bool:
        """
        Check if this todo belongs in a day's task list.

        A set due_at is always parsed, so a malformed one raises
        MalformedTimestampError in either scope.
        """
        if not self.is_pending:
            return False
        if self.due_at:
            due_in_window = window.contains(self.due_at)
        else:
            due_in_window = False
        return scope == TaskScope.ALL or due_in_window

    @classmethod
    def from_record(cls, data: dict) -> "Todo":
        """Create Todo from a storage row (timestamps left unparsed)."""
        status = data.get("status") or TodoStatus.PENDING.value
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            due_at=data.get("due_at"),
            status=TodoStatus(status),
            priority=data.get("priority"),
            tags=list(data.get("tags") or []),
        )

