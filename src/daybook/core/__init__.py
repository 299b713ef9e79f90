"""Functional core - pure business logic with no I/O."""

from .errors import Diagnostic, DiagnosticKind, InvalidRuleError, MalformedTimestampError, ScheduleError
from .window import DayWindow, parse_timestamp
from .recurrence import (
    NO_REPEAT,
    NoRepeat,
    Repeat,
    RepeatKind,
    RepeatRule,
    iter_occurrences,
    occurrence_on,
    occurs_on,
)
from .reminders import Reminder
from .calendar import Event
from .tasks import TaskScope, Todo, TodoStatus
from .schedule import DaySchedule, ScheduleItem, ScheduleItemKind, build_day, format_day_sections

__all__ = [
    # Errors
    "Diagnostic",
    "DiagnosticKind",
    "InvalidRuleError",
    "MalformedTimestampError",
    "ScheduleError",
    # Windows
    "DayWindow",
    "parse_timestamp",
    # Recurrence
    "NO_REPEAT",
    "NoRepeat",
    "Repeat",
    "RepeatKind",
    "RepeatRule",
    "iter_occurrences",
    "occurrence_on",
    "occurs_on",
    # Records
    "Reminder",
    "Event",
    "Todo",
    "TodoStatus",
    "TaskScope",
    # Schedule
    "DaySchedule",
    "ScheduleItem",
    "ScheduleItemKind",
    "build_day",
    "format_day_sections",
]
