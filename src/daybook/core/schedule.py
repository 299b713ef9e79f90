"""Pure daily schedule assembly logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum

from .calendar import Event
from .errors import Diagnostic, ScheduleError
from .reminders import Reminder, filter_active
from .tasks import TaskScope, Todo
from .window import DayWindow


class ScheduleItemKind(Enum):
    EVENT = "event"
    REMINDER = "reminder"


@dataclass
class ScheduleItem:
    """An event or reminder occurrence, normalized for a day's timeline."""

    id: str
    kind: ScheduleItemKind
    title: str
    time: datetime
    end_time: datetime | None = None
    location: str | None = None
    notes: str | None = None
    repeat: str | None = None

    def format_time(self) -> str:
        return self.time.strftime("%H:%M")


@dataclass
class DaySchedule:
    """Assembled day data ready for formatting."""

    date: date
    schedule: list[ScheduleItem]
    tasks: list[Todo]
    diagnostics: list[Diagnostic]


def _event_item(event: Event, window: DayWindow) -> ScheduleItem:
    return ScheduleItem(
        id=event.id,
        kind=ScheduleItemKind.EVENT,
        title=event.title,
        time=window.localize(event.start_at),
        end_time=window.localize(event.end_at) if event.end_at else None,
        location=event.location,
        notes=event.notes,
    )


def _reminder_item(reminder: Reminder, occurrence: datetime) -> ScheduleItem:
    return ScheduleItem(
        id=reminder.id,
        kind=ScheduleItemKind.REMINDER,
        title=reminder.title,
        time=occurrence,
        repeat=reminder.repeat_description(),
    )


def build_day(
    target_date: date,
    events: list[Event],
    reminders: list[Reminder],
    todos: list[Todo],
    tz: tzinfo | None = None,
    task_scope: TaskScope = TaskScope.ALL,
) -> DaySchedule:
    """
    Assemble one day's schedule and task list.

    Pure function - no I/O. Same-day events and the day's occurrences of
    active reminders are merged into one timeline sorted by time. The sort
    is stable and events are emitted first, so at equal times events come
    before reminders and each keeps its input order.

    A record with a malformed timestamp or repeat rule is left out and
    reported in `diagnostics`; the rest of the day is still built.
    """
    window = DayWindow.for_date(target_date, tz)
    diagnostics: list[Diagnostic] = []
    items: list[ScheduleItem] = []

    for event in events:
        try:
            if event.starts_within(window):
                items.append(_event_item(event, window))
        except ScheduleError as e:
            diagnostics.append(Diagnostic.from_error("event", event.id, e))

    for reminder in filter_active(reminders):
        try:
            occurrence = reminder.occurrence_on(window)
            if occurrence is not None:
                items.append(_reminder_item(reminder, occurrence))
        except ScheduleError as e:
            diagnostics.append(Diagnostic.from_error("reminder", reminder.id, e))

    tasks: list[Todo] = []
    for todo in todos:
        try:
            if todo.in_scope(window, task_scope):
                tasks.append(todo)
        except ScheduleError as e:
            diagnostics.append(Diagnostic.from_error("todo", todo.id, e))

    return DaySchedule(
        date=window.day,
        schedule=sorted(items, key=lambda item: item.time),
        tasks=tasks,
        diagnostics=diagnostics,
    )


def format_item_line(item: ScheduleItem) -> str:
    """
    Format a single schedule item for display.

    Pure function - no I/O.
    """
    end_str = f" - {item.end_time.strftime('%H:%M')}" if item.end_time else ""
    label = "Reminder: " if item.kind == ScheduleItemKind.REMINDER else ""
    location = f" @ {item.location}" if item.location else ""
    repeat = f" ({item.repeat})" if item.repeat else ""
    return f"- {item.format_time()}{end_str} {label}{item.title}{location}{repeat}"


def format_task_line(todo: Todo, as_of: date, tz: tzinfo | None = None) -> str:
    """
    Format a single pending todo for display.

    Pure function - no I/O.
    """
    days = todo.days_until_due(as_of, tz)

    if days is None:
        urgency = "no due date"
    elif days < 0:
        urgency = f"OVERDUE by {-days}d"
    elif days == 0:
        urgency = "due TODAY"
    else:
        urgency = f"due in {days}d"

    priority = f"[P{todo.priority}] " if todo.priority else ""
    tags = "".join(f" #{tag}" for tag in todo.tags)
    return f"- {priority}{todo.title} ({urgency}){tags}"


def format_day_sections(day: DaySchedule, tz: tzinfo | None = None) -> dict[str, str]:
    """
    Format day data into markdown sections.

    Pure function - no I/O.
    Returns dict with keys: schedule, tasks, diagnostics
    """
    schedule_md = "\n".join(format_item_line(i) for i in day.schedule) or "Nothing scheduled."
    tasks_md = "\n".join(format_task_line(t, day.date, tz) for t in day.tasks) or "No pending tasks."
    diagnostics_md = "\n".join(f"- {d.format()}" for d in day.diagnostics)

    return {
        "schedule": schedule_md,
        "tasks": tasks_md,
        "diagnostics": diagnostics_md,
    }
