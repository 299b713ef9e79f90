"""Shared workflow layer between the CLI and the record store.

Each compile_* function fetches records through a RecordSource, runs the
pure core over them, and logs what the core reported.
"""

import logging
from datetime import date, datetime, timedelta

from .adapters.json_store import JsonRecordStore
from .config import Config
from .core.recurrence import iter_occurrences
from .core.reminders import Reminder
from .core.schedule import DaySchedule, build_day
from .core.window import DayWindow
from .ports.record_source import RecordSource

logger = logging.getLogger(__name__)


def get_store(config: Config) -> JsonRecordStore:
    """Resolve the record store from config."""
    return JsonRecordStore(config.data_path())


def resolve_today(config: Config) -> date:
    """Today's date in the configured time zone."""
    return datetime.now(config.tzinfo()).date()


def _build(config: Config, target_date: date, events, reminders, todos) -> DaySchedule:
    day = build_day(
        target_date,
        events=events,
        reminders=reminders,
        todos=todos,
        tz=config.tzinfo(),
        task_scope=config.task_scope,
    )
    for diagnostic in day.diagnostics:
        logger.warning(f"Excluded from {day.date.isoformat()}: {diagnostic.format()}")
    return day


def compile_day(
    config: Config,
    target_date: date,
    source: RecordSource | None = None,
) -> DaySchedule:
    """Fetch records and assemble one day."""
    source = source or get_store(config)
    return _build(
        config,
        target_date,
        source.fetch_events(),
        source.fetch_reminders(),
        source.fetch_todos(),
    )


def compile_week(
    config: Config,
    start_date: date,
    source: RecordSource | None = None,
    days: int = 7,
) -> list[DaySchedule]:
    """Fetch records once and assemble `days` consecutive days."""
    source = source or get_store(config)
    events = source.fetch_events()
    reminders = source.fetch_reminders()
    todos = source.fetch_todos()
    return [
        _build(config, start_date + timedelta(days=offset), events, reminders, todos)
        for offset in range(days)
    ]


def upcoming_occurrences(
    config: Config,
    reminder_id: str,
    start_date: date,
    days: int = 30,
    source: RecordSource | None = None,
) -> tuple[Reminder, list[datetime]] | None:
    """
    List a reminder's occurrences over `days` days from start_date.

    Returns the reminder with its occurrences, or None if no reminder has
    that id. Raises ScheduleError if its rule or timestamps are malformed.
    """
    source = source or get_store(config)
    reminder = next((r for r in source.fetch_reminders() if r.id == reminder_id), None)
    if reminder is None:
        return None

    tz = config.tzinfo()
    first = DayWindow.for_date(start_date, tz)
    last = DayWindow.for_date(start_date + timedelta(days=max(days, 1) - 1), tz)
    occurrences = list(
        iter_occurrences(
            reminder.anchor_time,
            reminder.repeat_rule,
            until=last.end,
            since=first.start,
            tz=tz,
        )
    )
    return reminder, occurrences
