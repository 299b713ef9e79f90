"""Daybook CLI - daily schedule from reminders, events and todos."""

import json
import logging
import sys
from datetime import date

import click

from .config import Config, ConfigError, load_config
from .core.errors import ScheduleError
from .core.schedule import DaySchedule, ScheduleItem, format_day_sections
from .core.tasks import Todo
from .workflows import compile_day, compile_week, resolve_today, upcoming_occurrences


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Daybook - daily schedule CLI."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


def _parse_date(value: str | None, config: Config) -> date:
    if not value:
        return resolve_today(config)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM-DD date", param_hint="--date")


def _serialize_item(item: ScheduleItem) -> dict:
    return {
        "id": item.id,
        "kind": item.kind.value,
        "title": item.title,
        "time": item.time.isoformat(),
        "end_time": item.end_time.isoformat() if item.end_time else None,
        "location": item.location,
        "notes": item.notes,
        "repeat": item.repeat,
    }


def _serialize_todo(todo: Todo) -> dict:
    return {
        "id": todo.id,
        "title": todo.title,
        "due_at": str(todo.due_at) if todo.due_at else None,
        "status": todo.status.value,
        "priority": todo.priority,
        "tags": todo.tags,
    }


def _serialize_day(day: DaySchedule) -> dict:
    return {
        "date": day.date.isoformat(),
        "schedule": [_serialize_item(i) for i in day.schedule],
        "tasks": [_serialize_todo(t) for t in day.tasks],
        "diagnostics": [
            {
                "record_type": d.record_type,
                "record_id": d.record_id,
                "kind": d.kind.value,
                "reason": d.reason,
            }
            for d in day.diagnostics
        ],
    }


def _show_day(day: DaySchedule, tz) -> None:
    sections = format_day_sections(day, tz)
    click.echo(f"### {day.date.strftime('%A, %B %d')}")
    click.echo(f"\nSchedule:\n{sections['schedule']}")
    click.echo(f"\nTasks:\n{sections['tasks']}")
    if sections["diagnostics"]:
        click.echo(f"\nSkipped records:\n{sections['diagnostics']}", err=True)


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def day(target_date: str | None, as_json: bool):
    """Show a day's schedule and pending tasks."""
    try:
        config = load_config()
        target = _parse_date(target_date, config)
        result = compile_day(config, target)
        tz = config.tzinfo()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(_serialize_day(result), indent=2))
    else:
        _show_day(result, tz)


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="First day of the week (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def week(target_date: str | None, as_json: bool):
    """Show seven consecutive days."""
    try:
        config = load_config()
        start = _parse_date(target_date, config)
        days = compile_week(config, start)
        tz = config.tzinfo()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([_serialize_day(d) for d in days], indent=2))
        return

    for i, result in enumerate(days):
        if i:
            click.echo()
        _show_day(result, tz)


@main.command()
@click.argument("reminder_id")
@click.option("--days", default=30, show_default=True, help="How many days ahead to list")
@click.option("--date", "-d", "target_date", default=None,
              help="Start date (YYYY-MM-DD), defaults to today")
def upcoming(reminder_id: str, days: int, target_date: str | None):
    """List a reminder's upcoming occurrences."""
    try:
        config = load_config()
        start = _parse_date(target_date, config)
        found = upcoming_occurrences(config, reminder_id, start, days)
        if found is not None:
            reminder, occurrences = found
            repeat = reminder.repeat_description() or "Once"
    except (ConfigError, ScheduleError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if found is None:
        click.echo(f"Error: no reminder with id {reminder_id!r}", err=True)
        sys.exit(1)

    click.echo(f"{reminder.title} ({repeat})")
    if not occurrences:
        click.echo(f"No occurrences in the next {days} days.")
        return

    for occurrence in occurrences:
        click.echo(f"  {occurrence.strftime('%a %Y-%m-%d %H:%M')}")
