"""File-based record store adapter."""

import json
import logging
from pathlib import Path
from typing import Callable, TypeVar

from daybook.core.calendar import Event
from daybook.core.reminders import Reminder
from daybook.core.tasks import Todo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonRecordStore:
    """
    JSON file record storage.

    Implements RecordSource protocol. The file holds one object with
    "reminders", "events" and "todos" arrays of storage rows.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self._data: dict | None = None

    def _load(self) -> dict:
        """Read the whole file once. Returns {} if missing or unreadable."""
        if self._data is None:
            self._data = self._read()
        return self._data

    def _read(self) -> dict:
        if not self.path.exists():
            logger.warning(f"Record file not found: {self.path}")
            return {}
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse record file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Record file {self.path} is not a JSON object")
            return {}
        return data

    def _rows(self, key: str, parse: Callable[[dict], T]) -> list[T]:
        records = []
        for row in self._load().get(key) or []:
            try:
                records.append(parse(row))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed {key} row in {self.path}: {e!r}")
                continue
        return records

    def fetch_reminders(self) -> list[Reminder]:
        """Fetch all reminders."""
        return self._rows("reminders", Reminder.from_record)

    def fetch_events(self) -> list[Event]:
        """Fetch all events."""
        return self._rows("events", Event.from_record)

    def fetch_todos(self) -> list[Todo]:
        """Fetch all todos."""
        return self._rows("todos", Todo.from_record)
