"""Record source interface."""

from typing import Protocol

from daybook.core.calendar import Event
from daybook.core.reminders import Reminder
from daybook.core.tasks import Todo


class RecordSource(Protocol):
    """Interface for fetching a user's reminders, events and todos."""

    def fetch_reminders(self) -> list[Reminder]:
        """Fetch all reminders."""
        ...

    def fetch_events(self) -> list[Event]:
        """Fetch events (all of them, or any superset of the days asked for)."""
        ...

    def fetch_todos(self) -> list[Todo]:
        """Fetch todos."""
        ...
