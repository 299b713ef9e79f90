"""Pure reminder domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime

from .recurrence import NO_REPEAT, NoRepeat, RepeatRule, occurrence_on, parse_repeat_rule
from .window import DayWindow, Timestamp


def _is_true(value) -> bool:
    """Read a storage flag; "false", 0 and null are all False."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return value is True or value == 1


@dataclass
class Reminder:
    """A reminder, one-off or repeating from its anchor time."""

    id: str
    title: str
    anchor_time: Timestamp
    repeat_rule: RepeatRule = NO_REPEAT
    is_completed: bool = False
    linked_event_id: str | None = None

    @property
    def is_repeating(self) -> bool:
        return self.repeat_rule is not None and not isinstance(self.repeat_rule, NoRepeat)

    def repeat_description(self) -> str | None:
        """Repeat summary such as "Daily", or None for one-off reminders."""
        return self.repeat_rule.describe() if self.is_repeating else None

    def occurrence_on(self, window: DayWindow) -> datetime | None:
        """This reminder's occurrence inside a day window, if any."""
        return occurrence_on(self.anchor_time, self.repeat_rule, window)

    @classmethod
    def from_record(cls, data: dict) -> "Reminder":
        """Create Reminder from a storage row (timestamps left unparsed)."""
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            anchor_time=data.get("remind_at"),
            repeat_rule=parse_repeat_rule(data),
            is_completed=_is_true(data.get("is_completed")),
            linked_event_id=data.get("event_id"),
        )


def filter_active(reminders: list[Reminder]) -> list[Reminder]:
    """Drop completed reminders."""
    return [r for r in reminders if not r.is_completed]
