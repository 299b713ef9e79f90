"""Pure calendar domain logic - no I/O dependencies."""

from dataclasses import dataclass

from .window import DayWindow, Timestamp


@dataclass
class Event:
    """A single-occurrence calendar event."""

    id: str
    title: str
    start_at: Timestamp
    end_at: Timestamp | None = None
    location: str = ""
    notes: str = ""

    def starts_within(self, window: DayWindow) -> bool:
        """Check if the event starts inside a day window."""
        return window.contains(self.start_at)

    @classmethod
    def from_record(cls, data: dict) -> "Event":
        """Create Event from a storage row (timestamps left unparsed)."""
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            start_at=data.get("start_at"),
            end_at=data.get("end_at"),
            location=data.get("location") or "",
            notes=data.get("notes") or "",
        )

