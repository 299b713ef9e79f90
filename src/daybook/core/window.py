"""Day windows and timestamp handling - pure, no I/O."""

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo

from .errors import MalformedTimestampError

END_OF_DAY = time(23, 59, 59, 999000)

Timestamp = datetime | date | str


def parse_timestamp(value: Timestamp) -> datetime:
    """
    Read a timestamp field as a datetime.

    Accepts datetime/date objects or ISO-8601 strings (a trailing ``Z`` is
    fine). A date-only value means midnight of that date.

    Raises:
        MalformedTimestampError: if the value is empty or not a valid instant.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        raise MalformedTimestampError(f"not a timestamp: {value!r}")
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise MalformedTimestampError(f"not a timestamp: {value!r}") from e


def is_date_only(value: Timestamp) -> bool:
    """True for a plain date or a YYYY-MM-DD string (no time-of-day part)."""
    if isinstance(value, datetime):
        return False
    if isinstance(value, date):
        return True
    return isinstance(value, str) and len(value.strip()) == 10


def localize(dt: datetime, tz: tzinfo | None) -> datetime:
    """
    Express dt as wall-clock time in the reference calendar.

    Naive values are taken to already be wall-clock time in tz. With no tz
    the reference calendar is the host's local time, kept naive.

    Raises:
        MalformedTimestampError: if the instant falls outside the datetime
            range once converted.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz) if tz else dt
    try:
        if tz is None:
            return dt.astimezone().replace(tzinfo=None)
        return dt.astimezone(tz)
    except OverflowError as e:
        raise MalformedTimestampError(f"out of range in reference calendar: {dt.isoformat()}") from e


@dataclass(frozen=True)
class DayWindow:
    """One calendar date: [00:00:00, 23:59:59.999], inclusive on both ends."""

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"window starts after it ends: {self.start} > {self.end}")
        if self.start.date() != self.end.date():
            raise ValueError(f"window spans more than one date: {self.start} to {self.end}")

    @classmethod
    def for_date(cls, day: date, tz: tzinfo | None = None) -> "DayWindow":
        """Build the window for a date in the reference time zone."""
        if isinstance(day, datetime):
            day = localize(day, tz).date()
        return cls(
            start=datetime.combine(day, time.min, tzinfo=tz),
            end=datetime.combine(day, END_OF_DAY, tzinfo=tz),
        )

    @property
    def day(self) -> date:
        return self.start.date()

    @property
    def tzinfo(self) -> tzinfo | None:
        return self.start.tzinfo

    def localize(self, value: Timestamp) -> datetime:
        """Parse a timestamp field and bring it into this window's calendar."""
        return localize(parse_timestamp(value), self.tzinfo)

    def contains(self, value: Timestamp) -> bool:
        """Check if a timestamp falls within this window."""
        return self.start <= self.localize(value) <= self.end

    def contains_date(self, d: date) -> bool:
        """Day-granularity membership check."""
        return d == self.day
