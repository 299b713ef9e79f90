"""Pure recurrence expansion logic - no I/O dependencies.

A repeating reminder's k-th occurrence is ``anchor + k * interval`` units of
its kind. Months and years use calendar arithmetic with end-of-month
clamping (Jan 31 + 1 month = Feb 28), always measured from the anchor so
the clamping never drifts into later occurrences.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Iterator

from dateutil.relativedelta import relativedelta

from .errors import InvalidRuleError
from .window import END_OF_DAY, DayWindow, Timestamp, is_date_only, localize, parse_timestamp


class RepeatKind(Enum):
    """Calendar unit a repeat rule steps by."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


_UNITS = {
    RepeatKind.DAILY: "day",
    RepeatKind.WEEKLY: "week",
    RepeatKind.MONTHLY: "month",
    RepeatKind.YEARLY: "year",
}


@dataclass(frozen=True)
class NoRepeat:
    """A one-off reminder: its only occurrence is the anchor time."""


NO_REPEAT = NoRepeat()


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass(frozen=True)
class Repeat:
    """Repeat every `interval` units of `kind`, optionally bounded."""

    kind: RepeatKind | str
    interval: int = 1
    end_date: Timestamp | None = None
    count: int | None = None

    def validate(self) -> "Repeat":
        """
        Check the rule and return it with `kind` as a RepeatKind.

        Raises:
            InvalidRuleError: unknown kind, interval < 1, or count < 1.
        """
        kind = self.kind
        if not isinstance(kind, RepeatKind):
            try:
                kind = RepeatKind(str(kind).lower())
            except ValueError:
                raise InvalidRuleError(f"unknown repeat kind {self.kind!r}") from None
        if not _is_positive_int(self.interval):
            raise InvalidRuleError(f"interval must be >= 1, got {self.interval!r}")
        if self.count is not None and not _is_positive_int(self.count):
            raise InvalidRuleError(f"count must be >= 1, got {self.count!r}")
        return replace(self, kind=kind)

    def end_bound(self, tz: tzinfo | None = None) -> datetime | None:
        """
        Latest instant an occurrence may fall on, in the reference calendar.

        A date-only end date covers that whole day; a full timestamp is an
        instant bound.
        """
        if self.end_date is None:
            return None
        end = parse_timestamp(self.end_date)
        if is_date_only(self.end_date):
            return datetime.combine(end.date(), END_OF_DAY, tzinfo=tz)
        return localize(end, tz)

    def describe(self) -> str:
        """
        Human-readable summary, e.g. "Daily" or "Every 2 weeks until 2026-03-31".

        Raises:
            InvalidRuleError: if the rule is malformed
            MalformedTimestampError: if the end date can't be parsed
        """
        rule = self.validate()
        unit = _UNITS[rule.kind]
        if rule.interval == 1:
            desc = rule.kind.value.capitalize()
        else:
            desc = f"Every {rule.interval} {unit}s"
        if rule.count is not None:
            desc += f", {rule.count} times"
        if rule.end_date is not None:
            end = parse_timestamp(rule.end_date)
            until = end.date().isoformat() if is_date_only(rule.end_date) else end.strftime("%Y-%m-%d %H:%M")
            desc += f" until {until}"
        return desc


RepeatRule = NoRepeat | Repeat


def parse_repeat_rule(row: dict) -> RepeatRule:
    """Build a repeat rule from a reminder row's repeat_* columns."""
    kind = row.get("repeat_type")
    if not kind:
        return NO_REPEAT
    interval = row.get("repeat_interval")
    return Repeat(
        kind=kind,
        interval=1 if interval is None else interval,
        end_date=row.get("repeat_end_date"),
        count=row.get("repeat_count"),
    )


def _step(kind: RepeatKind, units: int) -> timedelta | relativedelta:
    match kind:
        case RepeatKind.DAILY:
            return timedelta(days=units)
        case RepeatKind.WEEKLY:
            return timedelta(weeks=units)
        case RepeatKind.MONTHLY:
            return relativedelta(months=units)
        case RepeatKind.YEARLY:
            return relativedelta(years=units)


def occurrence_at(anchor: datetime, rule: Repeat, index: int) -> datetime:
    """The index-th occurrence (0 = the anchor itself) of a validated rule."""
    return anchor + _step(rule.kind, index * rule.interval)


def _candidate_index(anchor: datetime, window: DayWindow, rule: Repeat) -> int | None:
    """Index of the only occurrence that can land on the window's date, if any."""
    day = window.day
    start = anchor.date()
    per = rule.interval
    match rule.kind:
        case RepeatKind.DAILY:
            units = (day - start).days
        case RepeatKind.WEEKLY:
            units = (day - start).days
            per = 7 * rule.interval
        case RepeatKind.MONTHLY:
            units = (day.year - start.year) * 12 + (day.month - start.month)
        case RepeatKind.YEARLY:
            units = day.year - start.year

    if units < 0 or units % per:
        return None
    return units // per


def occurrence_on(
    anchor_time: Timestamp,
    repeat_rule: RepeatRule | None,
    window: DayWindow,
) -> datetime | None:
    """
    Find the occurrence of a reminder inside a day window.

    Pure function - no I/O.

    Args:
        anchor_time: First/reference occurrence of the reminder
        repeat_rule: NoRepeat (or None) for one-off reminders, else a Repeat
        window: The day to check

    Returns:
        The occurrence instant (in the window's calendar), or None

    Raises:
        InvalidRuleError: if the rule is malformed
        MalformedTimestampError: if the anchor or end date can't be parsed
    """
    anchor = window.localize(anchor_time)

    if repeat_rule is None or isinstance(repeat_rule, NoRepeat):
        return anchor if window.contains(anchor) else None

    rule = repeat_rule.validate()
    end = rule.end_bound(window.tzinfo)

    # Series hasn't started yet, or ended before this day
    if anchor > window.end:
        return None
    if end is not None and end < window.start:
        return None

    index = _candidate_index(anchor, window, rule)
    if index is None:
        return None
    if rule.count is not None and index >= rule.count:
        return None

    occurrence = occurrence_at(anchor, rule, index)
    if not window.contains_date(occurrence.date()):
        return None
    if end is not None and occurrence > end:
        return None
    return occurrence


def occurs_on(
    anchor_time: Timestamp,
    repeat_rule: RepeatRule | None,
    window: DayWindow,
) -> bool:
    """Check if a reminder has an occurrence inside a day window."""
    return occurrence_on(anchor_time, repeat_rule, window) is not None


def iter_occurrences(
    anchor_time: Timestamp,
    repeat_rule: RepeatRule | None,
    until: Timestamp,
    since: Timestamp | None = None,
    tz: tzinfo | None = None,
) -> Iterator[datetime]:
    """
    Walk a reminder's occurrences forward from its anchor.

    Stops at `until`, the rule's end date, or its count, whichever comes
    first. Occurrences before `since` are walked over but not yielded.
    """
    anchor = localize(parse_timestamp(anchor_time), tz)
    limit = localize(parse_timestamp(until), tz)
    floor = localize(parse_timestamp(since), tz) if since is not None else None

    if repeat_rule is None or isinstance(repeat_rule, NoRepeat):
        if anchor <= limit and (floor is None or anchor >= floor):
            yield anchor
        return

    rule = repeat_rule.validate()
    end = rule.end_bound(tz)
    if end is not None:
        limit = min(limit, end)

    index = 0
    while rule.count is None or index < rule.count:
        occurrence = occurrence_at(anchor, rule, index)
        if occurrence > limit:
            return
        if floor is None or occurrence >= floor:
            yield occurrence
        index += 1
