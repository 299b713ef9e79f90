"""Error taxonomy for the schedule core - pure, no I/O."""

from dataclasses import dataclass
from enum import Enum


class ScheduleError(Exception):
    """Base class for record problems the core can detect."""

    pass


class InvalidRuleError(ScheduleError):
    """Raised when a repeat rule has an unknown kind or a bad interval/count."""

    pass


class MalformedTimestampError(ScheduleError):
    """Raised when a timestamp field cannot be read as a valid instant."""

    pass


class DiagnosticKind(Enum):
    """Which kind of problem excluded a record."""

    INVALID_RULE = "invalid_rule"
    MALFORMED_TIMESTAMP = "malformed_timestamp"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal report about a record left out of a day's result."""

    record_type: str
    record_id: str
    kind: DiagnosticKind
    reason: str

    @classmethod
    def from_error(cls, record_type: str, record_id: str, error: ScheduleError) -> "Diagnostic":
        if isinstance(error, InvalidRuleError):
            kind = DiagnosticKind.INVALID_RULE
        else:
            kind = DiagnosticKind.MALFORMED_TIMESTAMP
        return cls(record_type=record_type, record_id=record_id, kind=kind, reason=str(error))

    def format(self) -> str:
        return f"{self.record_type} {self.record_id}: {self.kind.value} ({self.reason})"
