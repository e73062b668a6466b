"""
Core data models for elblog.

These define the fixed output schema for ELB access log events and the
small value types passed between pipeline stages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = [
    "COLUMNS",
    "NUMERIC_COLUMNS",
    "MISSING_VALUE",
    "StructuredEvent",
    "ErrorEvent",
    "RedactionRule",
    "RecordKind",
    "ValidatedRecord",
    "NormalizeResult",
    "RunSummary",
]


# Output columns, in order. Downstream consumers search on these names.
# http://docs.aws.amazon.com/ElasticLoadBalancing/latest/DeveloperGuide/access-log-collection.html
COLUMNS: tuple[str, ...] = (
    "type",
    "timestamp",
    "elb",
    "client_ip",
    "client_port",  # split from client
    "backend",
    "backend_port",  # split from backend
    "request_processing_time",
    "backend_processing_time",
    "response_processing_time",
    "elb_status_code",
    "backend_status_code",
    "received_bytes",
    "sent_bytes",
    "request_method",  # split from request
    "request_url",  # split from request
    "request_query_params",  # split from request
    "user_agent",
    "ssl_cipher",
    "ssl_protocol",
    "target_group_arn",
    "trace_id",
    "empty",
)

# Indexes into COLUMNS that are coerced to floats
NUMERIC_COLUMNS: tuple[int, ...] = (7, 8, 9, 12, 13)

# Placeholder used when the ELB never reached a backend
MISSING_VALUE = "-"

# A fully normalized event: exactly the COLUMNS keys
StructuredEvent = dict[str, Any]


@dataclass
class ErrorEvent:
    """Diagnostic event emitted in place of a record that did not fit COLUMNS."""
    timestamp: str | None
    elb: str | None
    elb_status_code: str | None
    error: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "timestamp": self.timestamp,
            "elb": self.elb,
            "elb_status_code": self.elb_status_code,
            "error": self.error,
        }


@dataclass(frozen=True)
class RedactionRule:
    """
    A query parameter to obscure in request URLs.

    A positive max_length keeps that many characters of the value followed
    by a truncation marker. Anything else removes the parameter.
    """
    name: str
    max_length: int | None = None

    @property
    def drops(self) -> bool:
        """True when the parameter is removed rather than truncated."""
        return self.max_length is None or self.max_length <= 0

    @classmethod
    def parse(cls, entry: str) -> "RedactionRule":
        """
        Parse a single `name/maxLength` entry.

        Example: "token/4" -> RedactionRule("token", 4)
        """
        name, _, length = entry.partition("/")
        try:
            max_length = int(length.split("/")[0])
        except ValueError:
            max_length = None
        return cls(name=name, max_length=max_length)


class RecordKind(Enum):
    """Structural classification of a tokenized line."""
    SKIP = "skip"
    PARSEABLE = "parseable"
    MALFORMED = "malformed"


@dataclass
class ValidatedRecord:
    """A tokenized line tagged with its structural classification."""
    kind: RecordKind
    fields: list[str] = field(default_factory=list)

    @property
    def field_count(self) -> int:
        return len(self.fields)


@dataclass
class NormalizeResult:
    """
    Outcome of normalizing one parseable record.

    Exactly one of `event` and `error` is set.
    """
    event: StructuredEvent | None = None
    error: ErrorEvent | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Return whichever event this result carries."""
        if self.error is not None:
            return self.error.to_dict()
        return dict(self.event or {})


@dataclass
class RunSummary:
    """Result of shipping one input object."""
    source: str
    destination: str
    events_parsed: int = 0
    errors: int = 0
    skipped_lines: int = 0
    skipped_empty_input: bool = False

    def message(self) -> str:
        """Human readable one-line summary."""
        if self.skipped_empty_input:
            return f"Skipped {self.source}: object has size zero"
        return (
            f"Successfully uploaded {self.source} to {self.destination}. "
            f"Parsed {self.events_parsed} events."
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "source": self.source,
            "destination": self.destination,
            "events_parsed": self.events_parsed,
            "errors": self.errors,
            "skipped_lines": self.skipped_lines,
            "skipped_empty_input": self.skipped_empty_input,
        }
