"""
Per-run pipeline context.

Holds everything a single run needs so that no state lives at module level.
"""

from dataclasses import dataclass, field

from elblog.core.models import RedactionRule

__all__ = ["PipelineContext"]


@dataclass
class PipelineContext:
    """
    State threaded through one pipeline run.

    The counters are only touched by the normalizer, once per record.
    """
    redaction_rules: list[RedactionRule] = field(default_factory=list)
    source: str = "<unknown>"
    destination: str = "<unknown>"
    events_parsed: int = 0
    errors: int = 0
    skipped_lines: int = 0

    def record_success(self) -> None:
        self.events_parsed += 1

    def record_error(self) -> None:
        self.errors += 1

    def record_skip(self) -> None:
        self.skipped_lines += 1
