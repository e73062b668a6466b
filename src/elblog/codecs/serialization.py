"""
Newline-delimited JSON serialization of events.

Each event becomes one compact JSON document followed by a newline, with
no enclosing array, so the stream can be sent as it is produced.
"""

import json
import math
from typing import Any, Iterable, Iterator

__all__ = ["serialize_event", "serialize_events"]


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities, which JSON cannot represent, with null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def serialize_event(event: dict[str, Any]) -> str:
    """Render one event as a single JSON line (without newline)."""
    return json.dumps(
        {key: _json_safe(value) for key, value in event.items()},
        separators=(",", ":"),
        allow_nan=False,
    )


def serialize_events(
    events: Iterable[dict[str, Any]],
    encoding: str = "utf-8",
) -> Iterator[bytes]:
    """
    Serialize events lazily.

    Yields:
        Encoded lines, one per event
    """
    for event in events:
        yield (serialize_event(event) + "\n").encode(encoding)
