"""
Sink adapters for elblog.

These implement the SinkPort interface for output destinations.
"""

from elblog.infrastructure.sinks.stream_sink import StreamSink
from elblog.infrastructure.sinks.http_sink import HttpBulkSink

__all__ = [
    "StreamSink",
    "HttpBulkSink",
]
