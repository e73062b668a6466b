"""
Infrastructure layer for elblog.

Contains adapters that implement the ports defined in the application layer.
These connect the parser to external systems (files, stdin, HTTP, tags).
"""

from elblog.infrastructure.sources import (
    CompressedFileSource,
    StdinByteSource,
)
from elblog.infrastructure.sinks import (
    StreamSink,
    HttpBulkSink,
)
from elblog.infrastructure.tags import (
    StaticTagLookup,
    JsonTagFileLookup,
    tags_from_tag_set,
)

__all__ = [
    # Sources
    "CompressedFileSource",
    "StdinByteSource",
    # Sinks
    "StreamSink",
    "HttpBulkSink",
    # Tags
    "StaticTagLookup",
    "JsonTagFileLookup",
    "tags_from_tag_set",
]
