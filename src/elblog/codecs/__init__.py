"""
Byte-level codecs: streaming decompression in, newline-delimited JSON out.
"""

from elblog.codecs.decompression import decompress_stream, iter_lines
from elblog.codecs.serialization import serialize_event, serialize_events

__all__ = [
    "decompress_stream",
    "iter_lines",
    "serialize_event",
    "serialize_events",
]
