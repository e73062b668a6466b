"""
Source adapters for elblog.

These implement the ByteSourcePort interface for various input sources.
"""

from elblog.infrastructure.sources.file_source import CompressedFileSource
from elblog.infrastructure.sources.stdin_source import StdinByteSource

__all__ = [
    "CompressedFileSource",
    "StdinByteSource",
]
