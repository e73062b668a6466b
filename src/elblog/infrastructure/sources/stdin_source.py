"""
Stdin source adapter for elblog.

Provides streaming input of a compressed object piped on standard input.
"""

import sys
from typing import BinaryIO, Iterator

__all__ = ["StdinByteSource"]


class StdinByteSource:
    """
    Streaming source adapter for stdin.

    Example:
        # aws s3 cp s3://bucket/key.log.gz - | elblog parse -
        source = StdinByteSource()
    """

    def __init__(self, stream: BinaryIO | None = None, chunk_size: int = 64 * 1024):
        """
        Initialize stdin source.

        Args:
            stream: Binary stream to read (default: sys.stdin.buffer)
            chunk_size: Bytes per read
        """
        self.stream = stream if stream is not None else sys.stdin.buffer
        self.chunk_size = chunk_size
        self._byte_count = 0

    def read_chunks(self) -> Iterator[bytes]:
        """Read stdin, yielding one chunk at a time."""
        while chunk := self.stream.read(self.chunk_size):
            self._byte_count += len(chunk)
            yield chunk

    def size(self) -> int | None:
        # Unknown until fully read
        return None

    def metadata(self) -> dict[str, str]:
        """
        Get source metadata.

        Note: Size is not known until reading completes.
        """
        return {
            "source_type": "stdin",
            "path": "<stdin>",
            "name": "stdin",
            "bytes_read": str(self._byte_count),
        }
