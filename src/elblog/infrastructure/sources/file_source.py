"""
File source adapter for elblog.

Streams a compressed log object from disk in fixed-size chunks.
"""

from pathlib import Path
from typing import Iterator

__all__ = ["CompressedFileSource"]


class CompressedFileSource:
    """
    Chunked reader for a compressed log file.

    Example:
        source = CompressedFileSource("elb_20210101T0000Z.log.gz")
        for chunk in source.read_chunks():
            ...
    """

    def __init__(self, path: str | Path, chunk_size: int = 64 * 1024):
        """
        Initialize file source.

        Args:
            path: Path to the compressed log file
            chunk_size: Bytes per read
        """
        self.path = Path(path)
        self.chunk_size = chunk_size

        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")

    def read_chunks(self) -> Iterator[bytes]:
        """
        Read the file, yielding one chunk at a time.

        Yields:
            Raw compressed bytes
        """
        with open(self.path, "rb") as f:
            while chunk := f.read(self.chunk_size):
                yield chunk

    def size(self) -> int:
        return self.path.stat().st_size

    def metadata(self) -> dict[str, str]:
        """Get source metadata."""
        return {
            "source_type": "file",
            "path": str(self.path),
            "name": self.path.name,
            "size_bytes": str(self.size()),
        }
