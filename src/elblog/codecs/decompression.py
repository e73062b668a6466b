"""
Streaming decompression and line splitting.

Input arrives as an iterable of compressed byte chunks. Nothing is
buffered beyond the current chunk and the current partial line.
"""

import logging
import zlib
from typing import Iterable, Iterator

from elblog.core.exceptions import DecompressionError

__all__ = ["decompress_stream", "iter_lines"]

logger = logging.getLogger(__name__)

# Accept gzip or zlib headers
_WBITS = zlib.MAX_WBITS | 32


def decompress_stream(
    chunks: Iterable[bytes],
    source: str | None = None,
) -> Iterator[bytes]:
    """
    Decompress a gzip (or zlib) byte stream incrementally.

    Concatenated gzip members are decompressed one after another.

    Args:
        chunks: Compressed byte chunks
        source: Source name used in error messages

    Yields:
        Decompressed byte chunks

    Raises:
        DecompressionError: If the stream is corrupt or truncated
    """
    decompressor = zlib.decompressobj(_WBITS)
    member_started = False

    try:
        for chunk in chunks:
            while chunk:
                member_started = True
                data = decompressor.decompress(chunk)
                if data:
                    yield data

                if decompressor.eof:
                    # Start the next gzip member, if any
                    chunk = decompressor.unused_data
                    decompressor = zlib.decompressobj(_WBITS)
                    member_started = False
                else:
                    chunk = b""

        tail = decompressor.flush()
        if tail:
            yield tail
    except zlib.error as e:
        raise DecompressionError(f"Unable to decompress input: {e}", source=source) from e

    if member_started and not decompressor.eof:
        raise DecompressionError("Compressed input ended unexpectedly", source=source)


def iter_lines(
    chunks: Iterable[bytes],
    encoding: str = "utf-8",
    errors: str = "replace",
) -> Iterator[str]:
    """
    Split a byte stream into decoded lines.

    Yields:
        Lines without trailing newline characters
    """
    pending = b""
    for chunk in chunks:
        pending += chunk
        *lines, pending = pending.split(b"\n")
        for line in lines:
            yield line.decode(encoding, errors).rstrip("\r")

    if pending:
        yield pending.decode(encoding, errors).rstrip("\r")
