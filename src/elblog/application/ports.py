"""
Port interfaces for the application layer.

These are the interfaces that infrastructure adapters must implement.
They cover the three collaborators around the parser: where compressed
bytes come from, where the serialized stream goes, and where per-source
configuration tags are looked up.
"""

from typing import Iterable, Iterator, Protocol, runtime_checkable

__all__ = [
    "ByteSourcePort",
    "SinkPort",
    "TagLookupPort",
]


@runtime_checkable
class ByteSourcePort(Protocol):
    """
    Port for compressed log object sources.

    Implementations provide the raw (still compressed) bytes:
    - Local files
    - Stdin
    """

    def read_chunks(self) -> Iterator[bytes]:
        """Read the compressed object as a stream of byte chunks."""
        ...

    def size(self) -> int | None:
        """Size in bytes, or None if unknown before reading."""
        ...

    def metadata(self) -> dict[str, str]:
        """Get source metadata (path, type, size, etc.)."""
        ...


@runtime_checkable
class SinkPort(Protocol):
    """
    Port for serialized output destinations.

    The sink pulls chunks from the iterable as it is ready for them.
    """

    @property
    def destination(self) -> str:
        """Human readable destination identity."""
        ...

    def send(self, chunks: Iterable[bytes]) -> None:
        """Deliver the whole stream. Raises SinkError on failure."""
        ...


@runtime_checkable
class TagLookupPort(Protocol):
    """
    Port for per-source configuration tags.

    Implementations return the tag set attached to a source, as a flat
    key/value mapping.
    """

    def get_tags(self, source: str) -> dict[str, str]:
        """Get the tags for the named source."""
        ...
