"""
Stream sink adapter for elblog.

Writes the serialized event stream to a binary file-like object.
"""

from typing import BinaryIO, Iterable

from elblog.core.exceptions import SinkError

__all__ = ["StreamSink"]


class StreamSink:
    """
    Sink that writes each chunk to a binary stream as it arrives.

    Example:
        with open("events.ndjson", "wb") as f:
            StreamSink(f, name="events.ndjson").send(chunks)
    """

    def __init__(self, stream: BinaryIO, name: str = "<stream>"):
        self.stream = stream
        self.name = name

    @property
    def destination(self) -> str:
        return self.name

    def send(self, chunks: Iterable[bytes]) -> None:
        try:
            for chunk in chunks:
                self.stream.write(chunk)
            self.stream.flush()
        except OSError as e:
            raise SinkError(f"Unable to write to {self.name}: {e}", destination=self.name) from e
