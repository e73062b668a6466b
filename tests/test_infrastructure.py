"""
Tests for codecs and infrastructure adapters.

Tests decompression, serialization, sources and sinks.
"""

import gzip
import io
import json
import math
import os
import zlib

import pytest
import requests

from elblog.codecs import decompress_stream, iter_lines, serialize_event, serialize_events
from elblog.core.exceptions import DecompressionError, SinkError
from elblog.infrastructure import (
    CompressedFileSource,
    HttpBulkSink,
    StdinByteSource,
    StreamSink,
)


def chunked(data: bytes, size: int = 7) -> list[bytes]:
    return [data[i:i + size] for i in range(0, len(data), size)]


class TestDecompressStream:
    """Tests for decompress_stream."""

    def test_gzip(self):
        data = b"line one\nline two\n" * 100
        assert b"".join(decompress_stream(chunked(gzip.compress(data)))) == data

    def test_zlib(self):
        data = b"hello world\n"
        assert b"".join(decompress_stream([zlib.compress(data)])) == data

    def test_multiple_members(self):
        """Test concatenated gzip members are all decompressed."""
        body = gzip.compress(b"first\n") + gzip.compress(b"second\n")
        assert b"".join(decompress_stream(chunked(body, 5))) == b"first\nsecond\n"

    def test_empty_input(self):
        assert list(decompress_stream([])) == []

    def test_corrupt_input(self):
        with pytest.raises(DecompressionError) as exc_info:
            list(decompress_stream([b"this is not gzip"], source="bad.gz"))
        assert exc_info.value.source == "bad.gz"

    def test_truncated_input(self):
        data = gzip.compress(b"some log line\n" * 50)
        with pytest.raises(DecompressionError):
            list(decompress_stream([data[:-4]]))

    def test_is_incremental(self):
        """Test output is produced before all input is read."""
        data = gzip.compress(os.urandom(200000), compresslevel=1)
        pulled = []

        def source():
            for chunk in chunked(data, 1024):
                pulled.append(chunk)
                yield chunk

        stream = decompress_stream(source())
        next(stream)
        assert len(pulled) < len(chunked(data, 1024))


class TestIterLines:
    """Tests for iter_lines."""

    def test_lines_across_chunks(self):
        chunks = [b"ab", b"c\nde", b"f\r\n", b"g"]
        assert list(iter_lines(chunks)) == ["abc", "def", "g"]

    def test_trailing_newline(self):
        assert list(iter_lines([b"a\nb\n"])) == ["a", "b"]

    def test_blank_lines_kept(self):
        assert list(iter_lines([b"a\n\nb\n"])) == ["a", "", "b"]

    def test_invalid_utf8_replaced(self):
        assert list(iter_lines([b"caf\xe9\n"])) == ["caf\ufffd"]


class TestSerialization:
    """Tests for newline-delimited JSON output."""

    def test_serialize_event_compact(self):
        assert serialize_event({"a": "x", "b": 1.5}) == '{"a":"x","b":1.5}'

    def test_nan_becomes_null(self):
        assert json.loads(serialize_event({"v": math.nan})) == {"v": None}

    def test_serialize_events_newline_delimited(self):
        chunks = list(serialize_events([{"a": 1}, {"b": 2}]))
        assert chunks == [b'{"a":1}\n', b'{"b":2}\n']

    def test_no_wrapper_array(self):
        body = b"".join(serialize_events([{"a": 1}]))
        assert not body.startswith(b"[")


class TestCompressedFileSource:
    """Tests for CompressedFileSource."""

    def test_read_chunks(self, tmp_path):
        path = tmp_path / "x.gz"
        path.write_bytes(b"0123456789")

        source = CompressedFileSource(path, chunk_size=4)
        assert list(source.read_chunks()) == [b"0123", b"4567", b"89"]

    def test_size_and_metadata(self, tmp_path):
        path = tmp_path / "x.gz"
        path.write_bytes(b"abc")

        source = CompressedFileSource(path)
        meta = source.metadata()

        assert source.size() == 3
        assert meta["source_type"] == "file"
        assert meta["name"] == "x.gz"

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CompressedFileSource(tmp_path / "missing.gz")


class TestStdinByteSource:
    """Tests for StdinByteSource."""

    def test_reads_stream(self):
        source = StdinByteSource(io.BytesIO(b"abcdef"), chunk_size=4)
        assert list(source.read_chunks()) == [b"abcd", b"ef"]
        assert source.size() is None
        assert source.metadata()["bytes_read"] == "6"


class TestStreamSink:
    """Tests for StreamSink."""

    def test_writes_chunks(self):
        buffer = io.BytesIO()
        sink = StreamSink(buffer, name="memory")

        sink.send([b"a\n", b"b\n"])

        assert buffer.getvalue() == b"a\nb\n"
        assert sink.destination == "memory"

    def test_write_failure(self):
        class BrokenStream(io.BytesIO):
            def write(self, data):
                raise OSError("disk full")

        with pytest.raises(SinkError):
            StreamSink(BrokenStream()).send([b"a"])


class FakeResponse:
    def __init__(self, status_code: int):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, status_code: int = 200, error: Exception | None = None):
        self.status_code = status_code
        self.error = error
        self.calls = []

    def post(self, url, data=None, headers=None, timeout=None):
        if self.error:
            raise self.error
        body = b"".join(data)
        self.calls.append({"url": url, "body": body, "headers": headers, "timeout": timeout})
        return FakeResponse(self.status_code)


class TestHttpBulkSink:
    """Tests for HttpBulkSink."""

    def test_posts_stream(self):
        session = FakeSession()
        sink = HttpBulkSink("https://example.com/bulk/tok", session=session, timeout=5)

        sink.send(iter([b'{"a":1}\n', b'{"b":2}\n']))

        assert session.calls[0]["url"] == "https://example.com/bulk/tok"
        assert session.calls[0]["body"] == b'{"a":1}\n{"b":2}\n'
        assert session.calls[0]["timeout"] == 5
        assert sink.destination == "https://example.com/bulk/tok"

    def test_http_error(self):
        sink = HttpBulkSink("https://example.com/bulk/tok", session=FakeSession(status_code=403))

        with pytest.raises(SinkError) as exc_info:
            sink.send([b"x"])
        assert exc_info.value.status_code == 403

    def test_connection_error(self):
        session = FakeSession(error=requests.ConnectionError("refused"))
        sink = HttpBulkSink("https://example.com/bulk/tok", session=session)

        with pytest.raises(SinkError):
            sink.send([b"x"])
