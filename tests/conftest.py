"""
Pytest fixtures for elblog tests.
"""

import gzip

import pytest


TRACE = '"Root=1-58337262-36d228ad5d99923122bbe354"'
ARN = "arn:aws:elasticloadbalancing:us-east-1:123456789012:targetgroup/my-targets/73e2d6bc24d8a067"


def make_line(
    backend: str = "10.0.1.5:80",
    request: str = "GET https://host:443/api?token=secret123&x=1 HTTP/1.1",
    user_agent: str = "curl/7.46.0",
    received_bytes: str = "0",
    trace: bool = True,
    trailing: bool = True,
) -> str:
    """Build an access log line; 19 raw fields with the defaults."""
    fields = [
        "http",
        "2021-01-01T00:00:00.000000Z",
        "my-elb",
        "10.0.0.1:4321",
        backend,
        "0.000086",
        "0.001048",
        "0.000057",
        "200",
        "200",
        received_bytes,
        "57",
        f'"{request}"',
        f'"{user_agent}"',
        "-",
        "-",
        ARN,
    ]
    if trace:
        fields.append(TRACE)
    line = " ".join(fields)
    if trailing:
        line += " "
    return line


@pytest.fixture
def sample_line() -> str:
    """A complete 19-field access log line."""
    return make_line()


@pytest.fixture
def backend_missing_line() -> str:
    """A line where the ELB never reached a backend."""
    return make_line(backend="-", request="GET https://host/api?token=secret123&x=1 HTTP/1.1", user_agent="agent")


@pytest.fixture
def short_line() -> str:
    """An 18-field line: trace id but no trailing field."""
    return make_line(trailing=False)


@pytest.fixture
def sample_log_lines() -> list[str]:
    """A small log body with a blank line in the middle."""
    return [
        make_line(),
        make_line(request="POST https://host:443/login HTTP/1.1"),
        "",
        make_line(backend="-"),
    ]


@pytest.fixture
def write_gz(tmp_path):
    """Write lines to a gzip file and return its path."""
    def _write(lines: list[str], name: str = "elb.log.gz"):
        path = tmp_path / name
        body = "\n".join(lines) + "\n"
        path.write_bytes(gzip.compress(body.encode("utf-8")))
        return path
    return _write


@pytest.fixture
def sample_gz(write_gz, sample_log_lines):
    """A gzip-compressed sample log file."""
    return write_gz(sample_log_lines)


@pytest.fixture
def line_factory():
    """Factory for access log lines with overridden fields."""
    return make_line
