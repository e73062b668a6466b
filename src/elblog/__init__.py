"""
elblog - Parse compressed ELB access logs and ship them as JSON events.

Usage:
    from elblog import parse_file, parse_line, ship

    # Parse a single decompressed line
    event = parse_line(line, private_params="token/4")

    # Parse a compressed log file
    events = parse_file("elb.log.gz")

    # Stream-parse without holding events in memory
    from elblog import stream_parse
    for event in stream_parse("elb.log.gz"):
        process(event)

    # Ship to the bulk ingestion endpoint
    summary = ship("elb.log.gz", token="abc123", tag="aws-elb")
    print(summary.message())
"""

__version__ = "0.1.0"

from elblog.core.models import (
    COLUMNS,
    NUMERIC_COLUMNS,
    StructuredEvent,
    ErrorEvent,
    RedactionRule,
    NormalizeResult,
    RunSummary,
)
from elblog.core.exceptions import (
    ELBLogError,
    ConfigurationError,
    MalformedInputError,
    TransportError,
    DecompressionError,
    SinkError,
)
from elblog.core.config import ShipperConfig, parse_redaction_rules
from elblog.core.context import PipelineContext
from elblog.parsers import (
    ELBRecordNormalizer,
    tokenize_line,
    tokenize_lines,
    normalize_record,
    redact_url,
)

__all__ = [
    # Version
    "__version__",
    # Core models
    "COLUMNS",
    "NUMERIC_COLUMNS",
    "StructuredEvent",
    "ErrorEvent",
    "RedactionRule",
    "NormalizeResult",
    "RunSummary",
    "ShipperConfig",
    "PipelineContext",
    # Exceptions
    "ELBLogError",
    "ConfigurationError",
    "MalformedInputError",
    "TransportError",
    "DecompressionError",
    "SinkError",
    # Parsing
    "ELBRecordNormalizer",
    "tokenize_line",
    "tokenize_lines",
    "normalize_record",
    "redact_url",
    "parse_redaction_rules",
    # Convenience functions
    "parse_line",
    "parse_file",
    "stream_parse",
    "ship",
]


def parse_line(line: str, private_params: str | None = None) -> dict | None:
    """
    Parse one decompressed access log line.

    Args:
        line: Raw log line
        private_params: Optional redaction rules (`name/maxLength//...`)

    Returns:
        Event dictionary, or None for a blank line

    Raises:
        MalformedInputError: If the line has an unhandled field count
    """
    context = PipelineContext(redaction_rules=parse_redaction_rules(private_params))
    result = ELBRecordNormalizer(context).process_one(tokenize_line(line))
    return result.to_dict() if result is not None else None


def stream_parse(file_path: str, private_params: str | None = None):
    """
    Stream-parse a compressed log file.

    Args:
        file_path: Path to the gzip-compressed log
        private_params: Optional redaction rules (`name/maxLength//...`)

    Yields:
        Event dictionaries in line order
    """
    from elblog.application.parse_logs import ParseLogsUseCase
    from elblog.infrastructure import CompressedFileSource

    use_case = ParseLogsUseCase(
        CompressedFileSource(file_path),
        redaction_rules=parse_redaction_rules(private_params),
    )
    yield from use_case.execute()


def parse_file(file_path: str, private_params: str | None = None) -> list[dict]:
    """Parse a compressed log file into a list of event dictionaries."""
    return list(stream_parse(file_path, private_params))


def ship(
    file_path: str,
    token: str | None = None,
    tag: str | None = None,
    tags: dict[str, str] | None = None,
    timeout: float | None = None,
) -> RunSummary:
    """
    Parse a compressed log file and post it to the bulk endpoint.

    Args:
        file_path: Path to the gzip-compressed log
        token: Default customer token
        tag: Default tag used with the default token
        tags: Optional tag set for the source (takes precedence)
        timeout: Optional HTTP timeout in seconds

    Returns:
        RunSummary for the run
    """
    from elblog.application.ship_logs import ShipLogsUseCase
    from elblog.infrastructure import CompressedFileSource, HttpBulkSink, StaticTagLookup

    use_case = ShipLogsUseCase(
        source=CompressedFileSource(file_path),
        sink_factory=lambda config: HttpBulkSink(config.endpoint_url, timeout=timeout),
        tag_lookup=StaticTagLookup(tags),
        default_token=token,
        default_tag=tag,
    )
    return use_case.execute()
