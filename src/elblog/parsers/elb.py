"""
ELB access log record normalizer.

Turns tokenized access log lines into events keyed by COLUMNS. Work is
split in two stages:

    classify_record   raw fields -> SKIP | PARSEABLE | MALFORMED
    normalize_record  parseable fields -> StructuredEvent | ErrorEvent

Raw field layout (before splitting):

    type timestamp elb client:port backend:port request_processing_time
    backend_processing_time response_processing_time elb_status_code
    backend_status_code received_bytes sent_bytes "request" "user_agent"
    ssl_cipher ssl_protocol target_group_arn ["trace_id"] [trailing]
"""

import logging
import math
from typing import Iterable, Iterator

from elblog.core.context import PipelineContext
from elblog.core.exceptions import MalformedInputError
from elblog.core.models import (
    COLUMNS,
    NUMERIC_COLUMNS,
    MISSING_VALUE,
    ErrorEvent,
    NormalizeResult,
    RecordKind,
    RedactionRule,
    ValidatedRecord,
)
from elblog.parsers.redaction import redact_url

__all__ = [
    "PARSEABLE_FIELD_COUNTS",
    "classify_record",
    "split_client",
    "split_backend",
    "split_request",
    "coerce_numeric",
    "normalize_record",
    "ELBRecordNormalizer",
]

logger = logging.getLogger(__name__)

# 17 without trace id, 18 with it, 19 with the trailing field as well
PARSEABLE_FIELD_COUNTS = frozenset({17, 18, 19})

# Raw positions
RAW_TIMESTAMP = 1
RAW_ELB = 2
RAW_CLIENT = 3
RAW_BACKEND = 4
RAW_ELB_STATUS_CODE = 8
RAW_REQUEST = 12


def classify_record(fields: list[str]) -> ValidatedRecord:
    """
    Classify a tokenized line by its field count.

    A single field is a blank or sentinel line. 17, 18 and 19 fields can be
    normalized. Anything else is malformed input.
    """
    if len(fields) == 1:
        return ValidatedRecord(RecordKind.SKIP, fields)
    if len(fields) in PARSEABLE_FIELD_COUNTS:
        return ValidatedRecord(RecordKind.PARSEABLE, fields)
    return ValidatedRecord(RecordKind.MALFORMED, fields)


def split_client(value: str) -> list[str]:
    """Split `ip:port` into its parts."""
    return value.rsplit(":", 1)


def split_backend(value: str) -> list[str]:
    """
    Split the backend `ip:port` field.

    When the ELB never reached a backend (some 5xx responses) the field has
    no port; both parts become MISSING_VALUE. This is inferred from the
    missing colon only, the log carries no explicit marker for it.
    """
    if ":" in value:
        return value.rsplit(":", 1)
    return [MISSING_VALUE, MISSING_VALUE]


def split_request(
    value: str,
    rules: Iterable[RedactionRule] = (),
) -> list[str]:
    """
    Split `METHOD URL PROTOCOL` into method, url and query params.

    The protocol is dropped. Redaction runs on the full URL before the
    query string is separated out.

    Example:
        split_request("GET https://host/api?x=1 HTTP/1.1")
        # -> ["GET", "https://host/api", "x=1"]
    """
    parts = value.split(" ", 2)
    method = parts[0]
    url = parts[1] if len(parts) > 1 else ""

    url = redact_url(url, rules)

    url, _, query_params = url.partition("?")
    return [method, url, query_params]


def coerce_numeric(value: str) -> float:
    """Parse a float, returning NaN for anything unparseable."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def normalize_record(
    fields: list[str],
    rules: Iterable[RedactionRule] = (),
) -> NormalizeResult:
    """
    Normalize one parseable record.

    Args:
        fields: Raw fields of a PARSEABLE record
        rules: Redaction rules applied to the request URL

    Returns:
        NormalizeResult carrying either a StructuredEvent or, when the
        derived field count does not match COLUMNS, an ErrorEvent
    """
    values: list = [
        *fields[:RAW_CLIENT],
        *split_client(fields[RAW_CLIENT]),
        *split_backend(fields[RAW_BACKEND]),
        *fields[RAW_BACKEND + 1:RAW_REQUEST],
        *split_request(fields[RAW_REQUEST], rules),
        *fields[RAW_REQUEST + 1:],
    ]

    if len(values) != len(COLUMNS):
        logger.error(
            "ELB log length %d did not match COLUMNS length %d. %s",
            len(values),
            len(COLUMNS),
            " ".join(str(v) for v in values),
        )
        return NormalizeResult(error=ErrorEvent(
            timestamp=fields[RAW_TIMESTAMP],
            elb=fields[RAW_ELB],
            elb_status_code=fields[RAW_ELB_STATUS_CODE],
            error=(
                f"ELB log length: {len(values)} (from {len(fields)} raw fields) "
                f"did not match COLUMNS length {len(COLUMNS)}"
            ),
        ))

    for index in NUMERIC_COLUMNS:
        values[index] = coerce_numeric(values[index])

    return NormalizeResult(event=dict(zip(COLUMNS, values)))


class ELBRecordNormalizer:
    """
    Streaming normalizer over tokenized records.

    Skips blank lines, raises on malformed input, and yields one event
    dictionary (structured or error) per remaining record, counting
    outcomes on the run's PipelineContext.

    Example:
        normalizer = ELBRecordNormalizer(context)
        for event in normalizer.process(tokenize_lines(lines)):
            print(event["request_url"])
    """

    name = "elb_access"

    def __init__(self, context: PipelineContext | None = None):
        self.context = context or PipelineContext()

    def process_one(self, fields: list[str]) -> NormalizeResult | None:
        """
        Normalize a single record.

        Returns:
            NormalizeResult, or None for a skipped line

        Raises:
            MalformedInputError: If the field count is not handled
        """
        record = classify_record(fields)

        match record.kind:
            case RecordKind.SKIP:
                self.context.record_skip()
                return None
            case RecordKind.MALFORMED:
                raise MalformedInputError(record.field_count, record.fields)

        result = normalize_record(record.fields, self.context.redaction_rules)
        if result.ok:
            self.context.record_success()
        else:
            self.context.record_error()
        return result

    def process(self, records: Iterable[list[str]]) -> Iterator[dict]:
        """
        Normalize a stream of records.

        Yields:
            Event dictionaries in input order
        """
        for fields in records:
            result = self.process_one(fields)
            if result is not None:
                yield result.to_dict()
