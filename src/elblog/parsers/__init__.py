"""
Tokenizer, record normalizer and redaction for ELB access logs.
"""

from elblog.parsers.tokenizer import tokenize_line, tokenize_lines
from elblog.parsers.redaction import TRUNCATION_MARKER, obscure_url_parameter, redact_url
from elblog.parsers.elb import (
    PARSEABLE_FIELD_COUNTS,
    classify_record,
    split_client,
    split_backend,
    split_request,
    coerce_numeric,
    normalize_record,
    ELBRecordNormalizer,
)

__all__ = [
    # Tokenizer
    "tokenize_line",
    "tokenize_lines",
    # Redaction
    "TRUNCATION_MARKER",
    "obscure_url_parameter",
    "redact_url",
    # Normalizer
    "PARSEABLE_FIELD_COUNTS",
    "classify_record",
    "split_client",
    "split_backend",
    "split_request",
    "coerce_numeric",
    "normalize_record",
    "ELBRecordNormalizer",
]
