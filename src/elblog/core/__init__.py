"""
Core data models, configuration and exceptions for elblog.
"""

from elblog.core.models import (
    COLUMNS,
    NUMERIC_COLUMNS,
    MISSING_VALUE,
    StructuredEvent,
    ErrorEvent,
    RedactionRule,
    RecordKind,
    ValidatedRecord,
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
from elblog.core.config import (
    LOGGLY_URL_BASE,
    TOKEN_TAG,
    GROUP_TAG,
    PRIVATE_URL_PARAMS_TAG,
    ShipperConfig,
    build_endpoint_url,
    parse_redaction_rules,
)
from elblog.core.context import PipelineContext

__all__ = [
    "COLUMNS",
    "NUMERIC_COLUMNS",
    "MISSING_VALUE",
    "StructuredEvent",
    "ErrorEvent",
    "RedactionRule",
    "RecordKind",
    "ValidatedRecord",
    "NormalizeResult",
    "RunSummary",
    "ELBLogError",
    "ConfigurationError",
    "MalformedInputError",
    "TransportError",
    "DecompressionError",
    "SinkError",
    # Configuration
    "LOGGLY_URL_BASE",
    "TOKEN_TAG",
    "GROUP_TAG",
    "PRIVATE_URL_PARAMS_TAG",
    "ShipperConfig",
    "build_endpoint_url",
    "parse_redaction_rules",
    "PipelineContext",
]
