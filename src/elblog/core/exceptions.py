"""
Custom exceptions for elblog.
"""

__all__ = [
    "ELBLogError",
    "ConfigurationError",
    "MalformedInputError",
    "TransportError",
    "DecompressionError",
    "SinkError",
]


class ELBLogError(Exception):
    """Base exception for all elblog errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ConfigurationError(ELBLogError):
    """Raised when no usable configuration can be resolved for a run."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {}
        if config_key is not None:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class MalformedInputError(ELBLogError):
    """
    Raised when a tokenized line has a field count the parser cannot handle.

    This is fatal for the whole input object.
    """

    def __init__(self, field_count: int, fields: list[str]):
        message = f"Expecting 17, 18 or 19 fields, actual fields {field_count}"
        super().__init__(message, {"fields": fields})
        self.field_count = field_count
        self.fields = fields


class TransportError(ELBLogError):
    """Raised when reading or delivering the byte stream fails."""


class DecompressionError(TransportError):
    """Raised when the compressed input cannot be decompressed."""

    def __init__(self, message: str, source: str | None = None):
        details = {}
        if source is not None:
            details["source"] = source
        super().__init__(message, details)
        self.source = source


class SinkError(TransportError):
    """Raised when the downstream sink rejects or fails to accept the stream."""

    def __init__(
        self,
        message: str,
        destination: str | None = None,
        status_code: int | None = None,
    ):
        details = {}
        if destination is not None:
            details["destination"] = destination
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.destination = destination
        self.status_code = status_code
