"""
Parse logs use case.

Orchestrates: source -> decompress -> lines -> tokenize -> normalize
"""

from typing import Iterator

from elblog.application.ports import ByteSourcePort
from elblog.codecs import decompress_stream, iter_lines
from elblog.core.context import PipelineContext
from elblog.core.models import RedactionRule
from elblog.parsers import ELBRecordNormalizer, tokenize_lines

__all__ = ["build_event_stream", "ParseLogsUseCase"]


def build_event_stream(
    source: ByteSourcePort,
    context: PipelineContext,
) -> Iterator[dict]:
    """
    Chain the pipeline stages over a byte source.

    Every stage is a generator, so nothing runs until the result is
    iterated and input is only read as fast as events are consumed.

    Raises (while iterating):
        DecompressionError: If the input cannot be decompressed
        MalformedInputError: If a line has an unhandled field count
    """
    chunks = source.read_chunks()
    decompressed = decompress_stream(chunks, source=context.source)
    lines = iter_lines(decompressed)
    records = tokenize_lines(lines)
    normalizer = ELBRecordNormalizer(context)
    return normalizer.process(records)


class ParseLogsUseCase:
    """
    Use case: Parse a compressed ELB log into event dictionaries.

    Example:
        source = CompressedFileSource("elb.log.gz")
        use_case = ParseLogsUseCase(source, redaction_rules=rules)

        for event in use_case.execute():
            print(event["request_url"])

        print(use_case.context.events_parsed)
    """

    def __init__(
        self,
        source: ByteSourcePort,
        redaction_rules: list[RedactionRule] | None = None,
    ):
        """
        Initialize the use case.

        Args:
            source: Compressed byte source adapter
            redaction_rules: Query parameters to obscure in request URLs
        """
        self.source = source
        self.context = PipelineContext(
            redaction_rules=list(redaction_rules or []),
            source=source.metadata().get("path", "<unknown>"),
        )

    def execute(self) -> Iterator[dict]:
        """
        Execute the parse.

        Yields:
            Structured or error event dictionaries, in input order
        """
        yield from build_event_stream(self.source, self.context)
