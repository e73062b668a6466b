"""
Ship logs use case.

Resolves configuration, parses the source and streams the serialized
events to a sink in one pass.
"""

import logging
from typing import Callable

from elblog.application.parse_logs import build_event_stream
from elblog.application.ports import ByteSourcePort, SinkPort, TagLookupPort
from elblog.codecs import serialize_events
from elblog.core.config import LOGGLY_URL_BASE, ShipperConfig
from elblog.core.context import PipelineContext
from elblog.core.exceptions import ELBLogError
from elblog.core.models import RunSummary

__all__ = ["ShipLogsUseCase"]

logger = logging.getLogger(__name__)


class ShipLogsUseCase:
    """
    Use case: Ship one compressed ELB log object to an ingestion endpoint.

    Configuration is resolved before any input is read; a missing token
    aborts the run. Any fatal error while streaming aborts the whole run
    and propagates to the caller.

    Example:
        use_case = ShipLogsUseCase(
            source=CompressedFileSource("elb.log.gz"),
            sink_factory=lambda config: HttpBulkSink(config.endpoint_url),
            tag_lookup=JsonTagFileLookup("tags.json"),
        )
        summary = use_case.execute()
        print(summary.message())
    """

    def __init__(
        self,
        source: ByteSourcePort,
        sink_factory: Callable[[ShipperConfig], SinkPort],
        tag_lookup: TagLookupPort | None = None,
        default_token: str | None = None,
        default_tag: str | None = None,
        base_url: str = LOGGLY_URL_BASE,
    ):
        """
        Initialize the use case.

        Args:
            source: Compressed byte source adapter
            sink_factory: Builds the sink once the endpoint is known
            tag_lookup: Optional per-source tag lookup
            default_token: Token used when the tags carry none
            default_tag: Group tag used with the default token
            base_url: Bulk endpoint prefix
        """
        self.source = source
        self.sink_factory = sink_factory
        self.tag_lookup = tag_lookup
        self.default_token = default_token
        self.default_tag = default_tag
        self.base_url = base_url

    def resolve_config(self, source_name: str) -> ShipperConfig:
        """
        Resolve configuration for the source.

        Raises:
            ConfigurationError: If no token is available
        """
        tags = self.tag_lookup.get_tags(source_name) if self.tag_lookup else {}
        return ShipperConfig.from_tags(
            tags,
            default_token=self.default_token,
            default_tag=self.default_tag,
            base_url=self.base_url,
        )

    def execute(self) -> RunSummary:
        """
        Execute the run.

        Returns:
            RunSummary with the number of events parsed

        Raises:
            ConfigurationError: If no token can be resolved
            MalformedInputError: If a line has an unhandled field count
            TransportError: If decompression or delivery fails
        """
        source_name = self.source.metadata().get("path", "<unknown>")

        if self.source.size() == 0:
            logger.info("Skipping %s: object has size zero", source_name)
            return RunSummary(
                source=source_name,
                destination="-",
                skipped_empty_input=True,
            )

        config = self.resolve_config(source_name)
        sink = self.sink_factory(config)

        context = PipelineContext(
            redaction_rules=config.redaction_rules,
            source=source_name,
            destination=sink.destination,
        )
        logger.info("Using endpoint: %s", sink.destination)

        events = build_event_stream(self.source, context)
        try:
            sink.send(serialize_events(events))
        except ELBLogError as e:
            logger.error(
                "Unable to read %s and upload to %s due to an error: %s",
                source_name,
                sink.destination,
                e,
            )
            raise

        summary = RunSummary(
            source=source_name,
            destination=sink.destination,
            events_parsed=context.events_parsed,
            errors=context.errors,
            skipped_lines=context.skipped_lines,
        )
        logger.info(summary.message())
        return summary
