"""
Application layer for elblog.

Contains use cases that orchestrate the parser and infrastructure adapters.
This layer coordinates the flow but contains no parsing logic.
"""

from elblog.application.parse_logs import ParseLogsUseCase, build_event_stream
from elblog.application.ship_logs import ShipLogsUseCase
from elblog.application.ports import ByteSourcePort, SinkPort, TagLookupPort

__all__ = [
    "ParseLogsUseCase",
    "ShipLogsUseCase",
    "build_event_stream",
    "ByteSourcePort",
    "SinkPort",
    "TagLookupPort",
]
