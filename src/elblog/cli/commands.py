"""
CLI commands using the application layer use cases.

This module provides the CLI command implementations that wire up
the infrastructure adapters to the application use cases.
"""

import click
from rich.console import Console
from rich.markup import escape

from elblog.application import ParseLogsUseCase, ShipLogsUseCase
from elblog.codecs import serialize_events
from elblog.core.config import LOGGLY_URL_BASE, PRIVATE_URL_PARAMS_TAG, parse_redaction_rules
from elblog.core.exceptions import ELBLogError
from elblog.core.models import RunSummary
from elblog.infrastructure import (
    CompressedFileSource,
    StdinByteSource,
    StreamSink,
    HttpBulkSink,
    JsonTagFileLookup,
    StaticTagLookup,
)
from elblog.cli.output import render_summary

__all__ = ["create_source", "parse_command", "ship_command"]


def create_source(file_path: str | None):
    """
    Create appropriate source adapter for the input.

    Args:
        file_path: Path to file, or None / "-" for stdin

    Returns:
        Source adapter instance
    """
    if file_path is None or file_path == "-":
        return StdinByteSource()
    return CompressedFileSource(file_path)


def parse_command(
    file_path: str,
    output_path: str | None,
    private_params: str | None,
    error_console: Console,
) -> int:
    """
    Execute the parse command: decompress and parse locally.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    try:
        source = create_source(file_path)
        rules = parse_redaction_rules(private_params)
        use_case = ParseLogsUseCase(source, redaction_rules=rules)

        with click.open_file(output_path or "-", "wb") as stream:
            sink = StreamSink(stream, name=output_path or "<stdout>")
            sink.send(serialize_events(use_case.execute()))

    except FileNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1
    except ELBLogError as e:
        error_console.print(f"[red]Parse error in {escape(file_path)}:[/red] {escape(e.message)}", soft_wrap=True)
        return 1

    summary = RunSummary(
        source=use_case.context.source,
        destination=sink.destination,
        events_parsed=use_case.context.events_parsed,
        errors=use_case.context.errors,
        skipped_lines=use_case.context.skipped_lines,
    )
    render_summary(summary, error_console)
    return 0


def ship_command(
    file_path: str,
    token: str | None,
    tag: str | None,
    tags_file: str | None,
    private_params: str | None,
    base_url: str | None,
    timeout: float | None,
    quiet: bool,
    console: Console,
    error_console: Console,
) -> int:
    """
    Execute the ship command: parse and post to the bulk endpoint.

    Returns:
        Exit code
    """
    overrides = {PRIVATE_URL_PARAMS_TAG: private_params} if private_params else {}
    if tags_file:
        tag_lookup = JsonTagFileLookup(tags_file, overrides=overrides)
    elif overrides:
        tag_lookup = StaticTagLookup(overrides)
    else:
        tag_lookup = None

    try:
        use_case = ShipLogsUseCase(
            source=create_source(file_path),
            sink_factory=lambda config: HttpBulkSink(config.endpoint_url, timeout=timeout),
            tag_lookup=tag_lookup,
            default_token=token,
            default_tag=tag,
            base_url=base_url or LOGGLY_URL_BASE,
        )
        summary = use_case.execute()
    except FileNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1
    except ELBLogError as e:
        error_console.print(f"[red]Unable to ship {escape(file_path)}:[/red] {escape(e.message)}", soft_wrap=True)
        return 1

    if not quiet:
        render_summary(summary, console)
    return 0
