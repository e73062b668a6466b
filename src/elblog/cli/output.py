"""
Output helpers for the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from elblog.core.models import COLUMNS, NUMERIC_COLUMNS, RunSummary

__all__ = ["configure_logging", "render_summary", "render_columns"]


def configure_logging(console: Console, verbose: bool = False, quiet: bool = False) -> None:
    """
    Route the package's log records to a rich handler.

    Args:
        console: Console the handler writes to (normally stderr)
        verbose: Show debug messages
        quiet: Only show warnings and errors
    """
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING

    logger = logging.getLogger("elblog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def render_summary(summary: RunSummary, console: Console) -> None:
    """Render a run summary."""
    if summary.skipped_empty_input:
        console.print(f"[yellow]{escape(summary.message())}[/yellow]", soft_wrap=True)
        return

    console.print(f"[green]{escape(summary.message())}[/green]", soft_wrap=True)
    if summary.errors:
        console.print(f"[yellow]{summary.errors} lines did not match the column layout[/yellow]")


def render_columns(console: Console) -> None:
    """Render the output schema as a table."""
    table = Table(title="ELB Event Columns")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Column", style="cyan")
    table.add_column("Type", style="green")

    for index, name in enumerate(COLUMNS):
        kind = "number" if index in NUMERIC_COLUMNS else "string"
        table.add_row(str(index), name, kind)

    console.print(table)
