"""
Main CLI entry point for elblog.

Uses the application layer use cases and infrastructure adapters.
"""

import click
from rich.console import Console

from elblog import __version__
from elblog.cli.output import configure_logging

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="elblog")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages")
@click.pass_context
def cli(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    elblog - ELB access log shipper

    Decompress ELB access logs, normalize each line into a fixed set of
    named fields, and ship the events as newline-delimited JSON.

    Examples:

    \b
        elblog parse elb.log.gz
        elblog parse --private-params "token/4//sig/0" elb.log.gz
        elblog ship --token $LOGGLY_TOKEN --tag aws-elb elb.log.gz
        elblog ship --tags-file tags.json elb.log.gz
        elblog columns
    """
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["error_console"] = error_console
    configure_logging(error_console, verbose=verbose, quiet=quiet)


@cli.command()
@click.argument("file", type=click.Path(allow_dash=True))
@click.option(
    "--output", "-o", "output_path",
    type=click.Path(dir_okay=False, writable=True),
    help="Write events to a file instead of stdout"
)
@click.option(
    "--private-params", "-p",
    help="Query parameters to obscure, as name/maxLength//name/maxLength"
)
@click.pass_context
def parse(
    ctx: click.Context,
    file: str,
    output_path: str | None,
    private_params: str | None,
) -> None:
    """
    Parse a compressed ELB log and print newline-delimited JSON events.

    Pass "-" to read the compressed log from stdin.

    Examples:

    \b
        elblog parse elb.log.gz
        elblog parse -o events.ndjson elb.log.gz
        cat elb.log.gz | elblog parse -
    """
    from elblog.cli.commands import parse_command

    exit_code = parse_command(
        file_path=file,
        output_path=output_path,
        private_params=private_params,
        error_console=ctx.obj["error_console"],
    )
    ctx.exit(exit_code)


@cli.command()
@click.argument("file", type=click.Path(allow_dash=True))
@click.option(
    "--token", "-t", envvar="LOGGLY_TOKEN",
    help="Default customer token, used when the tags carry none"
)
@click.option(
    "--tag", envvar="LOGGLY_TAG",
    help="Default tag appended to the endpoint with the default token"
)
@click.option(
    "--tags-file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON tag set for the source (TagSet shape or flat object)"
)
@click.option(
    "--private-params", "-p",
    help="Query parameters to obscure (overrides the tags file)"
)
@click.option(
    "--base-url",
    help="Bulk endpoint prefix (default: Loggly bulk endpoint)"
)
@click.option(
    "--timeout", type=float,
    help="HTTP timeout in seconds"
)
@click.pass_context
def ship(
    ctx: click.Context,
    file: str,
    token: str | None,
    tag: str | None,
    tags_file: str | None,
    private_params: str | None,
    base_url: str | None,
    timeout: float | None,
) -> None:
    """
    Parse a compressed ELB log and post it to the bulk ingestion endpoint.

    Examples:

    \b
        elblog ship --token abc123 elb.log.gz
        LOGGLY_TOKEN=abc123 elblog ship --tag aws-elb elb.log.gz
        elblog ship --tags-file tags.json elb.log.gz
    """
    from elblog.cli.commands import ship_command

    exit_code = ship_command(
        file_path=file,
        token=token,
        tag=tag,
        tags_file=tags_file,
        private_params=private_params,
        base_url=base_url,
        timeout=timeout,
        quiet=ctx.obj.get("quiet", False),
        console=ctx.obj["console"],
        error_console=ctx.obj["error_console"],
    )
    ctx.exit(exit_code)


@cli.command()
@click.pass_context
def columns(ctx: click.Context) -> None:
    """
    List the output columns.

    Shows every field name of a parsed event and whether it is numeric.
    """
    from elblog.cli.output import render_columns

    render_columns(ctx.obj["console"])


if __name__ == "__main__":
    cli()
