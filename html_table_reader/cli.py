"""Command-line interface for HTML Table Reader."""

import sys
import click
import logging
from itertools import islice
from typing import Optional

from . import __version__
from .config import load_config
from .errors import TableReaderError
from .formatters import FORMATTERS, get_formatter
from .logging_utils import setup_logging
from .reader import TableReader

selector_option = click.option(
    "--selector", "-s", default=None, help="CSS selector identifying the table"
)
index_option = click.option(
    "--index", "-i", type=int, default=None, help="Position among the selector's matches"
)
format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(FORMATTERS)),
    default="table",
    show_default=True,
    help="Output format",
)


@click.group()
@click.option(
    "--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)"
)
@click.option(
    "--config", "--config-file", help="Path to configuration file (YAML or JSON)"
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, log_level: Optional[str], config: Optional[str]):
    """HTML Table Reader - extract a data table from a web page or file."""
    ctx.ensure_object(dict)

    try:
        app_config = load_config(config_file=config)
        # CLI flag overrides config
        setup_logging(log_level or app_config.log_level)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    ctx.obj["config"] = app_config


def _open_reader(ctx, location: str, selector: Optional[str], index: Optional[int]) -> TableReader:
    return TableReader(location, selector=selector, index=index, config=ctx.obj["config"])


@cli.command()
@click.argument("location")
@selector_option
@index_option
@format_option
@click.pass_context
def headings(ctx, location: str, selector: Optional[str], index: Optional[int], output_format: str):
    """Show the column headings of the table at LOCATION."""
    logger = logging.getLogger(__name__)
    formatter = get_formatter(output_format)

    try:
        with _open_reader(ctx, location, selector, index) as reader:
            names = reader.heading_names()
    except TableReaderError as e:
        logger.debug(f"Reading headings failed: {e!r}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(formatter.format_headings(names))


@cli.command()
@click.argument("location")
@selector_option
@index_option
@format_option
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None, help="Maximum number of rows to show")
@click.pass_context
def rows(
    ctx,
    location: str,
    selector: Optional[str],
    index: Optional[int],
    output_format: str,
    limit: Optional[int],
):
    """Show the rows of the table at LOCATION."""
    logger = logging.getLogger(__name__)
    formatter = get_formatter(output_format)

    try:
        with _open_reader(ctx, location, selector, index) as reader:
            names = reader.heading_names()
            data = list(islice(reader.data_rows(), limit))
    except TableReaderError as e:
        logger.debug(f"Reading rows failed: {e!r}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info(f"Read {len(data)} rows from {location}")
    click.echo(formatter.format_rows(names, data))


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
