"""markupkit CLI entry point: Click group with subcommands."""

import logging

import click

from markupkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="markupkit")
@click.option("-v", "--verbose", is_flag=True, help="Log parser diagnostics to stderr.")
def cli(verbose: bool) -> None:
    """markupkit - tokenize and parse HTML and CSS files."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from markupkit.cli.html import html_parse, html_tokenize  # noqa: E402
from markupkit.cli.css import css_parse, css_tokenize  # noqa: E402
from markupkit.cli.analyze import analyze  # noqa: E402
from markupkit.cli.demo import demo  # noqa: E402

cli.add_command(html_tokenize)
cli.add_command(html_parse)
cli.add_command(css_tokenize)
cli.add_command(css_parse)
cli.add_command(analyze)
cli.add_command(demo)
