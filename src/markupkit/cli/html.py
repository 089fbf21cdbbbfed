"""CLI commands: markupkit html-tokenize / html-parse."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from markupkit.cli.render import diagnostics_report, html_report, token_listing
from markupkit.config import ParserConfig
from markupkit.errors import ParseError
from markupkit.html import HtmlParser, tokenize_html


def format_parse_error(exc: ParseError) -> str:
    if exc.line is None:
        return f"Parse error: {exc}"
    return f"Parse error: {exc} (line {exc.line}, column {exc.column})"


@click.command("html-tokenize")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def html_tokenize(file: str) -> None:
    """Print the token stream of an HTML file."""
    source = Path(file).read_text(encoding="utf-8")
    for line in token_listing("HTML Tokenization", tokenize_html(source)):
        click.echo(line)


@click.command("html-parse")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Fail on the first malformed construct.")
@click.option(
    "--diagnostics", "show_diagnostics", is_flag=True, help="List recovered problems."
)
def html_parse(file: str, strict: bool, show_diagnostics: bool) -> None:
    """Parse an HTML file and print its document tree.

    Exits with code 1 in --strict mode when the markup is malformed.
    """
    source = Path(file).read_text(encoding="utf-8")
    config = ParserConfig(strict=strict)

    try:
        parser = HtmlParser(source, config)
        nodes = parser.parse()
    except ParseError as exc:
        click.echo(format_parse_error(exc), err=True)
        sys.exit(1)

    click.echo("=== HTML Parsing ===")
    for line in html_report(nodes, config.document_tag):
        click.echo(line)

    if show_diagnostics:
        for line in diagnostics_report(parser.diagnostics):
            click.echo(line)
