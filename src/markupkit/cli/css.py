"""CLI commands: markupkit css-tokenize / css-parse."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from markupkit.cli.html import format_parse_error
from markupkit.cli.render import css_report, diagnostics_report, token_listing
from markupkit.config import ParserConfig
from markupkit.css import CssParser, tokenize_css
from markupkit.errors import ParseError


@click.command("css-tokenize")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def css_tokenize(file: str) -> None:
    """Print the token stream of a CSS file."""
    source = Path(file).read_text(encoding="utf-8")
    for line in token_listing("CSS Tokenization", tokenize_css(source)):
        click.echo(line)


@click.command("css-parse")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Fail on the first malformed construct.")
@click.option(
    "--diagnostics", "show_diagnostics", is_flag=True, help="List recovered problems."
)
def css_parse(file: str, strict: bool, show_diagnostics: bool) -> None:
    """Parse a CSS file and print its rules."""
    source = Path(file).read_text(encoding="utf-8")

    try:
        parser = CssParser(source, ParserConfig(strict=strict))
        rules = parser.parse()
    except ParseError as exc:
        click.echo(format_parse_error(exc), err=True)
        sys.exit(1)

    click.echo("=== CSS Parsing ===")
    for line in css_report(rules):
        click.echo(line)

    if show_diagnostics:
        for line in diagnostics_report(parser.diagnostics):
            click.echo(line)
