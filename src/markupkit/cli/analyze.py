"""CLI command: markupkit analyze -- compare a page's <style> rules to its markup."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from markupkit.analysis import analyze_document, extract_style_text
from markupkit.cli.render import render_node
from markupkit.html import parse_html_document


def _names(values: set[str]) -> str:
    return ", ".join(sorted(values)) or "-"


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--tree/--no-tree", default=False, help="Also print the document tree.")
def analyze(file: str, tree: bool) -> None:
    """Parse an HTML file, parse its embedded CSS, and report selector usage.

    Shows which tags, classes and ids the stylesheet targets, which of them
    appear in the document, and which classes and ids are unused.
    """
    source = Path(file).read_text(encoding="utf-8")
    document = parse_html_document(source)
    if document is None:
        click.echo("No HTML element found", err=True)
        sys.exit(1)

    click.echo(f"Document: <{document.tag_name}> with {len(document.children)} child(ren)")
    if not extract_style_text(document):
        click.echo("No <style> content found")
        return

    report = analyze_document(document)
    click.echo(f"Stylesheet: {len(report.rules)} rule(s)")
    for index, rule in enumerate(report.rules, start=1):
        click.echo(
            f"  Rule {index}: {len(rule.selectors)} selector(s), "
            f"{len(rule.declarations)} declaration(s)"
        )
    click.echo()

    click.echo("Document uses:")
    click.echo(f"  Tags:    {_names(report.document.tags)}")
    click.echo(f"  Classes: {_names(report.document.classes)}")
    click.echo(f"  IDs:     {_names(report.document.ids)}")
    click.echo("Stylesheet targets:")
    click.echo(f"  Tags:    {_names(report.stylesheet.tags)}")
    click.echo(f"  Classes: {_names(report.stylesheet.classes)}")
    click.echo(f"  IDs:     {_names(report.stylesheet.ids)}")
    click.echo("Matches:")
    click.echo(f"  Tags:    {_names(report.matching_tags)}")
    click.echo(f"  Classes: {_names(report.matching_classes)}")
    click.echo(f"  IDs:     {_names(report.matching_ids)}")
    if report.unused_classes:
        click.echo(f"Unused classes: {_names(report.unused_classes)}")
    if report.unused_ids:
        click.echo(f"Unused IDs: {_names(report.unused_ids)}")

    if tree:
        click.echo()
        for line in render_node(document):
            click.echo(line)
