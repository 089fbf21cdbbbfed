"""CLI command: markupkit demo -- run both parsers on built-in samples."""

from __future__ import annotations

import click

from markupkit.cli.render import css_report, html_report
from markupkit.css import parse_css
from markupkit.html import parse_html

DEMO_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>Demo Page</title>
</head>
<body>
    <div class="container">
        <h1 id="title">Hello World</h1>
        <p>This is a <strong>demo</strong> page.</p>
    </div>
</body>
</html>"""

DEMO_CSS = """body {
    font-family: Arial, sans-serif;
    margin: 0;
}

.container {
    max-width: 800px;
    margin: 0 auto;
    padding: 20px;
}

#title {
    color: #333;
    font-size: 2em;
}"""


@click.command()
def demo() -> None:
    """Parse a built-in HTML page and stylesheet and print the results."""
    click.echo("=== HTML & CSS Parser Demo ===")
    click.echo()
    click.echo("HTML Demo:")
    for line in html_report(parse_html(DEMO_HTML)):
        click.echo(line)

    click.echo()
    click.echo("=" * 50)
    click.echo()

    click.echo("CSS Demo:")
    for line in css_report(parse_css(DEMO_CSS)):
        click.echo(line)
