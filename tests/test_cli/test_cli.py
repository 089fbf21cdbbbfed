"""Tests for the markupkit CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from markupkit import __version__
from markupkit.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = _run("--help")
        assert result.exit_code == 0
        for name in ("html-tokenize", "html-parse", "css-tokenize", "css-parse", "analyze", "demo"):
            assert name in result.output

    def test_version(self) -> None:
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_file(self) -> None:
        result = _run("html-parse", str(FIXTURES / "nope.html"))
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# HTML commands
# ---------------------------------------------------------------------------


class TestHtmlCommands:
    def test_tokenize(self) -> None:
        result = _run("html-tokenize", str(FIXTURES / "page.html"))
        assert result.exit_code == 0
        assert "=== HTML Tokenization ===" in result.output
        assert "1: Doctype(data='DOCTYPE html')" in result.output
        assert "Total tokens:" in result.output

    def test_parse(self) -> None:
        result = _run("html-parse", str(FIXTURES / "page.html"))
        assert result.exit_code == 0
        assert "Parsed HTML document:" in result.output
        assert '<div class="header">' in result.output
        assert "</html>" in result.output

    def test_parse_deeply_nested(self, tmp_path: Path) -> None:
        depth = 5000
        page = tmp_path / "deep.html"
        page.write_text("<div>" * depth + "leaf" + "</div>" * depth, encoding="utf-8")
        result = _run("html-parse", str(page))
        assert result.exit_code == 0, result.output[-200:]
        assert result.output.count("<div>") == depth
        assert result.output.count("</div>") == depth
        assert "leaf" in result.output

    def test_parse_without_elements(self, tmp_path: Path) -> None:
        page = tmp_path / "text.html"
        page.write_text("just text", encoding="utf-8")
        result = _run("html-parse", str(page))
        assert result.exit_code == 0
        assert "No element found in input" in result.output
        assert "just text" in result.output

    def test_diagnostics(self) -> None:
        result = _run("html-parse", "--diagnostics", str(FIXTURES / "broken.html"))
        assert result.exit_code == 0
        assert "unterminated-comment" in result.output
        assert "unclosed-element" in result.output

    def test_strict_fails(self) -> None:
        result = _run("html-parse", "--strict", str(FIXTURES / "broken.html"))
        assert result.exit_code == 1
        assert "Parse error:" in result.output
        assert "line 3" in result.output


# ---------------------------------------------------------------------------
# CSS commands
# ---------------------------------------------------------------------------


class TestCssCommands:
    def test_tokenize(self) -> None:
        result = _run("css-tokenize", str(FIXTURES / "styles.css"))
        assert result.exit_code == 0
        assert "Comment(value=' Site styles ')" in result.output
        assert "Ident(value='body')" in result.output

    def test_parse(self) -> None:
        result = _run("css-parse", str(FIXTURES / "styles.css"))
        assert result.exit_code == 0
        assert "Parsed 4 CSS rule(s):" in result.output
        assert "Class: .box" in result.output
        assert "font-size: 14px" in result.output
        assert "color: #333 !important" in result.output
        assert 'font-family: "Helvetica Neue" Arial sans-serif' in result.output

    def test_diagnostics_none(self) -> None:
        result = _run("css-parse", "--diagnostics", str(FIXTURES / "styles.css"))
        assert "Diagnostics: none" in result.output

    def test_strict_fails(self) -> None:
        result = _run("css-parse", "--strict", str(FIXTURES / "broken.css"))
        assert result.exit_code == 1
        assert "Parse error:" in result.output

    def test_lenient_drops_bad_declaration(self) -> None:
        result = _run("css-parse", str(FIXTURES / "broken.css"))
        assert result.exit_code == 0
        assert "margin: 0" in result.output
        assert "color red" not in result.output


# ---------------------------------------------------------------------------
# analyze / demo
# ---------------------------------------------------------------------------


class TestAnalyzeCommand:
    def test_report(self) -> None:
        result = _run("analyze", str(FIXTURES / "page.html"))
        assert result.exit_code == 0
        assert "Stylesheet: 6 rule(s)" in result.output
        assert "Unused classes: unused" in result.output
        assert "Unused IDs: missing" in result.output

    def test_tree_option(self) -> None:
        result = _run("analyze", "--tree", str(FIXTURES / "page.html"))
        assert '<div id="footer">' in result.output

    def test_tree_deeply_nested(self, tmp_path: Path) -> None:
        depth = 5000
        page = tmp_path / "deep.html"
        page.write_text(
            "<html><style>div { x: y; }</style>"
            + "<div>" * depth
            + "leaf"
            + "</div>" * depth
            + "</html>",
            encoding="utf-8",
        )
        result = _run("analyze", "--tree", str(page))
        assert result.exit_code == 0
        assert "Stylesheet: 1 rule(s)" in result.output
        assert "leaf" in result.output

    def test_no_style(self, tmp_path: Path) -> None:
        page = tmp_path / "plain.html"
        page.write_text("<html><body></body></html>", encoding="utf-8")
        result = _run("analyze", str(page))
        assert result.exit_code == 0
        assert "No <style> content found" in result.output

    def test_no_element(self, tmp_path: Path) -> None:
        page = tmp_path / "empty.html"
        page.write_text("<!-- nothing -->", encoding="utf-8")
        result = _run("analyze", str(page))
        assert result.exit_code == 1


class TestDemoCommand:
    def test_demo(self) -> None:
        result = _run("demo")
        assert result.exit_code == 0
        assert "HTML Demo:" in result.output
        assert '<h1 id="title">' in result.output
        assert "Parsed 3 CSS rule(s):" in result.output
        assert "max-width: 800px" in result.output


@pytest.mark.parametrize("flag", ["-v", "--verbose"])
def test_verbose_flag_accepted(flag: str) -> None:
    result = _run(flag, "demo")
    assert result.exit_code == 0
