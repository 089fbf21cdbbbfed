"""Hand-written parser for CSS stylesheets.

Syntax example:
    h1, h2 { font-weight: bold; }
    .box { color: red; font-size: 14px; }
    #main { margin: 0 auto !important; }

Only simple selectors (type, class, id, universal) are recognised. Anything
that does not start a rule or a declaration is skipped one token at a time,
so a malformed construct drops out without aborting the rest of the sheet.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from markupkit.config import DEFAULT_CONFIG, ParserConfig
from markupkit.css.model import Declaration, Rule, Selector
from markupkit.css.tokenizer import CssTokenizer
from markupkit.css.tokens import (
    Comment,
    CssToken,
    Delim,
    Dimension,
    Hash,
    Ident,
    Number,
    Percentage,
    String,
    Symbol,
)
from markupkit.diagnostics import Reporter
from markupkit.model.diagnostic import Diagnostic, Severity

__all__ = ["CssParser", "parse_css", "format_number", "render_value_token"]

log = logging.getLogger("markupkit.css")

_IMPORTANT = Ident("important")


def format_number(value: float) -> str:
    """Render *value* as plain decimal text: ``14`` for 14.0, ``0.5`` for 0.5."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def render_value_token(token: CssToken) -> str | None:
    """Return the declaration-value text for *token*, or None to skip it."""
    if isinstance(token, Ident):
        return token.value
    if isinstance(token, String):
        return f'"{token.value}"'
    if isinstance(token, Number):
        return format_number(token.value)
    if isinstance(token, Dimension):
        return f"{format_number(token.value)}{token.unit}"
    if isinstance(token, Percentage):
        return f"{format_number(token.value)}%"
    if isinstance(token, Hash):
        return f"#{token.value}"
    if isinstance(token, Delim):
        return token.value
    return None


class CssParser:
    """Parser over the whitespace-free token list of a stylesheet."""

    def __init__(self, source: str, config: ParserConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._source = source
        self._reporter = Reporter(source, log, strict=self.config.strict)
        self._tokens: list[CssToken] = []
        self._offsets: list[int] = []
        for offset, token in CssTokenizer(source, self._reporter).iter_with_offsets():
            if token is Symbol.WHITESPACE:
                continue
            self._offsets.append(offset)
            self._tokens.append(token)
        self._pos = 0

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._reporter.diagnostics

    @property
    def tokens(self) -> list[CssToken]:
        return list(self._tokens)

    def parse(self) -> list[Rule]:
        """Parse the remaining tokens into rules, in source order."""
        rules: list[Rule] = []
        while self._pos < len(self._tokens):
            rule = self._parse_rule()
            if rule is not None:
                rules.append(rule)
                continue
            token = self._current()
            if token is not None:
                if not isinstance(token, Comment):
                    self._reporter.report(
                        "skipped-token",
                        Severity.WARNING,
                        f"Skipped {_describe(token)} outside of a rule",
                        offset=self._offset(),
                    )
                self._advance()
        log.debug("Parsed %d rule(s) from %d token(s)", len(rules), len(self._tokens))
        return rules

    # -- cursor helpers ------------------------------------------------------

    def _current(self) -> CssToken | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _offset(self) -> int:
        if self._pos < len(self._offsets):
            return self._offsets[self._pos]
        return len(self._source)

    def _advance(self) -> None:
        if self._pos < len(self._tokens):
            self._pos += 1

    # -- grammar -------------------------------------------------------------

    def _parse_selector(self) -> Selector | None:
        token = self._current()
        if isinstance(token, Ident):
            self._advance()
            return Selector.type_(token.value)
        if isinstance(token, Hash):
            self._advance()
            return Selector.id_(token.value)
        if token == Delim("."):
            self._advance()
            name = self._current()
            if isinstance(name, Ident):
                self._advance()
                return Selector.class_(name.value)
            return None
        if token == Delim("*"):
            self._advance()
            return Selector.universal()
        return None

    def _parse_selector_list(self) -> list[Selector]:
        selectors: list[Selector] = []
        while True:
            selector = self._parse_selector()
            if selector is None:
                break
            selectors.append(selector)
            if self._current() is Symbol.COMMA:
                self._advance()
            else:
                break
        return selectors

    def _parse_rule(self) -> Rule | None:
        selectors = self._parse_selector_list()
        if not selectors:
            return None
        if self._current() is not Symbol.LEFT_BRACE:
            return None
        block_offset = self._offset()
        self._advance()

        declarations: list[Declaration] = []
        while self._pos < len(self._tokens) and self._current() is not Symbol.RIGHT_BRACE:
            start = self._pos
            declaration = self._parse_declaration()
            if declaration is not None:
                declarations.append(declaration)
                continue
            token = self._current()
            if self._pos == start and token is not None and not isinstance(token, Comment):
                self._reporter.report(
                    "skipped-token",
                    Severity.WARNING,
                    f"Skipped {_describe(token)} inside a declaration block",
                    offset=self._offset(),
                )
            self._advance()

        if self._current() is Symbol.RIGHT_BRACE:
            self._advance()
        else:
            self._reporter.report(
                "unclosed-block",
                Severity.WARNING,
                "Declaration block is not closed before end of input",
                offset=block_offset,
            )
        return Rule(selectors=selectors, declarations=declarations)

    def _parse_declaration(self) -> Declaration | None:
        token = self._current()
        if not isinstance(token, Ident):
            return None
        property_offset = self._offset()
        self._advance()

        if self._current() is not Symbol.COLON:
            self._reporter.report(
                "dropped-declaration",
                Severity.ERROR,
                f"Declaration '{token.value}' is missing ':' and was dropped",
                offset=property_offset,
            )
            return None
        self._advance()

        parts: list[str] = []
        important = False
        while True:
            current = self._current()
            if current is None or current is Symbol.SEMICOLON or current is Symbol.RIGHT_BRACE:
                break
            if current == Delim("!"):
                bang_offset = self._offset()
                self._advance()
                if self._current() == _IMPORTANT:
                    important = True
                    self._advance()
                else:
                    self._reporter.report(
                        "stray-bang",
                        Severity.WARNING,
                        "'!' not followed by 'important' was dropped",
                        offset=bang_offset,
                    )
                continue
            text = render_value_token(current)
            if text is not None:
                parts.append(text)
            self._advance()

        if len(parts) == 1:
            value = parts[0]
        else:
            value = " ".join(parts).strip()

        if self._current() is Symbol.SEMICOLON:
            self._advance()
        return Declaration(property=token.value, value=value, important=important)


def _describe(token: CssToken) -> str:
    if isinstance(token, Symbol):
        return f"'{token.value}'"
    return type(token).__name__


def parse_css(source: str, config: ParserConfig | None = None) -> list[Rule]:
    """Parse a stylesheet string into its rules, in source order."""
    return CssParser(source, config).parse()
