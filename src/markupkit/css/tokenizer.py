"""Hand-written CSS tokenizer.

Produces a lazy stream of :mod:`markupkit.css.tokens`. Whitespace runs are
kept as :attr:`Symbol.WHITESPACE` so that callers who care about adjacency
can see them; the parser filters them out.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from markupkit.css.tokens import (
    PUNCTUATION,
    AtKeyword,
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
from markupkit.model.diagnostic import Severity

__all__ = ["CssTokenizer", "tokenize_css"]

log = logging.getLogger("markupkit.css")

_WHITESPACE_START = frozenset(" \t\n\r")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_number_char(char: str) -> bool:
    return _is_digit(char) or char == "."


def _is_ident_char(char: str) -> bool:
    return char.isalnum() or char == "-" or char == "_"


class CssTokenizer:
    """Forward-only iterator of CSS tokens over a source string."""

    def __init__(self, source: str, reporter: Reporter | None = None) -> None:
        self._source = source
        self._pos = 0
        self._reporter = reporter or Reporter(source, log)
        self.token_start = 0

    @property
    def diagnostics(self):
        return self._reporter.diagnostics

    def __iter__(self) -> CssTokenizer:
        return self

    def __next__(self) -> CssToken:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def iter_with_offsets(self) -> Iterator[tuple[int, CssToken]]:
        """Yield ``(offset, token)`` pairs, offset being where the token starts."""
        for token in self:
            yield self.token_start, token

    def _char(self, ahead: int = 0) -> str | None:
        index = self._pos + ahead
        if index < len(self._source):
            return self._source[index]
        return None

    def _consume_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._pos
        end = len(self._source)
        while self._pos < end and predicate(self._source[self._pos]):
            self._pos += 1
        return self._source[start:self._pos]

    def next_token(self) -> CssToken | None:
        """Return the next token, or None once the input is exhausted."""
        char = self._char()
        if char is None:
            return None
        self.token_start = self._pos

        if char in _WHITESPACE_START:
            self._consume_while(str.isspace)
            return Symbol.WHITESPACE
        if char == "/" and self._char(1) == "*":
            return self._consume_comment()
        if char == '"' or char == "'":
            return self._consume_string(char)
        if char == "#":
            self._pos += 1
            return Hash(self._consume_while(_is_ident_char))
        if char == "@":
            self._pos += 1
            return AtKeyword(self._consume_while(_is_ident_char))
        if char in PUNCTUATION:
            self._pos += 1
            return PUNCTUATION[char]
        if _is_digit(char):
            return self._consume_numeric()
        if char.isalpha() or char == "-" or char == "_":
            return Ident(self._consume_while(_is_ident_char))

        self._pos += 1
        return Delim(char)

    def _consume_comment(self) -> Comment:
        self._pos += 2  # '/*'
        start = self._pos
        end = self._source.find("*/", start)
        if end == -1:
            self._pos = len(self._source)
            self._reporter.report(
                "unterminated-comment",
                Severity.ERROR,
                "Unterminated comment runs to end of input",
                offset=self.token_start,
            )
            return Comment(self._source[start:])
        self._pos = end + 2
        return Comment(self._source[start:end])

    def _consume_string(self, quote: str) -> String:
        self._pos += 1
        chars: list[str] = []
        while True:
            char = self._char()
            if char is None:
                self._reporter.report(
                    "unterminated-string",
                    Severity.ERROR,
                    "Unterminated string runs to end of input",
                    offset=self.token_start,
                )
                break
            self._pos += 1
            if char == quote:
                break
            if char == "\\":
                # The escaped character is taken literally, no hex decoding.
                escaped = self._char()
                if escaped is not None:
                    chars.append(escaped)
                    self._pos += 1
                continue
            chars.append(char)
        return String("".join(chars))

    def _consume_numeric(self) -> Number | Dimension | Percentage:
        text = self._consume_while(_is_number_char)
        try:
            value = float(text)
        except ValueError:
            self._reporter.report(
                "malformed-number",
                Severity.ERROR,
                f"Cannot parse number {text!r}, using 0",
                offset=self.token_start,
            )
            value = 0.0

        char = self._char()
        if char == "%":
            self._pos += 1
            return Percentage(value)
        if char is not None and char.isalpha():
            return Dimension(value, self._consume_while(_is_ident_char))
        return Number(value)


def tokenize_css(source: str) -> Iterator[CssToken]:
    """Return a lazy token stream over *source*."""
    return CssTokenizer(source)
