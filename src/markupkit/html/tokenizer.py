"""Hand-written HTML tokenizer.

Turns markup into a lazy stream of :mod:`markupkit.html.tokens`. The
tokenizer never fails: unterminated comments, doctypes, tags and quoted
attribute values run to the end of input and are reported as diagnostics.

Example:
    >>> list(tokenize_html("<div>Hello</div>"))
    [StartTag(name='div', attributes=(), self_closing=False), Text(data='Hello'), EndTag(name='div')]
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from markupkit.diagnostics import Reporter
from markupkit.html.tokens import Comment, Doctype, EndTag, HtmlToken, StartTag, Text
from markupkit.model.diagnostic import Severity

__all__ = ["HtmlTokenizer", "tokenize_html"]

log = logging.getLogger("markupkit.html")


def _is_tag_name_char(char: str) -> bool:
    return char.isalnum() or char == "-" or char == "_"


def _is_attribute_name_char(char: str) -> bool:
    return char.isalnum() or char in ("-", "_", ":")


def _is_unquoted_value_char(char: str) -> bool:
    return not char.isspace() and char != ">" and char != "/"


class HtmlTokenizer:
    """Forward-only iterator of HTML tokens over a source string.

    Positions are indexes into the ``str``, so a multi-byte character is
    always consumed whole.
    """

    def __init__(self, source: str, reporter: Reporter | None = None) -> None:
        self._source = source
        self._pos = 0
        self._reporter = reporter or Reporter(source, log)
        self.token_start = 0

    @property
    def diagnostics(self):
        return self._reporter.diagnostics

    def __iter__(self) -> HtmlTokenizer:
        return self

    def __next__(self) -> HtmlToken:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def iter_with_offsets(self) -> Iterator[tuple[int, HtmlToken]]:
        """Yield ``(offset, token)`` pairs, offset being where the token starts."""
        for token in self:
            yield self.token_start, token

    # -- cursor helpers ------------------------------------------------------

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

    def _skip_whitespace(self) -> None:
        self._consume_while(str.isspace)

    def _consume_until(self, terminator: str, code: str, what: str) -> str:
        """Consume up to *terminator*, stepping over it; run to EOF if absent."""
        start = self._pos
        end = self._source.find(terminator, start)
        if end == -1:
            self._pos = len(self._source)
            self._reporter.report(
                code,
                Severity.ERROR,
                f"Unterminated {what} runs to end of input",
                offset=self.token_start,
            )
            return self._source[start:]
        self._pos = end + len(terminator)
        return self._source[start:end]

    # -- tokens --------------------------------------------------------------

    def next_token(self) -> HtmlToken | None:
        """Return the next token, or None once the input is exhausted."""
        self._skip_whitespace()
        char = self._char()
        if char is None:
            return None
        self.token_start = self._pos

        if char != "<":
            return Text(self._consume_while(lambda c: c != "<"))

        self._pos += 1  # '<'
        if self._char() == "!":
            self._pos += 1
            if self._source.startswith("--", self._pos):
                self._pos += 2
                return Comment(self._consume_until("-->", "unterminated-comment", "comment"))
            return Doctype(self._consume_until(">", "unterminated-doctype", "doctype"))

        if self._char() == "/":
            self._pos += 1
            name = self._consume_while(_is_tag_name_char)
            # Never skip past the next '<', it starts the following token.
            self._consume_while(lambda c: c != ">" and c != "<")
            if self._char() == ">":
                self._pos += 1
            else:
                self._reporter.report(
                    "unterminated-tag",
                    Severity.ERROR,
                    f"End tag </{name}> is missing its closing '>'",
                    offset=self.token_start,
                )
            return EndTag(name)

        return self._consume_start_tag()

    def _consume_start_tag(self) -> StartTag:
        name = self._consume_while(_is_tag_name_char)
        attributes = self._consume_attributes()

        self_closing = False
        if self._char() == "/":
            self_closing = True
            self._pos += 1

        if self._char() == ">":
            self._pos += 1
        else:
            self._reporter.report(
                "unterminated-tag",
                Severity.ERROR,
                f"Start tag <{name}> is missing its closing '>'",
                offset=self.token_start,
            )
        return StartTag(name=name, attributes=attributes, self_closing=self_closing)

    def _consume_attributes(self) -> tuple[tuple[str, str], ...]:
        attributes: list[tuple[str, str]] = []
        while True:
            char = self._char()
            if char is None or char == ">" or char == "/":
                break
            self._skip_whitespace()
            char = self._char()
            if char is None or char == ">" or char == "/":
                break

            name = self._consume_while(_is_attribute_name_char)
            if not name:
                break

            self._skip_whitespace()
            value = ""
            if self._char() == "=":
                self._pos += 1
                value = self._consume_attribute_value()
            # Duplicates are kept; the parser decides which one wins.
            attributes.append((name, value))
        return tuple(attributes)

    def _consume_attribute_value(self) -> str:
        self._skip_whitespace()
        quote = self._char()
        if quote == '"' or quote == "'":
            start = self._pos
            self._pos += 1
            end = self._source.find(quote, self._pos)
            if end == -1:
                value = self._source[self._pos:]
                self._pos = len(self._source)
                self._reporter.report(
                    "unterminated-attribute-value",
                    Severity.ERROR,
                    "Quoted attribute value runs to end of input",
                    offset=start,
                )
                return value
            value = self._source[self._pos:end]
            self._pos = end + 1
            return value
        return self._consume_while(_is_unquoted_value_char)


def tokenize_html(source: str) -> Iterator[HtmlToken]:
    """Return a lazy token stream over *source*.

    Iterating twice requires calling this again; the stream is not restartable.
    """
    return HtmlTokenizer(source)
