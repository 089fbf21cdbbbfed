"""HTML parser: builds an element tree from the token stream.

The parser is lenient. Void and self-closing elements never take children;
an end tag that does not match the open element closes it implicitly and is
left for the enclosing element; stray end tags and doctypes are skipped.
Open elements are tracked on an explicit stack, so nesting depth is not
bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Sequence

from markupkit.config import DEFAULT_CONFIG, ParserConfig
from markupkit.diagnostics import Reporter
from markupkit.html.nodes import CommentNode, Element, Node, TextNode
from markupkit.html.tokenizer import HtmlTokenizer
from markupkit.html.tokens import Comment, EndTag, HtmlToken, StartTag, Text
from markupkit.model.diagnostic import Diagnostic, Severity

__all__ = ["HtmlParser", "parse_html", "parse_html_document", "select_document"]

log = logging.getLogger("markupkit.html")


def select_document(nodes: Sequence[Node], tag: str = "html") -> Element | None:
    """Pick the node that represents the document.

    Returns the first top-level element named *tag* (case-insensitive), else
    the first top-level element of any name, else None.
    """
    elements = [node for node in nodes if isinstance(node, Element)]
    for element in elements:
        if element.tag_name.lower() == tag.lower():
            return element
    return elements[0] if elements else None


class HtmlParser:
    """Recursive-descent style parser over a fully materialized token list."""

    def __init__(self, source: str, config: ParserConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._source = source
        self._reporter = Reporter(source, log, strict=self.config.strict)
        self._tokens: list[HtmlToken] = []
        self._offsets: list[int] = []
        for offset, token in HtmlTokenizer(source, self._reporter).iter_with_offsets():
            self._offsets.append(offset)
            self._tokens.append(token)
        self._pos = 0

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._reporter.diagnostics

    @property
    def tokens(self) -> list[HtmlToken]:
        return list(self._tokens)

    def is_void_element(self, tag_name: str) -> bool:
        return tag_name.lower() in self.config.void_elements

    # -- public API ----------------------------------------------------------

    def parse(self) -> list[Node]:
        """Parse the remaining tokens into top-level nodes."""
        nodes: list[Node] = []
        while self._pos < len(self._tokens):
            node = self._parse_node()
            if node is not None:
                nodes.append(node)
        log.debug(
            "Parsed %d top-level node(s) from %d token(s)", len(nodes), len(self._tokens)
        )
        return nodes

    def parse_document(self) -> Element | None:
        """Parse and return the document root (see :func:`select_document`)."""
        return select_document(self.parse(), self.config.document_tag)

    # -- internals -----------------------------------------------------------

    def _current(self) -> HtmlToken | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _offset(self) -> int:
        if self._pos < len(self._offsets):
            return self._offsets[self._pos]
        return len(self._source)

    def _is_complete(self, tag: StartTag) -> bool:
        return tag.self_closing or self.is_void_element(tag.name)

    def _parse_node(self) -> Node | None:
        offset = self._offset()
        token = self._tokens[self._pos]
        self._pos += 1

        if isinstance(token, StartTag):
            return self._parse_element(token, offset)
        if isinstance(token, Text):
            data = token.data.strip()
            return TextNode(data) if data else None
        if isinstance(token, Comment):
            return CommentNode(token.data)
        if isinstance(token, EndTag):
            self._reporter.report(
                "stray-end-tag",
                Severity.WARNING,
                f"End tag </{token.name}> has no open element",
                offset=offset,
            )
        return None

    def _parse_element(self, start: StartTag, offset: int) -> Element:
        root = Element(tag_name=start.name, attributes=dict(start.attributes))
        if self._is_complete(start):
            return root

        open_elements: list[tuple[Element, int]] = [(root, offset)]
        while open_elements:
            token = self._current()
            if token is None:
                for element, start_offset in reversed(open_elements):
                    self._reporter.report(
                        "unclosed-element",
                        Severity.WARNING,
                        f"Element <{element.tag_name}> is not closed before end of input",
                        offset=start_offset,
                    )
                break

            current = open_elements[-1][0]
            if isinstance(token, EndTag):
                if token.name == current.tag_name:
                    self._pos += 1
                else:
                    # Leave the token for the enclosing element.
                    self._reporter.report(
                        "mismatched-end-tag",
                        Severity.WARNING,
                        f"End tag </{token.name}> implicitly closes <{current.tag_name}>",
                        offset=self._offset(),
                    )
                open_elements.pop()
            elif isinstance(token, StartTag):
                child_offset = self._offset()
                self._pos += 1
                child = Element(tag_name=token.name, attributes=dict(token.attributes))
                current.children.append(child)
                if not self._is_complete(token):
                    open_elements.append((child, child_offset))
            elif isinstance(token, Text):
                self._pos += 1
                data = token.data.strip()
                if data:
                    current.children.append(TextNode(data))
            elif isinstance(token, Comment):
                self._pos += 1
                current.children.append(CommentNode(token.data))
            else:
                self._reporter.report(
                    "misplaced-doctype",
                    Severity.INFO,
                    f"Doctype inside <{current.tag_name}> ignored",
                    offset=self._offset(),
                )
                self._pos += 1
        return root


def parse_html(source: str, config: ParserConfig | None = None) -> list[Node]:
    """Parse *source* into its top-level nodes."""
    return HtmlParser(source, config).parse()


def parse_html_document(source: str, config: ParserConfig | None = None) -> Element | None:
    """Parse *source* and return the document root element, if any."""
    return HtmlParser(source, config).parse_document()
