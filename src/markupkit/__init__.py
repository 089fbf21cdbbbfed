"""markupkit - lenient HTML and CSS tokenizers and parsers."""

__version__ = "0.1.0"

from markupkit.config import ParserConfig  # noqa: E402
from markupkit.css import (  # noqa: E402
    CssParser,
    CssTokenizer,
    Declaration,
    Rule,
    Selector,
    SelectorKind,
    parse_css,
    tokenize_css,
)
from markupkit.errors import ParseError  # noqa: E402
from markupkit.html import (  # noqa: E402
    CommentNode,
    Element,
    HtmlParser,
    HtmlTokenizer,
    Node,
    TextNode,
    parse_html,
    parse_html_document,
    tokenize_html,
)
from markupkit.model import Diagnostic, Severity  # noqa: E402

__all__ = [
    "__version__",
    # html
    "tokenize_html",
    "parse_html",
    "parse_html_document",
    "HtmlTokenizer",
    "HtmlParser",
    "Element",
    "TextNode",
    "CommentNode",
    "Node",
    # css
    "tokenize_css",
    "parse_css",
    "CssTokenizer",
    "CssParser",
    "Selector",
    "SelectorKind",
    "Declaration",
    "Rule",
    # shared
    "ParserConfig",
    "ParseError",
    "Diagnostic",
    "Severity",
]
