"""HTML pipeline: tokenizer, tree model, and parser."""

from markupkit.html.nodes import CommentNode, Element, Node, TextNode, iter_elements, walk
from markupkit.html.parser import HtmlParser, parse_html, parse_html_document, select_document
from markupkit.html.tokenizer import HtmlTokenizer, tokenize_html
from markupkit.html.tokens import Comment, Doctype, EndTag, HtmlToken, StartTag, Text

__all__ = [
    # tokens
    "StartTag",
    "EndTag",
    "Text",
    "Comment",
    "Doctype",
    "HtmlToken",
    # tree
    "Element",
    "TextNode",
    "CommentNode",
    "Node",
    "walk",
    "iter_elements",
    # pipeline
    "HtmlTokenizer",
    "tokenize_html",
    "HtmlParser",
    "parse_html",
    "parse_html_document",
    "select_document",
]
