"""CSS pipeline: tokenizer, stylesheet model, and parser."""

from markupkit.css.model import Declaration, Rule, Selector, SelectorKind
from markupkit.css.parser import CssParser, format_number, parse_css, render_value_token
from markupkit.css.tokenizer import CssTokenizer, tokenize_css
from markupkit.css.tokens import (
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

__all__ = [
    # tokens
    "Ident",
    "String",
    "Number",
    "Dimension",
    "Percentage",
    "Hash",
    "Delim",
    "Comment",
    "AtKeyword",
    "Symbol",
    "CssToken",
    # model
    "Selector",
    "SelectorKind",
    "Declaration",
    "Rule",
    # pipeline
    "CssTokenizer",
    "tokenize_css",
    "CssParser",
    "parse_css",
    "format_number",
    "render_value_token",
]
