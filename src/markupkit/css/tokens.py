"""CSS token types.

Tokens carrying data are frozen dataclasses; field-less punctuation and
whitespace tokens are members of :class:`Symbol`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Symbol(Enum):
    """Field-less tokens. The value is the source text they stand for."""

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    COLON = ":"
    SEMICOLON = ";"
    WHITESPACE = " "  # one run of whitespace, content discarded


# Single characters that map straight to a Symbol.
PUNCTUATION: dict[str, Symbol] = {
    symbol.value: symbol for symbol in Symbol if symbol is not Symbol.WHITESPACE
}


@dataclass(frozen=True)
class Ident:
    value: str


@dataclass(frozen=True)
class String:
    """A quoted string with the quotes stripped and escapes resolved."""

    value: str


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Dimension:
    value: float
    unit: str


@dataclass(frozen=True)
class Percentage:
    value: float


@dataclass(frozen=True)
class Hash:
    """``#name``, with the ``#`` stripped."""

    value: str


@dataclass(frozen=True)
class Delim:
    """Any single character not otherwise classified."""

    value: str


@dataclass(frozen=True)
class Comment:
    value: str


@dataclass(frozen=True)
class AtKeyword:
    """``@name``, with the ``@`` stripped."""

    value: str


CssToken = Union[
    Ident,
    String,
    Number,
    Dimension,
    Percentage,
    Hash,
    Delim,
    Comment,
    AtKeyword,
    Symbol,
]
