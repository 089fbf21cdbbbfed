"""HTML token types: StartTag, EndTag, Text, Comment, and Doctype dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StartTag:
    """An opening tag.

    ``attributes`` keeps source order and duplicate names; folding into a
    mapping happens when the parser builds the element.
    """

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    self_closing: bool = False


@dataclass(frozen=True)
class EndTag:
    name: str


@dataclass(frozen=True)
class Text:
    """A run of character data, untrimmed."""

    data: str


@dataclass(frozen=True)
class Comment:
    data: str


@dataclass(frozen=True)
class Doctype:
    """Raw content between ``<!`` and ``>``, e.g. ``"DOCTYPE html"``."""

    data: str


HtmlToken = Union[StartTag, EndTag, Text, Comment, Doctype]
