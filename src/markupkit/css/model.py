"""Stylesheet model: Selector, Declaration, and Rule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SelectorKind(Enum):
    TYPE = "type"
    CLASS = "class"
    ID = "id"
    UNIVERSAL = "universal"
    # Combinators. Part of the model; the parser does not produce them.
    DESCENDANT = "descendant"
    CHILD = "child"
    ADJACENT = "adjacent"
    GENERAL_SIBLING = "general_sibling"


_SIMPLE_KINDS = frozenset({
    SelectorKind.TYPE,
    SelectorKind.CLASS,
    SelectorKind.ID,
    SelectorKind.UNIVERSAL,
})

_COMBINATOR_TEXT = {
    SelectorKind.DESCENDANT: " ",
    SelectorKind.CHILD: " > ",
    SelectorKind.ADJACENT: " + ",
    SelectorKind.GENERAL_SIBLING: " ~ ",
}


@dataclass(frozen=True)
class Selector:
    """A simple selector, or a combinator joining two selectors.

    Simple kinds use ``name`` (empty for universal); combinator kinds use
    ``left`` and ``right``.
    """

    kind: SelectorKind
    name: str = ""
    left: Selector | None = None
    right: Selector | None = None

    def __post_init__(self) -> None:
        if self.kind in _SIMPLE_KINDS:
            if self.left is not None or self.right is not None:
                raise ValueError(f"{self.kind.value} selector takes no operands")
        elif self.left is None or self.right is None:
            raise ValueError(f"{self.kind.value} selector needs left and right operands")

    @classmethod
    def type_(cls, name: str) -> Selector:
        return cls(SelectorKind.TYPE, name)

    @classmethod
    def class_(cls, name: str) -> Selector:
        return cls(SelectorKind.CLASS, name)

    @classmethod
    def id_(cls, name: str) -> Selector:
        return cls(SelectorKind.ID, name)

    @classmethod
    def universal(cls) -> Selector:
        return cls(SelectorKind.UNIVERSAL)

    @classmethod
    def combine(cls, kind: SelectorKind, left: Selector, right: Selector) -> Selector:
        return cls(kind, left=left, right=right)

    @property
    def is_simple(self) -> bool:
        return self.kind in _SIMPLE_KINDS

    def __str__(self) -> str:
        if self.kind is SelectorKind.TYPE:
            return self.name
        if self.kind is SelectorKind.CLASS:
            return f".{self.name}"
        if self.kind is SelectorKind.ID:
            return f"#{self.name}"
        if self.kind is SelectorKind.UNIVERSAL:
            return "*"
        return f"{self.left}{_COMBINATOR_TEXT[self.kind]}{self.right}"


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, optionally ``!important``."""

    property: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class Rule:
    """Selectors in source order paired with their declarations."""

    selectors: list[Selector]
    declarations: list[Declaration] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.selectors:
            raise ValueError("Rule must have at least one selector")
