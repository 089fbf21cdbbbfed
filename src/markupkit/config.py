from __future__ import annotations

from dataclasses import dataclass

VOID_ELEMENTS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})


@dataclass(frozen=True)
class ParserConfig:
    void_elements: frozenset[str] = VOID_ELEMENTS
    document_tag: str = "html"
    strict: bool = False  # raise ParseError on ERROR diagnostics


DEFAULT_CONFIG = ParserConfig()
