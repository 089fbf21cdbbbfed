"""Relate a parsed HTML tree to the stylesheet embedded in its ``<style>`` tags.

Collects the tags, classes and ids the document uses, the ones the
stylesheet's simple selectors target, and reports which selectors match
something in the document and which are unused.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from markupkit.config import ParserConfig
from markupkit.css.model import Rule, SelectorKind
from markupkit.css.parser import parse_css
from markupkit.html.nodes import Element, Node, TextNode, iter_elements

__all__ = [
    "Identifiers",
    "StyleReport",
    "extract_style_text",
    "document_identifiers",
    "selector_identifiers",
    "analyze",
    "analyze_document",
]


@dataclass
class Identifiers:
    tags: set[str] = field(default_factory=set)
    classes: set[str] = field(default_factory=set)
    ids: set[str] = field(default_factory=set)


@dataclass
class StyleReport:
    """Outcome of comparing a document against a stylesheet."""

    rules: list[Rule]
    document: Identifiers
    stylesheet: Identifiers

    @property
    def matching_tags(self) -> set[str]:
        return self.document.tags & self.stylesheet.tags

    @property
    def matching_classes(self) -> set[str]:
        return self.document.classes & self.stylesheet.classes

    @property
    def matching_ids(self) -> set[str]:
        return self.document.ids & self.stylesheet.ids

    @property
    def unused_classes(self) -> set[str]:
        """Classes the stylesheet targets that no element carries."""
        return self.stylesheet.classes - self.document.classes

    @property
    def unused_ids(self) -> set[str]:
        return self.stylesheet.ids - self.document.ids


def extract_style_text(root: Node) -> str:
    """Concatenate the text of every ``<style>`` element under *root*.

    Each text child contributes one line, in document order.
    """
    chunks: list[str] = []
    for element in iter_elements(root):
        if element.tag_name.lower() != "style":
            continue
        for child in element.children:
            if isinstance(child, TextNode):
                chunks.append(child.data + "\n")
    return "".join(chunks)


def document_identifiers(root: Node) -> Identifiers:
    found = Identifiers()
    for element in iter_elements(root):
        found.tags.add(element.tag_name)
        found.classes.update(element.classes)
        element_id = element.get("id")
        if element_id is not None:
            found.ids.add(element_id)
    return found


def selector_identifiers(rules: Iterable[Rule]) -> Identifiers:
    """Collect the names targeted by the simple selectors of *rules*."""
    found = Identifiers()
    for rule in rules:
        for selector in rule.selectors:
            if selector.kind is SelectorKind.TYPE:
                found.tags.add(selector.name)
            elif selector.kind is SelectorKind.CLASS:
                found.classes.add(selector.name)
            elif selector.kind is SelectorKind.ID:
                found.ids.add(selector.name)
    return found


def analyze(root: Element, rules: list[Rule]) -> StyleReport:
    return StyleReport(
        rules=rules,
        document=document_identifiers(root),
        stylesheet=selector_identifiers(rules),
    )


def analyze_document(root: Element, config: ParserConfig | None = None) -> StyleReport:
    """Parse the document's embedded stylesheet and compare it to the document."""
    rules = parse_css(extract_style_text(root), config)
    return analyze(root, rules)
