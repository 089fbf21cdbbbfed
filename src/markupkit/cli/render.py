"""Text rendering shared by the CLI commands."""

from __future__ import annotations

from typing import Iterable, Sequence

from markupkit.css.model import Rule, Selector, SelectorKind
from markupkit.html.nodes import CommentNode, Element, Node
from markupkit.html.parser import select_document
from markupkit.model.diagnostic import Diagnostic


def render_node(node: Node, depth: int = 0) -> list[str]:
    """Render *node* as indented pseudo-markup, one line per tag or text.

    Uses an explicit stack of ``(node, depth, closing)`` frames, so trees of
    any depth render without recursion.
    """
    lines: list[str] = []
    stack: list[tuple[Node, int, bool]] = [(node, depth, False)]
    while stack:
        current, level, closing = stack.pop()
        indent = "  " * level
        if isinstance(current, Element):
            if closing:
                lines.append(f"{indent}</{current.tag_name}>")
                continue
            attrs = "".join(
                f' {name}="{value}"' for name, value in current.attributes.items()
            )
            if not current.children:
                lines.append(f"{indent}<{current.tag_name}{attrs} />")
                continue
            lines.append(f"{indent}<{current.tag_name}{attrs}>")
            stack.append((current, level, True))
            stack.extend((child, level + 1, False) for child in reversed(current.children))
        elif isinstance(current, CommentNode):
            lines.append(f"{indent}<!-- {current.data} -->")
        else:
            lines.append(f"{indent}{current.data}")
    return lines


def html_report(nodes: Sequence[Node], document_tag: str = "html") -> list[str]:
    document = select_document(nodes, document_tag)
    if document is not None:
        return ["Parsed HTML document:", *render_node(document)]
    lines = ["No element found in input"]
    if nodes:
        lines.append(f"Found {len(nodes)} top-level node(s):")
        for node in nodes:
            lines.extend(render_node(node))
    return lines


def describe_selector(selector: Selector) -> str:
    if selector.kind is SelectorKind.TYPE:
        return f"Type: {selector}"
    if selector.kind is SelectorKind.CLASS:
        return f"Class: {selector}"
    if selector.kind is SelectorKind.ID:
        return f"ID: {selector}"
    if selector.kind is SelectorKind.UNIVERSAL:
        return "Universal: *"
    return f"Complex selector: {selector}"


def css_report(rules: Sequence[Rule]) -> list[str]:
    lines = [f"Parsed {len(rules)} CSS rule(s):"]
    for index, rule in enumerate(rules, start=1):
        lines.append("")
        lines.append(f"Rule #{index}: {len(rule.selectors)} selector(s)")
        lines.extend(f"  {describe_selector(s)}" for s in rule.selectors)
        lines.append(f"  {len(rule.declarations)} declaration(s):")
        lines.extend(f"    {d}" for d in rule.declarations)
    return lines


def token_listing(title: str, tokens: Iterable[object]) -> list[str]:
    lines = [f"=== {title} ==="]
    count = 0
    for count, token in enumerate(tokens, start=1):
        lines.append(f"{count}: {token!r}")
    lines.append("")
    lines.append(f"Total tokens: {count}")
    return lines


def diagnostics_report(diagnostics: Sequence[Diagnostic]) -> list[str]:
    if not diagnostics:
        return ["", "Diagnostics: none"]
    lines = ["", f"Diagnostics ({len(diagnostics)}):"]
    lines.extend(f"  {d}" for d in diagnostics)
    return lines
