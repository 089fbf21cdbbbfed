"""Tests for the CSS parser and stylesheet model."""

import pytest

from markupkit import parse_css
from markupkit.css import (
    CssParser,
    Declaration,
    Rule,
    Selector,
    SelectorKind,
    format_number,
)


def _codes(parser: CssParser) -> list[str]:
    return [d.code for d in parser.diagnostics]


def _only_rule(source: str) -> Rule:
    rules = parse_css(source)
    assert len(rules) == 1
    return rules[0]


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_type(self):
        rule = _only_rule("body { color: red; font-size: 16px; }")
        assert rule.selectors == [Selector.type_("body")]
        assert rule.declarations == [
            Declaration("color", "red", False),
            Declaration("font-size", "16px", False),
        ]

    def test_class(self):
        rule = _only_rule(".box { color: red; font-size: 14px; }")
        assert rule == Rule(
            selectors=[Selector.class_("box")],
            declarations=[
                Declaration("color", "red", False),
                Declaration("font-size", "14px", False),
            ],
        )

    def test_id(self):
        rule = _only_rule("#header { background: blue; }")
        assert rule.selectors == [Selector.id_("header")]

    def test_universal(self):
        rule = _only_rule("* { box-sizing: border-box; }")
        assert rule.selectors == [Selector.universal()]

    def test_selector_list(self):
        rule = _only_rule("h1, h2 { font-weight: bold; }")
        assert rule.selectors == [Selector.type_("h1"), Selector.type_("h2")]

    def test_mixed_selector_list_keeps_order(self):
        rule = _only_rule("h3, .a, #b, * { x: y; }")
        assert [s.kind for s in rule.selectors] == [
            SelectorKind.TYPE,
            SelectorKind.CLASS,
            SelectorKind.ID,
            SelectorKind.UNIVERSAL,
        ]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_important(self):
        rule = _only_rule("p { color: red !important; }")
        assert rule.declarations == [Declaration("color", "red", True)]

    def test_important_without_space(self):
        rule = _only_rule("p { color: red!important; }")
        assert rule.declarations == [Declaration("color", "red", True)]

    def test_numbers_render_without_trailing_zero(self):
        rule = _only_rule("a { z-index: 10; opacity: 0.5; width: 50%; margin: 0 auto; }")
        assert [d.value for d in rule.declarations] == ["10", "0.5", "50%", "0 auto"]

    def test_single_string_value_is_requoted(self):
        rule = _only_rule("a { content: 'x'; }")
        assert rule.declarations[0].value == '"x"'

    def test_hash_value(self):
        rule = _only_rule("a { color: #333; }")
        assert rule.declarations[0].value == "#333"

    def test_function_values_flatten(self):
        rule = _only_rule(
            """div {
                background: url("image.jpg") no-repeat center;
                box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
                font-family: "Helvetica Neue", Arial, sans-serif;
            }"""
        )
        values = [d.value for d in rule.declarations]
        assert values == [
            'url "image.jpg" no-repeat center',
            "0 2px 4px rgba 0 0 0 0.1",
            '"Helvetica Neue" Arial sans-serif',
        ]

    def test_last_declaration_without_semicolon(self):
        rule = _only_rule("a { color: red; margin: 0 }")
        assert rule.declarations[-1] == Declaration("margin", "0")

    def test_empty_value(self):
        rule = _only_rule("a { color: ; }")
        assert rule.declarations == [Declaration("color", "")]

    def test_duplicates_kept_in_order(self):
        rule = _only_rule("a { color: red; color: blue; }")
        assert [d.value for d in rule.declarations] == ["red", "blue"]

    def test_comments_skipped(self):
        parser = CssParser("/* c */ a { /* inner */ margin: 0 /* x */ auto; }")
        rules = parser.parse()
        assert rules == [Rule([Selector.type_("a")], [Declaration("margin", "0 auto")])]
        assert parser.diagnostics == []

    def test_empty_block(self):
        assert parse_css("a {}") == [Rule([Selector.type_("a")], [])]


# ---------------------------------------------------------------------------
# Lenient recovery
# ---------------------------------------------------------------------------


class TestRecovery:
    def test_missing_colon_drops_declaration(self):
        parser = CssParser("a { color red; margin: 0; }")
        rules = parser.parse()
        assert rules[0].declarations == [Declaration("margin", "0")]
        assert _codes(parser) == ["dropped-declaration", "skipped-token"]

    def test_stray_bang(self):
        parser = CssParser("a { color: red !foo; }")
        assert parser.parse()[0].declarations == [Declaration("color", "red foo")]
        assert _codes(parser) == ["stray-bang"]

    def test_unclosed_block(self):
        parser = CssParser("a { color: red")
        assert parser.parse() == [Rule([Selector.type_("a")], [Declaration("color", "red")])]
        assert _codes(parser) == ["unclosed-block"]

    def test_bad_selector_recovers_at_next_rule(self):
        rules = parse_css(". { color: red; } p { margin: 0; }")
        assert rules == [Rule([Selector.type_("p")], [Declaration("margin", "0")])]

    def test_leading_garbage(self):
        rules = parse_css("} ; .a { color: red; }")
        assert rules == [Rule([Selector.class_("a")], [Declaration("color", "red")])]

    def test_at_rule_body_is_not_interpreted(self):
        parser = CssParser("@media screen { body { color: red; } }")
        rules = parser.parse()
        assert rules == [Rule([Selector.type_("screen")], [Declaration("color", "red")])]
        assert "skipped-token" in _codes(parser)

    def test_compound_selectors_are_not_rules(self):
        assert parse_css("ul li { color: red; }") == []
        assert parse_css("ul li, ul > li { x: y; }") == [
            Rule([Selector.type_("li")], [Declaration("x", "y")])
        ]

    @pytest.mark.parametrize("source", ["", "   \n\t  ", "/* only a comment */"])
    def test_nothing_to_parse(self, source):
        assert parse_css(source) == []


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestModel:
    def test_selector_text(self):
        assert str(Selector.type_("div")) == "div"
        assert str(Selector.class_("box")) == ".box"
        assert str(Selector.id_("main")) == "#main"
        assert str(Selector.universal()) == "*"

    @pytest.mark.parametrize(
        ("kind", "text"),
        [
            (SelectorKind.DESCENDANT, "ul li"),
            (SelectorKind.CHILD, "ul > li"),
            (SelectorKind.ADJACENT, "ul + li"),
            (SelectorKind.GENERAL_SIBLING, "ul ~ li"),
        ],
    )
    def test_combinator_placeholders(self, kind, text):
        selector = Selector.combine(kind, Selector.type_("ul"), Selector.type_("li"))
        assert str(selector) == text
        assert not selector.is_simple

    def test_combinator_requires_operands(self):
        with pytest.raises(ValueError):
            Selector(SelectorKind.CHILD)

    def test_simple_selector_rejects_operands(self):
        with pytest.raises(ValueError):
            Selector(SelectorKind.TYPE, "a", left=Selector.universal(), right=Selector.universal())

    def test_rule_requires_selector(self):
        with pytest.raises(ValueError):
            Rule(selectors=[], declarations=[])

    def test_declaration_text(self):
        assert str(Declaration("color", "red", True)) == "color: red !important"

    def test_parser_never_builds_combinators(self):
        rules = parse_css("ul li, ul > li { x: y; }")
        for rule in rules:
            assert all(s.is_simple for s in rule.selectors)

    @pytest.mark.parametrize(
        ("value", "text"),
        [(14.0, "14"), (0.5, "0.5"), (0.1, "0.1"), (1e-05, "0.00001"), (2.25, "2.25")],
    )
    def test_format_number(self, value, text):
        assert format_number(value) == text
