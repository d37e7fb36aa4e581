"""Tests for the lark-backed grammar matcher."""

import pytest

from pjson_core.errors import GrammarSyntaxError
from pjson_core.matcher import START_RULES, LarkMatcher, default_matcher, to_parse_node
from pjson_core.tree import ParseNode


@pytest.fixture(scope="module")
def matcher():
    return default_matcher()


# ---------------------------------------------------------------------------
# Leaf rules
# ---------------------------------------------------------------------------

def test_null(matcher):
    assert matcher.match("null", "null") == ParseNode("null", "null")


def test_bool(matcher):
    assert matcher.match("true", "bool") == ParseNode("bool", "true")
    assert matcher.match("false", "bool") == ParseNode("bool", "false")


@pytest.mark.parametrize("text", ["0", "123", "-123", "123.456", "-123.456", "6.02e23", "1E-7"])
def test_number(matcher, text):
    assert matcher.match(text, "number") == ParseNode("number", text)


def test_string_resolves_to_chars(matcher):
    node = matcher.match(r'"hello \" world\""', "string")
    assert node == ParseNode("chars", r"hello \" world\"")


def test_empty_string(matcher):
    assert matcher.match('""', "string") == ParseNode("chars", "")


def test_string_keeps_inner_whitespace(matcher):
    assert matcher.match('"  padded  "', "string").text == "  padded  "


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def test_array_shape(matcher):
    node = matcher.match('["hello", "world"]', "array")
    assert node.rule == "array"
    assert node.text == '["hello", "world"]'
    assert [c.rule for c in node.children] == ["value", "value"]
    assert node.children[0].first() == ParseNode("chars", "hello")
    assert node.children[1].first() == ParseNode("chars", "world")


def test_array_text_excludes_surrounding_whitespace(matcher):
    assert matcher.match("  [ ]  ", "array").text == "[ ]"


def test_empty_containers_have_no_children(matcher):
    assert matcher.match("[]", "array").children == ()
    assert matcher.match("{ }", "object").children == ()


def test_object_shape(matcher):
    node = matcher.match('{"hello": "world", "n": 1}', "object")
    assert [c.rule for c in node.children] == ["pair", "pair"]
    first = node.children[0]
    assert first.child(0) == ParseNode("chars", "hello")
    assert first.child(1).rule == "value"
    assert first.child(1).first() == ParseNode("chars", "world")
    assert node.children[1].child(1).first() == ParseNode("number", "1")


def test_json_root_resolves_to_value(matcher):
    node = matcher.match(' {"a": [true, null]} ')
    assert node.rule == "value"
    assert node.first().rule == "object"


def test_deep_nesting_does_not_recurse(matcher):
    depth = 2000
    node = matcher.match("[" * depth + "]" * depth, "array")
    levels = 1
    while node.children:
        node = node.children[0].first()
        levels += 1
    assert levels == depth


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, rule",
    [
        ("[1,]", "array"),
        ('{"a" 1}', "object"),
        ("{'a': 1}", "object"),
        ("nul", "null"),
        ("True", "bool"),
        ("1.", "number"),
        ("[1] 2", "json"),
        ("", "json"),
    ],
)
def test_syntax_errors(matcher, text, rule):
    with pytest.raises(GrammarSyntaxError):
        matcher.match(text, rule)


def test_syntax_error_reports_position(matcher):
    with pytest.raises(GrammarSyntaxError) as ei:
        matcher.match('{\n  "a": @\n}')
    assert ei.value.line == 2
    assert ei.value.column == 8


def test_unknown_start_rule(matcher):
    with pytest.raises(ValueError):
        matcher.match("1", "pair")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_default_matcher_is_cached():
    assert default_matcher() is default_matcher()


def test_all_start_rules_accepted():
    m = LarkMatcher()
    samples = {
        "json": "[]",
        "value": "null",
        "object": "{}",
        "array": "[]",
        "string": '"x"',
        "number": "1",
        "bool": "true",
        "null": "null",
    }
    assert set(samples) == set(START_RULES)
    for rule, text in samples.items():
        assert isinstance(m.match(text, rule), ParseNode)


def test_to_parse_node_from_hand_built_lark_tree():
    from lark import Token, Tree

    tok = Token("NUMBER", "42", start_pos=3, end_pos=5)
    tree = Tree("value", [Tree("number", [tok])])
    assert to_parse_node(tree, "xx 42") == ParseNode("value", "42", (ParseNode("number", "42"),))
