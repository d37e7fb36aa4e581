"""Tests for ParseNode."""

from pjson_core.tree import ParseNode


def test_children_list_frozen_to_tuple():
    node = ParseNode("array", "[]", [ParseNode("value", "1")])
    assert isinstance(node.children, tuple)
    assert node.children[0].rule == "value"


def test_child_accessors():
    key = ParseNode("chars", "k")
    val = ParseNode("value", "1")
    pair = ParseNode("pair", '"k": 1', (key, val))
    assert pair.first() is key
    assert pair.child(1) is val
    assert pair.child(2) is None
    assert pair.child(-1) is None


def test_first_on_leaf_is_none():
    assert ParseNode("null", "null").first() is None


def test_equality_is_structural():
    a = ParseNode("value", "1", (ParseNode("number", "1"),))
    b = ParseNode("value", "1", (ParseNode("number", "1"),))
    assert a == b


def test_pretty():
    node = ParseNode("array", "[1]", (ParseNode("value", "1", (ParseNode("number", "1"),)),))
    assert node.pretty() == "array\n  value\n    number: '1'"
