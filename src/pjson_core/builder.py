"""Value builder: ParseNode tree → Value tree.

Dispatches on each node's grammar rule label. Leaves (``null``, ``bool``,
``number``, ``chars``) convert their matched text; containers (``array``,
``object``) recurse into their children; ``value`` is a wrapper that is
unwrapped to its single child.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .errors import (
    ConversionError,
    DuplicateKeyError,
    NestingDepthError,
    PJsonCoreError,
    StructureError,
    UnhandledRuleError,
)
from .tree import ParseNode
from .values import Value, VArray, VBool, VNull, VNumber, VObject, VString

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

_BOOL_LITERALS = {"true": True, "false": False}


@dataclass(frozen=True)
class _Options:
    max_depth: int | None
    allow_duplicate_keys: bool


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build(
    node: ParseNode,
    *,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
    allow_duplicate_keys: bool = True,
) -> Value:
    """Build the Value for *node* and everything beneath it.

    Raises a :class:`~pjson_core.errors.PJsonCoreError` subclass on the first
    failure anywhere in the tree; no partial result is returned.

    *max_depth* bounds how deeply arrays/objects may nest (``None`` for no
    limit). With *allow_duplicate_keys* false a repeated object key raises
    :class:`DuplicateKeyError` instead of overwriting the earlier entry.
    """
    opts = _Options(max_depth=max_depth, allow_duplicate_keys=allow_duplicate_keys)
    try:
        return _build(node, opts, 0)
    except PJsonCoreError as exc:
        logger.debug("build failed at rule %r: %s", node.rule, exc)
        raise


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _build(node: ParseNode, opts: _Options, depth: int) -> Value:
    while node.rule == "value":
        inner = node.first()
        if inner is None:
            raise StructureError("expected value: 'value' node has no child")
        node = inner

    rule = node.rule
    if rule == "null":
        return VNull
    if rule == "bool":
        return _build_bool(node)
    if rule == "number":
        return _build_number(node)
    if rule == "chars":
        return VString(node.text)
    if rule == "array":
        return _build_array(node, opts, _enter(opts, depth))
    if rule == "object":
        return _build_object(node, opts, _enter(opts, depth))
    raise UnhandledRuleError(rule)


def _enter(opts: _Options, depth: int) -> int:
    depth += 1
    if opts.max_depth is not None and depth > opts.max_depth:
        raise NestingDepthError(opts.max_depth)
    return depth


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------

def _build_bool(node: ParseNode) -> VBool:
    try:
        return VBool(_BOOL_LITERALS[node.text])
    except KeyError:
        raise ConversionError("bool", node.text, "expected 'true' or 'false'") from None


def _build_number(node: ParseNode) -> VNumber:
    try:
        value = float(node.text)
    except ValueError as exc:
        raise ConversionError("number", node.text, str(exc)) from exc
    if not math.isfinite(value):
        raise ConversionError("number", node.text, "out of range for a 64-bit float")
    return VNumber(value)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def _build_array(node: ParseNode, opts: _Options, depth: int) -> VArray:
    items: list[Value] = []
    for c in node.children:
        items.append(_build(c, opts, depth))
    return VArray(tuple(items))


def _build_object(node: ParseNode, opts: _Options, depth: int) -> VObject:
    """Each child is a ``pair`` node: (key, value)."""
    entries: dict[str, Value] = {}
    for pair in node.children:
        key_node = pair.child(0)
        if key_node is None:
            raise StructureError("expected key: object entry has no key node")
        value_node = pair.child(1)
        if value_node is None:
            raise StructureError(f"expected value: object entry {key_node.text!r} has no value node")

        key = key_node.text
        if not opts.allow_duplicate_keys and key in entries:
            raise DuplicateKeyError(key)
        entries[key] = _build(value_node, opts, depth)
    return VObject(entries)
