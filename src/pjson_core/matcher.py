"""Grammar matcher: JSON text → ParseNode tree, backed by lark."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from .errors import GrammarSyntaxError, StructureError
from .tree import ParseNode

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")

DEFAULT_RULE = "json"

START_RULES = ("json", "value", "object", "array", "string", "number", "bool", "null")

# Rules whose nodes never appear in the output tree; their children take
# their place in the parent.
SILENT_RULES = frozenset({"json", "string"})


class GrammarMatcher(Protocol):
    """Anything that turns text into a ParseNode tree for a given start rule."""

    def match(self, text: str, rule: str = DEFAULT_RULE) -> ParseNode:
        ...


class LarkMatcher:
    """GrammarMatcher over a LALR lark parser built from ``grammar.lark``."""

    def __init__(self, grammar: str | None = None) -> None:
        source = grammar if grammar is not None else _GRAMMAR_PATH.read_text(encoding="utf-8")
        self._parser = Lark(
            source,
            parser="lalr",
            start=list(START_RULES),
            keep_all_tokens=True,
            maybe_placeholders=False,
        )
        logger.debug("compiled JSON grammar with start rules %s", ", ".join(START_RULES))

    def match(self, text: str, rule: str = DEFAULT_RULE) -> ParseNode:
        if rule not in START_RULES:
            raise ValueError(f"unknown start rule {rule!r}; expected one of {START_RULES}")
        try:
            tree = self._parser.parse(text, start=rule)
        except UnexpectedInput as exc:
            line = exc.line if getattr(exc, "line", -1) > 0 else None
            column = exc.column if getattr(exc, "column", -1) > 0 else None
            message = (str(exc).strip().splitlines() or ["syntax error"])[0]
            raise GrammarSyntaxError(message, line, column) from exc

        root = to_parse_node(tree, text)
        if rule in SILENT_RULES:
            if len(root.children) != 1:
                raise StructureError(f"silent rule {rule!r} did not produce exactly one node")
            return root.children[0]
        return root


def to_parse_node(tree: Tree, source: str) -> ParseNode:
    """Convert a lark tree into a ParseNode tree.

    Each node's text is the slice of *source* covered by its tokens; a node
    with no tokens (an empty ``chars``) gets ``""``. Works bottom-up without
    recursion so deeply nested documents do not hit the interpreter's
    recursion limit here.
    """
    spans: dict[int, tuple[int, int] | None] = {}
    nodes: dict[int, ParseNode] = {}

    # iter_subtrees yields every child before its parent
    for sub in tree.iter_subtrees():
        start: int | None = None
        end: int | None = None
        children: list[ParseNode] = []

        for c in sub.children:
            if isinstance(c, Token):
                span = (c.start_pos, c.end_pos)
            elif isinstance(c, Tree):
                span = spans[id(c)]
                if str(c.data) in SILENT_RULES:
                    children.extend(nodes[id(c)].children)
                else:
                    children.append(nodes[id(c)])
            else:
                continue
            if span is not None:
                start = span[0] if start is None else min(start, span[0])
                end = span[1] if end is None else max(end, span[1])

        spans[id(sub)] = None if start is None else (start, end)
        text = "" if start is None else source[start:end]
        nodes[id(sub)] = ParseNode(str(sub.data), text, tuple(children))

    return nodes[id(tree)]


@lru_cache(maxsize=1)
def default_matcher() -> LarkMatcher:
    """Shared matcher for the bundled grammar (compiled once per process)."""
    return LarkMatcher()
