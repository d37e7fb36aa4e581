"""Loader: JSON text → Value, via the grammar matcher and the value builder."""

from __future__ import annotations

from typing import IO

from .builder import DEFAULT_MAX_DEPTH, build
from .matcher import DEFAULT_RULE, GrammarMatcher, default_matcher
from .values import Value


def loads(
    text: str,
    *,
    rule: str = DEFAULT_RULE,
    matcher: GrammarMatcher | None = None,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
    allow_duplicate_keys: bool = True,
) -> Value:
    """Parse *text* (matched from start *rule*) and build its Value tree.

    Raises GrammarSyntaxError for text the grammar rejects and the builder's
    errors for trees it cannot convert.
    """
    if matcher is None:
        matcher = default_matcher()
    node = matcher.match(text, rule)
    return build(node, max_depth=max_depth, allow_duplicate_keys=allow_duplicate_keys)


def load(fp: IO[str], **kwargs) -> Value:
    """Read a whole text stream and :func:`loads` it."""
    return loads(fp.read(), **kwargs)
