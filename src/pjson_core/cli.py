"""Command-line demo: parse a JSON document and print its Value tree.

Provides the ``pjson`` entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .builder import DEFAULT_MAX_DEPTH
from .errors import PJsonCoreError
from .loader import loads
from .matcher import DEFAULT_RULE, START_RULES
from .serializer import dumps
from .values import Value, VArray, VBool, VNumber, VObject, VString, _NullType

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT = """{
    "name": "John Doe",
    "age": 30,
    "is_student": false,
    "marks": [90.0, -80.0, 85.1],
    "address": {
        "city": "New York",
        "zip": 10001
    }
}"""


# ---------------------------------------------------------------------------
# Debug formatting
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a scalar value on one line."""
    if isinstance(value, _NullType):
        return "Null"
    if isinstance(value, VBool):
        return f"Bool({value})"
    if isinstance(value, VNumber):
        return f"Number({value.value!r})"
    if isinstance(value, VString):
        return f'String("{value.value}")'
    return repr(value)


def format_debug(value: Value, indent: str = "    ", level: int = 0) -> str:
    """Multi-line, nested rendering of a value tree."""
    pad = indent * (level + 1)
    if isinstance(value, VArray):
        if not value.items:
            return "Array []"
        lines = ["Array ["]
        for v in value.items:
            lines.append(f"{pad}{format_debug(v, indent, level + 1)},")
        lines.append(f"{indent * level}]")
        return "\n".join(lines)

    if isinstance(value, VObject):
        if not value.entries:
            return "Object {}"
        lines = ["Object {"]
        for k, v in value.entries.items():
            lines.append(f'{pad}"{k}": {format_debug(v, indent, level + 1)},')
        lines.append(f"{indent * level}}}")
        return "\n".join(lines)

    return _fmt_inline(value)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pjson",
        description="Parse a JSON document and print the resulting value tree.",
    )
    ap.add_argument("file", nargs="?", help="JSON file to parse ('-' for stdin; default: built-in sample)")
    ap.add_argument("--rule", default=DEFAULT_RULE, choices=START_RULES, help="grammar rule to match from")
    ap.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help="maximum array/object nesting (0 for no limit)")
    ap.add_argument("--strict-keys", action="store_true", help="reject duplicate object keys")
    ap.add_argument("--json", action="store_true", help="print as indented JSON instead of the debug tree")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def _read_source(path: str | None, stdin: IO[str]) -> str:
    if path is None:
        return SAMPLE_DOCUMENT
    if path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def main(argv: list[str] | None = None, stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> int:
    """Run the ``pjson`` command; returns the process exit status."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        text = _read_source(args.file, sys.stdin)
        value = loads(
            text,
            rule=args.rule,
            max_depth=args.max_depth or None,
            allow_duplicate_keys=not args.strict_keys,
        )
        rendered = dumps(value, indent=2) if args.json else format_debug(value)
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=stderr)
        return 1
    except PJsonCoreError as exc:
        logger.debug("parse failed", exc_info=True)
        print(f"{type(exc).__name__}: {exc}", file=stderr)
        return 1

    print(rendered, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
