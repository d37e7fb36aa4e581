"""Serializer: Value → JSON text.

Strings and keys are emitted as their raw matched text between quotes, so
escape sequences come back out exactly as they went in and
``loads(dumps(v)) == v`` for any loaded value.
"""

from __future__ import annotations

import math

from .errors import ConversionError
from .values import Value, VArray, VBool, VNumber, VObject, VString, _NullType


def dumps(value: Value, *, indent: int | None = None) -> str:
    """Render *value* as JSON; pretty-print with *indent* spaces per level."""
    parts: list[str] = []
    _emit(value, indent, 0, parts)
    return "".join(parts)


def _emit(value: Value, indent: int | None, level: int, out: list[str]) -> None:
    if isinstance(value, _NullType):
        out.append("null")
    elif isinstance(value, VBool):
        out.append("true" if value.value else "false")
    elif isinstance(value, VNumber):
        out.append(_number(value.value))
    elif isinstance(value, VString):
        out.append(f'"{value.value}"')
    elif isinstance(value, VArray):
        _emit_container("[", "]", [(None, v) for v in value.items], indent, level, out)
    elif isinstance(value, VObject):
        _emit_container("{", "}", list(value.entries.items()), indent, level, out)
    else:
        raise TypeError(f"not a pjson value: {value!r}")


def _emit_container(
    open_: str,
    close: str,
    items: list[tuple[str | None, Value]],
    indent: int | None,
    level: int,
    out: list[str],
) -> None:
    if not items:
        out.append(open_ + close)
        return

    if indent is None:
        sep, pad, end_pad = ", ", "", ""
    else:
        pad = "\n" + " " * (indent * (level + 1))
        sep = "," + pad
        end_pad = "\n" + " " * (indent * level)

    out.append(open_ + pad)
    for i, (key, v) in enumerate(items):
        if i:
            out.append(sep)
        if key is not None:
            out.append(f'"{key}": ')
        _emit(v, indent, level + 1, out)
    out.append(end_pad + close)


def _number(v: float) -> str:
    if not math.isfinite(v):
        raise ConversionError("number", repr(v), "JSON has no representation for non-finite numbers")
    return repr(float(v))
