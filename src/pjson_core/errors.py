"""Exception hierarchy for pjson-core."""

from __future__ import annotations


class PJsonCoreError(Exception):
    """Base class for every error raised by pjson-core."""


class GrammarSyntaxError(PJsonCoreError):
    """The grammar matcher rejected the input text."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class StructureError(PJsonCoreError):
    """The parse tree is missing a child the JSON grammar guarantees."""


class NestingDepthError(StructureError):
    """Arrays/objects are nested deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"nesting depth exceeds {max_depth}")


class DuplicateKeyError(StructureError):
    """An object repeats a key while duplicate keys are disallowed."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"duplicate key {key!r}")


class ConversionError(PJsonCoreError):
    """A leaf node's text could not be converted to its primitive type."""

    def __init__(self, rule: str, text: str, reason: str = "") -> None:
        self.rule = rule
        self.text = text
        message = f"cannot convert {text!r} as {rule}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnhandledRuleError(PJsonCoreError):
    """A parse-tree node carries a rule label the builder does not know."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"unhandled rule: {rule!r}")
