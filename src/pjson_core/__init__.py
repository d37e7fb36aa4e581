"""pjson-core — JSON text to typed value trees over a lark grammar."""

from .builder import DEFAULT_MAX_DEPTH, build
from .errors import (
    ConversionError,
    DuplicateKeyError,
    GrammarSyntaxError,
    NestingDepthError,
    PJsonCoreError,
    StructureError,
    UnhandledRuleError,
)
from .loader import load, loads
from .matcher import GrammarMatcher, LarkMatcher, default_matcher
from .serializer import dumps
from .tree import ParseNode
from .values import (
    Value,
    VArray,
    VBool,
    VNull,
    VNumber,
    VObject,
    VString,
    _NullType,
)

__all__ = [
    "build",
    "loads",
    "load",
    "dumps",
    "DEFAULT_MAX_DEPTH",
    "ParseNode",
    "GrammarMatcher",
    "LarkMatcher",
    "default_matcher",
    "Value",
    "VArray",
    "VBool",
    "VNull",
    "VNumber",
    "VObject",
    "VString",
    "PJsonCoreError",
    "GrammarSyntaxError",
    "StructureError",
    "NestingDepthError",
    "DuplicateKeyError",
    "ConversionError",
    "UnhandledRuleError",
]
