"""Value types for pjson-core."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union


class _NullType:
    """Singleton for the JSON ``null`` literal."""

    _instance: "_NullType | None" = None

    def __new__(cls) -> "_NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


VNull = _NullType()


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VNumber:
    value: float

    def __str__(self) -> str:
        v = self.value
        if float(v).is_integer():
            return str(int(v))
        return str(v)


@dataclass(frozen=True, slots=True)
class VString:
    value: str  # raw matched text, escapes kept verbatim

    def __str__(self) -> str:
        return f'"{self.value}"'

    def unescaped(self) -> str:
        """Decode JSON backslash escapes (``\\"``, ``\\n``, ``\\u00e9`` ...)."""
        return json.loads(f'"{self.value}"')


@dataclass(frozen=True, slots=True)
class VArray:
    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass(frozen=True, slots=True)
class VObject:
    entries: Mapping[str, "Value"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __str__(self) -> str:
        body = ", ".join(f'"{k}": {v}' for k, v in self.entries.items())
        return "{" + body + "}"


Value = Union[_NullType, VBool, VNumber, VString, VArray, VObject]
