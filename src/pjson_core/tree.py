"""ParseNode — library-neutral parse tree handed from the matcher to the builder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseNode:
    """One matched grammar rule: its label, matched source text and child rules."""

    rule: str
    text: str = ""
    children: tuple["ParseNode", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def child(self, index: int) -> "ParseNode | None":
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def first(self) -> "ParseNode | None":
        return self.child(0)

    def pretty(self, indent: str = "  ") -> str:
        lines: list[str] = []
        stack: list[tuple[ParseNode, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.children:
                lines.append(f"{indent * level}{node.rule}")
            else:
                lines.append(f"{indent * level}{node.rule}: {node.text!r}")
            for c in reversed(node.children):
                stack.append((c, level + 1))
        return "\n".join(lines)
