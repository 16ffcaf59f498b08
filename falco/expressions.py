"""Expression nodes of the VCL syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from falco.meta import Node

# A token offset of 4 marks a bracketed string literal: {"..."}
_BRACKET_STRING_OFFSET = 4


@dataclass(kw_only=True)
class Ident(Node):
    value: str

    def __str__(self) -> str:
        return self.leading_inline_comment() + self.value + self.trailing_comment()


@dataclass(kw_only=True)
class IP(Node):
    value: str

    def __str__(self) -> str:
        return self.leading_inline_comment() + self.value + self.trailing_comment()


@dataclass(kw_only=True)
class Boolean(Node):
    value: bool

    def __str__(self) -> str:
        text = "true" if self.value else "false"
        return self.leading_inline_comment() + text + self.trailing_comment()


@dataclass(kw_only=True)
class Integer(Node):
    value: int

    def __str__(self) -> str:
        return self.leading_inline_comment() + f"{self.value:d}" + self.trailing_comment()


@dataclass(kw_only=True)
class String(Node):
    value: str

    def __str__(self) -> str:
        if self.token.offset == _BRACKET_STRING_OFFSET:
            return self.leading_comment() + f'{{"{self.value}"}}' + self.trailing_comment()
        return self.leading_inline_comment() + f'"{self.value}"' + self.trailing_comment()


@dataclass(kw_only=True)
class Float(Node):
    value: float

    def __str__(self) -> str:
        return self.leading_inline_comment() + f"{self.value:f}" + self.trailing_comment()


@dataclass(kw_only=True)
class RTime(Node):
    value: str

    def __str__(self) -> str:
        return self.leading_inline_comment() + self.value + self.trailing_comment()


@dataclass(kw_only=True)
class GroupedExpression(Node):
    right: Node

    def __str__(self) -> str:
        return f"({self.right})"


@dataclass(kw_only=True)
class InfixExpression(Node):
    left: Node
    operator: str
    right: Node

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(kw_only=True)
class PrefixExpression(Node):
    operator: str
    right: Node

    def __str__(self) -> str:
        return f"({self.leading_inline_comment()}{self.operator}{self.right})"


@dataclass(kw_only=True)
class IfExpression(Node):
    condition: Node
    consequence: Node
    alternative: Node

    def __str__(self) -> str:
        return (
            self.leading_inline_comment()
            + f"if({self.condition}, {self.consequence}, {self.alternative})"
            + self.trailing_comment()
        )


@dataclass(kw_only=True)
class FunctionCallExpression(Node):
    function: Ident
    arguments: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.arguments)
        return (
            self.leading_inline_comment()
            + f"{self.function}({args})"
            + self.trailing_comment()
        )