"""Statement nodes of the VCL syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from falco.expressions import Ident, String
from falco.meta import Comments, Meta, Node, Operator, indent


def _statement_line(node: Node, body: str) -> str:
    """Render a single-line statement with its comments and final newline."""
    return (
        node.leading_comment()
        + indent(node.nest)
        + body
        + node.trailing_comment()
        + "\n"
    )


@dataclass(kw_only=True)
class AddStatement(Node):
    ident: Ident
    operator: Operator
    value: Node

    def __str__(self) -> str:
        return _statement_line(self, f"add {self.ident} {self.operator} {self.value};")


@dataclass(kw_only=True)
class BlockStatement(Node):
    statements: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        body = "".join(str(stmt) for stmt in self.statements)
        closing = "}" if self.nest == 0 else indent(self.nest - 1) + "}"
        return "{\n" + body + self.infix_comment() + closing


@dataclass(kw_only=True)
class CallStatement(Node):
    subroutine: Ident

    def __str__(self) -> str:
        return _statement_line(self, f"call {self.subroutine};")


@dataclass(kw_only=True)
class DeclareStatement(Node):
    name: Ident
    value_type: Ident

    def __str__(self) -> str:
        return _statement_line(self, f"declare local {self.name} {self.value_type};")


@dataclass(kw_only=True)
class ErrorStatement(Node):
    code: Node
    argument: Optional[Node] = None

    def __str__(self) -> str:
        body = f"error {self.code}"
        if self.argument is not None:
            body += f" {self.argument}"
        return _statement_line(self, body + ";")


@dataclass(kw_only=True)
class EsiStatement(Node):
    def __str__(self) -> str:
        return _statement_line(self, "esi;")


@dataclass(kw_only=True)
class FunctionCallStatement(Node):
    function: Ident
    arguments: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.arguments)
        return (
            self.leading_inline_comment()
            + f"{self.function}({args})"
            + self.trailing_comment()
        )


@dataclass(kw_only=True)
class GotoDestinationStatement(Node):
    name: Ident

    def __str__(self) -> str:
        return _statement_line(self, self.name.value)


@dataclass(kw_only=True)
class GotoStatement(Node):
    destination: Ident

    def __str__(self) -> str:
        return _statement_line(self, f"goto {self.destination};")


@dataclass(kw_only=True)
class IfStatement(Node):
    condition: Node
    consequence: BlockStatement
    another: list[IfStatement] = field(default_factory=list)
    alternative: Optional[BlockStatement] = None
    alternative_comments: Comments = field(default_factory=Comments)

    def __post_init__(self) -> None:
        if not isinstance(self.alternative_comments, Comments):
            self.alternative_comments = Comments(self.alternative_comments)

    def _alternative_comment_lines(self) -> str:
        prefix = indent(self.nest)
        return "".join(f"{prefix}{comment}\n" for comment in self.alternative_comments)

    def __str__(self) -> str:
        prefix = indent(self.nest)
        parts = [
            self.leading_comment(),
            f"{prefix}if ({self.condition}) {self.consequence}",
        ]
        for branch in self.another:
            parts.append("\n")
            parts.append(branch.leading_comment())
            parts.append(f"{prefix}else if ({branch.condition}) {branch.consequence}")
            parts.append(branch.trailing_comment())
        if self.alternative is not None:
            parts.append("\n")
            parts.append(self._alternative_comment_lines())
            parts.append(f"{prefix}else {self.alternative}")
        parts.append(self.trailing_comment())
        parts.append("\n")
        return "".join(parts)


@dataclass(kw_only=True)
class ImportStatement(Node):
    name: Ident

    def __str__(self) -> str:
        return _statement_line(self, f"import {self.name};")


@dataclass(kw_only=True)
class IncludeStatement(Node):
    module: String

    def __str__(self) -> str:
        return _statement_line(self, f"include {self.module};")


@dataclass(kw_only=True)
class LogStatement(Node):
    value: Node

    def __str__(self) -> str:
        return _statement_line(self, f"log {self.value};")


@dataclass(kw_only=True)
class RemoveStatement(Node):
    ident: Ident

    def __str__(self) -> str:
        return _statement_line(self, f"remove {self.ident};")


@dataclass(kw_only=True)
class RestartStatement(Node):
    def __str__(self) -> str:
        return _statement_line(self, "restart;")


@dataclass(kw_only=True)
class ReturnStatement(Node):
    return_expression: Optional[Node] = None
    has_parenthesis: bool = False

    def __str__(self) -> str:
        if self.return_expression is not None:
            return _statement_line(self, f"return({self.return_expression});")
        return _statement_line(self, "return;")


@dataclass(kw_only=True)
class SetStatement(Node):
    ident: Ident
    operator: Operator
    value: Node

    def __str__(self) -> str:
        return _statement_line(self, f"set {self.ident} {self.operator} {self.value};")


@dataclass(kw_only=True)
class SyntheticBase64Statement(Node):
    value: Node

    def __str__(self) -> str:
        return _statement_line(self, f"synthetic.base64 {self.value};")


@dataclass(kw_only=True)
class SyntheticStatement(Node):
    value: Node

    def __str__(self) -> str:
        return _statement_line(self, f"synthetic {self.value};")


@dataclass(kw_only=True)
class UnsetStatement(Node):
    ident: Ident

    def __str__(self) -> str:
        return _statement_line(self, f"unset {self.ident};")


@dataclass(kw_only=True)
class VCL(Node):
    """Root of a parsed VCL program."""

    statements: list[Node] = field(default_factory=list)
    meta: Meta = field(default_factory=Meta)

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)