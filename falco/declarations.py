"""Top-level declaration nodes of the VCL syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from falco.expressions import IP, Boolean, Ident, Integer, String
from falco.meta import Node, indent
from falco.statements import BlockStatement


@dataclass(kw_only=True)
class AclCidr(Node):
    """One address entry of an ACL, optionally negated and masked."""

    ip: IP
    inverse: Optional[Boolean] = None
    mask: Optional[Integer] = None

    def __str__(self) -> str:
        negate = "!" if self.inverse is not None and self.inverse.value else ""
        mask = f"/{self.mask}" if self.mask is not None else ""
        return (
            self.leading_comment()
            + indent(self.nest)
            + f'{negate}"{self.ip}"{mask};'
            + self.trailing_comment()
        )


@dataclass(kw_only=True)
class AclDeclaration(Node):
    name: Ident
    cidrs: list[AclCidr] = field(default_factory=list)

    def __str__(self) -> str:
        entries = "".join(f"{cidr}\n" for cidr in self.cidrs)
        return (
            self.leading_comment()
            + f"acl {self.name} {{\n"
            + entries
            + self.infix_comment()
            + "}"
            + self.trailing_comment()
            + "\n"
        )


@dataclass(kw_only=True)
class BackendProbeObject(Node):
    """The nested object assigned to a backend's probe property."""

    values: list[BackendProperty] = field(default_factory=list)

    def __str__(self) -> str:
        lines = "".join(
            prop.leading_comment()
            + indent(prop.nest)
            + f".{prop.key} = {prop.value};"
            + prop.trailing_comment()
            + "\n"
            for prop in self.values
        )
        return "{\n" + lines + self.infix_comment() + indent(self.nest) + "}"


@dataclass(kw_only=True)
class BackendProperty(Node):
    key: Ident
    value: Node

    def __str__(self) -> str:
        terminator = "" if isinstance(self.value, BackendProbeObject) else ";"
        return (
            self.leading_comment()
            + indent(self.nest)
            + f".{self.key} = {self.value}{terminator}"
            + self.trailing_comment()
        )


@dataclass(kw_only=True)
class BackendDeclaration(Node):
    name: Ident
    properties: list[BackendProperty] = field(default_factory=list)

    def __str__(self) -> str:
        body = "".join(f"{prop}\n" for prop in self.properties)
        return (
            self.leading_comment()
            + f"backend {self.name} {{\n"
            + body
            + self.infix_comment()
            + "}"
            + self.trailing_comment()
            + "\n"
        )


@dataclass(kw_only=True)
class DirectorProperty(Node):
    key: Ident
    value: Node

    def __str__(self) -> str:
        return (
            self.leading_comment()
            + indent(self.nest)
            + f".{self.key} = {self.value};"
            + self.trailing_comment()
            + "\n"
        )


@dataclass(kw_only=True)
class DirectorBackendObject(Node):
    """A backend entry of a director, rendered on a single line."""

    values: list[DirectorProperty] = field(default_factory=list)

    def __str__(self) -> str:
        fields = "".join(f" .{prop.key} = {prop.value};" for prop in self.values)
        return (
            self.leading_comment()
            + indent(self.nest)
            + "{"
            + fields
            + " }"
            + self.trailing_comment()
            + "\n"
        )


@dataclass(kw_only=True)
class DirectorDeclaration(Node):
    name: Ident
    director_type: Optional[Ident] = None
    properties: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        kind = f" {self.director_type}" if self.director_type is not None else ""
        body = "".join(str(prop) for prop in self.properties)
        return (
            self.leading_comment()
            + f"director {self.name}{kind} {{\n"
            + body
            + "}"
            + self.trailing_comment()
            + "\n"
        )


@dataclass(kw_only=True)
class TableProperty(Node):
    key: String
    value: Node
    has_comma: bool = False

    def __str__(self) -> str:
        return (
            self.leading_comment()
            + indent(self.nest)
            + f"{self.key}: {self.value},"
            + self.trailing_comment()
            + "\n"
        )


@dataclass(kw_only=True)
class TableDeclaration(Node):
    name: Ident
    value_type: Optional[Ident] = None
    properties: list[TableProperty] = field(default_factory=list)

    def __str__(self) -> str:
        kind = f" {self.value_type}" if self.value_type is not None else ""
        body = "".join(str(prop) for prop in self.properties)
        return (
            self.leading_comment()
            + f"table {self.name}{kind} {{\n"
            + body
            + "}"
            + self.trailing_comment()
            + "\n"
        )


def _block_declaration(node: Node, keyword: str, name: Ident, block: BlockStatement) -> str:
    return (
        node.leading_comment()
        + f"{keyword} {name} {block}"
        + node.trailing_comment()
        + "\n"
    )


@dataclass(kw_only=True)
class PenaltyboxDeclaration(Node):
    name: Ident
    block: BlockStatement

    def __str__(self) -> str:
        return _block_declaration(self, "penaltybox", self.name, self.block)


@dataclass(kw_only=True)
class RatecounterDeclaration(Node):
    name: Ident
    block: BlockStatement

    def __str__(self) -> str:
        return _block_declaration(self, "ratecounter", self.name, self.block)


@dataclass(kw_only=True)
class SubroutineDeclaration(Node):
    name: Ident
    block: BlockStatement
    return_type: Optional[Ident] = None

    def __str__(self) -> str:
        return _block_declaration(self, "sub", self.name, self.block)