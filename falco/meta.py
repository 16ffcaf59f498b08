"""Shared node metadata: tokens, comments and indentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

_INDENT_UNIT = "  "


def indent(level: int) -> str:
    """Return the indentation string for the given nesting level."""
    return _INDENT_UNIT * max(level, 0)


@dataclass
class Token:
    """A lexical token with its source position."""

    type: str = ""
    literal: str = ""
    line: int = 0
    position: int = 0
    offset: int = 0
    file: str = ""


@dataclass
class Comment:
    """A single comment as written in the source."""

    value: str
    token: Token = field(default_factory=Token)

    def __str__(self) -> str:
        return self.value


class Comments(list):
    """An ordered sequence of comments."""

    def __init__(self, items: Iterable[Union[Comment, str]] = ()):
        super().__init__(
            item if isinstance(item, Comment) else Comment(value=item) for item in items
        )

    def __str__(self) -> str:
        return "".join(str(comment) for comment in self)

    def annotations(self) -> list[str]:
        """Return annotation bodies (text after '@') found in the comments."""
        found = []
        for line in str(self).split("\n"):
            stripped = line.lstrip(" */#")
            if stripped.startswith("@"):
                found.append(stripped[1:])
        return found


def _as_comments(value: Iterable[Union[Comment, str]] | None) -> Comments:
    if isinstance(value, Comments):
        return value
    return Comments(value or ())


@dataclass
class Meta:
    """Token, comments and nesting level attached to every node."""

    token: Token = field(default_factory=Token)
    nest: int = 0
    leading: Comments = field(default_factory=Comments)
    trailing: Comments = field(default_factory=Comments)
    infix: Comments = field(default_factory=Comments)

    def __post_init__(self) -> None:
        self.leading = _as_comments(self.leading)
        self.trailing = _as_comments(self.trailing)
        self.infix = _as_comments(self.infix)

    def leading_comment(self) -> str:
        """Leading comments, each on its own indented line."""
        prefix = indent(self.nest)
        return "".join(f"{prefix}{comment}\n" for comment in self.leading)

    def leading_inline_comment(self) -> str:
        """Leading comments placed on the same line before the node."""
        prefix = indent(self.nest)
        return "".join(f"{prefix}{comment} " for comment in self.leading)

    def trailing_comment(self) -> str:
        """Trailing comments separated from the node by one space."""
        if not self.trailing:
            return ""
        return " " + "".join(str(comment) for comment in self.trailing)

    def infix_comment(self) -> str:
        """Comments found inside a block, each on its own indented line."""
        prefix = indent(self.nest)
        return "".join(f"{prefix}{comment}\n" for comment in self.infix)


@dataclass(kw_only=True)
class Node:
    """Base of every syntax tree node."""

    meta: Meta = field(default_factory=Meta)

    @property
    def nest(self) -> int:
        return self.meta.nest

    @property
    def token(self) -> Token:
        return self.meta.token

    def leading_comment(self) -> str:
        return self.meta.leading_comment()

    def leading_inline_comment(self) -> str:
        return self.meta.leading_inline_comment()

    def trailing_comment(self) -> str:
        return self.meta.trailing_comment()

    def infix_comment(self) -> str:
        return self.meta.infix_comment()


@dataclass(kw_only=True)
class Operator(Node):
    """An assignment or arithmetic operator such as '=' or '+='."""

    operator: str

    def __str__(self) -> str:
        return self.operator