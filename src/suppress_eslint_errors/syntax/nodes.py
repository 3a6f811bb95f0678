# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mutable syntax tree model shared by the parser adapter, annotator and printer."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Final


class NodeKind(str, Enum):
    """Closed set of node kinds the suppression logic distinguishes."""

    PROGRAM = "program"
    BLOCK = "block"
    CONDITIONAL = "conditional"
    STATEMENT = "statement"
    EMPTY_STATEMENT = "empty_statement"
    EXPRESSION = "expression"
    EMPTY_EXPRESSION = "empty_expression"
    MARKUP_ELEMENT = "markup_element"
    MARKUP_OPENING_TAG = "markup_opening_tag"
    MARKUP_CLOSING_TAG = "markup_closing_tag"
    MARKUP_ATTRIBUTE = "markup_attribute"
    MARKUP_TEXT = "markup_text"
    MARKUP_EXPRESSION_HOLE = "markup_expression_hole"


MARKUP_KINDS: Final[frozenset[NodeKind]] = frozenset(
    {
        NodeKind.MARKUP_ELEMENT,
        NodeKind.MARKUP_OPENING_TAG,
        NodeKind.MARKUP_CLOSING_TAG,
        NodeKind.MARKUP_ATTRIBUTE,
        NodeKind.MARKUP_TEXT,
        NodeKind.MARKUP_EXPRESSION_HOLE,
    }
)

ROLE_CONDITION: Final[str] = "condition"
ROLE_CONSEQUENT: Final[str] = "consequent"
ROLE_ALTERNATE: Final[str] = "alternate"


class CommentKind(str, Enum):
    """Comment delimiters supported by the printer."""

    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class Span:
    """Source location of a node or comment.

    Byte offsets index the UTF-8 encoded source; lines are one-based.
    """

    start_byte: int
    end_byte: int
    start_line: int
    end_line: int


@dataclass(eq=False, slots=True)
class Comment:
    """Comment attached to one of a node's comment slots."""

    kind: CommentKind
    text: str
    leading: bool = False
    trailing: bool = False
    own_line: bool = False
    span: Span | None = None
    original_text: str | None = None

    def __post_init__(self) -> None:
        if self.span is not None and self.original_text is None:
            self.original_text = self.text

    @property
    def is_new(self) -> bool:
        """Return ``True`` when the comment did not exist in the parsed source."""

        return self.span is None

    @property
    def is_rewritten(self) -> bool:
        """Return ``True`` when a parsed comment's text has been changed."""

        return self.span is not None and self.text != self.original_text


@dataclass(eq=False)
class SyntaxNode:
    """Node of the mutable syntax tree.

    Nodes compare by identity. The parent link is a weak reference: ownership
    flows from parent to children only.
    """

    kind: NodeKind
    grammar_type: str = ""
    span: Span | None = None
    children: list[SyntaxNode] = field(default_factory=list)
    role: str | None = None
    value: str | None = None
    leading_comments: list[Comment] = field(default_factory=list)
    trailing_comments: list[Comment] = field(default_factory=list)
    inner_comments: list[Comment] = field(default_factory=list)
    _parent: weakref.ReferenceType[SyntaxNode] | None = field(default=None, repr=False)

    @property
    def parent(self) -> SyntaxNode | None:
        """Return the parent node, or ``None`` for the root."""

        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: SyntaxNode | None) -> None:
        self._parent = None if node is None else weakref.ref(node)

    @property
    def start_line(self) -> int | None:
        return self.span.start_line if self.span is not None else None

    @property
    def end_line(self) -> int | None:
        return self.span.end_line if self.span is not None else None

    @property
    def is_markup(self) -> bool:
        return self.kind in MARKUP_KINDS

    @property
    def is_new(self) -> bool:
        """Return ``True`` for nodes created after parsing."""

        return self.span is None

    def adopt(self, children: list[SyntaxNode]) -> None:
        """Replace ``children`` and point each child's parent link at this node."""

        self.children = list(children)
        for child in self.children:
            child.parent = self

    def child_with_role(self, role: str) -> SyntaxNode | None:
        """Return the first child occupying ``role``, if any."""

        for child in self.children:
            if child.role == role:
                return child
        return None

    def index_of(self, child: SyntaxNode) -> int:
        """Return the position of ``child`` (by identity) among the children.

        Raises:
            ValueError: If ``child`` is not a child of this node.
        """

        for index, candidate in enumerate(self.children):
            if candidate is child:
                return index
        raise ValueError(f"{child.kind.value} node is not a child of this {self.kind.value} node")

    def iter_nodes(self) -> Iterator[SyntaxNode]:
        """Yield this node and its descendants in document (pre-)order."""

        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


def markup_text(value: str, span: Span | None = None) -> SyntaxNode:
    """Return a markup text node carrying ``value``."""

    return SyntaxNode(kind=NodeKind.MARKUP_TEXT, grammar_type="jsx_text", span=span, value=value)


def is_whitespace_text(node: SyntaxNode) -> bool:
    """Return ``True`` for markup text made only of whitespace (or nothing)."""

    return node.kind is NodeKind.MARKUP_TEXT and not (node.value or "").strip()


__all__ = [
    "MARKUP_KINDS",
    "ROLE_ALTERNATE",
    "ROLE_CONDITION",
    "ROLE_CONSEQUENT",
    "Comment",
    "CommentKind",
    "NodeKind",
    "Span",
    "SyntaxNode",
    "is_whitespace_text",
    "markup_text",
]
