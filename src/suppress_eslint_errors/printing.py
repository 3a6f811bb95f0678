# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Serialise an annotated :class:`SourceTree` back to source text.

The printer never reformats: original bytes are copied verbatim and only new
nodes, new comments and rewritten comments produce output of their own. New
comments borrow the indentation of the line they annotate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from .syntax import Comment, CommentKind, NodeKind, SourceTree, Span, SyntaxNode

_NEWLINE: Final[str] = "\n"


class _Placement(IntEnum):
    """Tie-breaker for edits that share an offset."""

    AFTER_NODE = 0
    BETWEEN = 1
    BEFORE_NODE = 2


@dataclass(frozen=True, slots=True)
class _Edit:
    start: int
    end: int
    placement: _Placement
    sequence: int
    text: str


class TreePrinter:
    """Collect splice edits for one tree and apply them to its source."""

    def __init__(self, tree: SourceTree) -> None:
        self.tree = tree
        self.source = tree.source
        self._edits: list[_Edit] = []

    def render(self) -> str:
        """Return the source text of the tree including every edit."""

        self._edits.clear()
        stack = [self.tree.root]
        while stack:
            node = stack.pop()
            self._collect(node)
            stack.extend(reversed([child for child in node.children if not child.is_new]))
        return self._apply()

    def _collect(self, node: SyntaxNode) -> None:
        for comment in (*node.leading_comments, *node.trailing_comments, *node.inner_comments):
            if comment.is_rewritten and comment.span is not None:
                self._add(comment.span.start_byte, _delimit(comment), _Placement.BETWEEN, end=comment.span.end_byte)
        if node.span is not None:
            self._collect_new_leading(node, node.span)
            self._collect_new_trailing(node, node.span)
        for index, child in enumerate(node.children):
            if child.is_new:
                self._add(self._anchor(node, index), self._render_new(child, node), _Placement.BETWEEN)

    def _collect_new_leading(self, node: SyntaxNode, span: Span) -> None:
        start = span.start_byte
        indent = self.source.indentation(span.start_line)
        for comment in node.leading_comments:
            if not comment.is_new:
                continue
            if self.source.starts_line(start):
                text = f"{_delimit(comment)}{_NEWLINE}{indent}"
            else:
                text = f"{_NEWLINE}{indent}{_delimit(comment)}{_NEWLINE}{indent}"
            self._add(start, text, _Placement.BEFORE_NODE)

    def _collect_new_trailing(self, node: SyntaxNode, span: Span) -> None:
        end = span.end_byte
        indent = self.source.indentation(span.start_line)
        own_line_anchor = max(
            [end, *(comment.span.end_byte for comment in node.trailing_comments if comment.span is not None)]
        )
        for comment in node.trailing_comments:
            if not comment.is_new:
                continue
            if comment.own_line:
                self._add(own_line_anchor, f"{_NEWLINE}{indent}{_delimit(comment)}", _Placement.AFTER_NODE)
            elif comment.kind is CommentKind.LINE and self.source.rest_of_line_blank(end):
                self._add(end, _delimit(comment), _Placement.AFTER_NODE)
            else:
                self._add(end, f"/*{comment.text.rstrip()} */", _Placement.AFTER_NODE)

    def _anchor(self, parent: SyntaxNode, index: int) -> int:
        """Return the byte offset at which a new child at ``index`` is spliced in."""

        for sibling in reversed(parent.children[:index]):
            if sibling.span is not None:
                return sibling.span.end_byte
        if parent.span is None:
            raise ValueError(f"cannot place a new child inside an unplaced {parent.kind.value} node")
        if parent.kind is NodeKind.BLOCK:
            inner_ends = [comment.span.end_byte for comment in parent.inner_comments if comment.span is not None]
            return max([parent.span.start_byte + 1, *inner_ends])
        for sibling in parent.children[index + 1 :]:
            if sibling.span is not None:
                return sibling.span.start_byte
        return parent.span.start_byte

    def _render_new(self, node: SyntaxNode, parent: SyntaxNode) -> str:
        if node.kind is NodeKind.MARKUP_TEXT:
            return node.value or ""
        if node.kind is NodeKind.MARKUP_EXPRESSION_HOLE:
            return "{" + "".join(self._render_new(child, node) for child in node.children) + "}"
        if node.kind is NodeKind.EMPTY_EXPRESSION:
            return "".join(_as_block(comment) for comment in node.inner_comments)
        if node.kind is NodeKind.EMPTY_STATEMENT:
            indent = self.tree.indent_unit
            if parent.span is not None:
                indent = self.source.indentation(parent.span.start_line) + indent
            rendered = [f"{_NEWLINE}{indent}{_delimit(comment)}" for comment in node.trailing_comments]
            return _NEWLINE + "".join(rendered)
        raise ValueError(f"printing new {node.kind.value} nodes is not supported")

    def _add(self, start: int, text: str, placement: _Placement, *, end: int | None = None) -> None:
        self._edits.append(
            _Edit(
                start=start,
                end=start if end is None else end,
                placement=placement,
                sequence=len(self._edits),
                text=text,
            )
        )

    def _apply(self) -> str:
        data = self.source.data
        chunks: list[bytes] = []
        position = 0
        for edit in sorted(self._edits, key=lambda item: (item.start, item.placement, item.sequence)):
            if edit.start > position:
                chunks.append(data[position : edit.start])
            chunks.append(edit.text.encode("utf-8"))
            position = max(position, edit.end)
        chunks.append(data[position:])
        return b"".join(chunks).decode("utf-8")


def render_tree(tree: SourceTree) -> str:
    """Render ``tree`` to text, preserving every untouched byte of its source.

    Args:
        tree: Parsed and possibly annotated source tree.

    Returns:
        str: Source text including inserted and rewritten comments.
    """

    return TreePrinter(tree).render()


def _delimit(comment: Comment) -> str:
    if comment.kind is CommentKind.LINE:
        return f"//{comment.text}"
    return f"/*{comment.text}*/"


def _as_block(comment: Comment) -> str:
    if comment.kind is CommentKind.BLOCK:
        return _delimit(comment)
    return f"/*{comment.text} */"


__all__ = ["TreePrinter", "render_tree"]
