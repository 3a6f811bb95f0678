# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Explicit tree editing operations used by the annotator.

Every mutation of a parsed tree goes through one of these helpers so the
printer can rely on a small set of invariants: parsed nodes keep their spans,
new nodes have none, and replaced text always concatenates to the original.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .nodes import Comment, CommentKind, NodeKind, Span, SyntaxNode


class CommentSlot(str, Enum):
    """Comment lists available on every node."""

    LEADING = "leading"
    TRAILING = "trailing"
    INNER = "inner"


def append_comment(node: SyntaxNode, comment: Comment, slot: CommentSlot) -> Comment:
    """Attach ``comment`` at the end of ``slot`` on ``node``.

    Postcondition: ``comment`` is the last entry of the slot and its
    ``leading``/``trailing`` flags describe that slot. Appending the same
    comment object twice leaves the slot unchanged.

    Args:
        node: Node receiving the comment.
        comment: Comment to attach.
        slot: Slot the comment is placed in.

    Returns:
        Comment: The attached comment.
    """

    comments = _slot(node, slot)
    comment.leading = slot is CommentSlot.LEADING
    comment.trailing = slot is CommentSlot.TRAILING
    if not any(existing is comment for existing in comments):
        comments.append(comment)
    return comment


def insert_children(parent: SyntaxNode, index: int, nodes: Sequence[SyntaxNode]) -> None:
    """Splice ``nodes`` into ``parent.children`` before ``index``.

    Postcondition: ``parent.children[index:index + len(nodes)]`` are ``nodes``
    and each of them points back at ``parent``.
    """

    for node in nodes:
        node.parent = parent
    parent.children[index:index] = list(nodes)


def split_text(parent: SyntaxNode, index: int, pieces: Sequence[str]) -> list[SyntaxNode]:
    """Replace the markup text child at ``index`` with one fragment per piece.

    Fragments of a parsed text node receive spans carved out of the original
    span so the printer keeps treating them as original source. Empty pieces
    are dropped.

    Postcondition: the fragments concatenate to the original value and occupy
    the original position among the siblings.

    Args:
        parent: Markup element owning the text node.
        index: Position of the text node among ``parent.children``.
        pieces: Replacement strings, in order.

    Returns:
        list[SyntaxNode]: The fragments now occupying the original position.

    Raises:
        ValueError: If the child is not text or the pieces do not reproduce it.
    """

    original = parent.children[index]
    if original.kind is not NodeKind.MARKUP_TEXT:
        raise ValueError(f"cannot split a {original.kind.value} node")
    value = original.value or ""
    kept = [piece for piece in pieces if piece]
    if "".join(kept) != value:
        raise ValueError("text fragments must concatenate to the original text")
    if len(kept) <= 1:
        return [original]

    fragments: list[SyntaxNode] = []
    offset = original.span.start_byte if original.span is not None else 0
    line = original.span.start_line if original.span is not None else 0
    for piece in kept:
        span: Span | None = None
        if original.span is not None:
            width = len(piece.encode("utf-8"))
            span = Span(
                start_byte=offset,
                end_byte=offset + width,
                start_line=line,
                end_line=line + piece.count("\n"),
            )
            offset += width
            line += piece.count("\n")
        fragments.append(
            SyntaxNode(kind=NodeKind.MARKUP_TEXT, grammar_type=original.grammar_type, span=span, value=piece)
        )
    for fragment in fragments:
        fragment.parent = parent
    parent.children[index : index + 1] = fragments
    return fragments


def insert_placeholder_statement(block: SyntaxNode) -> SyntaxNode:
    """Append an empty placeholder statement to ``block``.

    Postcondition: ``block.children[-1]`` is a new ``EMPTY_STATEMENT``. When the
    block already ends with a placeholder that one is returned instead.
    """

    if block.children:
        last = block.children[-1]
        if last.kind is NodeKind.EMPTY_STATEMENT and last.is_new:
            return last
    placeholder = SyntaxNode(kind=NodeKind.EMPTY_STATEMENT, grammar_type="empty_statement")
    insert_children(block, len(block.children), [placeholder])
    return placeholder


def directive_hole(text: str) -> SyntaxNode:
    """Return a new markup expression hole whose only content is a block comment."""

    empty = SyntaxNode(kind=NodeKind.EMPTY_EXPRESSION, grammar_type="jsx_empty_expression")
    append_comment(empty, Comment(kind=CommentKind.BLOCK, text=text), CommentSlot.INNER)
    hole = SyntaxNode(kind=NodeKind.MARKUP_EXPRESSION_HOLE, grammar_type="jsx_expression")
    hole.adopt([empty])
    return hole


def _slot(node: SyntaxNode, slot: CommentSlot) -> list[Comment]:
    if slot is CommentSlot.LEADING:
        return node.leading_comments
    if slot is CommentSlot.TRAILING:
        return node.trailing_comments
    return node.inner_comments


__all__ = [
    "CommentSlot",
    "append_comment",
    "directive_hole",
    "insert_children",
    "insert_placeholder_statement",
    "split_text",
]
