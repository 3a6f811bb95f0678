# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Find the node that should carry a suppression for a diagnostic line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..syntax import (
    ROLE_ALTERNATE,
    ROLE_CONSEQUENT,
    NodeKind,
    SyntaxNode,
    insert_placeholder_statement,
    is_whitespace_text,
)
from .merger import MergeResult, merge_rule


class TargetShape(str, Enum):
    """Insertion strategies, in the order the locator checks them."""

    CONDITIONAL_TAIL = "conditional_tail"
    CLOSING_TAG = "closing_tag"
    ATTRIBUTE = "attribute"
    HOLE_CHILD = "hole_child"
    MARKUP_SIBLING = "markup_sibling"
    UNSUPPORTED_MARKUP = "unsupported_markup"
    ORDINARY = "ordinary"


@dataclass(slots=True)
class TargetLocation:
    """Attach point chosen for one diagnostic line.

    For ``CONDITIONAL_TAIL`` the node is the consequent block of the
    conditional whose alternate starts on the line; see
    :func:`settle_conditional_tail`.
    """

    node: SyntaxNode
    shape: TargetShape
    line: int
    parent: SyntaxNode | None = None
    index: int | None = None


def nodes_starting_on(root: SyntaxNode, line: int) -> list[SyntaxNode]:
    """Return every spanned node below the program starting on ``line``, in document order.

    Whitespace-only markup text never carries a suppression, so indentation
    fragments left behind by earlier insertions on the line are not candidates.
    """

    return [
        node
        for node in root.iter_nodes()
        if node.kind is not NodeKind.PROGRAM
        and node.span is not None
        and node.span.start_line == line
        and not is_whitespace_text(node)
    ]


def ascend(node: SyntaxNode, line: int) -> SyntaxNode:
    """Climb to the outermost ancestor still introduced on ``line``.

    Ascent stops at the program root and at the first parent whose span
    starts on another line; parents without a span are passed through.
    """

    current = node
    while True:
        parent = current.parent
        if parent is None or parent.kind is NodeKind.PROGRAM:
            return current
        if parent.span is not None and parent.span.start_line != line:
            return current
        current = parent


def locate_target(root: SyntaxNode, line: int) -> TargetLocation | None:
    """Pick the single attach point for a diagnostic reported on ``line``.

    Args:
        root: Root of the syntax tree.
        line: One-based diagnostic line.

    Returns:
        TargetLocation | None: Chosen node and strategy, or ``None`` when no
        node starts on ``line``.
    """

    candidates = nodes_starting_on(root, line)
    if not candidates:
        return None
    first = next((node for node in candidates if node.end_line == line), candidates[0])
    target = ascend(first, line)
    parent = target.parent
    index = parent.index_of(target) if parent is not None else None

    consequent = _block_consequent(parent, target) if parent is not None else None
    if parent is not None and consequent is not None:
        return TargetLocation(
            node=consequent,
            shape=TargetShape.CONDITIONAL_TAIL,
            line=line,
            parent=parent,
            index=parent.index_of(consequent),
        )
    return TargetLocation(node=target, shape=_classify(target, parent), line=line, parent=parent, index=index)


def settle_conditional_tail(block: SyntaxNode, rule_id: str) -> SyntaxNode | MergeResult:
    """Resolve the statement that carries a suppression ahead of an ``else``.

    An empty consequent first offers its parked inner comment for merging;
    failing that a placeholder statement is inserted so a trailing comment has
    something to attach to.

    Args:
        block: Consequent block of the conditional.
        rule_id: Rule identifier being suppressed.

    Returns:
        SyntaxNode | MergeResult: The statement to annotate, or the merge
        result when the block's inner comment absorbed the rule.
    """

    if not block.children:
        result = merge_rule(block.inner_comments, rule_id)
        if result.merged:
            return result
        return insert_placeholder_statement(block)
    return block.children[-1]


def _block_consequent(parent: SyntaxNode, target: SyntaxNode) -> SyntaxNode | None:
    if parent.kind is not NodeKind.CONDITIONAL or target.role != ROLE_ALTERNATE:
        return None
    consequent = parent.child_with_role(ROLE_CONSEQUENT)
    if consequent is None or consequent.kind is not NodeKind.BLOCK:
        return None
    return consequent


def _classify(target: SyntaxNode, parent: SyntaxNode | None) -> TargetShape:
    if target.kind is NodeKind.MARKUP_CLOSING_TAG:
        return TargetShape.CLOSING_TAG
    if target.kind is NodeKind.MARKUP_ATTRIBUTE:
        return TargetShape.ATTRIBUTE
    if parent is None:
        return TargetShape.ORDINARY
    if parent.kind is NodeKind.MARKUP_EXPRESSION_HOLE:
        return TargetShape.HOLE_CHILD
    if parent.is_markup:
        if parent.kind is NodeKind.MARKUP_ELEMENT:
            return TargetShape.MARKUP_SIBLING
        return TargetShape.UNSUPPORTED_MARKUP
    return TargetShape.ORDINARY


__all__ = [
    "TargetLocation",
    "TargetShape",
    "ascend",
    "locate_target",
    "nodes_starting_on",
    "settle_conditional_tail",
]
