# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fold a rule id into an existing suppression directive comment."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from ..syntax import Comment, NodeKind, SyntaxNode
from .directive import DirectiveForm, decode_directive, encode_directive


class MergeResult(str, Enum):
    """Outcome of attempting to merge a rule into a comment."""

    NOT_A_DIRECTIVE = "not_a_directive"
    ALREADY_PRESENT = "already_present"
    EXTENDED = "extended"

    @property
    def merged(self) -> bool:
        """Return ``True`` when the comment now suppresses the rule."""

        return self is not MergeResult.NOT_A_DIRECTIVE


def merge_comment(comment: Comment, rule_id: str) -> MergeResult:
    """Add ``rule_id`` to the directive encoded by ``comment``.

    The original explanation is kept even when the caller has a different
    message configured.

    Args:
        comment: Candidate comment; rewritten in place when extended.
        rule_id: Rule identifier to suppress.

    Returns:
        MergeResult: How the comment relates to ``rule_id`` after the call.
    """

    directive = decode_directive(comment.text)
    if directive is None:
        return MergeResult.NOT_A_DIRECTIVE
    if directive.covers(rule_id):
        return MergeResult.ALREADY_PRESENT
    comment.text = encode_directive(directive.with_rule(rule_id), comment.kind)
    return MergeResult.EXTENDED


def merge_rule(comments: Sequence[Comment], rule_id: str) -> MergeResult:
    """Merge ``rule_id`` into the last comment of a comment slot.

    Only the comment closest to the attach point is considered.
    """

    if not comments:
        return MergeResult.NOT_A_DIRECTIVE
    return merge_comment(comments[-1], rule_id)


def merge_same_line(comments: Sequence[Comment], rule_id: str, line: int | None) -> MergeResult:
    """Merge ``rule_id`` into any ``eslint-disable-line`` comment on ``line``.

    Unlike :func:`merge_rule` every comment of the slot is inspected, so a
    directive followed by an ordinary remark on the same line still counts.
    Comments without a span are new and always sit on the target line.
    """

    for comment in comments:
        if comment.span is not None and comment.span.start_line != line:
            continue
        directive = decode_directive(comment.text)
        if directive is not None and directive.form is DirectiveForm.SAME_LINE:
            return merge_comment(comment, rule_id)
    return MergeResult.NOT_A_DIRECTIVE


def merge_into_hole(node: SyntaxNode, rule_id: str) -> MergeResult:
    """Merge ``rule_id`` into a directive hidden inside an empty expression hole.

    Args:
        node: Candidate sibling; only ``{/* ... */}`` holes qualify.
        rule_id: Rule identifier to suppress.

    Returns:
        MergeResult: ``NOT_A_DIRECTIVE`` for anything but a comment-only hole.
    """

    if node.kind is not NodeKind.MARKUP_EXPRESSION_HOLE or len(node.children) != 1:
        return MergeResult.NOT_A_DIRECTIVE
    expression = node.children[0]
    if expression.kind is not NodeKind.EMPTY_EXPRESSION:
        return MergeResult.NOT_A_DIRECTIVE
    return merge_rule(expression.inner_comments, rule_id)


__all__ = ["MergeResult", "merge_comment", "merge_into_hole", "merge_rule", "merge_same_line"]
