# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for folding rules into existing directive comments."""

from __future__ import annotations

from suppress_eslint_errors.suppression import MergeResult, merge_into_hole, merge_rule
from suppress_eslint_errors.suppression.merger import merge_comment, merge_same_line
from suppress_eslint_errors.syntax import (
    Comment,
    CommentKind,
    NodeKind,
    Span,
    SyntaxNode,
    directive_hole,
)


def _parsed_comment(text: str, kind: CommentKind = CommentKind.LINE) -> Comment:
    return Comment(kind=kind, text=text, span=Span(start_byte=0, end_byte=len(text) + 2, start_line=1, end_line=1))


def test_merge_extends_rule_list_and_marks_rewrite() -> None:
    comment = _parsed_comment(" eslint-disable-next-line eqeqeq")

    result = merge_comment(comment, "no-undef")

    assert result is MergeResult.EXTENDED
    assert result.merged
    assert comment.text == " eslint-disable-next-line eqeqeq, no-undef"
    assert comment.is_rewritten


def test_merge_keeps_existing_explanation() -> None:
    comment = _parsed_comment(" eslint-disable-line eqeqeq -- for reasons")

    merge_comment(comment, "no-unused-vars")

    assert comment.text == " eslint-disable-line eqeqeq, no-unused-vars -- for reasons"


def test_merge_block_comment_keeps_padding() -> None:
    comment = _parsed_comment(" eslint-disable-next-line eqeqeq ", CommentKind.BLOCK)

    merge_comment(comment, "no-undef")

    assert comment.text == " eslint-disable-next-line eqeqeq, no-undef "


def test_merge_reports_rule_already_present() -> None:
    comment = _parsed_comment(" eslint-disable-next-line eqeqeq")

    assert merge_comment(comment, "eqeqeq") is MergeResult.ALREADY_PRESENT
    assert not comment.is_rewritten


def test_merge_ignores_plain_comments() -> None:
    comment = _parsed_comment(" regular comment")

    result = merge_comment(comment, "eqeqeq")

    assert result is MergeResult.NOT_A_DIRECTIVE
    assert not result.merged


def test_merge_rule_only_considers_last_comment() -> None:
    directive = _parsed_comment(" eslint-disable-next-line eqeqeq")
    plain = _parsed_comment(" explains the next line")

    assert merge_rule([directive, plain], "no-undef") is MergeResult.NOT_A_DIRECTIVE
    assert merge_rule([], "no-undef") is MergeResult.NOT_A_DIRECTIVE


def test_merge_into_directive_hole() -> None:
    hole = directive_hole(" eslint-disable-next-line eqeqeq ")

    assert merge_into_hole(hole, "no-undef") is MergeResult.EXTENDED
    assert hole.children[0].inner_comments[0].text == " eslint-disable-next-line eqeqeq, no-undef "


def test_merge_into_hole_rejects_expressions() -> None:
    hole = SyntaxNode(kind=NodeKind.MARKUP_EXPRESSION_HOLE)
    hole.adopt([SyntaxNode(kind=NodeKind.EXPRESSION)])

    assert merge_into_hole(hole, "eqeqeq") is MergeResult.NOT_A_DIRECTIVE
    assert merge_into_hole(SyntaxNode(kind=NodeKind.MARKUP_TEXT, value=" "), "eqeqeq") is MergeResult.NOT_A_DIRECTIVE


def test_merge_same_line_looks_past_trailing_remarks() -> None:
    directive = _parsed_comment(" eslint-disable-line eqeqeq ", CommentKind.BLOCK)
    remark = _parsed_comment(" note")

    assert merge_rule([directive, remark], "no-undef") is MergeResult.NOT_A_DIRECTIVE
    assert merge_same_line([directive, remark], "no-undef", 1) is MergeResult.EXTENDED
    assert directive.text == " eslint-disable-line eqeqeq, no-undef "


def test_merge_same_line_ignores_other_lines_and_next_line_directives() -> None:
    next_line = _parsed_comment(" eslint-disable-next-line eqeqeq")
    same_line = _parsed_comment(" eslint-disable-line eqeqeq")

    assert merge_same_line([next_line], "eqeqeq", 1) is MergeResult.NOT_A_DIRECTIVE
    assert merge_same_line([same_line], "eqeqeq", 2) is MergeResult.NOT_A_DIRECTIVE
