# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for suppression directive decoding and encoding."""

from __future__ import annotations

import pytest

from suppress_eslint_errors.suppression import (
    DirectiveForm,
    SuppressionDirective,
    decode_directive,
    encode_directive,
)
from suppress_eslint_errors.syntax import CommentKind


def test_decode_next_line_directive_with_explanation() -> None:
    directive = decode_directive(" eslint-disable-next-line eqeqeq, no-undef -- for reasons")

    assert directive == SuppressionDirective(
        form=DirectiveForm.NEXT_LINE,
        rules=("eqeqeq", "no-undef"),
        explanation="for reasons",
    )


def test_decode_same_line_directive_without_explanation() -> None:
    directive = decode_directive(" eslint-disable-line eqeqeq ")

    assert directive is not None
    assert directive.form is DirectiveForm.SAME_LINE
    assert directive.rules == ("eqeqeq",)
    assert directive.explanation is None


@pytest.mark.parametrize(
    "text",
    [
        " just a comment",
        " eslint-disable eqeqeq",
        " eslint-disable-next-lineeqeqeq",
        " TODO eslint-disable-next-line eqeqeq",
    ],
)
def test_decode_rejects_other_comments(text: str) -> None:
    assert decode_directive(text) is None


def test_bare_directive_covers_every_rule() -> None:
    directive = decode_directive(" eslint-disable-next-line")

    assert directive is not None
    assert directive.rules == ()
    assert directive.covers("anything")
    assert directive.with_rule("eqeqeq") is directive


def test_with_rule_appends_once_and_keeps_explanation() -> None:
    directive = SuppressionDirective(form=DirectiveForm.NEXT_LINE, rules=("eqeqeq",), explanation="why")

    extended = directive.with_rule("no-undef")

    assert extended.rules == ("eqeqeq", "no-undef")
    assert extended.explanation == "why"
    assert extended.with_rule("eqeqeq") is extended


def test_duplicate_rules_are_collapsed() -> None:
    directive = SuppressionDirective(form=DirectiveForm.SAME_LINE, rules=("a", "b", "a"))

    assert directive.rules == ("a", "b")


def test_encode_line_comment() -> None:
    directive = SuppressionDirective(
        form=DirectiveForm.NEXT_LINE,
        rules=("eqeqeq",),
        explanation="TODO: Fix this the next time the file is edited.",
    )

    assert (
        encode_directive(directive)
        == " eslint-disable-next-line eqeqeq -- TODO: Fix this the next time the file is edited."
    )


def test_encode_block_comment_pads_closing_delimiter() -> None:
    directive = SuppressionDirective(form=DirectiveForm.NEXT_LINE, rules=("eqeqeq", "no-undef"))

    assert encode_directive(directive, CommentKind.BLOCK) == " eslint-disable-next-line eqeqeq, no-undef "


def test_encode_without_explanation_omits_separator() -> None:
    directive = SuppressionDirective(form=DirectiveForm.SAME_LINE, rules=("eqeqeq",), explanation=None)

    assert encode_directive(directive) == " eslint-disable-line eqeqeq"


def test_decoding_encoded_text_preserves_meaning() -> None:
    directive = SuppressionDirective(form=DirectiveForm.SAME_LINE, rules=("a", "b"), explanation="x -- y")

    assert decode_directive(encode_directive(directive)) == directive
