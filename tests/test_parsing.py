# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the Tree-sitter adapter and the splice printer."""

from __future__ import annotations

import pytest

pytest.importorskip("tree_sitter_javascript")

from suppress_eslint_errors.errors import SourceParseError
from suppress_eslint_errors.printing import render_tree
from suppress_eslint_errors.suppression import TargetShape, locate_target
from suppress_eslint_errors.syntax import (
    ROLE_ALTERNATE,
    ROLE_CONDITION,
    ROLE_CONSEQUENT,
    Comment,
    CommentKind,
    CommentSlot,
    NodeKind,
    append_comment,
)
from suppress_eslint_errors.treesitter import classify, parse_source

JSX_SOURCE = """export function Component({ a, b }) {
  return (
    <div>
      Some text <span>{a == b}</span>.
    </div>
  );
}
"""


@pytest.mark.parametrize(
    ("grammar_type", "kind"),
    [
        ("if_statement", NodeKind.CONDITIONAL),
        ("return_statement", NodeKind.STATEMENT),
        ("lexical_declaration", NodeKind.STATEMENT),
        ("binary_expression", NodeKind.EXPRESSION),
        ("jsx_closing_element", NodeKind.MARKUP_CLOSING_TAG),
    ],
)
def test_classify(grammar_type: str, kind: NodeKind) -> None:
    assert classify(grammar_type) is kind


def test_program_spans_whole_file() -> None:
    tree = parse_source("\n\nconst a = 1;\n", "a.js")

    assert tree.root.kind is NodeKind.PROGRAM
    assert tree.root.span is not None
    assert tree.root.span.start_line == 1
    assert tree.root.children[0].start_line == 3


def test_conditional_roles_and_else_flattening() -> None:
    tree = parse_source("if (a) {\n  b();\n} else if (c) {\n  d();\n}\n")
    conditional = tree.root.children[0]

    assert conditional.kind is NodeKind.CONDITIONAL
    assert [child.role for child in conditional.children] == [ROLE_CONDITION, ROLE_CONSEQUENT, ROLE_ALTERNATE]
    alternate = conditional.child_with_role(ROLE_ALTERNATE)
    assert alternate is not None
    assert alternate.kind is NodeKind.CONDITIONAL
    assert alternate.parent is conditional


def test_comments_attach_like_babel() -> None:
    source = "// leading\nfoo(); // trailing\nfunction f() {\n  // inner\n}\n"
    tree = parse_source(source)
    call, function = tree.root.children

    assert [comment.text for comment in call.leading_comments] == [" leading"]
    assert [comment.text for comment in call.trailing_comments] == [" trailing"]
    body = function.children[-1]
    assert body.kind is NodeKind.BLOCK
    assert [comment.text for comment in body.inner_comments] == [" inner"]
    assert all(comment.kind is CommentKind.LINE for comment in body.inner_comments)


def test_jsx_element_children_cover_source_text() -> None:
    tree = parse_source(JSX_SOURCE)
    element = next(node for node in tree.root.iter_nodes() if node.kind is NodeKind.MARKUP_ELEMENT)

    kinds = [child.kind for child in element.children]
    assert kinds[0] is NodeKind.MARKUP_OPENING_TAG
    assert kinds[-1] is NodeKind.MARKUP_CLOSING_TAG
    texts = [child.value for child in element.children if child.kind is NodeKind.MARKUP_TEXT]
    assert texts == ["\n      Some text ", ".\n    "]


def test_comment_only_hole_becomes_empty_expression() -> None:
    tree = parse_source("const x = (\n  <div>\n    {/* note */}\n  </div>\n);\n")
    hole = next(node for node in tree.root.iter_nodes() if node.kind is NodeKind.MARKUP_EXPRESSION_HOLE)

    assert [child.kind for child in hole.children] == [NodeKind.EMPTY_EXPRESSION]
    assert [comment.text for comment in hole.children[0].inner_comments] == [" note "]


def test_locate_target_shapes() -> None:
    tree = parse_source(JSX_SOURCE)

    location = locate_target(tree.root, 4)
    assert location is not None
    assert location.shape is TargetShape.MARKUP_SIBLING
    assert location.node.grammar_type == "jsx_element"

    closing = locate_target(tree.root, 5)
    assert closing is not None
    assert closing.shape is TargetShape.CLOSING_TAG
    assert locate_target(tree.root, 8) is None


def test_parse_error_raises() -> None:
    with pytest.raises(SourceParseError) as excinfo:
        parse_source("function (", "broken.js")

    assert excinfo.value.path == "broken.js"


def test_render_without_edits_is_identity() -> None:
    tree = parse_source(JSX_SOURCE)

    assert render_tree(tree) == JSX_SOURCE


def test_render_new_trailing_comment_mid_line_uses_block() -> None:
    tree = parse_source("const a = b == c; foo();\n")
    declaration = tree.root.children[0]
    append_comment(declaration, Comment(kind=CommentKind.LINE, text=" note"), CommentSlot.TRAILING)

    assert render_tree(tree) == "const a = b == c;/* note */ foo();\n"


def test_render_keeps_multibyte_text() -> None:
    source = "const s = 'héllo';\nconst t = s == 'x';\n"
    tree = parse_source(source)
    append_comment(tree.root.children[1], Comment(kind=CommentKind.LINE, text=" here"), CommentSlot.LEADING)

    assert render_tree(tree) == "const s = 'héllo';\n// here\nconst t = s == 'x';\n"
