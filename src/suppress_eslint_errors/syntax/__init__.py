# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Syntax tree model, editing operations and source helpers."""

from __future__ import annotations

from .edits import (
    CommentSlot,
    append_comment,
    directive_hole,
    insert_children,
    insert_placeholder_statement,
    split_text,
)
from .nodes import (
    MARKUP_KINDS,
    ROLE_ALTERNATE,
    ROLE_CONDITION,
    ROLE_CONSEQUENT,
    Comment,
    CommentKind,
    NodeKind,
    Span,
    SyntaxNode,
    is_whitespace_text,
    markup_text,
)
from .source import DEFAULT_INDENT_UNIT, SourceText, SourceTree, detect_indent_unit

__all__ = [
    "DEFAULT_INDENT_UNIT",
    "MARKUP_KINDS",
    "ROLE_ALTERNATE",
    "ROLE_CONDITION",
    "ROLE_CONSEQUENT",
    "Comment",
    "CommentKind",
    "CommentSlot",
    "NodeKind",
    "SourceText",
    "SourceTree",
    "Span",
    "SyntaxNode",
    "append_comment",
    "detect_indent_unit",
    "directive_hole",
    "insert_children",
    "insert_placeholder_statement",
    "is_whitespace_text",
    "markup_text",
    "split_text",
]
