# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapt Tree-sitter JavaScript/JSX parse trees into :class:`SyntaxNode` trees.

Anonymous tokens are dropped, ``else`` clauses collapse into the alternate
they introduce, and JSX element content is rebuilt from the raw source so
every byte between tags is represented by a markup text node. Comments are
attached to the nearest node the way Babel attaches them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from tree_sitter import Node as TSNode

from ..errors import SourceParseError
from ..syntax import (
    ROLE_ALTERNATE,
    ROLE_CONDITION,
    ROLE_CONSEQUENT,
    Comment,
    CommentKind,
    CommentSlot,
    NodeKind,
    SourceText,
    SourceTree,
    Span,
    SyntaxNode,
    append_comment,
    detect_indent_unit,
    markup_text,
)
from .grammars import build_javascript_parser
from .helpers import first_error_line, node_span

LOGGER = logging.getLogger(__name__)

_COMMENT: Final[str] = "comment"
_HTML_COMMENT: Final[str] = "html_comment"
_ELSE_CLAUSE: Final[str] = "else_clause"
_LINE_COMMENT_PREFIX: Final[str] = "//"
_BLOCK_COMMENT_PREFIX: Final[str] = "/*"

_FIXED_KINDS: Final[dict[str, NodeKind]] = {
    "program": NodeKind.PROGRAM,
    "statement_block": NodeKind.BLOCK,
    "if_statement": NodeKind.CONDITIONAL,
    "empty_statement": NodeKind.EMPTY_STATEMENT,
    "jsx_element": NodeKind.MARKUP_ELEMENT,
    "jsx_self_closing_element": NodeKind.MARKUP_ELEMENT,
    "jsx_opening_element": NodeKind.MARKUP_OPENING_TAG,
    "jsx_closing_element": NodeKind.MARKUP_CLOSING_TAG,
    "jsx_attribute": NodeKind.MARKUP_ATTRIBUTE,
    "jsx_expression": NodeKind.MARKUP_EXPRESSION_HOLE,
}
_STATEMENT_SUFFIXES: Final[tuple[str, ...]] = ("_statement", "_declaration")
_IF_FIELD_ROLES: Final[dict[str, str]] = {
    "condition": ROLE_CONDITION,
    "consequence": ROLE_CONSEQUENT,
}
# Element content that is kept verbatim as markup text.
_JSX_TEXT_TYPES: Final[frozenset[str]] = frozenset({"jsx_text", "html_character_reference", _COMMENT, _HTML_COMMENT})
_OPENING_TAG_TYPES: Final[frozenset[str]] = frozenset({"jsx_opening_element", "jsx_self_closing_element"})

type Entry = SyntaxNode | Comment


def classify(grammar_type: str) -> NodeKind:
    """Map a Tree-sitter node type onto the closed :class:`NodeKind` set."""

    kind = _FIXED_KINDS.get(grammar_type)
    if kind is not None:
        return kind
    if grammar_type.endswith(_STATEMENT_SUFFIXES):
        return NodeKind.STATEMENT
    return NodeKind.EXPRESSION


class TreeBuilder:
    """Convert one Tree-sitter tree into the package's syntax model."""

    def __init__(self, source: SourceText) -> None:
        self.source = source

    def build(self, root: TSNode) -> SyntaxNode:
        """Return the :class:`SyntaxNode` program for ``root``.

        The program spans the whole file so leading blank lines never pull
        ascent past the first statement.
        """

        program = SyntaxNode(
            kind=NodeKind.PROGRAM,
            grammar_type=root.type,
            span=Span(
                start_byte=0,
                end_byte=len(self.source.data),
                start_line=1,
                end_line=self.source.line_count,
            ),
        )
        self._attach(program, self._entries(root))
        return program

    def _convert(self, node: TSNode, parent_type: str = "") -> SyntaxNode:
        if node.type == "jsx_expression" and parent_type in _OPENING_TAG_TYPES:
            kind = NodeKind.MARKUP_ATTRIBUTE
        else:
            kind = classify(node.type)
        converted = SyntaxNode(kind=kind, grammar_type=node.type, span=node_span(node))
        if node.type == "jsx_element":
            self._attach(converted, self._element_entries(node))
        elif node.type == "jsx_self_closing_element":
            tag = SyntaxNode(kind=NodeKind.MARKUP_OPENING_TAG, grammar_type=node.type, span=converted.span)
            self._attach(tag, self._entries(node))
            converted.adopt([tag])
        elif node.type == "jsx_expression" and kind is NodeKind.MARKUP_EXPRESSION_HOLE:
            self._fill_hole(converted, node)
        else:
            self._attach(converted, self._entries(node))
        return converted

    def _entries(self, node: TSNode) -> list[Entry]:
        entries: list[Entry] = []
        roles = _if_roles(node) if node.type == "if_statement" else {}
        for child in node.named_children:
            if child.type == _ELSE_CLAUSE:
                entries.extend(self._else_entries(child))
                continue
            entry = self._entry(child, node.type)
            if entry is None:
                continue
            if isinstance(entry, SyntaxNode) and roles:
                entry.role = roles.get((child.start_byte, child.end_byte))
            entries.append(entry)
        return entries

    def _else_entries(self, clause: TSNode) -> list[Entry]:
        entries: list[Entry] = []
        for child in clause.named_children:
            entry = self._entry(child, clause.type)
            if entry is None:
                continue
            if isinstance(entry, SyntaxNode):
                entry.role = ROLE_ALTERNATE
            entries.append(entry)
        return entries

    def _entry(self, node: TSNode, parent_type: str) -> Entry | None:
        if node.type == _HTML_COMMENT:
            return None
        if node.type == _COMMENT:
            return self._comment(node)
        return self._convert(node, parent_type)

    def _element_entries(self, node: TSNode) -> list[Entry]:
        anchors = [child for child in node.named_children if child.type not in _JSX_TEXT_TYPES]
        entries: list[Entry] = []
        for index, anchor in enumerate(anchors):
            if index > 0:
                text = self._text_between(anchors[index - 1].end_byte, anchor.start_byte)
                if text is not None:
                    entries.append(text)
            entries.append(self._convert(anchor, node.type))
        return entries

    def _text_between(self, start: int, end: int) -> SyntaxNode | None:
        if end <= start:
            return None
        span = Span(
            start_byte=start,
            end_byte=end,
            start_line=self.source.line_of(start),
            end_line=self.source.line_of(end),
        )
        return markup_text(self.source.slice(start, end), span)

    def _fill_hole(self, hole: SyntaxNode, node: TSNode) -> None:
        entries = self._entries(node)
        if any(isinstance(entry, SyntaxNode) for entry in entries):
            self._attach(hole, entries)
            return
        # ``{/* ... */}``: the comments belong to an empty expression between the braces.
        start, end = node.start_byte + 1, node.end_byte - 1
        empty = SyntaxNode(
            kind=NodeKind.EMPTY_EXPRESSION,
            grammar_type="jsx_empty_expression",
            span=Span(
                start_byte=start,
                end_byte=end,
                start_line=self.source.line_of(start),
                end_line=self.source.line_of(end),
            ),
        )
        for entry in entries:
            if isinstance(entry, Comment):
                append_comment(empty, entry, CommentSlot.INNER)
        hole.adopt([empty])

    def _comment(self, node: TSNode) -> Comment:
        raw = self.source.slice(node.start_byte, node.end_byte)
        if raw.startswith(_LINE_COMMENT_PREFIX):
            return Comment(kind=CommentKind.LINE, text=raw[2:], span=node_span(node))
        body = raw[2:-2] if raw.startswith(_BLOCK_COMMENT_PREFIX) else raw
        return Comment(kind=CommentKind.BLOCK, text=body, span=node_span(node))

    def _attach(self, parent: SyntaxNode, entries: list[Entry]) -> None:
        parent.adopt([entry for entry in entries if isinstance(entry, SyntaxNode)])
        for index, entry in enumerate(entries):
            if not isinstance(entry, Comment):
                continue
            preceding = _nearest_node(reversed(entries[:index]))
            following = _nearest_node(entries[index + 1 :])
            line = entry.span.start_line if entry.span is not None else None
            if preceding is not None and preceding.end_line == line:
                append_comment(preceding, entry, CommentSlot.TRAILING)
            elif following is not None:
                append_comment(following, entry, CommentSlot.LEADING)
            elif preceding is not None:
                entry.own_line = True
                append_comment(preceding, entry, CommentSlot.TRAILING)
            else:
                append_comment(parent, entry, CommentSlot.INNER)


def _if_roles(node: TSNode) -> dict[tuple[int, int], str]:
    roles: dict[tuple[int, int], str] = {}
    for field_name, role in _IF_FIELD_ROLES.items():
        child = node.child_by_field_name(field_name)
        if child is not None:
            roles[(child.start_byte, child.end_byte)] = role
    return roles


def _nearest_node(entries: Iterable[Entry]) -> SyntaxNode | None:
    for entry in entries:
        if isinstance(entry, SyntaxNode):
            return entry
    return None


def parse_source(text: str, path: str = "<source>") -> SourceTree:
    """Parse JavaScript/JSX ``text`` into a :class:`SourceTree`.

    Args:
        text: Source code to parse.
        path: File path used in messages.

    Returns:
        SourceTree: Parsed tree plus line and indentation facts.

    Raises:
        SourceParseError: If Tree-sitter reports syntax errors.
    """

    source = SourceText(text)
    tree = build_javascript_parser().parse(source.data)
    root = tree.root_node
    if root.has_error:
        line = first_error_line(root)
        raise SourceParseError(path, f"syntax error near line {line}" if line is not None else "syntax error")
    LOGGER.debug("parsed %s (%d lines)", path, source.line_count)
    return SourceTree(
        path=path,
        source=source,
        root=TreeBuilder(source).build(root),
        indent_unit=detect_indent_unit(text),
    )


__all__ = ["TreeBuilder", "classify", "parse_source"]
