# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Split markup text around a target line and splice directive holes into it.

Markup children are whitespace sensitive, so a directive hole can only be
inserted once the surrounding text has been cut into fragments that separate
indentation, content and newlines. The fragments always concatenate to the
text they replace.
"""

from __future__ import annotations

from typing import Final

from ..syntax import (
    NodeKind,
    SyntaxNode,
    directive_hole,
    insert_children,
    is_whitespace_text,
    markup_text,
    split_text,
)
from .merger import MergeResult, merge_into_hole

_NEWLINE: Final[str] = "\n"


def segment_text(value: str) -> list[str]:
    """Cut ``value`` into whitespace, content and newline fragments.

    Each physical line contributes its leading whitespace, its content and its
    trailing whitespace as separate fragments; lines are separated by ``"\\n"``
    fragments. Whitespace-only lines are kept as a single fragment.

    Args:
        value: Markup text to segment.

    Returns:
        list[str]: Non-empty fragments whose concatenation equals ``value``.
    """

    pieces: list[str] = []
    lines = value.split(_NEWLINE)
    for number, line in enumerate(lines):
        if line.strip():
            start = len(line) - len(line.lstrip())
            end = len(line.rstrip())
            pieces.extend((line[:start], line[start:end], line[end:]))
        else:
            pieces.append(line)
        if number != len(lines) - 1:
            pieces.append(_NEWLINE)
    return [piece for piece in pieces if piece]


def segment_siblings(parent: SyntaxNode) -> None:
    """Segment every markup text child of ``parent`` in place.

    Text that is pure indentation following a newline is already a clean
    separator and is left whole.
    """

    for index in range(len(parent.children) - 1, -1, -1):
        child = parent.children[index]
        if child.kind is not NodeKind.MARKUP_TEXT:
            continue
        value = child.value or ""
        if value.startswith(_NEWLINE) and not value.strip():
            continue
        split_text(parent, index, segment_text(value))


def widen_backward(children: list[SyntaxNode], index: int, line: int) -> int:
    """Move ``index`` left over everything that shares the target line.

    Text fragments without a newline and spanned siblings starting on
    ``line`` are absorbed; new nodes without a span are stepped over.

    Returns:
        int: Index of the first sibling of the group on ``line``.
    """

    start = index
    for position in range(index - 1, -1, -1):
        sibling = children[position]
        if sibling.kind is NodeKind.MARKUP_TEXT:
            if _NEWLINE in (sibling.value or ""):
                break
            start = position
        elif sibling.span is not None:
            if sibling.span.start_line != line:
                break
            start = position
    return start


def merge_before(children: list[SyntaxNode], index: int, rule_id: str) -> MergeResult:
    """Merge ``rule_id`` into a directive hole preceding ``index``.

    Whitespace-only text is skipped; the first other sibling must be a
    comment-only expression hole for the merge to happen.
    """

    for position in range(index - 1, -1, -1):
        sibling = children[position]
        if is_whitespace_text(sibling):
            continue
        return merge_into_hole(sibling, rule_id)
    return MergeResult.NOT_A_DIRECTIVE


def prepare_siblings(parent: SyntaxNode, target: SyntaxNode, line: int) -> int:
    """Segment the text of ``parent`` and return where a directive group starts.

    Args:
        parent: Markup element whose children contain ``target``.
        target: Child reported on ``line``.
        line: One-based diagnostic line.

    Returns:
        int: Index among ``parent.children`` before which the directive belongs.
    """

    segment_siblings(parent)
    return widen_backward(parent.children, parent.index_of(target), line)


def insert_sibling_directive(parent: SyntaxNode, index: int, text: str, indentation: str) -> SyntaxNode:
    """Insert a directive hole on its own line before ``parent.children[index]``.

    Indentation that follows the previous newline is split off so the hole
    takes the place of the original line's content, and a newline carrying
    ``indentation`` restores the line the hole displaced.

    Args:
        parent: Markup element receiving the hole.
        index: Insertion index returned by :func:`prepare_siblings`.
        text: Block comment payload for the hole.
        indentation: Leading whitespace of the target line.

    Returns:
        SyntaxNode: The inserted hole.
    """

    position = _split_trailing_indent(parent, index)
    if position < len(parent.children):
        current = parent.children[position]
        if is_whitespace_text(current) and _NEWLINE not in (current.value or ""):
            position += 1
    hole = directive_hole(text)
    insert_children(parent, position, [hole, markup_text(_NEWLINE + indentation)])
    return hole


def insert_closing_directive(
    parent: SyntaxNode,
    index: int,
    text: str,
    indentation: str,
    unit: str,
) -> SyntaxNode:
    """Insert a directive hole on its own line just above a closing tag.

    The hole is indented one ``unit`` deeper than the closing tag.

    Args:
        parent: Markup element owning the closing tag.
        index: Position of the closing tag among ``parent.children``.
        text: Block comment payload for the hole.
        indentation: Leading whitespace of the closing tag's line.
        unit: Indentation unit of the file.

    Returns:
        SyntaxNode: The inserted hole.
    """

    hole = directive_hole(text)
    previous = parent.children[index - 1] if index > 0 else None
    if previous is not None and previous.kind is NodeKind.MARKUP_TEXT:
        value = previous.value or ""
        newline = value.rfind(_NEWLINE)
        if newline != -1 and not value[newline + 1 :].strip():
            # The indentation run (if any) moves behind the hole and keeps
            # indenting the closing tag.
            split_text(parent, index - 1, [value[: newline + 1], value[newline + 1 :]])
            insert_children(parent, index, [markup_text(indentation + unit), hole, markup_text(_NEWLINE)])
            return hole
    insert_children(
        parent,
        index,
        [markup_text(_NEWLINE + indentation + unit), hole, markup_text(_NEWLINE + indentation)],
    )
    return hole


def _split_trailing_indent(parent: SyntaxNode, index: int) -> int:
    if index == 0:
        return index
    previous = parent.children[index - 1]
    if previous.kind is not NodeKind.MARKUP_TEXT:
        return index
    value = previous.value or ""
    newline = value.rfind(_NEWLINE)
    if newline == -1 or newline == len(value) - 1 or value[newline + 1 :].strip():
        return index
    split_text(parent, index - 1, [value[: newline + 1], value[newline + 1 :]])
    return index + 1


__all__ = [
    "insert_closing_directive",
    "insert_sibling_directive",
    "merge_before",
    "prepare_siblings",
    "segment_siblings",
    "segment_text",
    "widen_backward",
]
