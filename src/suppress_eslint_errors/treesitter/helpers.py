# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tree-sitter helper utilities shared by the tree builder."""

from __future__ import annotations

from collections.abc import Iterator

from tree_sitter import Node as TSNode

from ..syntax import Span


def iter_tree_nodes(node: TSNode) -> Iterator[TSNode]:
    """Visit nodes in depth-first order starting from the supplied node.

    Args:
        node: Root node used as the traversal starting point.

    Yields:
        TSNode: Nodes visited in depth-first order.
    """

    yield node
    for child in node.children:
        if child is not None:
            yield from iter_tree_nodes(child)


def node_row_span(node: TSNode) -> tuple[int, int]:
    """Return the one-based (start, end) line numbers of ``node``."""

    return node.start_point[0] + 1, node.end_point[0] + 1


def node_span(node: TSNode) -> Span:
    """Return the byte and line span of ``node``."""

    start_line, end_line = node_row_span(node)
    return Span(start_byte=node.start_byte, end_byte=node.end_byte, start_line=start_line, end_line=end_line)


def first_error_line(node: TSNode) -> int | None:
    """Return the one-based line of the first error or missing node, if any."""

    for current in iter_tree_nodes(node):
        if current.type == "ERROR" or current.is_missing:
            return node_row_span(current)[0]
    return None


__all__ = ["first_error_line", "iter_tree_nodes", "node_row_span", "node_span"]
