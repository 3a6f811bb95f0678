# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source text helpers and the parsed-file container."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass, field
from functools import reduce
from typing import Final

from .nodes import SyntaxNode

DEFAULT_INDENT_UNIT: Final[str] = "  "
_TAB: Final[str] = "\t"


class SourceText:
    """Byte-addressed view over a UTF-8 source used for line and indentation lookups."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.data = text.encode("utf-8")
        self._line_starts = [0]
        for index, byte in enumerate(self.data):
            if byte == 0x0A:
                self._line_starts.append(index + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_of(self, offset: int) -> int:
        """Return the one-based line containing byte ``offset``."""

        return bisect.bisect_right(self._line_starts, offset)

    def line_start(self, line: int) -> int:
        """Return the byte offset at which one-based ``line`` begins."""

        return self._line_starts[max(0, min(line, self.line_count) - 1)]

    def line_end(self, line: int) -> int:
        """Return the byte offset of the newline ending ``line`` (or EOF)."""

        if line >= self.line_count:
            return len(self.data)
        return self._line_starts[line] - 1

    def slice(self, start: int, end: int) -> str:
        return self.data[start:end].decode("utf-8", errors="replace")

    def indentation(self, line: int) -> str:
        """Return the leading whitespace of one-based ``line``."""

        content = self.slice(self.line_start(line), self.line_end(line))
        return content[: len(content) - len(content.lstrip(" \t"))]

    def starts_line(self, offset: int) -> bool:
        """Return ``True`` when only whitespace precedes ``offset`` on its line."""

        prefix = self.slice(self.line_start(self.line_of(offset)), offset)
        return not prefix.strip()

    def rest_of_line_blank(self, offset: int) -> bool:
        """Return ``True`` when only whitespace follows ``offset`` on its line."""

        suffix = self.slice(offset, self.line_end(self.line_of(offset)))
        return not suffix.strip()


def detect_indent_unit(text: str) -> str:
    """Infer the indentation unit used by ``text``.

    Tabs win when any indented line starts with one; otherwise the greatest
    common divisor of the space indentation widths is used.

    Returns:
        str: Indentation unit, defaulting to two spaces.
    """

    widths: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if line.startswith(_TAB):
            return _TAB
        width = len(line) - len(line.lstrip(" "))
        if width:
            widths.append(width)
    if not widths:
        return DEFAULT_INDENT_UNIT
    unit = reduce(math.gcd, widths)
    return " " * unit if unit > 1 else DEFAULT_INDENT_UNIT


@dataclass(slots=True)
class SourceTree:
    """A parsed source file: its text, the syntax tree and formatting facts."""

    path: str
    source: SourceText
    root: SyntaxNode
    indent_unit: str = field(default=DEFAULT_INDENT_UNIT)

    @property
    def text(self) -> str:
        return self.source.text


__all__ = ["DEFAULT_INDENT_UNIT", "SourceText", "SourceTree", "detect_indent_unit"]
