# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tree-sitter backed JavaScript/JSX parsing."""

from __future__ import annotations

from .builder import TreeBuilder, classify, parse_source
from .grammars import build_javascript_parser, ensure_language, load_javascript_language

__all__ = [
    "TreeBuilder",
    "build_javascript_parser",
    "classify",
    "ensure_language",
    "load_javascript_language",
    "parse_source",
]
