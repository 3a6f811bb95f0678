# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve packaged Tree-sitter grammars and build parsers for them."""

from __future__ import annotations

import importlib
from collections.abc import Callable
from functools import lru_cache
from types import ModuleType
from typing import Final, cast

from tree_sitter import Language as TSLanguage
from tree_sitter import Parser

_LANGUAGE_MODULE_PREFIX: Final[str] = "tree_sitter_"
JAVASCRIPT_GRAMMAR: Final[str] = "javascript"


@lru_cache(maxsize=None)
def ensure_language(grammar_name: str) -> TSLanguage | None:
    """Resolve a :class:`Language` for ``grammar_name`` when possible.

    Args:
        grammar_name: Canonical Tree-sitter grammar name (e.g., ``"javascript"``).

    Returns:
        Language | None: Grammar from the ``tree_sitter_<name>`` distribution,
        or ``None`` when that package is not installed.
    """

    module = _import_language_module(f"{_LANGUAGE_MODULE_PREFIX}{grammar_name.replace('-', '_')}")
    if module is None:
        return None
    return _language_from_module(module)


def load_javascript_language() -> TSLanguage:
    """Return the Tree-sitter language used for JavaScript and JSX.

    Raises:
        RuntimeError: If ``tree-sitter-javascript`` is not installed.
    """

    language = ensure_language(JAVASCRIPT_GRAMMAR)
    if language is None:
        raise RuntimeError("Unable to load the JavaScript Tree-sitter grammar; install tree-sitter-javascript.")
    return language


def build_javascript_parser() -> Parser:
    """Return a new Tree-sitter parser configured for JavaScript.

    Parsers are not shared between threads; build one per file.
    """

    parser = Parser()
    language = load_javascript_language()
    if hasattr(parser, "set_language"):
        setter = cast(Callable[[TSLanguage], None], getattr(parser, "set_language"))
        setter(language)
    else:
        setattr(parser, "language", language)
    return parser


def _import_language_module(module_name: str) -> ModuleType | None:
    """Import a packaged Tree-sitter language module when available."""

    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError:
        return None


def _language_from_module(module: ModuleType) -> TSLanguage | None:
    """Instantiate a ``Language`` object from a packaged module factory."""

    factory = getattr(module, "language", None)
    if not callable(factory):
        return None
    pointer = factory()
    return TSLanguage(pointer)


__all__ = ["JAVASCRIPT_GRAMMAR", "build_javascript_parser", "ensure_language", "load_javascript_language"]
