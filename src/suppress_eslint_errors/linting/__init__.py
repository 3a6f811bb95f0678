# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""ESLint integration."""

from __future__ import annotations

from .eslint import EslintRunner, Linter, parse_eslint_results

__all__ = ["EslintRunner", "Linter", "parse_eslint_results"]
