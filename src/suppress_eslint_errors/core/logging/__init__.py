# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output helpers shared by the CLI and runner."""

from __future__ import annotations

from .public import configure_verbose_logging, emoji, fail, info, ok, section, warn

__all__ = [
    "configure_verbose_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "section",
    "warn",
]
