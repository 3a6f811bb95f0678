# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime services shared by the CLI."""

from __future__ import annotations

from .console import ConsoleKey, RichConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleKey", "RichConsoleManager", "detect_tty", "get_console_manager"]
