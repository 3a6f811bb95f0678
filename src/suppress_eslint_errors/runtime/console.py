# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles for per-file reports (stdout) and problems (stderr)."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal."""

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleKey:
    """Settings distinguishing one cached console from another."""

    color: bool
    emoji: bool
    stderr: bool
    tty: bool


class RichConsoleManager:
    """Hand out Rich consoles, one per :class:`ConsoleKey`."""

    def __init__(self) -> None:
        self._cache: dict[ConsoleKey, Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return the console for the requested output settings.

        Colour is only honoured when the target stream is a terminal, so
        redirected output and captured test output stay free of ANSI codes.

        Args:
            color: ``True`` when ANSI colour output is wanted.
            emoji: ``True`` when Rich should render emoji codes.
            stderr: ``True`` to write to standard error instead of stdout.

        Returns:
            Console: Cached console matching the settings.
        """

        tty = detect_tty(sys.stderr if stderr else sys.stdout)
        key = ConsoleKey(color=color, emoji=emoji, stderr=stderr, tty=tty)
        console = self._cache.get(key)
        if console is None:
            colored = color and tty
            console = Console(
                stderr=stderr,
                color_system="auto" if colored else None,
                force_terminal=tty,
                no_color=not colored,
                emoji=emoji,
                soft_wrap=True,
                highlight=False,
            )
            self._cache[key] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["ConsoleKey", "RichConsoleManager", "detect_tty", "get_console_manager"]
