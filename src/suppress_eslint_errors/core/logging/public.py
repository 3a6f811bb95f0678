# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing report lines with optional colour and emoji support."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Final

from rich.rule import Rule
from rich.text import Text

from ...runtime.console import detect_tty, get_console_manager

_PACKAGE_LOGGER: Final[str] = "suppress_eslint_errors"
_VERBOSE_FLAG: Final[str] = "_suppress_eslint_errors_verbose"
_VERBOSE_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class LineStyle:
    """Presentation of one kind of report line."""

    symbol: str
    style: str
    stderr: bool = False


INFO: Final[LineStyle] = LineStyle("ℹ️ ", "cyan")
OK: Final[LineStyle] = LineStyle("✅ ", "green")
WARN: Final[LineStyle] = LineStyle("⚠️ ", "yellow", stderr=True)
FAIL: Final[LineStyle] = LineStyle("❌ ", "red", stderr=True)


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference."""

    return symbol if enable else ""


def emit(msg: str, kind: LineStyle, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` styled as ``kind``.

    Warnings and failures go to stderr so ``--print`` output on stdout stays
    usable as transformed source.

    Args:
        msg: Message text.
        kind: Line presentation (symbol, Rich style and target stream).
        use_emoji: Whether the emoji prefix is rendered.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    stream = sys.stderr if kind.stderr else sys.stdout
    color_enabled = detect_tty(stream) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=kind.stderr)
    text = Text(f"{emoji(kind.symbol, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(kind.style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating the per-file lines from the summary."""

    console = get_console_manager().get(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational line."""

    emit(msg, INFO, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a line for a rewritten file."""

    emit(msg, OK, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(msg, WARN, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(msg, FAIL, use_emoji=use_emoji, use_color=use_color)


def configure_verbose_logging() -> None:
    """Stream the package's debug log records to stderr once per process."""

    logger = logging.getLogger(_PACKAGE_LOGGER)
    if getattr(logger, _VERBOSE_FLAG, False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    setattr(logger, _VERBOSE_FLAG, True)


__all__ = [
    "FAIL",
    "INFO",
    "OK",
    "WARN",
    "LineStyle",
    "configure_verbose_logging",
    "emit",
    "emoji",
    "fail",
    "info",
    "ok",
    "section",
    "warn",
]
