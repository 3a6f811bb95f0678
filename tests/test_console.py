# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for console output helpers and verbose logging."""

from __future__ import annotations

import logging

import pytest

from suppress_eslint_errors.core.logging import configure_verbose_logging, fail, info, section
from suppress_eslint_errors.runtime import get_console_manager


def test_console_manager_caches_consoles() -> None:
    manager = get_console_manager()

    assert manager.get(color=False, emoji=False) is manager.get(color=False, emoji=False)


def test_plain_output_has_no_emoji_or_ansi(capsys: pytest.CaptureFixture[str]) -> None:
    info("3 files", use_emoji=False, use_color=False)
    fail("broken.js: boom", use_emoji=False, use_color=False)
    section("Results", use_color=False)

    captured = capsys.readouterr()
    assert "3 files\n" in captured.out
    assert "--- Results ---" in captured.out
    assert "broken.js: boom\n" in captured.err
    assert "broken.js" not in captured.out
    assert "\x1b[" not in captured.out + captured.err


def test_stderr_consoles_are_cached_separately() -> None:
    manager = get_console_manager()

    assert manager.get(color=False, emoji=False, stderr=True) is not manager.get(color=False, emoji=False)


def test_configure_verbose_logging_is_idempotent() -> None:
    logger = logging.getLogger("suppress_eslint_errors")
    before = len(logger.handlers)

    configure_verbose_logging()
    configure_verbose_logging()

    assert len(logger.handlers) <= before + 1
    assert logger.level == logging.DEBUG
