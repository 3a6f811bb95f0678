# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from suppress_eslint_errors.core.models import Diagnostic


class FakeLinter:
    """Linter double returning canned diagnostics and recording calls."""

    def __init__(self, diagnostics: Sequence[Diagnostic] = ()) -> None:
        self.diagnostics = list(diagnostics)
        self.calls: list[tuple[str, str]] = []

    def lint(self, source: str, path: str) -> list[Diagnostic]:
        self.calls.append((source, path))
        return list(self.diagnostics)


def make_diagnostic(line: int, rule_id: str | None = "eqeqeq", severity: int = 2) -> Diagnostic:
    """Return an ESLint diagnostic for ``rule_id`` reported on ``line``."""
    return Diagnostic(line=line, rule_id=rule_id, severity=severity, message=f"{rule_id} violated")


@pytest.fixture
def fake_linter() -> Callable[..., FakeLinter]:
    """Return a factory building :class:`FakeLinter` instances."""
    return FakeLinter


@pytest.fixture
def diagnostic() -> Callable[..., Diagnostic]:
    """Return the :func:`make_diagnostic` factory."""
    return make_diagnostic
