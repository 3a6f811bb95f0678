# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the suppress_eslint_errors package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity, severity_from_level


class Diagnostic(BaseModel):
    """Single ESLint message reduced to what suppression needs."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    rule_id: str | None = None
    severity: int
    column: int | None = None
    message: str = ""
    file: str | None = None

    @property
    def level(self) -> Severity:
        """Return the normalised severity of the numeric ESLint level."""

        return severity_from_level(self.severity)

    @property
    def is_error(self) -> bool:
        """Return ``True`` for error-level diagnostics that name a rule."""

        return self.level is Severity.ERROR and bool(self.rule_id)


__all__ = ["Diagnostic"]
