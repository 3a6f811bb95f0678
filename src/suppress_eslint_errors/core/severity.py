# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels normalising ESLint's numeric vocabulary."""

    ERROR = "error"
    WARNING = "warning"
    OFF = "off"


ESLINT_ERROR_LEVEL: Final[int] = 2
ESLINT_WARNING_LEVEL: Final[int] = 1

_LEVEL_TO_SEVERITY: Final[dict[int, Severity]] = {
    ESLINT_ERROR_LEVEL: Severity.ERROR,
    ESLINT_WARNING_LEVEL: Severity.WARNING,
}


def severity_from_level(level: int) -> Severity:
    """Map an ESLint severity level to :class:`Severity`.

    Args:
        level: Numeric severity reported by ESLint (``2`` error, ``1`` warning).

    Returns:
        Severity: Matching severity; unknown levels at or above ``2`` count as
        errors and anything else is treated as ``OFF``.
    """

    if level >= ESLINT_ERROR_LEVEL:
        return Severity.ERROR
    return _LEVEL_TO_SEVERITY.get(level, Severity.OFF)


__all__ = [
    "ESLINT_ERROR_LEVEL",
    "ESLINT_WARNING_LEVEL",
    "Severity",
    "severity_from_level",
]
