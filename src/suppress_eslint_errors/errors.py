# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across the package."""

from __future__ import annotations


class SuppressError(Exception):
    """Base class for errors raised by suppress-eslint-errors."""


class ConfigError(SuppressError):
    """Raised when configuration input is invalid."""


class SourceParseError(SuppressError):
    """Raised when a source file cannot be parsed into a syntax tree."""

    def __init__(self, path: str, reason: str) -> None:
        """Record the file path and the parser failure reason.

        Args:
            path: Path of the source file that failed to parse.
            reason: Human readable description of the failure.
        """

        super().__init__(f"Unable to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class EslintNotFoundError(SuppressError):
    """Raised when ``eslint`` cannot be resolved from the working directory."""


class EslintExecutionError(SuppressError):
    """Raised when the ESLint bridge fails or emits unreadable output."""


__all__ = [
    "ConfigError",
    "EslintExecutionError",
    "EslintNotFoundError",
    "SourceParseError",
    "SuppressError",
]
