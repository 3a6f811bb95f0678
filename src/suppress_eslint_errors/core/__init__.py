# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models, severities and logging helpers."""

from __future__ import annotations

from .models import Diagnostic
from .severity import Severity, severity_from_level

__all__ = ["Diagnostic", "Severity", "severity_from_level"]
