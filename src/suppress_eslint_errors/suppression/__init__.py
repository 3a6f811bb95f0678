# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Directive codec, target selection and the suppression annotator."""

from __future__ import annotations

from .annotator import (
    DEFAULT_MESSAGE,
    AnnotationOptions,
    AnnotationResult,
    DiagnosticOutcome,
    SuppressionAnnotator,
    annotate_source,
    select_diagnostics,
)
from .directive import DirectiveForm, SuppressionDirective, decode_directive, encode_directive
from .locator import TargetLocation, TargetShape, locate_target
from .merger import MergeResult, merge_into_hole, merge_rule

__all__ = [
    "DEFAULT_MESSAGE",
    "AnnotationOptions",
    "AnnotationResult",
    "DiagnosticOutcome",
    "DirectiveForm",
    "MergeResult",
    "SuppressionAnnotator",
    "SuppressionDirective",
    "TargetLocation",
    "TargetShape",
    "annotate_source",
    "decode_directive",
    "encode_directive",
    "locate_target",
    "merge_into_hole",
    "merge_rule",
    "select_diagnostics",
]
