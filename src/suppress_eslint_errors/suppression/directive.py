# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse and format ESLint suppression directive comments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ..syntax import CommentKind

_DIRECTIVE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<keyword>eslint-disable(?:-next)?-line)(?:\s|$)(?P<body>.*)",
    re.DOTALL,
)
_EXPLANATION_SEPARATOR: Final[str] = "--"
_RULE_SEPARATOR: Final[str] = ","


class DirectiveForm(str, Enum):
    """Suppression forms, valued by their ESLint keyword."""

    NEXT_LINE = "eslint-disable-next-line"
    SAME_LINE = "eslint-disable-line"


@dataclass(frozen=True, slots=True)
class SuppressionDirective:
    """Decoded meaning of a suppression comment.

    An empty ``rules`` tuple disables every rule on the affected line.
    """

    form: DirectiveForm
    rules: tuple[str, ...] = ()
    explanation: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(dict.fromkeys(self.rules)))

    def covers(self, rule_id: str) -> bool:
        """Return ``True`` when the directive already suppresses ``rule_id``."""

        return not self.rules or rule_id in self.rules

    def with_rule(self, rule_id: str) -> SuppressionDirective:
        """Return a copy that also suppresses ``rule_id``, keeping the explanation."""

        if self.covers(rule_id):
            return self
        return SuppressionDirective(form=self.form, rules=(*self.rules, rule_id), explanation=self.explanation)


def decode_directive(text: str) -> SuppressionDirective | None:
    """Decode a comment payload into a directive.

    Args:
        text: Comment text without its ``//`` or ``/* */`` delimiters.

    Returns:
        SuppressionDirective | None: Decoded directive, or ``None`` when the
        comment does not start with a supported keyword.
    """

    match = _DIRECTIVE_PATTERN.match(text)
    if match is None:
        return None
    rule_text, separator, explanation = match.group("body").partition(_EXPLANATION_SEPARATOR)
    rules = tuple(rule.strip() for rule in rule_text.split(_RULE_SEPARATOR) if rule.strip())
    cleaned = explanation.strip() if separator else ""
    return SuppressionDirective(
        form=DirectiveForm(match.group("keyword")),
        rules=rules,
        explanation=cleaned or None,
    )


def encode_directive(directive: SuppressionDirective, kind: CommentKind = CommentKind.LINE) -> str:
    """Render ``directive`` as a comment payload.

    Block comments get a trailing space so the closing ``*/`` stays detached.

    Args:
        directive: Directive to render.
        kind: Comment kind the payload is destined for.

    Returns:
        str: Comment text without delimiters.
    """

    text = f" {directive.form.value}"
    if directive.rules:
        text += f" {', '.join(directive.rules)}"
    if directive.explanation:
        text += f" {_EXPLANATION_SEPARATOR} {directive.explanation}"
    if kind is CommentKind.BLOCK:
        text += " "
    return text


__all__ = [
    "DirectiveForm",
    "SuppressionDirective",
    "decode_directive",
    "encode_directive",
]
