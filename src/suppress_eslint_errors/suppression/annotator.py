# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Attach suppression directives for ESLint errors to a parsed source tree."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from ..core.models import Diagnostic
from ..printing import render_tree
from ..syntax import Comment, CommentKind, CommentSlot, SourceTree, SyntaxNode, append_comment
from .directive import DirectiveForm, SuppressionDirective, encode_directive
from .locator import TargetLocation, TargetShape, locate_target, settle_conditional_tail
from .merger import MergeResult, merge_rule, merge_same_line
from .segmenter import insert_closing_directive, insert_sibling_directive, merge_before, prepare_siblings

LOGGER = logging.getLogger(__name__)

DEFAULT_MESSAGE: Final[str] = "TODO: Fix this the next time the file is edited."

type Reporter = Callable[[str], None]


class DiagnosticOutcome(str, Enum):
    """What happened to a single diagnostic."""

    INSERTED = "inserted"
    EXTENDED = "extended"
    ALREADY_SUPPRESSED = "already_suppressed"
    SKIPPED = "skipped"


_MERGE_OUTCOMES: Final[dict[MergeResult, DiagnosticOutcome]] = {
    MergeResult.ALREADY_PRESENT: DiagnosticOutcome.ALREADY_SUPPRESSED,
    MergeResult.EXTENDED: DiagnosticOutcome.EXTENDED,
}


@dataclass(frozen=True, slots=True)
class AnnotationOptions:
    """Settings that shape the inserted directives.

    Attributes:
        message: Explanation appended after ``--``; empty falls back to the default.
        rules: Whitelist of rule ids; empty means every rule.
        inline: Use same-line ``eslint-disable-line`` comments for ordinary targets.
    """

    message: str = DEFAULT_MESSAGE
    rules: frozenset[str] = frozenset()
    inline: bool = False


@dataclass(slots=True)
class AnnotationResult:
    """Rendered text plus the per-diagnostic outcomes.

    ``text`` is ``None`` when the tree was left unchanged.
    """

    text: str | None
    outcomes: list[tuple[Diagnostic, DiagnosticOutcome]] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.text is not None


def select_diagnostics(diagnostics: Iterable[Diagnostic], rules: frozenset[str]) -> list[Diagnostic]:
    """Keep error-level diagnostics with a rule id, restricted to ``rules`` when given.

    Args:
        diagnostics: Diagnostics reported for one file.
        rules: Rule whitelist; empty keeps every rule.

    Returns:
        list[Diagnostic]: Diagnostics to suppress, in their original order.
    """

    return [
        diagnostic
        for diagnostic in diagnostics
        if diagnostic.is_error and (not rules or diagnostic.rule_id in rules)
    ]


class SuppressionAnnotator:
    """Mutate one :class:`SourceTree` so each selected diagnostic is suppressed."""

    def __init__(
        self,
        tree: SourceTree,
        options: AnnotationOptions | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        """Bind the annotator to a parsed file.

        Args:
            tree: Parsed source file; mutated in place.
            options: Directive settings; defaults apply when omitted.
            reporter: Sink for skip notices; defaults to the module logger.
        """

        self.tree = tree
        self.options = options or AnnotationOptions()
        self._report = reporter or LOGGER.warning

    def annotate(self, diagnostics: Iterable[Diagnostic]) -> list[tuple[Diagnostic, DiagnosticOutcome]]:
        """Suppress every selected diagnostic, each one independently.

        Args:
            diagnostics: Diagnostics reported for the file.

        Returns:
            list[tuple[Diagnostic, DiagnosticOutcome]]: Outcome per selected diagnostic.
        """

        return [
            (diagnostic, self.suppress(diagnostic))
            for diagnostic in select_diagnostics(diagnostics, self.options.rules)
        ]

    def suppress(self, diagnostic: Diagnostic) -> DiagnosticOutcome:
        """Merge or insert a directive covering ``diagnostic``.

        Args:
            diagnostic: Error-level diagnostic with a rule id.

        Returns:
            DiagnosticOutcome: How the diagnostic ended up suppressed.
        """

        rule_id = diagnostic.rule_id or ""
        location = locate_target(self.tree.root, diagnostic.line)
        if location is None:
            self._report(
                f"Unable to find any nodes on line {diagnostic.line} of {self.tree.path}. "
                f"Skipping suppression of {rule_id}"
            )
            return DiagnosticOutcome.SKIPPED
        LOGGER.debug("line %s of %s resolved to %s", diagnostic.line, self.tree.path, location.shape.value)

        match location.shape:
            case TargetShape.CONDITIONAL_TAIL:
                return self._suppress_conditional_tail(location, rule_id)
            case TargetShape.CLOSING_TAG:
                return self._suppress_closing_tag(location, rule_id)
            case TargetShape.MARKUP_SIBLING:
                return self._suppress_markup_sibling(location, rule_id)
            case TargetShape.UNSUPPORTED_MARKUP:
                self._report(
                    f"Skipping suppression of violation of {rule_id} on {diagnostic.line} of {self.tree.path}"
                )
                return DiagnosticOutcome.SKIPPED
            case _:
                return self._suppress_ordinary(location.node, rule_id)

    def _suppress_conditional_tail(self, location: TargetLocation, rule_id: str) -> DiagnosticOutcome:
        settled = settle_conditional_tail(location.node, rule_id)
        if isinstance(settled, MergeResult):
            return _MERGE_OUTCOMES[settled]
        result = merge_rule(settled.trailing_comments, rule_id)
        if result.merged:
            return _MERGE_OUTCOMES[result]
        comment = Comment(kind=CommentKind.LINE, text=self._directive_text(rule_id, DirectiveForm.NEXT_LINE))
        comment.own_line = True
        append_comment(settled, comment, CommentSlot.TRAILING)
        return DiagnosticOutcome.INSERTED

    def _suppress_closing_tag(self, location: TargetLocation, rule_id: str) -> DiagnosticOutcome:
        parent, index = _sibling_position(location)
        result = merge_before(parent.children, index, rule_id)
        if result.merged:
            return _MERGE_OUTCOMES[result]
        insert_closing_directive(
            parent,
            index,
            self._directive_text(rule_id, DirectiveForm.NEXT_LINE, CommentKind.BLOCK),
            self.tree.source.indentation(location.line),
            self.tree.indent_unit,
        )
        return DiagnosticOutcome.INSERTED

    def _suppress_markup_sibling(self, location: TargetLocation, rule_id: str) -> DiagnosticOutcome:
        parent, _ = _sibling_position(location)
        index = prepare_siblings(parent, location.node, location.line)
        result = merge_before(parent.children, index, rule_id)
        if result.merged:
            return _MERGE_OUTCOMES[result]
        insert_sibling_directive(
            parent,
            index,
            self._directive_text(rule_id, DirectiveForm.NEXT_LINE, CommentKind.BLOCK),
            self.tree.source.indentation(location.line),
        )
        return DiagnosticOutcome.INSERTED

    def _suppress_ordinary(self, node: SyntaxNode, rule_id: str) -> DiagnosticOutcome:
        for comments in (node.leading_comments, node.trailing_comments):
            result = merge_rule(comments, rule_id)
            if result.merged:
                return _MERGE_OUTCOMES[result]
        if self.options.inline:
            result = merge_same_line(node.trailing_comments, rule_id, node.end_line)
            if result.merged:
                return _MERGE_OUTCOMES[result]
            text = self._directive_text(rule_id, DirectiveForm.SAME_LINE)
            append_comment(node, Comment(kind=CommentKind.LINE, text=text), CommentSlot.TRAILING)
        else:
            text = self._directive_text(rule_id, DirectiveForm.NEXT_LINE)
            append_comment(node, Comment(kind=CommentKind.LINE, text=text), CommentSlot.LEADING)
        return DiagnosticOutcome.INSERTED

    def _directive_text(self, rule_id: str, form: DirectiveForm, kind: CommentKind = CommentKind.LINE) -> str:
        explanation = self.options.message.strip() or DEFAULT_MESSAGE
        directive = SuppressionDirective(form=form, rules=(rule_id,), explanation=explanation)
        return encode_directive(directive, kind)


def annotate_source(
    tree: SourceTree,
    diagnostics: Sequence[Diagnostic],
    options: AnnotationOptions | None = None,
    reporter: Reporter | None = None,
) -> AnnotationResult:
    """Suppress ``diagnostics`` in ``tree`` and render the result.

    Args:
        tree: Parsed source file; mutated in place.
        diagnostics: ESLint diagnostics for the file.
        options: Directive settings.
        reporter: Sink for skip notices.

    Returns:
        AnnotationResult: Rendered text (``None`` when unchanged) and outcomes.
    """

    annotator = SuppressionAnnotator(tree, options, reporter)
    outcomes = annotator.annotate(diagnostics)
    if not any(outcome in (DiagnosticOutcome.INSERTED, DiagnosticOutcome.EXTENDED) for _, outcome in outcomes):
        return AnnotationResult(text=None, outcomes=outcomes)
    rendered = render_tree(tree)
    return AnnotationResult(text=rendered if rendered != tree.text else None, outcomes=outcomes)


def _sibling_position(location: TargetLocation) -> tuple[SyntaxNode, int]:
    if location.parent is None or location.index is None:
        raise ValueError(f"{location.shape.value} target on line {location.line} has no parent")
    return location.parent, location.index


__all__ = [
    "DEFAULT_MESSAGE",
    "AnnotationOptions",
    "AnnotationResult",
    "DiagnosticOutcome",
    "Reporter",
    "SuppressionAnnotator",
    "annotate_source",
    "select_diagnostics",
]
