"""PDF/UA 7.6: list items need Lbl and LBody children."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import DEFAULT_MAX_LIST_NESTING, ListNode, SemanticNode


@dataclass(frozen=True)
class ListChecker(PDFUAChecker):
    requirement: ClassVar[PDFUARequirement] = PDFUARequirement.LIST_ITEMS_MUST_HAVE_LABELS

    max_nesting_level: int = DEFAULT_MAX_LIST_NESTING
    require_labels: bool = True

    def __post_init__(self) -> None:
        if self.max_nesting_level < 0:
            raise ValueError("max_nesting_level must be >= 0")

    @classmethod
    def strict(cls) -> "ListChecker":
        return cls()

    @classmethod
    def lenient(cls) -> "ListChecker":
        return cls(require_labels=False)

    @classmethod
    def basic(cls) -> "ListChecker":
        return cls()

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        if not isinstance(node, ListNode):
            return PDFUACheckResult.passing(self.requirement, context="Node is not a list")

        violations: List[PDFUAViolation] = []
        if self.require_labels:
            for item in node.items_missing_labels:
                violations.append(self._violation(item, "List item has no label (Lbl)"))
        for item in node.items_missing_bodies:
            violations.append(self._violation(item, "List item has no body (LBody)"))
        if node.nesting_level > self.max_nesting_level:
            violations.append(
                self._violation(
                    node,
                    f"List nesting level {node.nesting_level} exceeds maximum "
                    f"({self.max_nesting_level})",
                    PDFUASeverity.WARNING,
                )
            )

        if not violations:
            return PDFUACheckResult.passing(
                self.requirement,
                context=f"List is properly structured with {node.item_count} item(s)",
            )
        return PDFUACheckResult.from_violations(
            self.requirement,
            violations,
            context=f"Found {len(violations)} list violation(s)",
        )


__all__ = ["ListChecker"]
