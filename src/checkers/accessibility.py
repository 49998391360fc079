"""Base interface for WCAG success-criterion checkers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, List

from schemas.internal.nodes import SemanticNode
from schemas.internal.wcag import (
    AccessibilityCheckResult,
    AccessibilityViolation,
    ViolationSeverity,
    WCAGSuccessCriterion,
)

logger = logging.getLogger(__name__)


class AccessibilityChecker(ABC):
    """Abstract base class for WCAG checkers.

    Like ``PDFUAChecker``, implementations are stateless and read nodes only.
    """

    criterion: ClassVar[WCAGSuccessCriterion]

    @abstractmethod
    def check(self, node: SemanticNode) -> AccessibilityCheckResult:
        """
        Evaluate the success criterion against one node.

        Args:
            node: Node to inspect

        Returns:
            Passing result, or a failing one listing the violations found
        """

    def check_nodes(self, nodes: Iterable[SemanticNode]) -> AccessibilityCheckResult:
        """
        Check each node and pool the violations.

        Args:
            nodes: Nodes to check

        Returns:
            Result that fails when any node produced a violation
        """
        batch = list(nodes)
        violations: List[AccessibilityViolation] = []
        for node in batch:
            violations.extend(self.check(node).violations)

        logger.debug(
            "%s checked %d node(s): %d violation(s)",
            type(self).__name__,
            len(batch),
            len(violations),
        )
        if not violations:
            return AccessibilityCheckResult.passing(
                self.criterion, context=f"Checked {len(batch)} node(s)"
            )
        return AccessibilityCheckResult.failing(
            self.criterion,
            violations,
            context=f"Found {len(violations)} violation(s) in {len(batch)} node(s)",
        )

    def _violation(
        self,
        node: SemanticNode,
        description: str,
        severity: ViolationSeverity,
    ) -> AccessibilityViolation:
        return AccessibilityViolation(
            node_id=node.id,
            node_type=node.type,
            description=description,
            severity=severity,
            location=node.bounding_box,
        )

    def _result(self, violations: List[AccessibilityViolation], context: str) -> AccessibilityCheckResult:
        if violations:
            return AccessibilityCheckResult.failing(self.criterion, violations)
        return AccessibilityCheckResult.passing(self.criterion, context=context)


__all__ = ["AccessibilityChecker"]
