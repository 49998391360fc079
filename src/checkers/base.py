"""Base checker interface and batch evaluation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import ClassVar, Iterable, List, Optional

from core.config import get_settings
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import SemanticNode

logger = logging.getLogger(__name__)


class PDFUAChecker(ABC):
    """Abstract base class for PDF/UA requirement checkers.

    Checkers are stateless: ``check`` reads a node and never mutates it, so a
    single instance may be shared across threads.
    """

    requirement: ClassVar[PDFUARequirement]

    @abstractmethod
    def check(self, node: SemanticNode) -> PDFUACheckResult:
        """
        Evaluate the requirement against one node.

        Args:
            node: Node (and, for tree-level rules, its subtree) to inspect

        Returns:
            Passing result, or a failing one listing the violations found
        """

    def check_nodes(
        self,
        nodes: Iterable[SemanticNode],
        *,
        max_workers: Optional[int] = None,
    ) -> PDFUACheckResult:
        """
        Evaluate every node and aggregate the results.

        The aggregate passes only when every per-node result passed. Violations
        keep input-node order even when nodes are checked on a thread pool.

        Args:
            nodes: Nodes to check
            max_workers: Thread count; defaults to ``CHECK_BATCH_WORKERS``

        Returns:
            Aggregate result whose context reports failing and total node counts
        """
        batch = list(nodes)
        workers = max_workers if max_workers is not None else get_settings().check_batch_workers
        if workers < 1:
            raise ValueError("max_workers must be >= 1")

        if workers > 1 and len(batch) > 1:
            with ThreadPoolExecutor(max_workers=min(workers, len(batch))) as executor:
                results = list(executor.map(self.check, batch))
        else:
            results = [self.check(node) for node in batch]

        violations: List[PDFUAViolation] = []
        failed = 0
        for result in results:
            violations.extend(result.violations)
            if not result.passed:
                failed += 1

        logger.debug(
            "%s checked %d node(s): %d failed, %d violation(s)",
            type(self).__name__,
            len(batch),
            failed,
            len(violations),
        )
        return PDFUACheckResult(
            requirement=self.requirement,
            passed=failed == 0,
            violations=tuple(violations),
            context=f"{failed} of {len(batch)} nodes failed",
        )

    def _violation(
        self,
        node: SemanticNode,
        description: str,
        severity: PDFUASeverity = PDFUASeverity.ERROR,
    ) -> PDFUAViolation:
        return PDFUAViolation(
            node_id=node.id,
            node_type=node.type,
            description=description,
            severity=severity,
            location=node.bounding_box,
        )


__all__ = ["PDFUAChecker"]
