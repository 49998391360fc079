"""PDF/UA 7.3: content must be tagged in a logical reading order."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Tuple

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.geometry import BoundingBox
from schemas.internal.nodes import SemanticNode
from schemas.internal.structure import (
    ReadingDirection,
    ReadingOrderIssue,
    ReadingOrderIssueType,
    ReadingOrderValidationResult,
)

logger = logging.getLogger(__name__)

Positioned = Tuple[SemanticNode, BoundingBox]

# Nodes on one line overlap vertically by more than this share of the shorter one.
SAME_LINE_RATIO = 0.5


def positioned_nodes(root: SemanticNode) -> List[Positioned]:
    """
    Collect the innermost nodes that carry a bounding box, in tag order.

    A boxed node whose subtree contains other boxed nodes is represented by
    those descendants, so a container is never compared with its own content.

    Args:
        root: Root of the structure tree

    Returns:
        ``(node, box)`` pairs in depth-first pre-order
    """
    found: List[Positioned] = []
    for child in root.children:
        found.extend(positioned_nodes(child))
    if not found and root.bounding_box is not None:
        return [(root, root.bounding_box)]
    return found


def detect_columns(boxes: List[BoundingBox], gap: float) -> List[float]:
    """Left edges that start a new column: sorted x positions more than ``gap`` apart."""
    columns: List[float] = []
    last: Optional[float] = None
    for x in sorted(box.left_x for box in boxes):
        if last is None or x - last > gap:
            columns.append(x)
        last = x
    return columns


@dataclass(frozen=True)
class ReadingOrderChecker(PDFUAChecker):
    """Compares consecutive positioned nodes on each page.

    Reads top to bottom in page space (y grows upward) and along
    ``direction`` within a line. Multi-column pages are expected to finish a
    column before moving to the next one.
    """

    requirement: ClassVar[PDFUARequirement] = PDFUARequirement.LOGICAL_READING_ORDER

    direction: ReadingDirection = ReadingDirection.LEFT_TO_RIGHT
    validate_columns: bool = True
    check_overlaps: bool = True
    vertical_tolerance: float = 5.0
    horizontal_tolerance: float = 10.0
    overlap_threshold: float = 0.1
    column_gap: float = 50.0

    def __post_init__(self) -> None:
        if self.vertical_tolerance < 0 or self.horizontal_tolerance < 0:
            raise ValueError("tolerances must be non-negative")
        if not 0.0 <= self.overlap_threshold <= 1.0:
            raise ValueError("overlap_threshold must be within [0, 1]")
        if self.column_gap <= 0:
            raise ValueError("column_gap must be positive")

    @classmethod
    def strict(cls) -> "ReadingOrderChecker":
        return cls(vertical_tolerance=2.0, horizontal_tolerance=5.0, overlap_threshold=0.05)

    @classmethod
    def basic(cls) -> "ReadingOrderChecker":
        return cls()

    @classmethod
    def lenient(cls) -> "ReadingOrderChecker":
        return cls(vertical_tolerance=10.0, horizontal_tolerance=20.0, check_overlaps=False)

    @classmethod
    def right_to_left(cls) -> "ReadingOrderChecker":
        return cls(direction=ReadingDirection.RIGHT_TO_LEFT)

    def validate(self, root: SemanticNode) -> ReadingOrderValidationResult:
        """
        Validate the reading order of every page under ``root``.

        Args:
            root: Root of the structure tree

        Returns:
            Issues grouped page by page in ascending page order
        """
        by_page: Dict[int, List[Positioned]] = {}
        for node, box in positioned_nodes(root):
            by_page.setdefault(box.page_index, []).append((node, box))

        issues: List[ReadingOrderIssue] = []
        node_count = 0
        for page_index in sorted(by_page):
            page = by_page[page_index]
            issues.extend(self._page_issues(page, page_index))
            node_count += len(page)

        logger.debug(
            "Reading order: %d node(s) on %d page(s), %d issue(s)",
            node_count,
            len(by_page),
            len(issues),
        )
        return ReadingOrderValidationResult(
            issues=tuple(issues),
            total_node_count=node_count,
            page_count=len(by_page),
        )

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        result = self.validate(node)
        if result.is_valid:
            return PDFUACheckResult.passing(
                self.requirement,
                context=f"Reading order is logical across {result.page_count} page(s)",
            )

        by_id = {positioned.id: positioned for positioned, _ in positioned_nodes(node)}
        violations: List[PDFUAViolation] = [
            self._violation(by_id[issue.node_id], issue.message, issue.severity)
            for issue in result.issues
        ]
        return PDFUACheckResult.from_violations(
            self.requirement,
            violations,
            context=f"Found {len(violations)} reading order issue(s)",
        )

    def _page_issues(self, page: List[Positioned], page_index: int) -> List[ReadingOrderIssue]:
        if len(page) < 2:
            return []

        columns: List[float] = []
        if self.validate_columns and len(page) > 2:
            columns = detect_columns([box for _, box in page], self.column_gap)
        if len(columns) < 2:
            columns = []

        issues: List[ReadingOrderIssue] = []
        for current, following in zip(page, page[1:]):
            current_column = self._column_of(current[1], columns)
            next_column = self._column_of(following[1], columns)

            if current_column is None or next_column is None or next_column == current_column:
                spatial = self._spatial_issue(current, following, page_index)
                if spatial is not None:
                    issues.append(spatial)
            if self.check_overlaps:
                overlap = self._overlap_issue(current, following, page_index)
                if overlap is not None:
                    issues.append(overlap)
            if current_column is not None and next_column is not None and next_column < current_column:
                issues.append(
                    self._issue(
                        ReadingOrderIssueType.COLUMN_JUMP,
                        PDFUASeverity.WARNING,
                        current,
                        following,
                        "Reading order jumps backward across columns",
                        page_index,
                        fromColumn=str(current_column),
                        toColumn=str(next_column),
                    )
                )
        return issues

    def _spatial_issue(
        self, current: Positioned, following: Positioned, page_index: int
    ) -> Optional[ReadingOrderIssue]:
        current_box, next_box = current[1], following[1]

        vertical_gap = next_box.bottom_y - current_box.top_y
        if vertical_gap > self.vertical_tolerance:
            return self._issue(
                ReadingOrderIssueType.OUT_OF_ORDER,
                PDFUASeverity.ERROR,
                current,
                following,
                "Content appears out of vertical order",
                page_index,
                verticalGap=f"{vertical_gap:.2f}",
                currentTop=f"{current_box.top_y:.2f}",
                nextBottom=f"{next_box.bottom_y:.2f}",
            )

        same_line = min(current_box.height, next_box.height) * SAME_LINE_RATIO
        vertical_overlap = min(current_box.top_y, next_box.top_y) - max(
            current_box.bottom_y, next_box.bottom_y
        )
        if vertical_overlap <= same_line:
            return None

        if self.direction is ReadingDirection.LEFT_TO_RIGHT:
            horizontal_distance = next_box.left_x - current_box.right_x
        else:
            horizontal_distance = current_box.left_x - next_box.right_x
        if horizontal_distance < -self.horizontal_tolerance:
            return self._issue(
                ReadingOrderIssueType.REVERSE_DIRECTION,
                PDFUASeverity.WARNING,
                current,
                following,
                "Content appears in reverse reading direction",
                page_index,
                horizontalDistance=f"{horizontal_distance:.2f}",
                readingDirection=self.direction.value,
            )
        return None

    def _overlap_issue(
        self, current: Positioned, following: Positioned, page_index: int
    ) -> Optional[ReadingOrderIssue]:
        overlap = current[1].overlap_percentage(following[1])
        if overlap <= self.overlap_threshold:
            return None
        return self._issue(
            ReadingOrderIssueType.OVERLAPPING,
            PDFUASeverity.WARNING,
            current,
            following,
            "Content overlaps in reading sequence",
            page_index,
            overlapPercentage=f"{overlap * 100:.1f}%",
        )

    def _column_of(self, box: BoundingBox, columns: List[float]) -> Optional[int]:
        if not columns:
            return None
        for index, column_x in enumerate(columns):
            if abs(box.left_x - column_x) < self.column_gap:
                return index
        return len(columns) - 1

    def _issue(
        self,
        issue_type: ReadingOrderIssueType,
        severity: PDFUASeverity,
        current: Positioned,
        following: Positioned,
        message: str,
        page_index: int,
        **context: str,
    ) -> ReadingOrderIssue:
        return ReadingOrderIssue(
            type=issue_type,
            severity=severity,
            node_id=current[0].id,
            next_node_id=following[0].id,
            message=message,
            page_index=page_index,
            context=context,
        )


__all__ = [
    "ReadingOrderChecker",
    "SAME_LINE_RATIO",
    "detect_columns",
    "positioned_nodes",
]
