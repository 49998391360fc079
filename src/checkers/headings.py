"""PDF/UA 7.4: headings must form a proper hierarchy."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import ClassVar, Dict, FrozenSet, List, Optional
from uuid import UUID

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import SemanticNode, accessible_text
from schemas.internal.structure import (
    HeadingHierarchyIssue,
    HeadingHierarchyValidationResult,
    HeadingIssueType,
)

HEADING_LEVEL_ATTRIBUTE = "Level"

PLACEHOLDER_HEADINGS: FrozenSet[str] = frozenset(
    {"heading", "title", "section", "chapter", "untitled", "new heading", "click here"}
)


def heading_level(node: SemanticNode) -> int:
    """1-6 for H1..H6; the ``Level`` attribute (default 1) for a generic H."""
    level = node.type.heading_level
    if level is not None:
        return level
    value = node.attributes.get(HEADING_LEVEL_ATTRIBUTE)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 1


@dataclass(frozen=True)
class HeadingHierarchyChecker(PDFUAChecker):
    """Validates heading order and content across the whole subtree.

    Headings are read in document order. A heading counts as non-empty when it
    has children, a text alternative, or text of its own.
    """

    requirement: ClassVar[PDFUARequirement] = PDFUARequirement.HEADINGS_MUST_BE_NESTED

    require_single_h1: bool = True
    check_skipped_levels: bool = True
    check_empty_headings: bool = True
    validate_heading_text: bool = True
    require_first_h1: bool = True
    max_heading_level: int = 6
    min_heading_text_length: int = 1

    def __post_init__(self) -> None:
        if self.max_heading_level < 1:
            raise ValueError("max_heading_level must be >= 1")
        if self.min_heading_text_length < 0:
            raise ValueError("min_heading_text_length must be >= 0")

    @classmethod
    def strict(cls) -> "HeadingHierarchyChecker":
        return cls()

    @classmethod
    def basic(cls) -> "HeadingHierarchyChecker":
        return cls(require_single_h1=False, validate_heading_text=False, require_first_h1=False)

    @classmethod
    def lenient(cls) -> "HeadingHierarchyChecker":
        return cls(
            require_single_h1=False,
            check_skipped_levels=False,
            validate_heading_text=False,
            require_first_h1=False,
        )

    def validate(self, root: SemanticNode) -> HeadingHierarchyValidationResult:
        """
        Collect every heading under ``root`` and validate the sequence.

        Args:
            root: Root of the structure tree

        Returns:
            Issues in detection order, with heading counts per level
        """
        headings = [node for node in root.iter_descendants() if node.type.is_heading]
        levels = [heading_level(node) for node in headings]
        counts = Counter(levels)

        issues: List[HeadingHierarchyIssue] = []
        if self.require_single_h1:
            issues.extend(self._h1_issues(headings, levels, counts[1]))
        if self.require_first_h1 and headings and levels[0] != 1:
            issues.append(
                self._issue(
                    HeadingIssueType.FIRST_HEADING_NOT_H1,
                    PDFUASeverity.WARNING,
                    headings[0],
                    levels[0],
                    f"First heading is H{levels[0]}, should be H1",
                    actualLevel=str(levels[0]),
                )
            )

        previous: Optional[int] = None
        for node, level in zip(headings, levels):
            if self.check_empty_headings and not self._has_content(node):
                issues.append(
                    self._issue(
                        HeadingIssueType.EMPTY_HEADING,
                        PDFUASeverity.ERROR,
                        node,
                        level,
                        f"Heading H{level} is empty",
                    )
                )
            if self.validate_heading_text:
                issues.extend(self._text_issues(node, level))
            if self.check_skipped_levels and previous is not None and level > previous + 1:
                issues.append(
                    self._issue(
                        HeadingIssueType.LEVEL_SKIPPED,
                        PDFUASeverity.ERROR,
                        node,
                        level,
                        f"Heading level skipped from H{previous} to H{level}",
                        previousLevel=str(previous),
                        currentLevel=str(level),
                        skippedLevels=str(level - previous - 1),
                    )
                )
            if level > self.max_heading_level:
                issues.append(
                    self._issue(
                        HeadingIssueType.LEVEL_INCREASE_EXCESSIVE,
                        PDFUASeverity.WARNING,
                        node,
                        level,
                        f"Heading level H{level} exceeds maximum of H{self.max_heading_level}",
                        actualLevel=str(level),
                        maxLevel=str(self.max_heading_level),
                    )
                )
            previous = level

        return HeadingHierarchyValidationResult(
            issues=tuple(issues),
            total_heading_count=len(headings),
            headings_by_level=dict(counts),
        )

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        result = self.validate(node)
        if result.is_valid:
            return PDFUACheckResult.passing(
                self.requirement,
                context=f"Heading hierarchy is valid with {result.total_heading_count} heading(s)",
            )

        by_id: Dict[UUID, SemanticNode] = {
            heading.id: heading for heading in node.iter_descendants() if heading.type.is_heading
        }
        violations: List[PDFUAViolation] = [
            self._violation(by_id[issue.node_id], issue.message, issue.severity)
            for issue in result.issues
        ]
        return PDFUACheckResult.from_violations(
            self.requirement,
            violations,
            context=f"Found {len(violations)} heading issue(s)",
        )

    def _h1_issues(
        self, headings: List[SemanticNode], levels: List[int], h1_count: int
    ) -> List[HeadingHierarchyIssue]:
        if h1_count > 1:
            return [
                self._issue(
                    HeadingIssueType.MULTIPLE_H1,
                    PDFUASeverity.ERROR,
                    node,
                    1,
                    f"Document contains multiple H1 headings (found {h1_count})",
                    h1Count=str(h1_count),
                )
                for node, level in zip(headings, levels)
                if level == 1
            ]
        if h1_count == 0 and headings:
            return [
                self._issue(
                    HeadingIssueType.FIRST_HEADING_NOT_H1,
                    PDFUASeverity.ERROR,
                    headings[0],
                    levels[0],
                    "Document has no H1 heading",
                )
            ]
        return []

    def _has_content(self, node: SemanticNode) -> bool:
        return node.has_children or node.has_text_alternative or bool(accessible_text(node))

    def _text_issues(self, node: SemanticNode, level: int) -> List[HeadingHierarchyIssue]:
        text = accessible_text(node).strip()
        if len(text) < self.min_heading_text_length:
            return [
                self._issue(
                    HeadingIssueType.NON_MEANINGFUL_TEXT,
                    PDFUASeverity.WARNING,
                    node,
                    level,
                    f"Heading H{level} text is too short to be meaningful",
                    textLength=str(len(text)),
                    minLength=str(self.min_heading_text_length),
                )
            ]
        if text.lower() in PLACEHOLDER_HEADINGS:
            return [
                self._issue(
                    HeadingIssueType.NON_MEANINGFUL_TEXT,
                    PDFUASeverity.WARNING,
                    node,
                    level,
                    f"Heading H{level} text '{text}' is not meaningful",
                    headingText=text,
                )
            ]
        return []

    def _issue(
        self,
        issue_type: HeadingIssueType,
        severity: PDFUASeverity,
        node: SemanticNode,
        level: int,
        message: str,
        **context: str,
    ) -> HeadingHierarchyIssue:
        return HeadingHierarchyIssue(
            type=issue_type,
            severity=severity,
            node_id=node.id,
            heading_level=level,
            message=message,
            page_index=node.page_index,
            context=context,
        )


__all__ = [
    "HEADING_LEVEL_ATTRIBUTE",
    "HeadingHierarchyChecker",
    "PLACEHOLDER_HEADINGS",
    "heading_level",
]
