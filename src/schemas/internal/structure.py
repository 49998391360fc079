"""Findings of the tree-level validators: headings, reading order, structure."""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple
from uuid import UUID, uuid4

from pydantic import Field

from schemas.internal.base import CoreModel
from schemas.internal.checks import PDFUASeverity
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType


class HeadingIssueType(str, Enum):
    LEVEL_SKIPPED = "levelSkipped"
    MULTIPLE_H1 = "multipleH1"
    EMPTY_HEADING = "emptyHeading"
    FIRST_HEADING_NOT_H1 = "firstHeadingNotH1"
    LEVEL_INCREASE_EXCESSIVE = "levelIncreaseExcessive"
    NON_MEANINGFUL_TEXT = "nonMeaningfulText"
    LOGICAL_ORDER_VIOLATION = "logicalOrderViolation"

    @property
    def error_code(self) -> SemanticErrorCode:
        return _HEADING_ERROR_CODES.get(self, SemanticErrorCode.HEADING_HIERARCHY_INVALID)


_HEADING_ERROR_CODES: Dict[HeadingIssueType, SemanticErrorCode] = {
    HeadingIssueType.LEVEL_SKIPPED: SemanticErrorCode.HEADING_LEVEL_SKIPPED,
    HeadingIssueType.MULTIPLE_H1: SemanticErrorCode.MULTIPLE_H1_HEADINGS,
    HeadingIssueType.EMPTY_HEADING: SemanticErrorCode.EMPTY_HEADING,
}


class HeadingHierarchyIssue(CoreModel):
    id: UUID = Field(default_factory=uuid4)
    type: HeadingIssueType
    severity: PDFUASeverity
    node_id: UUID
    heading_level: int
    message: str
    page_index: Optional[int] = None
    context: Dict[str, str] = Field(default_factory=dict)

    @property
    def error_code(self) -> SemanticErrorCode:
        return self.type.error_code


class HeadingHierarchyValidationResult(CoreModel):
    issues: Tuple[HeadingHierarchyIssue, ...] = ()
    total_heading_count: int = Field(default=0, ge=0)
    headings_by_level: Dict[int, int] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def issues_by_type(self) -> Dict[HeadingIssueType, List[HeadingHierarchyIssue]]:
        grouped: Dict[HeadingIssueType, List[HeadingHierarchyIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.type, []).append(issue)
        return grouped

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is PDFUASeverity.ERROR)

    @property
    def max_heading_level(self) -> int:
        return max(self.headings_by_level, default=0)

    @property
    def has_single_h1(self) -> bool:
        return self.headings_by_level.get(1) == 1

    @property
    def error_codes(self) -> FrozenSet[SemanticErrorCode]:
        return frozenset(issue.error_code for issue in self.issues)


class ReadingDirection(str, Enum):
    LEFT_TO_RIGHT = "leftToRight"
    RIGHT_TO_LEFT = "rightToLeft"


class ReadingOrderIssueType(str, Enum):
    OUT_OF_ORDER = "outOfOrder"
    MISPOSITIONED = "mispositioned"
    OVERLAPPING = "overlapping"
    REVERSE_DIRECTION = "reverseDirection"
    VERTICAL_MISALIGNMENT = "verticalMisalignment"
    COLUMN_JUMP = "columnJump"
    VISUAL_MISMATCH = "visualMismatch"


class ReadingOrderIssue(CoreModel):
    """A problem between two consecutive positioned nodes on one page."""

    id: UUID = Field(default_factory=uuid4)
    type: ReadingOrderIssueType
    severity: PDFUASeverity
    node_id: UUID
    next_node_id: Optional[UUID] = None
    message: str
    page_index: int = Field(ge=0)
    context: Dict[str, str] = Field(default_factory=dict)


class ReadingOrderValidationResult(CoreModel):
    issues: Tuple[ReadingOrderIssue, ...] = ()
    total_node_count: int = Field(default=0, ge=0)
    page_count: int = Field(default=0, ge=0)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def issues_by_severity(self) -> Dict[PDFUASeverity, List[ReadingOrderIssue]]:
        grouped: Dict[PDFUASeverity, List[ReadingOrderIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.severity, []).append(issue)
        return grouped

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is PDFUASeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity is PDFUASeverity.WARNING)


class StructureTreeError(CoreModel):
    id: UUID = Field(default_factory=uuid4)
    code: SemanticErrorCode
    node_id: UUID
    node_type: SemanticType
    message: str
    page_index: Optional[int] = None
    context: Dict[str, str] = Field(default_factory=dict)


class StructureTreeAnalysisResult(CoreModel):
    errors: Tuple[StructureTreeError, ...] = ()
    total_node_count: int = Field(default=0, ge=0)
    max_depth: int = Field(default=0, ge=0)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors_by_code(self) -> Dict[SemanticErrorCode, List[StructureTreeError]]:
        grouped: Dict[SemanticErrorCode, List[StructureTreeError]] = {}
        for error in self.errors:
            grouped.setdefault(error.code, []).append(error)
        return grouped

    @property
    def error_code_counts(self) -> Dict[SemanticErrorCode, int]:
        return dict(Counter(error.code for error in self.errors))

    @property
    def error_code_count(self) -> int:
        return len({error.code for error in self.errors})


__all__ = [
    "HeadingHierarchyIssue",
    "HeadingHierarchyValidationResult",
    "HeadingIssueType",
    "ReadingDirection",
    "ReadingOrderIssue",
    "ReadingOrderIssueType",
    "ReadingOrderValidationResult",
    "StructureTreeAnalysisResult",
    "StructureTreeError",
]
