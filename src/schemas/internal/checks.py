"""PDF/UA requirement taxonomy and check-result contracts."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple
from uuid import UUID, uuid4

from pydantic import Field

from schemas.internal.base import CoreModel
from schemas.internal.geometry import BoundingBox
from schemas.internal.semantic_types import SemanticType


class PDFUASeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class PDFUACategory(str, Enum):
    STRUCTURE = "Structure"
    TABLES = "Tables"
    LISTS = "Lists"
    CONTENT = "Content"


class PDFUARequirement(str, Enum):
    """PDF/UA-1 (ISO 14289-1) requirement, keyed by its clause identifier."""

    DOCUMENT_MUST_BE_TAGGED = "7.1"
    STRUCTURE_ELEMENTS_NEED_ROLE_MAPPING = "7.2"
    LOGICAL_READING_ORDER = "7.3"
    HEADINGS_MUST_BE_NESTED = "7.4"
    TABLES_MUST_HAVE_HEADERS = "7.5"
    TABLE_STRUCTURE_MUST_BE_REGULAR = "7.5.1"
    TABLE_CELL_HEADER_ASSOCIATION = "7.5.2"
    LIST_ITEMS_MUST_HAVE_LABELS = "7.6"
    LIST_STRUCTURE_MUST_BE_PROPER = "7.6.1"
    ALTERNATIVE_DESCRIPTIONS = "7.18"
    ACTUAL_TEXT_REQUIRED = "7.18.1"

    def __str__(self) -> str:
        return self.value

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def category(self) -> PDFUACategory:
        return _REQUIREMENT_INFO[self][0]

    @property
    def label(self) -> str:
        """Human-readable requirement name."""
        return _REQUIREMENT_INFO[self][1]


_REQUIREMENT_INFO: Dict[PDFUARequirement, Tuple[PDFUACategory, str]] = {
    PDFUARequirement.DOCUMENT_MUST_BE_TAGGED: (
        PDFUACategory.STRUCTURE,
        "Document Must Be Tagged",
    ),
    PDFUARequirement.STRUCTURE_ELEMENTS_NEED_ROLE_MAPPING: (
        PDFUACategory.STRUCTURE,
        "Structure Elements Need Role Mapping",
    ),
    PDFUARequirement.LOGICAL_READING_ORDER: (
        PDFUACategory.STRUCTURE,
        "Logical Reading Order",
    ),
    PDFUARequirement.HEADINGS_MUST_BE_NESTED: (
        PDFUACategory.STRUCTURE,
        "Headings Must Be Properly Nested",
    ),
    PDFUARequirement.TABLES_MUST_HAVE_HEADERS: (
        PDFUACategory.TABLES,
        "Tables Must Have Headers",
    ),
    PDFUARequirement.TABLE_STRUCTURE_MUST_BE_REGULAR: (
        PDFUACategory.TABLES,
        "Table Structure Must Be Regular",
    ),
    PDFUARequirement.TABLE_CELL_HEADER_ASSOCIATION: (
        PDFUACategory.TABLES,
        "Table Cell Header Association",
    ),
    PDFUARequirement.LIST_ITEMS_MUST_HAVE_LABELS: (
        PDFUACategory.LISTS,
        "List Items Must Have Labels",
    ),
    PDFUARequirement.LIST_STRUCTURE_MUST_BE_PROPER: (
        PDFUACategory.LISTS,
        "List Structure Must Be Proper",
    ),
    PDFUARequirement.ALTERNATIVE_DESCRIPTIONS: (
        PDFUACategory.CONTENT,
        "Alternative Descriptions",
    ),
    PDFUARequirement.ACTUAL_TEXT_REQUIRED: (
        PDFUACategory.CONTENT,
        "Actual Text Required",
    ),
}


class PDFUAViolation(CoreModel):
    """A located, severity-tagged defect. Equality uses ``id`` only."""

    id: UUID = Field(default_factory=uuid4)
    node_id: Optional[UUID] = None
    node_type: Optional[SemanticType] = None
    description: str
    severity: PDFUASeverity
    location: Optional[BoundingBox] = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PDFUAViolation):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_error(self) -> bool:
        return self.severity is PDFUASeverity.ERROR


class PDFUACheckResult(CoreModel):
    """Outcome of evaluating one requirement against a node or a batch."""

    requirement: PDFUARequirement
    passed: bool
    violations: Tuple[PDFUAViolation, ...] = ()
    context: Optional[str] = None

    @classmethod
    def passing(
        cls, requirement: PDFUARequirement, context: Optional[str] = None
    ) -> "PDFUACheckResult":
        return cls(requirement=requirement, passed=True, context=context)

    @classmethod
    def failing(
        cls,
        requirement: PDFUARequirement,
        violations: Iterable[PDFUAViolation],
        context: Optional[str] = None,
    ) -> "PDFUACheckResult":
        return cls(
            requirement=requirement,
            passed=False,
            violations=tuple(violations),
            context=context,
        )

    @classmethod
    def from_violations(
        cls,
        requirement: PDFUARequirement,
        violations: Iterable[PDFUAViolation],
        context: Optional[str] = None,
    ) -> "PDFUACheckResult":
        """Fails only when an error-severity violation is present."""
        found = tuple(violations)
        return cls(
            requirement=requirement,
            passed=not any(violation.is_error for violation in found),
            violations=found,
            context=context,
        )

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    @property
    def errors(self) -> Tuple[PDFUAViolation, ...]:
        return tuple(v for v in self.violations if v.severity is PDFUASeverity.ERROR)

    @property
    def warnings(self) -> Tuple[PDFUAViolation, ...]:
        return tuple(v for v in self.violations if v.severity is PDFUASeverity.WARNING)


class PDFUACheckSummary(CoreModel):
    """Counts over a set of check results."""

    total_checks: int = Field(ge=0)
    failed_checks: int = Field(ge=0)
    violations_by_severity: Dict[PDFUASeverity, int] = Field(default_factory=dict)
    violations_by_category: Dict[PDFUACategory, int] = Field(default_factory=dict)

    @property
    def passed_checks(self) -> int:
        return self.total_checks - self.failed_checks

    @property
    def passed(self) -> bool:
        return self.failed_checks == 0

    @property
    def violation_count(self) -> int:
        return sum(self.violations_by_severity.values())


__all__ = [
    "PDFUACategory",
    "PDFUACheckResult",
    "PDFUACheckSummary",
    "PDFUARequirement",
    "PDFUASeverity",
    "PDFUAViolation",
]
