"""WCAG 2.1 success-criterion taxonomy and check-result contracts."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Literal, Optional, Tuple
from uuid import UUID, uuid4

from pydantic import Field

from schemas.internal.base import CoreModel
from schemas.internal.geometry import BoundingBox
from schemas.internal.semantic_types import SemanticType

WCAGLevel = Literal["A", "AA", "AAA"]

_LEVEL_RANK: Dict[str, int] = {"A": 1, "AA": 2, "AAA": 3}


class WCAGPrinciple(str, Enum):
    PERCEIVABLE = "Perceivable"
    OPERABLE = "Operable"
    UNDERSTANDABLE = "Understandable"
    ROBUST = "Robust"


class ViolationSeverity(str, Enum):
    """Impact of a WCAG violation, most severe first."""

    CRITICAL = "critical"
    SERIOUS = "serious"
    MODERATE = "moderate"
    MINOR = "minor"


class WCAGSuccessCriterion(str, Enum):
    """Checkable WCAG 2.1 success criterion, keyed by its number."""

    NON_TEXT_CONTENT = "1.1.1"
    INFO_AND_RELATIONSHIPS = "1.3.1"
    CONTRAST_MINIMUM = "1.4.3"
    CONTRAST_ENHANCED = "1.4.6"
    BYPASS_BLOCKS = "2.4.1"
    PAGE_TITLED = "2.4.2"
    LINK_PURPOSE = "2.4.4"
    HEADINGS_AND_LABELS = "2.4.6"
    LANGUAGE_OF_PAGE = "3.1.1"
    LANGUAGE_OF_PARTS = "3.1.2"
    NAME_ROLE_VALUE = "4.1.2"

    def __str__(self) -> str:
        return self.value

    @property
    def level(self) -> WCAGLevel:
        return _CRITERION_INFO[self][0]

    @property
    def label(self) -> str:
        return _CRITERION_INFO[self][1]

    @property
    def principle(self) -> WCAGPrinciple:
        return _PRINCIPLE_BY_PREFIX[self.value[0]]

    def within_level(self, level: WCAGLevel) -> bool:
        """True when conformance at ``level`` includes this criterion."""
        return _LEVEL_RANK[self.level] <= _LEVEL_RANK[level]


_PRINCIPLE_BY_PREFIX: Dict[str, WCAGPrinciple] = {
    "1": WCAGPrinciple.PERCEIVABLE,
    "2": WCAGPrinciple.OPERABLE,
    "3": WCAGPrinciple.UNDERSTANDABLE,
    "4": WCAGPrinciple.ROBUST,
}

_CRITERION_INFO: Dict[WCAGSuccessCriterion, Tuple[WCAGLevel, str]] = {
    WCAGSuccessCriterion.NON_TEXT_CONTENT: ("A", "Non-text Content"),
    WCAGSuccessCriterion.INFO_AND_RELATIONSHIPS: ("A", "Info and Relationships"),
    WCAGSuccessCriterion.CONTRAST_MINIMUM: ("AA", "Contrast (Minimum)"),
    WCAGSuccessCriterion.CONTRAST_ENHANCED: ("AAA", "Contrast (Enhanced)"),
    WCAGSuccessCriterion.BYPASS_BLOCKS: ("A", "Bypass Blocks"),
    WCAGSuccessCriterion.PAGE_TITLED: ("A", "Page Titled"),
    WCAGSuccessCriterion.LINK_PURPOSE: ("A", "Link Purpose (In Context)"),
    WCAGSuccessCriterion.HEADINGS_AND_LABELS: ("AA", "Headings and Labels"),
    WCAGSuccessCriterion.LANGUAGE_OF_PAGE: ("A", "Language of Page"),
    WCAGSuccessCriterion.LANGUAGE_OF_PARTS: ("AA", "Language of Parts"),
    WCAGSuccessCriterion.NAME_ROLE_VALUE: ("A", "Name, Role, Value"),
}


class AccessibilityViolation(CoreModel):
    """A located WCAG defect. Equality uses ``id`` only."""

    id: UUID = Field(default_factory=uuid4)
    node_id: UUID
    node_type: SemanticType
    description: str
    severity: ViolationSeverity
    location: Optional[BoundingBox] = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AccessibilityViolation):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


class AccessibilityCheckResult(CoreModel):
    """Outcome of evaluating one success criterion; any violation fails it."""

    criterion: WCAGSuccessCriterion
    passed: bool
    violations: Tuple[AccessibilityViolation, ...] = ()
    context: Optional[str] = None

    @classmethod
    def passing(
        cls, criterion: WCAGSuccessCriterion, context: Optional[str] = None
    ) -> "AccessibilityCheckResult":
        return cls(criterion=criterion, passed=True, context=context)

    @classmethod
    def failing(
        cls,
        criterion: WCAGSuccessCriterion,
        violations: Iterable[AccessibilityViolation],
        context: Optional[str] = None,
    ) -> "AccessibilityCheckResult":
        return cls(
            criterion=criterion,
            passed=False,
            violations=tuple(violations),
            context=context,
        )

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def violations_with(self, severity: ViolationSeverity) -> Tuple[AccessibilityViolation, ...]:
        return tuple(v for v in self.violations if v.severity is severity)


__all__ = [
    "AccessibilityCheckResult",
    "AccessibilityViolation",
    "ViolationSeverity",
    "WCAGLevel",
    "WCAGPrinciple",
    "WCAGSuccessCriterion",
]
