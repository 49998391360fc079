"""Internal schema definitions."""

from .checks import (  # noqa: F401
    PDFUACategory,
    PDFUACheckResult,
    PDFUACheckSummary,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from .geometry import BoundingBox, MultiBoundingBox, Point  # noqa: F401
from .nodes import (  # noqa: F401
    AnySemanticNode,
    AttributeValue,
    Attributes,
    ContentNode,
    FigureNode,
    ListKind,
    ListNode,
    SemanticNode,
    TableNode,
    accessible_text,
)
from .nontext import ImageChunk, LineArtChunk, LineChunk  # noqa: F401
from .semantic_types import SemanticErrorCode, SemanticType  # noqa: F401
from .structure import (  # noqa: F401
    HeadingHierarchyIssue,
    HeadingHierarchyValidationResult,
    HeadingIssueType,
    ReadingDirection,
    ReadingOrderIssue,
    ReadingOrderIssueType,
    ReadingOrderValidationResult,
    StructureTreeAnalysisResult,
    StructureTreeError,
)
from .text import (  # noqa: F401
    ContrastAnalysis,
    TextBlock,
    TextChunk,
    TextColumn,
    TextLine,
    TextType,
)
from .wcag import (  # noqa: F401
    AccessibilityCheckResult,
    AccessibilityViolation,
    ViolationSeverity,
    WCAGLevel,
    WCAGPrinciple,
    WCAGSuccessCriterion,
)

__all__ = [
    "AccessibilityCheckResult",
    "AccessibilityViolation",
    "AnySemanticNode",
    "AttributeValue",
    "Attributes",
    "BoundingBox",
    "ContentNode",
    "ContrastAnalysis",
    "FigureNode",
    "HeadingHierarchyIssue",
    "HeadingHierarchyValidationResult",
    "HeadingIssueType",
    "ImageChunk",
    "LineArtChunk",
    "LineChunk",
    "ListKind",
    "ListNode",
    "MultiBoundingBox",
    "PDFUACategory",
    "PDFUACheckResult",
    "PDFUACheckSummary",
    "PDFUARequirement",
    "PDFUASeverity",
    "PDFUAViolation",
    "Point",
    "ReadingDirection",
    "ReadingOrderIssue",
    "ReadingOrderIssueType",
    "ReadingOrderValidationResult",
    "SemanticErrorCode",
    "SemanticNode",
    "SemanticType",
    "StructureTreeAnalysisResult",
    "StructureTreeError",
    "TableNode",
    "TextBlock",
    "TextChunk",
    "TextColumn",
    "TextLine",
    "TextType",
    "ViolationSeverity",
    "WCAGLevel",
    "WCAGPrinciple",
    "WCAGSuccessCriterion",
    "accessible_text",
]
