"""PDF/UA requirement and WCAG success-criterion checkers."""

from .accessibility import AccessibilityChecker
from .alt_text import AltTextChecker
from .base import PDFUAChecker
from .headings import HeadingHierarchyChecker
from .language import LanguageChecker
from .links import LinkPurposeChecker
from .lists import ListChecker
from .reading_order import ReadingOrderChecker
from .role_map import ROLE_MAP_ATTRIBUTE, RoleMapChecker
from .runner import (
    default_checkers,
    default_wcag_checkers,
    run_pdfua_checks,
    run_wcag_checks,
    summarize,
)
from .structure import StructureTreeAnalyzer
from .tables import TableChecker
from .tagged import TaggedPDFChecker

__all__ = [
    "AccessibilityChecker",
    "AltTextChecker",
    "HeadingHierarchyChecker",
    "LanguageChecker",
    "LinkPurposeChecker",
    "ListChecker",
    "PDFUAChecker",
    "ROLE_MAP_ATTRIBUTE",
    "ReadingOrderChecker",
    "RoleMapChecker",
    "StructureTreeAnalyzer",
    "TableChecker",
    "TaggedPDFChecker",
    "default_checkers",
    "default_wcag_checkers",
    "run_pdfua_checks",
    "run_wcag_checks",
    "summarize",
]
