"""Run the PDF/UA checkers over a structure tree."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from checkers.accessibility import AccessibilityChecker
from checkers.alt_text import AltTextChecker
from checkers.base import PDFUAChecker
from checkers.headings import HeadingHierarchyChecker
from checkers.language import LanguageChecker
from checkers.links import LinkPurposeChecker
from checkers.lists import ListChecker
from checkers.reading_order import ReadingOrderChecker
from checkers.role_map import RoleMapChecker
from checkers.tables import TableChecker
from checkers.tagged import TaggedPDFChecker
from core.config import CheckerProfile, ConformanceLevel, Settings, get_settings
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUACheckSummary,
    PDFUARequirement,
)
from schemas.internal.nodes import FigureNode, ListNode, SemanticNode, TableNode
from schemas.internal.semantic_types import SemanticType
from schemas.internal.wcag import AccessibilityCheckResult

logger = logging.getLogger(__name__)

NodeSelector = Callable[[SemanticNode], List[SemanticNode]]

_PROFILES = ("strict", "lenient", "basic")


def _root_only(root: SemanticNode) -> List[SemanticNode]:
    return [root]


def _tables(root: SemanticNode) -> List[SemanticNode]:
    return [node for node in root.iter_descendants() if isinstance(node, TableNode)]


def _lists(root: SemanticNode) -> List[SemanticNode]:
    return [node for node in root.iter_descendants() if isinstance(node, ListNode)]


def _described_content(root: SemanticNode) -> List[SemanticNode]:
    return [
        node
        for node in root.iter_descendants()
        if isinstance(node, FigureNode) or node.type == SemanticType.FORMULA
    ]


_SELECTORS: Dict[PDFUARequirement, NodeSelector] = {
    PDFUARequirement.DOCUMENT_MUST_BE_TAGGED: _root_only,
    PDFUARequirement.STRUCTURE_ELEMENTS_NEED_ROLE_MAPPING: _root_only,
    PDFUARequirement.LOGICAL_READING_ORDER: _root_only,
    PDFUARequirement.HEADINGS_MUST_BE_NESTED: _root_only,
    PDFUARequirement.TABLES_MUST_HAVE_HEADERS: _tables,
    PDFUARequirement.LIST_ITEMS_MUST_HAVE_LABELS: _lists,
    PDFUARequirement.ALTERNATIVE_DESCRIPTIONS: _described_content,
}


def default_checkers(
    settings: Optional[Settings] = None,
    profile: Optional[CheckerProfile] = None,
    *,
    role_map: Optional[Mapping[str, str]] = None,
) -> List[PDFUAChecker]:
    """
    Build the standard checker set for a profile.

    Args:
        settings: Settings supplying the profile and per-checker overrides
        profile: Preset name; overrides ``settings.checker_profile``
        role_map: Document-level RoleMap handed to the role-map checker

    Returns:
        Checkers for 7.1, 7.2, 7.3, 7.4, 7.5, 7.6 and 7.18, in that order
    """
    settings = settings or get_settings()
    profile = profile or settings.checker_profile
    if profile not in _PROFILES:
        raise ValueError(f"Unknown checker profile: {profile}")

    tagged: TaggedPDFChecker = getattr(TaggedPDFChecker, profile)()
    role_mapping: RoleMapChecker = getattr(RoleMapChecker, profile)()
    reading_order: ReadingOrderChecker = getattr(ReadingOrderChecker, profile)()
    headings: HeadingHierarchyChecker = getattr(HeadingHierarchyChecker, profile)()
    tables: TableChecker = getattr(TableChecker, profile)()
    lists: ListChecker = getattr(ListChecker, profile)()
    alt_text: AltTextChecker = getattr(AltTextChecker, profile)()

    if settings.role_map_max_depth is not None:
        role_mapping = replace(role_mapping, max_role_mapping_depth=settings.role_map_max_depth)
    if role_map:
        role_mapping = replace(role_mapping, role_map=dict(role_map))
    if settings.table_visual_tolerance is not None:
        tables = replace(tables, visual_match_tolerance=settings.table_visual_tolerance)
    if settings.alt_text_min_length is not None:
        alt_text = replace(alt_text, minimum_alt_text_length=settings.alt_text_min_length)
    lists = replace(lists, max_nesting_level=settings.list_max_nesting_level)

    logger.debug("Built %s checker set", profile)
    return [tagged, role_mapping, reading_order, headings, tables, lists, alt_text]


def run_pdfua_checks(
    root: SemanticNode,
    checkers: Optional[Sequence[PDFUAChecker]] = None,
    *,
    max_workers: Optional[int] = None,
) -> List[PDFUACheckResult]:
    """
    Run each checker over the nodes of ``root`` it applies to.

    Root-level requirements (7.1 to 7.4) see the root once; table, list and
    alternative-text requirements see every matching node in the tree,
    aggregated with ``check_nodes``.

    Args:
        root: Root of the structure tree, normally a Document node
        checkers: Checkers to run; defaults to ``default_checkers()``
        max_workers: Per-checker thread count for batch checks

    Returns:
        One result per checker, in checker order
    """
    if checkers is None:
        checkers = default_checkers()

    results: List[PDFUACheckResult] = []
    for checker in checkers:
        selector = _SELECTORS.get(checker.requirement)
        if selector is None:
            logger.warning(
                "No node selector for requirement %s; checking the root only",
                checker.requirement.identifier,
            )
            selector = _root_only

        if selector is _root_only:
            result = checker.check(root)
        else:
            result = checker.check_nodes(selector(root), max_workers=max_workers)
        if not result.passed:
            logger.info(
                "PDF/UA %s failed with %d violation(s)",
                checker.requirement.identifier,
                result.violation_count,
            )
        results.append(result)
    return results


def summarize(results: Iterable[PDFUACheckResult]) -> PDFUACheckSummary:
    """Count checks, failures and violations per severity and category."""
    total = 0
    failed = 0
    by_severity: Counter = Counter()
    by_category: Counter = Counter()
    for result in results:
        total += 1
        if not result.passed:
            failed += 1
        for violation in result.violations:
            by_severity[violation.severity] += 1
            by_category[result.requirement.category] += 1
    return PDFUACheckSummary(
        total_checks=total,
        failed_checks=failed,
        violations_by_severity=dict(by_severity),
        violations_by_category=dict(by_category),
    )


def default_wcag_checkers(
    settings: Optional[Settings] = None,
    level: Optional[ConformanceLevel] = None,
) -> List[AccessibilityChecker]:
    """
    Build the WCAG checker set for a conformance level.

    At AA and above the language checker also inspects the language of parts
    (3.1.2); at A only the document language is required.

    Args:
        settings: Settings supplying the default level
        level: Conformance level; overrides ``settings.wcag_level``

    Returns:
        Language and link-purpose checkers whose criteria the level includes
    """
    settings = settings or get_settings()
    level = level or settings.wcag_level

    language = LanguageChecker.document_only() if level == "A" else LanguageChecker.all_elements()
    checkers: List[AccessibilityChecker] = [language, LinkPurposeChecker()]
    return [checker for checker in checkers if checker.criterion.within_level(level)]


def run_wcag_checks(
    root: SemanticNode,
    checkers: Optional[Sequence[AccessibilityChecker]] = None,
) -> List[AccessibilityCheckResult]:
    """
    Run each WCAG checker over every node of ``root``.

    Checkers skip the node types they do not apply to, so each one sees the
    whole tree in pre-order.

    Args:
        root: Root of the structure tree
        checkers: Checkers to run; defaults to ``default_wcag_checkers()``

    Returns:
        One result per checker, in checker order
    """
    if checkers is None:
        checkers = default_wcag_checkers()

    nodes = list(root.iter_descendants())
    results: List[AccessibilityCheckResult] = []
    for checker in checkers:
        result = checker.check_nodes(nodes)
        if not result.passed:
            logger.info(
                "WCAG %s failed with %d violation(s)",
                checker.criterion.value,
                result.violation_count,
            )
        results.append(result)
    return results


__all__ = [
    "default_checkers",
    "default_wcag_checkers",
    "run_pdfua_checks",
    "run_wcag_checks",
    "summarize",
]
