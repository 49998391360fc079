"""WCAG 2.4.4: the purpose of each link must be clear from its text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, FrozenSet, Iterable, List

from checkers.accessibility import AccessibilityChecker
from schemas.internal.nodes import SemanticNode, accessible_text
from schemas.internal.semantic_types import SemanticType
from schemas.internal.wcag import (
    AccessibilityCheckResult,
    AccessibilityViolation,
    ViolationSeverity,
    WCAGSuccessCriterion,
)

DEFAULT_GENERIC_PATTERNS: FrozenSet[str] = frozenset(
    {
        "here", "click here", "click", "link", "read more", "more",
        "continue", "next", "previous", "back", "go", "details",
        "info", "information", "learn more", "find out more",
        "see more", "view", "view more", "read", "download",
        "...", ">>", "<<", ">", "<",
        "this", "that", "this page", "this site", "this link",
        "page", "site", "article", "document", "pdf",
    }
)


@dataclass(frozen=True)
class LinkPurposeChecker(AccessibilityChecker):
    """Flags empty, short, punctuation-only and generic link text.

    With ``require_distinct_text`` a batch also reports links that share the
    same text, since they cannot be told apart out of context.
    """

    criterion: ClassVar[WCAGSuccessCriterion] = WCAGSuccessCriterion.LINK_PURPOSE

    minimum_link_text_length: int = 1
    check_for_generic_text: bool = True
    generic_patterns: FrozenSet[str] = DEFAULT_GENERIC_PATTERNS
    require_distinct_text: bool = False

    def __post_init__(self) -> None:
        if self.minimum_link_text_length < 1:
            raise ValueError("minimum_link_text_length must be >= 1")
        object.__setattr__(self, "generic_patterns", frozenset(self.generic_patterns))

    @classmethod
    def strict(cls) -> "LinkPurposeChecker":
        return cls(minimum_link_text_length=5, require_distinct_text=True)

    @classmethod
    def lenient(cls) -> "LinkPurposeChecker":
        return cls(check_for_generic_text=False)

    @classmethod
    def with_custom_patterns(cls, patterns: Iterable[str]) -> "LinkPurposeChecker":
        return cls(generic_patterns=frozenset(patterns))

    def check(self, node: SemanticNode) -> AccessibilityCheckResult:
        if node.type != SemanticType.LINK:
            return AccessibilityCheckResult.passing(self.criterion)

        text = accessible_text(node)
        violations = self._check_text(node, text)
        if self.check_for_generic_text and text.strip().lower() in self.generic_patterns:
            violations.append(
                self._violation(
                    node,
                    f"Link uses generic text '{text}' that does not describe the destination",
                    ViolationSeverity.SERIOUS,
                )
            )
        return self._result(violations, "Link has clear purpose")

    def check_nodes(self, nodes: Iterable[SemanticNode]) -> AccessibilityCheckResult:
        links = [node for node in nodes if node.type == SemanticType.LINK]
        violations: List[AccessibilityViolation] = []
        for link in links:
            violations.extend(self.check(link).violations)
        if self.require_distinct_text and len(links) > 1:
            violations.extend(self._duplicate_text(links))

        if not violations:
            return AccessibilityCheckResult.passing(
                self.criterion, context=f"Checked {len(links)} link(s)"
            )
        return AccessibilityCheckResult.failing(
            self.criterion,
            violations,
            context=f"Found {len(violations)} violation(s) in {len(links)} link(s)",
        )

    def _check_text(self, node: SemanticNode, text: str) -> List[AccessibilityViolation]:
        if not text:
            return [
                self._violation(
                    node,
                    "Link has no text content or alternative text",
                    ViolationSeverity.CRITICAL,
                )
            ]

        violations: List[AccessibilityViolation] = []
        if len(text) < self.minimum_link_text_length:
            violations.append(
                self._violation(
                    node,
                    f"Link text is too short ({len(text)} character(s), "
                    f"minimum: {self.minimum_link_text_length})",
                    ViolationSeverity.SERIOUS,
                )
            )
        if not text.strip():
            violations.append(
                self._violation(node, "Link text is whitespace-only", ViolationSeverity.CRITICAL)
            )
        if not any(char.isalnum() for char in text):
            violations.append(
                self._violation(
                    node,
                    "Link text contains only punctuation or special characters",
                    ViolationSeverity.SERIOUS,
                )
            )
        return violations

    def _duplicate_text(self, links: List[SemanticNode]) -> List[AccessibilityViolation]:
        by_text: Dict[str, List[SemanticNode]] = {}
        for link in links:
            text = accessible_text(link)
            if text:
                by_text.setdefault(text, []).append(link)

        violations: List[AccessibilityViolation] = []
        for text, shared in by_text.items():
            if len(shared) < 2:
                continue
            for link in shared:
                violations.append(
                    self._violation(
                        link,
                        f"Multiple links ({len(shared)}) share the same text '{text}' - "
                        "ensure they lead to the same destination or have distinct context",
                        ViolationSeverity.MODERATE,
                    )
                )
        return violations


__all__ = ["DEFAULT_GENERIC_PATTERNS", "LinkPurposeChecker"]
