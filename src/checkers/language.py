"""WCAG 3.1.1 / 3.1.2: the human language must be programmatically set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, FrozenSet, List, Optional

from checkers.accessibility import AccessibilityChecker
from schemas.internal.nodes import SemanticNode
from schemas.internal.semantic_types import SemanticType
from schemas.internal.wcag import (
    AccessibilityCheckResult,
    AccessibilityViolation,
    ViolationSeverity,
    WCAGSuccessCriterion,
)

# Content-bearing types whose Lang is checked when every element is inspected.
_LANGUAGE_BEARING_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.DOCUMENT,
        SemanticType.PARAGRAPH,
        SemanticType.HEADING,
        SemanticType.H1,
        SemanticType.H2,
        SemanticType.H3,
        SemanticType.H4,
        SemanticType.H5,
        SemanticType.H6,
        SemanticType.SPAN,
        SemanticType.BLOCK_QUOTE,
        SemanticType.CAPTION,
        SemanticType.LIST_ITEM,
    }
)

COMMON_LANGUAGES: FrozenSet[str] = frozenset(
    {
        "en", "es", "fr", "de", "it", "pt", "nl", "ru", "zh", "ja",
        "ko", "ar", "hi", "pl", "sv", "da", "no", "fi", "cs", "el",
        "he", "tr", "id", "th", "vi", "ro", "hu", "uk", "bg", "hr",
        "sr", "sk", "sl", "et", "lv", "lt", "is", "ga", "mt", "cy",
    }
)


def is_common_language(code: str) -> bool:
    """True when the primary subtag is a widespread ISO 639-1 code."""
    primary = code.split("-", 1)[0]
    return primary.lower() in COMMON_LANGUAGES


def validate_language_code(code: str) -> Optional[str]:
    """
    Check a language tag against the shape of BCP 47.

    Accepts ``language[-script][-region][-variant]``: a 2-3 letter primary tag
    followed by 4-letter scripts, 2-character or 3-digit regions, and 5-8
    character (or digit-led 4 character) variants.

    Args:
        code: Trimmed language tag, e.g. ``"en-US"``

    Returns:
        None when the tag is well formed, otherwise the reason it is not
    """
    parts = [part for part in code.split("-") if part]
    if not parts:
        return "Language code is empty"

    primary = parts[0]
    if not 2 <= len(primary) <= 3:
        return "Primary language tag must be 2-3 letters (e.g., 'en', 'fra')"
    if not primary.isalpha():
        return "Primary language tag must contain only letters"

    for subtag in parts[1:]:
        if len(subtag) == 4 and subtag.isalpha():
            continue
        if len(subtag) == 2 and subtag.isalnum():
            continue
        if len(subtag) == 3 and subtag.isdigit():
            continue
        if 5 <= len(subtag) <= 8 and subtag.isalnum():
            continue
        if len(subtag) == 4 and subtag[0].isdigit():
            continue
        return f"Invalid subtag '{subtag}' in language code"
    return None


@dataclass(frozen=True)
class LanguageChecker(AccessibilityChecker):
    """Validates the ``Lang`` attribute of the document and, optionally, its parts.

    The document root must carry a language. With ``check_all_nodes`` set,
    content elements are also inspected, but only a language they declare is
    validated: an element without ``Lang`` inherits its parent's.
    """

    criterion: ClassVar[WCAGSuccessCriterion] = WCAGSuccessCriterion.LANGUAGE_OF_PAGE

    strict_validation: bool = True
    check_all_nodes: bool = False

    @classmethod
    def document_only(cls) -> "LanguageChecker":
        return cls(strict_validation=True, check_all_nodes=False)

    @classmethod
    def all_elements(cls) -> "LanguageChecker":
        return cls(strict_validation=True, check_all_nodes=True)

    @classmethod
    def lenient(cls) -> "LanguageChecker":
        return cls(strict_validation=False, check_all_nodes=False)

    def check(self, node: SemanticNode) -> AccessibilityCheckResult:
        if not self._applies_to(node):
            return AccessibilityCheckResult.passing(self.criterion)
        return self._result(self._check_language(node), "Language attribute is valid")

    def _applies_to(self, node: SemanticNode) -> bool:
        if node.type == SemanticType.DOCUMENT:
            return True
        return self.check_all_nodes and node.type in _LANGUAGE_BEARING_TYPES

    def _check_language(self, node: SemanticNode) -> List[AccessibilityViolation]:
        language = node.language
        if language is None:
            if node.type == SemanticType.DOCUMENT:
                return [
                    self._violation(
                        node,
                        "Document lacks language attribute (Lang entry required)",
                        ViolationSeverity.CRITICAL,
                    )
                ]
            return []

        trimmed = language.strip()
        if not trimmed:
            return [
                self._violation(
                    node,
                    "Language attribute is empty or whitespace-only",
                    ViolationSeverity.CRITICAL,
                )
            ]

        if self.strict_validation:
            reason = validate_language_code(trimmed)
            if reason is not None:
                return [
                    self._violation(
                        node,
                        f"Invalid language code '{trimmed}': {reason}",
                        ViolationSeverity.SERIOUS,
                    )
                ]
        return []


__all__ = [
    "COMMON_LANGUAGES",
    "LanguageChecker",
    "is_common_language",
    "validate_language_code",
]
