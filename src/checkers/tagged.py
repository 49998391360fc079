"""PDF/UA 7.1: the document must carry a usable structure tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import SemanticNode
from schemas.internal.semantic_types import HEADING_TYPES, SemanticErrorCode, SemanticType

CONTENT_TYPES = frozenset(
    {
        SemanticType.PARAGRAPH,
        *HEADING_TYPES,
        SemanticType.FIGURE,
        SemanticType.TABLE,
        SemanticType.LIST,
        SemanticType.DIV,
        SemanticType.BLOCK_QUOTE,
    }
)


@dataclass(frozen=True)
class TaggedPDFChecker(PDFUAChecker):
    """Checks the structure-tree root of a document."""

    requirement: ClassVar[PDFUARequirement] = PDFUARequirement.DOCUMENT_MUST_BE_TAGGED

    minimum_structure_elements: int = 1
    require_document_root: bool = True
    require_all_content_tagged: bool = True

    @classmethod
    def strict(cls) -> "TaggedPDFChecker":
        return cls()

    @classmethod
    def lenient(cls) -> "TaggedPDFChecker":
        return cls(require_document_root=False, require_all_content_tagged=False)

    @classmethod
    def basic(cls) -> "TaggedPDFChecker":
        return cls(require_document_root=False, require_all_content_tagged=False)

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        violations: List[PDFUAViolation] = []

        if self.require_document_root and node.type != SemanticType.DOCUMENT:
            violations.append(
                self._violation(
                    node,
                    f"Document root must be of type 'Document', found '{node.type}'",
                )
            )

        if not node.children:
            violations.append(
                self._violation(
                    node, "Document structure tree is empty - no tagged content found"
                )
            )

        element_count = node.descendant_count
        if element_count < self.minimum_structure_elements:
            violations.append(
                self._violation(
                    node,
                    f"Document has only {element_count} structure element(s), "
                    f"minimum required is {self.minimum_structure_elements}",
                )
            )

        for element in node.iter_descendants():
            if (
                not element.children
                and element.bounding_box is None
                and element.type != SemanticType.DOCUMENT
            ):
                violations.append(
                    self._violation(
                        element,
                        f"Structure element '{element.type}' has no content and no location",
                        PDFUASeverity.WARNING,
                    )
                )

        if self.require_all_content_tagged:
            for element in node.iter_descendants():
                if (
                    element.type == SemanticType.ARTIFACT
                    or SemanticErrorCode.EMPTY_ELEMENT in element.error_codes
                ):
                    violations.append(
                        self._violation(
                            element,
                            "Content appears to be untagged or in an artifact element",
                            PDFUASeverity.WARNING,
                        )
                    )

        if node.first_descendant(lambda element: element.type in CONTENT_TYPES) is None:
            violations.append(
                self._violation(
                    node,
                    "Document missing required structure elements (no content blocks found)",
                )
            )

        if not violations:
            return PDFUACheckResult.passing(
                self.requirement,
                context=f"Document is properly tagged with {element_count} structure element(s)",
            )
        return PDFUACheckResult.from_violations(
            self.requirement,
            violations,
            context=f"Found {len(violations)} tagging violation(s)",
        )


__all__ = ["CONTENT_TYPES", "TaggedPDFChecker"]
