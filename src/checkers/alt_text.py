"""PDF/UA 7.18: figures and formulas need alternative descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import FigureNode, SemanticNode
from schemas.internal.semantic_types import SemanticType


@dataclass(frozen=True)
class AltTextChecker(PDFUAChecker):
    """Checks Alt/ActualText on figures with visual content and on formulas.

    Figures without image or line-art chunks are treated as containers and
    skipped. A caption only counts as a description when
    ``accept_caption_as_alt`` is set.
    """

    requirement: ClassVar[PDFUARequirement] = PDFUARequirement.ALTERNATIVE_DESCRIPTIONS

    minimum_alt_text_length: int = 1
    check_image_chunks: bool = True
    accept_caption_as_alt: bool = False

    def __post_init__(self) -> None:
        if self.minimum_alt_text_length < 1:
            raise ValueError("minimum_alt_text_length must be >= 1")

    @classmethod
    def strict(cls) -> "AltTextChecker":
        return cls(minimum_alt_text_length=10, check_image_chunks=True)

    @classmethod
    def lenient(cls) -> "AltTextChecker":
        return cls(check_image_chunks=False, accept_caption_as_alt=True)

    @classmethod
    def basic(cls) -> "AltTextChecker":
        return cls()

    @classmethod
    def accepting_captions(cls) -> "AltTextChecker":
        return cls(accept_caption_as_alt=True)

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        if isinstance(node, FigureNode):
            violations = self._check_figure(node)
            if self.check_image_chunks:
                violations.extend(self._check_image_chunks(node))
        elif node.type == SemanticType.FORMULA:
            violations = self._check_formula(node)
        else:
            return PDFUACheckResult.passing(
                self.requirement, context="Node does not require alternative text"
            )

        if not violations:
            return PDFUACheckResult.passing(
                self.requirement, context=f"{node.type} has appropriate alternative text"
            )
        return PDFUACheckResult.from_violations(
            self.requirement,
            violations,
            context=f"Found {len(violations)} alternative text violation(s)",
        )

    def _description(self, figure: FigureNode) -> Optional[str]:
        for candidate in (figure.alt_text, figure.actual_text):
            if candidate:
                return candidate
        if self.accept_caption_as_alt and figure.has_caption:
            return figure.caption_text or ""
        return None

    def _check_figure(self, figure: FigureNode) -> List[PDFUAViolation]:
        if not figure.has_visual_content:
            return []

        description = self._description(figure)
        if description is None:
            return [
                self._violation(
                    figure,
                    f"Figure with {figure.visual_element_count} visual element(s) lacks "
                    "alternative text (Alt, ActualText, or Caption required)",
                )
            ]

        violations: List[PDFUAViolation] = []
        if len(description) < self.minimum_alt_text_length:
            violations.append(
                self._violation(
                    figure,
                    "Figure has alternative text that is too short "
                    f"({len(description)} character(s), "
                    f"minimum: {self.minimum_alt_text_length})",
                    PDFUASeverity.WARNING,
                )
            )
        if not description.strip():
            violations.append(
                self._violation(figure, "Figure has alternative text that is whitespace-only")
            )
        return violations

    def _check_image_chunks(self, figure: FigureNode) -> List[PDFUAViolation]:
        if figure.has_alt_text:
            return []
        violations: List[PDFUAViolation] = []
        for image in figure.image_chunks:
            if not image.has_alternative_text:
                violations.append(
                    self._violation(
                        figure,
                        "Image chunk within figure lacks alternative text",
                        PDFUASeverity.WARNING,
                    ).model_copy(update={"location": image.bounding_box})
                )
        return violations

    def _check_formula(self, formula: SemanticNode) -> List[PDFUAViolation]:
        description = formula.alt_text or formula.actual_text
        if not description:
            return [
                self._violation(
                    formula, "Formula lacks alternative text (Alt or ActualText required)"
                )
            ]
        if not description.strip():
            return [
                self._violation(formula, "Formula has alternative text that is whitespace-only")
            ]
        return []


__all__ = ["AltTextChecker"]
