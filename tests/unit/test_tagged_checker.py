from __future__ import annotations

from checkers.tagged import TaggedPDFChecker
from schemas.internal.checks import PDFUARequirement, PDFUASeverity
from schemas.internal.geometry import BoundingBox
from schemas.internal.nodes import ContentNode
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType


def _box() -> BoundingBox:
    return BoundingBox(page_index=0, x=72, y=600, width=400, height=40)


def _paragraph(**fields) -> ContentNode:
    fields.setdefault("bounding_box", _box())
    return ContentNode(type=SemanticType.PARAGRAPH, depth=1, **fields)


def test_tagged_document_passes() -> None:
    document = ContentNode.document([ContentNode.heading(1, bounding_box=_box()), _paragraph()])

    result = TaggedPDFChecker().check(document)

    assert result.requirement is PDFUARequirement.DOCUMENT_MUST_BE_TAGGED
    assert result.passed
    assert result.violations == ()
    assert result.context == "Document is properly tagged with 3 structure element(s)"


def test_root_must_be_document() -> None:
    root = ContentNode(type=SemanticType.SECTION, children=(_paragraph(),))

    result = TaggedPDFChecker().check(root)

    assert not result.passed
    assert result.violations[0].description == (
        "Document root must be of type 'Document', found 'Sect'"
    )
    assert TaggedPDFChecker.lenient().check(root).passed


def test_empty_document_fails() -> None:
    document = ContentNode.document()

    result = TaggedPDFChecker().check(document)

    assert not result.passed
    descriptions = [violation.description for violation in result.violations]
    assert "Document structure tree is empty - no tagged content found" in descriptions
    assert "Document missing required structure elements (no content blocks found)" in descriptions


def test_minimum_structure_elements() -> None:
    document = ContentNode.document([_paragraph()])

    result = TaggedPDFChecker(minimum_structure_elements=5).check(document)

    assert not result.passed
    assert result.errors[0].description == (
        "Document has only 2 structure element(s), minimum required is 5"
    )


def test_unlocated_leaf_is_a_warning() -> None:
    unplaced = _paragraph(bounding_box=None)
    document = ContentNode.document([unplaced])

    result = TaggedPDFChecker().check(document)

    assert result.passed
    assert len(result.warnings) == 1
    assert result.warnings[0].node_id == unplaced.id
    assert result.warnings[0].description == "Structure element 'P' has no content and no location"


def test_artifacts_and_empty_elements_are_flagged_when_required() -> None:
    artifact = ContentNode(type=SemanticType.ARTIFACT, bounding_box=_box(), depth=1)
    empty = _paragraph(error_codes=frozenset({SemanticErrorCode.EMPTY_ELEMENT}))
    document = ContentNode.document([_paragraph(), artifact, empty])

    strict = TaggedPDFChecker.strict().check(document)
    basic = TaggedPDFChecker.basic().check(document)

    assert strict.passed
    assert [violation.node_id for violation in strict.violations] == [artifact.id, empty.id]
    assert all(violation.severity is PDFUASeverity.WARNING for violation in strict.violations)
    assert basic.violations == ()


def test_document_needs_a_content_block() -> None:
    span_only = ContentNode.document([ContentNode.span(bounding_box=_box())])

    result = TaggedPDFChecker().check(span_only)

    assert not result.passed
    assert result.context == "Found 1 tagging violation(s)"
