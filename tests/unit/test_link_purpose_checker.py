from __future__ import annotations

import pytest

from checkers.links import LinkPurposeChecker
from schemas.internal.geometry import BoundingBox
from schemas.internal.nodes import ContentNode
from schemas.internal.semantic_types import SemanticType
from schemas.internal.text import TextBlock, TextChunk, TextLine
from schemas.internal.wcag import ViolationSeverity, WCAGSuccessCriterion


def _span(text: str) -> ContentNode:
    box = BoundingBox(page_index=0, x=0, y=0, width=80, height=12)
    block = TextBlock.from_lines([TextLine.from_chunks([TextChunk(bounding_box=box, value=text)])])
    return ContentNode.span([block])


def _link(alt: str | None = None, *children: ContentNode) -> ContentNode:
    attributes = {"Alt": alt} if alt is not None else {}
    return ContentNode(type=SemanticType.LINK, attributes=attributes, children=children, depth=1)


def test_descriptive_link_passes() -> None:
    result = LinkPurposeChecker().check(_link("Download the 2024 annual report"))

    assert result.criterion is WCAGSuccessCriterion.LINK_PURPOSE
    assert result.passed
    assert result.context == "Link has clear purpose"


def test_link_text_comes_from_content() -> None:
    link = _link(None, _span("Pricing"), _span("details"))

    assert LinkPurposeChecker.strict().check(link).passed


def test_non_links_are_ignored() -> None:
    assert LinkPurposeChecker().check(ContentNode.paragraph()).passed


def test_empty_link_is_critical() -> None:
    result = LinkPurposeChecker().check(_link())

    assert [(v.description, v.severity) for v in result.violations] == [
        ("Link has no text content or alternative text", ViolationSeverity.CRITICAL)
    ]


def test_whitespace_link_text() -> None:
    result = LinkPurposeChecker().check(_link("   "))

    assert [v.description for v in result.violations] == [
        "Link text is whitespace-only",
        "Link text contains only punctuation or special characters",
    ]


def test_short_link_text() -> None:
    result = LinkPurposeChecker.strict().check(_link("Go!"))

    assert [v.description for v in result.violations] == [
        "Link text is too short (3 character(s), minimum: 5)",
    ]
    assert result.violations[0].severity is ViolationSeverity.SERIOUS


@pytest.mark.parametrize("text", ["Click here", "READ MORE", " here "])
def test_generic_text_is_serious(text: str) -> None:
    result = LinkPurposeChecker().check(_link(text))

    assert [v.severity for v in result.violations] == [ViolationSeverity.SERIOUS]
    assert "does not describe the destination" in result.violations[0].description


def test_lenient_allows_generic_text() -> None:
    assert LinkPurposeChecker.lenient().check(_link("click here")).passed


def test_custom_patterns_replace_defaults() -> None:
    checker = LinkPurposeChecker.with_custom_patterns(["mehr"])

    assert not checker.check(_link("Mehr")).passed
    assert checker.check(_link("click here")).passed


def test_punctuation_only_text() -> None:
    result = LinkPurposeChecker(check_for_generic_text=False).check(_link("→"))

    assert [v.description for v in result.violations] == [
        "Link text contains only punctuation or special characters"
    ]


def test_batch_checks_links_only() -> None:
    nodes = [ContentNode.paragraph(), _link("Contact the press office"), _link()]

    result = LinkPurposeChecker().check_nodes(nodes)

    assert not result.passed
    assert result.context == "Found 1 violation(s) in 2 link(s)"


def test_distinct_text_is_required_in_strict_batches() -> None:
    first, second = _link("Annual report"), _link("Annual report")
    other = _link("Press releases")

    result = LinkPurposeChecker.strict().check_nodes([first, second, other])

    assert [v.node_id for v in result.violations] == [first.id, second.id]
    assert {v.severity for v in result.violations} == {ViolationSeverity.MODERATE}
    assert result.violations[0].description == (
        "Multiple links (2) share the same text 'Annual report' - "
        "ensure they lead to the same destination or have distinct context"
    )
    assert LinkPurposeChecker().check_nodes([first, second]).passed


def test_batch_without_links_passes() -> None:
    result = LinkPurposeChecker().check_nodes([ContentNode.paragraph()])

    assert result.passed
    assert result.context == "Checked 0 link(s)"


def test_minimum_length_must_be_positive() -> None:
    with pytest.raises(ValueError):
        LinkPurposeChecker(minimum_link_text_length=0)
