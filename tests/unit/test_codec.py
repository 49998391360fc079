from __future__ import annotations

import json

import pytest

from schemas.codec import (
    dump_json,
    dump_payload,
    load_check_result,
    load_model,
    load_node,
)
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.geometry import BoundingBox, MultiBoundingBox, Point
from schemas.internal.nodes import ContentNode, FigureNode, ListKind, ListNode, TableNode
from schemas.internal.nontext import ImageChunk, LineArtChunk, LineChunk
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType
from schemas.internal.text import TextBlock, TextChunk, TextLine


def _box(page: int = 0) -> BoundingBox:
    return BoundingBox(page_index=page, x=1.5, y=2, width=30, height=40)


def _figure() -> FigureNode:
    image = ImageChunk(bounding_box=_box(), pixel_width=64, pixel_height=32, alt_text="Chart")
    art = LineArtChunk.from_lines([LineChunk.between(0, Point(x=0, y=0), Point(x=0, y=30))])
    return FigureNode(
        bounding_box=_box(),
        depth=2,
        image_chunks=(image,),
        line_art_chunks=(art,),
        error_codes=frozenset({SemanticErrorCode.FIGURE_MISSING_ALT_TEXT}),
    )


def test_payload_uses_camel_case_keys() -> None:
    payload = dump_payload(_box(3))

    assert payload == {"pageIndex": 3, "x": 1.5, "y": 2.0, "width": 30.0, "height": 40.0}


def test_node_type_serializes_as_tag_name() -> None:
    payload = dump_payload(ContentNode(type=SemanticType.TABLE_ROW))

    assert payload["type"] == "TR"
    assert payload["kind"] == "content"
    assert payload["errorCodes"] == []


def test_every_semantic_type_round_trips() -> None:
    for semantic_type in SemanticType:
        node = ContentNode(type=semantic_type)
        decoded = load_node(dump_json(node))
        assert decoded.type is semantic_type
        assert decoded == node


def test_figure_round_trip_preserves_content() -> None:
    figure = _figure()
    payload = dump_payload(figure)
    decoded = load_node(json.dumps(payload))

    assert payload["errorCodes"] == [1400]
    assert isinstance(decoded, FigureNode)
    assert decoded.id == figure.id
    assert decoded.type is SemanticType.FIGURE
    assert decoded.depth == 2
    assert decoded.image_count == 1
    assert decoded.line_art_count == 1
    assert decoded.error_codes == {SemanticErrorCode.FIGURE_MISSING_ALT_TEXT}
    assert decoded.image_chunks == figure.image_chunks
    assert decoded.line_art_chunks == figure.line_art_chunks


def test_tree_decodes_into_node_variants() -> None:
    chunk = TextChunk(bounding_box=_box(), value="Intro", background_color=(1.0, 1.0, 1.0))
    paragraph = ContentNode.paragraph(
        [TextBlock.from_lines([TextLine.from_chunks([chunk])])],
        attributes={"Lang": "en", "Tags": ["a", 1, True, None], "Weight": 0.5},
    )
    table = TableNode(summary="Totals", visual_border_x_coordinates=(0.0, 10.0))
    lst = ListNode(list_kind=ListKind.ORDERED_ALPHA_LOWER, start_number=3)
    document = ContentNode.document([paragraph, _figure(), table, lst])

    decoded = load_node(dump_json(document, indent=2))

    assert [type(child) for child in decoded.children] == [ContentNode, FigureNode, TableNode, ListNode]
    decoded_paragraph, _, decoded_table, decoded_list = decoded.children
    assert decoded_paragraph.text == "Intro"
    assert decoded_paragraph.attributes == paragraph.attributes
    assert decoded_table.summary == "Totals"
    assert decoded_table.visual_border_x_coordinates == (0.0, 10.0)
    assert decoded_list.list_kind is ListKind.ORDERED_ALPHA_LOWER
    assert decoded_list.start_number == 3
    assert dump_payload(decoded) == dump_payload(document)


def test_multi_bounding_box_round_trip() -> None:
    multi = MultiBoundingBox.of(_box(2), _box(0))

    decoded = load_model(MultiBoundingBox, dump_json(multi))

    assert decoded == multi
    assert [box.page_index for box in decoded.boxes] == [0, 2]


def test_check_result_round_trip() -> None:
    violation = PDFUAViolation(
        node_type=SemanticType.TABLE,
        description="Table has no header cells",
        severity=PDFUASeverity.ERROR,
        location=_box(),
    )
    result = PDFUACheckResult.failing(
        PDFUARequirement.TABLES_MUST_HAVE_HEADERS, [violation], context="1 of 1 nodes failed"
    )

    payload = dump_payload(result)
    decoded = load_check_result(dump_json(result))

    assert payload["requirement"] == "7.5"
    assert payload["violations"][0]["nodeType"] == "Table"
    assert decoded.requirement is PDFUARequirement.TABLES_MUST_HAVE_HEADERS
    assert not decoded.passed
    assert decoded.violations == (violation,)
    assert decoded.violations[0].location == _box()
    assert decoded.context == "1 of 1 nodes failed"


def test_load_node_rejects_malformed_json() -> None:
    with pytest.raises(ValueError, match="Invalid JSON payload"):
        load_node("{not json")


def test_load_node_rejects_non_objects() -> None:
    with pytest.raises(ValueError, match="must be an object"):
        load_node("[1, 2]")


def test_load_node_rejects_unknown_kind_and_type() -> None:
    with pytest.raises(ValueError, match="Invalid semantic node payload"):
        load_node({"kind": "sidebar", "type": "P"})
    with pytest.raises(ValueError, match="Invalid semantic node payload"):
        load_node({"kind": "content", "type": "Paragraph"})


def test_load_model_rejects_invalid_payload() -> None:
    with pytest.raises(ValueError, match="Invalid BoundingBox payload"):
        load_model(BoundingBox, {"pageIndex": -1, "x": 0, "y": 0, "width": 1, "height": 1})
