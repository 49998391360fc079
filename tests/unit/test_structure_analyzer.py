from __future__ import annotations

import pytest

from checkers.structure import StructureTreeAnalyzer, is_valid_child_type
from schemas.internal.geometry import BoundingBox
from schemas.internal.nodes import ContentNode, FigureNode, SemanticNode
from schemas.internal.nontext import ImageChunk
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType
from schemas.internal.text import TextBlock, TextChunk, TextLine


def _box() -> BoundingBox:
    return BoundingBox(page_index=2, x=0, y=0, width=100, height=20)


def _text(text: str) -> TextBlock:
    return TextBlock.from_lines([TextLine.from_chunks([TextChunk(bounding_box=_box(), value=text)])])


def _node(node_type: SemanticType, *children: SemanticNode, depth: int = 1, **fields) -> ContentNode:
    return ContentNode(type=node_type, children=children, depth=depth, **fields)


def _list_item(depth: int = 2) -> ContentNode:
    return _node(
        SemanticType.LIST_ITEM,
        _node(SemanticType.LIST_LABEL, attributes={"ActualText": "1."}, depth=depth + 1),
        _node(SemanticType.LIST_BODY, text_blocks=(_text("Body"),), depth=depth + 1),
        depth=depth,
    )


def test_well_formed_tree_is_valid() -> None:
    document = ContentNode.document(
        [
            ContentNode.paragraph([_text("Intro")]),
            _node(SemanticType.LIST, _list_item()),
            FigureNode.from_image(
                ImageChunk(bounding_box=_box(), pixel_width=4, pixel_height=4),
                attributes={"Alt": "Chart"},
            ),
        ]
    )

    result = StructureTreeAnalyzer.all().analyze(document)

    assert result.is_valid
    assert result.total_node_count == 7
    assert result.max_depth == 3


def test_unexpected_child_is_reported_on_the_child() -> None:
    stray = ContentNode.paragraph([_text("Loose")], depth=2)
    document = ContentNode.document([_node(SemanticType.LIST, stray)])

    result = StructureTreeAnalyzer.nesting_only().analyze(document)

    assert [(error.code, error.node_id) for error in result.errors] == [
        (SemanticErrorCode.UNEXPECTED_CHILD, stray.id)
    ]
    assert result.errors[0].message == "Invalid child type 'P' for parent 'L'"
    assert result.errors[0].context == {"parentType": "L", "childType": "P"}


def test_list_parts_may_not_sit_under_the_document() -> None:
    assert not is_valid_child_type(SemanticType.LIST_BODY, SemanticType.DOCUMENT)
    assert is_valid_child_type(SemanticType.TABLE, SemanticType.DOCUMENT)
    assert is_valid_child_type(SemanticType.TABLE_ROW, SemanticType.TABLE_BODY)
    assert not is_valid_child_type(SemanticType.TABLE_CELL, SemanticType.TABLE)
    assert is_valid_child_type(SemanticType.SPAN, SemanticType.PARAGRAPH)


def test_missing_required_children() -> None:
    item = _node(SemanticType.LIST_ITEM, _node(SemanticType.LIST_LABEL, depth=3), depth=2)
    table = _node(SemanticType.TABLE)
    row = _node(SemanticType.TABLE_ROW, depth=2)
    document = ContentNode.document(
        [_node(SemanticType.LIST, item), table, _node(SemanticType.TABLE, row)]
    )

    result = StructureTreeAnalyzer(
        validate_nesting=False, check_empty_elements=False, validate_attributes=False
    ).analyze(document)

    assert [error.message for error in result.errors] == [
        "List item missing required LBody child",
        "Table has no rows",
        "Table row has no cells",
    ]
    assert result.error_code_counts == {SemanticErrorCode.MISSING_REQUIRED_CHILD: 3}


def test_empty_elements_skip_containers() -> None:
    empty_span = _node(SemanticType.SPAN, depth=2)
    document = ContentNode.document(
        [
            _node(SemanticType.SECTION),
            _node(SemanticType.PARAGRAPH, empty_span),
            ContentNode.paragraph([_text("Filled")]),
        ]
    )

    result = StructureTreeAnalyzer(validate_nesting=False).analyze(document)

    assert [(error.code, error.node_id) for error in result.errors] == [
        (SemanticErrorCode.EMPTY_ELEMENT, empty_span.id)
    ]


def test_attribute_errors_for_figures_and_links() -> None:
    figure = FigureNode.from_image(ImageChunk(bounding_box=_box(), pixel_width=4, pixel_height=4))
    link = _node(SemanticType.LINK)
    labelled = _node(SemanticType.LINK, attributes={"Alt": "Home page"})
    document = ContentNode.document([figure, link, labelled])

    result = StructureTreeAnalyzer.attributes_only().analyze(document)

    assert [(error.node_id, error.message) for error in result.errors] == [
        (figure.id, "Figure missing Alt or ActualText attribute"),
        (link.id, "Link has no content or Alt text"),
    ]
    assert result.errors[0].page_index == 2
    assert result.errors_by_code.keys() == {SemanticErrorCode.MISSING_ATTRIBUTE}


def test_reused_node_is_a_duplicate_id() -> None:
    shared = ContentNode.paragraph([_text("Twice")])
    document = ContentNode.document([shared, shared])

    result = StructureTreeAnalyzer().analyze(document)

    assert [error.code for error in result.errors] == [SemanticErrorCode.DUPLICATE_ID]
    assert result.total_node_count == 3


def test_depth_limit() -> None:
    deep = _node(SemanticType.SPAN, text_blocks=(_text("Deep"),), depth=3)
    document = ContentNode.document(
        [_node(SemanticType.DIV, _node(SemanticType.PARAGRAPH, deep, depth=2))]
    )

    result = StructureTreeAnalyzer(max_depth=2).analyze(document)

    assert [error.message for error in result.errors] == ["Node exceeds maximum depth of 2"]
    assert result.errors[0].code is SemanticErrorCode.INVALID_NESTING
    assert result.error_code_count == 1
    assert StructureTreeAnalyzer().analyze(document).is_valid


def test_negative_depth_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        StructureTreeAnalyzer(max_depth=-1)
