from __future__ import annotations

import pytest

from checkers.reading_order import ReadingOrderChecker, detect_columns, positioned_nodes
from schemas.internal.checks import PDFUARequirement, PDFUASeverity
from schemas.internal.geometry import BoundingBox
from schemas.internal.nodes import ContentNode
from schemas.internal.semantic_types import SemanticType
from schemas.internal.structure import ReadingDirection, ReadingOrderIssueType


def _box(x: float = 72, y: float = 0, w: float = 400, h: float = 20, page: int = 0) -> BoundingBox:
    return BoundingBox(page_index=page, x=x, y=y, width=w, height=h)


def _para(**box) -> ContentNode:
    return ContentNode.paragraph(bounding_box=_box(**box))


def test_top_to_bottom_flow_is_valid() -> None:
    document = ContentNode.document([_para(y=700), _para(y=650), _para(y=600)])

    result = ReadingOrderChecker().validate(document)

    assert result.is_valid
    assert result.total_node_count == 3
    assert result.page_count == 1


def test_content_above_its_predecessor_is_out_of_order() -> None:
    low, high = _para(y=100), _para(y=600)

    result = ReadingOrderChecker().validate(ContentNode.document([low, high]))

    assert [issue.type for issue in result.issues] == [ReadingOrderIssueType.OUT_OF_ORDER]
    issue = result.issues[0]
    assert issue.node_id == low.id
    assert issue.next_node_id == high.id
    assert issue.severity is PDFUASeverity.ERROR
    assert issue.message == "Content appears out of vertical order"
    assert issue.context["verticalGap"] == "480.00"


def test_vertical_tolerance_absorbs_small_rises() -> None:
    document = ContentNode.document([_para(y=100), _para(y=123)])

    assert ReadingOrderChecker().validate(document).is_valid
    assert not ReadingOrderChecker.strict().validate(document).is_valid


def test_same_line_read_backwards_is_a_warning() -> None:
    right = _para(x=300, y=500, w=100)
    left = _para(x=72, y=500, w=100)

    result = ReadingOrderChecker().validate(ContentNode.document([right, left]))

    assert [issue.type for issue in result.issues] == [ReadingOrderIssueType.REVERSE_DIRECTION]
    assert result.issues[0].context == {
        "horizontalDistance": "-328.00",
        "readingDirection": "leftToRight",
    }
    assert result.warning_count == 1
    assert result.error_count == 0


def test_right_to_left_accepts_leftward_flow() -> None:
    right = _para(x=300, y=500, w=100)
    left = _para(x=72, y=500, w=100)
    document = ContentNode.document([right, left])

    checker = ReadingOrderChecker.right_to_left()

    assert checker.direction is ReadingDirection.RIGHT_TO_LEFT
    assert checker.validate(document).is_valid


def test_overlapping_content_is_reported() -> None:
    document = ContentNode.document([_para(y=500, h=40), _para(y=480, h=40)])

    result = ReadingOrderChecker().validate(document)
    assert [issue.type for issue in result.issues] == [ReadingOrderIssueType.OVERLAPPING]
    assert result.issues[0].context == {"overlapPercentage": "50.0%"}

    assert ReadingOrderChecker.lenient().validate(document).is_valid


def test_two_columns_read_down_then_across() -> None:
    document = ContentNode.document(
        [
            _para(x=72, y=700, w=200),
            _para(x=72, y=650, w=200),
            _para(x=320, y=700, w=200),
            _para(x=320, y=650, w=200),
        ]
    )

    assert ReadingOrderChecker().validate(document).is_valid


def test_backward_column_jump_is_a_warning() -> None:
    document = ContentNode.document(
        [
            _para(x=320, y=700, w=200),
            _para(x=72, y=650, w=200),
            _para(x=72, y=600, w=200),
        ]
    )

    result = ReadingOrderChecker().validate(document)

    assert [issue.type for issue in result.issues] == [ReadingOrderIssueType.COLUMN_JUMP]
    assert result.issues[0].context == {"fromColumn": "1", "toColumn": "0"}
    assert ReadingOrderChecker(validate_columns=False).validate(document).is_valid


def test_pages_are_validated_separately() -> None:
    document = ContentNode.document([_para(y=100, page=0), _para(y=700, page=1)])

    result = ReadingOrderChecker().validate(document)

    assert result.is_valid
    assert result.page_count == 2


def test_containers_are_represented_by_their_content() -> None:
    first, second = _para(y=700), _para(y=650)
    section = ContentNode(
        type=SemanticType.SECTION,
        bounding_box=_box(y=640, h=100),
        children=(first, second),
        depth=1,
    )
    unpositioned = ContentNode.paragraph()
    document = ContentNode.document([section, unpositioned])

    assert [node for node, _ in positioned_nodes(document)] == [first, second]
    assert ReadingOrderChecker().validate(document).is_valid


def test_detect_columns_splits_on_wide_gaps() -> None:
    boxes = [_box(x=72), _box(x=80), _box(x=300), _box(x=560)]

    assert detect_columns(boxes, gap=50) == [72, 300, 560]


def test_check_reports_errors_on_the_earlier_node() -> None:
    low, high = _para(y=100), _para(y=600)

    result = ReadingOrderChecker().check(ContentNode.document([low, high]))

    assert result.requirement is PDFUARequirement.LOGICAL_READING_ORDER
    assert not result.passed
    assert result.context == "Found 1 reading order issue(s)"
    assert result.violations[0].node_id == low.id
    assert result.violations[0].location == low.bounding_box


@pytest.mark.parametrize(
    "kwargs",
    [{"vertical_tolerance": -1}, {"overlap_threshold": 1.5}, {"column_gap": 0}],
)
def test_invalid_options_are_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        ReadingOrderChecker(**kwargs)
