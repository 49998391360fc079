from __future__ import annotations

import pytest
from pydantic import ValidationError

from schemas.internal.geometry import BoundingBox
from schemas.internal.text import TextBlock, TextChunk, TextColumn, TextLine, TextType


def _chunk(value: str, *, page: int = 0, x: float = 0, y: float = 0, **fields) -> TextChunk:
    return TextChunk(
        bounding_box=BoundingBox(page_index=page, x=x, y=y, width=10, height=12),
        value=value,
        **fields,
    )


def _block(*lines: str) -> TextBlock:
    return TextBlock.from_lines([TextLine.from_chunks([_chunk(line)]) for line in lines])


def test_text_chunk_style_flags() -> None:
    plain = _chunk("a")
    bold_italic = _chunk("b", font_weight=700, italic_angle=-12)
    slanted = _chunk("c", slant_degree=15)

    assert not plain.is_bold and not plain.is_italic
    assert bold_italic.is_bold and bold_italic.is_italic
    assert slanted.is_italic
    assert _chunk("d", font_weight=600).is_bold


@pytest.mark.parametrize(
    ("size", "weight", "expected"),
    [
        (12, 400, TextType.REGULAR),
        (18, 400, TextType.LARGE),
        (14, 700, TextType.LARGE),
        (14, 400, TextType.REGULAR),
    ],
)
def test_text_chunk_text_type(size: float, weight: float, expected: TextType) -> None:
    assert _chunk("x", font_size=size, font_weight=weight).text_type is expected


def test_text_chunk_rejects_out_of_range_colors() -> None:
    with pytest.raises(ValidationError):
        _chunk("x", text_color=(0.0, 0.0, 2.0))
    with pytest.raises(ValidationError):
        _chunk("x", background_color=(0.1, 0.2, 0.3, 0.4, 0.5))


def test_line_concatenates_chunks_and_unions_boxes() -> None:
    line = TextLine.from_chunks(
        [_chunk("Hello, ", x=0), _chunk("world", x=30), _chunk("!", page=1, x=500)],
        is_line_start=True,
    )

    assert line.text == "Hello, world!"
    assert line.chunk_count == 3
    assert line.is_line_start and not line.is_line_end
    # the chunk on another page does not stretch the box
    assert line.bounding_box == BoundingBox.from_corners(0, 0, 0, 40, 12)


def test_empty_aggregates_have_empty_text() -> None:
    line = TextLine.from_chunks([])

    assert line.text == ""
    assert line.is_empty
    assert line.bounding_box == BoundingBox(page_index=0, x=0, y=0, width=0, height=0)
    assert TextBlock.from_lines([]).text == ""
    assert TextColumn.from_blocks([]).is_empty


def test_is_empty_uses_derived_text() -> None:
    line = TextLine.from_chunks([_chunk(""), _chunk("")])

    assert line.chunk_count == 2
    assert line.is_empty
    assert TextBlock.from_lines([line]).is_empty


def test_column_text_joins_lines_and_blocks() -> None:
    column = TextColumn.from_blocks([_block("Line 1", "Line 2"), _block("Line 3")])

    assert column.text == "Line 1\nLine 2\n\nLine 3"
    assert column.block_count == 2
    assert column.total_line_count == 3
    assert column.total_chunk_count == 3
    assert [line.text for line in column.all_lines] == ["Line 1", "Line 2", "Line 3"]
    assert [chunk.value for chunk in column.all_chunks] == ["Line 1", "Line 2", "Line 3"]


def test_block_counts() -> None:
    block = TextBlock.from_lines(
        [TextLine.from_chunks([_chunk("a"), _chunk("b")]), TextLine.from_chunks([_chunk("c")])]
    )

    assert block.text == "ab\nc"
    assert block.line_count == 2
    assert block.total_chunk_count == 3
    assert [chunk.value for chunk in block.all_chunks] == ["a", "b", "c"]


def test_text_type_contrast_thresholds() -> None:
    assert TextType.REGULAR.minimum_contrast_ratio_aa == 4.5
    assert TextType.REGULAR.minimum_contrast_ratio_aaa == 7.0
    assert TextType.LARGE.minimum_contrast_ratio("AA") == 3.0
    assert TextType.LARGE.minimum_contrast_ratio("AAA") == 4.5
    assert TextType.LOGO.minimum_contrast_ratio("AAA") == 1.0


def test_text_type_meets_contrast() -> None:
    assert TextType.REGULAR.meets_contrast(4.5)
    assert not TextType.REGULAR.meets_contrast(4.49)
    assert not TextType.REGULAR.meets_contrast(5.0, "AAA")
    assert TextType.LARGE.meets_contrast(3.0)
    assert TextType.LOGO.meets_contrast(1.0, "AAA")
