"""Styled text runs aggregated into lines, blocks and columns."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Literal, Optional, Sequence, Tuple

from pydantic import Field, field_validator

from schemas.internal.base import CoreModel
from schemas.internal.geometry import BoundingBox, Point

ContrastLevel = Literal["AA", "AAA"]
ColorComponents = Tuple[float, ...]

BLACK: ColorComponents = (0.0, 0.0, 0.0, 1.0)


class TextType(str, Enum):
    """Text class used to pick a WCAG contrast threshold."""

    REGULAR = "regular"
    LARGE = "large"
    LOGO = "logo"

    @property
    def minimum_contrast_ratio_aa(self) -> float:
        return _CONTRAST_THRESHOLDS[self][0]

    @property
    def minimum_contrast_ratio_aaa(self) -> float:
        return _CONTRAST_THRESHOLDS[self][1]

    def minimum_contrast_ratio(self, level: ContrastLevel = "AA") -> float:
        if level == "AAA":
            return self.minimum_contrast_ratio_aaa
        return self.minimum_contrast_ratio_aa

    def meets_contrast(self, ratio: float, level: ContrastLevel = "AA") -> bool:
        return ratio >= self.minimum_contrast_ratio(level)


# Logo text has no practical contrast requirement.
_CONTRAST_THRESHOLDS = {
    TextType.REGULAR: (4.5, 7.0),
    TextType.LARGE: (3.0, 4.5),
    TextType.LOGO: (1.0, 1.0),
}


def _check_color(value: Optional[ColorComponents]) -> Optional[ColorComponents]:
    if value is None:
        return None
    if not 1 <= len(value) <= 4:
        raise ValueError("color must have between 1 and 4 components")
    if any(component < 0 or component > 1 for component in value):
        raise ValueError("color components must be within [0, 1]")
    return value


class TextChunk(CoreModel):
    """One styled text run."""

    bounding_box: BoundingBox
    value: str
    font_name: str = ""
    font_size: float = Field(default=12.0, ge=0)
    font_weight: float = Field(default=400.0, ge=0)
    italic_angle: float = 0.0
    text_color: ColorComponents = BLACK
    background_color: Optional[ColorComponents] = None
    contrast_ratio: Optional[float] = Field(default=None, ge=1)
    is_underlined: bool = False
    baseline: float = 0.0
    slant_degree: float = 0.0
    symbol_positions: Tuple[Point, ...] = ()

    @field_validator("text_color", "background_color")
    @classmethod
    def _valid_color(cls, value: Optional[ColorComponents]) -> Optional[ColorComponents]:
        return _check_color(value)

    @property
    def page_index(self) -> int:
        return self.bounding_box.page_index

    @property
    def is_italic(self) -> bool:
        return abs(self.italic_angle) > 0 or self.slant_degree > 10

    @property
    def is_bold(self) -> bool:
        return self.font_weight >= 600

    @property
    def text_type(self) -> TextType:
        if self.font_size >= 18 or (self.font_size >= 14 and self.is_bold):
            return TextType.LARGE
        return TextType.REGULAR


def _union_of(boxes: Iterable[BoundingBox]) -> BoundingBox:
    """Union of boxes on the first box's page; boxes on other pages are skipped."""
    result: Optional[BoundingBox] = None
    for box in boxes:
        if result is None:
            result = box
            continue
        merged = result.union(box)
        if merged is not None:
            result = merged
    if result is None:
        return BoundingBox(page_index=0, x=0, y=0, width=0, height=0)
    return result


class TextLine(CoreModel):
    """An ordered run of chunks on one visual line."""

    bounding_box: BoundingBox
    chunks: Tuple[TextChunk, ...] = ()
    is_line_start: bool = False
    is_line_end: bool = False

    @classmethod
    def from_chunks(
        cls,
        chunks: Sequence[TextChunk],
        *,
        is_line_start: bool = False,
        is_line_end: bool = False,
    ) -> "TextLine":
        return cls(
            bounding_box=_union_of(chunk.bounding_box for chunk in chunks),
            chunks=tuple(chunks),
            is_line_start=is_line_start,
            is_line_end=is_line_end,
        )

    @property
    def text(self) -> str:
        return "".join(chunk.value for chunk in self.chunks)

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    @property
    def is_empty(self) -> bool:
        return not self.text


class TextBlock(CoreModel):
    """Consecutive lines forming a paragraph within a column."""

    bounding_box: BoundingBox
    lines: Tuple[TextLine, ...] = ()

    @classmethod
    def from_lines(cls, lines: Sequence[TextLine]) -> "TextBlock":
        return cls(
            bounding_box=_union_of(line.bounding_box for line in lines),
            lines=tuple(lines),
        )

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def total_chunk_count(self) -> int:
        return sum(line.chunk_count for line in self.lines)

    @property
    def all_chunks(self) -> List[TextChunk]:
        return [chunk for line in self.lines for chunk in line.chunks]

    @property
    def is_empty(self) -> bool:
        return not self.text


class TextColumn(CoreModel):
    """Blocks stacked in one column; block texts are separated by a blank line."""

    bounding_box: BoundingBox
    blocks: Tuple[TextBlock, ...] = ()

    @classmethod
    def from_blocks(cls, blocks: Sequence[TextBlock]) -> "TextColumn":
        return cls(
            bounding_box=_union_of(block.bounding_box for block in blocks),
            blocks=tuple(blocks),
        )

    @property
    def text(self) -> str:
        return "\n\n".join(block.text for block in self.blocks)

    @property
    def block_count(self) -> int:
        return len(self.blocks)

    @property
    def total_line_count(self) -> int:
        return sum(block.line_count for block in self.blocks)

    @property
    def total_chunk_count(self) -> int:
        return sum(block.total_chunk_count for block in self.blocks)

    @property
    def all_lines(self) -> List[TextLine]:
        return [line for block in self.blocks for line in block.lines]

    @property
    def all_chunks(self) -> List[TextChunk]:
        return [chunk for block in self.blocks for chunk in block.all_chunks]

    @property
    def is_empty(self) -> bool:
        return not self.text


class ContrastAnalysis(CoreModel):
    """Contrast measurement of a text chunk against its background."""

    foreground_color: ColorComponents
    background_color: ColorComponents
    ratio: float
    text_type: TextType
    level: ContrastLevel
    passes: bool

    @property
    def required_ratio(self) -> float:
        return self.text_type.minimum_contrast_ratio(self.level)

    @property
    def margin(self) -> float:
        return self.ratio - self.required_ratio


__all__ = [
    "BLACK",
    "ColorComponents",
    "ContrastAnalysis",
    "ContrastLevel",
    "TextBlock",
    "TextChunk",
    "TextColumn",
    "TextLine",
    "TextType",
]
