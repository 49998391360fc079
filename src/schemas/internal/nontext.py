"""Non-text content: raster images, vector line art and their line segments."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from pydantic import Field, field_validator

from schemas.internal.base import CoreModel
from schemas.internal.geometry import BoundingBox, Point
from schemas.internal.text import BLACK, ColorComponents


def _first_non_empty(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value:
            return value
    return None


class LineChunk(CoreModel):
    """A single stroked line segment."""

    bounding_box: BoundingBox
    start_point: Point
    end_point: Point
    line_width: float = Field(default=1.0, ge=0)
    stroke_color: ColorComponents = BLACK

    @classmethod
    def between(
        cls,
        page_index: int,
        start: Point,
        end: Point,
        *,
        line_width: float = 1.0,
        stroke_color: ColorComponents = BLACK,
    ) -> "LineChunk":
        """Build a segment whose box covers both endpoints plus half the stroke."""
        half = line_width / 2.0
        box = BoundingBox.from_corners(
            page_index,
            min(start.x, end.x) - half,
            min(start.y, end.y) - half,
            max(start.x, end.x) + half,
            max(start.y, end.y) + half,
        )
        return cls(
            bounding_box=box,
            start_point=start,
            end_point=end,
            line_width=line_width,
            stroke_color=stroke_color,
        )

    @property
    def page_index(self) -> int:
        return self.bounding_box.page_index

    @property
    def length(self) -> float:
        return math.hypot(
            self.end_point.x - self.start_point.x,
            self.end_point.y - self.start_point.y,
        )

    @property
    def is_horizontal(self) -> bool:
        length = self.length
        if length == 0:
            return True
        return abs(self.end_point.y - self.start_point.y) <= max(length * 0.01, 0.5)

    @property
    def is_vertical(self) -> bool:
        length = self.length
        if length == 0:
            return True
        return abs(self.end_point.x - self.start_point.x) <= max(length * 0.01, 0.5)

    @property
    def is_axis_aligned(self) -> bool:
        return self.is_horizontal or self.is_vertical

    @property
    def angle(self) -> float:
        """Direction in radians, measured from the positive x axis."""
        return math.atan2(
            self.end_point.y - self.start_point.y,
            self.end_point.x - self.start_point.x,
        )

    @property
    def midpoint(self) -> Point:
        return Point(
            x=(self.start_point.x + self.end_point.x) / 2.0,
            y=(self.start_point.y + self.end_point.y) / 2.0,
        )

    def distance_to(self, point: Point) -> float:
        """Shortest distance from point to the segment."""
        dx = self.end_point.x - self.start_point.x
        dy = self.end_point.y - self.start_point.y
        length_squared = dx * dx + dy * dy
        if length_squared == 0:
            return math.hypot(point.x - self.start_point.x, point.y - self.start_point.y)
        t = ((point.x - self.start_point.x) * dx + (point.y - self.start_point.y) * dy) / length_squared
        t = max(0.0, min(1.0, t))
        closest_x = self.start_point.x + t * dx
        closest_y = self.start_point.y + t * dy
        return math.hypot(point.x - closest_x, point.y - closest_y)

    def perpendicular_distance_to(self, point: Point) -> float:
        """Distance from point to the infinite line through the segment."""
        dx = self.end_point.x - self.start_point.x
        dy = self.end_point.y - self.start_point.y
        length_squared = dx * dx + dy * dy
        if length_squared == 0:
            return math.hypot(point.x - self.start_point.x, point.y - self.start_point.y)
        cross = abs((point.x - self.start_point.x) * dy - (point.y - self.start_point.y) * dx)
        return cross / math.sqrt(length_squared)

    def is_collinear_with(self, other: LineChunk, tolerance: float = 1.0) -> bool:
        if self.page_index != other.page_index:
            return False
        distances = (
            other.perpendicular_distance_to(self.start_point),
            other.perpendicular_distance_to(self.end_point),
            self.perpendicular_distance_to(other.start_point),
            self.perpendicular_distance_to(other.end_point),
        )
        return all(distance <= tolerance for distance in distances)


class LineArtChunk(CoreModel):
    """Vector artwork made of line segments."""

    bounding_box: BoundingBox
    lines: Tuple[LineChunk, ...] = ()
    alt_text: Optional[str] = None
    actual_text: Optional[str] = None

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[LineChunk],
        *,
        alt_text: Optional[str] = None,
        actual_text: Optional[str] = None,
    ) -> "LineArtChunk":
        """Build line art whose box is the union of its segments' boxes."""
        box: Optional[BoundingBox] = None
        for line in lines:
            if box is None:
                box = line.bounding_box
                continue
            box = box.union(line.bounding_box) or box
        if box is None:
            box = BoundingBox(page_index=0, x=0, y=0, width=0, height=0)
        return cls(
            bounding_box=box,
            lines=tuple(lines),
            alt_text=alt_text,
            actual_text=actual_text,
        )

    @property
    def has_alternative_text(self) -> bool:
        return bool(self.alt_text) or bool(self.actual_text)

    @property
    def text_description(self) -> Optional[str]:
        return _first_non_empty(self.alt_text, self.actual_text)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_length(self) -> float:
        return sum((line.length for line in self.lines), 0.0)

    @property
    def horizontal_lines(self) -> List[LineChunk]:
        return [line for line in self.lines if line.is_horizontal]

    @property
    def vertical_lines(self) -> List[LineChunk]:
        return [line for line in self.lines if line.is_vertical]

    @property
    def appears_grid_like(self) -> bool:
        """At least two horizontal and two vertical segments, e.g. table rules."""
        return len(self.horizontal_lines) >= 2 and len(self.vertical_lines) >= 2

    @property
    def area(self) -> float:
        return self.bounding_box.area


class ImageChunk(CoreModel):
    """A raster image placed on a page."""

    bounding_box: BoundingBox
    pixel_width: int = Field(ge=0)
    pixel_height: int = Field(ge=0)
    bits_per_component: int = Field(default=8, ge=1)
    color_space_name: str = "DeviceRGB"
    number_of_components: int = Field(default=3, ge=1)
    alt_text: Optional[str] = None
    actual_text: Optional[str] = None

    @field_validator("color_space_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.lstrip("/")

    @property
    def has_alternative_text(self) -> bool:
        return bool(self.alt_text) or bool(self.actual_text)

    @property
    def text_description(self) -> Optional[str]:
        return _first_non_empty(self.alt_text, self.actual_text)

    @property
    def pixel_count(self) -> int:
        return self.pixel_width * self.pixel_height

    @property
    def is_grayscale(self) -> bool:
        return self.number_of_components == 1

    @property
    def aspect_ratio(self) -> Optional[float]:
        if self.pixel_height <= 0:
            return None
        return self.pixel_width / self.pixel_height

    @property
    def horizontal_resolution(self) -> Optional[float]:
        """Pixels per page unit along x."""
        if self.bounding_box.width <= 0:
            return None
        return self.pixel_width / self.bounding_box.width

    @property
    def vertical_resolution(self) -> Optional[float]:
        if self.bounding_box.height <= 0:
            return None
        return self.pixel_height / self.bounding_box.height


__all__ = ["ImageChunk", "LineArtChunk", "LineChunk"]
