"""Page-anchored rectangles and multi-page regions."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple, Union

from pydantic import Field, field_validator, model_validator

from schemas.internal.base import CoreModel


class Point(CoreModel):
    """A point in page coordinate space."""

    x: float
    y: float


class BoundingBox(CoreModel):
    """An axis-aligned rectangle tied to a page index.

    Negative sizes are standardized on construction, so ``x``/``y`` is always
    the bottom-left corner and ``width``/``height`` are never negative.
    """

    page_index: int = Field(ge=0)
    x: float
    y: float
    width: float
    height: float

    @model_validator(mode="before")
    @classmethod
    def _standardize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        width = data.get("width")
        if _is_number(width) and width < 0 and _is_number(data.get("x")):
            data["x"] = data["x"] + width
            data["width"] = -width
        height = data.get("height")
        if _is_number(height) and height < 0 and _is_number(data.get("y")):
            data["y"] = data["y"] + height
            data["height"] = -height
        return data

    @classmethod
    def from_corners(
        cls,
        page_index: int,
        left_x: float,
        bottom_y: float,
        right_x: float,
        top_y: float,
    ) -> "BoundingBox":
        return cls(
            page_index=page_index,
            x=left_x,
            y=bottom_y,
            width=right_x - left_x,
            height=top_y - bottom_y,
        )

    @property
    def left_x(self) -> float:
        return self.x

    @property
    def bottom_y(self) -> float:
        return self.y

    @property
    def right_x(self) -> float:
        return self.x + self.width

    @property
    def top_y(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def union(self, other: BoundingBox) -> Optional[BoundingBox]:
        """Smallest box covering both, or None when the pages differ."""
        if self.page_index != other.page_index:
            return None
        return BoundingBox.from_corners(
            self.page_index,
            min(self.left_x, other.left_x),
            min(self.bottom_y, other.bottom_y),
            max(self.right_x, other.right_x),
            max(self.top_y, other.top_y),
        )

    def intersection(self, other: BoundingBox) -> Optional[BoundingBox]:
        if not self.intersects(other):
            return None
        return BoundingBox.from_corners(
            self.page_index,
            max(self.left_x, other.left_x),
            max(self.bottom_y, other.bottom_y),
            min(self.right_x, other.right_x),
            min(self.top_y, other.top_y),
        )

    def intersects(self, other: BoundingBox) -> bool:
        """Overlap test; boxes that only share an edge do not intersect."""
        if self.page_index != other.page_index:
            return False
        return (
            self.left_x < other.right_x
            and other.left_x < self.right_x
            and self.bottom_y < other.top_y
            and other.bottom_y < self.top_y
        )

    def contains(self, other: BoundingBox) -> bool:
        if self.page_index != other.page_index:
            return False
        return (
            self.left_x <= other.left_x
            and self.bottom_y <= other.bottom_y
            and other.right_x <= self.right_x
            and other.top_y <= self.top_y
        )

    def contains_point(self, point: Point) -> bool:
        return (
            self.left_x <= point.x < self.right_x
            and self.bottom_y <= point.y < self.top_y
        )

    def overlap_percentage(self, other: BoundingBox) -> float:
        """Intersection area as a fraction of the smaller box's area."""
        overlap = self.intersection(other)
        if overlap is None:
            return 0.0
        smaller = min(self.area, other.area)
        if smaller <= 0:
            return 0.0
        return overlap.area / smaller

    def inset_by(self, dx: float, dy: float) -> BoundingBox:
        """Shrink each side by dx/dy (grow when negative); collapses at the center."""
        center = self.center
        width = max(self.width - 2 * dx, 0.0)
        height = max(self.height - 2 * dy, 0.0)
        return BoundingBox(
            page_index=self.page_index,
            x=center.x - width / 2,
            y=center.y - height / 2,
            width=width,
            height=height,
        )


BoxOrBoxes = Union[BoundingBox, Iterable[BoundingBox]]


class MultiBoundingBox(CoreModel):
    """Boxes spanning one or more pages, kept in stable page order."""

    boxes: Tuple[BoundingBox, ...] = ()

    @field_validator("boxes")
    @classmethod
    def _sort_by_page(cls, value: Tuple[BoundingBox, ...]) -> Tuple[BoundingBox, ...]:
        return tuple(sorted(value, key=lambda box: box.page_index))

    @classmethod
    def of(cls, *boxes: BoundingBox) -> "MultiBoundingBox":
        return cls(boxes=boxes)

    @property
    def count(self) -> int:
        return len(self.boxes)

    @property
    def is_empty(self) -> bool:
        return not self.boxes

    @property
    def first(self) -> Optional[BoundingBox]:
        return self.boxes[0] if self.boxes else None

    @property
    def last(self) -> Optional[BoundingBox]:
        return self.boxes[-1] if self.boxes else None

    @property
    def page_indices(self) -> Tuple[int, ...]:
        return tuple(sorted({box.page_index for box in self.boxes}))

    @property
    def page_count(self) -> int:
        return len(self.page_indices)

    @property
    def is_multi_page(self) -> bool:
        return self.page_count > 1

    @property
    def total_area(self) -> float:
        """Sum of the box areas; overlapping boxes count twice."""
        return sum((box.area for box in self.boxes), 0.0)

    def boxes_on_page(self, page_index: int) -> List[BoundingBox]:
        return [box for box in self.boxes if box.page_index == page_index]

    def union_box(self, page_index: int) -> Optional[BoundingBox]:
        on_page = self.boxes_on_page(page_index)
        if not on_page:
            return None
        result = on_page[0]
        for box in on_page[1:]:
            merged = result.union(box)
            if merged is not None:
                result = merged
        return result

    def filtered_by_page(self, page_index: int) -> MultiBoundingBox:
        return MultiBoundingBox(boxes=tuple(self.boxes_on_page(page_index)))

    def adding(self, boxes: BoxOrBoxes) -> MultiBoundingBox:
        """Return a new collection with one box or a sequence of boxes appended."""
        if isinstance(boxes, BoundingBox):
            extra: Tuple[BoundingBox, ...] = (boxes,)
        else:
            extra = tuple(boxes)
        return MultiBoundingBox(boxes=self.boxes + extra)

    def merged(self, other: MultiBoundingBox) -> MultiBoundingBox:
        return MultiBoundingBox(boxes=self.boxes + other.boxes)

    def intersects(self, box: BoundingBox) -> bool:
        return any(candidate.intersects(box) for candidate in self.boxes)

    def contains(self, box: BoundingBox) -> bool:
        return any(candidate.contains(box) for candidate in self.boxes)

    def contains_point(self, point: Point, page_index: int) -> bool:
        return any(box.contains_point(point) for box in self.boxes_on_page(page_index))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["BoundingBox", "BoxOrBoxes", "MultiBoundingBox", "Point"]
