"""Semantic structure tree: content, figure, table and list nodes.

Nodes are immutable. Equality and hashing use the ``id`` token only, so two
nodes with identical content but different ids are unequal.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Literal,
    Mapping,
    Optional,
    Tuple,
    Union,
)
from uuid import UUID, uuid4

from pydantic import (
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
    model_validator,
)

from schemas.internal.base import CoreModel
from schemas.internal.geometry import BoundingBox
from schemas.internal.nontext import ImageChunk, LineArtChunk
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType
from schemas.internal.text import ColorComponents, TextBlock, TextType

ScalarAttribute = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]
AttributeValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, List[ScalarAttribute], None]
Attributes = Dict[str, AttributeValue]

_PREVIEW_LENGTH = 50


class SemanticNode(CoreModel):
    """Fields and derived queries shared by every node variant.

    Abstract: build a ``ContentNode``, ``FigureNode``, ``TableNode`` or
    ``ListNode``. Only those carry the ``kind`` tag that lets a node sit in
    ``children`` and survive a JSON round trip.

    ``attributes`` is stored as a read-only mapping; list values become tuples.
    """

    id: UUID = Field(default_factory=uuid4)
    type: SemanticType
    bounding_box: Optional[BoundingBox] = None
    children: Tuple["AnySemanticNode", ...] = ()
    attributes: Attributes = Field(default_factory=dict)
    depth: int = Field(default=0, ge=0)
    error_codes: FrozenSet[SemanticErrorCode] = frozenset()

    def __init__(self, **data: Any) -> None:
        if type(self) is SemanticNode:
            raise TypeError("SemanticNode is abstract; construct one of its node variants")
        super().__init__(**data)

    @field_validator("attributes", mode="after")
    @classmethod
    def _freeze_attributes(cls, value: Attributes) -> Mapping[str, Any]:
        return MappingProxyType(
            {key: tuple(item) if isinstance(item, list) else item for key, item in value.items()}
        )

    @field_serializer("attributes")
    def _attributes_payload(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: list(item) if isinstance(item, tuple) else item for key, item in value.items()}

    @field_serializer("error_codes")
    def _sorted_error_codes(self, codes: FrozenSet[SemanticErrorCode]) -> List[int]:
        return sorted(int(code) for code in codes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SemanticNode):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.describe()

    @property
    def page_index(self) -> Optional[int]:
        if self.bounding_box is None:
            return None
        return self.bounding_box.page_index

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def child_count(self) -> int:
        return len(self.children)

    @property
    def has_errors(self) -> bool:
        return bool(self.error_codes)

    def string_attribute(self, key: str) -> Optional[str]:
        value = self.attributes.get(key)
        return value if isinstance(value, str) else None

    @property
    def alt_text(self) -> Optional[str]:
        return self.string_attribute("Alt")

    @property
    def actual_text(self) -> Optional[str]:
        return self.string_attribute("ActualText")

    @property
    def language(self) -> Optional[str]:
        return self.string_attribute("Lang")

    @property
    def title(self) -> Optional[str]:
        return self.string_attribute("Title")

    @property
    def has_text_alternative(self) -> bool:
        return bool(self.alt_text) or bool(self.actual_text)

    @property
    def text_description(self) -> Optional[str]:
        """Alt, then ActualText, then Title; empty strings are skipped."""
        for candidate in (self.alt_text, self.actual_text, self.title):
            if candidate:
                return candidate
        return None

    def iter_descendants(self) -> Iterator[SemanticNode]:
        """Depth-first, pre-order walk that starts with this node."""
        yield self
        for child in self.children:
            yield from child.iter_descendants()

    @property
    def all_descendants(self) -> List[SemanticNode]:
        return list(self.iter_descendants())

    def descendants_of_type(self, node_type: SemanticType) -> List[SemanticNode]:
        return [node for node in self.iter_descendants() if node.type == node_type]

    def first_descendant(
        self, predicate: Callable[[SemanticNode], bool]
    ) -> Optional[SemanticNode]:
        for node in self.iter_descendants():
            if predicate(node):
                return node
        return None

    @property
    def descendant_count(self) -> int:
        return sum(1 for _ in self.iter_descendants())

    @property
    def max_depth(self) -> int:
        """Deepest ``depth`` among the leaves of this subtree."""
        if not self.children:
            return self.depth
        return max(child.max_depth for child in self.children)

    def with_error(self, code: SemanticErrorCode) -> "SemanticNode":
        return self.model_copy(update={"error_codes": self.error_codes | {code}})

    def without_error(self, code: SemanticErrorCode) -> "SemanticNode":
        return self.model_copy(update={"error_codes": self.error_codes - {code}})

    def cleared_errors(self) -> "SemanticNode":
        return self.model_copy(update={"error_codes": frozenset()})

    def with_children(self, children: Iterable["AnySemanticNode"]) -> "SemanticNode":
        return self.model_copy(update={"children": tuple(children)})

    def describe(self) -> str:
        return f"{self._indent}<{self.type}/>"

    @property
    def _indent(self) -> str:
        return "  " * self.depth


def text_of(node: SemanticNode) -> str:
    """Text carried by a content node, empty for other variants."""
    if isinstance(node, ContentNode):
        return node.text
    return ""


def accessible_text(node: SemanticNode) -> str:
    """Alt, ActualText, Title, own text, then the children's text joined by spaces."""
    for candidate in (node.alt_text, node.actual_text, node.title, text_of(node)):
        if candidate:
            return candidate
    parts = [accessible_text(child) for child in node.children]
    return " ".join(part for part in parts if part)


class ContentNode(SemanticNode):
    """A structural or textual element of any type."""

    kind: Literal["content"] = "content"
    text_blocks: Tuple[TextBlock, ...] = ()
    dominant_font_size: Optional[float] = Field(default=None, ge=0)
    dominant_font_weight: Optional[float] = Field(default=None, ge=0)
    dominant_color: Optional[ColorComponents] = None

    @classmethod
    def document(
        cls,
        children: Iterable["AnySemanticNode"] = (),
        *,
        bounding_box: Optional[BoundingBox] = None,
        attributes: Optional[Attributes] = None,
    ) -> "ContentNode":
        return cls(
            type=SemanticType.DOCUMENT,
            bounding_box=bounding_box,
            children=tuple(children),
            attributes=attributes or {},
            depth=0,
        )

    @classmethod
    def paragraph(
        cls,
        text_blocks: Iterable[TextBlock] = (),
        *,
        bounding_box: Optional[BoundingBox] = None,
        depth: int = 1,
        attributes: Optional[Attributes] = None,
    ) -> "ContentNode":
        return cls(
            type=SemanticType.PARAGRAPH,
            bounding_box=bounding_box,
            attributes=attributes or {},
            depth=depth,
            text_blocks=tuple(text_blocks),
        )

    @classmethod
    def heading(
        cls,
        level: int,
        text_blocks: Iterable[TextBlock] = (),
        *,
        bounding_box: Optional[BoundingBox] = None,
        depth: int = 1,
        attributes: Optional[Attributes] = None,
    ) -> "ContentNode":
        """H1..H6 for levels 1-6; any other level gives the generic H."""
        return cls(
            type=SemanticType.heading_for_level(level),
            bounding_box=bounding_box,
            attributes=attributes or {},
            depth=depth,
            text_blocks=tuple(text_blocks),
        )

    @classmethod
    def span(
        cls,
        text_blocks: Iterable[TextBlock] = (),
        *,
        bounding_box: Optional[BoundingBox] = None,
        depth: int = 2,
        attributes: Optional[Attributes] = None,
    ) -> "ContentNode":
        return cls(
            type=SemanticType.SPAN,
            bounding_box=bounding_box,
            attributes=attributes or {},
            depth=depth,
            text_blocks=tuple(text_blocks),
        )

    @classmethod
    def caption(
        cls,
        text_blocks: Iterable[TextBlock] = (),
        *,
        bounding_box: Optional[BoundingBox] = None,
        depth: int = 2,
        attributes: Optional[Attributes] = None,
    ) -> "ContentNode":
        return cls(
            type=SemanticType.CAPTION,
            bounding_box=bounding_box,
            attributes=attributes or {},
            depth=depth,
            text_blocks=tuple(text_blocks),
        )

    @property
    def text(self) -> str:
        return "\n\n".join(block.text for block in self.text_blocks)

    @property
    def has_text_content(self) -> bool:
        return bool(self.text_blocks) and bool(self.text)

    @property
    def text_block_count(self) -> int:
        return len(self.text_blocks)

    @property
    def total_line_count(self) -> int:
        return sum(block.line_count for block in self.text_blocks)

    @property
    def total_chunk_count(self) -> int:
        return sum(block.total_chunk_count for block in self.text_blocks)

    @property
    def is_large_text(self) -> bool:
        size = self.dominant_font_size
        if size is None:
            return False
        if size >= 18:
            return True
        weight = self.dominant_font_weight
        return size >= 14 and weight is not None and weight >= 700

    @property
    def text_type(self) -> TextType:
        return TextType.LARGE if self.is_large_text else TextType.REGULAR

    @property
    def is_heading(self) -> bool:
        return self.type.is_heading

    @property
    def heading_level(self) -> Optional[int]:
        return self.type.heading_level

    def describe(self) -> str:
        text = self.text
        preview = text[:_PREVIEW_LENGTH].replace("\n", " ")
        truncated = "..." if len(text) > _PREVIEW_LENGTH else ""
        return f"{self._indent}<{self.type}>{preview}{truncated}</{self.type}>"


class FigureNode(SemanticNode):
    """A figure holding raster images and/or vector line art."""

    kind: Literal["figure"] = "figure"
    type: SemanticType = SemanticType.FIGURE
    depth: int = Field(default=1, ge=0)
    image_chunks: Tuple[ImageChunk, ...] = ()
    line_art_chunks: Tuple[LineArtChunk, ...] = ()

    @field_validator("type")
    @classmethod
    def _always_figure(cls, value: SemanticType) -> SemanticType:
        return SemanticType.FIGURE

    @classmethod
    def from_image(
        cls,
        image: ImageChunk,
        *,
        depth: int = 1,
        attributes: Optional[Attributes] = None,
    ) -> "FigureNode":
        return cls(
            bounding_box=image.bounding_box,
            attributes=attributes or {},
            depth=depth,
            image_chunks=(image,),
        )

    @classmethod
    def from_line_art(
        cls,
        line_art: LineArtChunk,
        *,
        depth: int = 1,
        attributes: Optional[Attributes] = None,
    ) -> "FigureNode":
        return cls(
            bounding_box=line_art.bounding_box,
            attributes=attributes or {},
            depth=depth,
            line_art_chunks=(line_art,),
        )

    @property
    def has_visual_content(self) -> bool:
        return bool(self.image_chunks) or bool(self.line_art_chunks)

    @property
    def image_count(self) -> int:
        return len(self.image_chunks)

    @property
    def line_art_count(self) -> int:
        return len(self.line_art_chunks)

    @property
    def visual_element_count(self) -> int:
        return self.image_count + self.line_art_count

    @property
    def has_alt_text(self) -> bool:
        return self.has_text_alternative

    @property
    def appears_decorative(self) -> bool:
        return (
            not self.has_visual_content
            and not self.has_alt_text
            and not self.children
        )

    @property
    def caption(self) -> Optional[SemanticNode]:
        for child in self.children:
            if child.type == SemanticType.CAPTION:
                return child
        return None

    @property
    def has_caption(self) -> bool:
        return self.caption is not None

    @property
    def caption_text(self) -> Optional[str]:
        caption = self.caption
        if caption is None:
            return None
        return text_of(caption)

    @property
    def computed_bounding_box(self) -> Optional[BoundingBox]:
        """Explicit box, else the union of chunk boxes on the first chunk's page."""
        if self.bounding_box is not None:
            return self.bounding_box
        boxes = [chunk.bounding_box for chunk in self.image_chunks]
        boxes.extend(chunk.bounding_box for chunk in self.line_art_chunks)
        if not boxes:
            return None
        result = boxes[0]
        for box in boxes[1:]:
            result = result.union(box) or result
        return result

    @property
    def total_pixel_count(self) -> int:
        return sum(image.pixel_count for image in self.image_chunks)

    @property
    def any_image_has_alt_text(self) -> bool:
        return any(image.has_alternative_text for image in self.image_chunks)

    @property
    def any_line_art_has_alt_text(self) -> bool:
        return any(art.has_alternative_text for art in self.line_art_chunks)

    @property
    def best_description(self) -> Optional[str]:
        """Own Alt/ActualText, then caption text, then image, then line-art text."""
        own = self.alt_text or self.actual_text
        if own:
            return own
        caption_text = self.caption_text
        if caption_text:
            return caption_text
        for image in self.image_chunks:
            if image.text_description:
                return image.text_description
        for art in self.line_art_chunks:
            if art.text_description:
                return art.text_description
        return None

    def validate_accessibility(self) -> FrozenSet[SemanticErrorCode]:
        if not self.appears_decorative and not self.has_alt_text:
            return frozenset({SemanticErrorCode.FIGURE_MISSING_ALT_TEXT})
        return frozenset()

    def describe(self) -> str:
        if self.image_chunks:
            content = f"{self.image_count} image(s)"
        elif self.line_art_chunks:
            content = f"{self.line_art_count} line art"
        else:
            content = "empty"
        alt = " [has alt]" if self.has_alt_text else ""
        return f"{self._indent}<Figure>{content}{alt}</Figure>"


_CELL_TYPES = frozenset({SemanticType.TABLE_HEADER, SemanticType.TABLE_CELL})


class TableNode(SemanticNode):
    """A table with optional THead/TBody/TFoot row groups and visual rulings."""

    kind: Literal["table"] = "table"
    type: SemanticType = SemanticType.TABLE
    depth: int = Field(default=1, ge=0)
    summary: Optional[str] = None
    visual_border_x_coordinates: Tuple[float, ...] = ()
    visual_border_y_coordinates: Tuple[float, ...] = ()

    @field_validator("type")
    @classmethod
    def _always_table(cls, value: SemanticType) -> SemanticType:
        return SemanticType.TABLE

    @model_validator(mode="before")
    @classmethod
    def _summary_from_attributes(cls, data: object) -> object:
        if not isinstance(data, dict) or data.get("summary") is not None:
            return data
        attributes = data.get("attributes")
        if isinstance(attributes, Mapping) and isinstance(attributes.get("Summary"), str):
            return {**data, "summary": attributes["Summary"]}
        return data

    def _children_of_type(
        self, parent: SemanticNode, node_type: SemanticType
    ) -> List[SemanticNode]:
        return [child for child in parent.children if child.type == node_type]

    @property
    def table_head(self) -> Optional[SemanticNode]:
        heads = self._children_of_type(self, SemanticType.TABLE_HEAD)
        return heads[0] if heads else None

    @property
    def table_bodies(self) -> List[SemanticNode]:
        return self._children_of_type(self, SemanticType.TABLE_BODY)

    @property
    def table_foot(self) -> Optional[SemanticNode]:
        feet = self._children_of_type(self, SemanticType.TABLE_FOOT)
        return feet[0] if feet else None

    @property
    def has_explicit_row_groups(self) -> bool:
        return (
            self.table_head is not None
            or bool(self.table_bodies)
            or self.table_foot is not None
        )

    @property
    def all_rows(self) -> List[SemanticNode]:
        """THead rows, TBody rows, TFoot rows, then rows placed directly in the table."""
        groups: List[SemanticNode] = []
        if self.table_head is not None:
            groups.append(self.table_head)
        groups.extend(self.table_bodies)
        if self.table_foot is not None:
            groups.append(self.table_foot)
        groups.append(self)
        rows: List[SemanticNode] = []
        for group in groups:
            rows.extend(self._children_of_type(group, SemanticType.TABLE_ROW))
        return rows

    @property
    def row_count(self) -> int:
        return len(self.all_rows)

    @property
    def header_rows(self) -> List[SemanticNode]:
        head = self.table_head
        if head is not None:
            return self._children_of_type(head, SemanticType.TABLE_ROW)
        return [
            row
            for row in self.all_rows
            if self.cells_in_row(row)
            and all(cell.type == SemanticType.TABLE_HEADER for cell in self.cells_in_row(row))
        ]

    def cells_in_row(self, row: SemanticNode) -> List[SemanticNode]:
        if row.type != SemanticType.TABLE_ROW:
            return []
        return [child for child in row.children if child.type in _CELL_TYPES]

    @property
    def all_cells(self) -> List[SemanticNode]:
        return [cell for row in self.all_rows for cell in self.cells_in_row(row)]

    @property
    def header_cells(self) -> List[SemanticNode]:
        return [cell for cell in self.all_cells if cell.type == SemanticType.TABLE_HEADER]

    @property
    def data_cells(self) -> List[SemanticNode]:
        return [cell for cell in self.all_cells if cell.type == SemanticType.TABLE_CELL]

    @property
    def cell_count(self) -> int:
        return len(self.all_cells)

    @property
    def has_headers(self) -> bool:
        return bool(self.header_cells)

    @property
    def max_cells_per_row(self) -> int:
        return max((len(self.cells_in_row(row)) for row in self.all_rows), default=0)

    @property
    def has_consistent_column_count(self) -> bool:
        counts = {len(self.cells_in_row(row)) for row in self.all_rows}
        return len(counts) <= 1

    @property
    def has_visual_border(self) -> bool:
        return bool(self.visual_border_x_coordinates) and bool(self.visual_border_y_coordinates)

    @property
    def visual_column_count(self) -> int:
        return max(0, len(self.visual_border_x_coordinates) - 1)

    @property
    def visual_row_count(self) -> int:
        return max(0, len(self.visual_border_y_coordinates) - 1)

    def validate_structure(self) -> FrozenSet[SemanticErrorCode]:
        errors = set()
        if not self.has_headers and self.row_count > 1:
            errors.add(SemanticErrorCode.TABLE_MISSING_HEADERS)
        if not self.has_consistent_column_count:
            errors.add(SemanticErrorCode.TABLE_IRREGULAR_STRUCTURE)
        if self.has_visual_border:
            if self.visual_row_count != self.row_count:
                errors.add(SemanticErrorCode.TABLE_ROW_COUNT_MISMATCH)
            columns = self.max_cells_per_row
            if columns > 0 and self.visual_column_count != columns:
                errors.add(SemanticErrorCode.TABLE_COLUMN_COUNT_MISMATCH)
        return frozenset(errors)

    def with_visual_border(
        self, x_coordinates: Iterable[float], y_coordinates: Iterable[float]
    ) -> "TableNode":
        return self.model_copy(
            update={
                "visual_border_x_coordinates": tuple(x_coordinates),
                "visual_border_y_coordinates": tuple(y_coordinates),
            }
        )

    def describe(self) -> str:
        headers = " [has headers]" if self.has_headers else ""
        return (
            f"{self._indent}<Table>{self.row_count} rows, "
            f"{self.max_cells_per_row} cols{headers}</Table>"
        )


class ListKind(str, Enum):
    """Numbering style detected for a list."""

    UNORDERED = "unordered"
    ORDERED_ARABIC = "orderedArabic"
    ORDERED_ROMAN_UPPER = "orderedRomanUpper"
    ORDERED_ROMAN_LOWER = "orderedRomanLower"
    ORDERED_ALPHA_UPPER = "orderedAlphaUpper"
    ORDERED_ALPHA_LOWER = "orderedAlphaLower"
    ORDERED_CIRCLED = "orderedCircled"
    UNKNOWN = "unknown"

    @property
    def is_ordered(self) -> bool:
        return self not in (ListKind.UNORDERED, ListKind.UNKNOWN)

    @property
    def is_unordered(self) -> bool:
        return self is ListKind.UNORDERED


DEFAULT_MAX_LIST_NESTING = 5


class ListNode(SemanticNode):
    """An L element whose LI items hold Lbl and LBody children."""

    kind: Literal["list"] = "list"
    type: SemanticType = SemanticType.LIST
    depth: int = Field(default=1, ge=0)
    list_kind: ListKind = ListKind.UNKNOWN
    start_number: Optional[int] = None
    nesting_level: int = Field(default=0, ge=0)

    @field_validator("type")
    @classmethod
    def _always_list(cls, value: SemanticType) -> SemanticType:
        return SemanticType.LIST

    @property
    def items(self) -> List[SemanticNode]:
        return [child for child in self.children if child.type == SemanticType.LIST_ITEM]

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def has_items(self) -> bool:
        return bool(self.items)

    def label_for(self, item: SemanticNode) -> Optional[SemanticNode]:
        return self._part_of(item, SemanticType.LIST_LABEL)

    def body_for(self, item: SemanticNode) -> Optional[SemanticNode]:
        return self._part_of(item, SemanticType.LIST_BODY)

    @staticmethod
    def _part_of(item: SemanticNode, part_type: SemanticType) -> Optional[SemanticNode]:
        if item.type != SemanticType.LIST_ITEM:
            return None
        for child in item.children:
            if child.type == part_type:
                return child
        return None

    @property
    def labels(self) -> List[SemanticNode]:
        return [label for label in map(self.label_for, self.items) if label is not None]

    @property
    def bodies(self) -> List[SemanticNode]:
        return [body for body in map(self.body_for, self.items) if body is not None]

    @property
    def label_texts(self) -> List[str]:
        return [text_of(label) for label in self.labels]

    @property
    def items_missing_labels(self) -> List[SemanticNode]:
        return [item for item in self.items if self.label_for(item) is None]

    @property
    def items_missing_bodies(self) -> List[SemanticNode]:
        return [item for item in self.items if self.body_for(item) is None]

    @property
    def all_items_have_labels(self) -> bool:
        return not self.items_missing_labels

    @property
    def all_items_have_bodies(self) -> bool:
        return not self.items_missing_bodies

    @property
    def has_proper_structure(self) -> bool:
        return self.all_items_have_labels and self.all_items_have_bodies

    @property
    def is_ordered(self) -> bool:
        return self.list_kind.is_ordered

    @property
    def is_unordered(self) -> bool:
        return self.list_kind.is_unordered

    @property
    def nested_lists(self) -> List["ListNode"]:
        """Lists placed directly inside an item's LBody."""
        return [
            child
            for body in self.bodies
            for child in body.children
            if isinstance(child, ListNode)
        ]

    @property
    def has_nested_lists(self) -> bool:
        return bool(self.nested_lists)

    @property
    def max_nested_depth(self) -> int:
        nested = self.nested_lists
        if not nested:
            return self.nesting_level
        return max(child.max_nested_depth for child in nested)

    def validate_structure(
        self, max_nesting_level: int = DEFAULT_MAX_LIST_NESTING
    ) -> FrozenSet[SemanticErrorCode]:
        errors = set()
        if self.items_missing_labels:
            errors.add(SemanticErrorCode.LIST_ITEM_MISSING_LABEL)
        if self.items_missing_bodies:
            errors.add(SemanticErrorCode.LIST_ITEM_MISSING_BODY)
        if self.nesting_level > max_nesting_level:
            errors.add(SemanticErrorCode.LIST_NESTING_TOO_DEEP)
        return frozenset(errors)

    def with_detected_kind(
        self, list_kind: ListKind, start_number: Optional[int] = None
    ) -> "ListNode":
        return self.model_copy(update={"list_kind": list_kind, "start_number": start_number})

    def with_nesting_level(self, level: int) -> "ListNode":
        if level < 0:
            raise ValueError("nesting level must be >= 0")
        return self.model_copy(update={"nesting_level": level})

    def describe(self) -> str:
        kind = "" if self.list_kind is ListKind.UNKNOWN else f" [{self.list_kind.value}]"
        level = f" (level {self.nesting_level})" if self.nesting_level > 0 else ""
        return f"{self._indent}<List>{self.item_count} items{kind}{level}</List>"


AnySemanticNode = Annotated[
    Union[ContentNode, FigureNode, TableNode, ListNode],
    Field(discriminator="kind"),
]

for _model in (SemanticNode, ContentNode, FigureNode, TableNode, ListNode):
    _model.model_rebuild()


__all__ = [
    "AnySemanticNode",
    "AttributeValue",
    "Attributes",
    "ContentNode",
    "DEFAULT_MAX_LIST_NESTING",
    "FigureNode",
    "ListKind",
    "ListNode",
    "SemanticNode",
    "TableNode",
    "accessible_text",
    "text_of",
]
