"""Structure-type taxonomy and validation error codes for tagged documents."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, FrozenSet, Optional


class SemanticType(str, Enum):
    """Logical role of a structure element; values are the external tag names.

    Members compare by their external name, so sorting is lexicographic.
    """

    DOCUMENT = "Document"
    PART = "Part"
    ARTICLE = "Art"
    SECTION = "Sect"
    DIV = "Div"
    PARAGRAPH = "P"
    SPAN = "Span"
    BLOCK_QUOTE = "BlockQuote"
    INDEX = "Index"

    HEADING = "H"
    H1 = "H1"
    H2 = "H2"
    H3 = "H3"
    H4 = "H4"
    H5 = "H5"
    H6 = "H6"

    LIST = "L"
    LIST_ITEM = "LI"
    LIST_LABEL = "Lbl"
    LIST_BODY = "LBody"

    TABLE = "Table"
    TABLE_ROW = "TR"
    TABLE_HEADER = "TH"
    TABLE_CELL = "TD"
    TABLE_HEAD = "THead"
    TABLE_BODY = "TBody"
    TABLE_FOOT = "TFoot"

    FIGURE = "Figure"
    CAPTION = "Caption"
    FORMULA = "Formula"
    FORM = "Form"
    CODE = "Code"
    TITLE = "Title"

    LINK = "Link"
    ANNOTATION = "Annot"
    REFERENCE = "Reference"
    NOTE = "Note"

    TOC = "TOC"
    TOC_ITEM = "TOCI"
    BIBLIOGRAPHY = "BibEntry"
    QUOTE = "Quote"

    RUBY = "Ruby"
    RUBY_BASE = "RB"
    RUBY_TEXT = "RT"
    RUBY_PUNCTUATION = "RP"
    WARICHU = "Warichu"
    WARICHU_TEXT = "WT"
    WARICHU_PUNCTUATION = "WP"

    ARTIFACT = "Artifact"
    NON_STRUCT = "NonStruct"
    PRIVATE = "Private"
    DOCUMENT_HEADER = "Header"
    DOCUMENT_FOOTER = "Footer"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_structure_type_name(cls, name: Optional[str]) -> Optional["SemanticType"]:
        """Case-insensitive exact lookup; unknown or empty names give None."""
        if not name:
            return None
        return _BY_LOWER_NAME.get(name.lower())

    @classmethod
    def heading_for_level(cls, level: int) -> "SemanticType":
        """H1..H6 for levels 1-6, the generic H otherwise."""
        return _HEADING_BY_LEVEL.get(level, cls.HEADING)

    @property
    def is_heading(self) -> bool:
        return self in HEADING_TYPES

    @property
    def heading_level(self) -> Optional[int]:
        return _LEVEL_BY_HEADING.get(self)

    @property
    def is_list(self) -> bool:
        return self in LIST_TYPES

    @property
    def is_table(self) -> bool:
        return self in TABLE_TYPES

    @property
    def is_block_level(self) -> bool:
        return self in BLOCK_LEVEL_TYPES

    @property
    def is_inline(self) -> bool:
        return self in INLINE_TYPES

    @property
    def is_presentational(self) -> bool:
        return self in PRESENTATIONAL_TYPES

    @property
    def requires_alternative_text(self) -> bool:
        return self in ALT_TEXT_REQUIRED_TYPES

    @property
    def is_grouping(self) -> bool:
        return self in GROUPING_TYPES


_HEADING_BY_LEVEL: Dict[int, SemanticType] = {
    1: SemanticType.H1,
    2: SemanticType.H2,
    3: SemanticType.H3,
    4: SemanticType.H4,
    5: SemanticType.H5,
    6: SemanticType.H6,
}
_LEVEL_BY_HEADING: Dict[SemanticType, int] = {
    heading: level for level, heading in _HEADING_BY_LEVEL.items()
}
_BY_LOWER_NAME: Dict[str, SemanticType] = {
    member.value.lower(): member for member in SemanticType
}

HEADING_TYPES: FrozenSet[SemanticType] = frozenset(
    {SemanticType.HEADING, *_HEADING_BY_LEVEL.values()}
)
LIST_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.LIST,
        SemanticType.LIST_ITEM,
        SemanticType.LIST_LABEL,
        SemanticType.LIST_BODY,
    }
)
TABLE_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.TABLE,
        SemanticType.TABLE_ROW,
        SemanticType.TABLE_HEADER,
        SemanticType.TABLE_CELL,
        SemanticType.TABLE_HEAD,
        SemanticType.TABLE_BODY,
        SemanticType.TABLE_FOOT,
    }
)
BLOCK_LEVEL_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.DOCUMENT,
        SemanticType.PART,
        SemanticType.ARTICLE,
        SemanticType.SECTION,
        SemanticType.DIV,
        SemanticType.PARAGRAPH,
        SemanticType.BLOCK_QUOTE,
        SemanticType.INDEX,
        *HEADING_TYPES,
        SemanticType.LIST,
        SemanticType.LIST_ITEM,
        SemanticType.LIST_BODY,
        SemanticType.TABLE,
        SemanticType.TABLE_ROW,
        SemanticType.TABLE_HEAD,
        SemanticType.TABLE_BODY,
        SemanticType.TABLE_FOOT,
        SemanticType.FIGURE,
        SemanticType.FORMULA,
        SemanticType.FORM,
        SemanticType.CODE,
        SemanticType.TOC,
        SemanticType.TOC_ITEM,
        SemanticType.BIBLIOGRAPHY,
    }
)
INLINE_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.SPAN,
        SemanticType.LINK,
        SemanticType.ANNOTATION,
        SemanticType.REFERENCE,
        SemanticType.NOTE,
        SemanticType.QUOTE,
        SemanticType.LIST_LABEL,
        SemanticType.TABLE_HEADER,
        SemanticType.TABLE_CELL,
        SemanticType.RUBY,
        SemanticType.RUBY_BASE,
        SemanticType.RUBY_TEXT,
        SemanticType.RUBY_PUNCTUATION,
        SemanticType.WARICHU,
        SemanticType.WARICHU_TEXT,
        SemanticType.WARICHU_PUNCTUATION,
    }
)
PRESENTATIONAL_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.ARTIFACT,
        SemanticType.NON_STRUCT,
        SemanticType.PRIVATE,
        SemanticType.DOCUMENT_HEADER,
        SemanticType.DOCUMENT_FOOTER,
    }
)
ALT_TEXT_REQUIRED_TYPES: FrozenSet[SemanticType] = frozenset(
    {SemanticType.FIGURE, SemanticType.FORMULA}
)
GROUPING_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.DOCUMENT,
        SemanticType.PART,
        SemanticType.ARTICLE,
        SemanticType.SECTION,
        SemanticType.DIV,
        SemanticType.LIST,
        SemanticType.LIST_ITEM,
        SemanticType.TABLE,
        SemanticType.TABLE_ROW,
        SemanticType.TABLE_HEAD,
        SemanticType.TABLE_BODY,
        SemanticType.TABLE_FOOT,
        SemanticType.TOC,
        SemanticType.RUBY,
        SemanticType.WARICHU,
        SemanticType.FORM,
    }
)

# ISO 32000-1 standard structure types; anything else needs a RoleMap entry.
STANDARD_STRUCTURE_TYPES: FrozenSet[SemanticType] = frozenset(SemanticType) - {
    SemanticType.TITLE,
    SemanticType.ARTIFACT,
    SemanticType.DOCUMENT_HEADER,
    SemanticType.DOCUMENT_FOOTER,
}


class SemanticErrorCode(IntEnum):
    """Numeric codes recorded on nodes by structural validation."""

    MISSING_ALT_TEXT = 1000
    EMPTY_ELEMENT = 1001
    INVALID_NESTING = 1002
    MISSING_REQUIRED_CHILD = 1003
    UNEXPECTED_CHILD = 1004
    INVALID_ATTRIBUTE = 1005
    MISSING_ATTRIBUTE = 1006
    DUPLICATE_ID = 1007

    TABLE_CELL_BELOW_NEXT_ROW = 1100
    TABLE_CELL_ABOVE_PREVIOUS_ROW = 1101
    TABLE_CELL_RIGHT_OF_NEXT_COLUMN = 1102
    TABLE_CELL_LEFT_OF_PREVIOUS_COLUMN = 1103
    TABLE_ROW_COUNT_MISMATCH = 1104
    TABLE_COLUMN_COUNT_MISMATCH = 1105
    TABLE_ROW_SPAN_MISMATCH = 1106
    TABLE_COL_SPAN_MISMATCH = 1107
    TABLE_MISSING_HEADERS = 1108
    TABLE_IRREGULAR_STRUCTURE = 1109

    LIST_ITEM_MISSING_LABEL = 1200
    LIST_ITEM_MISSING_BODY = 1201
    LIST_INCONSISTENT_LABELS = 1202
    LIST_LABELS_OUT_OF_SEQUENCE = 1203
    LIST_NESTING_TOO_DEEP = 1204

    HEADING_LEVEL_SKIPPED = 1300
    MULTIPLE_H1_HEADINGS = 1301
    EMPTY_HEADING = 1302
    HEADING_HIERARCHY_INVALID = 1303

    FIGURE_MISSING_ALT_TEXT = 1400
    FIGURE_CAPTION_NOT_ASSOCIATED = 1401
    DECORATIVE_FIGURE_NOT_ARTIFACT = 1402
    FIGURE_INSUFFICIENT_CONTRAST = 1403


__all__ = [
    "ALT_TEXT_REQUIRED_TYPES",
    "BLOCK_LEVEL_TYPES",
    "GROUPING_TYPES",
    "HEADING_TYPES",
    "INLINE_TYPES",
    "LIST_TYPES",
    "PRESENTATIONAL_TYPES",
    "STANDARD_STRUCTURE_TYPES",
    "SemanticErrorCode",
    "SemanticType",
    "TABLE_TYPES",
]
