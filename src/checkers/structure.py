"""Structural integrity of the whole tag tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set
from uuid import UUID

from schemas.internal.nodes import FigureNode, SemanticNode, text_of
from schemas.internal.semantic_types import SemanticErrorCode, SemanticType
from schemas.internal.structure import StructureTreeAnalysisResult, StructureTreeError

logger = logging.getLogger(__name__)

ALLOWED_EMPTY_TYPES: FrozenSet[SemanticType] = frozenset(
    {
        SemanticType.ARTIFACT,
        SemanticType.DOCUMENT_HEADER,
        SemanticType.DOCUMENT_FOOTER,
        SemanticType.NOTE,
        SemanticType.DOCUMENT,
        SemanticType.PART,
        SemanticType.ARTICLE,
        SemanticType.SECTION,
        SemanticType.DIV,
    }
)

_TABLE_SECTIONS: FrozenSet[SemanticType] = frozenset(
    {SemanticType.TABLE_HEAD, SemanticType.TABLE_BODY, SemanticType.TABLE_FOOT}
)

# Parent types whose children are restricted; other parents accept anything.
ALLOWED_CHILDREN: Dict[SemanticType, FrozenSet[SemanticType]] = {
    SemanticType.LIST: frozenset({SemanticType.LIST_ITEM}),
    SemanticType.LIST_ITEM: frozenset(
        {SemanticType.LIST_LABEL, SemanticType.LIST_BODY, SemanticType.LIST}
    ),
    SemanticType.TABLE: frozenset({SemanticType.TABLE_ROW, *_TABLE_SECTIONS}),
    SemanticType.TABLE_ROW: frozenset({SemanticType.TABLE_CELL, SemanticType.TABLE_HEADER}),
    SemanticType.TABLE_HEAD: frozenset({SemanticType.TABLE_ROW}),
    SemanticType.TABLE_BODY: frozenset({SemanticType.TABLE_ROW}),
    SemanticType.TABLE_FOOT: frozenset({SemanticType.TABLE_ROW}),
    SemanticType.TOC: frozenset({SemanticType.TOC_ITEM}),
}

# A Document may hold anything except the parts of a list item.
_FORBIDDEN_UNDER_DOCUMENT: FrozenSet[SemanticType] = frozenset(
    {SemanticType.LIST_LABEL, SemanticType.LIST_BODY}
)


def is_valid_child_type(child: SemanticType, parent: SemanticType) -> bool:
    if parent == SemanticType.DOCUMENT:
        return child not in _FORBIDDEN_UNDER_DOCUMENT
    allowed = ALLOWED_CHILDREN.get(parent)
    return allowed is None or child in allowed


@dataclass(frozen=True)
class StructureTreeAnalyzer:
    """Walks the tag tree once and reports structural defects.

    Unlike the PDF/UA checkers this produces ``StructureTreeError`` records
    keyed by ``SemanticErrorCode``, the codes a node's ``error_codes`` carry.
    ``max_depth`` of 0 means unlimited.
    """

    validate_nesting: bool = True
    validate_required_children: bool = True
    validate_attributes: bool = True
    check_empty_elements: bool = True
    check_duplicate_ids: bool = True
    max_depth: int = 0

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")

    @classmethod
    def all(cls) -> "StructureTreeAnalyzer":
        return cls()

    @classmethod
    def nesting_only(cls) -> "StructureTreeAnalyzer":
        return cls(
            validate_attributes=False,
            check_empty_elements=False,
            check_duplicate_ids=False,
        )

    @classmethod
    def attributes_only(cls) -> "StructureTreeAnalyzer":
        return cls(
            validate_nesting=False,
            validate_required_children=False,
            check_empty_elements=False,
            check_duplicate_ids=False,
        )

    def analyze(self, root: SemanticNode) -> StructureTreeAnalysisResult:
        """
        Analyze the tree rooted at ``root``.

        Args:
            root: Root of the structure tree

        Returns:
            Errors in pre-order, the node count and the deepest ``depth`` seen
        """
        errors: List[StructureTreeError] = []
        seen: Set[UUID] = set()
        node_count = 0
        deepest = 0

        for node in root.iter_descendants():
            node_count += 1
            deepest = max(deepest, node.depth)
            errors.extend(self._node_errors(node, seen))

        logger.debug(
            "Structure tree: %d node(s), depth %d, %d error(s)",
            node_count,
            deepest,
            len(errors),
        )
        return StructureTreeAnalysisResult(
            errors=tuple(errors),
            total_node_count=node_count,
            max_depth=deepest,
        )

    def _node_errors(self, node: SemanticNode, seen: Set[UUID]) -> List[StructureTreeError]:
        errors: List[StructureTreeError] = []
        if self.max_depth > 0 and node.depth > self.max_depth:
            errors.append(
                _error(
                    SemanticErrorCode.INVALID_NESTING,
                    node,
                    f"Node exceeds maximum depth of {self.max_depth}",
                    depth=str(node.depth),
                    maxDepth=str(self.max_depth),
                )
            )
        if self.check_duplicate_ids:
            if node.id in seen:
                errors.append(
                    _error(SemanticErrorCode.DUPLICATE_ID, node, "Duplicate node ID detected")
                )
            seen.add(node.id)
        if self.check_empty_elements:
            empty = self._empty_error(node)
            if empty is not None:
                errors.append(empty)
        if self.validate_nesting:
            errors.extend(self._nesting_errors(node))
        if self.validate_required_children:
            errors.extend(self._required_child_errors(node))
        if self.validate_attributes:
            errors.extend(self._attribute_errors(node))
        return errors

    def _empty_error(self, node: SemanticNode) -> Optional[StructureTreeError]:
        if node.type in ALLOWED_EMPTY_TYPES:
            return None
        if node.has_children or node.has_text_alternative or text_of(node):
            return None
        if isinstance(node, FigureNode) and node.has_visual_content:
            return None
        return _error(
            SemanticErrorCode.EMPTY_ELEMENT,
            node,
            "Element is empty (no children or text alternative)",
        )

    def _nesting_errors(self, node: SemanticNode) -> List[StructureTreeError]:
        return [
            _error(
                SemanticErrorCode.UNEXPECTED_CHILD,
                child,
                f"Invalid child type '{child.type}' for parent '{node.type}'",
                parentType=node.type.value,
                childType=child.type.value,
            )
            for child in node.children
            if not is_valid_child_type(child.type, node.type)
        ]

    def _required_child_errors(self, node: SemanticNode) -> List[StructureTreeError]:
        if node.type == SemanticType.LIST_ITEM:
            if not any(child.type == SemanticType.LIST_BODY for child in node.children):
                return [
                    _error(
                        SemanticErrorCode.MISSING_REQUIRED_CHILD,
                        node,
                        "List item missing required LBody child",
                        missingChild="LBody",
                    )
                ]
        elif node.type == SemanticType.TABLE and not node.has_children:
            return [
                _error(
                    SemanticErrorCode.MISSING_REQUIRED_CHILD,
                    node,
                    "Table has no rows",
                    missingChild="TR",
                )
            ]
        elif node.type == SemanticType.TABLE_ROW and not node.has_children:
            return [
                _error(
                    SemanticErrorCode.MISSING_REQUIRED_CHILD,
                    node,
                    "Table row has no cells",
                    missingChild="TD or TH",
                )
            ]
        return []

    def _attribute_errors(self, node: SemanticNode) -> List[StructureTreeError]:
        if node.type == SemanticType.FIGURE and not node.has_text_alternative:
            return [
                _error(
                    SemanticErrorCode.MISSING_ATTRIBUTE,
                    node,
                    "Figure missing Alt or ActualText attribute",
                    requiredAttribute="Alt or ActualText",
                )
            ]
        if node.type == SemanticType.LINK and not (
            node.has_children or node.has_text_alternative or text_of(node)
        ):
            return [
                _error(
                    SemanticErrorCode.MISSING_ATTRIBUTE,
                    node,
                    "Link has no content or Alt text",
                    requiredAttribute="Alt or content",
                )
            ]
        return []


def _error(
    code: SemanticErrorCode, node: SemanticNode, message: str, **context: str
) -> StructureTreeError:
    return StructureTreeError(
        code=code,
        node_id=node.id,
        node_type=node.type,
        message=message,
        page_index=node.page_index,
        context=context,
    )


__all__ = [
    "ALLOWED_CHILDREN",
    "ALLOWED_EMPTY_TYPES",
    "StructureTreeAnalyzer",
    "is_valid_child_type",
]
