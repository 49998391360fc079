"""PDF/UA 7.2: non-standard structure types must be role-mapped."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Dict, List, Mapping

from checkers.base import PDFUAChecker
from schemas.internal.checks import (
    PDFUACheckResult,
    PDFUARequirement,
    PDFUASeverity,
    PDFUAViolation,
)
from schemas.internal.nodes import SemanticNode
from schemas.internal.semantic_types import STANDARD_STRUCTURE_TYPES, SemanticType

ROLE_MAP_ATTRIBUTE = "RoleMap"

# RoleMap targets are matched case-sensitively, unlike tag lookup.
_TYPE_BY_NAME: Dict[str, SemanticType] = {member.value: member for member in SemanticType}


@dataclass(frozen=True)
class RoleMapChecker(PDFUAChecker):
    """Walks the whole subtree and validates each node's role mapping.

    ``role_map`` is the document-level RoleMap (custom name -> target name);
    it lets a node's ``RoleMap`` attribute resolve through a chain of custom
    names before reaching a standard type.
    """

    requirement: ClassVar[PDFUARequirement] = (
        PDFUARequirement.STRUCTURE_ELEMENTS_NEED_ROLE_MAPPING
    )

    max_role_mapping_depth: int = 10
    require_explicit_mappings: bool = True
    role_map: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.max_role_mapping_depth < 1:
            raise ValueError("max_role_mapping_depth must be >= 1")
        object.__setattr__(self, "role_map", MappingProxyType(dict(self.role_map)))

    @classmethod
    def strict(cls) -> "RoleMapChecker":
        return cls(max_role_mapping_depth=10, require_explicit_mappings=True)

    @classmethod
    def lenient(cls) -> "RoleMapChecker":
        return cls(max_role_mapping_depth=20, require_explicit_mappings=False)

    @classmethod
    def basic(cls) -> "RoleMapChecker":
        return cls(max_role_mapping_depth=5, require_explicit_mappings=False)

    def check(self, node: SemanticNode) -> PDFUACheckResult:
        violations: List[PDFUAViolation] = []
        for element in node.iter_descendants():
            violations.extend(self._check_element(element))

        if not violations:
            return PDFUACheckResult.passing(
                self.requirement,
                context="All structure elements have valid role mappings",
            )
        return PDFUACheckResult.from_violations(
            self.requirement,
            violations,
            context=f"Found {len(violations)} role mapping violation(s)",
        )

    def _check_element(self, node: SemanticNode) -> List[PDFUAViolation]:
        if node.type in STANDARD_STRUCTURE_TYPES or not self.require_explicit_mappings:
            return []
        mapped = node.string_attribute(ROLE_MAP_ATTRIBUTE)
        if not mapped:
            return [
                self._violation(
                    node,
                    f"Non-standard structure type '{node.type}' requires a RoleMap entry",
                )
            ]
        return self._resolve(node, mapped)

    def _resolve(self, node: SemanticNode, mapped: str) -> List[PDFUAViolation]:
        seen: List[str] = []
        current = mapped
        while True:
            target = _TYPE_BY_NAME.get(current)
            if target is not None and target in STANDARD_STRUCTURE_TYPES:
                return []
            if current in seen:
                chain = " -> ".join([*seen, current])
                return [self._violation(node, f"Circular RoleMap chain: {chain}")]
            if len(seen) == self.max_role_mapping_depth:
                return [
                    self._violation(
                        node,
                        "Role mapping chain exceeds maximum depth "
                        f"({self.max_role_mapping_depth}), possible circular reference",
                    )
                ]
            seen.append(current)

            next_name = self.role_map.get(current)
            if next_name is None:
                if target is None:
                    return [
                        self._violation(
                            node,
                            f"RoleMap entry '{current}' is not a valid structure type",
                        )
                    ]
                return [
                    self._violation(
                        node,
                        f"RoleMap entry '{current}' maps to another non-standard type",
                        PDFUASeverity.WARNING,
                    )
                ]
            current = next_name


__all__ = ["ROLE_MAP_ATTRIBUTE", "RoleMapChecker"]
