from __future__ import annotations

import pytest

from checkers.role_map import RoleMapChecker
from schemas.internal.checks import PDFUARequirement, PDFUASeverity
from schemas.internal.nodes import ContentNode
from schemas.internal.semantic_types import SemanticType


def _title(role: str | None = None) -> ContentNode:
    attributes = {"RoleMap": role} if role is not None else {}
    return ContentNode(type=SemanticType.TITLE, attributes=attributes, depth=1)


def _document(*children: ContentNode) -> ContentNode:
    return ContentNode.document(children)


def test_standard_types_pass() -> None:
    document = _document(ContentNode.paragraph(), ContentNode.heading(1))

    result = RoleMapChecker().check(document)

    assert result.requirement is PDFUARequirement.STRUCTURE_ELEMENTS_NEED_ROLE_MAPPING
    assert result.passed
    assert result.context == "All structure elements have valid role mappings"


def test_unmapped_non_standard_type_fails() -> None:
    title = _title()
    section = ContentNode(type=SemanticType.SECTION, children=(title,), depth=1)

    result = RoleMapChecker().check(_document(section))

    assert not result.passed
    assert result.violations[0].node_id == title.id
    assert result.violations[0].description == (
        "Non-standard structure type 'Title' requires a RoleMap entry"
    )


def test_mapping_to_standard_type_passes() -> None:
    assert RoleMapChecker().check(_document(_title("H1"))).passed


def test_mapping_is_case_sensitive() -> None:
    result = RoleMapChecker().check(_document(_title("h1")))

    assert not result.passed
    assert result.violations[0].description == "RoleMap entry 'h1' is not a valid structure type"


def test_mapping_to_another_non_standard_type_is_a_warning() -> None:
    result = RoleMapChecker().check(_document(_title("Artifact")))

    assert result.passed
    assert result.violations[0].severity is PDFUASeverity.WARNING
    assert result.violations[0].description == (
        "RoleMap entry 'Artifact' maps to another non-standard type"
    )


def test_document_role_map_chain_resolves() -> None:
    checker = RoleMapChecker(role_map={"Custom": "Intermediate", "Intermediate": "P"})

    assert checker.check(_document(_title("Custom"))).passed


def test_circular_role_map_is_an_error() -> None:
    checker = RoleMapChecker(role_map={"A": "B", "B": "A"})

    result = checker.check(_document(_title("A")))

    assert not result.passed
    assert result.violations[0].description == "Circular RoleMap chain: A -> B -> A"


def test_chain_longer_than_maximum_depth_is_an_error() -> None:
    checker = RoleMapChecker(max_role_mapping_depth=2, role_map={"A": "B", "B": "C", "C": "P"})

    result = checker.check(_document(_title("A")))

    assert not result.passed
    assert result.violations[0].description == (
        "Role mapping chain exceeds maximum depth (2), possible circular reference"
    )
    assert RoleMapChecker(max_role_mapping_depth=3, role_map=checker.role_map).check(
        _document(_title("A"))
    ).passed


def test_presets() -> None:
    document = _document(_title())

    assert not RoleMapChecker.strict().check(document).passed
    assert RoleMapChecker.lenient().check(document).violations == ()
    assert RoleMapChecker.basic().max_role_mapping_depth == 5
    assert RoleMapChecker.lenient().max_role_mapping_depth == 20


def test_depth_must_be_positive() -> None:
    with pytest.raises(ValueError, match="max_role_mapping_depth"):
        RoleMapChecker(max_role_mapping_depth=0)


def test_checker_is_hashable_and_keeps_its_own_map() -> None:
    source = {"Chapter": "Sect"}
    checker = RoleMapChecker(role_map=source)
    source["Chapter"] = "Bogus"

    assert hash(checker) == hash(RoleMapChecker(role_map={"Chapter": "Sect"}))
    assert checker == RoleMapChecker(role_map={"Chapter": "Sect"})
    assert checker.role_map == {"Chapter": "Sect"}
    with pytest.raises(TypeError):
        checker.role_map["Chapter"] = "P"
    assert len({RoleMapChecker(), RoleMapChecker.strict()}) == 1
