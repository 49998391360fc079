from __future__ import annotations

import pytest

from checkers.language import LanguageChecker, is_common_language, validate_language_code
from schemas.internal.nodes import ContentNode
from schemas.internal.semantic_types import SemanticType
from schemas.internal.wcag import ViolationSeverity, WCAGSuccessCriterion


def _document(lang: str | None = None, children=()) -> ContentNode:
    attributes = {"Lang": lang} if lang is not None else {}
    return ContentNode.document(children, attributes=attributes)


@pytest.mark.parametrize("code", ["en", "en-US", "fra", "zh-Hans-CN", "de-CH-1901", "es-419"])
def test_well_formed_codes(code: str) -> None:
    assert validate_language_code(code) is None


@pytest.mark.parametrize(
    ("code", "reason"),
    [
        ("e", "Primary language tag must be 2-3 letters (e.g., 'en', 'fra')"),
        ("english", "Primary language tag must be 2-3 letters (e.g., 'en', 'fra')"),
        ("e1", "Primary language tag must contain only letters"),
        ("en-U", "Invalid subtag 'U' in language code"),
        ("-", "Language code is empty"),
    ],
)
def test_malformed_codes(code: str, reason: str) -> None:
    assert validate_language_code(code) == reason


def test_common_language_uses_primary_subtag() -> None:
    assert is_common_language("EN-gb")
    assert not is_common_language("tlh")


def test_document_with_valid_language_passes() -> None:
    result = LanguageChecker().check(_document("en-US"))

    assert result.criterion is WCAGSuccessCriterion.LANGUAGE_OF_PAGE
    assert result.passed
    assert result.context == "Language attribute is valid"


def test_document_without_language_is_critical() -> None:
    document = _document()

    result = LanguageChecker().check(document)

    assert not result.passed
    assert [v.description for v in result.violations] == [
        "Document lacks language attribute (Lang entry required)"
    ]
    assert result.violations[0].severity is ViolationSeverity.CRITICAL
    assert result.violations[0].node_id == document.id


def test_blank_language_is_critical() -> None:
    result = LanguageChecker.lenient().check(_document("   "))

    assert [v.description for v in result.violations] == [
        "Language attribute is empty or whitespace-only"
    ]


def test_strict_validation_rejects_malformed_code() -> None:
    document = _document(" english ")

    result = LanguageChecker().check(document)
    assert [v.description for v in result.violations] == [
        "Invalid language code 'english': "
        "Primary language tag must be 2-3 letters (e.g., 'en', 'fra')"
    ]
    assert result.violations[0].severity is ViolationSeverity.SERIOUS

    assert LanguageChecker.lenient().check(document).passed


def test_elements_are_skipped_unless_all_nodes_are_checked() -> None:
    paragraph = ContentNode.paragraph(attributes={"Lang": "x"})

    assert LanguageChecker.document_only().check(paragraph).passed
    assert not LanguageChecker.all_elements().check(paragraph).passed


def test_elements_inherit_language_when_unset() -> None:
    paragraph = ContentNode.paragraph()
    link = ContentNode(type=SemanticType.LINK, attributes={"Lang": "?"}, depth=1)
    document = _document("en", [paragraph, link])

    result = LanguageChecker.all_elements().check_nodes(document.iter_descendants())

    assert result.passed
    assert result.context == "Checked 3 node(s)"


def test_batch_reports_each_failing_node() -> None:
    quote = ContentNode(type=SemanticType.BLOCK_QUOTE, attributes={"Lang": "d"}, depth=1)
    document = _document(None, [quote])

    result = LanguageChecker.all_elements().check_nodes(document.iter_descendants())

    assert [v.node_id for v in result.violations] == [document.id, quote.id]
    assert result.context == "Found 2 violation(s) in 2 node(s)"
