"""Unit tests for the core configuration module."""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


def test_settings_defaults():
    """Test that Settings initializes with expected defaults."""
    settings = Settings()

    assert settings.check_batch_workers == 1
    assert settings.checker_profile == "strict"
    assert settings.contrast_level == "AA"
    assert settings.wcag_level == "AA"

    # Unset overrides fall back to the preset of the active profile
    assert settings.role_map_max_depth is None
    assert settings.table_visual_tolerance is None
    assert settings.alt_text_min_length is None
    assert settings.list_max_nesting_level == 5


def test_settings_with_env_vars(monkeypatch):
    """Test that Settings properly loads values from environment variables."""
    monkeypatch.setenv("CHECK_BATCH_WORKERS", "4")
    monkeypatch.setenv("CHECKER_PROFILE", "lenient")
    monkeypatch.setenv("CONTRAST_LEVEL", "AAA")
    monkeypatch.setenv("TABLE_VISUAL_TOLERANCE", "1.5")
    monkeypatch.setenv("WCAG_LEVEL", "A")

    settings = Settings()

    assert settings.check_batch_workers == 4
    assert settings.checker_profile == "lenient"
    assert settings.contrast_level == "AAA"
    assert settings.table_visual_tolerance == 1.5
    assert settings.wcag_level == "A"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CHECK_BATCH_WORKERS", "0"),
        ("CHECKER_PROFILE", "paranoid"),
        ("CONTRAST_LEVEL", "A"),
        ("WCAG_LEVEL", "AAAA"),
        ("ROLE_MAP_MAX_DEPTH", "0"),
        ("TABLE_VISUAL_TOLERANCE", "-1"),
        ("LIST_MAX_NESTING_LEVEL", "-1"),
    ],
)
def test_settings_validation(monkeypatch, name, value):
    """Out-of-range values are rejected when settings load."""
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CHECKER_PROFILE", "basic")
    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().checker_profile == "basic"
