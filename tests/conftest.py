# tests/conftest.py
import pytest

from core.config import get_settings

# Settings are cached per process; every test starts from a fresh environment read.
_SETTINGS_ENV = (
    "CHECK_BATCH_WORKERS",
    "CHECKER_PROFILE",
    "CONTRAST_LEVEL",
    "ROLE_MAP_MAX_DEPTH",
    "TABLE_VISUAL_TOLERANCE",
    "LIST_MAX_NESTING_LEVEL",
    "ALT_TEXT_MIN_LENGTH",
    "WCAG_LEVEL",
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
