"""Runtime settings for the accessibility checkers."""

from dotenv import load_dotenv

from .config import CheckerProfile, ContrastLevel, Settings, get_settings

load_dotenv()

__all__ = ["CheckerProfile", "ContrastLevel", "Settings", "get_settings"]
