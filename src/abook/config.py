"""
Runtime settings for abook.
Read from the environment; a .env file in the current directory or the repo
root is loaded first, and variables already set in the environment win.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_BOOK_PATH = "book.json"
DEFAULT_LOG_LEVEL = "WARNING"

# Repo root: from src/abook/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load the first .env found (current dir, then repo root)."""
    for path in (Path.cwd() / ".env", _REPO_ROOT / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    book_path: Path
    log_level: int
    phone_region: str | None = None


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"ABOOK_LOG_LEVEL: unknown level '{name}'")
    return level


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    book_path = os.environ.get("ABOOK_PATH", "").strip() or DEFAULT_BOOK_PATH
    log_level = os.environ.get("ABOOK_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL
    region = os.environ.get("ABOOK_PHONE_REGION", "").strip().upper() or None
    return Settings(
        book_path=Path(book_path),
        log_level=_log_level(log_level),
        phone_region=region,
    )
