"""
Runtime configuration for FinTool.

Settings are read from environment variables (a local ``.env`` file is
loaded first when present).
"""

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:5173,http://localhost:8080"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Calculator configuration from environment variables."""

    def __init__(self):
        self.cors_origins: List[str] = [
            o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
        ]
        # Unknown cadences are rejected unless this is switched off, in which
        # case they are treated as monthly amounts.
        self.strict_frequency = _env_bool("FINTOOL_STRICT_FREQUENCY", True)
        self.schedule_page_size = int(os.getenv("FINTOOL_SCHEDULE_PAGE_SIZE", "10"))
        self.max_page_size = int(os.getenv("FINTOOL_MAX_PAGE_SIZE", "500"))


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
