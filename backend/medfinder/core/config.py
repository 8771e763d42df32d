"""Application configuration.

Environment variables override all defaults. A `.env` file next to the
backend directory is loaded for local development.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

_BACKEND_DIR = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_BACKEND_DIR / ".env", override=False)


def _int_env(key: str, default: int) -> int:
    val = os.getenv(key)
    if val is None or val == "":
        return default
    try:
        return int(val)
    except ValueError:
        return default


class Settings:
    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./medfinder.db")
    # Busy timeout / pool wait in seconds
    DB_TIMEOUT_SECONDS: int = _int_env("DB_TIMEOUT_SECONDS", 30)

    # Search
    SEARCH_RESULT_LIMIT: int = _int_env("SEARCH_RESULT_LIMIT", 10)

    # New pharmacy ids are allocated above this value
    PHARMACY_ID_BASELINE: int = _int_env("PHARMACY_ID_BASELINE", 1000)

    # CORS (specific origins only, no wildcards)
    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        ).split(",")
        if origin.strip()
    ]

    # Rate Limiting
    RATE_LIMIT_REQUESTS: int = _int_env("RATE_LIMIT_REQUESTS", 100)
    RATE_LIMIT_WINDOW_SECONDS: int = _int_env("RATE_LIMIT_WINDOW_SECONDS", 60)

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
