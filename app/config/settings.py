"""Application settings loaded from the environment."""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEVELOPMENT_SESSION_SECRET = "famly-development-secret"


def _get_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag such as ``true``/``1``/``yes`` from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


APP_ENV = os.getenv("APP_ENV", "development").strip().lower()
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017").strip()
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME", "famly").strip()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
REQUIRE_MEMBERSHIP_TO_POST = _get_bool("REQUIRE_MEMBERSHIP_TO_POST")


def get_cors_origins() -> List[str]:
    """Get the allowed CORS origins from a comma-separated list."""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_session_secret() -> str:
    """Get the secret used to sign session cookies."""
    secret = os.getenv("SESSION_SECRET")
    if secret:
        return secret.strip()

    if APP_ENV == "development":
        return DEVELOPMENT_SESSION_SECRET

    raise ValueError("SESSION_SECRET must be set in .env file")
