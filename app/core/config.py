"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name, "").strip().lower()
    if not value:
        return default
    return value in {"1", "true", "yes", "on"}


# HTTP server
API_TITLE: str = "Sample Agents API"
API_DESCRIPTION: str = "A simple CRUD API over the agents table, with a customer lookup and an echo function."
API_VERSION: str = "1.0.0"
API_HOST: str = os.getenv("API_HOST", "127.0.0.1").strip() or "127.0.0.1"
API_PORT: int = int(os.getenv("API_PORT", "3000"))
API_DOCS_URL: str = "/api-docs"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

# MariaDB / MySQL connection (from env)
DB_HOST: str = os.getenv("DB_HOST", "localhost").strip()
DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
DB_USER: str = os.getenv("DB_USER", "root").strip()
DB_PASSWORD: str = os.getenv("DB_PASSWORD", "root")
DB_NAME: str = os.getenv("DB_NAME", "sample").strip()

# Full SQLAlchemy URL wins over the individual DB_* settings
DATABASE_URL: str = (
    os.getenv("DATABASE_URL", "").strip()
    or f"mysql+aiomysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# Pool: fixed size, callers beyond it wait up to DB_POOL_TIMEOUT seconds
DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
DB_POOL_TIMEOUT: float = float(os.getenv("DB_POOL_TIMEOUT", "30"))

# Path codes for PUT/PATCH/DELETE. Legacy clients sent integer-formatted codes only.
LEGACY_INTEGER_CODES: bool = _env_bool("LEGACY_INTEGER_CODES")
AGENT_CODE_PATTERN: str = r"^[+-]?\d+$" if LEGACY_INTEGER_CODES else r"^[A-Za-z0-9_-]+$"

# Echo function
ECHO_SPEAKER: str = os.getenv("ECHO_SPEAKER", "Taylor Palmer").strip() or "Taylor Palmer"
