"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Before anything is read, a ``.env.local`` file in the
current working directory (if present) is loaded with python‑dotenv so
local development does not require exporting variables by hand.
Variables already set in the environment take precedence over the file.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv(".env.local")


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Connection string for the document store.  The unique index on
    # ``username`` is created in ``database_name``/``collection_name`` at
    # startup (see ``core.db.ensure_indexes``).
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    database_name: str = os.getenv("MONGODB_DATABASE", "user-management-cluster")
    collection_name: str = os.getenv("MONGODB_COLLECTION", "users")

    # Upper bound, in seconds, for every store operation issued while
    # serving a single request.
    request_timeout: float = float(os.getenv("MONGODB_TIMEOUT_SECONDS", "10"))

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Environment values are captured once, at import.
settings = Settings()
