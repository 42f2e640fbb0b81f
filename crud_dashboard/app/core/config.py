"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally with no configuration at all; override
them via environment variables when deploying.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]


# Vite dev servers pick the next free port when 5173 is taken.
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5174,http://localhost:5175"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "CRUD Dashboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Every route is mounted below this prefix, e.g. ``/api/users``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3002"))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  Example: CORS_ORIGINS="http://localhost:5173,https://app.example.com".
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
    )

    # When disabled the stores start empty instead of holding the
    # demo users and posts.
    seed_fixtures: bool = os.getenv("SEED_FIXTURES", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
