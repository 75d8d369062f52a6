"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the service starts
with a local SQLite file and no further setup.  In a production
deployment override these via environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  A relative path is resolved relative
    # to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "employees.db")

    # Prefix under which the employee routes are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # When enabled, PUT and DELETE on an id that matches no row answer
    # 404 instead of reporting success.
    strict_not_found: bool = _env_flag("STRICT_NOT_FOUND")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
