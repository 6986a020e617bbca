"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables rather than going through ``pydantic_settings``.
Defaults are provided for all fields, so the service starts with no
configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix for every route, e.g. "/api/v1".  Empty by default so the
    # user resource lives at "/users".
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Start with the four demo users (Mario, Luigi, Toad, Peach).
    seed_users: bool = os.getenv("SEED_USERS", "true").lower() in {"1", "true", "yes"}

    # How ids are generated on create: "monotonic" never repeats an id,
    # "timestamp" uses the bare Unix second and may collide.
    id_strategy: str = os.getenv("ID_STRATEGY", "monotonic")


# Environment variables must be set before this module is imported.
settings = Settings()
