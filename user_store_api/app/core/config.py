"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the v1 router is mounted.  Empty serves
    # ``/users`` directly; set e.g. ``API_PREFIX=/api/v1`` to namespace it.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Name of the single user the store is seeded with (id 1).
    seed_user_name: str = os.getenv("SEED_USER_NAME", "Firat")

    # How ids are assigned on create: ``length`` uses the current number
    # of users plus one (ids may be reused after a delete), ``counter``
    # never hands out the same id twice.
    id_strategy: str = os.getenv("ID_STRATEGY", "length")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
