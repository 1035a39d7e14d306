"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.
Command line flags in ``run.py`` take precedence over the values
read here.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pet Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  When empty only the console
    # handler is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # Storage backend, one of ``mem`` or ``pq``.  Only ``mem`` is
    # implemented; see ``core.store.create_store``.
    datastore: str = os.getenv("PET_DATASTORE", "mem")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4852"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
