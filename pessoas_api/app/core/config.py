"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts on its usual port without any configuration at all.
"""

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Pessoas API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"})
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Record and timestamp layout for every handler.
    log_format: str = field(
        default_factory=lambda: os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    log_date_format: str = field(default_factory=lambda: os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S"))

    # Address the uvicorn server binds to.  The port is fixed at 9999
    # unless overridden.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "9999")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
