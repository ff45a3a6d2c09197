"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  Use
``Settings.from_env`` when the environment may have changed since
import (for example in tests); other modules import the shared
``settings`` instance.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


PRODUCTION = "production"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Message Board API"
    api_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # ``production`` turns the CORS fallback for unknown origins from
    # permit into deny.  Any other value is treated as non-production.
    environment: str = "development"

    # Substrings of deployment-platform hosts whose origins are always
    # trusted, e.g. preview deployments on ``*.vercel.app``.
    trusted_origin_domains: List[str] = field(default_factory=lambda: ["vercel.app"])

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from the current environment variables."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Message Board API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            environment=os.getenv("ENVIRONMENT", "development"),
            trusted_origin_domains=_split_csv(os.getenv("TRUSTED_ORIGIN_DOMAINS", "vercel.app")),
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings.from_env()
