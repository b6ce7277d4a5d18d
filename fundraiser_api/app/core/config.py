"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server can be started locally without any setup; in production at
least ``ADMIN_TOKEN`` must be overridden.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Placeholder admin token.  The application logs a warning on startup
# while this value is still in use.
DEFAULT_ADMIN_TOKEN = "changeme-in-production"

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Fundraiser Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Shared secret for every mutating admin route.  Clients send it as
    # ``Authorization: Bearer <token>``.
    admin_token: str = os.getenv("ADMIN_TOKEN", DEFAULT_ADMIN_TOKEN)

    # Location of the JSON document holding the whole application state.
    # Relative paths are resolved against the project root by
    # ``get_data_file_path``.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "data.json"))

    # Brute‑force protection for the token verification endpoint.
    rate_limit_window_seconds: float = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))
    rate_limit_max_attempts: int = int(os.getenv("RATE_LIMIT_MAX_ATTEMPTS", "5"))

    # Comma‑separated list of allowed origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def get_data_file_path(self) -> Path:
        """Return the absolute path of the data document."""
        path = Path(self.data_file)
        if path.is_absolute():
            return path
        return (PROJECT_ROOT / path).resolve()

    def get_cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def uses_default_token(self) -> bool:
        return self.admin_token == DEFAULT_ADMIN_TOKEN


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
