import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_OVERRIDE_TYPES: dict[str, type] = {
    "catalog_api_base_url": str,
    "default_page_size": int,
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Catalog Admin"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Catalog REST backend
    catalog_api_base_url: str = "http://localhost:5000/api"
    catalog_api_timeout: float = 30.0

    # List screens
    default_page_size: int = 20

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore (outbound HTTP)
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_catalog_api: str = "INFO"      # Catalog API client
    log_level_screens: str = "INFO"          # List screens and forms

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime overrides from data/settings.json into the settings."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key, expected in _OVERRIDE_TYPES.items():
                    value = overrides.get(key)
                    # bool is an int subclass
                    if isinstance(value, expected) and not isinstance(value, bool):
                        object.__setattr__(self, key, value)
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance (reads .env once)."""
    return Settings()
