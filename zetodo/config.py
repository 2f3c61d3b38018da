"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by a ZETODO_-prefixed environment variable or .env
    - get_settings() is cached (lru_cache): single instance per process
    - database_url is derived from database_path; ':memory:' maps to an in-memory store

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Store file lives in the user data directory by default, like the desktop app
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "zetodo"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="ZETODO_", case_sensitive=False,
    )

    app_name: str = "ZeTodo"
    app_version: str = "0.1.0"
    app_description: str = "Local kanban board store"

    # Database
    database_path: str = str(DEFAULT_DATA_DIR / "zetodo.db")
    database_echo: bool = False

    @field_validator("database_path", mode="before")
    @classmethod
    def expand_user(cls, v: str) -> str:
        if isinstance(v, str) and v != ":memory:":
            return str(Path(v).expanduser())
        return v

    @property
    def database_url(self) -> str:
        if self.database_path == ":memory:":
            return "sqlite://"
        return f"sqlite:///{self.database_path}"

    # API
    cors_origins: list[str] = ["http://localhost:1420", "tauri://localhost"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
