"""
Centralized configuration for the LanChat backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, TRANSLATE_*).
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "LanChat API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase (account & profile store)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_users_table: str = "users"

    # Session coordinator
    auth_storage_key: str = "lanchat_auth"
    auth_timeout_seconds: float = 10.0
    verification_code_length: int = 6
    session_storage_path: Path = Path.home() / ".lanchat" / "session.json"

    # Translation proxy
    translate_api_url: str = "https://translate.googleapis.com/translate_a/single"
    translate_timeout_seconds: float = 15.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
