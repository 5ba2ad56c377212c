"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Web server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Catalog
    catalog_path: Path = Path("data/menu.csv")
    public_dir: Path = Path("public")

    # Gacha
    currency_symbol: str = "¥"
    max_draws: int = Field(default=10000, ge=1)  # Upper bound on draws per request


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
