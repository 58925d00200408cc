"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://inventory:inventory_dev_password@db:5432/inventory"
    create_tables_on_startup: bool = False

    # CORS
    cors_origins: list[str] = ["*"]

    # Catalog
    low_stock_threshold: int = 5
    default_page_size: int = 10
    max_page_size: int = 100

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
