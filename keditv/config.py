"""
Configuration management for the keditv catalog backend.
Uses pydantic-settings for environment variable loading.
"""
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "KediTV Catalog"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Configuration
    # Default allows all origins for development; set KEDITV_CORS_ORIGINS for production
    cors_origins: list[str] = ["*"]

    # Rate Limiting (playlist uploads)
    rate_limit_per_minute: int = 30

    # Playlist loaded into the catalog on startup (local M3U file)
    playlist_path: Optional[str] = None

    # Provenance tag written on every parsed record
    content_source: str = "IPTV"

    # Listing
    default_page_size: int = 50
    max_page_size: int = 500

    # Admin API key for protected endpoints
    admin_api_key: str = "dev-admin-key"

    # Pydantic V2 configuration
    model_config = SettingsConfigDict(env_prefix="KEDITV_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
