"""Configuration loading from environment variables and an optional .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase (listing store)
    supabase_url: str = ""
    supabase_service_key: str = ""
    listings_table: str = "listings"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Timeouts
    default_timeout: int = 30

    # Server info
    server_name: str = "PazarGlobal MCP Server"
    server_version: str = "1.0.0"

    # Host and port
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def store_configured(self) -> bool:
        """Check if the listing store endpoint is configured."""
        return bool(self.supabase_url)

    @property
    def listings_endpoint(self) -> str:
        """PostgREST endpoint for the listings table."""
        return f"{self.supabase_url.rstrip('/')}/rest/v1/{self.listings_table}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
