"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    github_client_id: str
    github_client_secret: str
    github_oauth_url: str = "https://github.com/login/oauth/access_token"
    github_api_url: str = "https://api.github.com"
    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
