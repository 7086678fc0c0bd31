"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Carteira"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/carteira.db"

    # Accounts
    min_password_length: int = 6
    new_account_window_minutes: int = 5  # Sign-ins younger than this seed categories

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:8081"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
