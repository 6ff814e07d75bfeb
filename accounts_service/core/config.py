"""
Configuration settings for the API.
Loads environment variables and provides application settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Database
    DATABASE_URL: str = "sqlite:///./accounts.db"
    DB_ECHO: bool = False

    # Customer registry
    CUSTOMER_SERVICE_URL: str = "http://localhost:8080"
    CUSTOMER_SERVICE_TIMEOUT: float = 5.0

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Accounts Service"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "REST API for bank accounts, deposits and withdrawals"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create global settings instance
settings = Settings()
