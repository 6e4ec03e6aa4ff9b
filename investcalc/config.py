"""
Application settings.
Loaded from environment variables (or a local .env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_NAME: str = "Investment Calculator"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ======================
    # HTTP server
    # ======================
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 3000
    # Upper bound on `years` accepted over HTTP; each year is one timeline row.
    MAX_PROJECTION_YEARS: int = 1000
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
