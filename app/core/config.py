"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Training Service"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Training plans, reviews, favorites, athlete sessions and goals."
    AUTHORS: List[str] = []

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Routing
    API_PREFIX: str = "/api"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Explicit URL wins over the parts above (e.g. sqlite:///./training.db)
    DATABASE_URL: str = ""

    # Upper bound for user existence checks against the shared store
    USER_LOOKUP_TIMEOUT_MS: int = 2000

    # Gateway integration
    CALLER_IDENTITY_HEADER: str = "dev-email"

    # Wire behaviour
    MESSAGES_LOCALE: Literal["en", "es"] = "en"
    GROUP_BY_SHAPE: Literal["columns", "rows"] = "columns"
    INTERVAL_MISSING_FIELDS_STATUS: int = 401

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                                 f":{self.DATABASE_PORT}"
                                 f"/{self.DATABASE_DBNAME}")
        return self


# Global settings instance
settings = Settings()
