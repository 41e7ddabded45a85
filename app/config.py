"""
Application Configuration
Loads and validates environment variables
"""
import os
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Coffee Orders"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Storage
    DATA_DIR: str = os.getenv("COFFEE_DATA_DIR", "data")
    ORDERS_FILE: str = "orders.json"
    DRINK_CHOICES_FILE: str = "drink-choices.json"

    # CORS
    CORS_ORIGINS: str = "*"
    CORS_ALLOW_CREDENTIALS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS origins string to list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def orders_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.ORDERS_FILE)

    @property
    def drink_choices_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.DRINK_CHOICES_FILE)

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
