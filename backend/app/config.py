"""
Configuration settings for the Auction Marketplace API.

Loads environment variables from .env file and provides typed configuration.
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Security Configuration
    AUTH_HEADER: str = Field(
        default="X-Authorization", description="Header carrying the session token"
    )
    SESSION_TOKEN_BYTES: int = Field(
        default=32, description="Random bytes per session token (hex encoded)"
    )
    BCRYPT_ROUNDS: int = Field(
        default=12, description="bcrypt cost factor used for new password salts"
    )
    PASSWORD_MIN_LENGTH: int = Field(default=8, description="Minimum password length")
    PASSWORD_MAX_LENGTH: int = Field(default=32, description="Maximum password length")
    LOGIN_RATE_LIMIT: str = Field(
        default="5/minute", description="slowapi limit applied to POST /login"
    )
    RATE_LIMIT_ENABLED: bool = Field(
        default=True, description="Enable request rate limiting"
    )

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./data/auction.db", description="SQLite database URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False, description="Echo SQL queries (for debugging)"
    )

    # Search Configuration
    SEARCH_DEFAULT_LIMIT: int = Field(
        default=10, description="Page size used when /search has no limit"
    )
    SEARCH_MAX_LIMIT: int = Field(default=100, description="Largest accepted page size")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    ENABLE_FILE_LOGGING: bool = Field(
        default=False, description="Enable logging to file"
    )
    LOG_FILE: str = Field(default="./data/auction.log", description="Log file path")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
