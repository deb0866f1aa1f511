"""
Centralized Configuration Management

All environment variables are defined here using Pydantic Settings.
This provides validation, type safety, and documentation in one place.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or a .env file.

    To use in your code:
        from config import settings
        db_url = settings.get_db_url()
    """

    # Database Configuration
    DB_URL: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection string for dev"
    )
    DB_URL_PROD: str = Field(default="", description="MongoDB connection string for production")
    DB_NAME: str = Field(default="onlineshop_dev", description="Database name")

    # Application Settings
    DEBUG_LEVEL: int = Field(default=0, description="Debug verbosity level (0-3)")
    ENVIRONMENT: str = Field(
        default="development", description="Environment: development, staging, production"
    )

    # Logging
    LOG_DIR: str = Field(default="logs", description="Directory for the rotating log files")

    # CORS Configuration
    CORS_ORIGINS: str | list[str] = Field(
        default="*", description="Comma-separated list of allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DEBUG_LEVEL")
    @classmethod
    def validate_debug_level(cls, v):
        if v not in [0, 1, 2, 3]:
            raise ValueError("DEBUG_LEVEL must be 0, 1, 2, or 3")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated CORS origins into a list"""
        if isinstance(v, list):
            return v
        if v == "*":
            return ["*"]
        return [origin.strip() for origin in v.split(",")]

    def get_db_url(self, use_prod: bool = False) -> str:
        """Get database URL based on environment"""
        return self.DB_URL_PROD if use_prod else self.DB_URL

    def get_db_name(self, use_prod: bool = False) -> str:
        """Get database name based on environment"""
        return "onlineshop" if use_prod else self.DB_NAME

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT.lower() == "production"


# Singleton instance - import this throughout your application
settings = Settings()
