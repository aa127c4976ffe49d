"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scvmongo.mongo.config import MongoConfig

logger = logging.getLogger(__name__)


class AuthConfig(BaseModel):
    """Bearer token verification."""

    jwt_secret: str = ""


class ServerConfig(BaseModel):
    """HTTP server binding."""

    host: str = "0.0.0.0"
    port: int = 8000


class Settings(BaseSettings):
    """Main configuration class."""

    environment: str = "development"
    log_level: str = "INFO"
    logfire_token: str = ""

    # Nested configuration sections
    mongo: MongoConfig = Field(default_factory=MongoConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case and check the log level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    if not settings.auth.jwt_secret:
        logger.warning("AUTH__JWT_SECRET is not set - bearer authentication is unavailable")
    return settings
