# src/config/loader.py
"""
Project configuration loader.
config/config.json is the single source of truth; secrets and
deployment-specific values are overridden from environment variables.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


# =============================================================================
# PATHS
# =============================================================================

def get_project_root() -> Path:
    """Returns the project root directory."""
    return Path(__file__).parent.parent.parent


def get_config_path() -> Path:
    """Returns the path to the configuration file."""
    return get_project_root() / "config" / "config.json"


def load_config_json(required: bool = True) -> dict[str, Any]:
    """
    Loads config.json into a dict.

    Args:
        required: Raise if the file is missing instead of returning {}
    """
    config_path = get_config_path()
    if not config_path.exists():
        if required:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# CONFIGURATION SECTIONS
# =============================================================================

class SystemSettings(BaseModel):
    """System settings."""
    PROJECT_NAME: str = "order_service"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"


class DeploymentSettings(BaseModel):
    """Where the HTTP service binds."""
    ORDER_SERVICE_HOST: str = "0.0.0.0"
    ORDER_SERVICE_PORT: int = 8080


class LoggingSettings(BaseModel):
    """Logging settings."""
    LOG_LEVEL: str = "DEBUG"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_FORMAT: str = "colored"
    LOG_MAX_BYTES: int = 10485760


class GoogleMapsSettings(BaseModel):
    """Google Maps Distance Matrix settings."""
    GOOGLE_MAPS_API_KEY: str = ""
    GOOGLE_MAPS_BASE_URL: str = "https://maps.googleapis.com"
    GOOGLE_MAPS_TIMEOUT: float = 10.0

    @field_validator("GOOGLE_MAPS_API_KEY", mode="before")
    @classmethod
    def get_from_env(cls, v: str) -> str:
        """Reads the API key from the environment when not set."""
        if not v:
            return os.getenv("GOOGLE_MAPS_API_KEY", "")
        return v

    @field_validator("GOOGLE_MAPS_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class DatabaseSettings(BaseModel):
    """PostgreSQL settings."""
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "order_service"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_MIN_POOL_SIZE: int = 2
    DB_MAX_POOL_SIZE: int = 10
    DB_COMMAND_TIMEOUT: int = 60

    @field_validator("DB_PASSWORD", mode="before")
    @classmethod
    def get_from_env(cls, v: str) -> str:
        """Reads the password from the environment when not set."""
        if not v:
            return os.getenv("DB_PASSWORD", "")
        return v

    @property
    def dsn(self) -> str:
        """Returns the PostgreSQL DSN."""
        return (
            f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


class PaginationSettings(BaseModel):
    """Order listing bounds."""
    PAGE_SIZE: int = Field(10, ge=1)


# =============================================================================
# MAIN SETTINGS CLASS
# =============================================================================

class Settings(BaseSettings):
    """
    Application settings.
    Aggregates every configuration section.
    """
    system: SystemSettings = Field(default_factory=SystemSettings)
    deployment: DeploymentSettings = Field(default_factory=DeploymentSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    google_maps: GoogleMapsSettings = Field(default_factory=GoogleMapsSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @classmethod
    def from_config_json(cls) -> "Settings":
        """
        Builds Settings from config.json.
        Secrets and deployment values are overridden from the environment.
        """
        config_data = load_config_json(required=False)

        # Keys starting with _comment_ are documentation only
        filtered_data = {k: v for k, v in config_data.items() if not k.startswith("_comment_")}

        return cls(
            system=SystemSettings(
                PROJECT_NAME=filtered_data.get("PROJECT_NAME", "order_service"),
                VERSION=filtered_data.get("VERSION", "1.0.0"),
                DEBUG=filtered_data.get("DEBUG", False),
                ENVIRONMENT=os.getenv("ENVIRONMENT", filtered_data.get("ENVIRONMENT", "development")),
            ),
            deployment=DeploymentSettings(
                ORDER_SERVICE_HOST=os.getenv("ORDER_SERVICE_HOST", filtered_data.get("ORDER_SERVICE_HOST", "0.0.0.0")),
                ORDER_SERVICE_PORT=int(os.getenv("PORT", filtered_data.get("ORDER_SERVICE_PORT", 8080))),
            ),
            logging=LoggingSettings(
                LOG_LEVEL=filtered_data.get("LOG_LEVEL", "DEBUG"),
                LOG_TO_FILE=filtered_data.get("LOG_TO_FILE", False),
                LOG_FILE_PATH=filtered_data.get("LOG_FILE_PATH", "logs/app.log"),
                LOG_FORMAT=filtered_data.get("LOG_FORMAT", "colored"),
                LOG_MAX_BYTES=filtered_data.get("LOG_MAX_BYTES", 10485760),
            ),
            google_maps=GoogleMapsSettings(
                GOOGLE_MAPS_API_KEY=os.getenv("GOOGLE_MAPS_API_KEY", filtered_data.get("GOOGLE_MAPS_API_KEY", "")),
                GOOGLE_MAPS_BASE_URL=os.getenv(
                    "GOOGLE_MAPS_BASE_URL",
                    filtered_data.get("GOOGLE_MAPS_BASE_URL", "https://maps.googleapis.com"),
                ),
                GOOGLE_MAPS_TIMEOUT=filtered_data.get("GOOGLE_MAPS_TIMEOUT", 10.0),
            ),
            database=DatabaseSettings(
                DB_HOST=os.getenv("DB_HOST", filtered_data.get("DB_HOST", "localhost")),
                DB_PORT=int(os.getenv("DB_PORT", filtered_data.get("DB_PORT", 5432))),
                DB_NAME=os.getenv("DB_NAME", filtered_data.get("DB_NAME", "order_service")),
                DB_USER=os.getenv("DB_USER", filtered_data.get("DB_USER", "postgres")),
                DB_PASSWORD=os.getenv("DB_PASSWORD", filtered_data.get("DB_PASSWORD", "")),
                DB_MIN_POOL_SIZE=filtered_data.get("DB_MIN_POOL_SIZE", 2),
                DB_MAX_POOL_SIZE=filtered_data.get("DB_MAX_POOL_SIZE", 10),
                DB_COMMAND_TIMEOUT=filtered_data.get("DB_COMMAND_TIMEOUT", 60),
            ),
            pagination=PaginationSettings(
                PAGE_SIZE=int(os.getenv("PAGE_SIZE", filtered_data.get("PAGE_SIZE", 10))),
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Returns the settings singleton.
    Loads .env from the project root first, if present.
    """
    from dotenv import load_dotenv

    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings.from_config_json()


settings = get_settings()
