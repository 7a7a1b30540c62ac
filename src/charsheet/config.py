"""Configuration management for charsheet using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from charsheet.errors import ConfigError

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CHARSHEET_",
        extra="ignore",
        populate_by_name=True,
    )

    # Server Settings
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="HTTP server port", alias="APP_PORT")
    debug: bool = Field(default=False, description="Enable debug mode")
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma separated list of allowed CORS origins",
        alias="CORS_ALLOWED_ORIGINS",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/charsheet.db",
        description="Database connection URL",
        alias="DATABASE_URL",
    )

    # App config file
    config_path: Path | None = Field(
        default=None, description="Path to the JSON/YAML app config", alias="CONFIG_PATH"
    )
    default_config_path: Path = Field(
        default=Path("/app/config/config.json"),
        description="Fallback app config path when CONFIG_PATH is unset or unreadable",
    )

    # The single character served by the API
    character_id: str = Field(default="1", description="Id of the stored character")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level", alias="LOG_LEVEL")
    log_format: str = Field(
        default="console", description="Log format (console or json)", alias="LOG_FORMAT"
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Get the CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


class AppConfig(BaseModel):
    """Contents of the app config file."""

    model_config = ConfigDict(populate_by_name=True)

    welcome_message: str = Field(default="", alias="welcomeMessage")


def read_config_file(path: Path) -> AppConfig:
    """
    Read an app config file.

    JSON files are read through the YAML parser, which accepts them as-is.

    Args:
        path: Path to the config file

    Returns:
        The parsed AppConfig

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape
    """
    try:
        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def load_app_config(settings: Settings | None = None) -> AppConfig:
    """
    Load the app config, trying CONFIG_PATH first and the default path second.

    Args:
        settings: Settings to read the paths from (defaults to get_settings())

    Returns:
        The loaded AppConfig

    Raises:
        ConfigError: If neither path yields a valid config
    """
    settings = settings or get_settings()

    if settings.config_path is not None:
        try:
            config = read_config_file(settings.config_path)
            logger.info("app_config_loaded", path=str(settings.config_path))
            return config
        except ConfigError as e:
            logger.warning(
                "config_path_unusable",
                path=str(settings.config_path),
                error=str(e),
            )

    config = read_config_file(settings.default_config_path)
    logger.info("app_config_loaded", path=str(settings.default_config_path))
    return config


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
