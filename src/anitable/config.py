"""Configuration management using Pydantic models."""

import logging
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import DEFAULT_BASE_URL, DEFAULT_CONFIG_PATH, DaySelector
from .errors import ConfigError

logger = logging.getLogger(__name__)


class APIConfig(BaseModel):
    """Anissia API configuration."""
    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")


class ViewerConfig(BaseModel):
    """Terminal viewer settings."""
    start_day: Optional[int] = Field(default=None, ge=0, le=8)

    def initial_day(self) -> DaySelector:
        if self.start_day is None:
            return DaySelector.today()
        return DaySelector.from_code(self.start_day)


class Config(BaseModel):
    """Root configuration model."""
    api: APIConfig = Field(default_factory=APIConfig)
    viewer: ViewerConfig = Field(default_factory=ViewerConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from YAML; a missing file yields the defaults."""
    config_path = Path(path or DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return Config()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
        if not isinstance(raw_config, dict):
            logger.error(f"Failed to load config: {config_path} must contain a mapping")
            raise ConfigError(f"{config_path} must contain a mapping")
        config = Config(**raw_config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Failed to load config: {e}")
        raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

    logger.info(f"Loaded configuration from {config_path}")
    return config
