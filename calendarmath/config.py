"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import List

import pendulum
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .domain.exceptions import ConfigError
from .domain.parsing import DEFAULT_INPUT_FORMATS, SCHEDULE_FORMAT


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "UTC"  # Zone for inputs without an explicit offset
    log_level: str = "WARNING"
    input_formats: List[str] = Field(default_factory=lambda: list(DEFAULT_INPUT_FORMATS))
    schedule_format: str = SCHEDULE_FORMAT

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is a known IANA zone."""
        try:
            pendulum.timezone(value)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate a standard logging level name."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("input_formats")
    @classmethod
    def validate_input_formats(cls, value: List[str]) -> List[str]:
        """Reject empty formats and drop duplicates, keeping order."""
        if any(not fmt.strip() for fmt in value):
            raise ValueError("input_formats must not contain empty entries")
        seen: set[str] = set()
        deduped: List[str] = []
        for fmt in value:
            if fmt not in seen:
                deduped.append(fmt)
                seen.add(fmt)
        return deduped

    @field_validator("schedule_format")
    @classmethod
    def validate_schedule_format(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("schedule_format must not be empty")
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc

    @classmethod
    def load_or_default(cls, config_path: Path | None = None) -> "AppConfig":
        """Load the config file if there is one, otherwise use the defaults."""
        path = config_path or get_default_config_path()
        if config_path is None and not path.exists():
            return cls()
        return cls.load_from_yaml(path)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    config_path = Path.cwd() / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
