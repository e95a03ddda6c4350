"""
Configuration models for Inquest.

Supports configuration via YAML file, environment variables, or programmatic setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from inquest.exceptions import ConfigError


DEFAULT_CONFIG_FILES = ["inquest.yaml", "inquest.yml"]


class ShellConfig(BaseModel):
    """Interactive shell configuration."""

    prompt_name: str = Field(
        default="inquest",
        description="Session name shown in the prompt"
    )
    history_file: str | None = Field(
        default="~/.inquest_history",
        description="Readline history file (None = no history)"
    )
    history_length: int = Field(
        default=1000,
        ge=0,
        description="Maximum number of history entries kept"
    )


class RunnerConfig(BaseModel):
    """Statement runner configuration."""

    command_timeout: int = Field(
        default=60,
        ge=1,
        le=3600,
        description="Timeout in seconds for commands run by the command resource"
    )
    show_summary: bool = Field(
        default=False,
        description="Print a pass/fail summary after each statement"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level"
    )
    file: str | None = Field(
        default=None,
        description="Log file path (None = console only)"
    )
    json_format: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )


class InquestConfig(BaseSettings):
    """
    Main Inquest configuration.

    Configuration can be loaded from:
    1. YAML file (inquest.yaml or inquest.yml)
    2. Environment variables (INQUEST_* prefix)
    3. Programmatic setup
    """

    model_config = SettingsConfigDict(
        env_prefix="INQUEST_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    shell: ShellConfig = Field(default_factory=ShellConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "InquestConfig":
        """
        Load configuration from file and environment.

        Priority (highest to lowest):
        1. Specified config file, or the first default file found
           (inquest.yaml, inquest.yml)
        2. Environment variables
        3. Default values

        Raises:
            ConfigError: If the file is not valid YAML or fails validation
        """
        config_data: dict = {}

        if config_path:
            config_file = Path(config_path)
            if not config_file.exists():
                raise ConfigError(f"Configuration file not found: {config_file}")
            config_data = cls._load_yaml(config_file)
        else:
            for filename in DEFAULT_CONFIG_FILES:
                config_file = Path(filename)
                if config_file.exists():
                    config_data = cls._load_yaml(config_file)
                    break

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        """Load YAML configuration file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        return data

    def save(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def to_options(self) -> dict[str, Any]:
        """Options bag forwarded to the runner when a shell session starts."""
        return {
            "command_timeout": self.runner.command_timeout,
            "show_summary": self.runner.show_summary,
        }
