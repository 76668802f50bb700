"""Configuration loading and validation for pkgdocs."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkgdocs.core.errors import ConfigError
from pkgdocs.core.stdlib import GO_REPO_URL, STDLIB_MODULE_PATH

DEFAULT_CONFIG_PATH = "~/.pkgdocs/config.yaml"

DOCUMENTATION_HACK_ENV = "PKGDOCS_DOCUMENTATION_HACK"
"""Environment toggle for link rewriting; only the exact value TRUE enables it."""

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FrontendConfig(BaseModel):
    """Top-level pkgdocs configuration, fixed for the life of the process."""

    model_config = ConfigDict(frozen=True)

    documentation_hack: bool = Field(
        default=False,
        description="Rewrite /pkg/ links in stored documentation to the ?tab=doc form",
    )
    stdlib_module_path: str = Field(
        default=STDLIB_MODULE_PATH, description="Module path of the standard library"
    )
    go_repo_url: str = Field(default=GO_REPO_URL, description="Standard library repository URL")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("go_repo_url")
    @classmethod
    def validate_go_repo_url(cls, v: str) -> str:
        """Validate the repository URL is an https URL."""
        if not v.startswith("https://") or v == "https://":
            raise ValueError(f"Invalid repository URL: {v!r}. Expected 'https://host/path'.")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v!r}. Expected one of {', '.join(_LOG_LEVELS)}.")
        return level


def load_config(path: str | None = None) -> FrontendConfig:
    """Load and validate configuration from a YAML file.

    A missing file at the default location yields the default configuration.

    Environment variables:
        PKGDOCS_DOCUMENTATION_HACK: enables link rewriting when exactly "TRUE".
            Any other value, or no value, disables it. The config file
            cannot set it.

    Args:
        path: Path to config file. Defaults to ~/.pkgdocs/config.yaml.

    Returns:
        Validated FrontendConfig.

    Raises:
        ConfigError: If an explicit config file is missing, or a config file
            is unreadable, invalid, or sets documentation_hack.
    """
    config_path = Path(path or DEFAULT_CONFIG_PATH).expanduser()

    data: object = {}
    if config_path.exists():
        try:
            raw = config_path.read_text()
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e

        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e
    elif path is not None:
        raise ConfigError(f"Config file not found: {config_path}")

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping")

    if "documentation_hack" in data:
        raise ConfigError(
            f"documentation_hack cannot be set in the config file; use {DOCUMENTATION_HACK_ENV}"
        )
    data["documentation_hack"] = os.environ.get(DOCUMENTATION_HACK_ENV) == "TRUE"

    try:
        return FrontendConfig(**data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
