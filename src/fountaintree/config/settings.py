"""fountaintree configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fountaintree.exceptions import ConfigurationError, check_config_keys

# Project config files looked up in the working directory, first match wins
PROJECT_CONFIG_NAMES = (
    "fountaintree.yaml",
    "fountaintree.yml",
    "fountaintree.toml",
    "fountaintree.json",
)


class FountainTreeSettings(BaseSettings):
    """Parser and logging options.

    Values passed to the constructor (or read from a config file) win over
    ``FOUNTAINTREE_*`` environment variables, which win over ``.env`` and
    the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOUNTAINTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parenthetical_lookahead: int = Field(
        default=3,
        description=(
            "Continuation lines scanned for the closing parenthesis of a "
            "multi-line parenthetical"
        ),
        ge=1,
    )

    debug: bool = Field(default=False, description="Add call-site info to logs")
    log_level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ``~`` in the log file path."""
        if v is None:
            return None
        if isinstance(v, str | Path):
            return Path(os.path.expandvars(str(v))).expanduser().resolve()
        raise ValueError(f"log_file must be a path, got {type(v).__name__}")

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> str:
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string")
        return v.upper() if info.field_name == "log_level" else v.lower()

    @classmethod
    def from_file(cls, config_path: Path | str) -> FountainTreeSettings:
        """Load settings from a YAML, TOML or JSON file.

        Raises:
            ConfigurationError: If the file is missing, unreadable, in an
                unknown format, or holds invalid values.
        """
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(
                message=f"Configuration file not found: {path}",
                hint="Check the --config path.",
                details={"file": str(path)},
            )

        data = _read_config(path)
        check_config_keys(data)

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(
                message=f"Invalid configuration in {path}",
                hint="Fix the listed settings.",
                details={
                    str(err["loc"][0]): err["msg"] for err in e.errors() if err["loc"]
                },
            ) from e


def _read_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        elif suffix == ".toml":
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        elif suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={"file": str(path), "detected_format": suffix},
            )
    except (
        OSError,
        UnicodeDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
        json.JSONDecodeError,
    ) as e:
        raise ConfigurationError(
            message=f"Could not read configuration file: {path}",
            details={"file": str(path), "reader_error": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Configuration file must hold a mapping: {path}",
            details={"file": str(path), "found": type(data).__name__},
        )
    return data


def find_project_config(directory: Path | None = None) -> Path | None:
    """Return the project config file in ``directory`` (default: cwd)."""
    directory = directory or Path.cwd()
    for name in PROJECT_CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(config_file: Path | str | None = None) -> FountainTreeSettings:
    """Resolve settings from an explicit file, the project file, or the env.

    Args:
        config_file: Explicit config file; the project config in the
            working directory is used when omitted.
    """
    path = Path(config_file) if config_file else find_project_config()
    if path is None:
        return FountainTreeSettings()
    return FountainTreeSettings.from_file(path)


_settings: FountainTreeSettings | None = None


def get_settings() -> FountainTreeSettings:
    """Return the shared settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: FountainTreeSettings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the shared settings so the next lookup reloads them."""
    global _settings
    _settings = None
