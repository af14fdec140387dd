"""Configuration loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import default_key_dir, runtime_config_dir

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class KeysConfig(BaseModel):
    directory: Path = Field(default_factory=default_key_dir, description="Where keygen writes key files")
    public_comment: str = Field(default="", description="Default untrusted comment for public keys")
    private_comment: str = Field(default="", description="Default untrusted comment for private keys")

    @field_validator("directory")
    @classmethod
    def _expand_directory(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("public_comment", "private_comment")
    @classmethod
    def _single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("Untrusted comments must be a single line")
        return value


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    keys: KeysConfig = Field(default_factory=KeysConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".signify" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)

