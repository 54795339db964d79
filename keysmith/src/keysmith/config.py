"""Configuration loading utilities for keysmith."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .crypto.algorithms import normalize_hash
from .exceptions import ConfigError, UnsupportedAlgorithmError
from .paths import config_search_paths


class KeyConfig(BaseModel):
    modulus_bits: int = Field(default=2048, ge=1024, description="RSA modulus length in bits")
    hash_algorithm: str = Field(default="SHA-256", description="Hash bound to generated keys")

    @field_validator("hash_algorithm")
    @classmethod
    def _validate_hash(cls, value: str) -> str:
        try:
            return normalize_hash(value)
        except UnsupportedAlgorithmError as exc:
            raise ValueError(str(exc)) from None


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    keys: KeyConfig = Field(default_factory=KeyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "KeyConfig",
    "LoggingConfig",
    "DEFAULT_CONFIG",
    "config_search_paths",
    "load_config",
    "dump_default_config",
]
