"""
Configuration for the arith command line.

Configuration is loaded from the [arith] section of arith.toml:

    [arith]
    log_level = "DEBUG"
    prompt = "calc"
    show_ast = true
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from arith.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "arith.toml"
LOG_LEVEL_ENV = "ARITH_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CalcConfig(BaseModel):
    """CLI behaviour settings."""

    log_level: str = "WARNING"
    prompt: str = "Enter an expression"
    show_ast: bool = False
    show_tokens: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_config(toml_path: Path | None = None) -> CalcConfig:
    """
    Load configuration from arith.toml.

    Args:
        toml_path: Path to the config file; defaults to arith.toml in the
            working directory.

    Returns:
        CalcConfig with values from file, environment, or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    path = toml_path if toml_path is not None else Path(DEFAULT_CONFIG_FILE)
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "rb") as f:
                section = tomllib.load(f).get("arith", {})
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        if not isinstance(section, dict):
            raise ConfigError(f"[arith] in {path} must be a table")
        data = dict(section)
        logger.debug("Loaded config from %s", path)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        data["log_level"] = env_level

    try:
        return CalcConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
