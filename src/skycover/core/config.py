"""Configuration management using TOML."""

import logging
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from skycover.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_SECTION = "skycover"


class SkycoverConfig(BaseModel):
    """Settings for reading and writing sky condition tokens."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    height_scale: int = Field(
        default=100, gt=0, description="Feet per height unit in a report token"
    )
    separators: str = Field(
        default=" ",
        min_length=1,
        description="Characters separating layers in a sky condition group",
    )

    @field_validator("separators")
    @classmethod
    def validate_separators(cls, v: str) -> str:
        if any(ch.isalnum() or ch == "/" for ch in v):
            raise ValueError("Separators must not include token characters")
        return v


DEFAULT_CONFIG = SkycoverConfig()


def load_config(path: Path) -> SkycoverConfig:
    """Load settings from the ``[skycover]`` table of a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Loaded settings, or the defaults if the file does not exist

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return DEFAULT_CONFIG

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config: {e}") from e

    section: Any = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_SECTION}' in {path} must be a table")

    try:
        return SkycoverConfig(**section)
    except ValidationError as e:
        logger.warning(f"Invalid config in {path}: {e}")
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def save_config(config: SkycoverConfig, path: Path) -> None:
    """Write settings to a TOML file, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump({CONFIG_SECTION: config.model_dump()}, f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e
