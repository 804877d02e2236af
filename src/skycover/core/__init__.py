"""Core utilities and exceptions."""

from skycover.core.exceptions import (
    ConfigError,
    InvalidFormatError,
    SkycoverError,
)

__all__ = [
    "SkycoverError",
    "ConfigError",
    "InvalidFormatError",
]
