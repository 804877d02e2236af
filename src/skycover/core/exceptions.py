"""Custom exception hierarchy for Skycover."""

from typing import Any


class SkycoverError(Exception):
    """Base exception for all Skycover errors."""

    pass


class ConfigError(SkycoverError):
    """Configuration-related errors."""

    pass


class InvalidFormatError(SkycoverError):
    """Field data does not match the sky condition grammar."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        self.field = field
        self.value = value
        if field is not None:
            message += f" ({field}: {value!r})"
        super().__init__(message)
