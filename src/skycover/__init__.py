"""Skycover - sky condition codec for aviation weather reports."""

__version__ = "0.1.0"
