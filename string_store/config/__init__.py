"""Configuration module for String Store."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
