"""
String Store Configuration Settings

All runtime configuration for the store and its TCP server. Values are read
from the environment once, at import time.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() == "true"


@dataclass
class Settings:
    """Server configuration settings."""

    # Network settings
    HOST: str = os.environ.get("STRING_STORE_HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("STRING_STORE_PORT", "7272"))

    # Store settings
    SYNCHRONIZED: bool = _env_flag("STRING_STORE_SYNCHRONIZED")

    # Connection settings
    READ_BUFFER_SIZE: int = 65536  # Longest request line the server accepts

    # Logging settings
    DEBUG: bool = _env_flag("STRING_STORE_DEBUG")
    LOG_LEVEL: str = os.environ.get("STRING_STORE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
