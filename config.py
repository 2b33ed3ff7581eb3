"""
Configuration for Po Helper.
"""

import os
from dataclasses import dataclass

# Library version - update this for each release
VERSION = "1.2.0"


@dataclass
class Config:
    """Application configuration."""

    # Server settings
    HOST: str = os.getenv("PO_HELPER_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PO_HELPER_PORT", "18422"))

    # Logging
    LOG_LEVEL: str = os.getenv("PO_HELPER_LOG_LEVEL", "info")

    # Text encoding used by the plain digest helpers
    HASH_ENCODING: str = os.getenv("PO_HELPER_HASH_ENCODING", "utf-8")

    # Suffix used by constrain_length when none is given
    TRUNCATION_SUFFIX: str = "..."

    def __post_init__(self):
        """Normalise values read from the environment."""
        self.LOG_LEVEL = self.LOG_LEVEL.lower()

    @property
    def python_log_level(self) -> str:
        """Log level name for the logging module."""
        return self.LOG_LEVEL.upper()


# Global config instance
config = Config()
