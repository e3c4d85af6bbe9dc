"""Configuration for vanilla."""

import logging
import os
from typing import Optional


class Config:
    """Configuration class for vanilla."""

    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @classmethod
    def get_log_level(cls, override_level: Optional[str] = None) -> str:
        """Get the log level name.

        Args:
            override_level: Optional level name to use instead of the environment

        Returns:
            Upper-cased log level name
        """
        if override_level:
            return override_level.upper()

        # Check for environment variable
        env_level = os.getenv("VANILLA_LOG_LEVEL")
        if env_level:
            return env_level.upper()

        return cls.DEFAULT_LOG_LEVEL

    @classmethod
    def configure_logging(cls, level: Optional[str] = None) -> str:
        """Configure root logging and return the level name applied.

        Raises:
            ValueError: If the level name is not a known logging level
        """
        level_name = cls.get_log_level(level)
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {level_name}")

        logging.basicConfig(level=level_name, format=cls.LOG_FORMAT)
        return level_name


# Global configuration instance
config = Config()
