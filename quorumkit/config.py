"""
Configuration management for quorumkit.
"""
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from ``QUORUMKIT_*`` environment variables or ``.env``."""

    # Aggregation
    quorum_size: int = 2
    quorum_ratio: float = 2.0 / 3.0

    # Logging
    log_level: str = "WARNING"

    @field_validator("quorum_size")
    @classmethod
    def validate_quorum_size(cls, v):
        """Quorum threshold must be a positive integer."""
        if v <= 0:
            raise ValueError("quorum_size must be positive")
        return v

    @field_validator("quorum_ratio")
    @classmethod
    def validate_quorum_ratio(cls, v):
        """Ratio is a fraction of the electorate."""
        if not 0.0 < v <= 1.0:
            raise ValueError("quorum_ratio must be in (0, 1]")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Accept any standard logging level name, case-insensitively."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "env_prefix": "QUORUMKIT_",
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Return settings freshly read from the environment."""
    return Settings()
