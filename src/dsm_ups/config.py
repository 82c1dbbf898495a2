"""
Configuration management for DSM UPS notification handling.

Uses Pydantic Settings for environment variable validation and type safety.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class NormalizerConfig(BaseSettings):
    """Notification normalizer configuration."""

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    parse_sender: bool = Field(
        default=True,
        description="Extract the sending host from the 'From HOST' trailer"
    )
    log_unmatched: bool = Field(
        default=True,
        description="Log a warning for notifications that match no known template"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v

    class Config:
        env_prefix = "DSM_UPS_"
        case_sensitive = False


# Global config instance
_config: Optional[NormalizerConfig] = None


def get_config() -> NormalizerConfig:
    """
    Get the global configuration instance.

    Lazily loads configuration on first access.

    Returns:
        NormalizerConfig: The global configuration instance
    """
    global _config
    if _config is None:
        _config = NormalizerConfig()
    return _config


def reload_config() -> NormalizerConfig:
    """
    Reload configuration from environment variables.

    Useful for testing or when environment changes.
    """
    global _config
    _config = NormalizerConfig()
    return _config
