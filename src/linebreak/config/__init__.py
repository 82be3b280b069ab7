"""Configuration management for linebreak.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, directly by library
callers, or taken from the defaults.

Key classes:
- Options: Per-paragraph line-breaking options
- BreakerConfig: Algorithm selection
- LoggingConfig: Logging settings
- LineBreakSettings: Main application settings
"""

from linebreak.config.settings import (
    Algorithm,
    BreakerConfig,
    LineBreakSettings,
    LoggingConfig,
    Options,
    get_default_settings,
)

__all__ = [
    "Algorithm",
    "BreakerConfig",
    "LineBreakSettings",
    "LoggingConfig",
    "Options",
    "get_default_settings",
]
