"""Utility functions for linebreak.

This module provides utility functions including:

- Logging setup and configuration
- Breaking statistics collection
"""

from linebreak.utils.logging import (
    BreakLogger,
    BreakStats,
    configure_logging,
)

__all__ = [
    "BreakLogger",
    "BreakStats",
    "configure_logging",
]
