"""Utility functions for accessible_fonts.

This module provides utility functions including:

- Logging setup and configuration
- Registration statistics tracking
"""

from accessible_fonts.utils.logging import (
    RegistrationLogger,
    RegistrationStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "RegistrationLogger",
    "RegistrationStats",
    "configure_logging",
    "get_logger",
]
