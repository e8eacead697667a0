"""Configuration management for accessible_fonts.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ResourceConfig: Location of bundled fonts and licenses
- BackendConfig: Host font backend selection
- RenderingConfig: Font creation settings
- LoggingConfig: Logging settings
- AccessibleFontsSettings: Main library settings
"""

from accessible_fonts.config.settings import (
    AccessibleFontsSettings,
    BackendConfig,
    BackendName,
    LoggingConfig,
    RenderingConfig,
    ResourceConfig,
    get_default_settings,
)

__all__ = [
    "AccessibleFontsSettings",
    "BackendConfig",
    "BackendName",
    "LoggingConfig",
    "RenderingConfig",
    "ResourceConfig",
    "get_default_settings",
]
