"""Configuration settings for AccessibleFonts."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class BackendName(str, Enum):
    """Host font backend selection."""

    AUTO = "auto"
    FONTTOOLS = "fonttools"
    CORETEXT = "coretext"


class ResourceConfig(BaseModel):
    """Where bundled font and license files live."""

    root: Path | None = Field(
        default=None,
        description="Resource root containing Fonts/ and Licenses/ (None = bundled)",
    )


class BackendConfig(BaseModel):
    """Host font backend configuration."""

    name: BackendName = Field(
        default=BackendName.AUTO,
        description="Backend used to register and instantiate fonts",
    )


class RenderingConfig(BaseModel):
    """Configuration for font creation."""

    dynamic_type_scale: float = Field(
        default=1.0,
        ge=0.5,
        le=4.0,
        description="Multiplier applied to requested sizes (1.0 = default content size)",
    )
    log_fallbacks: bool = Field(
        default=True,
        description="Log a debug line whenever a system font substitutes a custom font",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AccessibleFontsSettings(BaseModel):
    """Main library settings."""

    resources: ResourceConfig = Field(default_factory=ResourceConfig)
    backend: BackendConfig = Field(default_factory=BackendConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AccessibleFontsSettings:
    """Get default library settings."""
    return AccessibleFontsSettings()
