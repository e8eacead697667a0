"""AccessibleFonts - Accessibility-focused fonts with automatic fallback.

AccessibleFonts registers a curated set of bundled font families
(OpenDyslexic, Atkinson Hyperlegible, Lexend, Inter, Open Sans,
Inconsolata) with the host font system and resolves requests for a
family, weight, and style to the nearest font the family ships. When a
font cannot be provided, a system font of the same weight is returned.

Example:
    >>> from accessible_fonts import AccessibleFonts, FontFamily, FontWeight
    >>> fonts = AccessibleFonts()
    >>> font = fonts.font(FontFamily.LEXEND, 17, weight=FontWeight.MEDIUM)
"""

from accessible_fonts.api import AccessibleFonts
from accessible_fonts.domain import (
    FontFamily,
    FontHandle,
    FontResource,
    FontStyle,
    FontVariant,
    FontWeight,
    TextStyle,
)
from accessible_fonts.exceptions import AccessibleFontsError, ResourceMissingError

__version__ = "0.1.0"

__all__ = [
    "AccessibleFonts",
    "AccessibleFontsError",
    "FontFamily",
    "FontHandle",
    "FontResource",
    "FontStyle",
    "FontVariant",
    "FontWeight",
    "ResourceMissingError",
    "TextStyle",
    "__version__",
]
