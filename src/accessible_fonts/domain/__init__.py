"""Domain models for accessible_fonts.

This module contains the value types describing font families, weights,
styles, variants, resources, and the font handles returned to callers.
All models are immutable and safe to share across threads.

Key classes:
- FontFamily: Closed set of bundled accessibility families
- FontWeight: Nine CSS-style weights, ordered by numeric value
- FontStyle: Normal or italic
- FontVariant: A requested (family, weight, style)
- FontResource: One bundled font file and its canonical name
- FontHandle: A font instantiated by a backend
"""

from accessible_fonts.domain.family import FontFamily
from accessible_fonts.domain.variant import (
    FontHandle,
    FontResource,
    FontStyle,
    FontVariant,
    TextStyle,
)
from accessible_fonts.domain.weight import FontWeight

__all__: list[str] = [
    # Enums
    "FontFamily",
    "FontStyle",
    "FontWeight",
    "TextStyle",
    # Value types
    "FontHandle",
    "FontResource",
    "FontVariant",
]
