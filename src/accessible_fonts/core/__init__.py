"""Core services for accessible_fonts.

This module contains:

- The font catalog (static resource tables and variant resolution)
- The registrar (one-time, thread-safe family registration)
- The font factory (entry points with system-font fallback)

The catalog is stateless and pure. The registrar owns the only mutable
state in the package and guards it with a single lock.

Key classes:
- FontCatalog: Maps variants to resources and PostScript names
- FontRegistrar: Registers family font files with a backend
- FontFactory: Creates fonts, falling back to system fonts
"""

from accessible_fonts.core.catalog import (
    FontCatalog,
    name_matches_style,
    name_matches_weight,
)
from accessible_fonts.core.factory import FontFactory
from accessible_fonts.core.registrar import FontRegistrar

__all__ = [
    "FontCatalog",
    "FontFactory",
    "FontRegistrar",
    "name_matches_style",
    "name_matches_weight",
]
