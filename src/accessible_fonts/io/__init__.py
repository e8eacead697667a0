"""Resource and host I/O layer for accessible_fonts.

This module finds bundled font files on disk and talks to the host font
system that registers and instantiates them.

Key responsibilities:
- Locate font and license files under the resource root
- Read PostScript names through fonttools
- Register fonts with the host (fonttools registry or CoreText)

Key classes:
- FontResourceLocator: Find font and license files
- FontToolsBackend: Portable in-process font registry
- CoreTextBackend: macOS CoreText registration
"""

from accessible_fonts.io.backends import (
    BACKEND_NAMES,
    CoreTextBackend,
    FontBackend,
    FontToolsBackend,
    create_backend,
)
from accessible_fonts.io.locator import FontResourceLocator

__all__ = [
    "BACKEND_NAMES",
    "CoreTextBackend",
    "FontBackend",
    "FontResourceLocator",
    "FontToolsBackend",
    "create_backend",
]
