"""Font variant, resource, and handle value types.

All types here are immutable value objects. Variants are built per lookup
and never persisted; resources are declared once in the catalog.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from accessible_fonts.domain.family import FontFamily
from accessible_fonts.domain.weight import FontWeight


class FontStyle(str, Enum):
    """Upright or slanted style."""

    NORMAL = "normal"
    ITALIC = "italic"


class TextStyle(str, Enum):
    """Dynamic Type text style a font is meant to scale with."""

    LARGE_TITLE = "large_title"
    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    CALLOUT = "callout"
    FOOTNOTE = "footnote"
    CAPTION = "caption"
    CAPTION2 = "caption2"


@dataclass(frozen=True)
class FontVariant:
    """A concrete (family, weight, style) combination requested by a caller.

    Attributes:
        family: The font family
        weight: The requested weight
        style: The requested style
    """

    family: FontFamily
    weight: FontWeight
    style: FontStyle = FontStyle.NORMAL

    def __str__(self) -> str:
        suffix = " Italic" if self.style == FontStyle.ITALIC else ""
        return f"{self.family.display_name} {self.weight.display_name}{suffix}"


@dataclass(frozen=True)
class FontResource:
    """One physical font file belonging to a family.

    Attributes:
        file_name: File name without extension
        file_extension: Extension without the dot (e.g. "ttf", "otf")
        canonical_name: PostScript name the host uses to find the font
    """

    file_name: str
    file_extension: str
    canonical_name: str

    @property
    def full_file_name(self) -> str:
        """File name including extension."""
        return f"{self.file_name}.{self.file_extension}"


@dataclass(frozen=True)
class FontHandle:
    """A drawable font returned by a font backend.

    Attributes:
        name: PostScript name of the font, or the system font name on fallback
        size: Point size after Dynamic Type scaling
        weight: Weight the font was requested with
        style: Style the font was requested with
        text_style: Dynamic Type style the size is relative to
        path: Font file backing the handle (None for system fonts)
        is_fallback: True if this is a system font substitute
    """

    name: str
    size: float
    weight: FontWeight = FontWeight.REGULAR
    style: FontStyle = FontStyle.NORMAL
    text_style: TextStyle = TextStyle.BODY
    path: Path | None = None
    is_fallback: bool = False
