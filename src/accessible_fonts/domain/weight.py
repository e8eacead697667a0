"""Font weight enumeration on the CSS 100-900 scale."""

from enum import Enum
from functools import total_ordering


@total_ordering
class FontWeight(Enum):
    """Font weights available for accessibility-focused fonts.

    Not all families ship every weight. Members are totally ordered by
    their numeric value so the catalog can fall back to the nearest
    available weight.
    """

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900

    @property
    def numeric_value(self) -> int:
        """CSS-style numeric weight."""
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable weight name."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_numeric(cls, value: int) -> "FontWeight":
        """Look up a weight by its numeric value.

        Raises:
            ValueError: If value is not one of 100, 200, ..., 900
        """
        return cls(value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FontWeight):
            return NotImplemented
        return self.value < other.value


_DISPLAY_NAMES: dict[FontWeight, str] = {
    FontWeight.THIN: "Thin",
    FontWeight.EXTRA_LIGHT: "Extra Light",
    FontWeight.LIGHT: "Light",
    FontWeight.REGULAR: "Regular",
    FontWeight.MEDIUM: "Medium",
    FontWeight.SEMIBOLD: "Semibold",
    FontWeight.BOLD: "Bold",
    FontWeight.EXTRA_BOLD: "Extra Bold",
    FontWeight.BLACK: "Black",
}
