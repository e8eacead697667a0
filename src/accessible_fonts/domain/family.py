"""Font family enumeration.

This module defines the closed set of accessibility-focused font families
and every piece of display and resource data derived from them.
"""

from enum import Enum


class FontFamily(str, Enum):
    """A curated collection of accessibility-focused font families.

    Each member carries no state of its own. Display names, resource
    folders, and licensing data are pure functions of the member.
    """

    OPEN_DYSLEXIC = "openDyslexic"
    ATKINSON_HYPERLEGIBLE = "atkinsonHyperlegible"
    LEXEND = "lexend"
    INTER = "inter"
    OPEN_SANS = "openSans"
    INCONSOLATA = "inconsolata"

    @property
    def display_name(self) -> str:
        """Human-readable family name for UI labels."""
        return _DISPLAY_NAMES[self]

    @property
    def accessibility_description(self) -> str:
        """Brief description of the family's accessibility benefits."""
        return _DESCRIPTIONS[self]

    @property
    def license_type(self) -> str:
        """License under which the family is distributed."""
        return "SIL Open Font License 1.1"

    @property
    def resource_folder_name(self) -> str:
        """Folder name under ``Fonts/`` and prefix of the license file."""
        return _FOLDER_NAMES[self]

    @property
    def attribution(self) -> str:
        """Short attribution string for credits screens."""
        return _ATTRIBUTIONS[self]

    @property
    def recommended_system_pairing(self) -> str:
        """System font that pairs well with this family."""
        return _SYSTEM_PAIRINGS[self]


_DISPLAY_NAMES: dict[FontFamily, str] = {
    FontFamily.OPEN_DYSLEXIC: "OpenDyslexic",
    FontFamily.ATKINSON_HYPERLEGIBLE: "Atkinson Hyperlegible",
    FontFamily.LEXEND: "Lexend",
    FontFamily.INTER: "Inter",
    FontFamily.OPEN_SANS: "Open Sans",
    FontFamily.INCONSOLATA: "Inconsolata",
}

_DESCRIPTIONS: dict[FontFamily, str] = {
    FontFamily.OPEN_DYSLEXIC: (
        "Designed to help readers with dyslexia by using unique letter shapes"
    ),
    FontFamily.ATKINSON_HYPERLEGIBLE: (
        "Optimized for low vision readers with differentiated letter forms"
    ),
    FontFamily.LEXEND: "Research-based font designed to improve reading fluency",
    FontFamily.INTER: "Highly legible UI typeface with excellent screen readability",
    FontFamily.OPEN_SANS: "Clean, friendly typeface with excellent legibility",
    FontFamily.INCONSOLATA: "Monospace font with clear character distinction for code",
}

_FOLDER_NAMES: dict[FontFamily, str] = {
    FontFamily.OPEN_DYSLEXIC: "OpenDyslexic",
    FontFamily.ATKINSON_HYPERLEGIBLE: "AtkinsonHyperlegible",
    FontFamily.LEXEND: "Lexend",
    FontFamily.INTER: "Inter",
    FontFamily.OPEN_SANS: "OpenSans",
    FontFamily.INCONSOLATA: "Inconsolata",
}

_ATTRIBUTIONS: dict[FontFamily, str] = {
    FontFamily.OPEN_DYSLEXIC: (
        "OpenDyslexic © Abbie Gonzalez (https://opendyslexic.org), "
        "SIL Open Font License 1.1"
    ),
    FontFamily.ATKINSON_HYPERLEGIBLE: (
        "Atkinson Hyperlegible © Braille Institute (https://brailleinstitute.org), "
        "SIL Open Font License 1.1"
    ),
    FontFamily.LEXEND: (
        "Lexend © Thomas Jockin & Bonnie Shaver-Troup (https://lexend.com), "
        "SIL Open Font License 1.1"
    ),
    FontFamily.INTER: (
        "Inter © Rasmus Andersson (https://rsms.me/inter/), SIL Open Font License 1.1"
    ),
    FontFamily.OPEN_SANS: (
        "Open Sans © Steve Matteson (https://fonts.google.com/specimen/Open+Sans), "
        "SIL Open Font License 1.1"
    ),
    FontFamily.INCONSOLATA: (
        "Inconsolata © Raph Levien (https://levien.com/type/myfonts/inconsolata.html), "
        "SIL Open Font License 1.1"
    ),
}

_SYSTEM_PAIRINGS: dict[FontFamily, str] = {
    FontFamily.OPEN_DYSLEXIC: "SF Pro Text (for UI) or New York (for reading)",
    FontFamily.ATKINSON_HYPERLEGIBLE: "SF Pro Text - both are optimized for readability",
    FontFamily.LEXEND: "SF Pro Text - both prioritize reading fluency",
    FontFamily.INTER: "SF Pro Text - very similar design goals for UI",
    FontFamily.OPEN_SANS: "SF Pro Text - both are humanist sans-serifs",
    FontFamily.INCONSOLATA: "SF Mono - both are monospace with clear distinction",
}
