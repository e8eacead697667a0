"""Unit tests for domain models.

Tests for FontFamily, FontWeight, FontVariant, FontResource, and FontHandle.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from accessible_fonts.domain import (
    FontFamily,
    FontHandle,
    FontResource,
    FontStyle,
    FontVariant,
    FontWeight,
    TextStyle,
)


class TestFontFamily:
    """Tests for FontFamily enum."""

    def test_closed_set(self):
        """Test the six bundled families in declaration order."""
        assert [f.value for f in FontFamily] == [
            "openDyslexic",
            "atkinsonHyperlegible",
            "lexend",
            "inter",
            "openSans",
            "inconsolata",
        ]

    def test_lookup_by_identifier(self):
        """Test a family can be looked up by its stable identifier."""
        assert FontFamily("openSans") is FontFamily.OPEN_SANS

    def test_display_names(self):
        """Test display names used in UI labels."""
        assert FontFamily.OPEN_DYSLEXIC.display_name == "OpenDyslexic"
        assert FontFamily.ATKINSON_HYPERLEGIBLE.display_name == "Atkinson Hyperlegible"
        assert FontFamily.OPEN_SANS.display_name == "Open Sans"

    def test_resource_folder_names(self):
        """Test folder names have no spaces."""
        assert FontFamily.ATKINSON_HYPERLEGIBLE.resource_folder_name == "AtkinsonHyperlegible"
        assert FontFamily.OPEN_SANS.resource_folder_name == "OpenSans"
        for family in FontFamily:
            assert " " not in family.resource_folder_name

    def test_every_family_has_metadata(self):
        """Test every derived property is defined for every family."""
        for family in FontFamily:
            assert family.accessibility_description
            assert family.recommended_system_pairing
            assert family.license_type == "SIL Open Font License 1.1"
            assert family.display_name in family.attribution
            assert "SIL Open Font License" in family.attribution


class TestFontWeight:
    """Tests for FontWeight enum."""

    def test_numeric_values(self):
        """Test weights map onto the 100-900 scale."""
        assert [w.numeric_value for w in FontWeight] == list(range(100, 1000, 100))

    def test_ordering(self):
        """Test weights are totally ordered by numeric value."""
        assert FontWeight.THIN < FontWeight.REGULAR < FontWeight.BLACK
        assert FontWeight.BOLD > FontWeight.SEMIBOLD
        assert FontWeight.MEDIUM >= FontWeight.MEDIUM
        assert max(FontWeight) is FontWeight.BLACK
        assert sorted([FontWeight.BOLD, FontWeight.THIN, FontWeight.REGULAR]) == [
            FontWeight.THIN,
            FontWeight.REGULAR,
            FontWeight.BOLD,
        ]

    def test_from_numeric(self):
        """Test lookup by numeric value."""
        assert FontWeight.from_numeric(600) is FontWeight.SEMIBOLD

    def test_from_numeric_invalid(self):
        """Test values off the 100-step scale are rejected."""
        with pytest.raises(ValueError):
            FontWeight.from_numeric(450)

    def test_display_names(self):
        """Test display names."""
        assert FontWeight.EXTRA_LIGHT.display_name == "Extra Light"
        assert FontWeight.SEMIBOLD.display_name == "Semibold"


class TestFontVariant:
    """Tests for FontVariant dataclass."""

    def test_default_style(self):
        """Test variants default to the normal style."""
        variant = FontVariant(FontFamily.LEXEND, FontWeight.BOLD)
        assert variant.style == FontStyle.NORMAL

    def test_equality_and_hash(self):
        """Test variants compare and hash by value."""
        a = FontVariant(FontFamily.INTER, FontWeight.MEDIUM, FontStyle.ITALIC)
        b = FontVariant(FontFamily.INTER, FontWeight.MEDIUM, FontStyle.ITALIC)
        c = FontVariant(FontFamily.INTER, FontWeight.MEDIUM)

        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_immutable(self):
        """Test variants cannot be modified."""
        variant = FontVariant(FontFamily.INTER, FontWeight.MEDIUM)
        with pytest.raises(FrozenInstanceError):
            variant.weight = FontWeight.BOLD  # type: ignore[misc]

    def test_str(self):
        """Test human-readable description."""
        assert str(FontVariant(FontFamily.LEXEND, FontWeight.BOLD)) == "Lexend Bold"
        assert (
            str(FontVariant(FontFamily.OPEN_SANS, FontWeight.LIGHT, FontStyle.ITALIC))
            == "Open Sans Light Italic"
        )


class TestFontResource:
    """Tests for FontResource dataclass."""

    def test_full_file_name(self):
        """Test file name and extension are joined with a dot."""
        resource = FontResource("Lexend-Regular", "ttf", "Lexend-Regular")
        assert resource.full_file_name == "Lexend-Regular.ttf"

    def test_canonical_name_may_differ(self):
        """Test the PostScript name is independent of the file name."""
        resource = FontResource(
            "Atkinson-Hyperlegible-Bold-102", "otf", "AtkinsonHyperlegible-Bold"
        )
        assert resource.full_file_name == "Atkinson-Hyperlegible-Bold-102.otf"
        assert resource.canonical_name == "AtkinsonHyperlegible-Bold"


class TestFontHandle:
    """Tests for FontHandle dataclass."""

    def test_defaults(self):
        """Test a bare handle is a regular, upright, body-relative custom font."""
        handle = FontHandle(name="Inter-Regular", size=17)

        assert handle.weight == FontWeight.REGULAR
        assert handle.style == FontStyle.NORMAL
        assert handle.text_style == TextStyle.BODY
        assert handle.path is None
        assert handle.is_fallback is False

    def test_with_path(self):
        """Test handles can point at their backing file."""
        handle = FontHandle(name="Inter-Bold", size=12.5, path=Path("/fonts/Inter-Bold.ttf"))
        assert handle.path == Path("/fonts/Inter-Bold.ttf")
        assert handle.size == 12.5
