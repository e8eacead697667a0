"""Font catalog and variant resolution.

The catalog is the authoritative mapping between abstract font identity
(family, weight, style) and the bundled resource files and PostScript
names needed to register and instantiate fonts. It also resolves requests
a family cannot satisfy exactly to the nearest variant it can.

Every function here is pure: no shared mutable state, no exceptions.
Unresolvable lookups return None.
"""

from collections.abc import Iterable

from accessible_fonts.domain import (
    FontFamily,
    FontResource,
    FontStyle,
    FontVariant,
    FontWeight,
)

_W = FontWeight

_AVAILABLE_WEIGHTS: dict[FontFamily, tuple[FontWeight, ...]] = {
    FontFamily.OPEN_DYSLEXIC: (_W.REGULAR, _W.BOLD),
    FontFamily.ATKINSON_HYPERLEGIBLE: (_W.REGULAR, _W.BOLD),
    FontFamily.LEXEND: tuple(FontWeight),
    FontFamily.INTER: tuple(FontWeight),
    FontFamily.OPEN_SANS: (
        _W.LIGHT, _W.REGULAR, _W.MEDIUM, _W.SEMIBOLD, _W.BOLD, _W.EXTRA_BOLD,
    ),
    FontFamily.INCONSOLATA: (
        _W.EXTRA_LIGHT, _W.LIGHT, _W.REGULAR, _W.MEDIUM,
        _W.SEMIBOLD, _W.BOLD, _W.EXTRA_BOLD, _W.BLACK,
    ),
}

_ITALIC_FAMILIES: frozenset[FontFamily] = frozenset({
    FontFamily.OPEN_DYSLEXIC,
    FontFamily.ATKINSON_HYPERLEGIBLE,
    FontFamily.INTER,
    FontFamily.OPEN_SANS,
})


def _same_name(file_name: str, extension: str) -> FontResource:
    return FontResource(file_name, extension, file_name)


_RESOURCES: dict[FontFamily, tuple[FontResource, ...]] = {
    FontFamily.OPEN_DYSLEXIC: tuple(
        _same_name(f"OpenDyslexic-{suffix}", "otf")
        for suffix in ("Regular", "Bold", "Italic", "BoldItalic")
    ),
    FontFamily.ATKINSON_HYPERLEGIBLE: tuple(
        FontResource(
            f"Atkinson-Hyperlegible-{suffix}-102", "otf", f"AtkinsonHyperlegible-{suffix}"
        )
        for suffix in ("Regular", "Bold", "Italic", "BoldItalic")
    ),
    FontFamily.LEXEND: tuple(
        _same_name(f"Lexend-{suffix}", "ttf")
        for suffix in (
            "Thin", "ExtraLight", "Light", "Regular", "Medium",
            "SemiBold", "Bold", "ExtraBold", "Black",
        )
    ),
    FontFamily.INTER: tuple(
        _same_name(f"Inter-{suffix}", "ttf")
        for suffix in (
            "Thin", "ThinItalic", "ExtraLight", "ExtraLightItalic",
            "Light", "LightItalic", "Regular", "Italic",
            "Medium", "MediumItalic", "SemiBold", "SemiBoldItalic",
            "Bold", "BoldItalic", "ExtraBold", "ExtraBoldItalic",
            "Black", "BlackItalic",
        )
    ),
    FontFamily.OPEN_SANS: tuple(
        FontResource(
            f"open-sans-latin-{numeric}-{style}",
            "ttf",
            f"OpenSans-{ps_name}",
        )
        for numeric, style, ps_name in (
            (300, "normal", "Light"),
            (300, "italic", "LightItalic"),
            (400, "normal", "Regular"),
            (400, "italic", "Italic"),
            (500, "normal", "Medium"),
            (500, "italic", "MediumItalic"),
            (600, "normal", "SemiBold"),
            (600, "italic", "SemiBoldItalic"),
            (700, "normal", "Bold"),
            (700, "italic", "BoldItalic"),
            (800, "normal", "ExtraBold"),
            (800, "italic", "ExtraBoldItalic"),
        )
    ),
    FontFamily.INCONSOLATA: tuple(
        _same_name(f"Inconsolata-{suffix}", "ttf")
        for suffix in (
            "ExtraLight", "Light", "Regular", "Medium",
            "SemiBold", "Bold", "ExtraBold", "Black",
        )
    ),
}

# Keywords whose absence makes a name "regular"
_NON_REGULAR_KEYWORDS = (
    "light", "medium", "semibold", "bold", "black", "thin", "heavy", "extra",
)


def name_matches_weight(name: str, weight: FontWeight) -> bool:
    """Check whether a lower-cased PostScript name indicates a weight.

    Matching is substring-based. Priority rules keep the classes apart:
    "light" excludes extra/ultra light, "bold" excludes semi and extra bold,
    and a name with no weight keyword at all counts as regular.

    Args:
        name: Lower-cased canonical font name
        weight: Weight to test for

    Returns:
        True if the name indicates the weight
    """
    if weight == FontWeight.THIN:
        return "thin" in name
    if weight == FontWeight.EXTRA_LIGHT:
        return "extralight" in name or "ultralight" in name
    if weight == FontWeight.LIGHT:
        return "light" in name and "extralight" not in name and "ultralight" not in name
    if weight == FontWeight.REGULAR:
        return "regular" in name or not any(
            keyword in name for keyword in _NON_REGULAR_KEYWORDS
        )
    if weight == FontWeight.MEDIUM:
        return "medium" in name
    if weight == FontWeight.SEMIBOLD:
        return "semibold" in name
    if weight == FontWeight.BOLD:
        return "bold" in name and "semibold" not in name and "extrabold" not in name
    if weight == FontWeight.EXTRA_BOLD:
        return "extrabold" in name or "heavy" in name
    return "black" in name


def name_matches_style(name: str, style: FontStyle) -> bool:
    """Check whether a lower-cased PostScript name indicates a style."""
    if style == FontStyle.ITALIC:
        return "italic" in name
    return "italic" not in name


class FontCatalog:
    """Maps font variants to their resource information.

    The catalog data is fixed at import time and never mutated, so a single
    instance may be shared by any number of threads without locking.

    Example:
        catalog = FontCatalog()
        variant = FontVariant(FontFamily.LEXEND, FontWeight.BOLD)
        catalog.canonical_name_for(variant)  # "Lexend-Bold"
    """

    def resources_for(self, family: FontFamily) -> tuple[FontResource, ...]:
        """Return every bundled resource of a family, in declaration order."""
        return _RESOURCES[family]

    def available_weights(self, family: FontFamily) -> tuple[FontWeight, ...]:
        """Return the weights a family ships, lightest first."""
        return _AVAILABLE_WEIGHTS[family]

    def has_italic(self, family: FontFamily) -> bool:
        """Return True if the family ships italic variants."""
        return family in _ITALIC_FAMILIES

    @staticmethod
    def nearest_available_weight(
        requested: FontWeight,
        available: Iterable[FontWeight],
    ) -> FontWeight:
        """Find the available weight closest to the requested one.

        Candidates are scanned lightest first and a candidate only replaces
        the current best when strictly closer, so of two equidistant weights
        the lighter one wins.

        Args:
            requested: The weight the caller asked for
            available: The weights the family ships

        Returns:
            The requested weight if available (or if available is empty),
            otherwise the nearest available weight
        """
        candidates = sorted(set(available))
        if not candidates or requested in candidates:
            return requested

        target = requested.numeric_value
        best = candidates[0]
        best_distance = abs(best.numeric_value - target)

        for weight in candidates[1:]:
            distance = abs(weight.numeric_value - target)
            if distance < best_distance:
                best = weight
                best_distance = distance

        return best

    def resolved_variant(self, variant: FontVariant) -> FontVariant:
        """Resolve a variant to one the catalog can satisfy.

        The weight moves to the nearest available weight; an italic request
        on a family without italics drops to normal.
        """
        weight = self.nearest_available_weight(
            variant.weight, self.available_weights(variant.family)
        )
        style = variant.style
        if style == FontStyle.ITALIC and not self.has_italic(variant.family):
            style = FontStyle.NORMAL

        return FontVariant(family=variant.family, weight=weight, style=style)

    def resource_for(self, variant: FontVariant) -> FontResource | None:
        """Return the resource backing a (resolved) variant, or None."""
        resolved = self.resolved_variant(variant)

        for resource in self.resources_for(variant.family):
            name = resource.canonical_name.lower()
            if name_matches_weight(name, resolved.weight) and name_matches_style(
                name, resolved.style
            ):
                return resource

        return None

    def canonical_name_for(self, variant: FontVariant) -> str | None:
        """Return the PostScript name for a variant, or None."""
        resource = self.resource_for(variant)
        return resource.canonical_name if resource is not None else None

    def all_canonical_names(self) -> list[str]:
        """Return the PostScript names of every bundled font."""
        return [
            resource.canonical_name
            for family in FontFamily
            for resource in self.resources_for(family)
        ]
