"""Font creation entry points.

FontFactory is what applications call to get a drawable font. It makes
sure the family is registered, resolves the requested variant through the
catalog, asks the backend for the font, and substitutes a system font of
the same weight whenever any of those steps comes up empty.
"""

from dataclasses import replace

from accessible_fonts.config import RenderingConfig
from accessible_fonts.core.catalog import FontCatalog
from accessible_fonts.core.registrar import FontRegistrar
from accessible_fonts.domain import (
    FontFamily,
    FontHandle,
    FontStyle,
    FontVariant,
    FontWeight,
    TextStyle,
)
from accessible_fonts.utils import get_logger

logger = get_logger(__name__)


class FontFactory:
    """Creates fonts for accessibility families with system-font fallback.

    Font creation never raises: the worst case is a system font carrying
    the requested numeric weight, with a debug log line naming the
    shortfall.

    Example:
        factory = FontFactory(registrar)
        font = factory.font(FontFamily.LEXEND, 17, weight=FontWeight.MEDIUM)
    """

    def __init__(
        self,
        registrar: FontRegistrar,
        catalog: FontCatalog | None = None,
        config: RenderingConfig | None = None,
    ) -> None:
        self._registrar = registrar
        self._backend = registrar.backend
        self._catalog = catalog or FontCatalog()
        self._config = config or RenderingConfig()

    def font(
        self,
        family: FontFamily,
        size: float,
        weight: FontWeight = FontWeight.REGULAR,
        style: FontStyle = FontStyle.NORMAL,
        text_style: TextStyle = TextStyle.BODY,
    ) -> FontHandle:
        """Create a font, registering its family on first use.

        Args:
            family: The accessible font family to use
            size: Base point size at the default content size
            weight: Requested weight (resolved to the nearest available)
            style: Requested style (italic drops to normal if unavailable)
            text_style: Dynamic Type style the size is relative to

        Returns:
            The custom font, or a system font fallback
        """
        self._registrar.ensure_registered(family)

        scaled_size = size * self._config.dynamic_type_scale
        variant = FontVariant(family=family, weight=weight, style=style)
        resolved = self._catalog.resolved_variant(variant)
        name = self._catalog.canonical_name_for(variant)

        if name is None:
            self._log_fallback(str(variant), "no PostScript name in catalog")
            return self._system_font(scaled_size, weight, resolved.style, text_style)

        try:
            handle = self._backend.create_font(name, scaled_size)
        except Exception as e:
            self._log_fallback(name, str(e))
            return self._system_font(scaled_size, weight, resolved.style, text_style)

        return replace(
            handle,
            weight=resolved.weight,
            style=resolved.style,
            text_style=text_style,
        )

    def italic_font(
        self,
        family: FontFamily,
        size: float,
        weight: FontWeight = FontWeight.REGULAR,
        text_style: TextStyle = TextStyle.BODY,
    ) -> FontHandle:
        """Create an italic font; families without italics return upright."""
        return self.font(
            family, size, weight=weight, style=FontStyle.ITALIC, text_style=text_style
        )

    def font_names(self) -> list[str]:
        """Register every family and return all bundled PostScript names.

        Useful for font pickers listing every available variant.
        """
        for family in FontFamily:
            self._registrar.ensure_registered(family)
        return self._catalog.all_canonical_names()

    def _system_font(
        self,
        size: float,
        weight: FontWeight,
        style: FontStyle,
        text_style: TextStyle,
    ) -> FontHandle:
        handle = self._backend.system_font(size, weight)
        return replace(
            handle,
            weight=weight,
            style=style,
            text_style=text_style,
            is_fallback=True,
        )

    def _log_fallback(self, requested: str, reason: str) -> None:
        if self._config.log_fallbacks:
            logger.debug(
                "Font not available, using system font",
                requested=requested,
                reason=reason,
            )
