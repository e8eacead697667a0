"""High-level API for accessible_fonts.

AccessibleFonts wires the catalog, locator, backend, registrar, and font
factory together from one settings object. Create one instance at
application start and pass it to whatever needs fonts.
"""

from accessible_fonts.config import AccessibleFontsSettings, get_default_settings
from accessible_fonts.core import FontCatalog, FontFactory, FontRegistrar
from accessible_fonts.domain import (
    FontFamily,
    FontHandle,
    FontStyle,
    FontWeight,
    TextStyle,
)
from accessible_fonts.io import FontBackend, FontResourceLocator, create_backend


class AccessibleFonts:
    """Entry point to the accessible font families.

    Fonts register automatically on first use through font() and
    italic_font(); register() and register_all() give explicit control.

    Example:
        fonts = AccessibleFonts()
        fonts.register_all()
        body = fonts.font(FontFamily.ATKINSON_HYPERLEGIBLE, 17)
    """

    def __init__(
        self,
        settings: AccessibleFontsSettings | None = None,
        backend: FontBackend | None = None,
    ) -> None:
        """Build the shared components.

        Args:
            settings: Library settings (default: get_default_settings())
            backend: Host backend (default: created from settings)
        """
        self.settings = settings or get_default_settings()
        self.catalog = FontCatalog()
        self.locator = FontResourceLocator(self.settings.resources.root, self.catalog)
        self.backend = backend or create_backend(self.settings.backend.name.value)
        self.registrar = FontRegistrar(self.locator, self.backend)
        self.factory = FontFactory(self.registrar, self.catalog, self.settings.rendering)

    # Registration

    def register_all(self) -> None:
        """Register every family. Raises the first ResourceMissingError."""
        self.registrar.register_all()

    def register(self, family: FontFamily) -> None:
        """Register one family. Raises ResourceMissingError."""
        self.registrar.register(family)

    def is_registered(self, family: FontFamily) -> bool:
        return self.registrar.is_registered(family)

    # Font information

    @staticmethod
    def all_families() -> list[FontFamily]:
        return list(FontFamily)

    def available_weights(self, family: FontFamily) -> tuple[FontWeight, ...]:
        return self.catalog.available_weights(family)

    def has_italic(self, family: FontFamily) -> bool:
        return self.catalog.has_italic(family)

    # Licensing

    def license_text(self, family: FontFamily) -> str | None:
        """License text of a family, for acknowledgement screens."""
        return self.locator.license_text(family)

    @staticmethod
    def attribution(family: FontFamily) -> str:
        return family.attribution

    @staticmethod
    def all_attributions() -> list[str]:
        return [family.attribution for family in FontFamily]

    # Font creation

    def font(
        self,
        family: FontFamily,
        size: float,
        weight: FontWeight = FontWeight.REGULAR,
        style: FontStyle = FontStyle.NORMAL,
        text_style: TextStyle = TextStyle.BODY,
    ) -> FontHandle:
        """Create a font; see FontFactory.font."""
        return self.factory.font(family, size, weight, style, text_style)

    def italic_font(
        self,
        family: FontFamily,
        size: float,
        weight: FontWeight = FontWeight.REGULAR,
        text_style: TextStyle = TextStyle.BODY,
    ) -> FontHandle:
        """Create an italic font; see FontFactory.italic_font."""
        return self.factory.italic_font(family, size, weight, text_style)
