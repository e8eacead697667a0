"""Font resource locator.

This module provides the FontResourceLocator class for finding bundled
font files and license texts on disk. Resources follow the layout:

    <root>/Fonts/<family-folder>/<file>.<ext>
    <root>/Licenses/<family-folder>-LICENSE.txt

A font file placed directly under the root is accepted as a fallback.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from accessible_fonts.domain import FontFamily, FontResource
from accessible_fonts.exceptions import ResourceMissingError

if TYPE_CHECKING:
    from accessible_fonts.core.catalog import FontCatalog

BUNDLED_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"

FONTS_SUBDIR = "Fonts"
LICENSES_SUBDIR = "Licenses"


class FontResourceLocator:
    """Locates font resources within a resource directory.

    Example:
        locator = FontResourceLocator(Path("resources"))
        for resource, path in locator.locate_all(FontFamily.LEXEND):
            print(resource.canonical_name, path)
    """

    def __init__(
        self,
        root: Path | None = None,
        catalog: "FontCatalog | None" = None,
    ) -> None:
        """Initialize the locator.

        Args:
            root: Resource root directory (default: bundled resources)
            catalog: Catalog used to enumerate family resources
        """
        self._root = Path(root) if root is not None else BUNDLED_RESOURCES_DIR
        if catalog is None:
            from accessible_fonts.core.catalog import FontCatalog

            catalog = FontCatalog()
        self._catalog = catalog

    @property
    def root(self) -> Path:
        """Resource root directory."""
        return self._root

    def _candidate_paths(self, resource: FontResource, family: FontFamily) -> list[Path]:
        return [
            self._root / FONTS_SUBDIR / family.resource_folder_name / resource.full_file_name,
            self._root / resource.full_file_name,
        ]

    def locate(self, resource: FontResource, family: FontFamily) -> Path:
        """Locate the file for a font resource.

        Args:
            resource: The font resource to locate
            family: The family the resource belongs to

        Returns:
            Path to the font file

        Raises:
            ResourceMissingError: If the file exists at no expected path, or
                an expected directory cannot be searched
        """
        error: OSError | None = None
        for path in self._candidate_paths(resource, family):
            try:
                if path.is_file():
                    return path
            except OSError as e:
                error = e

        raise ResourceMissingError(resource.full_file_name) from error

    def locate_all(self, family: FontFamily) -> list[tuple[FontResource, Path]]:
        """Locate every resource of a family.

        Raises:
            ResourceMissingError: On the first resource that cannot be found
        """
        return [
            (resource, self.locate(resource, family))
            for resource in self._catalog.resources_for(family)
        ]

    def exists(self, resource: FontResource, family: FontFamily) -> bool:
        """Check whether a font resource is present."""
        try:
            self.locate(resource, family)
        except ResourceMissingError:
            return False
        return True

    def validate_resources(self, family: FontFamily) -> list[str]:
        """Return the file names of every missing resource of a family."""
        return [
            resource.full_file_name
            for resource in self._catalog.resources_for(family)
            if not self.exists(resource, family)
        ]

    def license_path(self, family: FontFamily) -> Path | None:
        """Return the license file of a family, or None if absent."""
        path = self._root / LICENSES_SUBDIR / f"{family.resource_folder_name}-LICENSE.txt"
        try:
            return path if path.is_file() else None
        except OSError:
            return None

    def license_text(self, family: FontFamily) -> str | None:
        """Read the license text of a family, or None if unavailable."""
        path = self.license_path(family)
        if path is None:
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
