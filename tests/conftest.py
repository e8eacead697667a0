"""Shared fixtures: tiny real font files built with fonttools."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from accessible_fonts.core import FontCatalog, FontRegistrar
from accessible_fonts.domain import FontFamily
from accessible_fonts.io import FontResourceLocator, FontToolsBackend


def build_font(path: Path, postscript_name: str) -> Path:
    """Write a minimal TrueType font whose name table carries postscript_name."""
    family_name, _, style_name = postscript_name.partition("-")

    glyphs = {}
    for glyph_name in (".notdef", "A"):
        pen = TTGlyphPen(None)
        pen.moveTo((100, 0))
        pen.lineTo((100, 700))
        pen.lineTo((400, 700))
        pen.lineTo((400, 0))
        pen.closePath()
        glyphs[glyph_name] = pen.glyph()

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(list(glyphs))
    builder.setupCharacterMap({0x41: "A"})
    builder.setupGlyf(glyphs)
    builder.setupHorizontalMetrics({name: (500, 100) for name in glyphs})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable(
        {
            "familyName": family_name,
            "styleName": style_name or "Regular",
            "psName": postscript_name,
        }
    )
    builder.setupOS2()
    builder.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    builder.save(str(path))
    return path


def populate_resources(root: Path, families: list[FontFamily] | None = None) -> Path:
    """Build every catalog font (and a license file) for the given families."""
    catalog = FontCatalog()
    for family in families or list(FontFamily):
        folder = root / "Fonts" / family.resource_folder_name
        for resource in catalog.resources_for(family):
            build_font(folder / resource.full_file_name, resource.canonical_name)

        licenses = root / "Licenses"
        licenses.mkdir(parents=True, exist_ok=True)
        (licenses / f"{family.resource_folder_name}-LICENSE.txt").write_text(
            f"{family.display_name}\n{family.license_type}\n", encoding="utf-8"
        )
    return root


@pytest.fixture
def font_builder() -> Callable[[Path, str], Path]:
    """Return the font builder helper."""
    return build_font


@pytest.fixture
def resource_factory() -> Callable[[Path, list[FontFamily] | None], Path]:
    """Return the resource tree helper."""
    return populate_resources


@pytest.fixture(scope="session")
def resource_root(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """A resource root holding every bundled font of every family."""
    return populate_resources(tmp_path_factory.mktemp("resources"))


@pytest.fixture
def backend() -> FontToolsBackend:
    """A fresh in-process font backend."""
    return FontToolsBackend()


@pytest.fixture
def registrar(resource_root: Path, backend: FontToolsBackend) -> FontRegistrar:
    """A registrar over the complete resource root."""
    return FontRegistrar(FontResourceLocator(resource_root), backend)


@pytest.fixture
def restore_logging():
    """Undo the handlers and structlog configuration installed by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler in handlers:
            continue
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    structlog.reset_defaults()
