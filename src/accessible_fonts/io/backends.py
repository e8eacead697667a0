"""Host font backends.

A backend is the host text-rendering system as seen by this package: it
registers font files for the current process and turns PostScript names
into drawable font handles.

Key classes:
- FontBackend: Protocol every backend satisfies
- FontToolsBackend: Portable in-process registry built on fonttools
- CoreTextBackend: macOS CoreText registration through ctypes
"""

import ctypes
import sys
import threading
from pathlib import Path
from typing import Protocol

from fontTools.ttLib import TTFont, TTLibError

from accessible_fonts.domain import FontHandle, FontWeight
from accessible_fonts.exceptions import (
    FontAlreadyRegisteredError,
    FontNotAvailableError,
    FontRegistrationError,
    UnsupportedPlatformError,
)

# Name table ID holding the PostScript name
NAME_ID_POSTSCRIPT = 6

BACKEND_NAMES = ("auto", "fonttools", "coretext")


class FontBackend(Protocol):
    """Interface of a host font system."""

    def register_font(self, path: Path) -> None:
        """Register a font file for use within the current process.

        Raises:
            FontAlreadyRegisteredError: If the font is already registered
            FontRegistrationError: If the host rejects the file
        """
        ...

    def create_font(self, name: str, size: float) -> FontHandle:
        """Instantiate a registered font by PostScript name.

        Raises:
            FontNotAvailableError: If the name is unknown to the host
        """
        ...

    def system_font(self, size: float, weight: FontWeight) -> FontHandle:
        """Return the host system font at a size and weight."""
        ...


class FontToolsBackend:
    """In-process font registry backed by fonttools.

    Each registered file is opened lazily with fonttools to read its
    PostScript name from the name table; the name is then mapped to the
    file path. Useful on hosts without a native font manager binding and
    for rendering pipelines that load fonts by path.

    Example:
        backend = FontToolsBackend()
        backend.register_font(Path("Lexend-Bold.ttf"))
        handle = backend.create_font("Lexend-Bold", 17)
    """

    SYSTEM_FONT_NAME = "System Font"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fonts: dict[str, Path] = {}

    @staticmethod
    def read_postscript_name(path: Path) -> str:
        """Read the PostScript name of a font file.

        Raises:
            FontRegistrationError: If the file cannot be read as a font or
                carries no PostScript name
        """
        try:
            with TTFont(str(path), lazy=True) as font:
                name = font["name"].getDebugName(NAME_ID_POSTSCRIPT)
        except (TTLibError, OSError, KeyError) as e:
            raise FontRegistrationError(str(path), str(e)) from e

        if not name:
            raise FontRegistrationError(str(path), "font has no PostScript name")
        return name

    def register_font(self, path: Path) -> None:
        """Register a font file under its PostScript name."""
        name = self.read_postscript_name(path)

        with self._lock:
            if name in self._fonts:
                raise FontAlreadyRegisteredError(str(path), name)
            self._fonts[name] = Path(path)

    def create_font(self, name: str, size: float) -> FontHandle:
        """Return a handle for a registered PostScript name."""
        with self._lock:
            path = self._fonts.get(name)

        if path is None:
            raise FontNotAvailableError(name)
        return FontHandle(name=name, size=size, path=path)

    def system_font(self, size: float, weight: FontWeight) -> FontHandle:
        """Return a generic system font handle."""
        return FontHandle(
            name=self.SYSTEM_FONT_NAME,
            size=size,
            weight=weight,
            is_fallback=True,
        )

    def registered_names(self) -> frozenset[str]:
        """Return the PostScript names registered so far."""
        with self._lock:
            return frozenset(self._fonts)


class CoreTextBackend:
    """Registers fonts with macOS CoreText for the current process.

    Calls CTFontManagerRegisterFontsForURL with process scope through
    ctypes. CoreText reports "already registered" (105) and "file not
    found" (101) for files another caller registered first; both are
    surfaced as FontAlreadyRegisteredError.
    """

    CORETEXT_PATH = "/System/Library/Frameworks/CoreText.framework/CoreText"
    COREFOUNDATION_PATH = (
        "/System/Library/Frameworks/CoreFoundation.framework/CoreFoundation"
    )
    SYSTEM_FONT_NAME = ".AppleSystemUIFont"

    # kCTFontManagerScopeProcess
    SCOPE_PROCESS = 1
    # kCTFontManagerErrorFileNotFound, kCTFontManagerErrorAlreadyRegistered
    BENIGN_ERROR_CODES = frozenset({101, 105})
    # kCFStringEncodingUTF8
    ENCODING_UTF8 = 0x08000100

    def __init__(self) -> None:
        if sys.platform != "darwin":
            raise UnsupportedPlatformError("CoreText is only available on macOS")

        try:
            self._ct = ctypes.cdll.LoadLibrary(self.CORETEXT_PATH)
            self._cf = ctypes.cdll.LoadLibrary(self.COREFOUNDATION_PATH)
        except OSError as e:
            raise UnsupportedPlatformError(f"CoreText could not be loaded: {e}") from e

        cf, ct = self._cf, self._ct
        cf.CFURLCreateFromFileSystemRepresentation.argtypes = [
            ctypes.c_void_p, ctypes.c_char_p, ctypes.c_long, ctypes.c_bool
        ]
        cf.CFURLCreateFromFileSystemRepresentation.restype = ctypes.c_void_p
        cf.CFStringCreateWithCString.argtypes = [
            ctypes.c_void_p, ctypes.c_char_p, ctypes.c_uint32
        ]
        cf.CFStringCreateWithCString.restype = ctypes.c_void_p
        cf.CFStringGetCString.argtypes = [
            ctypes.c_void_p, ctypes.c_char_p, ctypes.c_long, ctypes.c_uint32
        ]
        cf.CFStringGetCString.restype = ctypes.c_bool
        cf.CFErrorGetCode.argtypes = [ctypes.c_void_p]
        cf.CFErrorGetCode.restype = ctypes.c_long
        cf.CFRelease.argtypes = [ctypes.c_void_p]
        cf.CFRelease.restype = None

        ct.CTFontManagerRegisterFontsForURL.argtypes = [
            ctypes.c_void_p, ctypes.c_uint32, ctypes.POINTER(ctypes.c_void_p)
        ]
        ct.CTFontManagerRegisterFontsForURL.restype = ctypes.c_bool
        ct.CTFontCreateWithName.argtypes = [
            ctypes.c_void_p, ctypes.c_double, ctypes.c_void_p
        ]
        ct.CTFontCreateWithName.restype = ctypes.c_void_p
        ct.CTFontCopyPostScriptName.argtypes = [ctypes.c_void_p]
        ct.CTFontCopyPostScriptName.restype = ctypes.c_void_p

    def register_font(self, path: Path) -> None:
        """Register a font file with CoreText."""
        raw_path = str(path).encode("utf-8")
        url = self._cf.CFURLCreateFromFileSystemRepresentation(
            None, raw_path, len(raw_path), False
        )
        if not url:
            raise FontRegistrationError(str(path), "could not create file URL")

        error = ctypes.c_void_p()
        try:
            ok = self._ct.CTFontManagerRegisterFontsForURL(
                url, self.SCOPE_PROCESS, ctypes.byref(error)
            )
        finally:
            self._cf.CFRelease(url)

        if ok:
            return

        code = None
        if error.value:
            code = self._cf.CFErrorGetCode(error)
            self._cf.CFRelease(error)

        if code in self.BENIGN_ERROR_CODES:
            raise FontAlreadyRegisteredError(str(path), Path(path).name)
        raise FontRegistrationError(str(path), f"CoreText error code {code}")

    def _to_str(self, cf_string: int) -> str:
        buffer = ctypes.create_string_buffer(512)
        if not self._cf.CFStringGetCString(
            cf_string, buffer, len(buffer), self.ENCODING_UTF8
        ):
            return ""
        return buffer.value.decode("utf-8")

    def create_font(self, name: str, size: float) -> FontHandle:
        """Instantiate a font by PostScript name.

        CoreText substitutes a fallback font for unknown names, so the
        PostScript name of the result is compared with the request.
        """
        cf_name = self._cf.CFStringCreateWithCString(
            None, name.encode("utf-8"), self.ENCODING_UTF8
        )
        if not cf_name:
            raise FontNotAvailableError(name)

        try:
            font = self._ct.CTFontCreateWithName(cf_name, float(size), None)
            if not font:
                raise FontNotAvailableError(name)
            try:
                ps_name = self._ct.CTFontCopyPostScriptName(font)
                try:
                    actual = self._to_str(ps_name) if ps_name else ""
                finally:
                    if ps_name:
                        self._cf.CFRelease(ps_name)
            finally:
                self._cf.CFRelease(font)
        finally:
            self._cf.CFRelease(cf_name)

        if actual != name:
            raise FontNotAvailableError(name)
        return FontHandle(name=name, size=size)

    def system_font(self, size: float, weight: FontWeight) -> FontHandle:
        """Return the macOS system UI font handle."""
        return FontHandle(
            name=self.SYSTEM_FONT_NAME,
            size=size,
            weight=weight,
            is_fallback=True,
        )


def create_backend(name: str = "auto") -> FontBackend:
    """Create a font backend by name.

    Args:
        name: "fonttools", "coretext", or "auto" (CoreText on macOS,
            fonttools elsewhere)

    Raises:
        ValueError: If the name is unknown
        UnsupportedPlatformError: If "coretext" is requested off macOS
    """
    if name == "fonttools":
        return FontToolsBackend()
    if name == "coretext":
        return CoreTextBackend()
    if name == "auto":
        if sys.platform == "darwin":
            try:
                return CoreTextBackend()
            except UnsupportedPlatformError:
                # CoreText failed to load; use the portable registry
                pass
        return FontToolsBackend()
    raise ValueError(f"Unknown font backend: {name} (expected one of {BACKEND_NAMES})")
