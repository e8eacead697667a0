"""Exception hierarchy for AccessibleFonts."""


class AccessibleFontsError(Exception):
    """Base exception for all AccessibleFonts errors."""

    failure_reason: str = "An AccessibleFonts operation failed."
    recovery_suggestion: str = ""


class ResourceMissingError(AccessibleFontsError):
    """A declared font resource file could not be located."""

    failure_reason = "The font file could not be located in the resource directory."
    recovery_suggestion = (
        "Verify that the font files are installed under "
        "<root>/Fonts/<family-folder>/ or directly under the resource root."
    )

    def __init__(self, resource_name: str) -> None:
        self.resource_name = resource_name
        super().__init__(f"Font resource '{resource_name}' was not found")


class FontRegistrationError(AccessibleFontsError):
    """The host font system rejected a single font file."""

    failure_reason = "The host font system was unable to register the font."
    recovery_suggestion = "Check that the font file is not corrupted."

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to register font '{path}': {reason}")


class FontAlreadyRegisteredError(FontRegistrationError):
    """The font is already registered with the host. Benign."""

    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(path, f"'{name}' is already registered")


class UnsupportedPlatformError(AccessibleFontsError):
    """The current platform does not support the requested operation."""

    failure_reason = "The current platform does not support this operation."
    recovery_suggestion = "Use a backend that is available on this platform."

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Unsupported platform: {message}")


class FontNotAvailableError(AccessibleFontsError):
    """The host cannot instantiate a font with the given name."""

    failure_reason = "No registered font matches the requested name."

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Font '{name}' is not available")
