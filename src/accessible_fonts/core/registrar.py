"""Thread-safe, idempotent font family registration.

The registrar tracks which families have been registered with the host
font backend. Each family moves through NotStarted -> Registering ->
Registered, and never leaves Registered except through reset().

A single lock guards both membership sets. Locating files and calling into
the backend happen outside the lock, so a slow family never blocks lookups
of other families. The cost is weak idempotence: a caller that arrives
while another thread is registering the same family returns immediately,
before the files are actually registered.
"""

import threading
import time

from accessible_fonts.domain import FontFamily
from accessible_fonts.exceptions import (
    AccessibleFontsError,
    FontAlreadyRegisteredError,
    ResourceMissingError,
)
from accessible_fonts.io.backends import FontBackend
from accessible_fonts.io.locator import FontResourceLocator
from accessible_fonts.utils import RegistrationLogger, RegistrationStats


class FontRegistrar:
    """Coordinates one-time registration of font families.

    One registrar is meant to be created at application start and shared
    by every font-creation entry point.

    Example:
        registrar = FontRegistrar(FontResourceLocator(), FontToolsBackend())
        registrar.register(FontFamily.OPEN_DYSLEXIC)
        registrar.is_registered(FontFamily.OPEN_DYSLEXIC)  # True
    """

    def __init__(
        self,
        locator: FontResourceLocator,
        backend: FontBackend,
        logger: RegistrationLogger | None = None,
    ) -> None:
        """Initialize the registrar.

        Args:
            locator: Finds the files of each family
            backend: Host font system files are registered with
            logger: Registration logger (default: stdlib-backed structlog)
        """
        self._locator = locator
        self._backend = backend
        self._log = logger or RegistrationLogger()
        self._lock = threading.Lock()
        self._registered: set[FontFamily] = set()
        self._registering: set[FontFamily] = set()

    @property
    def backend(self) -> FontBackend:
        """Host backend fonts are registered with."""
        return self._backend

    @property
    def stats(self) -> RegistrationStats:
        """Statistics of registrations performed so far."""
        return self._log.stats

    def register(self, family: FontFamily) -> None:
        """Register every font file of a family.

        Idempotent: an already registered family is a no-op. If another
        thread is registering the family right now, returns without waiting.
        Files the backend rejects are logged and skipped; the family is
        still marked registered.

        Args:
            family: The font family to register

        Raises:
            ResourceMissingError: If a font file of the family cannot be found
                or its resource directory cannot be read
        """
        if self.is_registered(family):
            return

        with self._lock:
            if family in self._registered or family in self._registering:
                return
            self._registering.add(family)

        start_time = time.time()
        completed = False
        try:
            located = self._locator.locate_all(family)
            self._log.log_family_start(family, len(located))

            for resource, path in located:
                try:
                    self._backend.register_font(path)
                except FontAlreadyRegisteredError:
                    self._log.log_file_already_registered(family, resource.full_file_name)
                except Exception as e:
                    # Host failures never propagate; fallback fonts cover them
                    self._log.log_file_failed(family, resource.full_file_name, e)
                else:
                    self._log.log_file_registered(family, resource.full_file_name)

            completed = True
        except ResourceMissingError as e:
            self._log.log_family_error(family, e)
            raise
        except OSError as e:
            # Unreadable resource directories count as missing resources
            self._log.log_family_error(family, e)
            raise ResourceMissingError(family.resource_folder_name) from e
        finally:
            with self._lock:
                self._registering.discard(family)
                if completed:
                    self._registered.add(family)

        self._log.log_family_complete(family, (time.time() - start_time) * 1000)

    def register_all(self) -> None:
        """Register every family.

        Every family is attempted even if an earlier one fails.

        Raises:
            ResourceMissingError: The first locator failure, after all
                families have been attempted
        """
        errors: list[AccessibleFontsError] = []

        for family in FontFamily:
            try:
                self.register(family)
            except AccessibleFontsError as e:
                errors.append(e)

        if errors:
            raise errors[0]

    def is_registered(self, family: FontFamily) -> bool:
        """Return True if the family has been registered."""
        with self._lock:
            return family in self._registered

    def is_registering(self, family: FontFamily) -> bool:
        """Return True if a registration of the family is in flight."""
        with self._lock:
            return family in self._registering

    def all_registered_families(self) -> frozenset[FontFamily]:
        """Return a snapshot of the registered families."""
        with self._lock:
            return frozenset(self._registered)

    def ensure_registered(self, family: FontFamily) -> None:
        """Register a family if needed, never raising.

        Used by font-creation entry points; callers always get a usable
        (possibly fallback) font afterwards.
        """
        if self.is_registered(family):
            return

        try:
            self.register(family)
        except ResourceMissingError:
            # Logged by register(); fallback fonts cover the gap
            return
        except Exception as e:
            self._log.log_family_error(family, e)

    def reset(self) -> None:
        """Clear all registration state. For test isolation only."""
        with self._lock:
            self._registered.clear()
            self._registering.clear()
        self._log.reset()
