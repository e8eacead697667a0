"""Unit tests for FontRegistrar.

The locator and backend are mocked so each test controls exactly which
files exist and how the host responds.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import ANY, MagicMock, Mock

import pytest

from accessible_fonts.core import FontCatalog, FontRegistrar
from accessible_fonts.domain import FontFamily
from accessible_fonts.exceptions import (
    FontAlreadyRegisteredError,
    FontRegistrationError,
    ResourceMissingError,
)
from accessible_fonts.utils import RegistrationLogger


def located(family: FontFamily) -> list:
    return [
        (resource, Path("/fonts") / resource.full_file_name)
        for resource in FontCatalog().resources_for(family)
    ]


@pytest.fixture
def locator():
    mock = Mock()
    mock.locate_all.side_effect = located
    return mock


@pytest.fixture
def host():
    return Mock()


@pytest.fixture
def registrar(locator, host):
    return FontRegistrar(locator, host)


class TestRegister:
    """Tests for registering a single family."""

    def test_initial_state(self, registrar):
        """Test nothing is registered before the first call."""
        for family in FontFamily:
            assert not registrar.is_registered(family)
            assert not registrar.is_registering(family)
        assert registrar.all_registered_families() == frozenset()

    def test_register_family(self, registrar, host):
        """Test every file of the family goes to the backend."""
        registrar.register(FontFamily.OPEN_DYSLEXIC)

        assert registrar.is_registered(FontFamily.OPEN_DYSLEXIC)
        assert not registrar.is_registering(FontFamily.OPEN_DYSLEXIC)
        assert host.register_font.call_count == 4
        assert registrar.stats.files_registered == 4
        assert registrar.stats.families_registered == 1

    def test_register_is_idempotent(self, registrar, locator, host):
        """Test a second call performs no work."""
        registrar.register(FontFamily.LEXEND)
        registrar.register(FontFamily.LEXEND)

        locator.locate_all.assert_called_once_with(FontFamily.LEXEND)
        assert host.register_font.call_count == 9
        assert registrar.stats.families_registered == 1

    def test_other_families_unaffected(self, registrar):
        """Test registration is tracked per family."""
        registrar.register(FontFamily.INTER)

        assert registrar.all_registered_families() == frozenset({FontFamily.INTER})
        assert not registrar.is_registered(FontFamily.LEXEND)

    def test_already_registered_files_are_benign(self, registrar, host):
        """Test files the host already knows still count as success."""
        host.register_font.side_effect = FontAlreadyRegisteredError("/fonts/x", "x")

        registrar.register(FontFamily.ATKINSON_HYPERLEGIBLE)

        assert registrar.is_registered(FontFamily.ATKINSON_HYPERLEGIBLE)
        assert registrar.stats.files_already_registered == 4
        assert registrar.stats.files_failed == 0

    def test_rejected_files_do_not_propagate(self, registrar, host):
        """Test per-file host failures are swallowed and logged."""
        host.register_font.side_effect = [
            None,
            FontRegistrationError("/fonts/b", "corrupt"),
            RuntimeError("host crashed"),
            None,
        ]

        registrar.register(FontFamily.OPEN_DYSLEXIC)

        assert registrar.is_registered(FontFamily.OPEN_DYSLEXIC)
        assert registrar.stats.files_registered == 2
        assert registrar.stats.files_failed == 2
        assert len(registrar.stats.errors) == 2

    def test_missing_resource_raises(self, registrar, locator, host):
        """Test a missing file aborts the family and leaves it unregistered."""
        locator.locate_all.side_effect = ResourceMissingError("Lexend-Thin.ttf")

        with pytest.raises(ResourceMissingError, match="Lexend-Thin.ttf"):
            registrar.register(FontFamily.LEXEND)

        assert not registrar.is_registered(FontFamily.LEXEND)
        assert not registrar.is_registering(FontFamily.LEXEND)
        host.register_font.assert_not_called()

    def test_missing_resource_retried(self, registrar, locator):
        """Test a failed family is attempted again on the next call."""
        locator.locate_all.side_effect = [ResourceMissingError("Lexend-Thin.ttf"), []]

        with pytest.raises(ResourceMissingError):
            registrar.register(FontFamily.LEXEND)
        registrar.register(FontFamily.LEXEND)

        assert locator.locate_all.call_count == 2
        assert registrar.is_registered(FontFamily.LEXEND)

    def test_custom_logger(self, locator, host):
        """Test outcomes are reported to the injected structlog logger."""
        log = MagicMock()
        registrar = FontRegistrar(locator, host, logger=RegistrationLogger(log))

        registrar.register(FontFamily.INCONSOLATA)

        log.info.assert_called_once_with(
            "Family registered", family="inconsolata", duration_ms=ANY
        )
        assert log.debug.call_count == 1 + 8


class TestRegisterAll:
    """Tests for registering every family."""

    def test_register_all(self, registrar):
        """Test every family ends up registered."""
        registrar.register_all()
        assert registrar.all_registered_families() == frozenset(FontFamily)

    def test_register_all_attempts_every_family(self, registrar, locator):
        """Test one failing family does not stop the others."""

        def locate_all(family):
            if family in (FontFamily.LEXEND, FontFamily.INCONSOLATA):
                raise ResourceMissingError(f"{family.value}.ttf")
            return located(family)

        locator.locate_all.side_effect = locate_all

        with pytest.raises(ResourceMissingError, match="lexend.ttf"):
            registrar.register_all()

        assert locator.locate_all.call_count == len(FontFamily)
        assert registrar.all_registered_families() == frozenset(FontFamily) - {
            FontFamily.LEXEND,
            FontFamily.INCONSOLATA,
        }

    def test_register_all_survives_unreadable_directory(self, registrar, locator):
        """Test an unreadable directory fails only its own family."""

        def locate_all(family):
            if family is FontFamily.OPEN_DYSLEXIC:
                raise PermissionError("denied")
            return located(family)

        locator.locate_all.side_effect = locate_all

        with pytest.raises(ResourceMissingError, match="OpenDyslexic") as exc_info:
            registrar.register_all()

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert registrar.all_registered_families() == frozenset(FontFamily) - {
            FontFamily.OPEN_DYSLEXIC
        }
        assert not registrar.is_registering(FontFamily.OPEN_DYSLEXIC)


class TestEnsureRegistered:
    """Tests for the non-raising entry point."""

    def test_registers(self, registrar):
        """Test the family is registered when resources exist."""
        registrar.ensure_registered(FontFamily.OPEN_SANS)
        assert registrar.is_registered(FontFamily.OPEN_SANS)

    def test_never_raises_on_missing(self, registrar, locator):
        """Test missing resources are swallowed."""
        locator.locate_all.side_effect = ResourceMissingError("x.ttf")

        registrar.ensure_registered(FontFamily.OPEN_SANS)

        assert not registrar.is_registered(FontFamily.OPEN_SANS)
        assert registrar.stats.errors == [("openSans", "Font resource 'x.ttf' was not found")]

    def test_never_raises_on_unexpected(self, registrar, locator):
        """Test unexpected locator failures are swallowed and logged."""
        locator.locate_all.side_effect = RuntimeError("denied")

        registrar.ensure_registered(FontFamily.OPEN_SANS)

        assert not registrar.is_registered(FontFamily.OPEN_SANS)
        assert not registrar.is_registering(FontFamily.OPEN_SANS)
        assert registrar.stats.errors == [("openSans", "denied")]


class TestReset:
    """Tests for reset."""

    def test_reset(self, registrar, locator):
        """Test reset forgets every family and statistic."""
        registrar.register_all()
        registrar.reset()

        assert registrar.all_registered_families() == frozenset()
        assert registrar.stats.families_registered == 0

        registrar.register(FontFamily.INTER)
        assert locator.locate_all.call_count == len(FontFamily) + 1


class TestConcurrency:
    """Tests for concurrent registration."""

    def test_in_flight_registration_returns_immediately(self, locator, host):
        """Test a second caller does not wait for an in-flight registration."""
        started = threading.Event()
        release = threading.Event()

        def slow_register(path):
            started.set()
            release.wait(timeout=5)

        host.register_font.side_effect = slow_register
        registrar = FontRegistrar(locator, host)

        worker = threading.Thread(target=registrar.register, args=(FontFamily.LEXEND,))
        worker.start()
        try:
            assert started.wait(timeout=5)

            registrar.register(FontFamily.LEXEND)

            assert registrar.is_registering(FontFamily.LEXEND)
            assert not registrar.is_registered(FontFamily.LEXEND)
        finally:
            release.set()
            worker.join(timeout=5)

        assert registrar.is_registered(FontFamily.LEXEND)
        assert not registrar.is_registering(FontFamily.LEXEND)
        locator.locate_all.assert_called_once_with(FontFamily.LEXEND)

    def test_parallel_callers_register_once(self, locator, host):
        """Test many threads registering every family locate each one once."""
        registrar = FontRegistrar(locator, host)
        jobs = [family for family in FontFamily for _ in range(8)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(registrar.ensure_registered, jobs))

        assert registrar.all_registered_families() == frozenset(FontFamily)
        called = [c.args[0] for c in locator.locate_all.call_args_list]
        assert sorted(called, key=lambda f: f.value) == sorted(
            FontFamily, key=lambda f: f.value
        )
        assert registrar.stats.families_registered == len(FontFamily)
