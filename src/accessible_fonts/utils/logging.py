"""Logging utilities for AccessibleFonts."""

import logging
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

from accessible_fonts.domain import FontFamily


@dataclass
class RegistrationStats:
    """Statistics accumulated by a registrar."""

    families_registered: int = 0
    files_registered: int = 0
    files_already_registered: int = 0
    files_failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Time spent between the first and last registration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that emits through the stdlib logger of that name.

    Library code logs through stdlib logging so nothing is printed until the
    application configures handlers (see configure_logging).
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"accessible_fonts_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("accessible_fonts")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class RegistrationLogger:
    """Logs registration outcomes and keeps running statistics.

    Per-file failures are reported at debug level only: they never reach
    callers, and the family still counts as registered.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or get_logger("accessible_fonts.registrar")
        self._lock = threading.Lock()
        self._stats = RegistrationStats()

    def log_family_start(self, family: FontFamily, file_count: int) -> None:
        """Log start of family registration."""
        with self._lock:
            if self._stats.start_time is None:
                self._stats.start_time = time.time()
        self._logger.debug(
            "Registering family", family=family.value, files=file_count
        )

    def log_file_registered(self, family: FontFamily, file_name: str) -> None:
        """Log a file accepted by the host."""
        self._logger.debug("Font registered", family=family.value, file=file_name)
        with self._lock:
            self._stats.files_registered += 1

    def log_file_already_registered(self, family: FontFamily, file_name: str) -> None:
        """Log a file the host already knew about."""
        self._logger.debug(
            "Font already registered", family=family.value, file=file_name
        )
        with self._lock:
            self._stats.files_already_registered += 1

    def log_file_failed(
        self,
        family: FontFamily,
        file_name: str,
        error: Exception,
    ) -> None:
        """Log a file the host rejected."""
        self._logger.debug(
            "Font registration failed",
            family=family.value,
            file=file_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        with self._lock:
            self._stats.files_failed += 1
            self._stats.errors.append((file_name, str(error)))

    def log_family_complete(self, family: FontFamily, duration_ms: float) -> None:
        """Log a family marked registered."""
        self._logger.info(
            "Family registered",
            family=family.value,
            duration_ms=round(duration_ms, 2),
        )
        with self._lock:
            self._stats.families_registered += 1
            self._stats.end_time = time.time()

    def log_family_error(self, family: FontFamily, error: Exception) -> None:
        """Log a family whose resources could not be located."""
        self._logger.debug(
            "Family registration aborted",
            family=family.value,
            error=str(error),
            error_type=type(error).__name__,
        )
        with self._lock:
            self._stats.errors.append((family.value, str(error)))

    def reset(self) -> None:
        """Discard accumulated statistics."""
        with self._lock:
            self._stats = RegistrationStats()

    @property
    def stats(self) -> RegistrationStats:
        """Get current registration statistics."""
        return self._stats
