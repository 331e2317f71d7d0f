"""Opt-in log output for the ``notify_commons`` logger.

The package installs a ``NullHandler`` on import, so nothing is printed unless
the host application configures logging itself or calls ``enable_logging()``.
Only the library logger is touched; the root logger belongs to the application.
"""

from __future__ import annotations

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

LIBRARY_LOGGER = "notify_commons"
LOG_FILE_NAME = "notify.log"
MAX_BYTES = 2 * 1024 * 1024
BACKUP_COUNT = 2

CONSOLE_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FILE_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
CONSOLE_DATE_FMT = "%H:%M:%S"

_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[36m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[35m",
}
_RESET = "\x1b[0m"

# Marks handlers added by enable_logging() so they can be replaced or removed.
_OWNED_ATTR = "_notify_commons_owned"

_listener: QueueListener | None = None
_atexit_hooked = False


class _ConsoleFormatter(logging.Formatter):
    """Colors the whole line by level when the stream is a terminal."""

    def __init__(self, *, use_color: bool) -> None:
        super().__init__(CONSOLE_FMT, datefmt=CONSOLE_DATE_FMT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{line}{_RESET}" if color else line


def library_logger() -> logging.Logger:
    return logging.getLogger(LIBRARY_LOGGER)


def install_null_handler() -> None:
    """Attach a ``NullHandler`` once so unconfigured hosts see no output."""
    lib = library_logger()
    if not any(isinstance(h, logging.NullHandler) for h in lib.handlers):
        lib.addHandler(logging.NullHandler())


def _own(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_ATTR, True)
    return handler


def disable_logging() -> None:
    """Remove handlers added by ``enable_logging`` and stop the file writer."""
    global _listener  # noqa: PLW0603
    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
    lib = library_logger()
    for handler in [h for h in lib.handlers if getattr(h, _OWNED_ATTR, False)]:
        lib.removeHandler(handler)
        handler.close()
    lib.setLevel(logging.NOTSET)
    lib.propagate = True


def enable_logging(
    level: int = logging.INFO,
    *,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> None:
    """Send ``notify_commons`` records to stderr and optionally ``log_dir/notify.log``.

    Calling again replaces the previous setup. While enabled the library logger
    stops propagating, so records are not printed twice by the host's handlers.
    The file is written from a background ``QueueListener``.
    """
    global _listener, _atexit_hooked  # noqa: PLW0603
    disable_logging()
    if verbose:
        level = logging.DEBUG

    lib = library_logger()
    lib.setLevel(level)
    lib.propagate = False

    if sys.stderr is not None:
        console = logging.StreamHandler(sys.stderr)
        use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        console.setFormatter(_ConsoleFormatter(use_color=use_color))
        lib.addHandler(_own(console))

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FMT))
        records: queue.Queue[logging.LogRecord] = queue.Queue()
        lib.addHandler(_own(QueueHandler(records)))
        _listener = QueueListener(records, file_handler)
        _listener.start()
        if not _atexit_hooked:
            atexit.register(disable_logging)
            _atexit_hooked = True

    lib.debug("Library logging enabled (level=%s)", logging.getLevelName(level))
