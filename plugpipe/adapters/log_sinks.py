"""
Log Sink Adapters.

Implement LoggerPort on top of standard-library loggers.

Key behaviors:
- info/error never raise into the caller
- ConsoleLogger writes "[LOG] ..." / "[ERROR] ..." lines to stdout
- FileLogger appends to a file; records it cannot write are counted and dropped
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

CONSOLE_FORMAT = "%(prefix)s %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _own_logger(name: str, level: str) -> logging.Logger:
    # Not registered with logging.getLogger, so sinks sharing a name stay separate
    logger = logging.Logger(name, getattr(logging, level.upper()))
    logger.propagate = False
    return logger


class _PrefixFilter(logging.Filter):
    """Adds the [LOG]/[ERROR] prefix used on the console."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.prefix = "[ERROR]" if record.levelno >= logging.ERROR else "[LOG]"
        return True


class _DroppingFileHandler(logging.FileHandler):
    """FileHandler that counts failed writes instead of reporting them."""

    def __init__(self, filename: Path) -> None:
        # Opened lazily on first emit
        super().__init__(filename, encoding="utf-8", delay=True)
        self.dropped = 0

    def emit(self, record: logging.LogRecord) -> None:
        # FileHandler opens the stream outside its own try block
        try:
            super().emit(record)
        except OSError:
            self.dropped += 1

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        self.dropped += 1


class ConsoleLogger:
    """LoggerPort writing to a stream (stdout by default)."""

    def __init__(
        self,
        name: str = "plugpipe.console",
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        self.logger = _own_logger(name, level)

        self._handler = logging.StreamHandler(stream or sys.stdout)
        self._handler.addFilter(_PrefixFilter())
        self._handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        self.logger.addHandler(self._handler)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def close(self) -> None:
        # Flushes; the stream itself belongs to the caller
        self.logger.removeHandler(self._handler)
        self._handler.flush()


class FileLogger:
    """LoggerPort appending to a log file."""

    def __init__(
        self,
        path: str | Path,
        name: str = "plugpipe.file",
        level: str = "INFO",
    ) -> None:
        self.path = Path(path)
        self.logger = _own_logger(name, level)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            # Unwritable directory: the handler will fail on emit and drop.
            pass

        self._handler = _DroppingFileHandler(self.path)
        self._handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(self._handler)

    @property
    def dropped(self) -> int:
        """Number of records that could not be written."""
        return self._handler.dropped

    def info(self, message: str) -> None:
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def close(self) -> None:
        self.logger.removeHandler(self._handler)
        self._handler.close()
