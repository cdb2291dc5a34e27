"""
Logging configuration for infinite-grid.

Console output is short and optionally colored; the file log is a
semicolon-separated CSV that can be opened in a spreadsheet to line up
engine passes with rejected input.
"""

import csv
import io
import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..settings import AppSettings
    from ..settings.logging import LoggingOptions

PROJECT_LOGGER = "infinite_grid"
ENGINE_LOGGER = "infinite_grid.engine"

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

FILE_MAX_BYTES = 10 * 1024 * 1024
FILE_BACKUP_COUNT = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return formatted
        # First occurrence only, so a level name inside the message stays plain
        return formatted.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


class CSVFormatter(logging.Formatter):
    """One semicolon-separated, fully quoted CSV row per record."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        row = io.StringIO()
        csv.writer(row, delimiter=";", quoting=csv.QUOTE_ALL, lineterminator="").writerow(
            (
                self.formatTime(record, self.datefmt),
                record.levelname,
                f"{int(record.relativeCreated)} ms",
                record.name,
                record.lineno,
                message,
            )
        )
        return row.getvalue()


def _console_handler(options: "LoggingOptions") -> logging.Handler:
    formatter_class = ColoredFormatter if options.use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, options.console_level, logging.INFO))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    return handler


def _file_handler(options: "LoggingOptions") -> Optional[logging.Handler]:
    path = Path(options.file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=FILE_MAX_BYTES, backupCount=FILE_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled, cannot open {path}: {e}")
        return None

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Install the console and file handlers described by the settings.

    The root logger passes everything; handlers and the engine logger
    level decide what is actually written.

    Args:
        settings: AppSettings holding the logging preferences
    """
    options = settings.logging.options()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    logging.getLogger(PROJECT_LOGGER).setLevel(logging.DEBUG)
    logging.getLogger(ENGINE_LOGGER).setLevel(getattr(logging, options.engine_level, logging.INFO))

    if options.console_enabled:
        root_logger.addHandler(_console_handler(options))

    file_handler = _file_handler(options) if options.file_enabled else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    logger.debug(
        f"Console: {options.console_level if options.console_enabled else 'off'}, "
        f"file: {Path(options.file_path).resolve() if file_handler else 'off'}, "
        f"engine: {options.engine_level}, frame log every {options.frame_log_interval or 'never'}"
    )
