"""
Logging for the chat profile editor.

Console records go to stderr with a colored level name; an optional file
handler writes plain records. Every module logger lives under the
``chatprofile`` namespace so one call configures the whole editor.
"""

import logging
import sys
from typing import Optional

NAMESPACE = "chatprofile"

# Libraries that are noisy below WARNING while the TUI is running
QUIET_LOGGERS = ("asyncio", "textual")

_RESET = "\033[0m"
_LEVEL_STYLES = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;37;41m",
}

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI style."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        style = _LEVEL_STYLES.get(record.levelno) if self.use_colors else None
        if style:
            # Handlers share records; color a copy.
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{style}{record.levelname}{_RESET}"
        return super().format(record)


def _console_handler(level: int) -> logging.Handler:
    # Textual draws on stdout.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if level <= logging.DEBUG:
        handler.setFormatter(ColoredFormatter(DEBUG_CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(FILE_FORMAT, use_colors=False))
    return handler


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the ``chatprofile`` logger tree.

    Replaces any handlers installed by an earlier call.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path that also receives every record
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(NAMESPACE)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    package_logger.addHandler(_console_handler(numeric_level))
    if log_file:
        package_logger.addHandler(_file_handler(log_file, numeric_level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``chatprofile`` namespace."""
    if not name.startswith(NAMESPACE):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def format_exception_summary(
    error: BaseException,
    *,
    max_length: int = 180,
) -> str:
    """
    One-line ``Type: message`` summary for status lines and toasts.

    Summaries longer than ``max_length`` end with ``...``.
    """
    kind = type(error).__name__
    detail = str(error or "").strip()
    summary = f"{kind}: {detail}" if detail else kind
    if max_length > 3 and len(summary) > max_length:
        return summary[: max_length - 3].rstrip() + "..."
    return summary


def resolve_level(verbose: bool = False, log_level: Optional[str] = None) -> str:
    """An explicit level wins; ``verbose`` means DEBUG; otherwise WARNING."""
    if log_level:
        return log_level.upper()
    return "DEBUG" if verbose else "WARNING"


def configure_logging_from_args(verbose: bool = False, log_level: Optional[str] = None,
                                log_file: Optional[str] = None) -> None:
    """Configure logging from the CLI's ``-v``, ``--log-level`` and ``--log-file``."""
    setup_logging(level=resolve_level(verbose, log_level), log_file=log_file)
