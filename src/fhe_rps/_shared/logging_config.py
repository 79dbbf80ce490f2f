# Area: Shared
"""
fhe_rps._shared.logging_config — Structured logging setup
=========================================================

Two sinks hang off the package logger "fhe_rps":

- terminal: colored one-liners on stdout, left out entirely in quiet mode
- file: one JSON object per line, carrying the rejection context
  (error_code, operation, caller, status) when a record has it

Rejected calls are reported by log_game_error(), which prints the
error block to stderr and records the same error through the logger.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import GameRuleError

PACKAGE_LOGGER = "fhe_rps"

logger = logging.getLogger(PACKAGE_LOGGER)

TERMINAL_FORMAT = "%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s"


class TerminalFormatter(logging.Formatter):
    """Colors the level name; the record itself is left as it was."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        plain = record.levelname
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    EXTRA_FIELDS = ("error_code", "operation", "caller", "status")

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key)) for key in self.EXTRA_FIELDS if hasattr(record, key)
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _terminal_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(TerminalFormatter(fmt=TERMINAL_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(log_file_path: str, level: int) -> logging.Handler:
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    log_file_path: Optional[str] = "fhe_rps.log",
    level: int = logging.INFO,
    quiet: bool = False,
) -> None:
    """
    Configure the package logger. Replaces any handlers installed earlier.

    Parameters
    ----------
    log_file_path : Optional[str]
        Path to the JSON-lines log file. None disables file logging.
    level : int
        Logging level for the logger and both handlers.
    quiet : bool
        Install no terminal handler, keeping stdout for command output.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # NullHandler keeps logging.lastResort off stderr in quiet mode
    pkg_logger.addHandler(logging.NullHandler() if quiet else _terminal_handler(level))

    if log_file_path:
        try:
            pkg_logger.addHandler(_file_handler(log_file_path, level))
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_game_error(error: "GameRuleError") -> None:
    """
    Report a rejected call.

    Parameters
    ----------
    error : GameRuleError
        The precondition violation to report.
    """
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        f"Call rejected: {error.__class__.__name__}",
        extra={
            "error_code": error.code,
            "operation": error.operation,
            "caller": error.caller,
            "status": error.status,
        },
    )
