"""
Logging Configuration

Centralized logging setup for mathcli.
All diagnostics go to stderr (and optionally a file), never stdout,
so they cannot mix with the printed result.

Supports rich console output (when stderr is a terminal), plain
one-line records (when it is piped), or structured JSON with a per-run ID.
"""

import logging
import sys
import json
import uuid
from typing import Optional, Dict, Any
from contextvars import ContextVar

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "mathcli"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Context variable holding the ID of the current run
_run_id_ctx: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

# Attributes every LogRecord has; anything else came in through extra=
_RESERVED_ATTRS = frozenset([
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
])


def get_run_id() -> Optional[str]:
    """Get the current run ID."""
    return _run_id_ctx.get()


def set_run_id(run_id: Optional[str]) -> None:
    """Set the current run ID."""
    _run_id_ctx.set(run_id)


def new_run_id() -> str:
    """Generate and set a fresh run ID."""
    run_id = uuid.uuid4().hex[:12]
    set_run_id(run_id)
    return run_id


def verbosity_to_level(verbosity: int) -> int:
    """
    Map a count of -v flags to a logging level.

    0 shows errors only, each -v opens up one more level.
    """
    if verbosity <= 0:
        return logging.ERROR
    if verbosity == 1:
        return logging.WARNING
    if verbosity == 2:
        return logging.INFO
    return logging.DEBUG


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.
        """
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        run_id = get_run_id()
        if run_id:
            log_data["run_id"] = run_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record if they don't conflict
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure logging for the application.

    Calling this again replaces the handlers from the previous call.

    Args:
        verbosity: Number of -v flags (0 = errors only, 3+ = debug)
        log_file: Optional file to write logs to
        json_format: Whether to use JSON formatting (default: False)

    Returns:
        The package root logger
    """
    level = verbosity_to_level(verbosity)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if json_format:
        console_handler: logging.Handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(JSONFormatter())
    elif sys.stderr.isatty():
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_path=verbosity >= 3,
            rich_tracebacks=True,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        # Piped stderr: one unwrapped line per record
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(TEXT_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (will be prefixed with 'mathcli.')

    Returns:
        Configured logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
