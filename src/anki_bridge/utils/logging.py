"""Logging configuration using structlog for structured JSON logging."""

import logging
import sys
from collections.abc import MutableMapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer
from structlog.stdlib import LoggerFactory, add_log_level, add_logger_name

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Events shown on the terminal without --verbose, plus all ERROR/CRITICAL
USER_FACING_EVENTS: set[str] = {
    "note_skipped",
    "notes_built",
    "ambiguous_deck_mapping",
    "settings_file_not_found",
    "settings_loaded",
}

_configured = False
_handlers: list[logging.Handler] = []


def _get_level_no(level_name: str) -> int:
    """Get numeric log level from name."""
    return _LOG_LEVELS.get(level_name.upper(), logging.INFO)


def _event_name(record: logging.LogRecord) -> str:
    # structlog hands the formatter the event dict as the record message
    if isinstance(record.msg, dict):
        return str(record.msg.get("event", ""))
    return record.getMessage()


class UserFacingConsoleFilter(logging.Filter):
    """Logging filter that only passes user-facing events to console.

    Allows:
    - Events in USER_FACING_EVENTS
    - All ERROR and CRITICAL level messages
    - All messages when verbose mode is enabled
    """

    def __init__(self, verbose: bool = False) -> None:
        super().__init__()
        self.verbose = verbose

    def filter(self, record: logging.LogRecord) -> bool:
        if self.verbose or record.levelno >= logging.ERROR:
            return True
        return _event_name(record) in USER_FACING_EVENTS


class UserFriendlyConsoleRenderer:
    """Renders user-facing logs in a clean, readable format for terminal output."""

    def __init__(self) -> None:
        self._fallback = ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    def __call__(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = event_dict.get("event", "")
        level = str(event_dict.get("level", "info")).upper()

        if event == "note_skipped":
            file = event_dict.get("file", "")
            line = event_dict.get("line")
            where = f"{file}:{line}" if line is not None else str(file)
            reason = event_dict.get("reason", "unknown reason")
            return f"Skipped note at {where}: {reason}"

        if event == "notes_built":
            built = event_dict.get("built", 0)
            failed = event_dict.get("failed", 0)
            file = event_dict.get("file", "")
            summary = f"{file}: {built} notes ready"
            if failed:
                summary += f", {failed} skipped"
            return summary

        if event == "ambiguous_deck_mapping":
            folder = event_dict.get("folder", "")
            decks = ", ".join(event_dict.get("decks", []))
            return f"WARNING: folder '{folder}' maps to several decks ({decks}); using fallback deck"

        if level == "ERROR":
            error = event_dict.get("error", event)
            return f"ERROR: {error}"

        return str(self._fallback(logger, method_name, event_dict))


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    verbose: bool = False,
) -> None:
    """Configure structlog logging with console and optional file output.

    Args:
        log_level: Minimum console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional JSON log file, rotated at 10MB
        verbose: If True, show all log messages on terminal (for debugging)
    """
    global _configured

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_get_level_no(log_level))
    console_handler.addFilter(UserFacingConsoleFilter(verbose=verbose))
    renderer: Any = (
        ConsoleRenderer(colors=True, exception_formatter=structlog.dev.plain_traceback)
        if verbose
        else UserFriendlyConsoleRenderer()
    )
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=_shared_processors(),
        )
    )
    root_logger.addHandler(console_handler)
    _handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(exist_ok=True, parents=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    JSONRenderer(),
                ],
                foreign_pre_chain=_shared_processors(),
            )
        )
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    _configured = True

    get_logger(__name__).debug(
        "logging_configured",
        console_level=log_level,
        log_file=str(log_file) if log_file else None,
        verbose=verbose,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the given name
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
