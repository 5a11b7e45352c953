"""Logging utilities for Font Pad."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed here are replaced when logging is configured again
_HANDLER_NAME = "fontpad"


@dataclass
class EditStats:
    """Counters for one editing session."""

    toggle_count: int = 0
    transform_count: int = 0
    resize_count: int = 0
    copy_count: int = 0
    paste_count: int = 0
    failed_paste_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in [h for h in root_logger.handlers if h.get_name() == _HANDLER_NAME]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler.set_name(_HANDLER_NAME)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.set_name(_HANDLER_NAME)
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

    logger = structlog.get_logger("fontpad")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class EditLogger:
    """Logger for tracking pad edits and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("fontpad")
        self._stats = EditStats()

    def log_toggle(self, index: int, value: bool) -> None:
        """Log a dot toggle."""
        self._logger.debug("Dot toggled", index=index, value=value)
        self._stats.toggle_count += 1

    def log_transform(self, name: str) -> None:
        """Log a flip or shift."""
        self._logger.debug("Pad transformed", transform=name)
        self._stats.transform_count += 1

    def log_resize(self, width: int, height: int) -> None:
        """Log a size change."""
        self._logger.info("Pad resized", width=width, height=height)
        self._stats.resize_count += 1

    def log_copy(self, width: int, height: int, history_size: int) -> None:
        """Log a pad copied out."""
        self._logger.info(
            "Pad copied",
            width=width,
            height=height,
            history=history_size,
        )
        self._stats.copy_count += 1

    def log_paste(self, width: int, height: int) -> None:
        """Log a pad pasted in."""
        self._logger.info("Pad pasted", width=width, height=height)
        self._stats.paste_count += 1

    def log_paste_error(self, error: Exception) -> None:
        """Log pasted text that was rejected."""
        self._logger.warning(
            "Paste rejected",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_paste_count += 1
        self._stats.errors.append(("paste", str(error)))

    def log_error(self, operation: str, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((operation, str(error)))

    @property
    def stats(self) -> EditStats:
        """Get current edit statistics."""
        return self._stats
