"""Logging utilities for polyoutline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

FILE_HANDLER_NAME = "polyoutline.file"
CONSOLE_HANDLER_NAME = "polyoutline.console"


@dataclass
class ValidationStats:
    """Statistics from outline validation runs."""

    checked_count: int = 0
    rejected_count: int = 0
    issue_count: int = 0
    issues: list[tuple[str, str]] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        """Number of outlines that passed every check."""
        return self.checked_count - self.rejected_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and, optionally, a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Handlers installed by an earlier call are replaced
    for handler in list(root_logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
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

    logger = structlog.get_logger("polyoutline")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ValidationLogger:
    """Logger for outline validation results and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("polyoutline")
        self._stats = ValidationStats()

    def log_outline_checked(self, label: str, vertex_count: int) -> None:
        """Log an outline that passed validation."""
        self._logger.debug("Outline valid", outline=label, vertices=vertex_count)
        self._stats.checked_count += 1

    def log_outline_rejected(self, label: str, vertex_count: int, issues: list) -> None:
        """Log an outline that failed validation, one warning per issue."""
        for issue in issues:
            self._logger.warning(
                "Outline issue",
                outline=label,
                vertices=vertex_count,
                kind=issue.kind.value,
                index=issue.index,
                detail=issue.message,
            )
            self._stats.issues.append((label, issue.message))
        self._stats.checked_count += 1
        self._stats.rejected_count += 1
        self._stats.issue_count += len(issues)

    @property
    def stats(self) -> ValidationStats:
        """Get current validation statistics."""
        return self._stats
