"""Logging utilities for Glyphedit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class EditStats:
    """Statistics about the edits made in an editing session."""

    edit_count: int = 0
    undo_groups: int = 0
    coalesced_count: int = 0
    undo_count: int = 0
    redo_count: int = 0
    edit_types: dict[str, int] = field(default_factory=dict)

    @property
    def coalesce_ratio(self) -> float:
        """Fraction of edits merged into an existing undo group."""
        if self.edit_count:
            return self.coalesced_count / self.edit_count
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for an embedding application.

    Unlike a batch tool the editor never writes a log file on its own;
    a file handler is only attached when a path is given.

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

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
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

    logger = structlog.get_logger("glyphedit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EditLogger:
    """Logger for tracking edits, undo grouping and history navigation."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("glyphedit.editor")
        self._stats = EditStats()

    def bind(self, **context: object) -> None:
        """Attach context (e.g. the glyph name) to every later event."""
        self._logger = self._logger.bind(**context)

    def log_edit(self, edit_type: str, new_group: bool, depth: int) -> None:
        """Log a recorded edit and whether it opened a new undo group."""
        self._logger.debug(
            "Edit recorded",
            edit_type=edit_type,
            new_group=new_group,
            undo_depth=depth,
        )
        self._stats.edit_count += 1
        self._stats.edit_types[edit_type] = self._stats.edit_types.get(edit_type, 0) + 1
        if new_group:
            self._stats.undo_groups += 1
        else:
            self._stats.coalesced_count += 1

    def log_undo(self, depth: int) -> None:
        """Log an undo step."""
        self._logger.debug("Undo", undo_depth=depth)
        self._stats.undo_count += 1

    def log_redo(self, depth: int) -> None:
        """Log a redo step."""
        self._logger.debug("Redo", undo_depth=depth)
        self._stats.redo_count += 1

    def log_tool_change(self, old_tool: str, new_tool: str) -> None:
        """Log a switch of the active tool."""
        self._logger.info("Tool changed", old_tool=old_tool, new_tool=new_tool)

    @property
    def stats(self) -> EditStats:
        """Get current edit statistics."""
        return self._stats
