"""Logging utilities for Linebreak."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class BreakStats:
    """Statistics collected while breaking paragraphs."""

    paragraph_count: int = 0
    line_count: int = 0
    box_count: int = 0
    overflow_count: int = 0
    total_badness: float = 0.0
    algorithms: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate breaking duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


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
        quiet: If True, suppress console output entirely

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

    logger = structlog.get_logger("linebreak")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BreakLogger:
    """Logger for tracking line-breaking progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BreakStats()

    def log_paragraph_start(self, index: int, box_count: int, algorithm: str) -> None:
        """Log start of paragraph breaking."""
        self._logger.debug(
            "Breaking paragraph",
            paragraph=index,
            boxes=box_count,
            algorithm=algorithm,
        )

    def log_paragraph_complete(
        self,
        index: int,
        box_count: int,
        line_count: int,
        badness: float,
        overflow_count: int,
        duration_ms: float,
    ) -> None:
        """Log a broken paragraph and update statistics."""
        self._logger.debug(
            "Paragraph broken",
            paragraph=index,
            lines=line_count,
            badness=round(badness, 3),
            overflow=overflow_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.paragraph_count += 1
        self._stats.box_count += box_count
        self._stats.line_count += line_count
        self._stats.total_badness += badness
        self._stats.overflow_count += overflow_count

    def log_overflow(self, index: int, line_index: int, width: float, text_width: float) -> None:
        """Log a line that does not fit the text width."""
        self._logger.warning(
            "Line overflows text width",
            paragraph=index,
            line=line_index,
            width=round(width, 3),
            text_width=text_width,
        )

    def log_algorithm(self, algorithm: str) -> None:
        """Record an algorithm used for breaking."""
        if algorithm not in self._stats.algorithms:
            self._stats.algorithms.append(algorithm)

    @property
    def stats(self) -> BreakStats:
        """Get current breaking statistics."""
        return self._stats
