"""Logging utilities for Polyrender."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from polyrender.domain import StrokeOutline


@dataclass
class ProcessingStats:
    """Statistics from a batch outlining run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    polygons_emitted: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    job_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


_HANDLER_FLAG = "_polyrender_handler"


def _replace_handlers(
    root_logger: logging.Logger, handlers: list[logging.Handler]
) -> None:
    """Swap the handlers installed by an earlier call for new ones."""
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Safe to call repeatedly: handlers from a previous call are closed and
    replaced, so each record is written once per destination.

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

    handlers: list[logging.Handler] = []
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    _replace_handlers(root_logger, handlers)

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

    logger = structlog.get_logger("polyrender")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Records the outcome of each stroke job in the log and in the stats."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def record_outline(self, outline: StrokeOutline, duration_ms: float) -> None:
        """Log a finished job; an outline with no polygons counts as skipped."""
        if outline.is_empty():
            self._logger.debug(
                "Stroke job skipped",
                job=outline.name,
                samples=outline.sample_count,
            )
            self._stats.skipped_count += 1
            return

        self._logger.info(
            "Stroke job processed",
            job=outline.name,
            polygons=len(outline.polygons),
            samples=outline.sample_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.polygons_emitted += len(outline.polygons)
        self._stats.job_timings_ms.append(duration_ms)

    def record_error(
        self,
        job_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        self._logger.error(
            "Stroke job failed",
            job=job_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((job_name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
