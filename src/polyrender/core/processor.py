"""Batch outlining of independent stroke jobs.

Every stroke job is a pure function of its own input, so a batch can be
spread over worker processes with no coordination between jobs.

Key components:
- outline_job: Top-level picklable function for parallel execution
- StrokeProcessor: Orchestrates a batch run and collects statistics
"""

import time
import traceback
from collections.abc import Callable, Iterable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from polyrender.config import CurveConfig, PolyrenderSettings, StrokeConfig
from polyrender.core.bezier import build_path
from polyrender.core.stroke import build_stroke
from polyrender.domain import Polygon, StrokeJob, StrokeOutline
from polyrender.exceptions import JobProcessingError
from polyrender.utils import ProcessingLogger, ProcessingStats, configure_logging


def outline_job(job_dict: dict[str, Any], config_dict: dict[str, Any]) -> dict[str, Any]:
    """Sample and outline a single stroke job.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the job, builds its path and stroke, and returns the result.

    Args:
        job_dict: Serialized job (from StrokeJob.to_dict())
        config_dict: Serialized settings with "curve" and "stroke" sections

    Returns:
        Dictionary containing either:
        - Success: {"name", "polygons", "sample_count", "duration_ms"}
        - Error: {"name", "error", "error_type", "traceback", "duration_ms"}
    """
    start_time = time.time()

    try:
        job = StrokeJob.from_dict(job_dict)
        curve_config = CurveConfig(**config_dict["curve"])
        stroke_config = StrokeConfig(**config_dict["stroke"])

        path = build_path(job.curves, curve_config)
        if job.closed and path.size > 1 and path.get(-1).equals(path.get(0)):
            # The closing segment already joins the ends
            path.pop()
        polygons = build_stroke(path, job.line_width, job.closed, stroke_config)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": job.name,
            "polygons": [p.to_dict() for p in polygons],
            "sample_count": path.size,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": job_dict.get("name", "unknown"),
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class BatchResult:
    """Outlines and statistics of a batch run.

    Attributes:
        outlines: Successful outlines keyed by job name (skipped jobs
            included with no polygons)
        stats: Counts, timing, and error details
    """

    outlines: dict[str, StrokeOutline] = field(default_factory=dict)
    stats: ProcessingStats = field(default_factory=ProcessingStats)


class StrokeProcessor:
    """Orchestrates outlining of many stroke jobs.

    Jobs run in-process when a single worker is requested, otherwise in a
    ProcessPoolExecutor. A failing job is logged and counted, never raised.

    Example:
        settings = PolyrenderSettings()
        processor = StrokeProcessor(settings)
        result = processor.process(jobs, max_workers=4)
        outline = result.outlines["signature"]
    """

    def __init__(self, config: PolyrenderSettings) -> None:
        """Initialize stroke processor with configuration.

        Args:
            config: Polyrender settings with curve, stroke, and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )

    def process(
        self,
        jobs: Iterable[StrokeJob],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> BatchResult:
        """Outline every job of a batch.

        Args:
            jobs: Stroke jobs with unique names
            max_workers: Maximum worker processes (None = config default,
                1 = run in-process)
            progress_callback: Optional callback(completed, total, job_name, success)
                for progress updates

        Returns:
            BatchResult with outlines and statistics

        Raises:
            ValueError: If two jobs share a name
        """
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        tasks: dict[str, dict[str, Any]] = {}
        for job in jobs:
            if job.name in tasks:
                raise ValueError(f"Duplicate stroke job name: '{job.name}'")
            tasks[job.name] = job.to_dict()

        processing_logger = ProcessingLogger(self.logger)
        result = BatchResult(stats=processing_logger.stats)
        result.stats.start_time = time.time()

        config_dict = {
            "curve": self.config.curve.model_dump(mode="json"),
            "stroke": self.config.stroke.model_dump(mode="json"),
        }

        self.logger.info(
            "Starting stroke processing",
            job_count=len(tasks),
            max_workers=max_workers,
        )

        total = len(tasks)
        completed = 0

        def collect(name: str, raw: dict[str, Any]) -> None:
            nonlocal completed
            success = self._collect_result(name, raw, result, processing_logger)
            completed += 1
            if progress_callback is not None:
                progress_callback(completed, total, name, success)

        if max_workers == 1:
            for name, job_dict in tasks.items():
                collect(name, outline_job(job_dict, config_dict))
        elif tasks:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                pending = {
                    executor.submit(outline_job, job_dict, config_dict): name
                    for name, job_dict in tasks.items()
                }
                for future in as_completed(pending):
                    name = pending[future]
                    try:
                        raw = future.result()
                    except Exception as e:
                        # Executor-level error (e.g. a worker died)
                        processing_logger.record_error(
                            job_name=name,
                            error=e,
                            traceback=traceback.format_exc(),
                        )
                        completed += 1
                        if progress_callback is not None:
                            progress_callback(completed, total, name, False)
                        continue
                    collect(name, raw)

        result.stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=result.stats.processed_count,
            skipped=result.stats.skipped_count,
            errors=result.stats.error_count,
            polygons=result.stats.polygons_emitted,
            duration_seconds=round(result.stats.duration_seconds, 2),
        )

        return result

    def _collect_result(
        self,
        name: str,
        raw: dict[str, Any],
        result: BatchResult,
        processing_logger: ProcessingLogger,
    ) -> bool:
        """Record one worker result. Returns True on success."""
        if "error" in raw:
            processing_logger.record_error(
                job_name=name,
                error=JobProcessingError(name, f"{raw['error_type']}: {raw['error']}"),
                traceback=raw.get("traceback"),
            )
            return False

        outline = StrokeOutline(
            name=name,
            polygons=[Polygon.from_dict(p) for p in raw["polygons"]],
            sample_count=raw["sample_count"],
        )
        result.outlines[name] = outline
        processing_logger.record_outline(outline, raw.get("duration_ms", 0.0))
        return True
