"""Configuration settings for Polyrender."""

import math
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class SamplingMode(str, Enum):
    """How curve parameters are stepped while sampling."""

    INDEXED = "indexed"
    ACCUMULATE = "accumulate"


class CurveConfig(BaseModel):
    """Configuration for Bezier curve sampling.

    The sample count of a curve is ``max(floor(dist / sample_spacing),
    min_samples)`` where ``dist`` is the straight-line distance between the
    first and last control points.
    """

    sample_spacing: float = Field(
        default=10.0,
        gt=0.0,
        description="Endpoint distance covered by one sample step",
    )
    min_samples: int = Field(
        default=1,
        ge=1,
        description="Minimum number of sample steps per curve",
    )
    sampling_mode: SamplingMode = Field(
        default=SamplingMode.INDEXED,
        description=(
            "INDEXED steps t = i/n; ACCUMULATE adds 1/n repeatedly and may "
            "emit an extra sample next to the curve end"
        ),
    )

    def sample_count(self, distance: float) -> int:
        """Get the number of sample steps for an endpoint distance."""
        return max(math.floor(distance / self.sample_spacing), self.min_samples)


class StrokeConfig(BaseModel):
    """Configuration for stroke outlining."""

    min_joint_sides: int = Field(
        default=20,
        ge=3,
        description="Minimum number of sides of a round joint polygon",
    )
    joint_side_divisor: float = Field(
        default=4.0,
        gt=0.0,
        description="Line width per joint side above the minimum",
    )
    skip_degenerate_segments: bool = Field(
        default=False,
        description="Skip zero-length segments instead of raising",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file logging)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyrenderSettings(BaseModel):
    """Main application settings."""

    curve: CurveConfig = Field(default_factory=CurveConfig)
    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyrenderSettings:
    """Get default application settings."""
    return PolyrenderSettings()
