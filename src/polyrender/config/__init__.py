"""Configuration management for polyrender.

This module provides configuration management using Pydantic models.

Key classes:
- CurveConfig: Bezier sampling settings
- StrokeConfig: Stroke outlining settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- PolyrenderSettings: Main application settings
"""

from polyrender.config.settings import (
    CurveConfig,
    LoggingConfig,
    PolyrenderSettings,
    ProcessingConfig,
    SamplingMode,
    StrokeConfig,
    get_default_settings,
)

__all__ = [
    "CurveConfig",
    "LoggingConfig",
    "PolyrenderSettings",
    "ProcessingConfig",
    "SamplingMode",
    "StrokeConfig",
    "get_default_settings",
]
