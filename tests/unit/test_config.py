"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from polyrender.config import (
    CurveConfig,
    PolyrenderSettings,
    SamplingMode,
    StrokeConfig,
    get_default_settings,
)


class TestCurveConfig:
    """Tests for CurveConfig."""

    def test_defaults(self) -> None:
        """Test default sampling settings."""
        config = CurveConfig()
        assert config.sample_spacing == 10.0
        assert config.min_samples == 1
        assert config.sampling_mode == SamplingMode.INDEXED

    @pytest.mark.parametrize(
        ("distance", "expected"),
        [(0.0, 1), (9.99, 1), (10.0, 1), (19.9, 1), (20.0, 2), (123.4, 12)],
    )
    def test_sample_count(self, distance: float, expected: int) -> None:
        """Test floor(distance / spacing) with a minimum of one."""
        assert CurveConfig().sample_count(distance) == expected

    def test_min_samples(self) -> None:
        """Test a raised minimum sample count."""
        assert CurveConfig(min_samples=4).sample_count(25.0) == 4

    def test_mode_from_string(self) -> None:
        """Test that the sampling mode parses from its value."""
        config = CurveConfig(sampling_mode="accumulate")
        assert config.sampling_mode is SamplingMode.ACCUMULATE

    def test_invalid_spacing(self) -> None:
        """Test that spacing must be positive."""
        with pytest.raises(ValidationError):
            CurveConfig(sample_spacing=0.0)


class TestStrokeConfig:
    """Tests for StrokeConfig."""

    def test_defaults(self) -> None:
        """Test default stroke settings."""
        config = StrokeConfig()
        assert config.min_joint_sides == 20
        assert config.joint_side_divisor == 4.0
        assert config.skip_degenerate_segments is False

    def test_invalid_joint_sides(self) -> None:
        """Test that a joint needs at least three sides."""
        with pytest.raises(ValidationError):
            StrokeConfig(min_joint_sides=2)


class TestPolyrenderSettings:
    """Tests for PolyrenderSettings."""

    def test_default_settings(self) -> None:
        """Test that all sections are populated."""
        settings = get_default_settings()
        assert isinstance(settings, PolyrenderSettings)
        assert settings.processing.max_workers is None
        assert settings.logging.log_file is None

    def test_round_trip_through_dump(self) -> None:
        """Test rebuilding settings from a JSON-mode dump."""
        settings = PolyrenderSettings(curve=CurveConfig(sampling_mode=SamplingMode.ACCUMULATE))
        restored = PolyrenderSettings(**settings.model_dump(mode="json"))
        assert restored == settings
