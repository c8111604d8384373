"""Integration tests for the curve-to-stroke pipeline.

Samples real curves, outlines them, and checks the resulting polygons the
way a rasterizer would use them: by asking which points they cover.
"""

import math

import pytest

from polyrender.config import CurveConfig, SamplingMode, StrokeConfig
from polyrender.core import build_path, build_stroke, evaluate_bezier, sample_bezier
from polyrender.domain import Polygon, Vector


def covered(polygons: list[Polygon], point: Vector) -> bool:
    return any(polygon.contains(point) for polygon in polygons)


@pytest.fixture
def s_curve() -> list[Vector]:
    """Cubic S-shaped curve spanning 200 units."""
    return [Vector(0, 0), Vector(150, -120), Vector(50, 120), Vector(200, 0)]


class TestCurveOutline:
    """End-to-end outlining of sampled curves."""

    def test_stroke_covers_sampled_curve(self, s_curve: list[Vector]) -> None:
        """Test that every sampled point and segment midpoint is painted."""
        path = sample_bezier(s_curve)
        polygons = build_stroke(path, 3.0)

        assert len(polygons) == 2 * path.size - 1
        for i in range(path.size - 1):
            a = path.get(i)
            b = path.get(i + 1)
            assert covered(polygons, a)
            assert covered(polygons, a.interpolate(b, 0.5))
        assert covered(polygons, path.get(-1))

    def test_stroke_stays_near_curve(self, s_curve: list[Vector]) -> None:
        """Test that points far from the curve are not painted."""
        path = sample_bezier(s_curve)
        polygons = build_stroke(path, 3.0)

        midpoint = evaluate_bezier(s_curve, 0.5)
        assert not covered(polygons, midpoint.translate(0, 40))
        assert not covered(polygons, Vector(-10, -10))

    def test_round_caps_extend_past_ends(self, s_curve: list[Vector]) -> None:
        """Test that open ends get round caps of radius line_width."""
        polygons = build_stroke(sample_bezier(s_curve), 5.0)

        assert covered(polygons, Vector(-4, 0))
        assert not covered(polygons, Vector(-6, 0))
        assert covered(polygons, Vector(204, 0))

    def test_closed_ring(self) -> None:
        """Test a circle built from four cubic arcs and stroked closed."""
        k = 0.5523 * 100
        arcs = [
            [Vector(100, 0), Vector(100, k), Vector(k, 100), Vector(0, 100)],
            [Vector(0, 100), Vector(-k, 100), Vector(-100, k), Vector(-100, 0)],
            [Vector(-100, 0), Vector(-100, -k), Vector(-k, -100), Vector(0, -100)],
            [Vector(0, -100), Vector(k, -100), Vector(100, -k), Vector(100, 0)],
        ]
        path = build_path(arcs)
        assert path.get(-1).equals(path.get(0))
        path.pop()

        polygons = build_stroke(path, 4.0, closed=True)

        assert len(polygons) == 2 * path.size
        for angle in range(0, 360, 15):
            theta = math.radians(angle)
            on_ring = Vector(100 * math.cos(theta), 100 * math.sin(theta))
            assert covered(polygons, on_ring)
        assert not covered(polygons, Vector(0, 0))

    def test_sampling_modes_agree_on_shape(self, s_curve: list[Vector]) -> None:
        """Test that both sampling modes trace the same curve."""
        indexed = sample_bezier(s_curve)
        accumulated = sample_bezier(
            s_curve, config=CurveConfig(sampling_mode=SamplingMode.ACCUMULATE)
        )

        assert accumulated.size >= indexed.size
        assert accumulated.get(0).equals(indexed.get(0))
        assert accumulated.get(-1).equals(indexed.get(-1))

        # Accumulated samples may sit next to each other at the curve end
        config = StrokeConfig(skip_degenerate_segments=True)
        polygons = build_stroke(accumulated, 2.0, config=config)
        assert covered(polygons, evaluate_bezier(s_curve, 0.37))

    def test_transformed_stroke(self, s_curve: list[Vector]) -> None:
        """Test that stroke polygons can be scaled and moved as a group."""
        polygons = build_stroke(sample_bezier(s_curve), 2.0)
        moved = [p.scale(0.5).translate(10, 10) for p in polygons]

        assert covered(moved, Vector(10, 10))
        assert covered(moved, Vector(110, 10))
