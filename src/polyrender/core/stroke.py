"""Stroke outlining for point paths.

A stroke of a path is approximated by simple polygons the rasterizer fills
independently:

- one round joint (a regular polygon) centred on every path point, which
  gives round caps at open ends and round joins at corners
- one rectangle per pair of consecutive points, covering the straight body
  of the stroke between them

``line_width`` is the distance from the path to the stroke edge, so the
painted stroke is ``2 * line_width`` wide.
"""

import logging
import math

from polyrender.config import StrokeConfig
from polyrender.domain import CyclicList, Polygon, Vector

logger = logging.getLogger(__name__)

_DEFAULT_STROKE_CONFIG = StrokeConfig()


def sample_circle(sampling_rate: int) -> Polygon:
    """Build a regular polygon inscribed in the unit circle.

    Vertices start at (1, 0) and are spaced by ``2 * pi / sampling_rate``
    radians.

    Args:
        sampling_rate: Number of vertices

    Returns:
        Single-contour polygon centred at the origin

    Raises:
        ValueError: If sampling_rate is less than 1
    """
    if sampling_rate < 1:
        raise ValueError(f"Sampling rate must be positive, got {sampling_rate}")

    step = (2 * math.pi) / sampling_rate
    contour: CyclicList[Vector] = CyclicList()
    for i in range(sampling_rate):
        theta = i * step
        contour.push(Vector(math.cos(theta), math.sin(theta)))
    return Polygon([contour])


def joint_side_count(line_width: float, config: StrokeConfig | None = None) -> int:
    """Number of sides of the joint polygon for a line width.

    Wider strokes get smoother joints; narrow ones never drop below
    ``config.min_joint_sides``.
    """
    if config is None:
        config = _DEFAULT_STROKE_CONFIG
    # Round half up
    sides = math.floor(line_width / config.joint_side_divisor + 0.5)
    return max(config.min_joint_sides, sides)


def build_stroke(
    path: CyclicList[Vector],
    line_width: float,
    closed: bool = False,
    config: StrokeConfig | None = None,
) -> list[Polygon]:
    """Outline a point path as a constant-width stroke.

    Joint polygons for every point come first, in path order, followed by
    the segment rectangles in path order. A closed path gets one extra
    segment from the last point back to the first.

    Args:
        path: Points of the stroked line
        line_width: Offset of the stroke edges from the path
        closed: Whether to connect the last point back to the first
        config: Stroke configuration (defaults to StrokeConfig())

    Returns:
        Joint and segment polygons; empty when the path has fewer than 2 points

    Raises:
        DegenerateVectorError: If two consecutive points coincide and
            ``config.skip_degenerate_segments`` is off
    """
    if config is None:
        config = _DEFAULT_STROKE_CONFIG

    n = path.size
    if n < 2:
        return []

    result: list[Polygon] = []

    joint = sample_circle(joint_side_count(line_width, config)).scale(line_width)
    for p in path:
        result.append(joint.translate(p.x, p.y))

    end = n if closed else n - 1
    for i in range(end):
        p1 = path.get(i)
        p2 = path.get(i + 1)

        if config.skip_degenerate_segments and p1.equals(p2):
            logger.debug("Skipping zero-length segment %d at (%s, %s)", i, p1.x, p1.y)
            continue

        e = p2.sub(p1).normalize().rotate(math.pi / 2)
        offset = e.scale(line_width)

        result.append(
            Polygon(
                [
                    CyclicList(
                        [
                            p1.add(offset),
                            p1.sub(offset),
                            p2.sub(offset),
                            p2.add(offset),
                        ]
                    )
                ]
            )
        )

    return result
