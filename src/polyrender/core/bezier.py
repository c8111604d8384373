"""Bezier curve evaluation and sampling.

Curves are given by an ordered sequence of control points of any length:
one point is a constant curve, two a line segment, three a quadratic, four
a cubic, and so on. Evaluation uses De Casteljau's algorithm, sampling
spaces parameters evenly with a density that follows the distance between
the first and last control points.
"""

import logging
from collections.abc import Iterable, Sequence

from polyrender.config import CurveConfig, SamplingMode
from polyrender.domain import CyclicList, Vector
from polyrender.exceptions import EmptyControlPointsError

logger = logging.getLogger(__name__)

_DEFAULT_CURVE_CONFIG = CurveConfig()


def evaluate_bezier(control_points: Sequence[Vector], t: float) -> Vector:
    """Evaluate a Bezier curve at parameter t.

    Repeatedly replaces each point by its linear interpolation towards the
    next one and drops the last point, until one point is left. Works on a
    private coordinate buffer, so the caller's sequence is never touched.

    Args:
        control_points: Control points of the curve (at least one)
        t: Curve parameter; values outside [0, 1] extrapolate

    Returns:
        Point on the curve

    Raises:
        EmptyControlPointsError: If no control points are given

    Examples:
        >>> evaluate_bezier([Vector(0, 0), Vector(10, 0)], 0.25)
        Vector(x=2.5, y=0.0)
    """
    xs = [p.x for p in control_points]
    ys = [p.y for p in control_points]

    count = len(xs)
    if count == 0:
        raise EmptyControlPointsError()

    s = 1 - t
    while count > 1:
        for i in range(count - 1):
            xs[i] = s * xs[i] + t * xs[i + 1]
            ys[i] = s * ys[i] + t * ys[i + 1]
        count -= 1

    return Vector(xs[0], ys[0])


def _parameters(n: int, mode: SamplingMode) -> list[float]:
    """Parameter values sampled before the final t = 1."""
    if mode is SamplingMode.INDEXED:
        return [i / n for i in range(n)]

    # Repeated addition drifts, so this may yield a value just below 1.
    params: list[float] = []
    t = 0.0
    step = 1 / n
    while t < 1:
        params.append(t)
        t += step
    return params


def sample_bezier(
    control_points: Sequence[Vector],
    sampling_rate: int | None = None,
    config: CurveConfig | None = None,
) -> CyclicList[Vector]:
    """Sample a Bezier curve into an ordered point path.

    The number of sample steps n is ``sampling_rate`` when given, otherwise
    ``max(floor(dist / sample_spacing), min_samples)`` where dist is the
    distance between the first and last control points. Points are taken at
    t = 0, 1/n, 2/n, ... below 1, and the curve end at t = 1 is always
    appended last.

    Args:
        control_points: Control points of the curve (at least one)
        sampling_rate: Explicit number of sample steps, overrides the
            distance heuristic
        config: Sampling configuration (defaults to CurveConfig())

    Returns:
        Sampled points, first at t = 0 and last at t = 1

    Raises:
        EmptyControlPointsError: If no control points are given
        ValueError: If sampling_rate is not positive
    """
    if config is None:
        config = _DEFAULT_CURVE_CONFIG

    points = list(control_points)
    if not points:
        raise EmptyControlPointsError()

    if sampling_rate is not None:
        if sampling_rate < 1:
            raise ValueError(f"Sampling rate must be positive, got {sampling_rate}")
        n = sampling_rate
    else:
        n = config.sample_count(points[0].dist(points[-1]))

    path: CyclicList[Vector] = CyclicList()
    for t in _parameters(n, config.sampling_mode):
        path.push(evaluate_bezier(points, t))
    path.push(evaluate_bezier(points, 1))

    logger.debug(
        "Sampled curve: %d control points, %d steps, %d samples",
        len(points),
        n,
        path.size,
    )
    return path


def build_path(
    curves: Iterable[Sequence[Vector]],
    config: CurveConfig | None = None,
) -> CyclicList[Vector]:
    """Sample consecutive curves into a single point path.

    A sample equal to the point appended just before it is skipped, so a
    curve starting where the previous one ended does not repeat its joining
    point.

    Args:
        curves: Control point sequences, sampled in order
        config: Sampling configuration (defaults to CurveConfig())

    Returns:
        Concatenated path without consecutive duplicates
    """
    path: CyclicList[Vector] = CyclicList()
    for curve in curves:
        for p in sample_bezier(curve, config=config):
            if path.size and path.get(-1).equals(p):
                continue
            path.push(p)
    return path
