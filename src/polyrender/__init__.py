"""Polyrender - Bezier sampling and stroke outlining for 2D vector graphics.

Polyrender turns vector drawing primitives into plain polygons that a
scanline rasterizer can fill:

- Bezier curves (any number of control points) are sampled into point paths
  with a density that follows the distance between the curve endpoints.
- Point paths are outlined into constant-width strokes made of round joints
  and rectangular segments.

Example:
    >>> from polyrender.core import build_stroke, sample_bezier
    >>> from polyrender.domain import Vector
    >>> path = sample_bezier([Vector(0, 0), Vector(50, 80), Vector(100, 0)])
    >>> polygons = build_stroke(path, line_width=2.0)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
