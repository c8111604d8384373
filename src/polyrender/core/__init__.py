"""Core processing algorithms for polyrender.

This module contains the core algorithms for:

- Bezier curves (De Casteljau evaluation, distance-driven sampling)
- Strokes (round joints and rectangular segments along a point path)
- Geometry predicates (point-in-polygon, contour orientation)
- Batch outlining of independent stroke jobs

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- evaluate_bezier: Evaluate a Bezier curve at a parameter value
- sample_bezier: Sample a Bezier curve into a point path
- build_path: Sample consecutive curves into one point path
- sample_circle: Regular polygon inscribed in the unit circle
- build_stroke: Outline a point path as polygons

Key classes:
- StrokeProcessor: Outlines batches of stroke jobs
"""

from polyrender.core.bezier import build_path, evaluate_bezier, sample_bezier
from polyrender.core.geometry import is_path_clockwise, point_in_contours, signed_area
from polyrender.core.processor import BatchResult, StrokeProcessor, outline_job
from polyrender.core.stroke import build_stroke, joint_side_count, sample_circle

__all__ = [
    # Processor classes
    "BatchResult",
    "StrokeProcessor",
    "outline_job",
    # Bezier functions
    "build_path",
    "evaluate_bezier",
    "sample_bezier",
    # Stroke functions
    "build_stroke",
    "joint_side_count",
    "sample_circle",
    # Geometry functions
    "is_path_clockwise",
    "point_in_contours",
    "signed_area",
]
