"""Domain models for polyrender.

This module contains the geometry value types the curve sampler and stroke
builder work on, plus the batch job models. Models are designed to be:

- Immutable where possible (Vector is a frozen dataclass)
- Serializable for inter-process communication (parallel processing)

Key classes:
- Vector: An immutable 2D point/direction
- CyclicList: Ordered container with wraparound indexing
- Polygon: One or more closed contours with transform operations
- StrokeJob: Specification of a stroke to outline
- StrokeOutline: Polygons produced for a stroke job
"""

from polyrender.domain.cyclic_list import CyclicList
from polyrender.domain.job import StrokeJob, StrokeOutline
from polyrender.domain.polygon import BoundingBox, Polygon
from polyrender.domain.vector import Vector

__all__: list[str] = [
    # Core types
    "Vector",
    "CyclicList",
    "BoundingBox",
    "Polygon",
    # Jobs
    "StrokeJob",
    "StrokeOutline",
]
