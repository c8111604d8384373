"""Polygon made of one or more closed contours.

A Polygon is what the stroke builder hands to the rasterizer. Contours are
stored as CyclicList[Vector] and are implicitly closed (the last point
connects back to the first).
"""

from dataclasses import dataclass
from typing import Any

from polyrender.domain.cyclic_list import CyclicList
from polyrender.domain.vector import Vector


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounds; ``top`` is the smallest y (screen space)."""

    left: float
    right: float
    top: float
    bottom: float


def _dedupe(contour: CyclicList[Vector]) -> CyclicList[Vector]:
    """Drop points equal to their cyclic predecessor."""
    if contour.size < 2:
        return contour.clone()

    result: CyclicList[Vector] = CyclicList()
    prev = contour.get(-1)
    for p in contour:
        if not p.equals(prev):
            result.push(p)
        prev = p
    return result


class Polygon:
    """A filled shape bounded by closed contours.

    Transform operations return new polygons; the contours of a polygon are
    not shared with the polygon it was derived from.

    Attributes:
        paths: Contours with consecutive duplicate points removed
    """

    def __init__(self, paths: list[CyclicList[Vector]]) -> None:
        self.paths: list[CyclicList[Vector]] = [_dedupe(path) for path in paths]
        self._cached_bbox: BoundingBox | None = None

    def __repr__(self) -> str:
        return f"Polygon({self.paths!r})"

    @property
    def bounding_box(self) -> BoundingBox:
        """Bounds of all contour points, cached after the first call.

        An empty polygon has infinite, inverted bounds.
        """
        if self._cached_bbox is None:
            xs = [p.x for path in self.paths for p in path]
            ys = [p.y for path in self.paths for p in path]
            if xs:
                self._cached_bbox = BoundingBox(min(xs), max(xs), min(ys), max(ys))
            else:
                self._cached_bbox = BoundingBox(
                    float("inf"), float("-inf"), float("inf"), float("-inf")
                )
        return self._cached_bbox

    def contains(self, point: Vector) -> bool:
        """Check if a point is inside the polygon using the even-odd rule."""
        from polyrender.core.geometry import point_in_contours

        bbox = self.bounding_box
        if (
            point.x < bbox.left
            or point.x > bbox.right
            or point.y < bbox.top
            or point.y > bbox.bottom
        ):
            return False
        return point_in_contours(point, self.paths)

    def is_clockwise(self) -> bool:
        """Orientation of the first contour (screen space, y down)."""
        from polyrender.core.geometry import is_path_clockwise

        return is_path_clockwise(self.paths[0])

    def translate(self, dx: float, dy: float) -> "Polygon":
        return Polygon([path.map(lambda p, _: p.translate(dx, dy)) for path in self.paths])

    def rotate(self, theta: float) -> "Polygon":
        return Polygon([path.map(lambda p, _: p.rotate(theta)) for path in self.paths])

    def scale(self, c: float) -> "Polygon":
        return Polygon([path.map(lambda p, _: p.scale(c)) for path in self.paths])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with a list of contours, each a list of point dicts
        """
        return {"paths": [[p.to_dict() for p in path] for path in self.paths]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(
            [CyclicList(Vector.from_dict(p) for p in path) for path in data["paths"]]
        )
