"""Immutable 2D vector used for points and directions.

All operations return new vectors; a Vector is never modified in place.
"""

import math
from dataclasses import dataclass
from typing import Any

from polyrender.exceptions import DegenerateVectorError, InvalidCoordinateError

EQUALITY_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class Vector:
    """A point or direction in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate (grows downwards in screen space)
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        if math.isnan(self.x) or math.isnan(self.y):
            raise InvalidCoordinateError(self.x, self.y)

    def equals(self, other: "Vector") -> bool:
        """Check if two vectors coincide within EQUALITY_TOLERANCE.

        Uses the largest per-axis difference rather than Euclidean distance.
        """
        return max(abs(self.x - other.x), abs(self.y - other.y)) < EQUALITY_TOLERANCE

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2)

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, c: float) -> "Vector":
        return Vector(self.x * c, self.y * c)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def normalize(self) -> "Vector":
        """Get the unit vector with the same direction.

        Returns:
            Vector of length 1

        Raises:
            DegenerateVectorError: If this is the zero vector
        """
        n = self.norm()
        if n == 0:
            raise DegenerateVectorError("normalize")
        return self.scale(1 / n)

    def dist(self, other: "Vector") -> float:
        """Euclidean distance to another point."""
        return other.sub(self).norm()

    def translate(self, dx: float, dy: float) -> "Vector":
        return Vector(self.x + dx, self.y + dy)

    def rotate(self, theta: float) -> "Vector":
        """Rotate around the origin by theta radians.

        Args:
            theta: Rotation angle in radians

        Returns:
            Rotated vector
        """
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return Vector(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )

    def interpolate(self, other: "Vector", t: float) -> "Vector":
        """Linear interpolation, ``(1 - t) * self + t * other``.

        No clamping: t outside [0, 1] extrapolates along the line.
        """
        return Vector(
            (1 - t) * self.x + t * other.x,
            (1 - t) * self.y + t * other.y,
        )

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])
