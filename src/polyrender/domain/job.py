"""Stroke job types for batch outlining.

A StrokeJob describes one stroked path drawn through a chain of Bezier
curves; a StrokeOutline is the polygon set produced for it.
"""

from dataclasses import dataclass, field
from typing import Any

from polyrender.domain.polygon import Polygon
from polyrender.domain.vector import Vector


@dataclass
class StrokeJob:
    """Specification of a single stroke to outline.

    Attributes:
        name: Unique job name, used as the result key
        curves: Control point lists, one per curve, sampled in order
        line_width: Offset of the stroke edges from the path (half the
            visual stroke width)
        closed: Whether the last path point connects back to the first
    """

    name: str
    curves: list[list[Vector]]
    line_width: float
    closed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the job
        """
        return {
            "name": self.name,
            "curves": [[p.to_dict() for p in curve] for curve in self.curves],
            "line_width": self.line_width,
            "closed": self.closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeJob":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a job

        Returns:
            StrokeJob instance
        """
        return cls(
            name=data["name"],
            curves=[[Vector.from_dict(p) for p in curve] for curve in data["curves"]],
            line_width=data["line_width"],
            closed=data.get("closed", False),
        )


@dataclass
class StrokeOutline:
    """Polygons produced for one stroke job.

    Attributes:
        name: Name of the job this outline belongs to
        polygons: Joint polygons followed by segment polygons
        sample_count: Number of points in the sampled path
    """

    name: str
    polygons: list[Polygon] = field(default_factory=list)
    sample_count: int = 0

    def is_empty(self) -> bool:
        """Check if the stroke produced no geometry."""
        return not self.polygons
