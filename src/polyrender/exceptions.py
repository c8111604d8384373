"""Exception hierarchy for Polyrender."""


class PolyrenderError(Exception):
    """Base exception for all Polyrender errors."""

    pass


class GeometryError(PolyrenderError):
    """Errors in geometric calculations."""

    pass


class InvalidCoordinateError(GeometryError):
    """A vector was constructed with a NaN coordinate."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Invalid coordinates: ({x}, {y})")


class DegenerateVectorError(GeometryError):
    """Operation is undefined for a zero-length vector."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} a zero-length vector")


class CurveError(GeometryError):
    """Errors related to Bezier curve evaluation or sampling."""

    pass


class EmptyControlPointsError(CurveError):
    """A Bezier curve was given no control points."""

    def __init__(self) -> None:
        super().__init__("Bezier curve needs at least one control point")


class JobError(PolyrenderError):
    """Errors related to batch stroke jobs."""

    pass


class JobProcessingError(JobError):
    """Error outlining a specific stroke job."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Error processing stroke job '{name}': {reason}")
