"""Geometric predicates for polygon contours.

This module provides:
- Signed area of a contour (shoelace formula)
- Point-in-polygon testing over several contours (ray casting, even-odd)
- Contour orientation testing

All functions are pure, stateless, and designed for use in parallel processing.
Coordinates are in screen space: y grows downwards.
"""

from collections.abc import Iterable

from polyrender.domain import CyclicList, Vector


def signed_area(contour: CyclicList[Vector]) -> float:
    """Calculate signed area of a contour using the shoelace formula.

    With y growing downwards, a positive area means the contour winds
    clockwise on screen and a negative area counter-clockwise.

    Args:
        contour: Closed contour

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> square = CyclicList([Vector(0, 0), Vector(2, 0), Vector(2, 2), Vector(0, 2)])
        >>> signed_area(square)
        4.0
    """
    n = contour.size
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        a = contour.get(i)
        b = contour.get(i + 1)
        area += a.cross(b)

    return area / 2.0


def point_in_contours(point: Vector, contours: Iterable[CyclicList[Vector]]) -> bool:
    """Determine if a point is inside a set of contours using the even-odd rule.

    Casts a horizontal ray from the point to the right and counts crossings
    with the edges of every contour. Odd number of crossings = inside.

    Args:
        point: The point to test
        contours: Closed contours forming the shape

    Returns:
        True if point is inside, False otherwise

    Examples:
        >>> square = CyclicList([Vector(0, 0), Vector(2, 0), Vector(2, 2), Vector(0, 2)])
        >>> point_in_contours(Vector(1, 1), [square])
        True
        >>> point_in_contours(Vector(3, 3), [square])
        False
    """
    inside = False
    x, y = point.x, point.y

    for contour in contours:
        n = contour.size
        if n < 3:
            continue

        j = n - 1
        for i in range(n):
            pi = contour.get(i)
            pj = contour.get(j)

            if ((pi.y > y) != (pj.y > y)) and (
                x < (pj.x - pi.x) * (y - pi.y) / (pj.y - pi.y) + pi.x
            ):
                inside = not inside

            j = i

    return inside


def is_path_clockwise(contour: CyclicList[Vector]) -> bool:
    """Check the winding of a contour at its leftmost vertex.

    The leftmost (then topmost) vertex is always convex, so the turn made
    there gives the orientation of the whole contour.

    Args:
        contour: Closed contour with at least 3 points

    Returns:
        True if the contour winds clockwise on screen (y down)

    Raises:
        ValueError: If the contour has fewer than 3 points
    """
    if contour.size < 3:
        raise ValueError(f"Need at least 3 points for orientation, got {contour.size}")

    j = 0
    for i in range(contour.size):
        cur = contour.get(i)
        best = contour.get(j)
        if cur.x < best.x or (cur.x == best.x and cur.y < best.y):
            j = i

    a = contour.get(j - 1)
    b = contour.get(j)
    c = contour.get(j + 1)
    return b.sub(a).cross(c.sub(a)) > 0
