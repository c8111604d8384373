"""Unit tests for geometry predicates."""

import pytest

from polyrender.core.geometry import is_path_clockwise, point_in_contours, signed_area
from polyrender.domain import CyclicList, Vector


@pytest.fixture
def triangle() -> CyclicList[Vector]:
    """Triangle wound clockwise on screen (y down)."""
    return CyclicList([Vector(0, 0), Vector(10, 0), Vector(0, 10)])


class TestPointInContours:
    """Tests for point_in_contours."""

    def test_inside_and_outside(self, triangle: CyclicList[Vector]) -> None:
        """Test points on either side of the hypotenuse."""
        assert point_in_contours(Vector(2, 2), [triangle])
        assert not point_in_contours(Vector(8, 8), [triangle])

    def test_overlapping_contours_cancel(self, triangle: CyclicList[Vector]) -> None:
        """Test the even-odd rule with the same contour twice."""
        assert not point_in_contours(Vector(2, 2), [triangle, triangle.clone()])

    def test_degenerate_contours_ignored(self, triangle: CyclicList[Vector]) -> None:
        """Test that contours with fewer than 3 points never contain a point."""
        line = CyclicList([Vector(-5, 2), Vector(20, 2)])
        assert point_in_contours(Vector(2, 2), [triangle, line])
        assert not point_in_contours(Vector(2, 2), [line])

    def test_no_contours(self) -> None:
        """Test an empty contour list."""
        assert not point_in_contours(Vector(0, 0), [])


class TestIsPathClockwise:
    """Tests for is_path_clockwise."""

    def test_clockwise(self, triangle: CyclicList[Vector]) -> None:
        """Test a clockwise triangle."""
        assert is_path_clockwise(triangle)

    def test_counter_clockwise(self, triangle: CyclicList[Vector]) -> None:
        """Test the same triangle reversed."""
        reversed_triangle = CyclicList(reversed(triangle.to_list()))
        assert not is_path_clockwise(reversed_triangle)

    def test_concave_contour(self) -> None:
        """Test an L-shaped contour whose first vertex is reflex."""
        contour = CyclicList(
            [
                Vector(5, 5),
                Vector(5, 10),
                Vector(0, 10),
                Vector(0, 0),
                Vector(10, 0),
                Vector(10, 5),
            ]
        )
        assert is_path_clockwise(contour)
        contour.rotate(3)
        assert is_path_clockwise(contour)

    def test_too_few_points(self) -> None:
        """Test that orientation needs three points."""
        with pytest.raises(ValueError):
            is_path_clockwise(CyclicList([Vector(0, 0), Vector(1, 1)]))


class TestSignedArea:
    """Tests for signed_area."""

    def test_square(self) -> None:
        """Test both windings of a 2x2 square."""
        square = CyclicList([Vector(0, 0), Vector(2, 0), Vector(2, 2), Vector(0, 2)])
        assert signed_area(square) == pytest.approx(4.0)
        reversed_square = CyclicList(reversed(square.to_list()))
        assert signed_area(reversed_square) == pytest.approx(-4.0)

    def test_sign_matches_orientation(self, triangle: CyclicList[Vector]) -> None:
        """Test that a clockwise contour has positive area."""
        assert signed_area(triangle) == pytest.approx(50.0)
        assert is_path_clockwise(triangle)

    def test_degenerate_contours(self) -> None:
        """Test that fewer than 3 points give zero area."""
        assert signed_area(CyclicList()) == 0.0
        assert signed_area(CyclicList([Vector(0, 0), Vector(4, 4)])) == 0.0
