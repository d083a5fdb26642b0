"""Tests for lines in the general and slope forms."""

import math

import pytest

from planegeo.errors import DegenerateGeometryError, RepresentationError
from planegeo.models import Line2D, LineY2D, Point2D, Segment2D


@pytest.fixture
def segment_ab() -> Segment2D:
    return Segment2D(a=Point2D(label="A", x=1, y=5), b=Point2D(label="B", x=3, y=9))


class TestLine2DCreation:
    def test_from_segment(self, segment_ab):
        line = Line2D.from_segment(segment_ab)
        assert (line.a, line.b, line.c) == (-4, 2, -6)
        assert line == Line2D(a=-4, b=2, c=-6)

    def test_from_points(self):
        line = Line2D.from_points(Point2D(label="A", x=0, y=0), Point2D(label="B", x=2, y=2))
        assert line == Line2D(a=1, b=-1, c=0)

    def test_non_existent_line(self):
        with pytest.raises(DegenerateGeometryError, match="non-existent line"):
            Line2D(a=0, b=0, c=4)

    def test_only_a_or_b_zero_is_fine(self):
        Line2D(a=0, b=-11, c=1e-3)
        Line2D(a=19.2, b=0, c=2)


class TestLine2DQueries:
    def test_includes_point(self, segment_ab):
        line = Line2D.from_segment(segment_ab)
        assert line.includes_point(segment_ab.a)
        assert line.includes_point(segment_ab.b)
        assert not line.includes_point(Point2D(label="C", x=0, y=0))

    def test_includes_point_is_exact(self):
        line = Line2D(a=1, b=-1, c=0)
        assert not line.includes_point(Point2D(label="P", x=1, y=1.0000001))

    def test_parallel_to_axes(self):
        assert not Line2D(a=2, b=-4.5, c=1).is_parallel_to_x()
        assert Line2D(a=0, b=-11, c=1e-3).is_parallel_to_x()
        assert Line2D(a=19.2, b=0, c=2).is_parallel_to_y()
        assert Line2D(a=9, b=2, c=0).passes_origin()
        assert not Line2D(a=9, b=2, c=1).passes_origin()

    def test_distance_to(self):
        line = Line2D(a=3, b=-4, c=5)
        assert math.isclose(line.distance_to(Point2D(label="A", x=-1, y=1)), 0.4)


class TestLine2DTransformations:
    def test_to_slope_form(self):
        assert Line2D(a=2, b=-4, c=5).to_slope_form() == LineY2D(k=0.5, b=1.25)

    def test_vertical_line_has_no_slope_form(self):
        with pytest.raises(RepresentationError):
            Line2D(a=3, b=0, c=1).to_slope_form()

    @pytest.mark.parametrize(
        "a, b, c",
        [(2, -4, 5), (-4, 2, -6), (0, 3, 7), (1.5, 0.25, -2), (3, 2, 0)],
    )
    def test_slope_form_round_trip(self, a, b, c):
        line = Line2D(a=a, b=b, c=c)
        assert line.to_slope_form().to_general_form() == line

    def test_translate_origin(self):
        line = Line2D(a=2, b=-4, c=6)
        assert line.translate_origin(1, 1) == Line2D(a=2, b=-4, c=4)
        assert line.translate_origin(0, 0) == line

    def test_translate_origin_keeps_points(self):
        # The point (3, 3) on the line becomes (2, 1) after moving the origin to (1, 2).
        line = Line2D(a=1, b=-1, c=0)
        moved = line.translate_origin(1, 2)
        assert moved.includes_point(Point2D(label="P", x=2, y=1))

    def test_rotate_axes(self):
        line = Line2D(a=2, b=-4, c=6)
        expected = Line2D(a=-math.sqrt(2), b=-3 * math.sqrt(2), c=6)
        assert line.rotate_axes(45) == expected
        assert line.rotate_axes(0) == line

    def test_rotate_axes_keeps_c(self):
        assert Line2D(a=1, b=1, c=-3).rotate_axes(30).c == -3


class TestLine2DComparison:
    def test_proportional_lines_are_equal(self):
        assert Line2D(a=3, b=2, c=-6) == Line2D(a=6, b=4, c=-12)
        assert Line2D(a=1, b=-1, c=2) == Line2D(a=-2, b=2, c=-4)

    def test_parallel_lines_are_not_equal(self):
        assert Line2D(a=3, b=2, c=-6) != Line2D(a=3, b=2, c=-5)

    def test_hash_of_proportional_lines(self):
        assert hash(Line2D(a=3, b=2, c=-6)) == hash(Line2D(a=-6, b=-4, c=12))

    def test_order_by_distance_to_origin(self):
        through_origin = Line2D(a=1, b=1, c=0)
        near = Line2D(a=0, b=1, c=-1)
        far = Line2D(a=1, b=0, c=10)
        assert sorted([far, through_origin, near]) == [through_origin, near, far]
        assert far > near


class TestLineY2D:
    def test_create(self):
        line = LineY2D(k=9.12, b=11.2)
        assert line.k == 9.12
        assert line.b == 11.2

    def test_horizontal_and_origin(self):
        assert LineY2D(k=0, b=3).is_parallel_to_x()
        assert not LineY2D(k=1, b=3).is_parallel_to_x()
        assert LineY2D(k=2, b=0).passes_origin()
        assert LineY2D(k=0, b=0).passes_origin()

    def test_to_general_form(self):
        general = LineY2D(k=0.5, b=1.25).to_general_form()
        assert (general.a, general.b, general.c) == (0.5, -1, 1.25)
        assert general == Line2D(a=2, b=-4, c=5)

    def test_equality_tolerance(self):
        assert LineY2D(k=1, b=2) == LineY2D(k=1.0000001, b=1.9999999)
        assert LineY2D(k=1, b=2) != LineY2D(k=1, b=2.001)

    def test_equal_lines_hash_alike(self):
        assert len({LineY2D(k=1, b=2), LineY2D(k=1, b=2)}) == 1

    def test_distance_to(self):
        line = LineY2D(k=1, b=2)
        assert math.isclose(line.distance_to(Point2D.origin()), math.sqrt(2))

    def test_order_by_distance_to_origin(self):
        near = LineY2D(k=0, b=1)
        far = LineY2D(k=0, b=-3)
        assert near < far
        assert near.compare(LineY2D(k=0, b=-1)) == 0
