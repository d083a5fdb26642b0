"""Tests for Triangle2D."""

import math

import pytest

from planegeo.errors import DegenerateGeometryError
from planegeo.models import Point2D, Segment2D, Triangle2D


def _triangle(*coords: tuple[float, float], labels: str = "ABC") -> Triangle2D:
    a, b, c = (Point2D(label=label, x=x, y=y) for label, (x, y) in zip(labels, coords))
    return Triangle2D(a=a, b=b, c=c)


class TestSides:
    def test_cyclic_order(self):
        t = _triangle((0, 0), (0, 4), (3, 0))
        assert t.first_side.a.label + t.first_side.b.label == "AB"
        assert t.second_side.a.label + t.second_side.b.label == "BC"
        assert t.third_side.a.label + t.third_side.b.label == "CA"
        assert math.isclose(t.second_side.length, 5.0)

    def test_coinciding_vertices(self):
        with pytest.raises(DegenerateGeometryError):
            _triangle((0, 0), (0, 0), (3, 0))

    def test_perimeter(self):
        assert math.isclose(_triangle((0, 0), (0, 4), (3, 0)).perimeter, 12.0)


class TestMeasures:
    def test_area(self):
        t = _triangle((1, 3), (2, -5), (-8, 4))
        assert math.isclose(t.area, 35.5)

    def test_right_triangle(self):
        t = _triangle((0, 0), (0, 10), (10, 0))
        assert math.isclose(t.area, 50.0)
        assert t.first_angle == 90
        assert math.isclose(t.second_angle, 45.0)
        assert math.isclose(t.third_angle, 45.0)

    def test_collinear_vertices_are_accepted(self):
        t = _triangle((0, 0), (1, 1), (2, 2))
        assert t.area == 0
        assert (t.first_angle, t.second_angle, t.third_angle) == (0, 0, 0)
        assert not t.is_rectangular()

    def test_copy_recomputes(self):
        t = _triangle((1, 3), (2, -5), (-8, 4))
        copy = Triangle2D.from_triangle(t)
        assert copy is not t
        assert copy.area == t.area
        assert copy.first_angle == t.first_angle
        assert copy.a.label == "A" and copy.c.label == "C"


class TestMedians:
    def test_first_side_median(self):
        t = _triangle((0, 0), (4, 4), (5, 0))
        median = t.first_side_median("K")
        assert median.a == Point2D(label="C", x=5, y=0)
        assert median.b == Point2D(label="K", x=2, y=2)
        assert median.b.label == "K"

    def test_second_side_median(self):
        t = _triangle((0, 0), (0, 5), (4, 3))
        median = t.second_side_median("K")
        assert median.a == Point2D(label="A", x=0, y=0)
        assert median.b == Point2D(label="K", x=2, y=4)

    def test_third_side_median(self):
        t = _triangle((0, 0), (1, 2), (0, 6))
        median = t.third_side_median("K")
        assert median.a == Point2D(label="B", x=1, y=2)
        assert median.b == Point2D(label="K", x=0, y=3)

    def test_median_is_segment(self):
        assert isinstance(_triangle((0, 0), (4, 4), (5, 0)).first_side_median("M"), Segment2D)


class TestClassification:
    def test_is_rectangular(self):
        assert _triangle((0, 0), (0, 4), (6, 0)).is_rectangular()
        assert not _triangle((0, 0), (0, 4), (1, 3)).is_rectangular()

    def test_is_isosceles(self):
        assert _triangle((0, 0), (3, 3), (6, 0)).is_isosceles()
        assert _triangle((0, 0), (3, 3), (3, 0)).is_isosceles()
        assert not _triangle((0, 0), (0, 4), (6, 0)).is_isosceles()

    def test_is_equilateral(self):
        assert not _triangle((0, 0), (3, 3), (6, 0)).is_equilateral()
        assert _triangle((0, 0), (3, 5.1961524), (6, 0), labels="ADC").is_equilateral()
        assert _triangle((0, 0), (3, 3 * math.sqrt(3)), (6, 0)).is_isosceles()


class TestRecord:
    def test_dump_is_three_vertices(self):
        t = _triangle((0, 0), (0, 10), (10, 0))
        data = t.model_dump()
        assert set(data) == {"a", "b", "c", "format_version"}
        assert data["b"] == {"label": "B", "x": 0.0, "y": 10.0, "format_version": 1}

    def test_load_recomputes_measures(self):
        t = _triangle((0, 0), (0, 10), (10, 0))
        loaded = Triangle2D.model_validate_json(t.model_dump_json())
        assert loaded.area == 50
        assert loaded.is_rectangular()
