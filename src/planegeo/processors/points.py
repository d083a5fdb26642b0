"""Calculations relating points to other points and to lines."""

from __future__ import annotations

from planegeo.models.line import Line2D
from planegeo.models.point import Point2D
from planegeo.models.slope_line import LineY2D


def lie_on_same_line(first: Point2D, second: Point2D, third: Point2D) -> bool:
    """True if the three points are collinear.

    Uses the signed-area determinant
    ``(x2 - x1)(y3 - y1) - (x3 - x1)(y2 - y1)`` compared to zero exactly,
    unlike point equality which is tolerant.
    """
    x1, y1 = first.x, first.y
    x2, y2 = second.x, second.y
    x3, y3 = third.x, third.y
    return (x2 - x1) * (y3 - y1) - (x3 - x1) * (y2 - y1) == 0


def lie_on_same_side(first: Point2D, second: Point2D, line: Line2D) -> bool:
    """True if both points are on the same side of ``line``.

    A point on the line itself counts as being on the non-negative side.
    """
    first_value = line.value_at(first)
    second_value = line.value_at(second)
    return (first_value >= 0 and second_value >= 0) or (first_value < 0 and second_value < 0)


def distance_to_line(point: Point2D, line: Line2D | LineY2D) -> float:
    """Distance from ``point`` to a line in either form.

    ``|Ax + By + C| / sqrt(A^2 + B^2)`` for the general form,
    ``|y - kx - b| / sqrt(k^2 + 1)`` for the slope form.
    """
    if not isinstance(line, (Line2D, LineY2D)):
        raise TypeError(f"Expected Line2D or LineY2D, got {type(line).__name__}")
    return line.distance_to(point)
