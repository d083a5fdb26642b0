"""Calculations relating lines to other lines and to points.

Most functions accept both representations, as long as both lines passed
to one call use the same one:

- general form ``Ax + By + C = 0`` (:class:`Line2D`)
- slope form ``y = kx + b`` (:class:`LineY2D`)

Parallel and perpendicular checks compare to zero exactly.
"""

from __future__ import annotations

import logging
import math

from planegeo.errors import InfiniteIntersectionError, NoIntersectionError, RepresentationError
from planegeo.models.line import Line2D
from planegeo.models.point import Point2D
from planegeo.models.slope_line import LineY2D

logger = logging.getLogger(__name__)

AnyLine = Line2D | LineY2D


def _same_form(first: AnyLine, second: AnyLine) -> type:
    if isinstance(first, Line2D) and isinstance(second, Line2D):
        return Line2D
    if isinstance(first, LineY2D) and isinstance(second, LineY2D):
        return LineY2D
    raise TypeError(
        f"Both lines must use the same form, got {type(first).__name__} "
        f"and {type(second).__name__}"
    )


def are_parallel(first: AnyLine, second: AnyLine) -> bool:
    """True if the lines are parallel (or coincide).

    General form: ``A1*B2 - A2*B1 == 0``. Slope form: ``k1 == k2``.
    """
    if _same_form(first, second) is Line2D:
        return first.a * second.b - second.a * first.b == 0
    return first.k == second.k


def are_perpendicular(first: AnyLine, second: AnyLine) -> bool:
    """True if the lines are perpendicular.

    General form: ``A1*A2 + B1*B2 == 0``. Slope form: ``k1*k2 == -1``.
    """
    if _same_form(first, second) is Line2D:
        return first.a * second.a + first.b * second.b == 0
    return first.k * second.k == -1


def find_intersection(label: str, first: AnyLine, second: AnyLine) -> Point2D:
    """Single intersection point of two lines, solved by Cramer's rule.

    Slope-form lines are converted to the general form first.

    Raises:
        InfiniteIntersectionError: the lines coincide. Checked first, since
            coinciding lines also pass the parallel check.
        NoIntersectionError: the lines are parallel and distinct.
    """
    if _same_form(first, second) is LineY2D:
        first, second = first.to_general_form(), second.to_general_form()

    if first == second:
        raise InfiniteIntersectionError()
    if are_parallel(first, second):
        raise NoIntersectionError()

    determinant = first.a * second.b - second.a * first.b
    x = (second.c * first.b - first.c * second.b) / determinant
    y = (first.c * second.a - second.c * first.a) / determinant
    logger.debug("Lines %s and %s intersect at (%s, %s)", first, second, x, y)
    return Point2D(label=label, x=x, y=y)


def find_angle_between(first: AnyLine, second: AnyLine) -> float:
    """Angle from ``first`` to ``second`` in degrees, in (-90; 90].

    Perpendicular lines give exactly 90 and parallel ones 0, before the
    tangent formula would divide by zero.
    """
    if are_perpendicular(first, second):
        return 90.0
    if are_parallel(first, second):
        return 0.0

    if isinstance(first, Line2D):
        tan = (first.a * second.b - second.a * first.b) / (first.a * second.a + first.b * second.b)
    else:
        tan = (second.k - first.k) / (1 + first.k * second.k)
    return math.degrees(math.atan(tan))


def find_line_by_angle(degrees: float, line: LineY2D) -> LineY2D:
    """Line through the origin forming ``degrees`` with ``line``.

    Solves ``tan(t) = (k2 - k1) / (1 + k1*k2)`` for the unknown slope ``k2``.

    Raises:
        RepresentationError: ``tan(t) * k1 == 1``, so the requested line is
            vertical.
    """
    k1 = line.k
    tan = math.tan(math.radians(degrees))
    denominator = tan * k1 - 1
    if denominator == 0:
        raise RepresentationError(RepresentationError.VERTICAL_LINE)
    k2 = (-tan - k1) / denominator
    return LineY2D(k=k2, b=0.0)


def find_parallel_line_through_point(point: Point2D, line: AnyLine) -> AnyLine:
    """Line parallel to ``line`` passing through ``point``, in the same form."""
    if isinstance(line, Line2D):
        return Line2D(a=line.a, b=line.b, c=-line.a * point.x - line.b * point.y)
    if isinstance(line, LineY2D):
        return LineY2D(k=line.k, b=point.y - line.k * point.x)
    raise TypeError(f"Expected Line2D or LineY2D, got {type(line).__name__}")


def find_perpendicular_line_through_point(point: Point2D, line: AnyLine) -> AnyLine:
    """Line perpendicular to ``line`` passing through ``point``, in the same form.

    Raises:
        RepresentationError: ``line`` is a horizontal slope-form line, whose
            perpendicular is vertical.
    """
    if isinstance(line, Line2D):
        # Avoid -0.0 in B.
        b = -line.a if line.a != 0 else 0.0
        return Line2D(a=line.b, b=b, c=line.a * point.y - line.b * point.x)
    if isinstance(line, LineY2D):
        if line.k == 0:
            raise RepresentationError(RepresentationError.VERTICAL_LINE)
        return LineY2D(k=-1 / line.k, b=point.x / line.k + point.y)
    raise TypeError(f"Expected Line2D or LineY2D, got {type(line).__name__}")
