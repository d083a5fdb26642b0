"""Human-readable rendering of entities with two decimal places.

Every function takes a ``decimal_mark`` so callers can print ``3,50``
instead of ``3.50`` for locales that use a comma.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planegeo.models.line import Line2D
    from planegeo.models.point import Point2D
    from planegeo.models.segment import Segment2D
    from planegeo.models.slope_line import LineY2D
    from planegeo.models.triangle import Triangle2D


def _num(value: float, decimal_mark: str) -> str:
    text = f"{value:.2f}"
    if decimal_mark != ".":
        text = text.replace(".", decimal_mark)
    return text


def format_point(point: Point2D, decimal_mark: str = ".") -> str:
    """``A(-9.65; 11.42)``"""
    return f"{point.label}({_num(point.x, decimal_mark)}; {_num(point.y, decimal_mark)})"


def format_segment(segment: Segment2D, decimal_mark: str = ".") -> str:
    """``AB(x1;y1;x2;y2)``"""
    a, b = segment.a, segment.b
    coords = ";".join(_num(v, decimal_mark) for v in (a.x, a.y, b.x, b.y))
    return f"{a.label}{b.label}({coords})"


def format_triangle(triangle: Triangle2D, decimal_mark: str = ".") -> str:
    """``ABC(area)``"""
    labels = triangle.a.label + triangle.b.label + triangle.c.label
    return f"{labels}({_num(triangle.area, decimal_mark)})"


def format_line(line: Line2D, decimal_mark: str = ".") -> str:
    """General equation with zero terms left out.

    For example ``5.23x + 5.00y - 6.11 = 0``, ``6.99y + 5.01 = 0`` or
    ``9.12x - 0.00 = 0``.
    """
    parts: list[str] = []
    if line.a != 0:
        parts.append(f"{_num(line.a, decimal_mark)}x ")

    if line.a != 0:
        if line.b > 0:
            parts.append(f"+ {_num(line.b, decimal_mark)}y ")
        elif line.b < 0:
            parts.append(f"- {_num(abs(line.b), decimal_mark)}y ")
    elif line.b != 0:
        parts.append(f"{_num(line.b, decimal_mark)}y ")

    if line.c > 0:
        parts.append(f"+ {_num(line.c, decimal_mark)} = 0")
    else:
        parts.append(f"- {_num(abs(line.c), decimal_mark)} = 0")
    return "".join(parts)


def format_slope_line(line: LineY2D, decimal_mark: str = ".") -> str:
    """``y = 9.12x + 11.20``"""
    if line.b >= 0:
        tail = f"+ {_num(line.b, decimal_mark)}"
    else:
        tail = f"- {_num(abs(line.b), decimal_mark)}"
    return f"y = {_num(line.k, decimal_mark)}x {tail}"
