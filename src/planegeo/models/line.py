"""Line in the general form ``Ax + By + C = 0``."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from planegeo.errors import DegenerateGeometryError, RepresentationError
from planegeo.formatting import format_line
from planegeo.models.point import Point2D
from planegeo.models.segment import Segment2D
from planegeo.models.versioning import FORMAT_VERSION, check_format_version
from planegeo.tolerance import is_near_zero, sign

if TYPE_CHECKING:
    from planegeo.models.slope_line import LineY2D


class Line2D(BaseModel):
    """A line given by the coefficients of ``Ax + By + C = 0``.

    A and B may not both be zero: such an equation is either the identity
    ``0 = 0`` or a contradiction like ``9 = 0``, neither of which is a line.

    The equation is defined up to a nonzero factor, so two lines are equal
    when their coefficients are proportional (``A1/A2 = B1/B2 = C1/C2``),
    checked through cross products within the global tolerance. Lines are
    ordered by their distance to the origin.

    Membership (:meth:`includes_point`) and the axis checks are exact.
    """

    model_config = ConfigDict(frozen=True)

    a: float = Field(description="Coefficient of x")
    b: float = Field(description="Coefficient of y")
    c: float = Field(default=0.0, description="Free term")
    format_version: int = Field(default=FORMAT_VERSION, description="Record format revision")

    @field_validator("format_version")
    @classmethod
    def known_format_version(cls, v: int) -> int:
        return check_format_version(v)

    @model_validator(mode="after")
    def is_a_line(self) -> Line2D:
        if self.a == 0 and self.b == 0:
            raise DegenerateGeometryError(DegenerateGeometryError.NON_EXISTENT_LINE)
        return self

    # ── Construction ──────────────────────────────────────────────────

    @classmethod
    def from_segment(cls, segment: Segment2D) -> Line2D:
        """Line through both ends of a segment.

        Expands the two-point determinant ``(x2-x1)(y-y1) - (x-x1)(y2-y1) = 0``.
        """
        x1, y1 = segment.a.x, segment.a.y
        x2, y2 = segment.b.x, segment.b.y
        return cls(a=y1 - y2, b=x2 - x1, c=x1 * y2 - x2 * y1)

    @classmethod
    def from_points(cls, first: Point2D, second: Point2D) -> Line2D:
        """Line through two distinct points."""
        return cls.from_segment(Segment2D(a=first, b=second))

    # ── Queries ───────────────────────────────────────────────────────

    def value_at(self, point: Point2D) -> float:
        """Left-hand side of the equation evaluated at ``point``."""
        return self.a * point.x + self.b * point.y + self.c

    def includes_point(self, point: Point2D) -> bool:
        return self.value_at(point) == 0

    def is_parallel_to_x(self) -> bool:
        return self.a == 0

    def is_parallel_to_y(self) -> bool:
        return self.b == 0

    def passes_origin(self) -> bool:
        return self.c == 0

    def distance_to(self, point: Point2D) -> float:
        """Distance from ``point``: ``|Ax + By + C| / sqrt(A^2 + B^2)``."""
        return abs(self.value_at(point) / math.sqrt(self.a ** 2 + self.b ** 2))

    # ── Transformations ───────────────────────────────────────────────

    def to_slope_form(self) -> LineY2D:
        """Rewrite as ``y = kx + b``.

        Raises:
            RepresentationError: the line is parallel to OY and has no slope.
        """
        from planegeo.models.slope_line import LineY2D

        if self.is_parallel_to_y():
            raise RepresentationError(RepresentationError.VERTICAL_LINE)
        return LineY2D(k=-(self.a / self.b), b=-(self.c / self.b))

    def translate_origin(self, x: float, y: float) -> Line2D:
        """Equation of the same line after moving the origin to ``(x, y)``.

        Substitutes ``x = x' + x0, y = y' + y0``; only C changes.
        """
        return Line2D(a=self.a, b=self.b, c=self.a * x + self.b * y + self.c)

    def rotate_axes(self, degrees: float) -> Line2D:
        """Equation of the same line after rotating the axes by ``degrees``.

        Substitutes ``x = x'cos(t) - y'sin(t), y = x'sin(t) + y'cos(t)``.
        The origin does not move, so C is unchanged.
        """
        radians = math.radians(degrees)
        cos_t = math.cos(radians)
        sin_t = math.sin(radians)
        return Line2D(
            a=self.a * cos_t + self.b * sin_t,
            b=self.b * cos_t - self.a * sin_t,
            c=self.c,
        )

    # ── Comparison ────────────────────────────────────────────────────

    def compare(self, other: Line2D) -> int:
        """Order by distance to the origin: -1, 0 or 1."""
        center = Point2D.origin()
        return sign(self.distance_to(center), other.distance_to(center))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return (
            is_near_zero(self.a * other.b - other.a * self.b)
            and is_near_zero(self.a * other.c - other.a * self.c)
            and is_near_zero(self.b * other.c - other.b * self.c)
        )

    def __hash__(self) -> int:
        # Normalize so proportional equations hash alike. Rounding to 6
        # places is coarser than __eq__, so near-boundary equal lines may not.
        norm = math.sqrt(self.a ** 2 + self.b ** 2)
        a, b, c = self.a / norm, self.b / norm, self.c / norm
        if a < 0 or (a == 0 and b < 0):
            a, b, c = -a, -b, -c
        return hash((round(a, 6), round(b, 6), round(c, 6)))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return format_line(self)
