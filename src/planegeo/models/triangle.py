"""Triangle built from three vertices."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from planegeo.formatting import format_triangle
from planegeo.models.point import Point2D
from planegeo.models.segment import Segment2D
from planegeo.models.versioning import FORMAT_VERSION, check_format_version


class Triangle2D(BaseModel):
    """Triangle ABC with sides AB, BC and CA (in that order).

    Area and the three interior angles are computed once at construction.
    Each angle comes from the area and its two adjacent sides through the
    law of sines, ``asin(2 * area / (|s| * |t|))``, so every angle lies in
    [0; 90] degrees.

    Collinear vertices are accepted: the area is zero and so are the angles.
    Coinciding vertices are not, since the sides would be zero segments.
    """

    model_config = ConfigDict(frozen=True)

    a: Point2D
    b: Point2D
    c: Point2D
    format_version: int = Field(default=FORMAT_VERSION, description="Record format revision")

    _first_side: Segment2D = PrivateAttr()
    _second_side: Segment2D = PrivateAttr()
    _third_side: Segment2D = PrivateAttr()
    _area: float = PrivateAttr(default=0.0)
    _first_angle: float = PrivateAttr(default=0.0)
    _second_angle: float = PrivateAttr(default=0.0)
    _third_angle: float = PrivateAttr(default=0.0)

    @field_validator("format_version")
    @classmethod
    def known_format_version(cls, v: int) -> int:
        return check_format_version(v)

    def model_post_init(self, __context: Any) -> None:
        self._first_side = Segment2D(a=self.a, b=self.b)
        self._second_side = Segment2D(a=self.b, b=self.c)
        self._third_side = Segment2D(a=self.c, b=self.a)
        self._area = self._compute_area()
        self._first_angle = self._compute_angle(self._third_side, self._first_side)
        self._second_angle = self._compute_angle(self._first_side, self._second_side)
        self._third_angle = self._compute_angle(self._second_side, self._third_side)

    @classmethod
    def from_triangle(cls, triangle: Triangle2D) -> Triangle2D:
        """Copy of ``triangle`` rebuilt from its sides; area and angles are recomputed."""
        return cls(
            a=triangle.first_side.a,
            b=triangle.second_side.a,
            c=triangle.third_side.a,
        )

    def _compute_area(self) -> float:
        a, b, c = self.a, self.b, self.c
        return abs(0.5 * ((a.x - c.x) * (b.y - c.y) - (b.x - c.x) * (a.y - c.y)))

    def _compute_angle(self, side: Segment2D, other: Segment2D) -> float:
        ratio = (2 * self._area) / (side.length * other.length)
        # Rounding can push a right angle's ratio just past 1.
        ratio = max(-1.0, min(1.0, ratio))
        return math.degrees(math.asin(ratio))

    # ── Sides ─────────────────────────────────────────────────────────

    @property
    def first_side(self) -> Segment2D:
        """Side AB."""
        return self._first_side

    @property
    def second_side(self) -> Segment2D:
        """Side BC."""
        return self._second_side

    @property
    def third_side(self) -> Segment2D:
        """Side CA."""
        return self._third_side

    @property
    def sides(self) -> tuple[Segment2D, Segment2D, Segment2D]:
        return (self._first_side, self._second_side, self._third_side)

    # ── Measures ──────────────────────────────────────────────────────

    @property
    def area(self) -> float:
        return self._area

    @property
    def perimeter(self) -> float:
        return sum(side.length for side in self.sides)

    @property
    def first_angle(self) -> float:
        """Angle at A, between CA and AB, in degrees."""
        return self._first_angle

    @property
    def second_angle(self) -> float:
        """Angle at B, between AB and BC, in degrees."""
        return self._second_angle

    @property
    def third_angle(self) -> float:
        """Angle at C, between BC and CA, in degrees."""
        return self._third_angle

    # ── Medians ───────────────────────────────────────────────────────

    def first_side_median(self, label: str) -> Segment2D:
        """Median from C to the midpoint of AB, which gets ``label``."""
        return Segment2D(a=self._second_side.b, b=self._first_side.midpoint(label))

    def second_side_median(self, label: str) -> Segment2D:
        """Median from A to the midpoint of BC, which gets ``label``."""
        return Segment2D(a=self._first_side.a, b=self._second_side.midpoint(label))

    def third_side_median(self, label: str) -> Segment2D:
        """Median from B to the midpoint of CA, which gets ``label``."""
        return Segment2D(a=self._first_side.b, b=self._third_side.midpoint(label))

    # ── Classification ────────────────────────────────────────────────

    def is_rectangular(self) -> bool:
        """True if one of the angles is exactly 90 degrees."""
        return self._first_angle == 90 or self._second_angle == 90 or self._third_angle == 90

    def is_isosceles(self) -> bool:
        first, second, third = self.sides
        return first == second or first == third or second == third

    def is_equilateral(self) -> bool:
        first, second, third = self.sides
        return first == second and first == third

    def __str__(self) -> str:
        return format_triangle(self)
