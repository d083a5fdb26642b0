"""Segment between two distinct points."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from planegeo.errors import DegenerateGeometryError
from planegeo.formatting import format_segment
from planegeo.models.point import Point2D
from planegeo.models.versioning import FORMAT_VERSION, check_format_version
from planegeo.tolerance import approx_equal, sign


class Segment2D(BaseModel):
    """A segment [A; B] with a length computed once at construction.

    Segments compare by length only: two segments of the same length are
    equal wherever they lie in the plane (congruence, not identity).
    """

    model_config = ConfigDict(frozen=True)

    a: Point2D
    b: Point2D
    format_version: int = Field(default=FORMAT_VERSION, description="Record format revision")

    _length: float = PrivateAttr(default=0.0)

    @field_validator("format_version")
    @classmethod
    def known_format_version(cls, v: int) -> int:
        return check_format_version(v)

    @model_validator(mode="after")
    def endpoints_differ(self) -> Segment2D:
        if self.a == self.b:
            raise DegenerateGeometryError(DegenerateGeometryError.ZERO_SEGMENT)
        return self

    def model_post_init(self, __context: Any) -> None:
        self._length = math.sqrt((self.b.x - self.a.x) ** 2 + (self.b.y - self.a.y) ** 2)

    @property
    def length(self) -> float:
        return self._length

    def find_splitter_point(self, label: str, numerator: float, denominator: float) -> Point2D:
        """Point dividing the segment in the ratio ``numerator:denominator`` from A to B.

        Uses the section formula ``x = (d*xa + n*xb) / (n + d)``. The ratio is
        not bounded, so negative parts extrapolate beyond the segment.

        Raises:
            DegenerateGeometryError: the parts cancel out (``n + d == 0``),
                so no finite point divides the segment.
        """
        total = numerator + denominator
        if total == 0:
            raise DegenerateGeometryError(DegenerateGeometryError.OPPOSITE_RATIO)
        x = (denominator * self.a.x + numerator * self.b.x) / total
        y = (denominator * self.a.y + numerator * self.b.y) / total
        return Point2D(label=label, x=x, y=y)

    def midpoint(self, label: str) -> Point2D:
        return self.find_splitter_point(label, 1, 1)

    def compare(self, other: Segment2D) -> int:
        """Order by length: -1, 0 or 1."""
        return sign(self.length, other.length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment2D):
            return NotImplemented
        return approx_equal(self.length, other.length)

    def __hash__(self) -> int:
        return hash(round(self.length, 6))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Segment2D):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Segment2D):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Segment2D):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Segment2D):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return format_segment(self)
