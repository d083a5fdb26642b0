"""Named point in the plane."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from planegeo.formatting import format_point
from planegeo.models.quarter import Quarter
from planegeo.models.versioning import FORMAT_VERSION, check_format_version
from planegeo.tolerance import approx_equal, sign


class Point2D(BaseModel):
    """A point with a one-letter label, e.g. ``A(-2; 5)``.

    Two points are equal when both coordinates agree within the global
    tolerance; the label does not take part. Points are ordered by their
    distance to the origin.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="O", min_length=1, max_length=1, description="Letter designation")
    x: float
    y: float
    format_version: int = Field(default=FORMAT_VERSION, description="Record format revision")

    _quarter: Quarter = PrivateAttr(default=Quarter.UNDEFINED)

    @field_validator("format_version")
    @classmethod
    def known_format_version(cls, v: int) -> int:
        return check_format_version(v)

    def model_post_init(self, __context: Any) -> None:
        self._quarter = Quarter.of(self.x, self.y)

    @classmethod
    def origin(cls) -> Point2D:
        """The center of the coordinate system, ``O(0; 0)``."""
        return cls(label="O", x=0.0, y=0.0)

    @property
    def quarter(self) -> Quarter:
        return self._quarter

    def renamed(self, label: str) -> Point2D:
        """Same coordinates under a different label."""
        return Point2D(label=label, x=self.x, y=self.y)

    def is_origin(self) -> bool:
        return self.x == 0 and self.y == 0

    def lies_on_x(self) -> bool:
        """True if the point lies on the OX axis."""
        return self.y == 0

    def lies_on_y(self) -> bool:
        """True if the point lies on the OY axis."""
        return self.x == 0

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def compare(self, other: Point2D) -> int:
        """Order by distance to the origin: -1, 0 or 1."""
        center = Point2D.origin()
        return sign(self.distance_to(center), other.distance_to(center))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return approx_equal(self.x, other.x) and approx_equal(self.y, other.y)

    def __hash__(self) -> int:
        # Equal points straddling a 1e-6 rounding boundary can still hash apart.
        return hash((round(self.x, 6), round(self.y, 6)))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return format_point(self)
