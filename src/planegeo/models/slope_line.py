"""Line in the slope form ``y = kx + b``."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planegeo.formatting import format_slope_line
from planegeo.models.line import Line2D
from planegeo.models.point import Point2D
from planegeo.models.versioning import FORMAT_VERSION, check_format_version
from planegeo.tolerance import approx_equal, sign


class LineY2D(BaseModel):
    """A non-vertical line ``y = kx + b``.

    Both coefficients are unconstrained; ``k = b = 0`` is the OX axis itself.
    Vertical lines cannot be expressed in this form.
    """

    model_config = ConfigDict(frozen=True)

    k: float = Field(description="Slope: tangent of the angle with the positive OX direction")
    b: float = Field(default=0.0, description="Intercept on the OY axis")
    format_version: int = Field(default=FORMAT_VERSION, description="Record format revision")

    @field_validator("format_version")
    @classmethod
    def known_format_version(cls, v: int) -> int:
        return check_format_version(v)

    def is_parallel_to_x(self) -> bool:
        return self.k == 0

    def passes_origin(self) -> bool:
        return self.b == 0

    def to_general_form(self) -> Line2D:
        """Rewrite as ``kx - y + b = 0``."""
        return Line2D(a=self.k, b=-1.0, c=self.b)

    def distance_to(self, point: Point2D) -> float:
        """Distance from ``point``: ``|y - kx - b| / sqrt(k^2 + 1)``."""
        return abs((point.y - self.k * point.x - self.b) / math.sqrt(self.k ** 2 + 1))

    def compare(self, other: LineY2D) -> int:
        """Order by distance to the origin: -1, 0 or 1."""
        center = Point2D.origin()
        return sign(self.distance_to(center), other.distance_to(center))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineY2D):
            return NotImplemented
        return approx_equal(self.k, other.k) and approx_equal(self.b, other.b)

    def __hash__(self) -> int:
        return hash((round(self.k, 6), round(self.b, 6)))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LineY2D):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LineY2D):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LineY2D):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LineY2D):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return format_slope_line(self)
