"""Immutable geometric primitives of the plane."""

from planegeo.models.quarter import Quarter
from planegeo.models.point import Point2D
from planegeo.models.segment import Segment2D
from planegeo.models.line import Line2D
from planegeo.models.slope_line import LineY2D
from planegeo.models.triangle import Triangle2D
from planegeo.models.versioning import FORMAT_VERSION

__all__ = [
    "FORMAT_VERSION",
    "Quarter",
    "Point2D",
    "Segment2D",
    "Line2D",
    "LineY2D",
    "Triangle2D",
]
