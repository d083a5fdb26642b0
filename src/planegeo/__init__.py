"""Analytic geometry of the Euclidean plane: points, segments, lines, triangles."""

from planegeo.errors import (
    DegenerateGeometryError,
    GeometryError,
    InfiniteIntersectionError,
    IntersectionError,
    NoIntersectionError,
    RepresentationError,
)
from planegeo.models import Line2D, LineY2D, Point2D, Quarter, Segment2D, Triangle2D
from planegeo.scene import Scene
from planegeo.tolerance import EPSILON

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EPSILON",
    "GeometryError",
    "DegenerateGeometryError",
    "IntersectionError",
    "InfiniteIntersectionError",
    "NoIntersectionError",
    "RepresentationError",
    "Quarter",
    "Point2D",
    "Segment2D",
    "Line2D",
    "LineY2D",
    "Triangle2D",
    "Scene",
]
