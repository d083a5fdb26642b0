"""Stateless calculations over already-built entities."""

from planegeo.processors.points import distance_to_line, lie_on_same_line, lie_on_same_side
from planegeo.processors.lines import (
    are_parallel,
    are_perpendicular,
    find_angle_between,
    find_intersection,
    find_line_by_angle,
    find_parallel_line_through_point,
    find_perpendicular_line_through_point,
)

__all__ = [
    "lie_on_same_line",
    "lie_on_same_side",
    "distance_to_line",
    "are_parallel",
    "are_perpendicular",
    "find_intersection",
    "find_angle_between",
    "find_line_by_angle",
    "find_parallel_line_through_point",
    "find_perpendicular_line_through_point",
]
