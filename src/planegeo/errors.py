"""Errors raised by geometric constructions and calculations.

All of them derive from :class:`ArithmeticError` rather than ``ValueError``,
so they pass through pydantic validators unchanged instead of being folded
into a ``ValidationError``.
"""

from __future__ import annotations


class GeometryError(ArithmeticError):
    """Base class for all planegeo errors."""


class DegenerateGeometryError(GeometryError):
    """The requested object has no geometric meaning (zero segment, 0 = C line)."""

    ZERO_SEGMENT = "Attempt to create a zero segment! Use points instead of zero segments."
    NON_EXISTENT_LINE = "Attempt to create a non-existent line: A and B are both zero!"
    OPPOSITE_RATIO = "Parts of the ratio must not cancel out: numerator + denominator is 0!"


class IntersectionError(GeometryError):
    """The linear system of two lines has no unique solution."""


class InfiniteIntersectionError(IntersectionError):
    """The lines coincide."""

    def __init__(self, message: str = "There are infinitely many intersection points!") -> None:
        super().__init__(message)


class NoIntersectionError(IntersectionError):
    """The lines are parallel and distinct."""

    def __init__(self, message: str = "There are no intersection points!") -> None:
        super().__init__(message)


class RepresentationError(GeometryError):
    """A line cannot be expressed in the requested form."""

    VERTICAL_LINE = "B should not be 0: a vertical line has no slope form!"
