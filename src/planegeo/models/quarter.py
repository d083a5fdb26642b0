"""Quadrant classification of a point."""

from __future__ import annotations

from enum import Enum


class Quarter(str, Enum):
    """Quadrant of the coordinate plane, named by roman numeral.

    UNDEFINED: the point lies on an axis (or is the origin)
    FIRST: x > 0, y > 0
    SECOND: x < 0, y > 0
    THIRD: x < 0, y < 0
    FOURTH: x > 0, y < 0
    """

    UNDEFINED = "O"
    FIRST = "I"
    SECOND = "II"
    THIRD = "III"
    FOURTH = "IV"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, x: float, y: float) -> Quarter:
        """Classify a coordinate pair by the signs of its components."""
        if x == 0 or y == 0:
            return cls.UNDEFINED
        if x > 0:
            return cls.FIRST if y > 0 else cls.FOURTH
        return cls.SECOND if y > 0 else cls.THIRD
