"""Tolerance used by every approximate comparison in the package.

Entities always compare with :data:`EPSILON`. The helpers accept an explicit
``tolerance`` so comparison rules can be exercised in isolation.

Some checks (point on line, collinearity, parallelism) are exact on purpose
and do not go through these helpers.
"""

from __future__ import annotations

from typing import Final

# Threshold below which two floats are treated as equal. Never mutated.
EPSILON: Final[float] = 1e-6


def approx_equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    """True if ``a`` and ``b`` differ by less than ``tolerance``."""
    return abs(a - b) < tolerance


def is_near_zero(value: float, tolerance: float = EPSILON) -> bool:
    """True if ``value`` is closer to zero than ``tolerance``."""
    return abs(value) < tolerance


def sign(a: float, b: float) -> int:
    """Exact three-way comparison: -1, 0 or 1."""
    if a > b:
        return 1
    if a == b:
        return 0
    return -1
