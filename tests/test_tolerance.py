"""Tests for the shared tolerance helpers."""

from planegeo.tolerance import EPSILON, approx_equal, is_near_zero, sign


class TestTolerance:
    def test_epsilon(self):
        assert EPSILON == 1e-6

    def test_approx_equal(self):
        assert approx_equal(1.0, 1.0 + 5e-7)
        assert not approx_equal(1.0, 1.0 + 2e-6)

    def test_boundary_is_exclusive(self):
        assert not approx_equal(0.0, 0.5, tolerance=0.5)

    def test_injected_tolerance(self):
        assert approx_equal(1.0, 1.01, tolerance=0.1)
        assert not is_near_zero(1e-3)
        assert is_near_zero(1e-3, tolerance=1e-2)

    def test_sign(self):
        assert sign(2.0, 1.0) == 1
        assert sign(1.0, 1.0) == 0
        assert sign(-1.0, 1.0) == -1
