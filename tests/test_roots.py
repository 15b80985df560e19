"""Test module for bezcore.roots

The tests are run using pytest.
"""

import pytest

from bezcore.consts import NO_ROOT, RootSearchSettings
from bezcore.evaluator import derivative
from bezcore.roots import find_all_roots, find_root, is_linear

###############################################################################
# is_linear Tests
###############################################################################


class TestIsLinear:
    """Straight progression heuristic."""

    def test_even_progression(self):
        """Equal differences are linear."""
        assert is_linear([0.0, 10.0, 20.0, 30.0])

    def test_within_tolerance(self):
        """Differences within 2 of the first difference are linear."""
        assert is_linear([0.0, 10.0, 21.5, 30.0])

    def test_outside_tolerance(self):
        """Differences further than 2 away are not."""
        assert not is_linear([0.0, 10.0, 23.0, 30.0])

    def test_custom_tolerance(self):
        """The tolerance is configurable."""
        assert is_linear([0.0, 0.1, 0.2, 0.45], tolerance=0.5)
        assert not is_linear([0.0, 0.1, 0.2, 0.45], tolerance=0.01)


###############################################################################
# find_root Tests
###############################################################################


class TestFindRoot:
    """Newton-Raphson search."""

    def test_converges_on_linear_derivative(self):
        """Derivative of a symmetric arch vanishes at t=0.5."""
        root = find_root(1, 0.1, [0.0, 100.0, 100.0, 0.0])
        assert root == pytest.approx(0.5, abs=1e-6)

    def test_offset(self):
        """Searches where the curve itself reaches a target value."""
        values = [0.0, 30.0, 70.0, 100.0]
        root = find_root(0, 0.5, values, offset=25.0)
        assert derivative(0, root, values) == pytest.approx(25.0, abs=1e-3)

    def test_no_convergence(self):
        """A derivative without real roots returns the sentinel."""
        # x' = 30 + 60t + 120t^2 has no real root
        assert find_root(1, 0.5, [0.0, 10.0, 30.0, 100.0]) == NO_ROOT

    def test_zero_slope_without_root(self):
        """A flat signal off target keeps stepping by f and gives up."""
        # slope is 0 everywhere, every step moves t by f = 2
        assert find_root(0, 0.5, [3.0, 3.0, 3.0], offset=1.0) == NO_ROOT

    def test_zero_slope_at_root(self):
        """A seed on the apex of an arch converges despite a zero slope."""
        # B(t) = 2t(1-t) reaches 0.5 at t=0.5 where B'(0.5) = 0
        assert find_root(0, 0.5, [0.0, 1.0, 0.0], offset=0.5) == 0.5

    def test_zero_slope_seed_of_s_curve(self):
        """From the inflection of an S-curve the unit step overshoots past the depth cap."""
        # x'(0.5) = -150 and x''(0.5) = 0, so t jumps to 150.5
        assert find_root(1, 0.5, [0.0, 100.0, -100.0, 0.0]) == NO_ROOT

    def test_depth_cap(self):
        """A single step cannot converge from a distant seed."""
        settings = RootSearchSettings(max_depth=1)
        assert find_root(0, 0.0, [0.0, 30.0, 70.0, 100.0], offset=90.0, settings=settings) == NO_ROOT


###############################################################################
# find_all_roots Tests
###############################################################################


class TestFindAllRoots:
    """Derivative root collection."""

    def test_monotonic_general_case(self):
        """A strictly monotonic derivative-1 signal has no roots."""
        assert find_all_roots(1, [0.0, 10.0, 30.0, 100.0]) == []

    def test_monotonic_linear_case(self):
        """A straight progression has no extremum."""
        assert find_all_roots(1, [0.0, 10.0, 20.0, 30.0]) == []

    def test_linear_higher_derivative(self):
        """Straight progressions have no root for d > 1."""
        assert find_all_roots(2, [0.0, 10.0, 20.0, 30.0]) == []

    def test_quadratic_single_root(self):
        """Quadratic first derivatives are solved directly."""
        roots = find_all_roots(1, [0.0, 100.0, 0.0])
        assert roots == [pytest.approx(0.5)]

    def test_quadratic_off_center_root(self):
        """B'(t) = 40(1-t) - 120t vanishes at t=0.25."""
        roots = find_all_roots(1, [0.0, 20.0, -40.0])
        assert len(roots) == 1
        assert roots[0] == pytest.approx(0.25, abs=1e-3)

    def test_quadratic_without_sign_change(self):
        """Quadratic with monotonic derivative."""
        assert find_all_roots(1, [0.0, 20.0, 100.0]) == []

    def test_cubic_single_interior_root(self):
        """One interior sign change yields exactly one root."""
        roots = find_all_roots(1, [0.0, 100.0, 100.0, 0.0])
        assert len(roots) == 1
        assert roots[0] == pytest.approx(0.5, abs=1e-3)

    def test_cubic_two_roots_in_sampling_order(self):
        """Both extrema of an S-shaped cubic are found once each."""
        # x'(t) = 300 - 1800t + 1800t^2, roots at 0.5 -+ sqrt(3)/6
        values = [0.0, 100.0, -100.0, 0.0]
        roots = find_all_roots(1, values)

        assert len(roots) == 2
        for root in roots:
            assert 0.0 <= root <= 1.0
            assert derivative(1, root, values) == pytest.approx(0.0, abs=1e-2)
        assert roots[0] < roots[1]

    def test_second_derivative_root(self):
        """Inflection of a cubic axis."""
        roots = find_all_roots(2, [0.0, 100.0, -100.0, 0.0])
        assert roots == [pytest.approx(0.5, abs=1e-6)]

    def test_direct_root_on_precision_grid(self):
        """Directly solved roots are rounded like sampled ones."""
        # B'(t) = 2(1-t) - 4t vanishes at t=1/3
        settings = RootSearchSettings(precision=1e-3)
        roots = find_all_roots(1, [0.0, 1.0, -1.0], settings=settings)

        assert roots == [round(1 / 3 / 1e-3) * 1e-3]

    def test_roots_are_distinct(self):
        """Rounded roots are deduplicated."""
        roots = find_all_roots(1, [0.0, 100.0, 100.0, 0.0])
        assert len(roots) == len(set(roots))
