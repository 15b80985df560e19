"""Test module for bezcore.evaluator

The tests are run using pytest.
"""

import numpy as np
import pytest

from bezcore.evaluator import derivative, evaluate, evaluate_many, hodograph, polyterm

###############################################################################
# Evaluation Tests
###############################################################################


class TestEvaluate:
    """Bernstein evaluation of one axis."""

    @pytest.mark.parametrize(
        "values",
        [[7.0], [1.0, -4.0], [0.0, 200.0, 0.0], [3.0, -8.0, 12.5, 40.0], [1.0, 0.0, 0.0, 0.0, 9.0]],
    )
    def test_evaluate_endpoints(self, values):
        """The curve starts at the first and ends at the last control value."""
        assert evaluate(0.0, values) == values[0]
        assert evaluate(1.0, values) == values[-1]

    def test_evaluate_quadratic_midpoint(self):
        """Quadratic at t=0.5 is 0.25*a + 0.5*b + 0.25*c."""
        assert evaluate(0.5, [0.0, 200.0, 100.0]) == pytest.approx(125.0)

    def test_evaluate_cubic(self):
        """Cubic evaluation matches the expanded Bernstein form."""
        values = [0.0, 50.0, 150.0, 200.0]
        t = 0.3
        mt = 1 - t
        expected = mt**3 * 0 + 3 * mt**2 * t * 50 + 3 * mt * t**2 * 150 + t**3 * 200
        assert evaluate(t, values) == pytest.approx(expected)

    def test_polyterm(self):
        """polyterm is (1-t)^(n-k) * t^k."""
        assert polyterm(3, 1, 0.5) == pytest.approx(0.125)
        assert polyterm(2, 0, 0.0) == 1.0
        assert polyterm(2, 2, 1.0) == 1.0

    def test_evaluate_many_matches_scalar(self):
        """Vectorized evaluation agrees with the scalar version."""
        values = [3.0, -8.0, 12.5, 40.0]
        t = np.linspace(0.0, 1.0, 11)
        expected = [evaluate(float(ti), values) for ti in t]

        assert np.allclose(evaluate_many(t, values), expected)


###############################################################################
# Derivative Tests
###############################################################################


class TestDerivative:
    """Hodograph based derivatives."""

    @pytest.mark.parametrize("a", [-3.0, 0.0, 12.0])
    @pytest.mark.parametrize("t", [0.0, 0.25, 1.0])
    def test_derivative_of_constant_pair(self, a, t):
        """A constant has no slope."""
        assert derivative(1, t, [a, a]) == 0.0

    def test_derivative_single_value(self):
        """Order 0 curves have a zero derivative of any degree."""
        assert derivative(1, 0.3, [5.0]) == 0.0
        assert derivative(4, 0.3, [5.0]) == 0.0

    def test_derivative_zero_is_evaluate(self):
        """d=0 is plain evaluation."""
        values = [0.0, 50.0, 150.0, 200.0]
        assert derivative(0, 0.4, values) == evaluate(0.4, values)

    def test_derivative_quadratic(self):
        """First and second derivative of a quadratic."""
        values = [0.0, 100.0, 0.0]
        # B'(t) = 200(1-t) - 200t
        assert derivative(1, 0.25, values) == pytest.approx(100.0)
        assert derivative(2, 0.25, values) == pytest.approx(-400.0)

    def test_derivative_beyond_order(self):
        """Requesting more derivatives than the order returns 0."""
        assert derivative(3, 0.5, [0.0, 100.0, 0.0]) == 0.0
        assert derivative(5, 0.5, [1.0, 2.0, 7.0, -3.0]) == 0.0

    def test_hodograph(self):
        """Hodograph values are order times consecutive differences."""
        assert hodograph([0.0, 1.0, 3.0, 6.0]) == [3.0, 6.0, 9.0]
