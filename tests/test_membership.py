"""
Tests for membership functions and fuzzy variables.

Covers:
    - Triangular / trapezoidal degrees at breakpoints and on ramps
    - Zero-width ramps behaving as steps
    - Range, support and continuity of the handover FIS terms
    - Construction errors
"""

import numpy as np
import pytest

from fuzzy_handover.fuzzy import (
    FuzzyConfigurationError,
    FuzzyVariable,
    MembershipFunction,
    degree,
    trapezoid,
    triangle,
)


# =============================================================================
# Shapes
# =============================================================================

class TestTriangle:

    def test_peak_and_feet(self):
        assert triangle(0.0, -4, 0, 4) == 1.0
        assert triangle(-4.0, -4, 0, 4) == 0.0
        assert triangle(4.0, -4, 0, 4) == 0.0

    def test_linear_ramps(self):
        assert triangle(2.0, -4, 0, 4) == pytest.approx(0.5)
        assert triangle(-1.0, -4, 0, 4) == pytest.approx(0.75)
        assert triangle(-8.0, -15, -8, -1) == pytest.approx(1.0)
        assert triangle(-12.0, -15, -8, -1) == pytest.approx(3 / 7)

    def test_outside_support(self):
        assert triangle(-10.0, -4, 0, 4) == 0.0
        assert triangle(10.0, -4, 0, 4) == 0.0

    def test_returns_float_for_scalar(self):
        assert isinstance(triangle(1.0, 0, 1, 2), float)


class TestTrapezoid:

    def test_plateau(self):
        for x in (100.0, 115.0, 130.0):
            assert trapezoid(x, 80, 100, 130, 130) == 1.0

    def test_ramps(self):
        assert trapezoid(90.0, 80, 100, 130, 130) == pytest.approx(0.5)
        assert trapezoid(30.0, 0, 0, 20, 40) == pytest.approx(0.5)

    def test_zero_width_left_ramp_is_step(self):
        assert trapezoid(-20.0, -20, -20, -15, -10) == 1.0
        assert trapezoid(-20.5, -20, -20, -15, -10) == 0.0

    def test_zero_width_right_ramp_is_step(self):
        assert trapezoid(20.0, 10, 15, 20, 20) == 1.0
        assert trapezoid(20.5, 10, 15, 20, 20) == 0.0

    def test_single_point_support(self):
        assert trapezoid(1.0, 1, 1, 1, 1) == 1.0
        assert trapezoid(1.1, 1, 1, 1, 1) == 0.0

    def test_array_input(self):
        xs = np.array([0.0, 10.0, 30.0, 40.0, 50.0])
        result = trapezoid(xs, 0, 0, 20, 40)
        assert isinstance(result, np.ndarray)
        assert result.shape == xs.shape
        np.testing.assert_allclose(result, [1.0, 1.0, 0.5, 0.0, 0.0])


# =============================================================================
# Properties over the handover terms
# =============================================================================

def _all_terms(fis):
    for variable in fis.inputs + (fis.output,):
        for mf in variable.memberships:
            yield variable, mf


def test_degree_within_unit_interval(fis):
    for variable, mf in _all_terms(fis):
        low, high = variable.domain
        xs = np.linspace(low - 10, high + 10, 2001)
        values = degree(xs, mf)
        assert np.all(values >= 0.0)
        assert np.all(values <= 1.0)


def test_degree_zero_outside_support(fis):
    for variable, mf in _all_terms(fis):
        a, d = mf.support
        span = variable.domain[1] - variable.domain[0]
        xs = np.concatenate([
            np.linspace(a - span, a, 200, endpoint=False),
            np.linspace(d + span, d, 200, endpoint=False),
        ])
        assert np.all(degree(xs, mf) == 0.0), mf.name


def test_degree_piecewise_linear_on_support(fis):
    for _, mf in _all_terms(fis):
        a, b, c, d = mf.corners
        xs = np.linspace(a, d, 4001)
        step = xs[1] - xs[0]
        widths = [w for w in (b - a, d - c) if w > 0]
        max_slope = 1.0 / min(widths)
        jumps = np.abs(np.diff(degree(xs, mf)))
        assert np.all(jumps <= max_slope * step + 1e-9), mf.name


def test_membership_function_is_callable():
    mf = MembershipFunction.triangular("Zero", -4, 0, 4)
    assert mf(2.0) == degree(2.0, mf)
    assert mf.corners == (-4.0, 0.0, 0.0, 4.0)


# =============================================================================
# Construction
# =============================================================================

class TestMembershipConstruction:

    def test_matlab_shape_names(self):
        mf = MembershipFunction.create("Low", "trapmf", [0, 0, 20, 40])
        assert mf.shape == "trapezoidal"
        assert mf.params == (0.0, 0.0, 20.0, 40.0)

    def test_non_monotonic_breakpoints(self):
        with pytest.raises(FuzzyConfigurationError, match="non-decreasing"):
            MembershipFunction.triangular("Bad", 1, 0, 2)

    def test_wrong_breakpoint_count(self):
        with pytest.raises(FuzzyConfigurationError, match="needs 3 breakpoints"):
            MembershipFunction.create("Bad", "trimf", [0, 1])

    def test_unknown_shape(self):
        with pytest.raises(FuzzyConfigurationError, match="Unknown membership shape"):
            MembershipFunction.create("Bad", "gaussmf", [0, 1])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            MembershipFunction.trapezoidal("Bad", 0, 2, 1, 3)


class TestFuzzyVariable:

    @pytest.fixture
    def speed(self, fis):
        return fis.input_variable("Speed")

    def test_indices_are_one_based(self, speed):
        assert speed.membership(1).name == "Low"
        assert speed.membership(3).name == "High"
        assert speed.index_of("Medium") == 2

    def test_index_zero_is_not_a_term(self, speed):
        with pytest.raises(IndexError):
            speed.membership(0)
        with pytest.raises(IndexError):
            speed.membership(4)

    def test_unknown_term(self, speed):
        with pytest.raises(KeyError):
            speed.index_of("Supersonic")

    def test_fuzzify_clamps_to_domain(self, speed):
        np.testing.assert_array_equal(speed.fuzzify(500.0), speed.fuzzify(130.0))
        np.testing.assert_array_equal(speed.fuzzify(-5.0), speed.fuzzify(0.0))
        np.testing.assert_allclose(speed.fuzzify(72.0), [0.0, 0.6, 0.0])

    def test_curves_shape(self, speed):
        assert speed.curves(51).shape == (3, 51)

    def test_inverted_domain(self):
        with pytest.raises(FuzzyConfigurationError, match="domain"):
            FuzzyVariable.create("x", (1, 0))

    def test_duplicate_terms(self):
        mf = MembershipFunction.triangular("Same", 0, 0.5, 1)
        with pytest.raises(FuzzyConfigurationError, match="duplicate"):
            FuzzyVariable.create("x", (0, 1), [mf, mf])

    def test_with_membership_appends(self):
        variable = FuzzyVariable.create("x", (0, 1))
        extended = variable.with_membership(MembershipFunction.triangular("Mid", 0, 0.5, 1))
        assert len(variable) == 0
        assert extended.term_names == ["Mid"]
