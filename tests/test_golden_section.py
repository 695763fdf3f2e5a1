"""Tests for optlab.golden_section: Golden Section Search."""

from __future__ import annotations

import math

import pytest

from optlab.golden_section import TAU, StoppingCriterion, minimize


def quadratic(x: float) -> float:
    """x(x - 1): minimum at 0.5."""
    return x * (x - 1.0)


# ── Convergence ──


class TestConvergence:
    def test_interval_width_converges_to_half(self):
        r = minimize(quadratic, 0.0, 2.0, 0.01, 10000, StoppingCriterion.INTERVAL_WIDTH)
        assert abs(r.midpoint - 0.5) < 0.01
        assert r.interval_width < 0.01
        assert r.iterations > 0

    def test_function_value_diff_converges_to_half(self):
        r = minimize(quadratic, 0.0, 2.0, 1e-8, 10000, StoppingCriterion.FUNCTION_VALUE_DIFF)
        assert abs(r.midpoint - 0.5) < 1e-4
        assert r.function_value_diff < 1e-8

    def test_x_squared(self):
        r = minimize(lambda x: x * x, -2.0, 3.0, 0.001, 10000, StoppingCriterion.INTERVAL_WIDTH)
        assert abs(r.midpoint) < 0.01
        assert r.interval_width < 0.001

    def test_cosine_minimum_at_pi(self):
        r = minimize(math.cos, 2.0, 4.0, 1e-6, 10000, StoppingCriterion.INTERVAL_WIDTH)
        assert r.midpoint == pytest.approx(math.pi, abs=1e-5)

    def test_stops_at_first_satisfied_iteration(self):
        # 2 * TAU**11 > 0.01 > 2 * TAU**12
        r = minimize(quadratic, 0.0, 2.0, 0.01, 10000, StoppingCriterion.INTERVAL_WIDTH)
        assert r.iterations == 12


# ── Iteration cap ──


class TestIterationCap:
    def test_max_iterations_respected(self):
        r = minimize(quadratic, 0.0, 2.0, 1e-100, 5, StoppingCriterion.INTERVAL_WIDTH)
        assert r.iterations == 5

    def test_max_iterations_respected_function_criterion(self):
        r = minimize(quadratic, 0.0, 2.0, -1.0, 7, StoppingCriterion.FUNCTION_VALUE_DIFF)
        assert r.iterations == 7

    def test_zero_iterations_returns_initial_bracket(self):
        r = minimize(quadratic, 0.0, 2.0, 0.1, 0, StoppingCriterion.INTERVAL_WIDTH)
        assert r.iterations == 0
        assert (r.a, r.b) == (0.0, 2.0)
        assert r.x1 == pytest.approx(2.0 - 2.0 * TAU)
        assert r.x2 == pytest.approx(2.0 * TAU)
        assert r.interval_width == 2.0


# ── Result metrics and bracket geometry ──


class TestResult:
    @pytest.mark.parametrize("criterion", list(StoppingCriterion))
    def test_both_metrics_reported(self, criterion):
        r = minimize(quadratic, 0.0, 2.0, 1e-3, 100, criterion)
        assert r.interval_width == r.b - r.a
        assert r.function_value_diff == abs(r.fx1 - r.fx2)
        assert r.fx1 == quadratic(r.x1)
        assert r.fx2 == quadratic(r.x2)

    def test_bracket_ordering_and_golden_points(self):
        r = minimize(quadratic, 0.0, 2.0, 1e-100, 15, StoppingCriterion.INTERVAL_WIDTH, record_history=True)
        for s in r.history:
            assert s.a < s.x1 < s.x2 < s.b
            assert s.x1 == pytest.approx(s.b - TAU * s.width, abs=1e-12)
            assert s.x2 == pytest.approx(s.a + TAU * s.width, abs=1e-12)

    def test_width_shrinks_by_tau(self):
        r = minimize(quadratic, 0.0, 2.0, 1e-100, 20, StoppingCriterion.INTERVAL_WIDTH, record_history=True)
        widths = [s.width for s in r.history]
        assert len(widths) == 21
        for prev, nxt in zip(widths, widths[1:]):
            assert nxt < prev
            assert nxt / prev == pytest.approx(TAU, rel=1e-6)

    def test_history_empty_by_default(self):
        r = minimize(quadratic, 0.0, 2.0, 0.1, 100, StoppingCriterion.INTERVAL_WIDTH)
        assert r.history == ()

    def test_history_matches_final_state(self):
        r = minimize(quadratic, 0.0, 2.0, 0.01, 100, StoppingCriterion.INTERVAL_WIDTH, record_history=True)
        last = r.history[-1]
        assert last.iteration == r.iterations
        assert (last.a, last.b, last.x1, last.x2) == (r.a, r.b, r.x1, r.x2)

    def test_tie_moves_left_end(self):
        # constant f: every comparison is a tie, so a <- x1 each step
        r = minimize(lambda x: 0.0, 0.0, 1.0, 1e-100, 1, StoppingCriterion.INTERVAL_WIDTH)
        assert r.a == pytest.approx(1.0 - TAU)
        assert r.b == 1.0

    def test_objective_evaluated_once_per_iteration(self):
        calls = []

        def f(x):
            calls.append(x)
            return quadratic(x)

        r = minimize(f, 0.0, 2.0, 1e-100, 10, StoppingCriterion.INTERVAL_WIDTH)
        assert len(calls) == 2 + r.iterations


# ── Stopping criterion ──


class TestStoppingCriterion:
    def test_values(self):
        assert StoppingCriterion("interval") is StoppingCriterion.INTERVAL_WIDTH
        assert StoppingCriterion("function") is StoppingCriterion.FUNCTION_VALUE_DIFF
        assert len(StoppingCriterion) == 2

    def test_is_met(self):
        assert StoppingCriterion.INTERVAL_WIDTH.is_met(0.005, 1.0, 0.01)
        assert not StoppingCriterion.INTERVAL_WIDTH.is_met(0.02, 0.0, 0.01)
        assert StoppingCriterion.FUNCTION_VALUE_DIFF.is_met(1.0, 0.005, 0.01)
        assert not StoppingCriterion.FUNCTION_VALUE_DIFF.is_met(0.0, 0.02, 0.01)

    def test_labels(self):
        assert StoppingCriterion.INTERVAL_WIDTH.label(0.1) == "Interval Width < 0.1"
        assert StoppingCriterion.FUNCTION_VALUE_DIFF.label(0.1) == "|f(x1) - f(x2)| < 0.1"
