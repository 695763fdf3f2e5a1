# optlab/golden_section.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)

# Golden ratio complement: (sqrt(5) - 1) / 2.
TAU = (math.sqrt(5.0) - 1.0) / 2.0


class StoppingCriterion(Enum):
    """Which convergence metric gates termination of the search."""

    INTERVAL_WIDTH = "interval"
    FUNCTION_VALUE_DIFF = "function"

    def is_met(self, interval_width: float, function_value_diff: float, epsilon: float) -> bool:
        if self is StoppingCriterion.INTERVAL_WIDTH:
            return interval_width < epsilon
        return function_value_diff < epsilon

    def label(self, epsilon: float) -> str:
        if self is StoppingCriterion.INTERVAL_WIDTH:
            return f"Interval Width < {epsilon}"
        return f"|f(x1) - f(x2)| < {epsilon}"


@dataclass(frozen=True)
class BracketStep:
    iteration: int
    a: float
    b: float
    x1: float
    x2: float
    fx1: float
    fx2: float

    @property
    def width(self) -> float:
        return self.b - self.a


@dataclass(frozen=True)
class MinimizationResult:
    a: float
    b: float
    x1: float
    x2: float
    fx1: float
    fx2: float
    iterations: int
    interval_width: float
    function_value_diff: float
    history: Tuple[BracketStep, ...] = ()

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.x1 + self.x2)


def minimize(
    f: Callable[[float], float],
    a: float,
    b: float,
    epsilon: float,
    max_iterations: int,
    criterion: StoppingCriterion,
    record_history: bool = False,
) -> MinimizationResult:
    """Golden Section Search for the minimum of a unimodal ``f`` on ``[a, b]``.

    Notes:
    - The bracket ordering a < b is not validated.
    - On a tie f(x1) == f(x2) the left end moves (a <- x1).
    - Running out of ``max_iterations`` is a normal termination; the last
      bracket is returned with both convergence metrics filled in.
    """
    a, b = float(a), float(b)
    x1 = b - TAU * (b - a)
    x2 = a + TAU * (b - a)
    fx1, fx2 = f(x1), f(x2)

    hist: List[BracketStep] = []
    if record_history:
        hist.append(BracketStep(0, a, b, x1, x2, fx1, fx2))

    iterations = 0
    for it in range(1, int(max_iterations) + 1):
        if fx1 < fx2:
            # minimum in [a, x2]
            b = x2
            x2, fx2 = x1, fx1
            x1 = b - TAU * (b - a)
            fx1 = f(x1)
        else:
            # minimum in [x1, b]
            a = x1
            x1, fx1 = x2, fx2
            x2 = a + TAU * (b - a)
            fx2 = f(x2)

        iterations = it

        if record_history:
            hist.append(BracketStep(it, a, b, x1, x2, fx1, fx2))

        if criterion.is_met(b - a, abs(fx1 - fx2), epsilon):
            break

    logger.debug(
        "gss finished after %d iteration(s): bracket=[%g, %g] criterion=%s",
        iterations, a, b, criterion.value,
    )

    return MinimizationResult(
        a=a,
        b=b,
        x1=x1,
        x2=x2,
        fx1=fx1,
        fx2=fx2,
        iterations=iterations,
        interval_width=b - a,
        function_value_diff=abs(fx1 - fx2),
        history=tuple(hist),
    )
