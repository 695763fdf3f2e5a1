from __future__ import annotations
import math
from typing import Callable, Dict

Objective = Callable[[float], float]


def quadratic(x: float) -> float:
    """x(x - 1): minimum -0.25 at x = 0.5."""
    return x * (x - 1.0)


def square(x: float) -> float:
    return x * x


def cosine(x: float) -> float:
    """Unimodal on [2, 4] with minimum -1 at x = pi."""
    return math.cos(x)


OBJECTIVES: Dict[str, Objective] = {
    "quadratic": quadratic,
    "square": square,
    "cosine": cosine,
}

LABELS: Dict[str, str] = {
    "quadratic": "f(x) = x(x - 1)",
    "square": "f(x) = x^2",
    "cosine": "f(x) = cos(x)",
}


def get_objective(name: str) -> Objective:
    if name not in OBJECTIVES:
        raise KeyError(f"Unknown objective '{name}'. Available: {list(OBJECTIVES.keys())}")
    return OBJECTIVES[name]
