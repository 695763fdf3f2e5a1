# optlab/neville.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

Sample = Tuple[float, float]


@dataclass(frozen=True)
class InterpolationTrace:
    """Neville interpolation result.

    ``pyramid[k][i]`` holds P(i, i+k) evaluated at the target; row 0 is the
    input y-values. ``deltas[k]`` is |P(0, k+1) - P(0, k)|.
    """

    value: float
    pyramid: Tuple[Tuple[float, ...], ...] = ()
    deltas: Tuple[float, ...] = ()

    @property
    def order(self) -> int:
        return len(self.pyramid)

    @property
    def top_row(self) -> Tuple[float, ...]:
        return tuple(row[0] for row in self.pyramid)


def samples_from_xy(xs: Sequence[float], ys: Sequence[float]) -> Tuple[Sample, ...]:
    if len(xs) != len(ys):
        raise ValueError(f"x and y must have the same length (got {len(xs)} and {len(ys)})")
    return tuple((float(x), float(y)) for x, y in zip(xs, ys))


def _divide(num: float, den: float) -> float:
    # IEEE 754 semantics: x/0 -> +-inf, 0/0 -> nan (plain Python would raise)
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _next_row(xs: Sequence[float], prev: Sequence[float], target: float, k: int) -> Tuple[float, ...]:
    """Row k of the pyramid from row k-1: P(i, i+k) for every valid i."""
    row = []
    for i in range(len(prev) - 1):
        x_i, x_j = xs[i], xs[i + k]
        row.append(_divide((target - x_i) * prev[i + 1] - (target - x_j) * prev[i], x_j - x_i))
    return tuple(row)


def interpolate(samples: Sequence[Sample], target: float) -> InterpolationTrace:
    """Value of the polynomial through ``samples`` at ``target`` (Neville's algorithm).

    Samples are used in input order. An empty sample set yields NaN with an
    empty pyramid; repeated x-values produce inf/NaN entries instead of raising.
    """
    if not samples:
        return InterpolationTrace(value=math.nan)

    target = float(target)
    xs = [float(x) for x, _ in samples]
    pyramid: List[Tuple[float, ...]] = [tuple(float(y) for _, y in samples)]

    for k in range(1, len(xs)):
        pyramid.append(_next_row(xs, pyramid[k - 1], target, k))

    deltas = tuple(abs(pyramid[k + 1][0] - pyramid[k][0]) for k in range(len(pyramid) - 1))
    value = pyramid[-1][0]

    logger.debug("neville: %d sample(s), target=%g, value=%g", len(xs), target, value)

    return InterpolationTrace(value=value, pyramid=tuple(pyramid), deltas=deltas)


def interpolate_many(samples: Sequence[Sample], targets: Iterable[float]) -> List[float]:
    return [interpolate(samples, t).value for t in targets]
