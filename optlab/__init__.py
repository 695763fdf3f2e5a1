"""optlab: one-dimensional numerical methods (Neville interpolation, Golden Section Search)."""

__version__ = "0.1.0"

from optlab.golden_section import (  # noqa: E402
    TAU,
    MinimizationResult,
    StoppingCriterion,
    minimize,
)
from optlab.neville import InterpolationTrace, interpolate  # noqa: E402

__all__ = [
    "TAU",
    "InterpolationTrace",
    "MinimizationResult",
    "StoppingCriterion",
    "interpolate",
    "minimize",
]
