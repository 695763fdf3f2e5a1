# optlab/reference.py
from __future__ import annotations

from typing import Callable, Sequence, Tuple

from .neville import Sample


def scipy_minimum(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = 1e-8,
) -> Tuple[float, float]:
    """Reference minimizer via SciPy minimize_scalar (bounded Brent).

    Notes:
    - Used only to report how far the golden section result is from a
      library answer; it is not a replacement for ``minimize``.
    - ``xatol`` is tied to ``tol``.
    """
    try:
        from scipy.optimize import minimize_scalar  # type: ignore
    except Exception as e:
        raise ImportError(
            "The SciPy reference requires SciPy. Install with: pip install scipy"
        ) from e

    r = minimize_scalar(
        f,
        bounds=(float(a), float(b)),
        method="bounded",
        options={"xatol": float(tol)},
    )
    return float(r.x), float(r.fun)


def lagrange_value(samples: Sequence[Sample], target: float) -> float:
    """Reference interpolating polynomial value via SciPy's Lagrange form."""
    try:
        from scipy.interpolate import lagrange  # type: ignore
    except Exception as e:
        raise ImportError(
            "The SciPy reference requires SciPy. Install with: pip install scipy"
        ) from e

    xs = [x for x, _ in samples]
    ys = [y for _, y in samples]
    return float(lagrange(xs, ys)(float(target)))
