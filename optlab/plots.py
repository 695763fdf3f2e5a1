# optlab/plots.py
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Optional, Sequence

import altair as alt
import numpy as np
import pandas as pd

from .golden_section import MinimizationResult
from .neville import InterpolationTrace, Sample, interpolate_many

logger = logging.getLogger(__name__)


def interpolation_chart(
    samples: Sequence[Sample],
    trace: InterpolationTrace,
    target: float,
    title: str = "Neville Interpolation",
    curve_points: int = 200,
) -> alt.LayerChart:
    """Samples, the interpolating polynomial and the interpolated point."""
    pts = sorted(samples)
    df_pts = pd.DataFrame(pts, columns=["x", "y"])

    lo = min([p[0] for p in pts] + [target])
    hi = max([p[0] for p in pts] + [target])
    grid = np.linspace(lo, hi, curve_points)
    df_curve = pd.DataFrame({"x": grid, "y": interpolate_many(samples, grid)})

    df_target = pd.DataFrame([{"x": float(target), "y": trace.value}])

    curve = alt.Chart(df_curve).mark_line(color="#4C78A8").encode(
        x=alt.X("x:Q", title="x"),
        y=alt.Y("y:Q", title="y"),
    )
    points = alt.Chart(df_pts).mark_point(filled=True, size=60, color="#333333").encode(
        x="x:Q",
        y="y:Q",
        tooltip=[alt.Tooltip("x:Q", format=",.6f"), alt.Tooltip("y:Q", format=",.6f")],
    )
    marker = alt.Chart(df_target).mark_point(shape="diamond", filled=True, size=140, color="#D4AF37").encode(
        x="x:Q",
        y="y:Q",
        tooltip=[
            alt.Tooltip("x:Q", title="target", format=",.6f"),
            alt.Tooltip("y:Q", title="P(target)", format=",.6f"),
        ],
    )
    return (curve + points + marker).properties(title=title, height=320)


def deltas_chart(series: Dict[str, InterpolationTrace], title: str = "Neville Delta Convergence") -> alt.Chart:
    """|delta| per step for several traces on a log scale."""
    rows = []
    for label, trace in series.items():
        for k, d in enumerate(trace.deltas, start=1):
            # log axis: zero and non-finite deltas cannot be drawn
            if d > 0 and math.isfinite(d):
                rows.append({"step": k, "delta": d, "series": label})
    df = pd.DataFrame(rows, columns=["step", "delta", "series"])

    return alt.Chart(df).mark_line(point=True).encode(
        x=alt.X("step:Q", title="Iteration"),
        y=alt.Y("delta:Q", title="|delta|", scale=alt.Scale(type="log")),
        color=alt.Color("series:N", title="Dataset"),
        tooltip=["series:N", "step:Q", alt.Tooltip("delta:Q", format=".3e")],
    ).properties(title=title, height=320)


def bracket_chart(result: MinimizationResult, title: str = "GSS Bracket Width") -> alt.Chart:
    """Bracket width (b - a) per iteration; needs a result recorded with history."""
    df = pd.DataFrame(
        [{"iteration": s.iteration, "width": s.width, "x_mid": 0.5 * (s.x1 + s.x2)} for s in result.history],
        columns=["iteration", "width", "x_mid"],
    )
    return alt.Chart(df).mark_line(color="#D4AF37", point=True).encode(
        x=alt.X("iteration:Q", title="Iteration"),
        y=alt.Y("width:Q", title="b - a", scale=alt.Scale(type="log")),
        tooltip=[
            alt.Tooltip("iteration:Q", title="Iteration"),
            alt.Tooltip("width:Q", title="Width", format=".3e"),
            alt.Tooltip("x_mid:Q", title="(x1 + x2) / 2", format=",.6f"),
        ],
    ).properties(title=title, height=320)


def save_chart(chart: alt.TopLevelMixin, path: str | Path, fmt: Optional[str] = None) -> Path:
    """Write a chart as HTML or Vega-Lite JSON (picked from the suffix)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fmt = fmt or path.suffix.lstrip(".").lower() or "html"
    if fmt not in {"html", "json"}:
        raise ValueError(f"Unsupported chart format '{fmt}'. Use 'html' or 'json'.")
    chart.save(str(path), format=fmt)
    logger.info("chart written to %s", path)
    return path
