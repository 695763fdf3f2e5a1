from __future__ import annotations
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

import pandas as pd

from .golden_section import MinimizationResult
from .neville import InterpolationTrace


def write_csv(path: str | Path, headers: Sequence[str], rows: Sequence[Sequence[float]]) -> Path:
    """Header line, then one comma-separated line per row."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame([list(r) for r in rows], columns=list(headers)).to_csv(path, index=False)
    return path


def pyramid_frame(trace: InterpolationTrace) -> pd.DataFrame:
    # one row per P(i, j) entry, j = i + row
    records = [
        {"row": k, "i": i, "j": i + k, "value": v}
        for k, row in enumerate(trace.pyramid)
        for i, v in enumerate(row)
    ]
    return pd.DataFrame(records, columns=["row", "i", "j", "value"])


def deltas_frame(trace: InterpolationTrace) -> pd.DataFrame:
    return pd.DataFrame(
        {"step": range(1, len(trace.deltas) + 1), "delta": list(trace.deltas)},
        columns=["step", "delta"],
    )


def result_frame(result: MinimizationResult) -> pd.DataFrame:
    row = {k: v for k, v in asdict(result).items() if k != "history"}
    row["midpoint"] = result.midpoint
    return pd.DataFrame([row])


def history_frame(result: MinimizationResult) -> pd.DataFrame:
    cols = ["iteration", "a", "b", "x1", "x2", "fx1", "fx2", "width"]
    return pd.DataFrame(
        [{**asdict(s), "width": s.width} for s in result.history],
        columns=cols,
    )
