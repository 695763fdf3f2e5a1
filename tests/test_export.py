"""Tests for optlab.export: CSV and DataFrame views of results."""

from __future__ import annotations

import pandas as pd

from optlab.export import deltas_frame, history_frame, pyramid_frame, result_frame, write_csv
from optlab.golden_section import StoppingCriterion, minimize
from optlab.neville import interpolate


def test_write_csv(tmp_path):
    path = write_csv(tmp_path / "sub" / "out.csv", ["x", "y"], [[1.0, 2.0], [3.0, 4.0]])
    text = path.read_text()
    assert text.splitlines()[0] == "x,y"
    assert "1.0,2.0" in text
    assert "3.0,4.0" in text


def test_write_csv_round_trip_with_pandas(tmp_path):
    path = write_csv(tmp_path / "out.csv", ["x", "y"], [(0.5, 0.58813), (0.7, 0.7221)])
    df = pd.read_csv(path)
    assert list(df.columns) == ["x", "y"]
    assert df["y"].tolist() == [0.58813, 0.7221]


def test_pyramid_frame():
    trace = interpolate([(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)], 1.5)
    df = pyramid_frame(trace)
    assert len(df) == 6
    assert (df["j"] == df["i"] + df["row"]).all()
    assert df[df["row"] == 2]["value"].iloc[0] == trace.value


def test_empty_trace_frames():
    trace = interpolate([], 0.0)
    assert pyramid_frame(trace).empty
    assert deltas_frame(trace).empty


def test_deltas_frame():
    trace = interpolate([(0.0, 1.0), (1.0, 3.0), (2.0, 7.0)], 0.5)
    df = deltas_frame(trace)
    assert df["step"].tolist() == [1, 2]
    assert df["delta"].tolist() == list(trace.deltas)


def test_result_frame():
    r = minimize(lambda x: x * (x - 1.0), 0.0, 2.0, 0.01, 100, StoppingCriterion.INTERVAL_WIDTH)
    df = result_frame(r)
    assert len(df) == 1
    assert "history" not in df.columns
    assert df["iterations"].iloc[0] == r.iterations
    assert df["midpoint"].iloc[0] == r.midpoint


def test_history_frame():
    r = minimize(lambda x: x * x, -1.0, 1.0, 1e-100, 4, StoppingCriterion.INTERVAL_WIDTH, record_history=True)
    df = history_frame(r)
    assert df["iteration"].tolist() == [0, 1, 2, 3, 4]
    assert df["width"].iloc[-1] == r.interval_width
