"""Typer CLI for optlab. Shared functions used by both the CLI and the Streamlit app."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import typer

from optlab import __version__
from optlab.config import (
    GssSettings,
    NevilleDataset,
    configure_logging,
    dataset,
    deep_update,
    gss_settings,
    load_config,
    neville_datasets,
    parse_criterion,
)
from optlab.golden_section import MinimizationResult, minimize
from optlab.neville import InterpolationTrace, Sample, interpolate, samples_from_xy
from optlab.objectives import LABELS, get_objective
from optlab.timing import format_duration, timed

logger = logging.getLogger(__name__)

app = typer.Typer(help="optlab: Neville interpolation and Golden Section Search")


# ── Shared functions (importable by the app) ──


def run_neville_fn(
    cfg: dict,
    name: str | None = None,
    target: float | None = None,
) -> Dict[str, Tuple[NevilleDataset, Tuple[Sample, ...], InterpolationTrace]]:
    """Interpolate one configured dataset (or all of them). Returns name -> (dataset, samples, trace)."""
    if name is not None:
        selected = [dataset(cfg, name)]
    else:
        selected = list(neville_datasets(cfg).values())

    out = {}
    for ds in selected:
        samples = samples_from_xy(ds.xs, ds.ys)
        t = ds.target if target is None else float(target)
        out[ds.name] = (ds, samples, interpolate(samples, t))
    return out


def format_trace(samples: Tuple[Sample, ...], target: float, trace: InterpolationTrace) -> List[str]:
    lines = [
        f"  Interpolating at x = {target}",
        f"  x = {[x for x, _ in samples]}",
        f"  y = {[y for _, y in samples]}",
        f"  Result: {trace.value:.6f}",
        "  Pyramid:",
    ]
    for k, row in enumerate(trace.pyramid):
        lines.append(f"    row {k}: [{', '.join(f'{v:.6f}' for v in row)}]")
    lines.append(f"  Deltas: [{', '.join(f'{d:.6e}' for d in trace.deltas)}]")
    return lines


def resolve_gss_settings(
    cfg: dict,
    a: float | None = None,
    b: float | None = None,
    eps: float | None = None,
    max_iter: int | None = None,
    stop: str | None = None,
    objective: str | None = None,
) -> GssSettings:
    """Config defaults with command-line overrides applied; rejects unknown selectors."""
    overrides = {
        k: v
        for k, v in {
            "a": a,
            "b": b,
            "epsilon": eps,
            "max_iterations": max_iter,
            "criterion": stop,
            "objective": objective,
        }.items()
        if v is not None
    }
    settings = gss_settings(deep_update(cfg, {"golden_section": overrides}))
    get_objective(settings.objective)
    return settings


def run_gss_fn(settings: GssSettings, record_history: bool = False) -> MinimizationResult:
    f = get_objective(settings.objective)
    return minimize(
        f,
        settings.a,
        settings.b,
        settings.epsilon,
        settings.max_iterations,
        settings.criterion,
        record_history=record_history,
    )


def format_result(settings: GssSettings, result: MinimizationResult) -> List[str]:
    return [
        "Golden Section Search Results",
        f"  Stopping criterion: {settings.criterion.label(settings.epsilon)}",
        f"  Iterations:         {result.iterations}",
        f"  Bracket:            [{result.a:.6f}, {result.b:.6f}]",
        f"  x1 = {result.x1:.6f},  f(x1) = {result.fx1:.6f}",
        f"  x2 = {result.x2:.6f},  f(x2) = {result.fx2:.6f}",
        f"  Interval width:     {result.interval_width:.6f}",
        f"  |f(x1) - f(x2)|:    {result.function_value_diff:.6f}",
    ]


def _load(config: Optional[Path]) -> dict:
    try:
        return load_config(config)
    except FileNotFoundError as e:
        raise typer.BadParameter(f"Config file not found: {e.filename}") from e


# ── Commands ──


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: LOG_LEVEL env or INFO)"),
):
    configure_logging(log_level)


@app.command()
def version():
    """Show optlab version."""
    typer.echo(f"optlab v{__version__}")


@app.command("neville")
def neville_cmd(
    name: Optional[str] = typer.Option(None, "--dataset", help="Dataset name from the config (default: all)"),
    target: Optional[float] = typer.Option(None, "--target", help="Override the interpolation target"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config path"),
    out: Optional[Path] = typer.Option(None, "--out", help="Directory for CSV and chart output"),
    reference: bool = typer.Option(False, "--reference/--no-reference", help="Compare with SciPy's Lagrange form"),
    timings: bool = typer.Option(False, "--timings/--no-timings", help="Print elapsed time"),
):
    """Neville's interpolation over the configured datasets."""
    cfg = _load(config)
    try:
        res = timed(run_neville_fn, cfg, name, target)
    except (KeyError, ValueError) as e:
        raise typer.BadParameter(str(e.args[0])) from e

    runs = res.value
    if not runs:
        typer.echo("No datasets configured.")
        return

    typer.echo("Neville's Interpolation")
    for ds_name, (ds, samples, trace) in runs.items():
        t = ds.target if target is None else target
        typer.echo(f"  {ds_name}:")
        for line in format_trace(samples, t, trace):
            typer.echo(line)
        if reference:
            from optlab.reference import lagrange_value

            ref = lagrange_value(samples, t)
            typer.echo(f"  SciPy Lagrange:     {ref:.6f} (diff {abs(ref - trace.value):.3e})")
        typer.echo("")

    if timings:
        typer.echo(f"Elapsed: {format_duration(res.seconds)}")

    if out is not None:
        from optlab.export import deltas_frame, pyramid_frame, write_csv
        from optlab.plots import deltas_chart, interpolation_chart, save_chart

        out.mkdir(parents=True, exist_ok=True)
        for ds_name, (ds, samples, trace) in runs.items():
            t = ds.target if target is None else target
            write_csv(out / f"{ds_name}_samples.csv", ["x", "y"], samples)
            pyramid_frame(trace).to_csv(out / f"{ds_name}_pyramid.csv", index=False)
            deltas_frame(trace).to_csv(out / f"{ds_name}_deltas.csv", index=False)
            save_chart(
                interpolation_chart(samples, trace, t, title=f"{ds_name}: Neville Interpolation"),
                out / f"neville_{ds_name}.html",
            )
        save_chart(deltas_chart({k: v[2] for k, v in runs.items()}), out / "neville_deltas.html")
        typer.echo(f"Output written to {out}/")


@app.command("gss")
def gss_cmd(
    a: Optional[float] = typer.Option(None, "--a", help="Left bracket endpoint"),
    b: Optional[float] = typer.Option(None, "--b", help="Right bracket endpoint"),
    eps: Optional[float] = typer.Option(None, "--eps", help="Tolerance for the stopping criterion"),
    max_iter: Optional[int] = typer.Option(None, "--max-iter", min=0, help="Iteration cap"),
    stop: Optional[str] = typer.Option(None, "--stop", help="Stopping criterion: interval | function"),
    objective: Optional[str] = typer.Option(None, "--objective", help="Objective name (quadratic, square, cosine)"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config path"),
    out: Optional[Path] = typer.Option(None, "--out", help="Directory for CSV and chart output"),
    reference: bool = typer.Option(False, "--reference/--no-reference", help="Compare with SciPy's bounded minimizer"),
    timings: bool = typer.Option(False, "--timings/--no-timings", help="Print elapsed time"),
):
    """Golden Section Search on a named objective."""
    if stop is not None:
        try:
            parse_criterion(stop)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--stop") from e

    cfg = _load(config)
    try:
        settings = resolve_gss_settings(cfg, a, b, eps, max_iter, stop, objective)
    except (KeyError, ValueError) as e:
        raise typer.BadParameter(str(e.args[0])) from e

    typer.echo("Golden Section Search")
    typer.echo(f"  {LABELS.get(settings.objective, settings.objective)} on [{settings.a}, {settings.b}]")
    typer.echo(f"  Stopping criterion: {settings.criterion.label(settings.epsilon)}")
    typer.echo(f"  Max iterations: {settings.max_iterations}")
    typer.echo("")

    res = timed(run_gss_fn, settings, out is not None)
    result: MinimizationResult = res.value
    for line in format_result(settings, result):
        typer.echo(line)

    if reference:
        from optlab.reference import scipy_minimum

        x_ref, f_ref = scipy_minimum(get_objective(settings.objective), settings.a, settings.b)
        typer.echo(f"  SciPy bounded:      x = {x_ref:.6f}, f(x) = {f_ref:.6f} (midpoint diff {abs(x_ref - result.midpoint):.3e})")

    if timings:
        typer.echo(f"Elapsed: {format_duration(res.seconds)}")

    if out is not None:
        from optlab.export import history_frame, result_frame
        from optlab.plots import bracket_chart, save_chart

        out.mkdir(parents=True, exist_ok=True)
        result_frame(result).to_csv(out / "gss_result.csv", index=False)
        history_frame(result).to_csv(out / "gss_history.csv", index=False)
        save_chart(bracket_chart(result), out / "gss_bracket.html")
        typer.echo(f"Output written to {out}/")
