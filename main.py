from __future__ import annotations

import hashlib
import logging
import math
from datetime import datetime

import streamlit as st
import pandas as pd
import altair as alt

from optlab.config import configure_logging, default_config_path, gss_section, load_config, neville_datasets
from optlab.cli import format_result, resolve_gss_settings, run_gss_fn
from optlab.export import deltas_frame, history_frame, pyramid_frame, result_frame
from optlab.neville import interpolate, samples_from_xy
from optlab.objectives import LABELS, OBJECTIVES, get_objective
from optlab.plots import bracket_chart, deltas_chart, interpolation_chart
from optlab.reference import lagrange_value, scipy_minimum
from optlab.timing import format_duration, timed

configure_logging()
logger = logging.getLogger("optlab.app")


# =============================================================================
# Page configuration
# =============================================================================
st.set_page_config(
    page_title="1-D Numerical Methods: Neville & Golden Section",
    layout="wide",
)

st.title("1-D Numerical Methods: Neville Interpolation & Golden Section Search")
st.caption(
    "Polynomial interpolation via Neville's algorithm and bracketing minimisation "
    "via Golden Section Search, with SciPy reference values."
)

# =============================================================================
# Sidebar – configuration
# =============================================================================
cfg_path = st.sidebar.text_input(
    "YAML config path",
    str(default_config_path()),
)
cfg = load_config(cfg_path)

st.sidebar.divider()
show_ref = st.sidebar.checkbox("Show Reference Parameters (read-only)", value=True)

if show_ref:
    st.sidebar.subheader("Reference Parameters (from YAML)")

    try:
        with open(cfg_path, "rb") as f:
            cfg_sha256 = hashlib.sha256(f.read()).hexdigest()
    except OSError:
        cfg_sha256 = "N/A"

    st.sidebar.caption(f"Config file: {cfg_path}")
    st.sidebar.caption(f"Loaded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    st.sidebar.caption(f"SHA-256: {cfg_sha256}")

    st.sidebar.markdown("**Neville datasets**")
    for ds in neville_datasets(cfg).values():
        st.sidebar.write(f"{ds.name}: {len(ds.xs)} samples, target {ds.target}")

    g = gss_section(cfg)
    st.sidebar.markdown("**GSS defaults**")
    st.sidebar.write(f"Objective: {g.get('objective', 'quadratic')}")
    st.sidebar.write(f"Bracket: [{g.get('a', 0.0)}, {g.get('b', 2.0)}]")
    st.sidebar.write(f"Epsilon: {g.get('epsilon', 0.1)}")
    st.sidebar.write(f"Criterion: {g.get('criterion', 'interval')}")

# =============================================================================
# Tabs
# =============================================================================
tab_neville, tab_gss = st.tabs(["Neville Interpolation", "Golden Section Search"])


# =============================================================================
# Neville tab
# =============================================================================
with tab_neville:
    datasets = neville_datasets(cfg)
    if not datasets:
        st.info("No Neville datasets in the config.")
    else:
        col1, col2 = st.columns([1, 1])

        with col1:
            st.markdown("### Interpolate")
            ds_name = st.selectbox("Dataset", options=list(datasets.keys()))
            ds = datasets[ds_name]
            target = st.number_input("Target x", value=float(ds.target), format="%.6f")

            samples = samples_from_xy(ds.xs, ds.ys)
            res = timed(interpolate, samples, target)
            trace = res.value

            st.success(f"P({target:.6f}) = {trace.value:.6f}")
            st.caption(f"Computed in {format_duration(res.seconds)}")

            ref = lagrange_value(samples, target)
            st.write(f"SciPy Lagrange reference: {ref:.6f} (diff {abs(ref - trace.value):.3e})")

            if not math.isfinite(trace.value):
                st.warning("Non-finite result: check for repeated x-values in the dataset.")

            st.markdown("#### Samples")
            st.dataframe(pd.DataFrame(samples, columns=["x", "y"]), use_container_width=True)

        with col2:
            st.altair_chart(
                interpolation_chart(samples, trace, target, title=f"{ds_name}: Neville Interpolation"),
                use_container_width=True,
            )

        st.markdown("#### Pyramid P(i, j)")
        df_pyr = pyramid_frame(trace)
        st.dataframe(
            df_pyr.pivot(index="i", columns="row", values="value"),
            use_container_width=True,
        )

        st.markdown("#### Delta Convergence")
        st.dataframe(deltas_frame(trace), use_container_width=True)

        all_traces = {
            name: interpolate(samples_from_xy(d.xs, d.ys), d.target) for name, d in datasets.items()
        }
        st.altair_chart(deltas_chart(all_traces), use_container_width=True)


# =============================================================================
# Golden section tab
# =============================================================================
with tab_gss:
    defaults = resolve_gss_settings(cfg)

    col1, col2 = st.columns([1, 1])

    with col1:
        st.markdown("### Minimise f on [a, b]")
        objective = st.selectbox(
            "Objective",
            options=list(OBJECTIVES.keys()),
            index=list(OBJECTIVES.keys()).index(defaults.objective),
            format_func=lambda k: LABELS.get(k, k),
        )
        a = st.number_input("a", value=float(defaults.a), step=0.1)
        b = st.number_input("b", value=float(defaults.b), step=0.1)
        eps = st.number_input("Epsilon", value=float(defaults.epsilon), format="%.1e")
        max_iter = st.number_input("Max iterations", value=int(defaults.max_iterations), min_value=0, step=10)
        stop_label = st.radio(
            "Stopping criterion",
            options=["Interval width", "Function value difference"],
            index=0 if defaults.criterion.value == "interval" else 1,
        )
        stop = "interval" if stop_label.startswith("Interval") else "function"

        if st.button("Run Golden Section Search"):
            if a >= b:
                st.error("The bracket needs a < b.")
            else:
                settings = resolve_gss_settings(
                    cfg, a=a, b=b, eps=eps, max_iter=int(max_iter), stop=stop, objective=objective
                )
                res = timed(run_gss_fn, settings, True)
                result = res.value
                logger.info("gss run: %s iterations=%d", objective, result.iterations)

                st.success(
                    f"Minimiser ≈ {result.midpoint:.6f} after {result.iterations} iteration(s) "
                    f"({format_duration(res.seconds)})"
                )
                st.code("\n".join(format_result(settings, result)))
                st.dataframe(result_frame(result), use_container_width=True)

                x_ref, f_ref = scipy_minimum(get_objective(objective), a, b)
                st.write(
                    f"SciPy bounded reference: x = {x_ref:.6f}, f(x) = {f_ref:.6f} "
                    f"(midpoint diff {abs(x_ref - result.midpoint):.3e})"
                )

                with col2:
                    st.markdown("#### Convergence Plot (Bracket Width vs Iteration)")
                    st.altair_chart(bracket_chart(result), use_container_width=True)

                    df_hist = history_frame(result)
                    probe_chart = alt.Chart(df_hist).mark_line(point=True).encode(
                        x=alt.X("iteration:Q", title="Iteration"),
                        y=alt.Y("fx1:Q", title="f(x1)"),
                        tooltip=[
                            alt.Tooltip("iteration:Q", title="Iteration"),
                            alt.Tooltip("x1:Q", format=",.6f"),
                            alt.Tooltip("fx1:Q", format=",.6f"),
                        ],
                    )
                    st.altair_chart(probe_chart.properties(height=280), use_container_width=True)

                st.markdown("#### Iteration History")
                st.dataframe(df_hist, use_container_width=True)

# This script ends here.
