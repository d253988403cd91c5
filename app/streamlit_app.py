"""
Brick Ledger — consumption bill projection and revenue waterfall dashboard
==========================================================================

Pick a workload, set the starting consumption, storage price, monthly growth
and horizon, then "Run Projection" to see the month-by-month bill, the
waterfall (markup, reseller revenue, quarterly payment, beneficiary shares),
and download the table as CSV, JSON, or Excel.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from catalog.workloads import DEFAULT_CATALOG
from core.config import INPUT_LIMITS, ProjectionConfig, clamp_config
from core.errors import InvalidConfigError
from engine.runner import run_projection
from reports.export import EXPORT_FILENAMES, to_csv_text, to_excel_bytes, to_json_text
from reports.metrics import share_progression, summarize_projection, summary_table
from reports.tables import chart_frame, projection_to_frame

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

DEFAULTS = ProjectionConfig()

BENEFICIARY_LABELS = {
    "A": "Partner A",
    "B": "Partner B",
    "referral": "Referral",
}

TABLE_LABELS = {
    "month": "Month",
    "units_consumed": "DBUs",
    "storage_gb": "Storage (GB)",
    "storage_pb": "Storage (PB)",
    "compute_cost": "Compute ($)",
    "storage_cost": "Storage ($)",
    "gross_cost": "Total ($)",
    "marked_up_cost": "Marked-up ($)",
    "reseller_revenue": "Reseller ($)",
    "quarterly_payment": "Quarterly ($)",
    "gross_profit": "Gross Profit ($)",
    "net_profit": "Net Profit ($)",
    "cost_increase": "Increase vs Prior ($)",
}


# ---------------------------------------------------------------------------
# Formatting / chart helpers
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format money with commas and 2 decimals."""
    return f"${val:,.2f}"


def _plot_multi_line(df, *, title, y_title, height=300):
    if not isinstance(df, pd.DataFrame) or len(df) == 0:
        st.info("No data to plot.")
        return
    chart = (
        alt.Chart(df).mark_line()
        .encode(
            x=alt.X("month:Q", title="Month"),
            y=alt.Y("value:Q", title=y_title, axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
            tooltip=["month", "series", alt.Tooltip("value:Q", format=",.2f")],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _display_table(rows):
    df = projection_to_frame(rows, rounded=True)
    labels = dict(TABLE_LABELS)
    for name, label in BENEFICIARY_LABELS.items():
        labels[f"share_{name}"] = f"{label} ($)"
    st.dataframe(df.rename(columns=labels), use_container_width=True, hide_index=True)


def _display_share_counter(rows):
    progression = share_progression(rows)
    cols = st.columns(len(progression))
    for col, (name, vals) in zip(cols, progression.items()):
        col.metric(
            f"{BENEFICIARY_LABELS.get(name, name)} (month {len(rows)})",
            _fmt_money(vals["last"]),
            delta=_fmt_money(vals["last"] - vals["first"]),
        )


def _display_downloads(rows):
    d1, d2, d3 = st.columns(3)
    d1.download_button(
        "Download CSV", to_csv_text(rows).encode("utf-8"),
        file_name=EXPORT_FILENAMES["csv"], mime="text/csv",
    )
    d2.download_button(
        "Download JSON", to_json_text(rows).encode("utf-8"),
        file_name=EXPORT_FILENAMES["json"], mime="application/json",
    )
    d3.download_button(
        "Download Excel", to_excel_bytes(rows),
        file_name=EXPORT_FILENAMES["xlsx"],
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Brick Ledger", layout="wide")
st.title("Calculate a Brick (of data)")
st.caption("Project your earnings based on workload type and consumption patterns.")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Inputs (clamped to the slider ranges before the engine sees them)
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Workload")
    names = list(DEFAULT_CATALOG.names())
    workload = st.selectbox("Workload Type", options=names, index=names.index(DEFAULTS.workload_name))
    photon = st.checkbox("Use Photon", value=DEFAULTS.photon_enabled)

    st.header("Consumption")
    lim = INPUT_LIMITS["initial_units"]
    units = st.slider(
        "Starting DBUs / month", min_value=lim.min_val, max_value=lim.max_val,
        value=DEFAULTS.initial_units, step=lim.step,
    )
    lim = INPUT_LIMITS["storage_price_per_gb"]
    storage_price = st.slider(
        "Storage Price ($/GB)", min_value=lim.min_val, max_value=lim.max_val,
        value=DEFAULTS.storage_price_per_gb, step=lim.step, format="%.3f",
    )
    lim = INPUT_LIMITS["monthly_growth_rate"]
    growth = st.slider(
        "Monthly Growth", min_value=lim.min_val, max_value=lim.max_val,
        value=DEFAULTS.monthly_growth_rate, step=lim.step, format="%.2f",
    )
    lim = INPUT_LIMITS["horizon_years"]
    years = st.slider(
        "Projection Years", min_value=int(lim.min_val), max_value=int(lim.max_val),
        value=DEFAULTS.horizon_years, step=int(lim.step),
    )

    run_clicked = st.button("Run Projection", type="primary", use_container_width=True)

# ═══════════════════════════════════════════════════════════════════════════
# RUN — one projection per click, stored whole in session state
# ═══════════════════════════════════════════════════════════════════════════
if run_clicked:
    cfg = clamp_config(
        workload_name=workload,
        photon_enabled=photon,
        initial_units=units,
        storage_price_per_gb=storage_price,
        monthly_growth_rate=growth,
        horizon_years=years,
    )
    try:
        rows = run_projection(cfg)
    except InvalidConfigError as exc:
        st.error(f"Projection rejected: {exc}")
    else:
        st.session_state["projection"] = {"config": cfg, "rows": rows}

result = st.session_state.get("projection")
if result is None:
    st.info("Set the inputs in the sidebar and click 'Run Projection'.")
    st.stop()

rows = result["rows"]
cfg = result["config"]

# ═══════════════════════════════════════════════════════════════════════════
# OUTPUTS
# ═══════════════════════════════════════════════════════════════════════════
st.subheader(f"{cfg.workload_name}{' + Photon' if cfg.photon_enabled else ''} over {cfg.horizon_years} year(s)")

summary = summarize_projection(rows)
k1, k2, k3, k4 = st.columns(4)
k1.metric("Total Bill", _fmt_money(summary["total_gross_cost"]))
k2.metric("Marked-up Bill", _fmt_money(summary["total_marked_up_cost"]))
k3.metric("Reseller Revenue", _fmt_money(summary["total_reseller_revenue"]))
k4.metric("Net Profit", _fmt_money(summary["total_net_profit"]))

st.markdown("**Beneficiary Shares (latest month, change since month 1)**")
_display_share_counter(rows)

_plot_multi_line(
    chart_frame(rows, ["gross_cost", "marked_up_cost"]),
    title="Monthly Bill", y_title="Cost ($)",
)

left, right = st.columns(2)
with left:
    _plot_multi_line(
        chart_frame(rows, ["reseller_revenue", "quarterly_payment"]),
        title="Reseller Revenue & Quarterly Payment", y_title="Amount ($)",
    )
with right:
    share_cols = [f"share_{name}" for name in rows[0].beneficiary_shares]
    _plot_multi_line(
        chart_frame(rows, share_cols),
        title="Beneficiary Shares", y_title="Share ($)",
    )

with st.expander("Horizon Totals", expanded=False):
    st.dataframe(summary_table(summary), use_container_width=True, hide_index=True)

with st.expander("Full Projection Table", expanded=True):
    _display_table(rows)

_display_downloads(rows)

st.caption("For demonstration purposes only. Not financial advice.")
