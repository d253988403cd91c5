import math

import pandas as pd
import pytest

from core.schema import MONTH_ROW_FIELDS
from engine.runner import run_projection
from reports.metrics import share_progression, summarize_projection, summary_table
from reports.tables import chart_frame, projection_to_frame

SHARE_COLS = ["share_A", "share_B", "share_referral"]


def test_frame_columns_follow_row_order(flat_config):
    df = projection_to_frame(run_projection(flat_config))
    expected = [f for f in MONTH_ROW_FIELDS if f != "beneficiary_shares"] + SHARE_COLS + ["cost_increase"]
    assert list(df.columns) == expected
    assert len(df) == 12
    assert df["month"].tolist() == list(range(1, 13))


def test_cost_increase_undefined_for_first_month(growth_config):
    df = projection_to_frame(run_projection(growth_config))
    assert math.isnan(df.loc[0, "cost_increase"])
    assert df["cost_increase"].iloc[1:].notna().all()
    assert (df["cost_increase"].iloc[1:] > 0).all()


def test_frame_without_cost_increase(flat_config):
    df = projection_to_frame(run_projection(flat_config), include_cost_increase=False)
    assert "cost_increase" not in df.columns


def test_rounded_frame(flat_config):
    df = projection_to_frame(run_projection(flat_config), rounded=True)
    assert df.loc[0, "storage_pb"] == 24.41
    assert df.loc[0, "marked_up_cost"] == 6185.57
    assert df["month"].dtype.kind == "i"


def test_empty_frame():
    df = projection_to_frame([])
    assert df.empty
    assert "gross_cost" in df.columns


def test_chart_frame_long_format(flat_config):
    rows = run_projection(flat_config)
    long = chart_frame(rows, ["marked_up_cost", "reseller_revenue"])
    assert list(long.columns) == ["month", "series", "value"]
    assert len(long) == 24
    assert set(long["series"]) == {"marked_up_cost", "reseller_revenue"}
    with pytest.raises(ValueError):
        chart_frame(rows, ["not_a_column"])


def test_summary_totals(flat_config):
    rows = run_projection(flat_config)
    summary = summarize_projection(rows)
    assert summary["months"] == 12
    assert summary["total_gross_cost"] == pytest.approx(72_000.0)
    assert summary["total_quarterly_payments"] == pytest.approx(72_000.0 * 0.05)
    shares = summary["total_share_A"] + summary["total_share_B"] + summary["total_share_referral"]
    assert shares + summary["total_retained"] == pytest.approx(summary["total_net_profit"])


def test_summary_requires_rows():
    with pytest.raises(ValueError):
        summarize_projection([])


def test_summary_table(flat_config):
    table = summary_table(summarize_projection(run_projection(flat_config)))
    assert isinstance(table, pd.DataFrame)
    assert list(table.columns) == ["Metric", "Value"]
    assert "Total gross cost" in table["Metric"].tolist()


def test_share_progression_reads_first_and_last(growth_config):
    rows = run_projection(growth_config)
    prog = share_progression(rows)
    assert set(prog) == {"A", "B", "referral"}
    assert prog["A"]["first"] == rows[0].beneficiary_shares["A"]
    assert prog["A"]["last"] == rows[-1].beneficiary_shares["A"]
    assert share_progression([]) == {}


def test_summary_table_keeps_beneficiary_case(flat_config):
    labels = summary_table(summarize_projection(run_projection(flat_config)))["Metric"].tolist()
    assert "Total share A" in labels
    assert "Total share B" in labels
    assert "Total share referral" in labels
    assert "Months" in labels
