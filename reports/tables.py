"""
Tabular views of a projection for the dashboard table, charts, and exports.
"""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from core.schema import COST_INCREASE_COLUMN, MONTH_ROW_FIELDS, SHARE_COLUMN_PREFIX
from core.utils import excel_round, require_columns
from engine.rows import MonthRow

SCALAR_FIELDS = tuple(f for f in MONTH_ROW_FIELDS if f != "beneficiary_shares")


def share_columns(rows: Sequence[MonthRow]) -> List[str]:
    """share_<name> columns in the beneficiary order of the first row."""
    if not rows:
        return []
    return [f"{SHARE_COLUMN_PREFIX}{name}" for name in rows[0].beneficiary_shares]


def projection_to_frame(
    rows: Sequence[MonthRow],
    *,
    include_cost_increase: bool = True,
    rounded: bool = False,
) -> pd.DataFrame:
    """
    One row per month, columns in MonthRow field order with beneficiary shares
    flattened to share_<name>.

    cost_increase (display only) is the change in gross cost over the previous
    month; it is NaN for month 1.
    """
    columns = list(SCALAR_FIELDS) + share_columns(rows)
    records = []
    for row in rows:
        rec = {name: getattr(row, name) for name in SCALAR_FIELDS}
        for name, value in row.beneficiary_shares.items():
            rec[f"{SHARE_COLUMN_PREFIX}{name}"] = value
        records.append(rec)
    df = pd.DataFrame.from_records(records, columns=columns)
    df["month"] = df["month"].astype(int)

    if include_cost_increase:
        df[COST_INCREASE_COLUMN] = df["gross_cost"].diff()

    if rounded:
        value_cols = [c for c in df.columns if c != "month"]
        df[value_cols] = excel_round(df[value_cols].to_numpy(dtype=float), 2)

    return df


def chart_frame(rows: Sequence[MonthRow], ys: Sequence[str]) -> pd.DataFrame:
    """Long-format (month, series, value) frame for multi-line charts."""
    df = projection_to_frame(rows, include_cost_increase=False)
    require_columns(df, ys)
    return df[["month"] + list(ys)].melt(
        id_vars=["month"], value_vars=list(ys), var_name="series", value_name="value"
    )
