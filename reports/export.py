"""
Export a projection as CSV, JSON, or an Excel workbook.

All three are pure transformations of the row list, rounded to 2 decimals
(half away from zero) at emission. Nothing is recomputed.
"""

from __future__ import annotations

import io
import json
import math
from typing import Dict, List, Optional, Sequence

import pandas as pd

from core.utils import round_value
from engine.rows import MonthRow

from .tables import projection_to_frame

EXPORT_FILENAMES: Dict[str, str] = {
    "csv": "projection.csv",
    "json": "projection.json",
    "xlsx": "projection.xlsx",
}

EXCEL_SHEET_NAME = "Projection"


def to_csv_text(rows: Sequence[MonthRow]) -> str:
    """Header row of field names, then one line per month; values fixed to 2 decimals."""
    df = projection_to_frame(rows, include_cost_increase=False, rounded=True)
    return df.to_csv(index=False, float_format="%.2f", lineterminator="\n")


def _json_number(value: float) -> Optional[float]:
    """Rounded value, or None for inf/nan (JSON has no token for them)."""
    rounded = round_value(value)
    return rounded if math.isfinite(rounded) else None


def to_records(rows: Sequence[MonthRow]) -> List[dict]:
    """Rounded month objects; non-finite values become None."""
    records = []
    for row in rows:
        rec = row.to_dict()
        for name, value in rec.items():
            if name == "month":
                continue
            if name == "beneficiary_shares":
                rec[name] = {k: _json_number(v) for k, v in value.items()}
            else:
                rec[name] = _json_number(value)
        records.append(rec)
    return records


def to_json_text(rows: Sequence[MonthRow]) -> str:
    """List of month objects with nested beneficiary_shares."""
    return json.dumps(to_records(rows), indent=2, allow_nan=False)


def to_excel_bytes(rows: Sequence[MonthRow]) -> bytes:
    df = projection_to_frame(rows, include_cost_increase=False, rounded=True)
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=EXCEL_SHEET_NAME)
    return buf.getvalue()
