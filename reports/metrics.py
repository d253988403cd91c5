"""
Projection-level summaries: horizon totals and the first/last share values
read by the dashboard counter.
"""

from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from engine.rows import MonthRow
from engine.waterfall import DEFAULT_RATES, WaterfallRates


def summarize_projection(
    rows: Sequence[MonthRow],
    *,
    rates: WaterfallRates = DEFAULT_RATES,
) -> Dict[str, float]:
    """
    Horizon totals of the bill and the waterfall.

    Returns
    -------
    Dict with total_gross_cost, total_marked_up_cost, total_reseller_revenue,
    total_quarterly_payments, total_gross_profit, total_net_profit,
    total_retained (unallocated share of net profit), one
    total_share_<name> per beneficiary, and months.
    """
    if not rows:
        raise ValueError("No projection rows to summarize.")

    total_net = sum(r.net_profit for r in rows)
    summary = {
        "months": len(rows),
        "total_gross_cost": sum(r.gross_cost for r in rows),
        "total_marked_up_cost": sum(r.marked_up_cost for r in rows),
        "total_reseller_revenue": sum(r.reseller_revenue for r in rows),
        "total_quarterly_payments": sum(r.quarterly_payment for r in rows),
        "total_gross_profit": sum(r.gross_profit for r in rows),
        "total_net_profit": total_net,
        "total_retained": total_net * rates.unallocated_fraction,
    }
    for name in rows[0].beneficiary_shares:
        summary[f"total_share_{name}"] = sum(r.beneficiary_shares[name] for r in rows)
    return summary


def summary_table(summary: Dict[str, float]) -> pd.DataFrame:
    """Two-column Metric/Value frame for display."""
    return pd.DataFrame(
        [{"Metric": _metric_label(k), "Value": v} for k, v in summary.items()]
    )


def _metric_label(key: str) -> str:
    # only the first letter is raised; beneficiary names keep their case
    label = key.replace("_", " ")
    return label[:1].upper() + label[1:]


def share_progression(rows: Sequence[MonthRow]) -> Dict[str, Dict[str, float]]:
    """First and last month beneficiary shares, keyed by beneficiary name."""
    if not rows:
        return {}
    first, last = rows[0].beneficiary_shares, rows[-1].beneficiary_shares
    return {name: {"first": first[name], "last": last[name]} for name in first}
