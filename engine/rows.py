"""
MonthRow — one month of the projection, bill and waterfall merged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from core.schema import MONTH_ROW_FIELDS

from .usage import MonthlyBill
from .waterfall import WaterfallResult


@dataclass(frozen=True)
class MonthRow:
    month: int
    units_consumed: float
    storage_gb: float
    storage_pb: float
    compute_cost: float
    storage_cost: float
    gross_cost: float
    marked_up_cost: float
    reseller_revenue: float
    quarterly_payment: float
    gross_profit: float
    net_profit: float
    beneficiary_shares: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_parts(cls, month: int, bill: MonthlyBill, waterfall: WaterfallResult) -> "MonthRow":
        return cls(
            month=month,
            units_consumed=bill.units_consumed,
            storage_gb=bill.storage_gb,
            storage_pb=bill.storage_pb,
            compute_cost=bill.compute_cost,
            storage_cost=bill.storage_cost,
            gross_cost=bill.gross_cost,
            marked_up_cost=waterfall.marked_up_cost,
            reseller_revenue=waterfall.reseller_revenue,
            quarterly_payment=waterfall.quarterly_payment,
            gross_profit=waterfall.gross_profit,
            net_profit=waterfall.net_profit,
            beneficiary_shares=dict(waterfall.beneficiary_shares),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Field-ordered dict; beneficiary_shares stays nested."""
        out = {name: getattr(self, name) for name in MONTH_ROW_FIELDS}
        out["beneficiary_shares"] = dict(self.beneficiary_shares)
        return out
