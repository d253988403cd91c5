"""
Per-month consumption math — units, storage, and the gross bill.

Units compound from the closed form initial * (1 + g)^(m - 1) for every month,
so no month depends on a previous month's value. Nothing here rounds.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from catalog.workloads import WorkloadProfile

GB_PER_PB = 1024


def compounded_units(initial_units: float, growth_rate: float, n_months: int) -> np.ndarray:
    """Units consumed for months 1..n_months; overflow yields inf rather than raising."""
    exponents = np.arange(n_months, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(initial_units) * np.power(1.0 + float(growth_rate), exponents)


def unit_price_per_pb(storage_price_per_gb: float) -> float:
    return storage_price_per_gb * GB_PER_PB


@dataclass(frozen=True)
class MonthlyBill:
    """Consumption and gross cost for one month, before the waterfall."""
    units_consumed: float
    storage_gb: float
    storage_pb: float
    compute_cost: float
    storage_cost: float
    gross_cost: float


def monthly_bill(
    units: float,
    profile: WorkloadProfile,
    storage_price_per_gb: float,
) -> MonthlyBill:
    storage_gb = units * profile.storage_yield_per_unit
    storage_pb = storage_gb / GB_PER_PB
    compute_cost = units * profile.compute_rate_per_unit
    storage_cost = storage_pb * unit_price_per_pb(storage_price_per_gb)
    return MonthlyBill(
        units_consumed=units,
        storage_gb=storage_gb,
        storage_pb=storage_pb,
        compute_cost=compute_cost,
        storage_cost=storage_cost,
        gross_cost=compute_cost + storage_cost,
    )
