"""
Projection runner — projects the consumption bill month by month and runs
each month through the waterfall.

One run is a pure function of (config, catalog, rates):
  1. Validate the config (InvalidConfigError / UnknownWorkloadError, before any math)
  2. Resolve the effective workload profile once (photon applied to a copy)
  3. Compound units from the closed form for all months
  4. For each month: bill -> waterfall -> MonthRow
  5. Return the complete row list

Values are full precision; rounding belongs to reports/ at emission time.
"""

from __future__ import annotations

import logging
import math
from typing import List

from catalog.workloads import DEFAULT_CATALOG, WorkloadCatalog
from core.config import ProjectionConfig, validate_config

from .rows import MonthRow
from .usage import compounded_units, monthly_bill
from .waterfall import DEFAULT_RATES, QuarterAccumulator, WaterfallRates, allocate

logger = logging.getLogger(__name__)


def run_projection(
    config: ProjectionConfig,
    *,
    catalog: WorkloadCatalog = DEFAULT_CATALOG,
    rates: WaterfallRates = DEFAULT_RATES,
) -> List[MonthRow]:
    """
    Project the bill and waterfall for config.horizon_years * 12 months.

    Parameters
    ----------
    config : ProjectionConfig
        Workload, photon flag, initial units, storage price, growth rate, horizon
    catalog : WorkloadCatalog
        Profile source; never mutated
    rates : WaterfallRates
        Markup, reseller, quarterly, retained and beneficiary fractions

    Returns
    -------
    List of MonthRow ordered by month (1-indexed).

    Raises
    ------
    InvalidConfigError
        A field is outside its declared range.
    UnknownWorkloadError
        config.workload_name is not in the catalog.

    Growth large enough to overflow is not an error: rows carry inf/nan.
    """
    validate_config(config, catalog)
    profile = catalog.effective_profile(
        config.workload_name, photon_enabled=config.photon_enabled
    )

    n_months = config.months
    units = compounded_units(config.initial_units, config.monthly_growth_rate, n_months)
    accumulator = QuarterAccumulator()

    rows: List[MonthRow] = []
    for m in range(1, n_months + 1):
        bill = monthly_bill(float(units[m - 1]), profile, config.storage_price_per_gb)
        waterfall = allocate(m, bill.gross_cost, accumulator, rates)
        rows.append(MonthRow.from_parts(m, bill, waterfall))

    last_gross = rows[-1].gross_cost
    if not math.isfinite(last_gross):
        logger.warning(
            "Projection for %r overflowed: month %d gross cost is %s",
            config.workload_name, n_months, last_gross,
        )
    logger.info(
        "Projected %d months for %r (photon=%s): final gross cost %.2f",
        n_months, config.workload_name, config.photon_enabled, last_gross,
    )
    return rows


project = run_projection
