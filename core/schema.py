from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

# Canonical MonthRow field order. Tables and exports use exactly this order;
# beneficiary_shares is flattened to share_<name> columns where a flat layout is needed.
MONTH_ROW_FIELDS: Tuple[str, ...] = (
    "month",
    "units_consumed",
    "storage_gb",
    "storage_pb",
    "compute_cost",
    "storage_cost",
    "gross_cost",
    "marked_up_cost",
    "reseller_revenue",
    "quarterly_payment",
    "gross_profit",
    "net_profit",
    "beneficiary_shares",
)

SHARE_COLUMN_PREFIX = "share_"
COST_INCREASE_COLUMN = "cost_increase"


class ProjectionBounds(BaseModel):
    """
    Declared ranges of a ProjectionConfig.

    Used by core.config.validate_config; the engine never clamps, it rejects.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    workload_name: str = Field(min_length=1)
    photon_enabled: bool
    initial_units: float = Field(gt=0, allow_inf_nan=False)
    storage_price_per_gb: float = Field(gt=0, allow_inf_nan=False)
    monthly_growth_rate: float = Field(ge=0.0, le=0.5, allow_inf_nan=False)
    horizon_years: int = Field(ge=1, le=10)
