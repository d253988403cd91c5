"""
Waterfall allocator — splits one month's gross bill across the parties.

Order of the waterfall, applied every month:
  1. Platform markup      marked_up = gross / (1 - markup_rate)   (margin-preserving divisor)
  2. Reseller margin      reseller  = marked_up * reseller_margin_rate
  3. Quarterly payment    on months divisible by 3: accumulated gross since the
                          last reset * quarterly_rate; zero in the other two months
  4. Gross profit         reseller + quarterly payment
  5. Net profit           gross profit * retained_rate
  6. Beneficiary split    fixed fractions of net profit; the fractions sum to 0.90
                          and the remaining 0.10 stays unallocated

The only state is the QuarterAccumulator, owned by a single projection run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

DEFAULT_BENEFICIARY_SPLIT: Mapping[str, float] = MappingProxyType({
    "A": 0.40,
    "B": 0.40,
    "referral": 0.10,
})


@dataclass(frozen=True)
class WaterfallRates:
    markup_rate: float = 0.03
    reseller_margin_rate: float = 0.25
    quarterly_rate: float = 0.05
    retained_rate: float = 0.60
    beneficiary_split: Mapping[str, float] = field(
        default_factory=lambda: DEFAULT_BENEFICIARY_SPLIT
    )
    months_per_quarter: int = 3

    @property
    def allocated_fraction(self) -> float:
        return sum(self.beneficiary_split.values())

    @property
    def unallocated_fraction(self) -> float:
        return 1.0 - self.allocated_fraction


DEFAULT_RATES = WaterfallRates()


@dataclass
class QuarterAccumulator:
    """Running gross cost since the last quarter boundary."""
    total: float = 0.0

    def add(self, amount: float) -> None:
        self.total += amount

    def reset(self) -> None:
        self.total = 0.0


@dataclass(frozen=True)
class WaterfallResult:
    marked_up_cost: float
    reseller_revenue: float
    quarterly_payment: float
    gross_profit: float
    net_profit: float
    beneficiary_shares: Dict[str, float]


def is_quarter_end(month_index: int, rates: WaterfallRates = DEFAULT_RATES) -> bool:
    return month_index % rates.months_per_quarter == 0


def allocate(
    month_index: int,
    gross_cost: float,
    accumulator: QuarterAccumulator,
    rates: WaterfallRates = DEFAULT_RATES,
) -> WaterfallResult:
    """
    Run the waterfall for one month and advance the quarter accumulator.

    The accumulator includes the current month before the quarterly payment is
    taken, and is reset to zero right after it on quarter-end months.
    """
    marked_up_cost = gross_cost / (1.0 - rates.markup_rate)
    reseller_revenue = marked_up_cost * rates.reseller_margin_rate

    accumulator.add(gross_cost)
    if is_quarter_end(month_index, rates):
        quarterly_payment = accumulator.total * rates.quarterly_rate
        accumulator.reset()
    else:
        quarterly_payment = 0.0

    gross_profit = reseller_revenue + quarterly_payment
    net_profit = gross_profit * rates.retained_rate
    shares = {name: net_profit * frac for name, frac in rates.beneficiary_split.items()}

    return WaterfallResult(
        marked_up_cost=marked_up_cost,
        reseller_revenue=reseller_revenue,
        quarterly_payment=quarterly_payment,
        gross_profit=gross_profit,
        net_profit=net_profit,
        beneficiary_shares=shares,
    )
