import pytest

from engine.waterfall import (
    DEFAULT_RATES,
    QuarterAccumulator,
    WaterfallRates,
    allocate,
    is_quarter_end,
)


def test_markup_is_margin_preserving_divisor():
    res = allocate(1, 970.0, QuarterAccumulator())
    assert res.marked_up_cost == pytest.approx(1000.0)
    assert res.marked_up_cost != pytest.approx(970.0 * 1.03)
    assert res.reseller_revenue == pytest.approx(250.0)


def test_non_quarter_month_has_no_payment():
    acc = QuarterAccumulator()
    res = allocate(1, 600.0, acc)
    assert res.quarterly_payment == 0.0
    assert res.gross_profit == pytest.approx(res.reseller_revenue)
    assert acc.total == pytest.approx(600.0)


def test_quarter_end_pays_on_accumulated_cost_then_resets():
    acc = QuarterAccumulator()
    allocate(1, 100.0, acc)
    allocate(2, 200.0, acc)
    res = allocate(3, 300.0, acc)
    assert res.quarterly_payment == pytest.approx(600.0 * 0.05)
    assert acc.total == 0.0

    res4 = allocate(4, 50.0, acc)
    assert res4.quarterly_payment == 0.0
    assert acc.total == pytest.approx(50.0)


def test_profit_chain_and_split():
    acc = QuarterAccumulator(total=2000.0)
    res = allocate(6, 1000.0, acc)
    marked = 1000.0 / 0.97
    reseller = marked * 0.25
    quarterly = 3000.0 * 0.05
    gross = reseller + quarterly
    net = gross * 0.60
    assert res.gross_profit == pytest.approx(gross)
    assert res.net_profit == pytest.approx(net)
    assert res.beneficiary_shares == pytest.approx({"A": net * 0.4, "B": net * 0.4, "referral": net * 0.1})
    assert sum(res.beneficiary_shares.values()) == pytest.approx(net * 0.90)
    assert res.net_profit <= res.gross_profit


def test_unallocated_fraction_is_ten_percent():
    assert DEFAULT_RATES.allocated_fraction == pytest.approx(0.90)
    assert DEFAULT_RATES.unallocated_fraction == pytest.approx(0.10)


def test_custom_rates():
    rates = WaterfallRates(markup_rate=0.0, reseller_margin_rate=1.0, retained_rate=1.0,
                           beneficiary_split={"only": 1.0})
    res = allocate(1, 80.0, QuarterAccumulator(), rates)
    assert res.marked_up_cost == pytest.approx(80.0)
    assert res.beneficiary_shares == {"only": pytest.approx(80.0)}


@pytest.mark.parametrize("month, expected", [(1, False), (2, False), (3, True), (12, True), (13, False)])
def test_is_quarter_end(month, expected):
    assert is_quarter_end(month) is expected
