import math

import pytest

from infoorbs.parqet import ParqetHolding, ParqetPortfolio
from infoorbs.utils import format_float


def test_percent_change():
    holding = ParqetHolding(purchase_value=100.0, current_value=110.0)
    assert holding.percent_change == pytest.approx(10.0)


def test_percent_change_negative_when_value_drops():
    holding = ParqetHolding(purchase_value=200.0, current_value=150.0)
    assert holding.percent_change < 0


def test_percent_change_unchanged_value_is_zero():
    holding = ParqetHolding(purchase_value=50.0, current_value=50.0)
    assert holding.percent_change == pytest.approx(0.0)


def test_percent_change_zero_purchase_value():
    rising = ParqetHolding(purchase_value=0.0, current_value=5.0)
    empty = ParqetHolding(purchase_value=0.0, current_value=0.0)
    rising_change = rising.percent_change
    empty_change = empty.percent_change
    assert math.isinf(rising_change)
    assert rising_change > 0
    assert math.isnan(empty_change)


def test_formatters_match_format_float():
    holding = ParqetHolding(
        purchase_price=1.234,
        purchase_value=10.5,
        current_price=2.345,
        current_value=12.75,
        shares=3.5,
    )
    assert holding.format_purchase_price(2) == format_float(1.234, 2)
    assert holding.format_purchase_value(1) == format_float(10.5, 1)
    assert holding.format_current_price(2) == format_float(2.345, 2)
    assert holding.format_current_value(0) == format_float(12.75, 0)
    assert holding.format_shares(3) == format_float(3.5, 3)
    assert holding.format_percent_change(2) == format_float(holding.percent_change, 2)


def test_portfolio_defaults():
    portfolio = ParqetPortfolio("portfolio-1")
    assert portfolio.portfolio_id == "portfolio-1"
    assert len(portfolio) == 0


def test_set_holdings_sorts_descending():
    portfolio = ParqetPortfolio()
    portfolio.set_holdings(
        [
            ParqetHolding(id="a", current_value=10),
            ParqetHolding(id="b", current_value=30),
            ParqetHolding(id="c", current_value=20),
        ]
    )
    values = [holding.current_value for holding in portfolio]
    assert values == sorted(values, reverse=True)
    assert portfolio[0].id == "b"
    assert len(portfolio) == 3


def test_set_holdings_keeps_order_of_equal_values():
    portfolio = ParqetPortfolio()
    portfolio.set_holdings(
        [
            ParqetHolding(id="first", current_value=5),
            ParqetHolding(id="big", current_value=9),
            ParqetHolding(id="second", current_value=5),
        ]
    )
    assert [holding.id for holding in portfolio] == ["big", "first", "second"]


def test_set_holdings_replaces_previous():
    portfolio = ParqetPortfolio()
    portfolio.set_holdings([ParqetHolding(id="old", current_value=1)])
    portfolio.set_holdings([ParqetHolding(id="new", current_value=2)])
    assert [holding.id for holding in portfolio] == ["new"]


def test_index_out_of_range():
    portfolio = ParqetPortfolio()
    portfolio.set_holdings([ParqetHolding(id="only")])
    first = portfolio[0]
    assert first.id == "only"
    assert len(portfolio) == 1
    with pytest.raises(IndexError):
        portfolio[1]