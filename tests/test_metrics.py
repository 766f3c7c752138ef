from decimal import Decimal

import pytest

from ramen_console.metrics import (
    DashboardMetrics, compute_metrics, count_low_stock, round_cents, sum_amounts,
)


@pytest.mark.parametrize("raw, expected", [
    (1234.555, 1234.56),
    (Decimal("0.005"), 0.01),
    (Decimal("-0.005"), 0.0),
    (10, 10.0),
    (0.1 + 0.2, 0.3),
])
def test_round_cents(raw, expected):
    assert round_cents(raw) == expected


def test_sum_amounts_treats_bad_values_as_zero():
    records = [{"price": 10.1}, {"price": "abc"}, {"price": None}, {}, {"price": "2.2"}]
    assert sum_amounts(records, "price") == Decimal("12.3")


def test_count_low_stock_is_strictly_below_threshold():
    inventory = [{"quantity": q} for q in (5, 9, 10, 11, 0)]
    assert count_low_stock(inventory) == 3
    assert count_low_stock(inventory, threshold=11) == 4


def test_metrics():
    orders = [{"total_amount": 500}, {"total_amount": 700}]
    expenses = [{"price": 300}, {"price": 100}]
    inventory = [{"quantity": q} for q in (5, 9, 10, 11, 0)]
    m = compute_metrics(orders, expenses, inventory)
    assert m == DashboardMetrics(
        total_orders=2,
        total_revenue=1200.0,
        total_expenses=400.0,
        total_profit=802.4,
        low_stock_items=3,
    )


def test_metrics_empty():
    m = compute_metrics([], [], [])
    assert m.total_orders == 0
    assert m.total_revenue == 0
    assert m.total_profit == 2.4
    assert m.low_stock_items == 0


def test_metrics_with_custom_adjustment():
    m = compute_metrics([{"total_amount": 10}], [{"price": 4}], [],
                        expense_adjustment=Decimal("0"), low_stock_threshold=1)
    assert m.total_profit == 6.0


def test_profit_takes_adjustment_off_expenses():
    m = compute_metrics([{"total_amount": 1000.00}], [{"price": 200.00}], [])
    assert m.total_profit == 802.4


def test_revenue_rounds_half_up():
    m = compute_metrics([{"total_amount": 1000}, {"total_amount": 234.555}], [], [])
    assert m.total_revenue == 1234.56
