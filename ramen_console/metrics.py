"""
metrics.py — Dashboard headline numbers from full entity snapshots.

Money sums are exact (Decimal) and rounded once, at the end, to the cent
with halves going up: round(x * 100) / 100.
"""

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

import pandas as pd

from ramen_console.entities import to_decimal

DEFAULT_EXPENSE_ADJUSTMENT = Decimal("2.40")
DEFAULT_LOW_STOCK_THRESHOLD = 10

_HALF = Decimal("0.5")
_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class DashboardMetrics:
    total_orders: int
    total_revenue: float
    total_expenses: float
    total_profit: float
    low_stock_items: int


def round_cents(amount) -> float:
    """Nearest cent, exact halves rounded toward +infinity."""
    cents = (to_decimal(amount) * _HUNDRED + _HALF).to_integral_value(rounding=ROUND_FLOOR)
    return float(cents / _HUNDRED)


def sum_amounts(records: list[dict], field: str) -> Decimal:
    """Unrounded sum of a money field; missing or non-numeric values count as 0."""
    if not records:
        return Decimal(0)
    col = pd.to_numeric(pd.DataFrame(records, columns=[field])[field], errors="coerce").fillna(0)
    return sum((to_decimal(float(v)) for v in col), Decimal(0))


def count_low_stock(inventory: list[dict], threshold=DEFAULT_LOW_STOCK_THRESHOLD) -> int:
    """Items whose quantity is strictly below the threshold."""
    if not inventory:
        return 0
    qty = pd.to_numeric(pd.DataFrame(inventory, columns=["quantity"])["quantity"], errors="coerce")
    return int((qty < threshold).sum())


def compute_metrics(orders, expenses, inventory,
                    expense_adjustment=DEFAULT_EXPENSE_ADJUSTMENT,
                    low_stock_threshold=DEFAULT_LOW_STOCK_THRESHOLD) -> DashboardMetrics:
    revenue = sum_amounts(orders, "total_amount")
    spent = sum_amounts(expenses, "price")
    profit = revenue - (spent - to_decimal(expense_adjustment))
    return DashboardMetrics(
        total_orders=len(orders),
        total_revenue=round_cents(revenue),
        total_expenses=round_cents(spent),
        total_profit=round_cents(profit),
        low_stock_items=count_low_stock(inventory, low_stock_threshold),
    )
