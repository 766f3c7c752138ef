"""
pricing.py — Order totals.

A missing product or add-on (never selected, deleted since, or not loaded
yet) prices at 0 instead of failing. Totals are computed once when an order
is created and stored on it; the order list re-derives them from current
prices for display, so the two can drift apart when prices change.
"""

from datetime import datetime, timezone
from decimal import Decimal

from ramen_console.entities import ORDER_STATUSES, is_nan, to_decimal, to_number, to_quantity
from ramen_console.remote_list import find_by_id


def _amount(val) -> Decimal:
    """Price-like field → Decimal; absent or NaN counts as 0."""
    if val is None or isinstance(val, bool):
        return Decimal(0)
    num = to_number(val)
    if is_nan(num):
        return Decimal(0)
    return to_decimal(num)


def compute_total(quantity, product=None, add_on=None) -> float:
    """(product price + add-on value) * quantity."""
    price = _amount(product.get("price")) if product else Decimal(0)
    extra = _amount(add_on.get("value")) if add_on else Decimal(0)
    qty = to_number(quantity) if quantity is not None else float("nan")
    if is_nan(qty):
        return float("nan")
    return float((price + extra) * to_decimal(qty))


def price_order(order: dict, inventory: list[dict], add_ons: list[dict]) -> float:
    product = find_by_id(inventory, order.get("product_id"))
    add_on = find_by_id(add_ons, order.get("add_on_id")) if order.get("add_on_id") else None
    return compute_total(order.get("quantity"), product, add_on)


def build_order(draft: dict, inventory: list[dict], add_ons: list[dict], now=None) -> dict:
    """The record stored for a new order, with its total fixed at creation."""
    order = {
        "customer_name": draft.get("customer_name", ""),
        "room_number": draft.get("room_number", ""),
        "product_id": draft.get("product_id", ""),
        "quantity": to_quantity(draft.get("quantity", 1)),
        "add_on_id": draft.get("add_on_id") or "",
        "payment_type": draft.get("payment_type", ""),
        "order_type": draft.get("order_type", ""),
        "status": ORDER_STATUSES[0],
        "order_date": now or datetime.now(timezone.utc),
    }
    order["total_amount"] = price_order(order, inventory, add_ons)
    return order


def order_rows(orders: list[dict], inventory: list[dict], add_ons: list[dict]) -> list[dict]:
    """Orders prepared for display, totals recomputed from current prices."""
    rows = []
    for order in orders:
        product = find_by_id(inventory, order.get("product_id"))
        add_on = find_by_id(add_ons, order.get("add_on_id")) if order.get("add_on_id") else None
        rows.append({
            **order,
            "total_amount": compute_total(order.get("quantity"), product, add_on),
            "stored_total": order.get("total_amount"),
            "product_name": (product or {}).get("name") or "Unknown",
            "add_on_name": (add_on or {}).get("name") or "-",
        })
    return rows


def grand_total(rows: list[dict]) -> float:
    """Sum of displayed totals; unusable amounts count as 0."""
    return float(sum((_amount(r.get("total_amount")) for r in rows), Decimal(0)))
