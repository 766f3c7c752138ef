import math
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from ramen_console.entities import (
    ADD_ONS, EXPENSES, INVENTORY, ORDERS, edit_draft, is_nan, new_draft, to_decimal, to_number,
    to_quantity,
)


@pytest.mark.parametrize("raw, expected", [
    ("12", 12),
    ("9.75", 9.75),
    (" 3 ", 3),
    ("", 0),
    (None, 0),
    (7, 7),
    (2.5, 2.5),
    (True, 1),
])
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_to_number_garbage_is_nan():
    assert is_nan(to_number("abc"))
    assert is_nan(to_number("1,5"))


@pytest.mark.parametrize("raw, expected", [
    ("3", 3),
    ("0", 1),
    ("-4", 1),
    ("2.9", 2),
    (5, 5),
])
def test_to_quantity_never_below_one(raw, expected):
    assert to_quantity(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "abc", "inf"])
def test_to_quantity_unparseable_is_nan(raw):
    assert math.isnan(to_quantity(raw))


def test_coerce_only_touches_numeric_fields():
    out = INVENTORY.coerce({"name": "Nori", "quantity": "5", "price": "1.20"})
    assert out == {"name": "Nori", "quantity": 5, "price": 1.2}


def test_coerce_leaves_absent_fields_absent():
    assert ORDERS.coerce({"status": "Completed"}) == {"status": "Completed"}


def test_orders_are_status_only_after_creation():
    assert ORDERS.mutable_fields == frozenset({"status"})
    assert INVENTORY.mutable_fields is None


def test_new_draft_defaults():
    assert new_draft(INVENTORY) == {"name": "", "quantity": "", "price": ""}
    assert new_draft(ADD_ONS) == {"name": "", "value": ""}
    assert new_draft(EXPENSES)["date"] == date.today().isoformat()
    order = new_draft(ORDERS)
    assert order["quantity"] == 1
    assert order["payment_type"] == "Cash"
    assert order["order_type"] == "Self Pickup"


def test_edit_draft_for_order_is_status_only():
    record = {"id": "o1", "customer_name": "Aiko", "status": "Processing"}
    assert edit_draft(ORDERS, record) == {"status": "Processing"}


def test_edit_draft_formats_dates():
    record = {"id": "e1", "name": "Gas", "price": 40,
              "date": datetime(2024, 3, 9, 8, 0, tzinfo=timezone.utc)}
    assert edit_draft(EXPENSES, record) == {"name": "Gas", "price": 40, "date": "2024-03-09"}


@pytest.mark.parametrize("raw, expected", [
    (9.7, Decimal("9.7")),
    (1234.555, Decimal("1234.555")),
    (3, Decimal(3)),
    (Decimal("2.40"), Decimal("2.40")),
])
def test_to_decimal_uses_shortest_float_repr(raw, expected):
    assert to_decimal(raw) == expected
