import threading

import pytest

from ramen_console.data_state import fmt_date, money


def test_money():
    assert money(1234.5) == "RM1,234.50"
    assert money(-3) == "-RM3.00"
    assert money(float("nan")) == "RM0.00"
    assert money("abc", currency="$") == "$0.00"


def test_fmt_date_empty():
    assert fmt_date(None) == ""


def test_lookups_load_concurrently(console, store, seeded):
    entered = []
    both_in = threading.Barrier(2, timeout=5)
    original = store.read_all

    def read_all(collection):
        entered.append(collection)
        both_in.wait()  # only returns once inventory and add-ons are both in flight
        return original(collection)

    store.read_all = read_all
    assert console.load_order_lookups() == []
    assert sorted(entered) == ["add_ons", "inventory"]
    assert len(console.inventory) == 2
    assert len(console.add_ons) == 1


def test_orders_load_despite_failed_lookups(console, store, seeded):
    store.create("orders", {"customer_name": "Aiko", "order_date": "2024-01-01"})
    store.fail_reads.add("add_ons")
    errors = console.load_orders_view()
    assert errors == ["Failed to fetch add-ons"]
    assert len(console.orders) == 1
    assert len(console.inventory) == 2


def test_orders_read_after_lookups(console, store, seeded):
    console.load_orders_view()
    reads = [c for _, c in store.calls]
    assert reads.index("orders") > reads.index("inventory")
    assert reads.index("orders") > reads.index("add_ons")


def test_place_order_prices_from_cache(console, seeded):
    console.load_order_lookups()
    ok, key = console.place_order({
        "customer_name": "Aiko", "room_number": "3", "product_id": seeded["ramen"],
        "quantity": "3", "add_on_id": seeded["egg"], "payment_type": "Cash",
        "order_type": "Self Pickup",
    })
    assert ok
    order = console.orders.get(key)
    assert order["total_amount"] == pytest.approx(33.6)
    assert order["status"] == "Pending"
    assert console.orders.items[0]["id"] == key


def test_set_order_status(console, seeded):
    console.load_order_lookups()
    _, key = console.place_order({"customer_name": "Aiko", "product_id": seeded["gyoza"],
                                  "quantity": 1})
    assert console.set_order_status(key, "Completed") == (True, "")
    assert console.orders.get(key)["status"] == "Completed"


def test_order_table_uses_current_prices(console, store, seeded):
    console.load_order_lookups()
    console.place_order({"customer_name": "Aiko", "product_id": seeded["gyoza"], "quantity": 2})
    console.place_order({"customer_name": "Ben", "product_id": seeded["ramen"], "quantity": 1,
                         "payment_type": "Online"})
    console.inventory.update(seeded["gyoza"], {"price": 7})

    rows, total = console.order_table()
    assert [r["customer_name"] for r in rows] == ["Ben", "Aiko"]
    assert rows[1]["total_amount"] == pytest.approx(14.0)
    assert rows[1]["stored_total"] == pytest.approx(13.0)
    assert total == pytest.approx(23.7)

    rows, total = console.order_table(payment_type="Online")
    assert [r["customer_name"] for r in rows] == ["Ben"]


def test_dashboard_snapshot(console, store, seeded):
    for day in range(1, 8):
        store.create("orders", {"customer_name": f"c{day}", "total_amount": 10,
                                "order_date": f"2024-01-0{day}T12:00:00+00:00"})
    store.create("expenses", {"name": "Gas", "price": 5, "date": "2024-01-02"})

    metrics, recent, errors = console.dashboard_snapshot()
    assert errors == []
    assert metrics.total_orders == 7
    assert metrics.total_revenue == 70.0
    assert metrics.total_profit == 67.4
    assert metrics.low_stock_items == 1
    assert [o["customer_name"] for o in recent] == ["c7", "c6", "c5", "c4", "c3"]
    assert len(console.orders) == 7


def test_dashboard_snapshot_reports_failures(console, store):
    store.fail_reads.add("expenses")
    metrics, recent, errors = console.dashboard_snapshot()
    assert errors == ["Failed to fetch expenses"]
    assert metrics.total_expenses == 0


def test_manager_lookup(console):
    assert console.manager("addons") is console.add_ons
    with pytest.raises(KeyError):
        console.manager("bogus")
