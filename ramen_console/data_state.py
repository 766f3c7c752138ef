"""
data_state.py — The console's data: store, session, one cache per collection.

Pages and callbacks receive a Console instead of reaching for module globals,
so everything here runs the same against Supabase, the local file store or a
test double.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from ramen_console.auth import open_session
from ramen_console.entities import ADD_ONS, EXPENSES, INVENTORY, ORDERS
from ramen_console.metrics import compute_metrics
from ramen_console.pricing import build_order, grand_total, order_rows
from ramen_console.remote_list import OrderList, RemoteList
from ramen_console.supabase_store import Query, open_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
#  UTILITY FUNCTIONS
# ══════════════════════════════════════════════════════════════════════════════

def money(val, currency="RM"):
    """Format a number as RM1,234.50."""
    try:
        val = float(val)
    except (TypeError, ValueError):
        val = 0.0
    if val != val:
        val = 0.0
    if val < 0:
        return f"-{currency}{abs(val):,.2f}"
    return f"{currency}{val:,.2f}"


def fmt_date(dt):
    return dt.strftime("%d/%m/%Y") if dt is not None else ""


def fmt_time(dt):
    return dt.strftime("%H:%M:%S") if dt is not None else ""


# ══════════════════════════════════════════════════════════════════════════════
#  CONSOLE
# ══════════════════════════════════════════════════════════════════════════════

class Console:
    def __init__(self, store, session, settings):
        self.store = store
        self.session = session
        self.settings = settings
        self.inventory = RemoteList(store, INVENTORY)
        self.add_ons = RemoteList(store, ADD_ONS)
        self.orders = OrderList(store, ORDERS)
        self.expenses = RemoteList(store, EXPENSES)
        # Dashboard's short list; kept apart so it never truncates self.orders
        self.recent_orders = OrderList(store, ORDERS)

    @classmethod
    def from_settings(cls, settings):
        store = open_store(settings)
        return cls(store, open_session(store), settings)

    def manager(self, slug):
        return {
            INVENTORY.slug: self.inventory,
            ADD_ONS.slug: self.add_ons,
            ORDERS.slug: self.orders,
            EXPENSES.slug: self.expenses,
        }[slug]

    def money(self, val):
        return money(val, self.settings.CURRENCY)

    # ── Loading ─────────────────────────────────────────────────────────────

    def load_order_lookups(self) -> list[str]:
        """Load inventory and add-ons side by side; wait for both."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [pool.submit(self.inventory.load), pool.submit(self.add_ons.load)]
            results = [f.result() for f in futures]
        return [msg for ok, msg in results if not ok]

    def load_orders_view(self) -> list[str]:
        """Lookups first (orders are priced from them), then orders regardless."""
        errors = self.load_order_lookups()
        ok, msg = self.orders.load()
        if not ok:
            errors.append(msg)
        return errors

    def reload_all(self) -> list[str]:
        errors = self.load_orders_view()
        ok, msg = self.expenses.load()
        if not ok:
            errors.append(msg)
        return errors

    def dashboard_snapshot(self):
        """(metrics, recent orders, error messages) from fresh loads."""
        errors = []
        for mgr in (self.orders, self.expenses, self.inventory):
            ok, msg = mgr.load()
            if not ok:
                errors.append(msg)
        recent = Query(order_by="order_date", descending=True,
                       limit=self.settings.RECENT_ORDERS_LIMIT)
        ok, msg = self.recent_orders.load(recent)
        if not ok:
            errors.append(msg)

        metrics = compute_metrics(
            self.orders.items, self.expenses.items, self.inventory.items,
            expense_adjustment=self.settings.PROFIT_EXPENSE_ADJUSTMENT,
            low_stock_threshold=self.settings.LOW_STOCK_THRESHOLD,
        )
        return metrics, list(self.recent_orders.items), errors

    # ── Orders ──────────────────────────────────────────────────────────────

    def place_order(self, draft: dict):
        """Price the draft against the current caches and create it."""
        order = build_order(draft, self.inventory.items, self.add_ons.items)
        return self.orders.create(order)

    def set_order_status(self, key, status: str):
        return self.orders.update(key, {"status": status})

    def order_table(self, search="", payment_type="all"):
        """Display rows for the orders page plus their grand total."""
        rows = order_rows(self.orders.search(search, payment_type),
                          self.inventory.items, self.add_ons.items)
        return rows, grand_total(rows)
