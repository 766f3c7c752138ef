"""
Pytest fixtures: an in-memory store, a store that can be made to fail,
and a Console wired to them.
"""
from decimal import Decimal

import pytest

from ramen_console.auth import LocalSession
from ramen_console.data_state import Console
from ramen_console.supabase_store import FetchError, LocalStore, WriteError


class FailingStore(LocalStore):
    """LocalStore whose reads / writes raise for the listed collections."""

    def __init__(self):
        super().__init__()
        self.fail_reads = set()
        self.fail_writes = set()
        self.calls = []

    def read_query(self, collection, query):
        self.calls.append(("read", collection))
        if collection in self.fail_reads:
            raise FetchError(f"read {collection} failed: offline")
        return super().read_query(collection, query)

    def read_all(self, collection):
        self.calls.append(("read", collection))
        if collection in self.fail_reads:
            raise FetchError(f"read {collection} failed: offline")
        return super().read_all(collection)

    def create(self, collection, fields):
        if collection in self.fail_writes:
            raise WriteError(f"insert into {collection} failed: denied")
        return super().create(collection, fields)

    def update(self, collection, key, patch):
        if collection in self.fail_writes:
            raise WriteError(f"update {collection}/{key} failed: denied")
        return super().update(collection, key, patch)

    def delete(self, collection, key):
        if collection in self.fail_writes:
            raise WriteError(f"delete {collection}/{key} failed: denied")
        return super().delete(collection, key)


class TestSettings:
    __test__ = False

    SUPABASE_URL = ""
    SUPABASE_KEY = ""
    LOCAL_STORE_PATH = None
    PORT = 8050
    DEBUG = False
    LOG_LEVEL = "INFO"
    CURRENCY = "RM"
    PROFIT_EXPENSE_ADJUSTMENT = Decimal("2.40")
    LOW_STOCK_THRESHOLD = 10
    RECENT_ORDERS_LIMIT = 5
    SECRET_KEY = "test-secret"
    supabase_configured = False


@pytest.fixture
def store():
    return FailingStore()


@pytest.fixture
def test_settings():
    return TestSettings()


@pytest.fixture
def console(store, test_settings):
    return Console(store, LocalSession(), test_settings)


@pytest.fixture
def seeded(store):
    """Two products and one add-on in the store; returns their keys."""
    keys = {
        "ramen": store.create("inventory", {"name": "Shoyu Ramen", "quantity": 20, "price": 9.7}),
        "gyoza": store.create("inventory", {"name": "Gyoza", "quantity": 4, "price": 6.5}),
        "egg": store.create("add_ons", {"name": "Ajitama Egg", "value": 1.5}),
    }
    return keys
