"""
remote_list.py — In-memory mirror of one remote collection.

A RemoteList is only ever patched by the operation that performed the
mutation, after the store accepted it. It is never reconciled against other
writers; `load()` is the only way to pick up external changes.

Every operation returns `(ok, message)`. Store failures are logged and turned
into a user-facing message here; they never propagate to the caller, and the
cached list is left exactly as it was.
"""

import logging
from datetime import datetime, timezone

import pandas as pd

from ramen_console.entities import EntityKind
from ramen_console.supabase_store import FetchError, Query, WriteError

logger = logging.getLogger(__name__)


def to_datetime(val):
    """Store timestamp (ISO string or datetime) → datetime; missing → now."""
    if isinstance(val, datetime):
        return val
    if val is None or val == "":
        return datetime.now(timezone.utc)
    ts = pd.to_datetime(val, errors="coerce")
    if pd.isna(ts):
        return datetime.now(timezone.utc)
    return ts.to_pydatetime()


def find_by_id(items: list[dict], key):
    """First record with the given key, or None (a lookup miss)."""
    if not key:
        return None
    for item in items:
        if item.get("id") == key:
            return item
    return None


def matches_text(record: dict, field: str, text: str) -> bool:
    return (text or "").lower() in str(record.get(field) or "").lower()


class RemoteList:
    def __init__(self, store, kind: EntityKind):
        self.store = store
        self.kind = kind
        self.items: list[dict] = []
        self.error = ""

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def _fail(self, message: str, exc: Exception):
        logger.warning("%s: %s", message, exc)
        self.error = message
        return False, message

    def _normalize(self, fields: dict) -> dict:
        out = self.kind.coerce(fields)
        for name in self.kind.temporal_fields:
            if name in out:
                out[name] = to_datetime(out[name])
        return out

    # ── Reads ───────────────────────────────────────────────────────────────

    def load(self, query: Query | None = None):
        """Replace the cache with the store's current contents."""
        query = query or self.kind.load_query
        try:
            if query is None:
                docs = self.store.read_all(self.kind.collection)
            else:
                docs = self.store.read_query(self.kind.collection, query)
        except FetchError as e:
            return self._fail(f"Failed to fetch {self.kind.plural}", e)

        items = []
        for doc in docs:
            fields = dict(doc.fields)
            for name in self.kind.temporal_fields:
                fields[name] = to_datetime(fields.get(name))
            items.append({"id": doc.key, **fields})
        self.items = items
        self.error = ""
        return True, f"{len(items)} {self.kind.plural}"

    def get(self, key):
        return find_by_id(self.items, key)

    def search(self, text: str = "") -> list[dict]:
        """Case-insensitive substring match on the display field."""
        if not text:
            return list(self.items)
        return [r for r in self.items if matches_text(r, self.kind.search_field, text)]

    # ── Writes ──────────────────────────────────────────────────────────────

    def create(self, fields: dict):
        """Create remotely, then add to the cache. Returns (ok, key or message)."""
        record = self._normalize(fields)
        try:
            key = self.store.create(self.kind.collection, record)
        except WriteError as e:
            return self._fail(f"Failed to add {self.kind.singular}", e)

        entry = {"id": key, **record}
        if self.kind.prepend:
            self.items = [entry] + self.items
        else:
            self.items = self.items + [entry]
        self.error = ""
        return True, key

    def update(self, key, patch: dict):
        """Patch remotely, then merge into the cached entry in place."""
        mutable = self.kind.mutable_fields
        if mutable is not None:
            locked = sorted(set(patch) - mutable)
            if locked:
                message = f"Cannot change {', '.join(locked)} on an existing {self.kind.singular}"
                self.error = message
                return False, message

        changes = self._normalize(patch)
        try:
            self.store.update(self.kind.collection, key, changes)
        except WriteError as e:
            return self._fail(f"Failed to update {self.kind.singular}", e)

        entry = self.get(key)
        if entry is not None:
            entry.update(changes)
        self.error = ""
        return True, ""

    def remove(self, key):
        """Delete remotely, then drop the entry from the cache."""
        try:
            self.store.delete(self.kind.collection, key)
        except WriteError as e:
            return self._fail(f"Failed to delete {self.kind.singular}", e)

        self.items = [r for r in self.items if r.get("id") != key]
        self.error = ""
        return True, ""


class OrderList(RemoteList):
    """Orders add a payment-type filter to the text search."""

    def search(self, text: str = "", payment_type: str = "all") -> list[dict]:
        rows = super().search(text)
        if payment_type and payment_type != "all":
            rows = [r for r in rows if r.get("payment_type") == payment_type]
        return rows
