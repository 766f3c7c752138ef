"""
supabase_store.py — Keyed document collections on Supabase (with local-file fallback).

Both stores expose the same five calls used by the cache managers:
  read_all(collection)              -> list[Document]
  read_query(collection, query)     -> list[Document]
  create(collection, fields)        -> assigned key
  update(collection, key, patch)    -> None
  delete(collection, key)           -> None

Reads raise FetchError and writes raise WriteError, whatever the underlying
failure was (network, permission, bad payload).
"""

import json
import logging
import operator
import os
import threading
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000

# Columns Supabase adds that are not part of an entity's fields
_INTERNAL_COLUMNS = ("id", "created_at")

_COMPARATORS = {
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
    ">=": operator.ge,
    ">": operator.gt,
}

# PostgREST filter method for each comparison
_POSTGREST_FILTERS = {
    "<": "lt",
    "<=": "lte",
    "==": "eq",
    "!=": "neq",
    ">=": "gte",
    ">": "gt",
}


class StoreError(Exception):
    """Base class for remote collection failures."""


class FetchError(StoreError):
    """A read against the store failed."""


class WriteError(StoreError):
    """A create, update or delete against the store failed."""


@dataclass(frozen=True)
class Document:
    key: str
    fields: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Query:
    order_by: str | None = None
    descending: bool = False
    limit: int | None = None
    where_field: str | None = None
    where_op: str | None = None
    where_value: Any = None

    def __post_init__(self):
        if self.where_field is not None and self.where_op not in _COMPARATORS:
            raise ValueError(f"Unsupported filter operator: {self.where_op!r}")


def _encode_value(val):
    if isinstance(val, (datetime, date)):
        return val.isoformat()
    return val


def _encode(fields: dict) -> dict:
    """Make a field mapping JSON-safe (timestamps become ISO-8601 strings)."""
    return {k: _encode_value(v) for k, v in fields.items()}


def _to_document(row: dict) -> Document:
    fields = {k: v for k, v in row.items() if k not in _INTERNAL_COLUMNS}
    return Document(key=str(row["id"]), fields=fields)


# ── Supabase ────────────────────────────────────────────────────────────────

class SupabaseStore:
    """Collections backed by Supabase tables with a generated `id` column."""

    def __init__(self, client):
        self.client = client

    def _fetch(self, collection: str, query: Query | None = None) -> list[dict]:
        """Fetch rows, paginating past the 1000-row limit unless a limit is set."""
        query = query or Query()

        def _builder():
            b = self.client.table(collection).select("*")
            if query.where_field is not None:
                method = getattr(b, _POSTGREST_FILTERS[query.where_op])
                b = method(query.where_field, _encode_value(query.where_value))
            if query.order_by:
                b = b.order(query.order_by, desc=query.descending)
            return b

        if query.limit is not None:
            return _builder().limit(query.limit).execute().data

        rows: list[dict] = []
        offset = 0
        while True:
            batch = _builder().range(offset, offset + PAGE_SIZE - 1).execute().data
            rows.extend(batch)
            if len(batch) < PAGE_SIZE:
                break
            offset += PAGE_SIZE
        return rows

    def read_all(self, collection: str) -> list[Document]:
        return self.read_query(collection, None)

    def read_query(self, collection: str, query: Query | None) -> list[Document]:
        try:
            rows = self._fetch(collection, query)
        except Exception as e:
            raise FetchError(f"read {collection} failed: {e}") from e
        return [_to_document(r) for r in rows]

    def create(self, collection: str, fields: dict) -> str:
        try:
            resp = self.client.table(collection).insert(_encode(fields)).execute()
        except Exception as e:
            raise WriteError(f"insert into {collection} failed: {e}") from e
        if not resp.data:
            raise WriteError(f"insert into {collection} returned no row")
        key = str(resp.data[0]["id"])
        logger.debug("Created %s/%s", collection, key)
        return key

    def update(self, collection: str, key: str, patch: dict) -> None:
        try:
            resp = self.client.table(collection).update(_encode(patch)).eq("id", key).execute()
        except Exception as e:
            raise WriteError(f"update {collection}/{key} failed: {e}") from e
        if not resp.data:
            raise WriteError(f"update {collection}/{key} matched no row")
        logger.debug("Updated %s/%s", collection, key)

    def delete(self, collection: str, key: str) -> None:
        try:
            resp = self.client.table(collection).delete().eq("id", key).execute()
        except Exception as e:
            raise WriteError(f"delete {collection}/{key} failed: {e}") from e
        if not resp.data:
            raise WriteError(f"delete {collection}/{key} matched no row")
        logger.debug("Deleted %s/%s", collection, key)


# ── Local file (fallback) ───────────────────────────────────────────────────

def _matches(fields: dict, query: Query) -> bool:
    if query.where_field is None:
        return True
    val = fields.get(query.where_field)
    if val is None:
        return False
    try:
        return _COMPARATORS[query.where_op](val, _encode_value(query.where_value))
    except TypeError:
        return False


class LocalStore:
    """
    JSON-file collections with the same contract as SupabaseStore.
    With no path the data lives only in memory (used by the tests).
    """

    def __init__(self, path: str | None = None):
        self.path = path
        self._lock = threading.Lock()
        self._collections: dict[str, dict[str, dict]] = {}
        if path and os.path.exists(path):
            with open(path) as f:
                self._collections = json.load(f)

    def _flush(self):
        if not self.path:
            return
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._collections, f, indent=2)

    def read_all(self, collection: str) -> list[Document]:
        with self._lock:
            rows = self._collections.get(collection, {})
            return [Document(key=k, fields=dict(v)) for k, v in rows.items()]

    def read_query(self, collection: str, query: Query | None) -> list[Document]:
        docs = self.read_all(collection)
        if query is None:
            return docs
        docs = [d for d in docs if _matches(d.fields, query)]
        if query.order_by:
            present = [d for d in docs if d.fields.get(query.order_by) is not None]
            missing = [d for d in docs if d.fields.get(query.order_by) is None]
            try:
                present.sort(key=lambda d: d.fields[query.order_by], reverse=query.descending)
            except TypeError as e:
                raise FetchError(f"cannot order {collection} by {query.order_by}: {e}") from e
            docs = present + missing
        if query.limit is not None:
            docs = docs[: query.limit]
        return docs

    def create(self, collection: str, fields: dict) -> str:
        key = uuid.uuid4().hex
        try:
            row = json.loads(json.dumps(_encode(fields)))
        except (TypeError, ValueError) as e:
            raise WriteError(f"cannot store {collection} record: {e}") from e
        with self._lock:
            self._collections.setdefault(collection, {})[key] = row
            self._flush()
        logger.debug("Created %s/%s", collection, key)
        return key

    def update(self, collection: str, key: str, patch: dict) -> None:
        try:
            patch = json.loads(json.dumps(_encode(patch)))
        except (TypeError, ValueError) as e:
            raise WriteError(f"cannot store {collection} patch: {e}") from e
        with self._lock:
            rows = self._collections.get(collection, {})
            if key not in rows:
                raise WriteError(f"update {collection}/{key} matched no row")
            rows[key].update(patch)
            self._flush()
        logger.debug("Updated %s/%s", collection, key)

    def delete(self, collection: str, key: str) -> None:
        with self._lock:
            rows = self._collections.get(collection, {})
            if key not in rows:
                raise WriteError(f"delete {collection}/{key} matched no row")
            del rows[key]
            self._flush()
        logger.debug("Deleted %s/%s", collection, key)


# ── Public API ──────────────────────────────────────────────────────────────

def _get_supabase_client(settings):
    """Return a Supabase client, or None if credentials are missing."""
    if not settings.supabase_configured:
        return None
    from supabase import create_client
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def open_store(settings):
    """Supabase when configured; otherwise the local JSON file."""
    try:
        client = _get_supabase_client(settings)
    except Exception as e:
        logger.warning("Supabase client could not be created (%s), using local store", e)
        client = None

    if client is not None:
        logger.info("Using Supabase store at %s", settings.SUPABASE_URL)
        return SupabaseStore(client)

    logger.warning("Supabase not configured, using local store %s", settings.LOCAL_STORE_PATH)
    return LocalStore(settings.LOCAL_STORE_PATH)


def verify_tables(store, collections) -> list[tuple[str, str, str]]:
    """Check each collection is readable; returns (collection, status, detail) rows."""
    results = []
    for name in collections:
        try:
            docs = store.read_all(name)
        except FetchError as e:
            results.append((name, "ERROR", str(e)))
            continue
        results.append((name, "OK", f"{len(docs)} rows"))
    return results
