"""Entity kinds, option lists and form-input coercion."""

import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Callable

from ramen_console.supabase_store import Query

NAN = float("nan")

PAYMENT_TYPES = ("Cash", "Online")
ORDER_TYPES = ("Self Pickup", "Delivery")
ORDER_STATUSES = ("Pending", "Processing", "Completed", "Cancelled")


# ══════════════════════════════════════════════════════════════════════════════
#  COERCION
# ══════════════════════════════════════════════════════════════════════════════

def is_nan(val) -> bool:
    return isinstance(val, float) and math.isnan(val)


def to_number(val):
    """
    Parse a form value to a number.

    Numbers pass through, blank or cleared input is 0, numeric strings become
    int or float, anything else becomes NaN. Nothing is validated beyond that.
    """
    if isinstance(val, bool):
        return int(val)
    if isinstance(val, (int, float)):
        return val
    if val is None:
        return 0
    text = str(val).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return NAN


def to_decimal(val) -> Decimal:
    """Exact Decimal for a number; floats go through their shortest repr."""
    return Decimal(repr(val)) if isinstance(val, float) else Decimal(val)


def to_quantity(val):
    """Order quantity: whole units, never below 1; unparseable input is NaN."""
    if val is None or (isinstance(val, str) and not val.strip()):
        return NAN
    num = to_number(val)
    if is_nan(num) or math.isinf(num):
        return NAN
    return max(1, int(num))


# ══════════════════════════════════════════════════════════════════════════════
#  ENTITY KINDS
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class EntityKind:
    """Everything the generic cache manager needs to know about one collection."""

    slug: str
    collection: str
    singular: str  # "Failed to add <singular>"
    plural: str  # "Failed to fetch <plural>"
    search_field: str = "name"
    numeric_fields: dict[str, Callable[[Any], Any]] = field(default_factory=dict)
    temporal_fields: tuple[str, ...] = ()
    load_query: Query | None = None
    prepend: bool = False
    # None means every field may be patched after creation
    mutable_fields: frozenset | None = None

    def coerce(self, fields: dict) -> dict:
        out = dict(fields)
        for name, coercer in self.numeric_fields.items():
            if name in out:
                out[name] = coercer(out[name])
        return out


INVENTORY = EntityKind(
    slug="inventory",
    collection="inventory",
    singular="item",
    plural="inventory items",
    numeric_fields={"quantity": to_number, "price": to_number},
)

ADD_ONS = EntityKind(
    slug="addons",
    collection="add_ons",
    singular="add-on",
    plural="add-ons",
    numeric_fields={"value": to_number},
)

ORDERS = EntityKind(
    slug="orders",
    collection="orders",
    singular="order",
    plural="orders",
    search_field="customer_name",
    numeric_fields={"quantity": to_quantity, "total_amount": to_number},
    temporal_fields=("order_date",),
    load_query=Query(order_by="order_date", descending=True),
    prepend=True,
    mutable_fields=frozenset({"status"}),
)

EXPENSES = EntityKind(
    slug="expenses",
    collection="expenses",
    singular="expense",
    plural="expenses",
    numeric_fields={"price": to_number},
    temporal_fields=("date",),
    load_query=Query(order_by="date", descending=True),
    prepend=True,
)

ALL_KINDS = (INVENTORY, ADD_ONS, ORDERS, EXPENSES)


def new_draft(kind: EntityKind) -> dict:
    """Blank form values for a create dialog."""
    if kind is INVENTORY:
        return {"name": "", "quantity": "", "price": ""}
    if kind is ADD_ONS:
        return {"name": "", "value": ""}
    if kind is EXPENSES:
        return {"name": "", "price": "", "date": date.today().isoformat()}
    if kind is ORDERS:
        return {
            "customer_name": "",
            "room_number": "",
            "product_id": "",
            "quantity": 1,
            "add_on_id": "",
            "payment_type": PAYMENT_TYPES[0],
            "order_type": ORDER_TYPES[0],
        }
    raise ValueError(f"Unknown entity kind: {kind.slug}")


def edit_draft(kind: EntityKind, record: dict) -> dict:
    """Form values for editing an existing record."""
    if kind is ORDERS:
        return {"status": record.get("status", ORDER_STATUSES[0])}
    draft = {k: record.get(k, "") for k in new_draft(kind)}
    for name in kind.temporal_fields:
        val = draft.get(name)
        if hasattr(val, "date"):
            draft[name] = val.date().isoformat()
    return draft
