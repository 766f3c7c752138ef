"""Reusable table builders."""
from dash import html
import dash_bootstrap_components as dbc

from ramen_console.data_state import fmt_date, fmt_time
from ramen_console.entities import ADD_ONS, EXPENSES, INVENTORY
from ramen_console.theme import GRAY, STATUS_COLORS

RIGHT = {"textAlign": "right"}

# (header, field, formatter key, right-aligned) per entity page
COLUMNS = {
    INVENTORY.slug: [("Name", "name", None, False),
                     ("Quantity", "quantity", None, True),
                     ("Price", "price", "money", True)],
    ADD_ONS.slug: [("Name", "name", None, False),
                   ("Value", "value", "money", True)],
    EXPENSES.slug: [("Name", "name", None, False),
                    ("Price", "price", "money", True),
                    ("Date", "date", "date", False)],
}


def _cell(record, field, fmt, console):
    val = record.get(field)
    if fmt == "money":
        return console.money(val)
    if fmt == "date":
        return fmt_date(val)
    return "" if val is None else str(val)


def row_actions(slug, key, deletable=True):
    """Edit (and delete) icon buttons with pattern-matching ids."""
    buttons = [dbc.Button("✏️", id={"type": f"{slug}-edit", "index": key},
                          color="link", size="sm", title="Edit")]
    if deletable:
        buttons.append(dbc.Button("\U0001f5d1️", id={"type": f"{slug}-delete", "index": key},
                                  color="link", size="sm", title="Delete"))
    return html.Td(buttons, style={"textAlign": "center", "whiteSpace": "nowrap"})


def entity_table(kind, rows, console, total=None):
    """Inventory / add-on / expense table; `total` adds a closing sum row."""
    cols = COLUMNS[kind.slug]
    head = html.Thead(html.Tr(
        [html.Th(h, style=RIGHT if right else None) for h, _, _, right in cols]
        + [html.Th("Actions", style={"textAlign": "center"})]
    ))
    body = []
    for r in rows:
        body.append(html.Tr(
            [html.Td(_cell(r, f, fmt, console), style=RIGHT if right else None)
             for _, f, fmt, right in cols]
            + [row_actions(kind.slug, r["id"])]
        ))
    if not rows:
        body.append(html.Tr(html.Td("Nothing here yet.", colSpan=len(cols) + 1,
                                    style={"color": GRAY, "textAlign": "center"})))
    if total is not None:
        body.append(html.Tr([
            html.Td(html.B("Total")),
            html.Td(html.B(console.money(total)), style=RIGHT),
            html.Td(colSpan=len(cols) - 1),
        ], className="total-row"))
    return dbc.Table([head, html.Tbody(body)], striped=True, hover=True, size="sm", className="mb-0")


def status_badge(status):
    return dbc.Badge(status or "", color=STATUS_COLORS.get(status, "secondary"), pill=True)


def orders_table(rows, total, console):
    """Orders page table; totals are the live re-derived ones."""
    head = html.Thead(html.Tr([
        html.Th("Customer"), html.Th("Product"), html.Th("Quantity", style=RIGHT),
        html.Th("Add-on"), html.Th("Payment"), html.Th("Type"),
        html.Th("Total Amount", style=RIGHT), html.Th("Status"), html.Th("Date"),
        html.Th("Actions", style={"textAlign": "center"}),
    ]))
    body = []
    for r in rows:
        customer = [html.Div(r.get("customer_name", ""))]
        if r.get("room_number"):
            customer.append(html.Small(f"Room: {r['room_number']}", style={"color": GRAY}))
        body.append(html.Tr([
            html.Td(customer),
            html.Td(r["product_name"]),
            html.Td(str(r.get("quantity", "")), style=RIGHT),
            html.Td(r["add_on_name"]),
            html.Td(r.get("payment_type", "")),
            html.Td(r.get("order_type", "")),
            html.Td(console.money(r["total_amount"]), style=RIGHT),
            html.Td(status_badge(r.get("status"))),
            html.Td([html.Div(fmt_date(r.get("order_date"))),
                     html.Small(fmt_time(r.get("order_date")), style={"color": GRAY})]),
            row_actions("orders", r["id"], deletable=False),
        ]))
    body.append(html.Tr([
        html.Td(html.B("Total Amount (All Orders)"), colSpan=6),
        html.Td(html.B(console.money(total)), style=RIGHT),
        html.Td(colSpan=3),
    ], className="total-row"))
    return dbc.Table([head, html.Tbody(body)], striped=True, hover=True, size="sm", className="mb-0")


def recent_orders_table(rows, console):
    """Dashboard's short list; shows the stored totals."""
    head = html.Thead(html.Tr([
        html.Th("Customer"), html.Th("Quantity", style=RIGHT),
        html.Th("Total Amount", style=RIGHT), html.Th("Status"), html.Th("Date"),
    ]))
    body = [html.Tr([
        html.Td(r.get("customer_name", "")),
        html.Td(str(r.get("quantity", "")), style=RIGHT),
        html.Td(console.money(r.get("total_amount")), style=RIGHT),
        html.Td(status_badge(r.get("status"))),
        html.Td(fmt_date(r.get("order_date"))),
    ]) for r in rows]
    if not rows:
        body.append(html.Tr(html.Td("No orders yet.", colSpan=5,
                                    style={"color": GRAY, "textAlign": "center"})))
    return dbc.Table([head, html.Tbody(body)], hover=True, size="sm", className="mb-0")
