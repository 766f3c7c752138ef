"""Orders page: search and payment filter, live totals, create and status dialogs."""
from dash import html, dcc
import dash_bootstrap_components as dbc

from ramen_console.components.cards import section, error_alerts
from ramen_console.components.tables import orders_table
from ramen_console.entities import ORDER_STATUSES, ORDER_TYPES, PAYMENT_TYPES

CREATE_FIELDS = ["customer_name", "room_number", "product_id", "quantity",
                 "add_on_id", "payment_type", "order_type"]


def field_id(name):
    return f"orders-field-{name}"


def table_for(console, search="", payment_type="all"):
    rows, total = console.order_table(search, payment_type)
    return orders_table(rows, total, console)


def _options(values):
    return [{"label": v, "value": v} for v in values]


def _dialog(console):
    products = [{"label": i.get("name", ""), "value": i["id"]} for i in console.inventory.items]
    add_ons = [{"label": "None", "value": ""}] + [
        {"label": f"{a.get('name', '')} (+{console.money(a.get('value'))})", "value": a["id"]}
        for a in console.add_ons.items
    ]
    create_fields = html.Div([
        dbc.Label("Customer Name", className="mt-2"),
        dbc.Input(id=field_id("customer_name"), type="text"),
        dbc.Label("Room Number", className="mt-2"),
        dbc.Input(id=field_id("room_number"), type="text"),
        dbc.Label("Product", className="mt-2"),
        dbc.Select(id=field_id("product_id"), options=products),
        dbc.Label("Quantity", className="mt-2"),
        dbc.Input(id=field_id("quantity"), type="number", min=1, step=1),
        dbc.Label("Add-on", className="mt-2"),
        dbc.Select(id=field_id("add_on_id"), options=add_ons),
        dbc.Label("Payment Type", className="mt-2"),
        dbc.Select(id=field_id("payment_type"), options=_options(PAYMENT_TYPES)),
        dbc.Label("Order Type", className="mt-2"),
        dbc.Select(id=field_id("order_type"), options=_options(ORDER_TYPES)),
    ], id="orders-create-fields")
    edit_fields = html.Div([
        dbc.Label("Status", className="mt-2"),
        dbc.Select(id=field_id("status"), options=_options(ORDER_STATUSES)),
    ], id="orders-edit-fields")

    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle(id="orders-modal-title")),
        dbc.ModalBody([html.Div(id="orders-modal-error"), create_fields, edit_fields]),
        dbc.ModalFooter([
            dbc.Button("Cancel", id="orders-cancel-btn", color="secondary", outline=True),
            dbc.Button("Create", id="orders-submit-btn", color="warning"),
        ]),
    ], id="orders-modal", is_open=False)


def layout(console):
    """Build the Orders page (lookups load first, then orders)."""
    errors = console.load_orders_view()
    return html.Div([
        html.H4("Orders Management", className="page-title"),
        dcc.Store(id="orders-dialog", data={"state": "Idle"}),
        dcc.Store(id="orders-refresh", data=0),
        html.Div(error_alerts(errors), id="orders-alerts"),
        section(
            "Orders",
            [
                dbc.Row([
                    dbc.Col(dbc.Input(id="orders-search", placeholder="Search Orders",
                                      type="search"), md=8),
                    dbc.Col(dbc.Select(id="orders-payment-filter", value="all",
                                       options=[{"label": "All", "value": "all"}]
                                       + _options(PAYMENT_TYPES)), md=4),
                ], className="g-2 mb-3"),
                html.Div(table_for(console), id="orders-table"),
            ],
            actions=[dbc.Button("+ Add Order", id="orders-add-btn", color="warning", size="sm")],
        ),
        _dialog(console),
    ])
