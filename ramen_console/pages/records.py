"""Inventory, Add-ons and Expenses pages — searchable table + add/edit dialog."""
from dash import html, dcc
import dash_bootstrap_components as dbc

from ramen_console.components.cards import section, error_alerts
from ramen_console.components.tables import entity_table
from ramen_console.entities import ADD_ONS, EXPENSES, INVENTORY
from ramen_console.metrics import sum_amounts

TITLES = {
    INVENTORY.slug: "Inventory Management",
    ADD_ONS.slug: "Add-ons Management",
    EXPENSES.slug: "Expenses Management",
}

# (field, label, input type, step) shown in each dialog
FORM_FIELDS = {
    INVENTORY.slug: [("name", "Name", "text", None),
                     ("quantity", "Quantity", "number", 1),
                     ("price", "Price", "number", 0.01)],
    ADD_ONS.slug: [("name", "Name", "text", None),
                   ("value", "Value", "number", 0.01)],
    EXPENSES.slug: [("name", "Name", "text", None),
                    ("price", "Price", "number", 0.01),
                    ("date", "Date", "date", None)],
}


def field_id(slug, name):
    return f"{slug}-field-{name}"


def table_for(console, kind, search=""):
    mgr = console.manager(kind.slug)
    rows = mgr.search(search)
    total = float(sum_amounts(rows, "price")) if kind is EXPENSES else None
    return entity_table(kind, rows, console, total=total)


def _dialog(kind):
    slug = kind.slug
    inputs = []
    for name, label, input_type, step in FORM_FIELDS[slug]:
        inputs.append(dbc.Label(label, html_for=field_id(slug, name), className="mt-2"))
        inputs.append(dbc.Input(id=field_id(slug, name), type=input_type, step=step,
                                debounce=True))
    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle(id=f"{slug}-modal-title")),
        dbc.ModalBody([html.Div(id=f"{slug}-modal-error")] + inputs),
        dbc.ModalFooter([
            dbc.Button("Cancel", id=f"{slug}-cancel-btn", color="secondary", outline=True),
            dbc.Button("Add", id=f"{slug}-submit-btn", color="warning"),
        ]),
    ], id=f"{slug}-modal", is_open=False)


def layout(console, kind):
    """Build the page for one record kind (loads its collection first)."""
    slug = kind.slug
    mgr = console.manager(slug)
    ok, msg = mgr.load()
    add_label = {INVENTORY.slug: "Add Item", ADD_ONS.slug: "Add Add-on",
                 EXPENSES.slug: "Add Expense"}[slug]

    return html.Div([
        html.H4(TITLES[slug], className="page-title"),
        dcc.Store(id=f"{slug}-dialog", data={"state": "Idle"}),
        dcc.Store(id=f"{slug}-refresh", data=0),
        html.Div(error_alerts([] if ok else [msg]), id=f"{slug}-alerts"),
        section(
            TITLES[slug].replace(" Management", ""),
            [
                dbc.Input(id=f"{slug}-search", placeholder="Search", type="search",
                          className="mb-3"),
                html.Div(table_for(console, kind), id=f"{slug}-table"),
            ],
            actions=[dbc.Button(f"+ {add_label}", id=f"{slug}-add-btn", color="warning", size="sm")],
        ),
        _dialog(kind),
    ])
