"""Orders page callbacks: create and status dialogs, search and payment filters."""
from dash import Input, Output, State, callback_context, no_update, ALL

from ramen_console import dialogs
from ramen_console.components.cards import error_alerts
from ramen_console.entities import ORDERS, edit_draft, new_draft
from ramen_console.pages.orders import CREATE_FIELDS, field_id, table_for

_SHOWN = {"display": "block"}
_HIDDEN = {"display": "none"}


def dialog_step(console, trigger, state, values):
    """Like records_cb.dialog_step, but orders are created priced and only
    their status can be edited. Returns (state, table changed, errors)."""
    if trigger == "orders-add-btn":
        return dialogs.open_new(new_draft(ORDERS)), False, []
    if trigger == "orders-cancel-btn":
        return dialogs.close(state), False, []

    if isinstance(trigger, dict) and trigger.get("type") == "orders-edit":
        order = console.orders.get(trigger["index"])
        if order is None:
            return state, False, []
        return dialogs.open_edit(order["id"], edit_draft(ORDERS, order)), False, []

    if trigger == "orders-submit-btn":
        if not dialogs.is_open(state):
            return state, False, []

        def save(draft, editing_id):
            if editing_id:
                return console.set_order_status(editing_id, draft.get("status"))
            return console.place_order(draft)

        if state.editing_id:
            changes = {"status": values.get("status")}
        else:
            changes = {f: values.get(f) for f in CREATE_FIELDS}
        state = dialogs.submit(dialogs.revise(state, **changes), save)
        return state, isinstance(state, dialogs.Idle), []

    return state, False, []


def register_callbacks(app, console):
    fields = CREATE_FIELDS + ["status"]

    @app.callback(
        Output("orders-dialog", "data"),
        Output("orders-refresh", "data"),
        Output("orders-alerts", "children"),
        Input("orders-add-btn", "n_clicks"),
        Input({"type": "orders-edit", "index": ALL}, "n_clicks"),
        Input("orders-cancel-btn", "n_clicks"),
        Input("orders-submit-btn", "n_clicks"),
        [State(field_id(f), "value") for f in fields],
        State("orders-dialog", "data"),
        State("orders-refresh", "data"),
        prevent_initial_call=True,
    )
    def on_event(_add, _edits, _cancel, _submit, *rest):
        if not console.session.is_authenticated():
            return no_update, no_update, no_update
        if not callback_context.triggered or not callback_context.triggered[0]["value"]:
            return no_update, no_update, no_update
        *values, data, refresh = rest
        state = dialogs.restore(data)
        new_state, changed, errors = dialog_step(
            console, callback_context.triggered_id, state, dict(zip(fields, values)))
        return (
            dialogs.dump(new_state),
            (refresh or 0) + 1 if changed else no_update,
            error_alerts(errors),
        )

    @app.callback(
        Output("orders-modal", "is_open"),
        Output("orders-modal-title", "children"),
        Output("orders-submit-btn", "children"),
        Output("orders-modal-error", "children"),
        Output("orders-create-fields", "style"),
        Output("orders-edit-fields", "style"),
        [Output(field_id(f), "value") for f in fields],
        Input("orders-dialog", "data"),
    )
    def render_dialog(data):
        state = dialogs.restore(data)
        if not dialogs.is_open(state):
            return (False, no_update, no_update, None, no_update, no_update,
                    *[no_update] * len(fields))
        editing = state.editing_id is not None
        message = state.message if isinstance(state, dialogs.ShowingError) else ""
        return (
            True,
            "Edit Order Status" if editing else "Create New Order",
            "Update" if editing else "Create",
            error_alerts([message]),
            _HIDDEN if editing else _SHOWN,
            _SHOWN if editing else _HIDDEN,
            *[state.draft.get(f, no_update) for f in fields],
        )

    @app.callback(
        Output("orders-table", "children"),
        Input("orders-search", "value"),
        Input("orders-payment-filter", "value"),
        Input("orders-refresh", "data"),
    )
    def render_table(search, payment_type, _refresh):
        if not console.session.is_authenticated():
            return no_update
        return table_for(console, search or "", payment_type or "all")
