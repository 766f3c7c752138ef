"""Inventory, Add-ons and Expenses callbacks: dialog, delete, table refresh."""
from dash import Input, Output, State, callback_context, no_update, ALL

from ramen_console import dialogs
from ramen_console.components.cards import error_alerts
from ramen_console.entities import ADD_ONS, EXPENSES, INVENTORY, edit_draft, new_draft
from ramen_console.pages.records import FORM_FIELDS, field_id, table_for


def dialog_step(console, kind, trigger, state, values):
    """
    Apply one UI event to a page's dialog.

    Returns (new state, table changed, error messages). `trigger` is the
    id of the component that fired; `values` the current form inputs.
    """
    slug = kind.slug
    mgr = console.manager(slug)

    if trigger == f"{slug}-add-btn":
        return dialogs.open_new(new_draft(kind)), False, []
    if trigger == f"{slug}-cancel-btn":
        return dialogs.close(state), False, []

    if isinstance(trigger, dict) and trigger.get("type") == f"{slug}-edit":
        record = mgr.get(trigger["index"])
        if record is None:
            return state, False, []
        return dialogs.open_edit(record["id"], edit_draft(kind, record)), False, []

    if isinstance(trigger, dict) and trigger.get("type") == f"{slug}-delete":
        ok, msg = mgr.remove(trigger["index"])
        return state, ok, [] if ok else [msg]

    if trigger == f"{slug}-submit-btn":
        if not dialogs.is_open(state):
            return state, False, []

        def save(draft, editing_id):
            if editing_id:
                return mgr.update(editing_id, draft)
            return mgr.create(draft)

        state = dialogs.submit(dialogs.revise(state, **values), save)
        return state, isinstance(state, dialogs.Idle), []

    return state, False, []


def _register_kind(app, console, kind):
    slug = kind.slug
    fields = [f[0] for f in FORM_FIELDS[slug]]

    @app.callback(
        Output(f"{slug}-dialog", "data"),
        Output(f"{slug}-refresh", "data"),
        Output(f"{slug}-alerts", "children"),
        Input(f"{slug}-add-btn", "n_clicks"),
        Input({"type": f"{slug}-edit", "index": ALL}, "n_clicks"),
        Input({"type": f"{slug}-delete", "index": ALL}, "n_clicks"),
        Input(f"{slug}-cancel-btn", "n_clicks"),
        Input(f"{slug}-submit-btn", "n_clicks"),
        [State(field_id(slug, f), "value") for f in fields],
        State(f"{slug}-dialog", "data"),
        State(f"{slug}-refresh", "data"),
        prevent_initial_call=True,
    )
    def on_event(_add, _edits, _deletes, _cancel, _submit, *rest):
        if not console.session.is_authenticated():
            return no_update, no_update, no_update
        if not callback_context.triggered or not callback_context.triggered[0]["value"]:
            return no_update, no_update, no_update
        *values, data, refresh = rest
        state = dialogs.restore(data)
        new_state, changed, errors = dialog_step(
            console, kind, callback_context.triggered_id, state, dict(zip(fields, values)))
        return (
            dialogs.dump(new_state),
            (refresh or 0) + 1 if changed else no_update,
            error_alerts(errors),
        )

    @app.callback(
        Output(f"{slug}-modal", "is_open"),
        Output(f"{slug}-modal-title", "children"),
        Output(f"{slug}-submit-btn", "children"),
        Output(f"{slug}-modal-error", "children"),
        [Output(field_id(slug, f), "value") for f in fields],
        Input(f"{slug}-dialog", "data"),
    )
    def render_dialog(data):
        state = dialogs.restore(data)
        if not dialogs.is_open(state):
            return (False, no_update, no_update, None, *[no_update] * len(fields))
        noun = kind.singular.title()
        editing = state.editing_id is not None
        title = f"Edit {noun}" if editing else f"Add New {noun}"
        message = state.message if isinstance(state, dialogs.ShowingError) else ""
        return (True, title, "Update" if editing else "Add", error_alerts([message]),
                *[state.draft.get(f) for f in fields])

    @app.callback(
        Output(f"{slug}-table", "children"),
        Input(f"{slug}-search", "value"),
        Input(f"{slug}-refresh", "data"),
    )
    def render_table(search, _refresh):
        if not console.session.is_authenticated():
            return no_update
        return table_for(console, kind, search or "")


def register_callbacks(app, console):
    for kind in (INVENTORY, ADD_ONS, EXPENSES):
        _register_kind(app, console, kind)
