"""Page routing, login and logout callbacks."""
from dash import html, Input, Output, State, no_update
import dash_bootstrap_components as dbc

from ramen_console.components.cards import toast
from ramen_console.entities import ADD_ONS, EXPENSES, INVENTORY
from ramen_console.theme import RED


def render_page(console, pathname):
    """Page body for a path; every page but login requires a session."""
    if pathname == "/login" or not console.session.is_authenticated():
        from ramen_console.pages.login import layout
        return layout()
    if pathname in ("/", "/dashboard", None):
        from ramen_console.pages.dashboard import layout
        return layout(console)
    if pathname == "/orders":
        from ramen_console.pages.orders import layout
        return layout(console)
    kinds = {"/inventory": INVENTORY, "/addons": ADD_ONS, "/expenses": EXPENSES}
    if pathname in kinds:
        from ramen_console.pages.records import layout
        return layout(console, kinds[pathname])
    return html.Div([
        html.H3("404: Page Not Found", style={"color": RED}),
        html.P(f"No page at '{pathname}'"),
    ], style={"padding": "40px"})


def register_callbacks(app, console):
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def route_page(pathname):
        return render_page(console, pathname)

    @app.callback(
        Output("url", "pathname", allow_duplicate=True),
        Output("login-error", "children"),
        Input("login-btn", "n_clicks"),
        State("login-email", "value"),
        State("login-password", "value"),
        prevent_initial_call=True,
    )
    def login(n_clicks, email, password):
        if not n_clicks:
            return no_update, no_update
        ok, msg = console.session.login(email or "", password or "")
        if not ok:
            return no_update, dbc.Alert(msg, color="danger", className="mb-2")
        return "/dashboard", None

    @app.callback(
        Output("url", "pathname", allow_duplicate=True),
        Output("toast-container", "children", allow_duplicate=True),
        Input("logout-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def logout(n_clicks):
        if not n_clicks:
            return no_update, no_update
        ok, msg = console.session.logout()
        if not ok:
            return no_update, toast(f"Logout failed: {msg}", "Logout", icon="danger")
        return "/login", None
