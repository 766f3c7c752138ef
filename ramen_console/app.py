"""
Ramen Console — food-service back office
Run:  python -m ramen_console.app
Open: http://127.0.0.1:8050
"""

import logging
import os

import dash
from dash import html, dcc
import dash_bootstrap_components as dbc
import flask

from ramen_console.config import configure_logging, settings
from ramen_console.data_state import Console

logger = logging.getLogger(__name__)

# ── Sidebar navigation ──────────────────────────────────────────────────────
NAV_ITEMS = [
    {"label": "Dashboard", "icon": "\U0001f4ca", "value": "/dashboard"},
    {"label": "Inventory", "icon": "\U0001f4e6", "value": "/inventory"},
    {"label": "Orders",    "icon": "\U0001f6d2", "value": "/orders"},
    {"label": "Add-ons",   "icon": "➕",     "value": "/addons"},
    {"label": "Expenses",  "icon": "\U0001f4b8", "value": "/expenses"},
]


def _build_sidebar():
    nav_links = [
        dbc.NavLink(
            [html.Span(item["icon"], className="nav-icon"), item["label"]],
            href=item["value"],
            active="exact",
        )
        for item in NAV_ITEMS
    ]
    return html.Div([
        # Brand
        html.Div([
            html.H4("RAMEN CONSOLE"),
            html.Small("Back Office"),
        ], className="sidebar-brand"),

        dbc.Nav(nav_links, vertical=True, pills=True),
        html.Hr(className="sidebar-divider"),
        dbc.Button([html.Span("\U0001f6aa", className="nav-icon"), "Logout"],
                   id="logout-btn", color="link", className="sidebar-logout"),
    ], className="sidebar")


# ── App layout ───────────────────────────────────────────────────────────────
def serve_layout():
    return html.Div([
        dcc.Location(id="url", refresh=False),
        _build_sidebar(),
        html.Div([
            # Page content (rendered by routing callback)
            html.Div(id="page-content"),
            html.Div(id="toast-container"),
        ], className="main-content"),
    ])


EXTENSION = "ramen_console"


def _register_routes(server, console):
    @server.before_request
    def require_login():
        """API routes answer 401 to a browser that is not signed in."""
        if flask.request.path.startswith("/api/") and not console.session.is_authenticated():
            return flask.jsonify({"status": "error", "message": "Not signed in"}), 401

    @server.route("/api/reload")
    def api_reload():
        """Refresh every cache from the store."""
        errors = console.reload_all()
        body = {
            "status": "error" if errors else "ok",
            "inventory": len(console.inventory),
            "add_ons": len(console.add_ons),
            "orders": len(console.orders),
            "expenses": len(console.expenses),
            "errors": errors,
        }
        return flask.jsonify(body), (500 if errors else 200)

    @server.route("/api/diagnostics")
    def api_diagnostics():
        """Dashboard figures as JSON for remote debugging."""
        metrics, recent, errors = console.dashboard_snapshot()
        return flask.jsonify({
            "total_orders": metrics.total_orders,
            "total_revenue": metrics.total_revenue,
            "total_expenses": metrics.total_expenses,
            "total_profit": metrics.total_profit,
            "low_stock_items": metrics.low_stock_items,
            "recent_orders": [o["id"] for o in recent],
            "errors": errors,
        })


def create_app(console=None):
    """Build the Dash app around a Console (one from settings by default)."""
    configure_logging()
    if console is None:
        console = Console.from_settings(settings)

    app = dash.Dash(
        __name__,
        suppress_callback_exceptions=True,
        external_stylesheets=[
            dbc.themes.BOOTSTRAP,
            "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap",
        ],
        assets_folder=os.path.join(os.path.dirname(__file__), "assets"),
        title="Ramen Console",
    )
    app.layout = serve_layout

    # ── Register callbacks ───────────────────────────────────────────────────
    from ramen_console.callbacks import navigation_cb, orders_cb, records_cb
    navigation_cb.register_callbacks(app, console)
    records_cb.register_callbacks(app, console)
    orders_cb.register_callbacks(app, console)

    app.server.secret_key = console.settings.SECRET_KEY
    app.server.extensions[EXTENSION] = console
    _register_routes(app.server, console)
    logger.info("App ready (store: %s)", type(console.store).__name__)
    return app


# ── Run ──────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app = create_app()
    print(f"\n  Ramen Console")
    print(f"  http://127.0.0.1:{settings.PORT}\n")
    app.run(debug=settings.DEBUG, host="0.0.0.0", port=settings.PORT)
