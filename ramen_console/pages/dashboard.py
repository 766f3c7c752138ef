"""Dashboard page — four headline KPIs + recent orders."""
from dash import html
import dash_bootstrap_components as dbc

from ramen_console.theme import KPI_COLORS
from ramen_console.components.kpi import kpi_pill
from ramen_console.components.cards import section, error_alerts
from ramen_console.components.tables import recent_orders_table


def layout(console):
    """Build the Dashboard page from fresh loads."""
    m, recent, errors = console.dashboard_snapshot()
    return html.Div([
        html.H4("Dashboard", className="page-title"),
        html.Div(error_alerts(errors)),

        dbc.Row([
            dbc.Col(kpi_pill("\U0001f4b0", "Total Revenue", console.money(m.total_revenue),
                             KPI_COLORS["revenue"]), md=3),
            dbc.Col(kpi_pill("\U0001f6d2", "Total Orders", str(m.total_orders),
                             KPI_COLORS["orders"]), md=3),
            dbc.Col(kpi_pill("\U0001f4e6", "Low Stock Items", str(m.low_stock_items),
                             KPI_COLORS["low_stock"],
                             f"quantity below {console.settings.LOW_STOCK_THRESHOLD}"), md=3),
            dbc.Col(kpi_pill("\U0001f4c8", "Total Profit", console.money(m.total_profit),
                             KPI_COLORS["profit"]), md=3),
        ], className="g-3 mb-4"),

        section("Recent Orders", recent_orders_table(recent, console)),
    ])
