"""Login page."""
from dash import html
import dash_bootstrap_components as dbc

from ramen_console.theme import ORANGE


def layout():
    return dbc.Card(dbc.CardBody([
        html.H4("Sign in", style={"color": ORANGE, "fontWeight": "bold"}),
        html.Div(id="login-error"),
        dbc.Label("Email", html_for="login-email", className="mt-2"),
        dbc.Input(id="login-email", type="email"),
        dbc.Label("Password", html_for="login-password", className="mt-2"),
        dbc.Input(id="login-password", type="password"),
        dbc.Button("Login", id="login-btn", color="warning", className="mt-3 w-100"),
    ]), style={"maxWidth": "380px", "margin": "60px auto"}, className="shadow-sm")
