"""Reusable card/section builders."""
from dash import html
import dash_bootstrap_components as dbc
from ramen_console.theme import ORANGE, TOAST_STYLE


def section(title, children, color=ORANGE, actions=None):
    """Titled section card with colored top border and optional header buttons."""
    header = [html.Span(title)]
    if actions:
        header.append(html.Div(actions, style={"marginLeft": "auto", "display": "flex", "gap": "8px"}))
    return dbc.Card([
        dbc.CardHeader(header, style={"color": color, "fontWeight": "bold", "fontSize": "16px",
                                      "borderBottom": f"2px solid {color}",
                                      "backgroundColor": "transparent", "padding": "12px 16px",
                                      "display": "flex", "alignItems": "center"}),
        dbc.CardBody(children, style={"padding": "16px"}),
    ], className="mb-3")


def error_alerts(messages):
    """One dismissable danger alert per message (nothing when the list is empty)."""
    return [dbc.Alert(m, color="danger", dismissable=True, className="mb-2") for m in messages if m]


def toast(message, header, icon="success"):
    return dbc.Toast(message, header=header, icon=icon, duration=3000, style=TOAST_STYLE)
