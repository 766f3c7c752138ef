"""Dashboard KPI cards."""
from dash import html
import dash_bootstrap_components as dbc


def icon_badge(text, color):
    """Round icon in the card's accent color."""
    return html.Div(text, className="kpi-icon", style={
        "background": f"linear-gradient(135deg, {color}, {color}88)",
        "boxShadow": f"0 3px 10px {color}44",
    })


def kpi_pill(icon, label, value, color, subtitle=""):
    text = [html.Div(label, className="kpi-label"), html.Div(value, className="kpi-value")]
    if subtitle:
        text.append(html.Div(subtitle, className="kpi-subtitle"))
    return dbc.Card(
        dbc.CardBody([icon_badge(icon, color), html.Div(text, className="kpi-text")],
                     className="kpi-body"),
        style={"borderLeft": f"4px solid {color}"},
        className="kpi-pill",
    )
