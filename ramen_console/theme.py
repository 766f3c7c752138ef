"""
Theme constants: palette, status badge colors, toast placement.
Layout sizes live in assets/custom.css.
"""

# ── Color Palette ────────────────────────────────────────────────────────────
ORANGE = "#ff9800"
GREEN = "#2e7d32"
RED = "#d32f2f"
BLUE = "#1976d2"
PURPLE = "#7b1fa2"
GRAY = "#757575"

# ── Order status → dbc.Badge color ───────────────────────────────────────────
STATUS_COLORS = {
    "Pending": "warning",
    "Processing": "info",
    "Completed": "success",
    "Cancelled": "danger",
}

# ── KPI card colors (dashboard) ──────────────────────────────────────────────
KPI_COLORS = {
    "revenue": GREEN,
    "orders": BLUE,
    "low_stock": RED,
    "profit": PURPLE,
}

TOAST_STYLE = {"position": "fixed", "top": 20, "right": 20, "zIndex": 9999}
