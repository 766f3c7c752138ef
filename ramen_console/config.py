"""
config.py — Runtime settings and logging setup.

Environment variables override all defaults. A `.env` file at the project
root is loaded first so local development needs no exported variables.
"""

import logging
import os
import secrets
from decimal import Decimal

from dotenv import load_dotenv

# BASE_DIR points to the project root (parent of ramen_console/)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

load_dotenv(os.path.join(BASE_DIR, ".env"), override=False)


class Settings:
    # ── Supabase ────────────────────────────────────────────────────────────
    SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.environ.get("SUPABASE_KEY", "")

    # Local-file fallback used when Supabase is not configured
    LOCAL_STORE_PATH: str = os.environ.get(
        "LOCAL_STORE_PATH", os.path.join(BASE_DIR, "data", "console_store.json")
    )

    # ── Server ──────────────────────────────────────────────────────────────
    PORT: int = int(os.environ.get("PORT", "8050"))
    DEBUG: bool = os.environ.get("DEBUG", "").lower() in ("1", "true", "yes")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    # Signs the per-browser login cookie; a random key logs everyone out on restart
    SECRET_KEY: str = os.environ.get("SECRET_KEY") or secrets.token_hex(32)

    # ── Business rules ──────────────────────────────────────────────────────
    CURRENCY: str = os.environ.get("CURRENCY", "RM")
    # Fixed amount taken off total expenses before profit is computed
    PROFIT_EXPENSE_ADJUSTMENT: Decimal = Decimal(os.environ.get("PROFIT_EXPENSE_ADJUSTMENT", "2.40"))
    # Items with quantity strictly below this count as low stock
    LOW_STOCK_THRESHOLD: int = int(os.environ.get("LOW_STOCK_THRESHOLD", "10"))
    RECENT_ORDERS_LIMIT: int = int(os.environ.get("RECENT_ORDERS_LIMIT", "5"))

    @property
    def supabase_configured(self) -> bool:
        url, key = self.SUPABASE_URL, self.SUPABASE_KEY
        return bool(url and key and "YOUR_PROJECT" not in url)


settings = Settings()


def configure_logging(level=None):
    """Set up root logging once; later calls only adjust the level."""
    level = level or settings.LOG_LEVEL
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        )
    else:
        root.setLevel(level)
