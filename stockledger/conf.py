"""
Stockledger configuration.

Usage in settings.py:
    STOCKLEDGER = {
        "LOCK_TIMEOUT_SECONDS": 10,
        "AUDIT_CHUNK_SIZE": 500,
        "DRIFT_CHECK_EVERY": 100,
        "LOW_STOCK_ALERTS": True,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class StockledgerSettings:
    """Stockledger configuration settings."""

    # Max wait for a material's lock before giving up
    LOCK_TIMEOUT_SECONDS: float = 10.0

    # Rows fetched per round trip when streaming audit history
    AUDIT_CHUNK_SIZE: int = 500

    # Recompute a material's stock from its movements every N movements (0 = never)
    DRIFT_CHECK_EVERY: int = 0

    # Raise LOW_STOCK alerts on stock-out
    LOW_STOCK_ALERTS: bool = True


def get_stockledger_settings() -> StockledgerSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "STOCKLEDGER", {})
    return StockledgerSettings(**{
        k: v for k, v in user_settings.items()
        if k in StockledgerSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_stockledger_settings(), name)


stockledger_settings = _LazySettings()
