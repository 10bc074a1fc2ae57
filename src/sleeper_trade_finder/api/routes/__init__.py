"""API route handlers."""

from sleeper_trade_finder.api.routes import leagues, trade_finder, viz

__all__ = [
    "leagues",
    "trade_finder",
    "viz",
]
