"""Sleeper Trade Finder - dynasty trade discovery for Sleeper leagues."""

__version__ = "0.1.0"

from sleeper_trade_finder.exceptions import InvalidRosterError, TradeFinderError
from sleeper_trade_finder.services.needs import analyze_needs
from sleeper_trade_finder.services.scoring import acceptance_label, score_trade
from sleeper_trade_finder.services.trade_finder import filter_trades, find_all_trades

__all__ = [
    "__version__",
    "InvalidRosterError",
    "TradeFinderError",
    "acceptance_label",
    "analyze_needs",
    "filter_trades",
    "find_all_trades",
    "score_trade",
]
