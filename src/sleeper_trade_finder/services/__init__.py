"""Business logic services."""

from sleeper_trade_finder.services.league_rosters import build_team_rosters
from sleeper_trade_finder.services.needs import analyze_needs
from sleeper_trade_finder.services.packages import generate_trade_packages
from sleeper_trade_finder.services.scoring import acceptance_label, score_trade
from sleeper_trade_finder.services.trade_finder import (
    TradeFinderService,
    filter_trades,
    find_all_trades,
)
from sleeper_trade_finder.services.valuation import ValuationProvider

__all__ = [
    # Valuation
    "ValuationProvider",
    "build_team_rosters",
    # Trade Finder
    "TradeFinderService",
    "acceptance_label",
    "analyze_needs",
    "filter_trades",
    "find_all_trades",
    "generate_trade_packages",
    "score_trade",
]
