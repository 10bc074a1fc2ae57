"""External API clients."""

from sleeper_trade_finder.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient

__all__ = ["SleeperClient", "SleeperAPIError", "LeagueContext"]
