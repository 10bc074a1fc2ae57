"""Pydantic models and schemas."""

from sleeper_trade_finder.models.assets import (
    Asset,
    LeagueSettings,
    PickAsset,
    PickTier,
    PlayerAsset,
    Position,
    TeamRoster,
)
from sleeper_trade_finder.models.needs import (
    NeedEntry,
    NeedSeverity,
    NeedsProfile,
    PositionNeeds,
    PositionSurplus,
    SurplusClass,
    SurplusEntry,
)
from sleeper_trade_finder.models.sleeper import League, Player, Roster, TradedPick, User
from sleeper_trade_finder.models.trade_finder import (
    AcceptanceLabel,
    FindTradesRequest,
    Opportunity,
    TradeFilters,
    TradeFinderReport,
    TradePackage,
    TradeShape,
)

__all__ = [
    # Assets
    "Asset",
    "LeagueSettings",
    "PickAsset",
    "PickTier",
    "PlayerAsset",
    "Position",
    "TeamRoster",
    # Sleeper
    "League",
    "Player",
    "Roster",
    "TradedPick",
    "User",
    # Needs
    "NeedEntry",
    "NeedSeverity",
    "NeedsProfile",
    "PositionNeeds",
    "PositionSurplus",
    "SurplusClass",
    "SurplusEntry",
    # Trade Finder
    "AcceptanceLabel",
    "FindTradesRequest",
    "Opportunity",
    "TradeFilters",
    "TradeFinderReport",
    "TradePackage",
    "TradeShape",
]
