"""
Trade Finder Models

Candidate trade packages, scored opportunities, and post-filter criteria.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from sleeper_trade_finder.models.assets import (
    Asset,
    LeagueSettings,
    PlayerAsset,
    Position,
    TeamRoster,
    total_value,
)
from sleeper_trade_finder.models.needs import NeedsProfile


class TradeShape(str, Enum):
    """Structure of a trade package."""

    ONE_FOR_ONE = "1-for-1"
    CONSOLIDATE = "2-for-1-consolidate"
    TWO_FOR_TWO = "2-for-2"


class AcceptanceLabel(str, Enum):
    """Acceptance likelihood bucket for an opportunity score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_score(cls, score: float) -> "AcceptanceLabel":
        """Map an opportunity score to its acceptance bucket."""
        if score >= 75:
            return cls.HIGH
        if score >= 50:
            return cls.MEDIUM
        return cls.LOW

    @property
    def rank(self) -> int:
        return list(AcceptanceLabel).index(self)


class TradePackage(BaseModel):
    """A candidate trade from my perspective."""

    model_config = ConfigDict(frozen=True)

    give: list[Asset] = Field(min_length=1)
    get: list[Asset] = Field(min_length=1)
    shape: TradeShape
    value_diff: float = Field(description="Value received minus value given")
    pct_diff: float = Field(description="Percent change on the value given")
    addresses_my_need: bool = False
    addresses_their_need: bool = False
    addresses_their_critical: bool = False

    @property
    def give_total(self) -> float:
        return total_value(self.give)

    @property
    def get_total(self) -> float:
        return total_value(self.get)

    @property
    def received_players(self) -> list[PlayerAsset]:
        return [a for a in self.get if isinstance(a, PlayerAsset)]

    @property
    def given_players(self) -> list[PlayerAsset]:
        return [a for a in self.give if isinstance(a, PlayerAsset)]


class Opportunity(BaseModel):
    """A scored trade package against a specific opponent."""

    model_config = ConfigDict(frozen=True)

    opponent_roster_id: int
    opponent_name: str
    package: TradePackage
    score: int = Field(ge=0, le=100)

    @computed_field
    @property
    def acceptance(self) -> AcceptanceLabel:
        return AcceptanceLabel.from_score(self.score)

    @property
    def key(self) -> tuple:
        """Structural identity used to deduplicate during selection."""
        return (
            self.opponent_roster_id,
            tuple(sorted(a.asset_id for a in self.package.give)),
            tuple(sorted(a.asset_id for a in self.package.get)),
        )


class TradeFilters(BaseModel):
    """Caller-side criteria applied after ranking."""

    positions: list[Position] = Field(
        default_factory=list, description="Keep trades receiving one of these positions"
    )
    exclude_asset_ids: list[str] = Field(
        default_factory=list, description="Drop trades giving away any of these assets"
    )
    min_value: float | None = Field(default=None, description="Minimum value received")
    max_value: float | None = Field(default=None, description="Maximum value given")
    min_acceptance: AcceptanceLabel | None = None


class FindTradesRequest(BaseModel):
    """Request body for running the trade finder on supplied rosters."""

    my_roster_id: int
    rosters: list[TeamRoster]
    league_settings: LeagueSettings = Field(default_factory=LeagueSettings)
    filters: TradeFilters | None = None


class TradeFinderReport(BaseModel):
    """Trade finder results for one team in a Sleeper league."""

    league_id: str
    roster_id: int
    team_name: str
    needs: NeedsProfile
    opportunities: list[Opportunity]
    total_found: int = Field(description="Opportunities before filtering")
