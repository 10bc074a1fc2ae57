"""
Sleeper API records.

Only the fields the trade finder reads are declared; everything else in a
Sleeper payload is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from sleeper_trade_finder.models.assets import Position


class SleeperRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")


class League(SleeperRecord):
    """A Sleeper league."""

    league_id: str
    name: str
    status: str = Field(description="pre_draft, drafting, in_season or complete")
    sport: str = "nfl"
    season: str
    season_type: str = "regular"
    total_rosters: int
    roster_positions: list[str] = Field(default_factory=list)
    scoring_settings: dict[str, float] = Field(default_factory=dict)

    @property
    def is_superflex(self) -> bool:
        return "SUPER_FLEX" in self.roster_positions

    @property
    def is_te_premium(self) -> bool:
        """True when TE receptions earn bonus points."""
        return self.scoring_settings.get("bonus_rec_te", 0) > 0


class User(SleeperRecord):
    """A league manager."""

    user_id: str
    username: str | None = None
    display_name: str
    metadata: dict | None = Field(default_factory=dict)

    @property
    def team_name(self) -> str:
        return (self.metadata or {}).get("team_name") or self.display_name


class Roster(SleeperRecord):
    """A team in a league: its owner, players, and record."""

    roster_id: int
    owner_id: str | None = None
    league_id: str
    players: list[str] | None = Field(default_factory=list)
    settings: dict = Field(default_factory=dict)

    @property
    def player_ids(self) -> list[str]:
        return self.players or []

    @property
    def wins(self) -> int:
        return self.settings.get("wins", 0)

    @property
    def losses(self) -> int:
        return self.settings.get("losses", 0)


class TradedPick(SleeperRecord):
    """A future rookie pick that changed hands."""

    season: str
    round: int
    roster_id: int = Field(description="Roster the pick originally belonged to")
    previous_owner_id: int | None = None
    owner_id: int = Field(description="Roster that currently owns the pick")


class Player(SleeperRecord):
    """An NFL player from the Sleeper player database."""

    player_id: str
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    position: str | None = None
    team: str | None = None
    age: int | None = None
    injury_status: str | None = None
    search_rank: int | None = Field(
        default=None, description="Sleeper search rank, lower is more relevant"
    )

    @property
    def display_name(self) -> str:
        if self.full_name:
            return self.full_name
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.player_id

    @property
    def fantasy_position(self) -> Position | None:
        """The player's trade finder position, or None for K/DEF/etc."""
        try:
            return Position(self.position)
        except ValueError:
            return None
