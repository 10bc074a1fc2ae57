"""
Tradable asset and roster models.

Every asset carries a non-negative ``value`` supplied by the valuation
provider. The trade finder only reads it.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(str, Enum):
    """Fantasy positions the trade finder considers."""

    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"


class PickTier(str, Enum):
    """Projected slot of a future draft pick within its round."""

    EARLY = "early"
    MID = "mid"
    LATE = "late"


class _ValuedAsset(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float = Field(
        default=0.0, allow_inf_nan=False, description="Trade value, never negative"
    )

    @field_validator("value")
    @classmethod
    def clamp_value(cls, value: float) -> float:
        return max(value, 0.0)


class PlayerAsset(_ValuedAsset):
    """A rostered player with a trade value."""

    asset_type: Literal["player"] = "player"
    player_id: str
    name: str
    position: Position
    age: int | None = None
    team: str | None = None
    injury_status: str | None = None

    @property
    def asset_id(self) -> str:
        return self.player_id

    @property
    def label(self) -> str:
        return f"{self.name} ({self.position.value})"


class PickAsset(_ValuedAsset):
    """A future rookie draft pick with a trade value."""

    asset_type: Literal["pick"] = "pick"
    year: int
    round: int = Field(ge=1)
    original_owner_id: int
    is_own_pick: bool = True

    @property
    def asset_id(self) -> str:
        return f"{self.year}-{self.round}-{self.original_owner_id}"

    @property
    def label(self) -> str:
        suffix = "" if self.is_own_pick else f" (via Team {self.original_owner_id})"
        return f"{self.year} Round {self.round}{suffix}"


Asset = Annotated[PlayerAsset | PickAsset, Field(discriminator="asset_type")]


class TeamRoster(BaseModel):
    """
    A valued roster snapshot.

    ``players`` and ``picks`` are required so that a roster built from
    incomplete data fails at construction instead of during scoring.
    """

    model_config = ConfigDict(frozen=True)

    roster_id: int
    name: str
    wins: int = 0
    losses: int = 0
    players: list[PlayerAsset]
    picks: list[PickAsset]


class LeagueSettings(BaseModel):
    """League settings the valuation provider cares about."""

    model_config = ConfigDict(frozen=True)

    total_rosters: int = Field(default=12, ge=2)
    superflex: bool = False
    te_premium: bool = False


def total_value(assets: list[PlayerAsset | PickAsset]) -> float:
    """Sum the values of a list of assets."""
    return sum(asset.value for asset in assets)
