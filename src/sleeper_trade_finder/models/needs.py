"""
Roster Needs Models

Positional needs and surplus derived from a valued roster.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from sleeper_trade_finder.models.assets import PlayerAsset, Position


class NeedSeverity(str, Enum):
    """How urgently a roster needs a position."""

    CRITICAL = "critical"
    MODERATE = "moderate"


class SurplusClass(str, Enum):
    """Why a roster can afford to trade from a position."""

    SELLABLE = "sellable"
    EXPENDABLE = "expendable"


class NeedEntry(BaseModel):
    """A positional need and the incoming value required to fill it."""

    model_config = ConfigDict(frozen=True)

    position: Position
    severity: NeedSeverity
    reason: str
    min_value: float = Field(description="Minimum incoming value that fills the need")

    def is_filled_by(self, asset) -> bool:
        """Check whether an incoming asset fills this need."""
        return (
            isinstance(asset, PlayerAsset)
            and asset.position == self.position
            and asset.value >= self.min_value
        )


class SurplusEntry(BaseModel):
    """Positional depth a roster can trade away."""

    model_config = ConfigDict(frozen=True)

    position: Position
    classification: SurplusClass
    players: list[PlayerAsset]
    reason: str | None = None


class PositionNeeds(BaseModel):
    model_config = ConfigDict(frozen=True)

    critical: list[NeedEntry] = Field(default_factory=list)
    moderate: list[NeedEntry] = Field(default_factory=list)


class PositionSurplus(BaseModel):
    model_config = ConfigDict(frozen=True)

    sellable: list[SurplusEntry] = Field(default_factory=list)
    expendable: list[SurplusEntry] = Field(default_factory=list)


class NeedsProfile(BaseModel):
    """Complete needs and surplus snapshot for one roster."""

    model_config = ConfigDict(frozen=True)

    roster_id: int
    needs: PositionNeeds
    surplus: PositionSurplus

    @property
    def critical_positions(self) -> set[Position]:
        return {n.position for n in self.needs.critical}

    @property
    def all_needs(self) -> list[NeedEntry]:
        return [*self.needs.critical, *self.needs.moderate]

    def need_positions(self) -> set[Position]:
        """Positions with any need, critical or moderate."""
        return {n.position for n in self.all_needs}
