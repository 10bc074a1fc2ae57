"""
Roster Needs Analysis

Classifies a valued roster's positional needs (critical/moderate) and
surplus (sellable/expendable) from fixed value and age thresholds.
"""

from sleeper_trade_finder.exceptions import InvalidRosterError
from sleeper_trade_finder.models.assets import PlayerAsset, Position, TeamRoster
from sleeper_trade_finder.models.needs import (
    NeedEntry,
    NeedSeverity,
    NeedsProfile,
    PositionNeeds,
    PositionSurplus,
    SurplusClass,
    SurplusEntry,
)

# Startable value floor per position
STARTABLE_VALUE = {
    Position.QB: 3000,
    Position.RB: 4000,
    Position.WR: 4000,
    Position.TE: 3000,
}

# Players strictly younger than this count as young
YOUNG_AGE = {
    Position.QB: 28,
    Position.RB: 27,
    Position.WR: 27,
}

OLD_RB_AGE = 28
SELL_HIGH_RB_VALUE = 3000


def _is_young(player: PlayerAsset, position: Position) -> bool:
    return player.age is not None and player.age < YOUNG_AGE[position]


def _is_old_rb(player: PlayerAsset) -> bool:
    return player.age is not None and player.age >= OLD_RB_AGE


def group_by_position(roster: TeamRoster) -> dict[Position, list[PlayerAsset]]:
    """Group a roster's players by position, each sorted by value descending."""
    by_position: dict[Position, list[PlayerAsset]] = {pos: [] for pos in Position}
    for player in roster.players:
        by_position[player.position].append(player)

    for pos in by_position:
        by_position[pos] = sorted(by_position[pos], key=lambda p: p.value, reverse=True)

    return by_position


def _need(position: Position, severity: NeedSeverity, reason: str, min_value: float) -> NeedEntry:
    return NeedEntry(position=position, severity=severity, reason=reason, min_value=min_value)


def _sellable(position: Position, players: list[PlayerAsset]) -> SurplusEntry:
    return SurplusEntry(
        position=position, classification=SurplusClass.SELLABLE, players=players
    )


def analyze_needs(roster: TeamRoster) -> NeedsProfile:
    """
    Analyze a roster's positional needs and surplus.

    Args:
        roster: Valued roster to analyze

    Returns:
        NeedsProfile snapshot for the roster
    """
    if not isinstance(roster, TeamRoster):
        raise InvalidRosterError(f"Expected TeamRoster, got {type(roster).__name__}")

    by_position = group_by_position(roster)
    needs: list[NeedEntry] = []
    surplus: list[SurplusEntry] = []

    def startable(pos: Position) -> list[PlayerAsset]:
        return [p for p in by_position[pos] if p.value >= STARTABLE_VALUE[pos]]

    # QB
    qbs = startable(Position.QB)
    young_qbs = [p for p in by_position[Position.QB] if _is_young(p, Position.QB)]
    if len(qbs) < 2:
        needs.append(_need(Position.QB, NeedSeverity.CRITICAL, "Need starting QB", 4000))
    elif len(qbs) == 2 and not young_qbs:
        needs.append(
            _need(Position.QB, NeedSeverity.MODERATE, "Need young QB for future", 4000)
        )
    elif len(qbs) >= 3:
        surplus.append(_sellable(Position.QB, qbs[2:]))

    # RB
    rbs = startable(Position.RB)
    young_rbs = [p for p in by_position[Position.RB] if _is_young(p, Position.RB)]
    if len(rbs) < 3:
        needs.append(_need(Position.RB, NeedSeverity.CRITICAL, "Need RB depth", 4000))
    elif len(young_rbs) < 2:
        needs.append(
            _need(Position.RB, NeedSeverity.MODERATE, "Aging RB corps, need youth", 4500)
        )

    if len(rbs) >= 4:
        surplus.append(_sellable(Position.RB, rbs[3:]))

    aging_rbs = [
        p for p in by_position[Position.RB]
        if _is_old_rb(p) and p.value >= SELL_HIGH_RB_VALUE
    ]
    if aging_rbs:
        surplus.append(
            SurplusEntry(
                position=Position.RB,
                classification=SurplusClass.EXPENDABLE,
                players=aging_rbs,
                reason="Aging, sell high",
            )
        )

    # WR
    wrs = startable(Position.WR)
    young_wrs = [p for p in by_position[Position.WR] if _is_young(p, Position.WR)]
    if len(wrs) < 4:
        needs.append(_need(Position.WR, NeedSeverity.CRITICAL, "Need WR depth", 4000))
    elif len(young_wrs) < 3:
        needs.append(_need(Position.WR, NeedSeverity.MODERATE, "Need young WRs", 4500))

    if len(wrs) >= 6:
        surplus.append(_sellable(Position.WR, wrs[5:]))

    # TE
    tes = startable(Position.TE)
    if len(tes) < 2:
        needs.append(_need(Position.TE, NeedSeverity.CRITICAL, "Need TE", 3500))
    elif len(tes) >= 3:
        surplus.append(_sellable(Position.TE, tes[2:]))

    return NeedsProfile(
        roster_id=roster.roster_id,
        needs=PositionNeeds(
            critical=[n for n in needs if n.severity == NeedSeverity.CRITICAL],
            moderate=[n for n in needs if n.severity == NeedSeverity.MODERATE],
        ),
        surplus=PositionSurplus(
            sellable=[s for s in surplus if s.classification == SurplusClass.SELLABLE],
            expendable=[s for s in surplus if s.classification == SurplusClass.EXPENDABLE],
        ),
    )
