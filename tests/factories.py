"""
Inline roster builders shared by the test modules.
"""

from sleeper_trade_finder.models import (
    Opportunity,
    PickAsset,
    PlayerAsset,
    TeamRoster,
    TradePackage,
    TradeShape,
)


def player(player_id: str, position: str, value: float, age: int | None = 25) -> PlayerAsset:
    return PlayerAsset(
        player_id=player_id, name=player_id, position=position, age=age, value=value
    )


def pick(year: int, rnd: int, owner: int, value: float) -> PickAsset:
    return PickAsset(year=year, round=rnd, original_owner_id=owner, value=value)


def roster(roster_id: int, players: list, picks: list | None = None) -> TeamRoster:
    return TeamRoster(
        roster_id=roster_id,
        name=f"Team {roster_id}",
        players=players,
        picks=picks or [],
    )


def package(give: list, get: list, shape=TradeShape.ONE_FOR_ONE, **flags) -> TradePackage:
    give_total = sum(a.value for a in give)
    value_diff = sum(a.value for a in get) - give_total
    return TradePackage(
        give=give,
        get=get,
        shape=shape,
        value_diff=value_diff,
        pct_diff=value_diff / give_total * 100,
        **flags,
    )


def opportunity(opponent_id: int, index: int, score: int) -> Opportunity:
    """A synthetic opportunity with a unique asset pair per (opponent, index)."""
    return Opportunity(
        opponent_roster_id=opponent_id,
        opponent_name=f"Team {opponent_id}",
        package=package(
            [player(f"mine-{opponent_id}-{index}", "WR", 4000)],
            [player(f"theirs-{opponent_id}-{index}", "RB", 4000)],
        ),
        score=score,
    )
