"""
Trade Package Generation

Enumerates candidate trades between my roster and one opponent in three
shapes: 1-for-1 player swaps, 2-for-1 consolidations, and 2-for-2 swaps
that pair a player with a draft pick on each side.
"""

from itertools import combinations

from sleeper_trade_finder.models.assets import TeamRoster, total_value
from sleeper_trade_finder.models.needs import NeedEntry, NeedsProfile
from sleeper_trade_finder.models.trade_finder import TradePackage, TradeShape

# Starters at a critical-need position worth at least this are never offered
PROTECTED_STARTER_VALUE = 4000

# 1-for-1: the most value I will give up outright
MAX_VALUE_LOSS_RATIO = 0.85

# 1-for-1: allowed |pct_diff| by how badly the opponent needs my player
TOLERANCE_CRITICAL = 35.0
TOLERANCE_MODERATE = 25.0
TOLERANCE_DEFAULT = 20.0

# 1-for-1: a swap that fills no need must gain me more than this
MIN_GAIN_WITHOUT_NEED = 5.0

# 2-for-1
MIN_CONSOLIDATION_VALUE = 4000
CONSOLIDATION_FLOOR = -20.0
CONSOLIDATION_FLOOR_THEIR_NEED = -30.0

# 2-for-2
MIN_PICK_SWAP_VALUE = 5000
MAX_PICK_SWAP_SPREAD = 15.0


def _fills_any(needs: list[NeedEntry], asset) -> bool:
    return any(need.is_filled_by(asset) for need in needs)


def percent_change(give_total: float, get_total: float) -> float:
    """Percent gained (or lost, when negative) on the value given."""
    return (get_total - give_total) / give_total * 100


def _package(give: list, get: list, shape: TradeShape, **flags: bool) -> TradePackage:
    give_total = total_value(give)
    value_diff = total_value(get) - give_total
    return TradePackage(
        give=give,
        get=get,
        shape=shape,
        value_diff=value_diff,
        pct_diff=value_diff / give_total * 100,
        **flags,
    )


def within_loss_floor(give_value: float, get_value: float) -> bool:
    """
    Hard floor on a 1-for-1 swap.

    I never take back less than 85% of what I send, no matter how much the
    opponent needs my player.
    """
    return get_value >= give_value * MAX_VALUE_LOSS_RATIO


def within_need_tolerance(
    pct_diff: float, their_critical: bool, their_moderate: bool
) -> bool:
    """
    Need-scaled ceiling on a 1-for-1 swap.

    The more urgently the opponent needs the player I send, the larger the
    value gap in my favor they will plausibly accept.
    """
    if their_critical:
        allowed = TOLERANCE_CRITICAL
    elif their_moderate:
        allowed = TOLERANCE_MODERATE
    else:
        allowed = TOLERANCE_DEFAULT
    return abs(pct_diff) <= allowed


def one_for_one_packages(
    my_roster: TeamRoster,
    my_needs: NeedsProfile,
    their_roster: TeamRoster,
    their_needs: NeedsProfile,
) -> list[TradePackage]:
    """Generate 1-for-1 player swaps."""
    packages = []
    my_critical = my_needs.critical_positions

    for mine in my_roster.players:
        if mine.value <= 0:
            continue
        if mine.position in my_critical and mine.value >= PROTECTED_STARTER_VALUE:
            continue

        their_critical = _fills_any(their_needs.needs.critical, mine)
        their_moderate = _fills_any(their_needs.needs.moderate, mine)
        their_need = their_critical or their_moderate

        for theirs in their_roster.players:
            if not within_loss_floor(mine.value, theirs.value):
                continue

            pct_diff = percent_change(mine.value, theirs.value)
            if not within_need_tolerance(pct_diff, their_critical, their_moderate):
                continue

            my_need = _fills_any(my_needs.all_needs, theirs)
            if my_need or their_need or pct_diff > MIN_GAIN_WITHOUT_NEED:
                packages.append(
                    _package(
                        [mine],
                        [theirs],
                        TradeShape.ONE_FOR_ONE,
                        addresses_my_need=my_need,
                        addresses_their_need=their_need,
                        addresses_their_critical=their_critical,
                    )
                )

    return packages


def consolidation_packages(
    my_roster: TeamRoster,
    my_needs: NeedsProfile,
    their_roster: TeamRoster,
    their_needs: NeedsProfile,
) -> list[TradePackage]:
    """Generate 2-for-1 trades where I send two players for one better player."""
    packages = []
    their_need_positions = their_needs.need_positions()
    their_critical_positions = their_needs.critical_positions

    for first, second in combinations(my_roster.players, 2):
        give_total = first.value + second.value
        if give_total < MIN_CONSOLIDATION_VALUE:
            continue

        # Depth at a position they need helps them regardless of value
        their_need = bool({first.position, second.position} & their_need_positions)
        their_critical = bool({first.position, second.position} & their_critical_positions)
        floor = CONSOLIDATION_FLOOR_THEIR_NEED if their_need else CONSOLIDATION_FLOOR

        for theirs in their_roster.players:
            pct_diff = percent_change(give_total, theirs.value)
            if pct_diff < floor:
                continue

            my_need = _fills_any(my_needs.all_needs, theirs)
            if my_need or pct_diff > 0:
                packages.append(
                    _package(
                        [first, second],
                        [theirs],
                        TradeShape.CONSOLIDATE,
                        addresses_my_need=my_need,
                        addresses_their_need=their_need,
                        addresses_their_critical=their_critical,
                    )
                )

    return packages


def pick_swap_packages(
    my_roster: TeamRoster,
    my_needs: NeedsProfile,
    their_roster: TeamRoster,
) -> list[TradePackage]:
    """Generate 2-for-2 trades of player plus pick on each side."""
    packages = []

    for mine in my_roster.players:
        for theirs in their_roster.players:
            addresses_my_need = _fills_any(my_needs.needs.critical, theirs)

            for my_pick in my_roster.picks:
                my_total = mine.value + my_pick.value
                if my_total < MIN_PICK_SWAP_VALUE:
                    continue

                for their_pick in their_roster.picks:
                    their_total = theirs.value + their_pick.value
                    spread = abs(my_total - their_total) / ((my_total + their_total) / 2) * 100
                    if spread > MAX_PICK_SWAP_SPREAD:
                        continue

                    packages.append(
                        _package(
                            [mine, my_pick],
                            [theirs, their_pick],
                            TradeShape.TWO_FOR_TWO,
                            addresses_my_need=addresses_my_need,
                        )
                    )

    return packages


def generate_trade_packages(
    my_roster: TeamRoster,
    my_needs: NeedsProfile,
    their_roster: TeamRoster,
    their_needs: NeedsProfile,
) -> list[TradePackage]:
    """
    Generate every candidate package between two rosters.

    Args:
        my_roster: My valued roster
        my_needs: Needs profile for my roster
        their_roster: Opponent's valued roster
        their_needs: Needs profile for the opponent

    Returns:
        Packages in generation order: 1-for-1, 2-for-1, then 2-for-2
    """
    return [
        *one_for_one_packages(my_roster, my_needs, their_roster, their_needs),
        *consolidation_packages(my_roster, my_needs, their_roster, their_needs),
        *pick_swap_packages(my_roster, my_needs, their_roster),
    ]
