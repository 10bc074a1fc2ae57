"""
Trade Scoring

Scores a trade package 0-100 on value to me, fit for my needs, and how
likely the opponent is to accept.
"""

from sleeper_trade_finder.models.assets import Position
from sleeper_trade_finder.models.needs import NeedsProfile
from sleeper_trade_finder.models.trade_finder import AcceptanceLabel, TradePackage, TradeShape

# (minimum pct_diff, points), checked in order
VALUE_ADVANTAGE_STEPS = [
    (15, 40),
    (10, 35),
    (5, 30),
    (0, 20),
    (-5, 15),
    (-10, 10),
]
VALUE_ADVANTAGE_FLOOR = 5

CRITICAL_FIT_POINTS = 35
NEED_FIT_POINTS = 20

THEIR_CRITICAL_POINTS = 25
THEIR_NEED_POINTS = 18
OVERPAY_POINTS = 12
BASE_ACCEPTANCE_POINTS = 3

CONSOLIDATION_BONUS = 8
AGING_RB_BONUS = 5
AGING_RB_AGE = 27

MAX_SCORE = 100


def value_advantage_points(pct_diff: float) -> int:
    for threshold, points in VALUE_ADVANTAGE_STEPS:
        if pct_diff >= threshold:
            return points
    return VALUE_ADVANTAGE_FLOOR


def need_fit_points(package: TradePackage, my_needs: NeedsProfile) -> int:
    if not package.addresses_my_need:
        return 0
    critical = my_needs.critical_positions
    if any(p.position in critical for p in package.received_players):
        return CRITICAL_FIT_POINTS
    return NEED_FIT_POINTS


def acceptance_points(package: TradePackage) -> int:
    if package.addresses_their_critical:
        return THEIR_CRITICAL_POINTS
    if package.addresses_their_need:
        return THEIR_NEED_POINTS
    if package.pct_diff < -5:
        return OVERPAY_POINTS
    return BASE_ACCEPTANCE_POINTS


def score_trade(
    package: TradePackage, my_needs: NeedsProfile, their_needs: NeedsProfile
) -> int:
    """
    Score a trade package.

    Args:
        package: Candidate package from my perspective
        my_needs: My roster's needs profile
        their_needs: Opponent's needs profile (acceptance is read from the
            package flags, which were derived from it)

    Returns:
        Integer score between 0 and 100
    """
    score = value_advantage_points(package.pct_diff)
    score += need_fit_points(package, my_needs)
    score += acceptance_points(package)

    if package.shape == TradeShape.CONSOLIDATE:
        score += CONSOLIDATION_BONUS

    # Selling a declining back is a win on its own
    if any(
        p.position == Position.RB and p.age is not None and p.age >= AGING_RB_AGE
        for p in package.given_players
    ):
        score += AGING_RB_BONUS

    return min(score, MAX_SCORE)


def acceptance_label(score: float) -> AcceptanceLabel:
    """Get acceptance likelihood label (High/Medium/Low) for a score."""
    return AcceptanceLabel.from_score(score)
