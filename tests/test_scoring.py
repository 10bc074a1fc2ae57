"""
Trade scoring and acceptance labels.
"""

import pytest

from factories import package, pick, player
from sleeper_trade_finder import acceptance_label, score_trade
from sleeper_trade_finder.models import (
    AcceptanceLabel,
    NeedEntry,
    NeedsProfile,
    PositionNeeds,
    PositionSurplus,
    TradeShape,
)
from sleeper_trade_finder.services.scoring import (
    acceptance_points,
    need_fit_points,
    value_advantage_points,
)


def _needs(critical=(), moderate=()):
    def entries(positions, severity):
        return [
            NeedEntry(position=pos, severity=severity, reason="test", min_value=4000)
            for pos in positions
        ]

    return NeedsProfile(
        roster_id=1,
        needs=PositionNeeds(
            critical=entries(critical, "critical"),
            moderate=entries(moderate, "moderate"),
        ),
        surplus=PositionSurplus(),
    )


NO_NEEDS = _needs()


# =============================================================================
# Components
# =============================================================================

@pytest.mark.parametrize(
    "pct_diff, points",
    [
        (15, 40),
        (14.9, 35),
        (10, 35),
        (5, 30),
        (0, 20),
        (-5, 15),
        (-10, 10),
        (-10.1, 5),
        (-80, 5),
    ],
)
def test_value_advantage_steps(pct_diff, points):
    assert value_advantage_points(pct_diff) == points


def test_need_fit_prefers_critical_positions():
    trade = package([player("wr", "WR", 4000)], [player("qb", "QB", 4200)], addresses_my_need=True)

    assert need_fit_points(trade, _needs(critical=["QB"])) == 35
    assert need_fit_points(trade, _needs(moderate=["QB"])) == 20
    assert need_fit_points(trade.model_copy(update={"addresses_my_need": False}), NO_NEEDS) == 0


def test_acceptance_points_tiers():
    give, get = [player("wr", "WR", 4000)], [player("rb", "RB", 3600)]

    assert acceptance_points(package(give, get, addresses_their_critical=True, addresses_their_need=True)) == 25
    assert acceptance_points(package(give, get, addresses_their_need=True)) == 18
    # 10% overpay with no need on their side
    assert acceptance_points(package(give, get)) == 12
    assert acceptance_points(package(give, [player("rb", "RB", 4000)])) == 3


# =============================================================================
# Totals
# =============================================================================

def test_score_for_surplus_wr_into_needed_qb():
    trade = package(
        [player("wr5", "WR", 3600)], [player("qb", "QB", 4200)], addresses_my_need=True
    )

    # 40 value + 35 critical fit + 3 base acceptance
    assert score_trade(trade, _needs(critical=["QB"]), NO_NEEDS) == 78


def test_consolidation_and_aging_rb_bonuses():
    trade = package(
        [player("rb-old", "RB", 2000, age=27), player("wr", "WR", 2000)],
        [player("qb", "QB", 4000)],
        shape=TradeShape.CONSOLIDATE,
    )

    # 20 value + 0 fit + 3 acceptance + 8 consolidation + 5 aging RB
    assert score_trade(trade, NO_NEEDS, NO_NEEDS) == 36


def test_score_is_capped_at_100():
    trade = package(
        [player("rb-old", "RB", 2500, age=29), player("wr", "WR", 2500)],
        [player("qb", "QB", 6000)],
        shape=TradeShape.CONSOLIDATE,
        addresses_my_need=True,
        addresses_their_need=True,
        addresses_their_critical=True,
    )

    # 40 + 35 + 25 + 8 + 5 = 113
    assert score_trade(trade, _needs(critical=["QB"]), NO_NEEDS) == 100


def test_received_picks_do_not_count_toward_need_fit():
    trade = package(
        [player("rb", "RB", 4500), pick(2027, 1, 1, 1000)],
        [pick(2027, 1, 2, 4000), player("te", "TE", 1500)],
        shape=TradeShape.TWO_FOR_TWO,
        addresses_my_need=True,
    )

    assert need_fit_points(trade, _needs(critical=["QB"])) == 20


# =============================================================================
# Labels
# =============================================================================

@pytest.mark.parametrize(
    "score, label",
    [
        (100, AcceptanceLabel.HIGH),
        (75, AcceptanceLabel.HIGH),
        (74, AcceptanceLabel.MEDIUM),
        (50, AcceptanceLabel.MEDIUM),
        (49, AcceptanceLabel.LOW),
        (0, AcceptanceLabel.LOW),
    ],
)
def test_acceptance_label_thresholds(score, label):
    assert acceptance_label(score) == label


def test_acceptance_labels_are_ordered():
    assert AcceptanceLabel.LOW.rank < AcceptanceLabel.MEDIUM.rank < AcceptanceLabel.HIGH.rank
