"""
Dynasty valuation of players and rookie picks.
"""

from types import SimpleNamespace

import pytest

from sleeper_trade_finder.models import LeagueSettings, PickTier, Player
from sleeper_trade_finder.services.valuation import ValuationProvider


def _player(name, position, age=25, **kwargs):
    return Player(player_id=name, full_name=name, position=position, age=age, **kwargs)


valuation = ValuationProvider()


# =============================================================================
# Players
# =============================================================================

def test_known_qb_has_no_age_discount():
    assert valuation.player_value(_player("Josh Allen", "QB", age=29)) == 8500


@pytest.mark.parametrize(
    "name, position, age, expected",
    [
        ("Breece Hall", "RB", 24, 7500),
        ("Breece Hall", "RB", 26, 7125),
        ("Josh Jacobs", "RB", 28, 3825),
        ("Derrick Henry", "RB", 31, 2800),
    ],
)
def test_known_players_lose_value_with_age(name, position, age, expected):
    assert valuation.player_value(_player(name, position, age=age)) == expected


def test_injured_players_are_discounted():
    player = _player("Bijan Robinson", "RB", age=23, injury_status="IR")
    assert valuation.player_value(player) == 8550


def test_unknown_player_estimated_from_search_rank():
    assert valuation.player_value(_player("Rookie WR", "WR", age=23, search_rank=100)) == 7150
    assert valuation.player_value(_player("Deep RB", "RB", age=30, search_rank=400)) == 1500
    assert valuation.player_value(_player("Nobody TE", "TE", age=25)) == 500


def test_non_fantasy_positions_get_floor_value():
    assert valuation.player_value(_player("Some Kicker", "K")) == 50


def test_superflex_and_te_premium_multipliers():
    provider = ValuationProvider.for_league(LeagueSettings(superflex=True, te_premium=True))

    assert provider.player_value(_player("Josh Allen", "QB", age=29)) == 15300
    assert provider.player_value(_player("Brock Bowers", "TE", age=23)) == 10400
    assert provider.player_value(_player("Ja'Marr Chase", "WR", age=25)) == 9500


# =============================================================================
# Picks
# =============================================================================

def test_pick_values_by_year_round_and_tier():
    assert valuation.pick_value(2026, 1, PickTier.EARLY) == 7000
    assert valuation.pick_value(2027, 2, "late") == 1000
    assert valuation.pick_value(2028, 1) == 3200


def test_unknown_years_and_deep_rounds():
    assert valuation.pick_value(2031, 1, PickTier.MID) == 3200
    assert valuation.pick_value(2026, 5, PickTier.EARLY) == 100


@pytest.mark.parametrize(
    "wins, losses, tier",
    [
        (10, 4, PickTier.LATE),
        (9, 6, PickTier.LATE),
        (7, 7, PickTier.MID),
        (6, 9, PickTier.EARLY),
        (0, 0, PickTier.MID),
    ],
)
def test_pick_tier_from_record(wins, losses, tier):
    roster = SimpleNamespace(wins=wins, losses=losses)
    assert ValuationProvider.estimate_pick_tier(roster) == tier
