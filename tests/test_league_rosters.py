"""
Building valued rosters from Sleeper league data.
"""

import asyncio

import pytest

from sleeper_trade_finder import InvalidRosterError
from sleeper_trade_finder.clients.sleeper import LeagueContext
from sleeper_trade_finder.models import League, Player, Roster, TradedPick, User
from sleeper_trade_finder.services.league_rosters import (
    build_team_rosters,
    first_pick_year,
    league_settings_for,
    pick_ownership,
)
from sleeper_trade_finder.services.trade_finder import TradeFinderService
from sleeper_trade_finder.services.valuation import ValuationProvider


def _league(status="in_season", roster_positions=None, scoring_settings=None):
    return League(
        league_id="L1",
        name="Dynasty Test League",
        status=status,
        season="2025",
        season_type="regular",
        total_rosters=2,
        roster_positions=roster_positions or ["QB", "RB", "RB", "WR", "WR", "TE", "FLEX"],
        scoring_settings=scoring_settings or {},
    )


def _context(traded_picks=None):
    players = {
        "100": Player(player_id="100", full_name="Josh Allen", position="QB", age=29),
        "200": Player(player_id="200", full_name="Bijan Robinson", position="RB", age=23),
        "300": Player(player_id="300", full_name="Ja'Marr Chase", position="WR", age=25),
        "400": Player(player_id="400", full_name="Some Kicker", position="K", age=30),
        "500": Player(player_id="500", full_name="Brock Bowers", position="TE", age=23),
    }
    users = [
        User(user_id="u1", display_name="alice", metadata={"team_name": "Gridiron Gurus"}),
        User(user_id="u2", display_name="bob"),
    ]
    rosters = [
        Roster(
            roster_id=1, owner_id="u1", league_id="L1",
            players=["100", "200", "400", "999"], settings={"wins": 10, "losses": 2},
        ),
        Roster(
            roster_id=2, owner_id="u2", league_id="L1",
            players=["300", "500"], settings={"wins": 2, "losses": 10},
        ),
    ]
    return LeagueContext(
        league=_league(),
        users=users,
        rosters=rosters,
        players=players,
        traded_picks=traded_picks or [],
    )


ROSTER_2_FIRST = TradedPick(season="2026", round=1, roster_id=2, previous_owner_id=2, owner_id=1)


# =============================================================================
# League settings
# =============================================================================

def test_first_pick_year_depends_on_draft_status():
    assert first_pick_year(_league(status="in_season")) == 2026
    assert first_pick_year(_league(status="pre_draft")) == 2025
    assert first_pick_year(_league(status="drafting")) == 2025


def test_league_settings_detect_superflex_and_te_premium():
    settings = league_settings_for(
        _league(
            roster_positions=["QB", "SUPER_FLEX", "TE"],
            scoring_settings={"bonus_rec_te": 0.5},
        )
    )
    assert settings.total_rosters == 2
    assert settings.superflex
    assert settings.te_premium
    assert not league_settings_for(_league()).superflex


# =============================================================================
# Pick ownership
# =============================================================================

def test_traded_picks_override_ownership():
    ownership = pick_ownership(_context([ROSTER_2_FIRST]), [2026, 2027], rounds=2)

    assert len(ownership) == 8
    assert ownership[(2, 2026, 1)] == 1
    assert ownership[(2, 2027, 1)] == 2
    assert ownership[(1, 2026, 1)] == 1


def test_traded_picks_outside_the_window_are_ignored():
    old = TradedPick(season="2024", round=1, roster_id=1, owner_id=2)
    ownership = pick_ownership(_context([old]), [2026], rounds=1)
    assert ownership == {(1, 2026, 1): 1, (2, 2026, 1): 2}


# =============================================================================
# Valued rosters
# =============================================================================

def test_build_team_rosters_values_players_and_picks():
    ctx = _context([ROSTER_2_FIRST])
    first, second = build_team_rosters(ctx, ValuationProvider(), pick_years=1, rounds=2)

    assert first.name == "Gridiron Gurus"
    assert second.name == "bob"
    assert (first.wins, first.losses) == (10, 2)

    # Kickers and unknown player IDs are dropped
    assert [p.player_id for p in first.players] == ["100", "200"]
    assert [p.value for p in first.players] == [8500, 9500]

    assert [p.asset_id for p in first.picks] == ["2026-1-1", "2026-1-2", "2026-2-1"]
    assert [p.asset_id for p in second.picks] == ["2026-2-2"]


def test_pick_value_follows_original_owner_record():
    ctx = _context([ROSTER_2_FIRST])
    first, _ = build_team_rosters(ctx, ValuationProvider(), pick_years=1, rounds=1)
    own, acquired = first.picks

    # Roster 1 is 10-2, roster 2 is 2-10
    assert own.is_own_pick
    assert own.value == 3000
    assert not acquired.is_own_pick
    assert acquired.value == 7000


# =============================================================================
# TradeFinderService
# =============================================================================

def test_service_rejects_unknown_roster():
    service = TradeFinderService(_context())

    with pytest.raises(InvalidRosterError) as exc_info:
        service.get_roster(42)
    assert exc_info.value.roster_id == 42


def test_service_reports_needs_and_trades():
    service = TradeFinderService(_context(), pick_years=2, pick_rounds=2)

    report = asyncio.run(service.find_trades(1))

    assert report.league_id == "L1"
    assert report.roster_id == 1
    assert report.team_name == "Gridiron Gurus"
    assert report.total_found == len(report.opportunities)
    assert all(o.opponent_roster_id == 2 for o in report.opportunities)
    assert {n.position.value for n in report.needs.needs.critical} >= {"QB", "WR", "TE"}
