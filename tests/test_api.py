"""
HTTP API routes, with the Sleeper league context supplied in-process.
"""

import asyncio

from fastapi.testclient import TestClient

from sleeper_trade_finder.api.dependencies import get_league_context
from sleeper_trade_finder.api.routes import trade_finder as trade_finder_routes
from sleeper_trade_finder.clients.sleeper import LeagueContext
from sleeper_trade_finder.main import app
from sleeper_trade_finder.models import League, Player, Roster, User

client = TestClient(app)


def _player(player_id, position, value, age=25):
    return {
        "asset_type": "player",
        "player_id": player_id,
        "name": player_id,
        "position": position,
        "age": age,
        "value": value,
    }


def _pick(year, rnd, owner, value):
    return {
        "asset_type": "pick",
        "year": year,
        "round": rnd,
        "original_owner_id": owner,
        "value": value,
    }


def _request(**overrides):
    body = {
        "my_roster_id": 1,
        "rosters": [
            {
                "roster_id": 1,
                "name": "Mine",
                "players": [
                    _player("qb1", "QB", 6000),
                    _player("wr1", "WR", 3000),
                    _player("wr2", "WR", 3000),
                    _player("rb1", "RB", 4500),
                ],
                "picks": [_pick(2027, 1, 1, 1000)],
            },
            {
                "roster_id": 2,
                "name": "Theirs",
                "players": [
                    _player("their-rb", "RB", 4300),
                    _player("their-wr", "WR", 4800),
                    _player("their-te", "TE", 3200),
                ],
                "picks": [_pick(2027, 1, 2, 700)],
            },
        ],
    }
    body.update(overrides)
    return body


def _league_context():
    return LeagueContext(
        league=League(
            league_id="L1",
            name="Dynasty Test League",
            status="in_season",
            season="2025",
            season_type="regular",
            total_rosters=2,
        ),
        users=[User(user_id="u1", display_name="alice"), User(user_id="u2", display_name="bob")],
        rosters=[
            Roster(roster_id=1, owner_id="u1", league_id="L1", players=["100", "200"]),
            Roster(roster_id=2, owner_id="u2", league_id="L1", players=["300", "400"]),
        ],
        players={
            "100": Player(player_id="100", full_name="Josh Allen", position="QB", age=29),
            "200": Player(player_id="200", full_name="Garrett Wilson", position="WR", age=25),
            "300": Player(player_id="300", full_name="Breece Hall", position="RB", age=24),
            "400": Player(player_id="400", full_name="Drake London", position="WR", age=24),
        },
    )


# =============================================================================
# Health
# =============================================================================

def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# =============================================================================
# POST /analyze
# =============================================================================

def test_analyze_returns_ranked_opportunities():
    response = client.post("/api/trade-finder/analyze", json=_request())

    assert response.status_code == 200
    opportunities = response.json()
    assert opportunities
    assert all(o["opponent_roster_id"] == 2 for o in opportunities)
    assert all(o["acceptance"] in ("High", "Medium", "Low") for o in opportunities)
    scores = [o["score"] for o in opportunities]
    assert scores == sorted(scores, reverse=True)


def test_analyze_applies_filters():
    response = client.post(
        "/api/trade-finder/analyze",
        json=_request(filters={"positions": ["TE"]}),
    )

    assert response.status_code == 200
    for opportunity in response.json():
        received = [a["position"] for a in opportunity["package"]["get"] if a["asset_type"] == "player"]
        assert "TE" in received


def test_analyze_unknown_roster_is_not_found():
    response = client.post("/api/trade-finder/analyze", json=_request(my_roster_id=9))
    assert response.status_code == 404
    assert "Roster 9" in response.json()["detail"]


def test_analyze_runs_trade_search_off_the_event_loop(monkeypatch):
    calls = []

    def recording_find_all_trades(*args, **kwargs):
        try:
            asyncio.get_running_loop()
            calls.append("event loop")
        except RuntimeError:
            calls.append("worker thread")
        return []

    monkeypatch.setattr(trade_finder_routes, "find_all_trades", recording_find_all_trades)

    response = client.post("/api/trade-finder/analyze", json=_request())

    assert response.status_code == 200
    assert response.json() == []
    assert calls == ["worker thread"]


def test_analyze_rejects_roster_without_picks():
    body = _request()
    del body["rosters"][1]["picks"]

    response = client.post("/api/trade-finder/analyze", json=body)

    assert response.status_code == 422


def test_analyze_rejects_non_finite_values():
    body = _request()
    body["rosters"][0]["players"][0]["value"] = "NaN"

    response = client.post("/api/trade-finder/analyze", json=body)

    assert response.status_code == 422


# =============================================================================
# League routes
# =============================================================================

def test_league_routes_with_context_override():
    app.dependency_overrides[get_league_context] = _league_context
    try:
        needs = client.get("/api/trade-finder/L1/needs/1")
        assert needs.status_code == 200
        assert needs.json()["roster_id"] == 1

        report = client.get(
            "/api/trade-finder/L1/opportunities/1",
            params={"min_acceptance": "Low"},
        )
        assert report.status_code == 200
        assert report.json()["team_name"] == "alice"

        rosters = client.get("/api/leagues/L1/rosters")
        assert [r["roster_id"] for r in rosters.json()] == [1, 2]

        chart = client.get("/api/viz/L1/opportunities/1")
        assert chart.status_code == 200
        assert chart.headers["content-type"].startswith("text/html")

        missing = client.get("/api/trade-finder/L1/needs/42")
        assert missing.status_code == 404
    finally:
        app.dependency_overrides.clear()
