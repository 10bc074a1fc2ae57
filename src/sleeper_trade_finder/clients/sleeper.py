"""
Async Sleeper API Client

Read-only access to the Sleeper endpoints the trade finder needs: users,
leagues, rosters, traded picks, and the NFL player database.

API Documentation: https://docs.sleeper.com/
"""

import asyncio
import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from sleeper_trade_finder.config import Settings, get_settings
from sleeper_trade_finder.models import League, Player, Roster, TradedPick, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Positions worth keeping from the full player dump
FANTASY_POSITIONS = {"QB", "RB", "WR", "TE"}


class SleeperAPIError(Exception):
    """Raised when Sleeper returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class SleeperClient:
    """
    Async client for the Sleeper Fantasy Football API.

    Usage:
        async with SleeperClient() as client:
            league = await client.get_league("1127116641403351040")
            picks = await client.get_traded_picks(league.league_id)
    """

    # The player dump is ~15MB and shared by every client in the process
    _players: dict[str, Player] | None = None
    _players_fetched_at: float = 0.0

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SleeperClient":
        self._http = httpx.AsyncClient(
            base_url=self.settings.sleeper_base_url,
            timeout=httpx.Timeout(self.settings.sleeper_timeout),
            headers={"Accept": "application/json"},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            raise RuntimeError("Use SleeperClient as 'async with SleeperClient() as client'")
        return self._http

    async def _get(self, endpoint: str) -> Any:
        """GET an endpoint, returning decoded JSON or None on 404."""
        logger.debug("GET %s", endpoint)
        try:
            response = await self.http.get(endpoint)
        except httpx.HTTPError as e:
            raise SleeperAPIError(f"Could not reach Sleeper for {endpoint}: {e}") from e

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise SleeperAPIError(
                f"Sleeper returned {response.status_code} for {endpoint}",
                status_code=response.status_code,
            )
        return response.json()

    async def _get_models(self, endpoint: str, model: type[ModelT]) -> list[ModelT]:
        """GET a JSON array and parse each element into ``model``."""
        data = await self._get(endpoint)
        return [model(**item) for item in data or []]

    # ==================== Users & Leagues ====================

    async def get_user(self, username: str) -> User | None:
        """Look up a user by username or user ID."""
        data = await self._get(f"/user/{username}")
        return User(**data) if data else None

    async def get_user_leagues(
        self, user_id: str, season: int, sport: str = "nfl"
    ) -> list[League]:
        """
        Get every league a user plays in for a season.

        Args:
            user_id: Sleeper user ID
            season: Season year (e.g., 2026)
            sport: Sport type (default: nfl)
        """
        return await self._get_models(f"/user/{user_id}/leagues/{sport}/{season}", League)

    async def get_league(self, league_id: str) -> League | None:
        data = await self._get(f"/league/{league_id}")
        return League(**data) if data else None

    async def get_league_rosters(self, league_id: str) -> list[Roster]:
        return await self._get_models(f"/league/{league_id}/rosters", Roster)

    async def get_league_users(self, league_id: str) -> list[User]:
        return await self._get_models(f"/league/{league_id}/users", User)

    async def get_traded_picks(self, league_id: str) -> list[TradedPick]:
        """
        Get every future draft pick that has changed hands in a league.

        Picks that were never traded are not listed; each team owns those.
        """
        return await self._get_models(f"/league/{league_id}/traded_picks", TradedPick)

    # ==================== Players ====================

    async def get_all_players(self, force_refresh: bool = False) -> dict[str, Player]:
        """
        Get fantasy-relevant NFL players keyed by player ID.

        The result is cached for ``players_cache_ttl`` seconds. Kickers,
        defenses, and records that fail validation are left out.
        """
        age = time.time() - SleeperClient._players_fetched_at
        if (
            not force_refresh
            and SleeperClient._players is not None
            and age < self.settings.players_cache_ttl
        ):
            return SleeperClient._players

        data = await self._get("/players/nfl")
        if data is None:
            return {}

        players: dict[str, Player] = {}
        skipped = 0
        for player_id, record in data.items():
            if record.get("position") not in FANTASY_POSITIONS:
                continue
            fields = {k: v for k, v in record.items() if k != "player_id"}
            try:
                players[player_id] = Player(player_id=player_id, **fields)
            except ValueError:
                skipped += 1

        if skipped:
            logger.debug("Skipped %d malformed player records", skipped)
        logger.info("Loaded %d fantasy players from Sleeper", len(players))

        SleeperClient._players = players
        SleeperClient._players_fetched_at = time.time()
        return players


class LeagueContext:
    """
    Everything needed to value a league's rosters, fetched once.

    Resolves roster IDs to team names and player IDs to player records.
    """

    def __init__(
        self,
        league: League,
        users: list[User],
        rosters: list[Roster],
        players: dict[str, Player],
        traded_picks: list[TradedPick] | None = None,
    ):
        self.league = league
        self.users = users
        self.rosters = rosters
        self.players = players
        self.traded_picks = traded_picks or []

        users_by_id = {u.user_id: u for u in users}
        self._rosters_by_id = {r.roster_id: r for r in rosters}
        self._team_names = {
            r.roster_id: users_by_id[r.owner_id].team_name
            for r in rosters
            if r.owner_id in users_by_id
        }

    @classmethod
    async def create(cls, client: SleeperClient, league_id: str) -> "LeagueContext":
        """
        Fetch a league and everything the trade finder needs about it.

        Raises:
            SleeperAPIError: If the league does not exist
        """
        league, users, rosters, players, traded_picks = await asyncio.gather(
            client.get_league(league_id),
            client.get_league_users(league_id),
            client.get_league_rosters(league_id),
            client.get_all_players(),
            client.get_traded_picks(league_id),
        )
        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}", status_code=404)

        logger.debug(
            "League %s: %d rosters, %d traded picks", league_id, len(rosters), len(traded_picks)
        )
        return cls(league, users, rosters, players, traded_picks)

    @property
    def league_id(self) -> str:
        return self.league.league_id

    @property
    def league_name(self) -> str:
        return self.league.name

    def get_team_name(self, roster_id: int) -> str:
        return self._team_names.get(roster_id, f"Team {roster_id}")

    def get_player(self, player_id: str) -> Player | None:
        return self.players.get(player_id)

    def roster_ids(self) -> list[int]:
        return list(self._rosters_by_id)
