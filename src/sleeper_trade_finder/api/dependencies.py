"""
API Dependencies

Sleeper client lifecycle, per-request league loading, and the trade
finder service built on top of it.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Path

from sleeper_trade_finder.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient
from sleeper_trade_finder.config import Settings, get_settings
from sleeper_trade_finder.services.trade_finder import TradeFinderService


class ClientManager:
    """Holds the one SleeperClient shared by every request."""

    _client: SleeperClient | None = None

    @classmethod
    async def get_client(cls) -> SleeperClient:
        if cls._client is None:
            cls._client = await SleeperClient().__aenter__()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        if cls._client is not None:
            await cls._client.__aexit__(None, None, None)
            cls._client = None


async def get_sleeper_client() -> SleeperClient:
    return await ClientManager.get_client()


SleeperClientDep = Annotated[SleeperClient, Depends(get_sleeper_client)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_league_context(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    client: SleeperClientDep,
) -> LeagueContext:
    """
    Load a league with its rosters, managers, players, and traded picks.

    Unknown leagues are a 404; any other Sleeper failure is a 502.
    """
    try:
        return await LeagueContext.create(client, league_id)
    except SleeperAPIError as e:
        status = 404 if e.status_code == 404 else 502
        raise HTTPException(status_code=status, detail=e.message)


LeagueContextDep = Annotated[LeagueContext, Depends(get_league_context)]


def get_trade_finder(ctx: LeagueContextDep, settings: SettingsDep) -> TradeFinderService:
    """Value every roster in the requested league."""
    return TradeFinderService(
        ctx,
        max_results=settings.max_opportunities,
        per_opponent=settings.per_opponent_quota,
        pick_years=settings.pick_years,
        pick_rounds=settings.pick_rounds,
    )


TradeFinderDep = Annotated[TradeFinderService, Depends(get_trade_finder)]

RosterIdPath = Annotated[int, Path(description="Team roster ID")]
