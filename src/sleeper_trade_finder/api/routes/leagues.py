"""
League API Routes

Find a manager's leagues and inspect the valued rosters the trade finder
works from.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query

from sleeper_trade_finder.api.dependencies import (
    LeagueContextDep,
    SettingsDep,
    SleeperClientDep,
    TradeFinderDep,
)
from sleeper_trade_finder.models import League, TeamRoster

router = APIRouter()


@router.get(
    "/user/{username}",
    response_model=list[League],
    summary="Find a manager's leagues",
)
async def get_user_leagues(
    username: Annotated[str, Path(description="Sleeper username or user ID")],
    client: SleeperClientDep,
    settings: SettingsDep,
    season: Annotated[int | None, Query(ge=2017, description="NFL season year")] = None,
) -> list[League]:
    user = await client.get_user(username)
    if user is None:
        raise HTTPException(status_code=404, detail=f"Sleeper user not found: {username}")
    return await client.get_user_leagues(user.user_id, season or settings.default_season)


@router.get("/{league_id}", response_model=League, summary="Get league details")
async def get_league(ctx: LeagueContextDep) -> League:
    return ctx.league


@router.get(
    "/{league_id}/rosters",
    response_model=list[TeamRoster],
    summary="Get valued rosters",
    description="Every roster with player and rookie pick trade values.",
)
async def get_valued_rosters(finder: TradeFinderDep) -> list[TeamRoster]:
    return finder.rosters
