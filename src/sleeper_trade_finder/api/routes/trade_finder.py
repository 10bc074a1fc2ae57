"""
Trade Finder API Routes

Endpoints for roster needs and league-wide trade discovery.
"""

import asyncio
from typing import Annotated

from fastapi import APIRouter, Query

from sleeper_trade_finder.api.dependencies import RosterIdPath, SettingsDep, TradeFinderDep
from sleeper_trade_finder.exceptions import InvalidRosterError
from sleeper_trade_finder.models.assets import Position
from sleeper_trade_finder.models.needs import NeedsProfile
from sleeper_trade_finder.models.trade_finder import (
    AcceptanceLabel,
    FindTradesRequest,
    Opportunity,
    TradeFilters,
    TradeFinderReport,
)
from sleeper_trade_finder.services.trade_finder import filter_trades, find_all_trades

router = APIRouter()


@router.get(
    "/{league_id}/needs/{roster_id}",
    response_model=NeedsProfile,
    summary="Get roster needs",
    description="Classify a team's positional needs and tradable surplus.",
)
async def get_roster_needs(
    finder: TradeFinderDep,
    roster_id: RosterIdPath,
) -> NeedsProfile:
    """Get a team's needs profile."""
    return finder.analyze_roster_needs(roster_id)


@router.get(
    "/{league_id}/opportunities/{roster_id}",
    response_model=TradeFinderReport,
    summary="Find trade opportunities",
    description="Find fair trades for a team against every other team in the league.",
)
async def get_trade_opportunities(
    finder: TradeFinderDep,
    roster_id: RosterIdPath,
    position: Annotated[
        list[Position] | None, Query(description="Only trades receiving these positions")
    ] = None,
    exclude: Annotated[
        list[str] | None, Query(description="Asset IDs never to give away")
    ] = None,
    min_value: Annotated[float | None, Query(ge=0, description="Minimum value received")] = None,
    max_value: Annotated[float | None, Query(ge=0, description="Maximum value given")] = None,
    min_acceptance: Annotated[
        AcceptanceLabel | None, Query(description="Minimum acceptance likelihood")
    ] = None,
) -> TradeFinderReport:
    """Find ranked trade opportunities for a team."""
    filters = TradeFilters(
        positions=position or [],
        exclude_asset_ids=exclude or [],
        min_value=min_value,
        max_value=max_value,
        min_acceptance=min_acceptance,
    )
    return await finder.find_trades(roster_id, filters)


@router.post(
    "/analyze",
    response_model=list[Opportunity],
    summary="Find trades for supplied rosters",
    description="Run the trade finder on already-valued rosters without contacting Sleeper.",
)
async def analyze_rosters(
    request: FindTradesRequest,
    settings: SettingsDep,
) -> list[Opportunity]:
    """Find trades for rosters supplied in the request body."""
    my_roster = next((r for r in request.rosters if r.roster_id == request.my_roster_id), None)
    if my_roster is None:
        raise InvalidRosterError(
            f"Roster {request.my_roster_id} not found in request rosters",
            roster_id=request.my_roster_id,
        )

    opportunities = await asyncio.to_thread(
        find_all_trades,
        my_roster,
        request.rosters,
        request.league_settings,
        max_results=settings.max_opportunities,
        per_opponent=settings.per_opponent_quota,
    )
    if request.filters:
        opportunities = filter_trades(opportunities, request.filters)
    return opportunities
