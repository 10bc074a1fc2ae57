"""
Visualization API Routes

Endpoints for generating interactive Plotly charts.
All endpoints return HTML content for embedding or viewing directly.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from sleeper_trade_finder.api.dependencies import RosterIdPath, TradeFinderDep
from sleeper_trade_finder.visualization import charts


router = APIRouter()


@router.get(
    "/{league_id}/opportunities/{roster_id}",
    response_class=HTMLResponse,
    summary="Trade opportunities chart",
    description="Generate an interactive chart of a team's trade opportunities.",
)
async def get_opportunities_chart(
    finder: TradeFinderDep,
    roster_id: RosterIdPath,
) -> HTMLResponse:
    """Generate a trade opportunities chart."""
    report = await finder.find_trades(roster_id)
    html = charts.opportunity_chart(
        report.opportunities,
        title=f"{finder.ctx.league_name} - Trades for {report.team_name}",
    )
    return HTMLResponse(content=html)
