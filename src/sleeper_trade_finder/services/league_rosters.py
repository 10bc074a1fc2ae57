"""
League Roster Builder

Turns a Sleeper league context into valued rosters the trade finder can
consume: fantasy-relevant players with values, plus every future rookie
pick each team currently owns.
"""

from sleeper_trade_finder.clients.sleeper import LeagueContext
from sleeper_trade_finder.models.assets import (
    LeagueSettings,
    PickAsset,
    PlayerAsset,
    TeamRoster,
)
from sleeper_trade_finder.models.sleeper import League
from sleeper_trade_finder.services.valuation import ValuationProvider

# League statuses where this season's rookie draft has not happened yet
PRE_DRAFT_STATUSES = {"pre_draft", "drafting"}


def league_settings_for(league: League) -> LeagueSettings:
    """Derive valuation-relevant settings from a Sleeper league."""
    return LeagueSettings(
        total_rosters=league.total_rosters,
        superflex=league.is_superflex,
        te_premium=league.is_te_premium,
    )


def first_pick_year(league: League) -> int:
    """First rookie draft whose picks are still tradable."""
    season = int(league.season)
    if league.status in PRE_DRAFT_STATUSES:
        return season
    return season + 1


def pick_ownership(
    ctx: LeagueContext, years: list[int], rounds: int
) -> dict[tuple[int, int, int], int]:
    """
    Map (original roster, year, round) to the roster that owns the pick.

    Every team starts with its own picks; traded picks override that.
    """
    ownership = {
        (roster_id, year, rnd): roster_id
        for roster_id in ctx.roster_ids()
        for year in years
        for rnd in range(1, rounds + 1)
    }

    for pick in ctx.traded_picks:
        key = (pick.roster_id, int(pick.season), pick.round)
        if key in ownership:
            ownership[key] = pick.owner_id

    return ownership


def build_team_rosters(
    ctx: LeagueContext,
    valuation: ValuationProvider,
    pick_years: int = 3,
    rounds: int = 4,
) -> list[TeamRoster]:
    """
    Build valued rosters for every team in the league.

    Args:
        ctx: League context with rosters, players, and traded picks
        valuation: Provider used to value every asset
        pick_years: Number of future draft years to include
        rounds: Rookie draft rounds per year

    Returns:
        One TeamRoster per Sleeper roster, in league order
    """
    start = first_pick_year(ctx.league)
    years = list(range(start, start + pick_years))
    ownership = pick_ownership(ctx, years, rounds)
    league_size = ctx.league.total_rosters

    # A pick's slot depends on the team it originally belonged to
    tiers = {
        roster.roster_id: valuation.estimate_pick_tier(roster, league_size)
        for roster in ctx.rosters
    }

    team_rosters = []
    for roster in ctx.rosters:
        players = []
        for player_id in roster.player_ids:
            player = ctx.get_player(player_id)
            position = player.fantasy_position if player else None
            if position is None:
                continue
            players.append(
                PlayerAsset(
                    player_id=player_id,
                    name=player.display_name,
                    position=position,
                    age=player.age,
                    team=player.team,
                    injury_status=player.injury_status,
                    value=valuation.player_value(player),
                )
            )

        picks = [
            PickAsset(
                year=year,
                round=rnd,
                original_owner_id=original,
                is_own_pick=original == roster.roster_id,
                value=valuation.pick_value(year, rnd, tiers[original]),
            )
            for (original, year, rnd), owner in ownership.items()
            if owner == roster.roster_id
        ]
        picks.sort(key=lambda p: (p.year, p.round, p.original_owner_id))

        team_rosters.append(
            TeamRoster(
                roster_id=roster.roster_id,
                name=ctx.get_team_name(roster.roster_id),
                wins=roster.wins,
                losses=roster.losses,
                players=players,
                picks=picks,
            )
        )

    return team_rosters
