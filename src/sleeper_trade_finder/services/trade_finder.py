"""
Trade Finder Service

Discovers fair trade opportunities against every opponent in a league,
then selects a bounded, per-opponent-diverse, ranked list.
"""

import asyncio
import logging
from collections import defaultdict

from sleeper_trade_finder.clients.sleeper import LeagueContext
from sleeper_trade_finder.exceptions import InvalidRosterError
from sleeper_trade_finder.models.assets import LeagueSettings, TeamRoster
from sleeper_trade_finder.models.needs import NeedsProfile
from sleeper_trade_finder.models.trade_finder import (
    Opportunity,
    TradeFilters,
    TradeFinderReport,
)
from sleeper_trade_finder.services.league_rosters import build_team_rosters, league_settings_for
from sleeper_trade_finder.services.needs import analyze_needs
from sleeper_trade_finder.services.packages import generate_trade_packages
from sleeper_trade_finder.services.scoring import score_trade
from sleeper_trade_finder.services.valuation import ValuationProvider

logger = logging.getLogger(__name__)

MAX_OPPORTUNITIES = 50
PER_OPPONENT_QUOTA = 3


def _sort_by_score(opportunities: list[Opportunity]) -> list[Opportunity]:
    # sorted() is stable, so ties keep generation order
    return sorted(opportunities, key=lambda o: o.score, reverse=True)


def opponent_opportunities(
    my_roster: TeamRoster, my_needs: NeedsProfile, opponent: TeamRoster
) -> list[Opportunity]:
    """Generate and score every package against a single opponent."""
    their_needs = analyze_needs(opponent)
    packages = generate_trade_packages(my_roster, my_needs, opponent, their_needs)

    return [
        Opportunity(
            opponent_roster_id=opponent.roster_id,
            opponent_name=opponent.name,
            package=package,
            score=score_trade(package, my_needs, their_needs),
        )
        for package in packages
    ]


def select_opportunities(
    ranked: list[Opportunity],
    max_results: int = MAX_OPPORTUNITIES,
    per_opponent: int = PER_OPPONENT_QUOTA,
) -> list[Opportunity]:
    """
    Select a diverse subset of score-sorted opportunities.

    Each opponent's top ``per_opponent`` are taken first, opponents ordered
    by their best score, then the remaining slots are filled from the
    global ranking. The result is re-sorted by score.
    """
    by_opponent: dict[int, list[Opportunity]] = defaultdict(list)
    for opp in ranked:
        by_opponent[opp.opponent_roster_id].append(opp)

    selected: list[Opportunity] = []
    seen: set[tuple] = set()

    def take(opp: Opportunity) -> None:
        if opp.key not in seen:
            seen.add(opp.key)
            selected.append(opp)

    for group in by_opponent.values():
        for opp in group[:per_opponent]:
            if len(selected) >= max_results:
                break
            take(opp)

    for opp in ranked:
        if len(selected) >= max_results:
            break
        take(opp)

    return _sort_by_score(selected)


def find_all_trades(
    my_roster: TeamRoster,
    all_rosters: list[TeamRoster],
    league_settings: LeagueSettings | None = None,
    *,
    max_results: int = MAX_OPPORTUNITIES,
    per_opponent: int = PER_OPPONENT_QUOTA,
) -> list[Opportunity]:
    """
    Find trade opportunities with every other team in the league.

    Args:
        my_roster: My valued roster
        all_rosters: Every roster in the league; mine is skipped
        league_settings: League settings used when the rosters were valued
        max_results: Cap on returned opportunities
        per_opponent: Opportunities reserved per opponent before global fill

    Returns:
        Opportunities sorted by score, highest first
    """
    for roster in [my_roster, *all_rosters]:
        if not isinstance(roster, TeamRoster):
            raise InvalidRosterError(f"Expected TeamRoster, got {type(roster).__name__}")

    settings = league_settings or LeagueSettings()
    my_needs = analyze_needs(my_roster)

    candidates: list[Opportunity] = []
    for opponent in all_rosters:
        if opponent.roster_id == my_roster.roster_id:
            continue
        found = opponent_opportunities(my_roster, my_needs, opponent)
        logger.debug(
            "Roster %s vs %s: %d candidate trades",
            my_roster.roster_id,
            opponent.roster_id,
            len(found),
        )
        candidates.extend(found)

    selected = select_opportunities(_sort_by_score(candidates), max_results, per_opponent)
    logger.debug(
        "Selected %d of %d candidates across %d-team league",
        len(selected),
        len(candidates),
        settings.total_rosters,
    )
    return selected


def filter_trades(
    opportunities: list[Opportunity], filters: TradeFilters
) -> list[Opportunity]:
    """
    Filter ranked opportunities by caller criteria.

    Order and scores are preserved.
    """
    filtered = list(opportunities)

    if filters.positions:
        wanted = set(filters.positions)
        filtered = [
            o for o in filtered
            if any(p.position in wanted for p in o.package.received_players)
        ]

    if filters.exclude_asset_ids:
        excluded = set(filters.exclude_asset_ids)
        filtered = [
            o for o in filtered
            if not any(a.asset_id in excluded for a in o.package.give)
        ]

    if filters.min_value is not None:
        filtered = [o for o in filtered if o.package.get_total >= filters.min_value]

    if filters.max_value is not None:
        filtered = [o for o in filtered if o.package.give_total <= filters.max_value]

    if filters.min_acceptance is not None:
        floor = filters.min_acceptance.rank
        filtered = [o for o in filtered if o.acceptance.rank >= floor]

    return filtered


class TradeFinderService:
    """
    Service for finding trades in a Sleeper league.

    Values every roster in the league context, then runs the trade finder
    for one team.
    """

    def __init__(
        self,
        context: LeagueContext,
        valuation: ValuationProvider | None = None,
        max_results: int = MAX_OPPORTUNITIES,
        per_opponent: int = PER_OPPONENT_QUOTA,
        pick_years: int = 3,
        pick_rounds: int = 4,
    ):
        self.ctx = context
        self.league_settings = league_settings_for(context.league)
        self.valuation = valuation or ValuationProvider.for_league(self.league_settings)
        self.max_results = max_results
        self.per_opponent = per_opponent
        self.rosters = build_team_rosters(
            context, self.valuation, pick_years=pick_years, rounds=pick_rounds
        )

    def get_roster(self, roster_id: int) -> TeamRoster:
        """Get a valued roster, raising if it is not in the league."""
        roster = next((r for r in self.rosters if r.roster_id == roster_id), None)
        if roster is None:
            raise InvalidRosterError(
                f"Roster {roster_id} not found in league {self.ctx.league_id}",
                roster_id=roster_id,
            )
        return roster

    def analyze_roster_needs(self, roster_id: int) -> NeedsProfile:
        """Get the needs profile for a team."""
        return analyze_needs(self.get_roster(roster_id))

    async def find_trades(
        self, roster_id: int, filters: TradeFilters | None = None
    ) -> TradeFinderReport:
        """
        Find trades for a team.

        Args:
            roster_id: Team to find trades for
            filters: Optional post-ranking filters

        Returns:
            TradeFinderReport with needs and ranked opportunities
        """
        my_roster = self.get_roster(roster_id)

        # CPU-bound; keep it off the event loop
        opportunities = await asyncio.to_thread(
            find_all_trades,
            my_roster,
            self.rosters,
            self.league_settings,
            max_results=self.max_results,
            per_opponent=self.per_opponent,
        )
        total_found = len(opportunities)
        if filters:
            opportunities = filter_trades(opportunities, filters)

        return TradeFinderReport(
            league_id=self.ctx.league_id,
            roster_id=roster_id,
            team_name=my_roster.name,
            needs=analyze_needs(my_roster),
            opportunities=opportunities,
            total_found=total_found,
        )
