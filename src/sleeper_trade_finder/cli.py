"""
Sleeper Trade Finder CLI

Command-line interface for finding dynasty trades in a Sleeper league
without running the API server.
"""

import argparse
import asyncio
import logging
import sys
import webbrowser
from pathlib import Path
from typing import Any

from sleeper_trade_finder.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient
from sleeper_trade_finder.config import get_settings
from sleeper_trade_finder.exceptions import TradeFinderError
from sleeper_trade_finder.models.assets import Position
from sleeper_trade_finder.models.trade_finder import AcceptanceLabel, TradeFilters
from sleeper_trade_finder.services.trade_finder import TradeFinderService
from sleeper_trade_finder.visualization import charts


class SleeperTradeFinder:
    """
    Main class for finding trades in Sleeper leagues.

    Can be used as a library or via CLI.

    Example:
        async with SleeperTradeFinder() as finder:
            await finder.set_league("1127116641403351040")
            needs = finder.get_needs(3)
            trades = await finder.find_trades(3)
    """

    def __init__(self, season: int | None = None):
        self.settings = get_settings()
        self.season = season or self.settings.default_season
        self.client: SleeperClient | None = None
        self.ctx: LeagueContext | None = None
        self.service: TradeFinderService | None = None

    async def __aenter__(self):
        self.client = SleeperClient(self.settings)
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def get_user_leagues(
        self, username: str, season: int | None = None
    ) -> list[dict[str, Any]]:
        """Get all leagues for a user in a given season."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        user = await self.client.get_user(username)
        if user is None:
            return []
        leagues = await self.client.get_user_leagues(user.user_id, season or self.season)
        return [league.model_dump() for league in leagues]

    async def set_league(self, league_id: str) -> dict[str, Any]:
        """Set the active league and value every roster in it."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        self.ctx = await LeagueContext.create(self.client, league_id)
        self.service = TradeFinderService(
            self.ctx,
            max_results=self.settings.max_opportunities,
            per_opponent=self.settings.per_opponent_quota,
            pick_years=self.settings.pick_years,
            pick_rounds=self.settings.pick_rounds,
        )
        return self.ctx.league.model_dump()

    def _require_league(self) -> TradeFinderService:
        """Ensure a league is set."""
        if not self.service:
            raise RuntimeError("No league set. Call set_league() first.")
        return self.service

    def get_needs(self, roster_id: int) -> dict[str, Any]:
        """Get a team's needs profile."""
        service = self._require_league()
        return service.analyze_roster_needs(roster_id).model_dump(mode="json")

    async def find_trades(
        self, roster_id: int, filters: TradeFilters | None = None
    ) -> dict[str, Any]:
        """Find trades for a team."""
        service = self._require_league()
        report = await service.find_trades(roster_id, filters)
        return report.model_dump(mode="json")

    async def generate_chart(self, roster_id: int, output_path: str | None = None) -> str:
        """
        Generate an HTML chart of a team's trade opportunities.

        Args:
            roster_id: Team to find trades for
            output_path: Optional path to save the HTML file

        Returns:
            HTML string of the chart
        """
        service = self._require_league()
        report = await service.find_trades(roster_id)
        html = charts.opportunity_chart(
            report.opportunities,
            title=f"{service.ctx.league_name} - Trades for {report.team_name}",
        )

        if output_path:
            Path(output_path).write_text(html)
            print(f"📊 Chart saved to: {output_path}")

        return html


def _print_needs(needs: dict[str, Any]) -> None:
    for severity in ("critical", "moderate"):
        for need in needs["needs"][severity]:
            print(
                f"  [{severity.upper():<8}] {need['position']:<3} {need['reason']} "
                f"(min value {need['min_value']:.0f})"
            )
    for classification in ("sellable", "expendable"):
        for entry in needs["surplus"][classification]:
            names = ", ".join(p["name"] for p in entry["players"])
            print(f"  [{classification.upper():<8}] {entry['position']:<3} {names}")


def _asset_label(asset: dict[str, Any]) -> str:
    if asset["asset_type"] == "player":
        return f"{asset['name']} ({asset['position']}, {asset['value']:.0f})"
    return f"{asset['year']} Round {asset['round']} ({asset['value']:.0f})"


async def cli_main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sleeper Dynasty Trade Finder CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List leagues for a user
  sleeper-trades leagues michaelburps --season 2026

  # Show a team's needs and surplus
  sleeper-trades needs 1127116641403351040 3

  # Find trades that bring back a WR with medium or better acceptance
  sleeper-trades trades 1127116641403351040 3 --position WR --min-acceptance Medium

  # Generate chart
  sleeper-trades chart 1127116641403351040 3 --output trades.html --open
        """,
    )

    parser.add_argument(
        "--season",
        type=int,
        default=None,
        help="NFL season year (default: from settings)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # leagues command
    leagues_parser = subparsers.add_parser("leagues", help="List user's leagues")
    leagues_parser.add_argument("username", help="Sleeper username")

    # needs command
    needs_parser = subparsers.add_parser("needs", help="Show roster needs and surplus")
    needs_parser.add_argument("league_id", help="Sleeper league ID")
    needs_parser.add_argument("roster_id", type=int, help="Team roster ID")

    # trades command
    trades_parser = subparsers.add_parser("trades", help="Find trade opportunities")
    trades_parser.add_argument("league_id", help="Sleeper league ID")
    trades_parser.add_argument("roster_id", type=int, help="Team roster ID")
    trades_parser.add_argument(
        "--position", "-p",
        action="append",
        choices=[p.value for p in Position],
        help="Only trades receiving this position (repeatable)",
    )
    trades_parser.add_argument(
        "--exclude", "-x",
        action="append",
        help="Asset ID never to give away (repeatable)",
    )
    trades_parser.add_argument("--min-value", type=float, help="Minimum value received")
    trades_parser.add_argument("--max-value", type=float, help="Maximum value given")
    trades_parser.add_argument(
        "--min-acceptance",
        choices=[label.value for label in AcceptanceLabel],
        help="Minimum acceptance likelihood",
    )
    trades_parser.add_argument(
        "--limit", type=int, default=20, help="Number of trades to print (default: 20)"
    )

    # chart command
    chart_parser = subparsers.add_parser("chart", help="Generate HTML chart")
    chart_parser.add_argument("league_id", help="Sleeper league ID")
    chart_parser.add_argument("roster_id", type=int, help="Team roster ID")
    chart_parser.add_argument(
        "--output", "-o", default="trades.html", help="Output file path"
    )
    chart_parser.add_argument(
        "--open", action="store_true", help="Open chart in browser"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    async with SleeperTradeFinder(season=args.season) as finder:
        if args.command == "leagues":
            print(f"🔍 Looking up leagues for {args.username} ({finder.season})...\n")
            leagues = await finder.get_user_leagues(args.username)

            if not leagues:
                print(f"No leagues found for {finder.season}.")
                return

            print(f"Found {len(leagues)} league(s):\n")
            for i, league in enumerate(leagues, 1):
                print(f"  {i}. {league['name']}")
                print(f"     ID: {league['league_id']}")
                print(f"     Teams: {league['total_rosters']}")
                print(f"     Status: {league['status']}")
                print()

        elif args.command == "needs":
            await finder.set_league(args.league_id)
            team_name = finder.ctx.get_team_name(args.roster_id)
            print(f"📋 {finder.ctx.league_name} - Needs for {team_name}\n")
            _print_needs(finder.get_needs(args.roster_id))

        elif args.command == "trades":
            await finder.set_league(args.league_id)
            filters = TradeFilters(
                positions=args.position or [],
                exclude_asset_ids=args.exclude or [],
                min_value=args.min_value,
                max_value=args.max_value,
                min_acceptance=args.min_acceptance,
            )
            report = await finder.find_trades(args.roster_id, filters)
            print(f"📊 {finder.ctx.league_name} - Trades for {report['team_name']}\n")

            opportunities = report["opportunities"]
            if not opportunities:
                print("No trades found.")
                return

            print(f"Showing {min(args.limit, len(opportunities))} of "
                  f"{len(opportunities)} ({report['total_found']} before filters)\n")
            for i, opp in enumerate(opportunities[:args.limit], 1):
                package = opp["package"]
                print(f"{i:>2}. {opp['opponent_name']} - score {opp['score']} "
                      f"({opp['acceptance']}) [{package['shape']}]")
                print(f"    Give: {', '.join(_asset_label(a) for a in package['give'])}")
                print(f"    Get:  {', '.join(_asset_label(a) for a in package['get'])}")
                print(f"    Value: {package['value_diff']:+.0f} ({package['pct_diff']:+.1f}%)")
                print()

        elif args.command == "chart":
            await finder.set_league(args.league_id)
            print(f"📊 Generating chart for {finder.ctx.league_name}...")

            await finder.generate_chart(args.roster_id, args.output)

            if args.open:
                output_path = Path(args.output).absolute()
                webbrowser.open(f"file://{output_path}")
                print(f"🌐 Opened in browser: {output_path}")


def run_cli():
    """Entry point for the ``sleeper-trades`` command."""
    try:
        asyncio.run(cli_main())
    except (SleeperAPIError, TradeFinderError) as e:
        print(f"❌ {e.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run_cli()
