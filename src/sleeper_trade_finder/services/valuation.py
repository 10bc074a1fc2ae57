"""
Dynasty Valuation Provider

Static dynasty trade values for players and rookie draft picks. The trade
finder only needs a non-negative number per asset, so this provider can be
swapped for a live market feed without touching the engine.
"""

from sleeper_trade_finder.models.assets import LeagueSettings, PickTier
from sleeper_trade_finder.models.sleeper import Player


class ValuationProvider:
    """
    Assigns dynasty trade values to players and draft picks.

    Provides methods to:
    - Value known players from a curated table, discounted for age and injury
    - Estimate unknown players from positional tiers and search rank
    - Value future rookie picks by year, round, and projected tier
    """

    # Known player values (January 2026)
    PLAYER_VALUES = {
        # QB
        "Josh Allen": 8500, "Lamar Jackson": 8200, "Joe Burrow": 8000,
        "Patrick Mahomes": 7800, "Jalen Hurts": 7500, "C.J. Stroud": 7200,
        "Jayden Daniels": 7000, "Anthony Richardson": 6500, "Caleb Williams": 6000,
        "Justin Herbert": 6000, "Drake Maye": 5500, "Brock Purdy": 5500,
        "Trevor Lawrence": 5000, "Bo Nix": 4500, "Dak Prescott": 4500,
        "Kyler Murray": 4000, "Jared Goff": 4000, "Tua Tagovailoa": 4000,
        # RB
        "Bijan Robinson": 9500, "Jahmyr Gibbs": 9200, "Ashton Jeanty": 8500,
        "Breece Hall": 7500, "De'Von Achane": 7000, "Omarion Hampton": 7000,
        "Jonathan Taylor": 6500, "Saquon Barkley": 6000, "Isiah Pacheco": 5500,
        "Quinshon Judkins": 5500, "Kyren Williams": 5500, "James Cook": 5500,
        "Travis Etienne": 5000, "Kenneth Walker III": 5000, "Cam Skattebo": 4500,
        "Josh Jacobs": 4500, "Najee Harris": 4500, "Rachaad White": 4500,
        "Derrick Henry": 4000, "Javonte Williams": 4000, "Rhamondre Stevenson": 4000,
        "Aaron Jones": 3500, "David Montgomery": 3500, "James Conner": 3000,
        # WR
        "Ja'Marr Chase": 9500, "Justin Jefferson": 9200, "CeeDee Lamb": 9000,
        "Amon-Ra St. Brown": 8500, "Malik Nabers": 8000, "Puka Nacua": 8000,
        "A.J. Brown": 7500, "Travis Hunter": 7500, "Drake London": 7200,
        "Garrett Wilson": 7000, "Nico Collins": 7000, "Chris Olave": 6500,
        "Ladd McConkey": 6500, "DeVonta Smith": 6500, "Jaylen Waddle": 6500,
        "Rashee Rice": 6500, "Brian Thomas Jr.": 6000, "George Pickens": 6000,
        "Tee Higgins": 6000, "Jaxon Smith-Njigba": 6000, "DK Metcalf": 6000,
        "Brandon Aiyuk": 6000, "Marvin Harrison Jr.": 5500, "Rome Odunze": 5500,
        "Tyreek Hill": 5500, "DJ Moore": 5500, "Terry McLaurin": 5500,
        "Tank Dell": 5000, "Michael Pittman Jr.": 5000, "Josh Downs": 4500,
        "Davante Adams": 4500, "Stefon Diggs": 4000, "Cooper Kupp": 4000,
        "Amari Cooper": 3500, "Jakobi Meyers": 3500, "Keenan Allen": 3000,
        # TE
        "Brock Bowers": 8000, "Sam LaPorta": 6500, "Trey McBride": 6000,
        "Dalton Kincaid": 5500, "George Kittle": 4500, "Kyle Pitts": 4500,
        "Jake Ferguson": 4000, "Mark Andrews": 4000, "Travis Kelce": 3500,
        "Evan Engram": 3500, "Dallas Goedert": 3500, "Pat Freiermuth": 3500,
        "David Njoku": 3000, "Cole Kmet": 3000,
    }

    # Positional tiers for players not in the table
    TIERS = {
        "QB": {"elite": 7000, "t1": 5500, "t2": 4000, "t3": 2500, "t4": 1500},
        "RB": {"elite": 9000, "t1": 7000, "t2": 5000, "t3": 3000, "t4": 1500},
        "WR": {"elite": 8500, "t1": 6500, "t2": 4500, "t3": 2500, "t4": 1000},
        "TE": {"elite": 7000, "t1": 5000, "t2": 3000, "t3": 1500, "t4": 500},
    }

    # Search rank upper bounds per tier
    RANK_TIERS = [(50, "elite"), (150, "t1"), (300, "t2"), (500, "t3")]

    # Rookie pick values: year -> round -> tier
    PICK_VALUES = {
        2026: {
            1: {"early": 7000, "mid": 5000, "late": 3000},
            2: {"early": 2200, "mid": 1600, "late": 1200},
            3: {"early": 800, "mid": 500, "late": 300},
            4: {"early": 200, "mid": 150, "late": 100},
        },
        2027: {
            1: {"early": 5500, "mid": 4000, "late": 2400},
            2: {"early": 1800, "mid": 1300, "late": 1000},
            3: {"early": 600, "mid": 400, "late": 250},
            4: {"early": 150, "mid": 100, "late": 75},
        },
        2028: {
            1: {"early": 4500, "mid": 3200, "late": 2000},
            2: {"early": 1400, "mid": 1000, "late": 750},
            3: {"early": 450, "mid": 300, "late": 200},
            4: {"early": 100, "mid": 75, "late": 50},
        },
    }
    DEEP_ROUND_VALUES = {"early": 100, "mid": 75, "late": 50}

    SUPERFLEX_QB_MULTIPLIER = 1.8
    TE_PREMIUM_MULTIPLIER = 1.3

    def __init__(self, superflex: bool = False, te_premium: bool = False):
        self.superflex = superflex
        self.te_premium = te_premium

    @classmethod
    def for_league(cls, settings: LeagueSettings) -> "ValuationProvider":
        """Create a provider adjusted for a league's format."""
        return cls(superflex=settings.superflex, te_premium=settings.te_premium)

    def player_value(self, player: Player) -> int:
        """
        Get a player's dynasty trade value.

        Args:
            player: Sleeper player record

        Returns:
            Non-negative integer value
        """
        known = self.PLAYER_VALUES.get(player.display_name)
        if known is None:
            value = self._estimate_value(player)
        else:
            value = float(known)

            # Non-QBs lose value with age
            if player.position != "QB" and player.age:
                if player.age >= 30:
                    value *= 0.7
                elif player.age >= 28:
                    value *= 0.85
                elif player.age >= 26:
                    value *= 0.95

            if player.injury_status in ("IR", "Out"):
                value *= 0.9

        if self.superflex and player.position == "QB":
            value *= self.SUPERFLEX_QB_MULTIPLIER
        if self.te_premium and player.position == "TE":
            value *= self.TE_PREMIUM_MULTIPLIER

        return max(round(value), 0)

    def _estimate_value(self, player: Player) -> float:
        """Estimate value for a player not in the table."""
        tier = self.TIERS.get(player.position or "")
        if tier is None:
            return 50.0

        rank = player.search_rank if player.search_rank is not None else 9999
        age = player.age or 25

        base = float(tier["t4"])
        for upper, name in self.RANK_TIERS:
            if rank < upper:
                base = float(tier[name])
                break

        if player.position == "RB":
            if age >= 30:
                base *= 0.5
            elif age >= 28:
                base *= 0.7
            elif age <= 23:
                base *= 1.1
        elif player.position == "WR":
            if age >= 32:
                base *= 0.5
            elif age >= 30:
                base *= 0.7
            elif age <= 24:
                base *= 1.1

        return base

    def pick_value(self, year: int, round_num: int, tier: PickTier = PickTier.MID) -> int:
        """
        Get a rookie draft pick's trade value.

        Args:
            year: Draft year
            round_num: Draft round
            tier: Projected slot within the round

        Returns:
            Non-negative integer value
        """
        # Years past the table are valued like the furthest known year
        year_values = self.PICK_VALUES.get(year) or self.PICK_VALUES[max(self.PICK_VALUES)]
        round_values = year_values.get(round_num, self.DEEP_ROUND_VALUES)
        return round_values[PickTier(tier).value]

    @staticmethod
    def estimate_pick_tier(roster, league_size: int = 12) -> PickTier:
        """
        Project where a team's pick lands from its record.

        Args:
            roster: Any roster exposing ``wins`` and ``losses``
            league_size: Number of teams in the league

        Returns:
            Projected PickTier
        """
        games = roster.wins + roster.losses
        pct = roster.wins / games if games > 0 else 0.5

        if pct >= 0.6:
            return PickTier.LATE
        if pct <= 0.4:
            return PickTier.EARLY
        return PickTier.MID
