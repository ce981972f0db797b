"""
International coverage bonus (tier 3).

Full-time scouts are expected to work beyond the domestic market.
Breadth earns points; a season spent in a single country costs them,
and a season spent only at home costs double.
"""

from typing import Tuple

from career_progression.review_bonuses.base import TierBonus
from career_progression.review_bonuses.context import TierReviewContext


class InternationalCoverageBonus(TierBonus):
    """
    +2 per distinct non-home country (cap +10).
    -5 if every report came from one country, -10 if that country is home.
    """

    POINTS_PER_COUNTRY = 2
    MAX_BONUS = 10
    SINGLE_COUNTRY_PENALTY = 5
    HOME_ONLY_PENALTY = 10

    @property
    def bonus_name(self) -> str:
        return "international_coverage"

    @property
    def min_tier(self) -> int:
        return 3

    @property
    def bounds(self) -> Tuple[float, float]:
        return (-10.0, 10.0)

    def calculate(self, context: TierReviewContext) -> float:
        countries = context.countries_scouted_this_season
        if not countries:
            return 0.0

        home = context.home_country or ""
        unique_countries = set(countries)
        if home:
            international_count = len([c for c in unique_countries if c != home])
        else:
            # No home country known: every country counts as international
            international_count = len(unique_countries)

        bonus = min(self.MAX_BONUS, international_count * self.POINTS_PER_COUNTRY)

        penalty = 0
        if len(unique_countries) == 1:
            penalty = self.SINGLE_COUNTRY_PENALTY
            if home and home in unique_countries:
                penalty = self.HOME_ONLY_PENALTY

        return float(bonus - penalty)

    def describe(self, context: TierReviewContext, points: float) -> str:
        count = len(set(context.countries_scouted_this_season))
        return f"International coverage across {count} countries: {points:+.1f}"
