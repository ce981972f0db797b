"""
Network management bonus (tier 4).

Head scouts are judged on their NPC scout network and on their
relationship with the club manager.
"""

from typing import Tuple

from career_progression.review_bonuses.base import TierBonus
from career_progression.review_bonuses.context import TierReviewContext
from scouting_core.utils import average


class NetworkManagementBonus(TierBonus):
    """
    NPC management (up to 8): average morale (target 10) and average
    report volume (target 5 per NPC), 4 points each.

    Manager relationship (up to 7): trust (target 100) worth 4 points
    and directive fulfilment rate worth 3.
    """

    MORALE_POINTS = 4.0
    VOLUME_POINTS = 4.0
    VOLUME_TARGET = 5.0
    TRUST_POINTS = 4.0
    DIRECTIVE_POINTS = 3.0

    @property
    def bonus_name(self) -> str:
        return "network_management"

    @property
    def min_tier(self) -> int:
        return 4

    @property
    def bounds(self) -> Tuple[float, float]:
        return (0.0, 15.0)

    def npc_points(self, context: TierReviewContext) -> float:
        npc_scouts = context.npc_scouts
        if not npc_scouts:
            return 0.0
        avg_morale = average(n.morale for n in npc_scouts)
        avg_reports = average(n.reports_submitted for n in npc_scouts)
        morale_score = min(self.MORALE_POINTS, (avg_morale / 10) * self.MORALE_POINTS)
        volume_score = min(
            self.VOLUME_POINTS, (avg_reports / self.VOLUME_TARGET) * self.VOLUME_POINTS
        )
        return morale_score + volume_score

    def manager_points(self, context: TierReviewContext) -> float:
        relationship = context.manager_relationship
        if relationship is None:
            return 0.0
        trust_score = min(self.TRUST_POINTS, (relationship.trust / 100) * self.TRUST_POINTS)
        issued = context.directives_issued
        fulfil_rate = context.directives_fulfilled / issued if issued > 0 else 0.0
        directive_score = min(self.DIRECTIVE_POINTS, fulfil_rate * self.DIRECTIVE_POINTS)
        return trust_score + directive_score

    def calculate(self, context: TierReviewContext) -> float:
        return self.npc_points(context) + self.manager_points(context)

    def describe(self, context: TierReviewContext, points: float) -> str:
        return (
            f"Network management ({len(context.npc_scouts)} NPC scouts, "
            f"manager {'present' if context.manager_relationship else 'absent'}): "
            f"{points:+.1f}"
        )
