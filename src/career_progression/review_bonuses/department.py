"""
Department bonus (tier 5).

Directors answer for board mandates and department-wide output.
"""

from typing import Tuple

from career_progression.review_bonuses.base import TierBonus
from career_progression.review_bonuses.context import TierReviewContext
from scouting_core.utils import round_half_up


class DepartmentBonus(TierBonus):
    """
    Board directives: completion rate scaled to 12 points, minus the
    summed penalty fields of uncompleted directives divided by 5
    (capped at 10).

    Department output: NPC report volume (target 20) and average
    quality (target 70), 4 points each.
    """

    COMPLETION_POINTS = 12
    MAX_FAILURE_PENALTY = 10
    PENALTY_DIVISOR = 5
    VOLUME_TARGET = 20.0
    QUALITY_TARGET = 70.0
    OUTPUT_POINTS = 4.0

    @property
    def bonus_name(self) -> str:
        return "department"

    @property
    def min_tier(self) -> int:
        return 5

    @property
    def bounds(self) -> Tuple[float, float]:
        return (-10.0, 20.0)

    def board_points(self, context: TierReviewContext) -> float:
        directives = context.board_directives
        if not directives:
            return 0.0

        completed = [d for d in directives if d.completed]
        failed = [d for d in directives if not d.completed]

        completion_rate = len(completed) / len(directives)
        completion_bonus = round_half_up(completion_rate * self.COMPLETION_POINTS)

        failure_penalty = 0
        if failed:
            total_penalty = sum(d.penalty_reputation for d in failed)
            failure_penalty = min(
                self.MAX_FAILURE_PENALTY,
                round_half_up(total_penalty / self.PENALTY_DIVISOR),
            )

        return float(completion_bonus - failure_penalty)

    def output_points(self, context: TierReviewContext) -> float:
        volume_score = min(
            self.OUTPUT_POINTS,
            (context.department_report_count / self.VOLUME_TARGET) * self.OUTPUT_POINTS,
        )
        quality_score = min(
            self.OUTPUT_POINTS,
            (context.department_average_quality / self.QUALITY_TARGET) * self.OUTPUT_POINTS,
        )
        return volume_score + quality_score

    def calculate(self, context: TierReviewContext) -> float:
        return self.board_points(context) + self.output_points(context)

    def describe(self, context: TierReviewContext, points: float) -> str:
        completed = len([d for d in context.board_directives if d.completed])
        return (
            f"Department ({completed}/{len(context.board_directives)} board directives, "
            f"{context.department_report_count} NPC reports): {points:+.1f}"
        )
