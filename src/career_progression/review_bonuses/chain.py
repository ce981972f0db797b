"""
Tier bonus chain application utility.

Applies every tier bonus the scout's tier qualifies for and records an
audit entry per bonus.
"""

from typing import Any, Dict, List, Optional, Tuple

from career_progression.review_bonuses.base import TierBonus
from career_progression.review_bonuses.context import TierReviewContext
from scouting_core.utils import round_to


def apply_bonus_chain(
    base_score: float,
    career_tier: int,
    context: Optional[TierReviewContext],
    bonuses: Optional[List[TierBonus]] = None
) -> Tuple[float, List[Dict[str, Any]]]:
    """
    Apply a chain of tier bonuses to a base review score.

    Bonuses stack cumulatively: a tier 5 scout receives the tier 3, 4
    and 5 bonuses. Without a context no bonus applies.

    Args:
        base_score: Score before tier bonuses
        career_tier: Scout's career tier
        context: End-of-season tier context (None skips all bonuses)
        bonuses: Bonuses to apply (defaults to create_default_bonus_chain())

    Returns:
        Tuple of:
        - score: base_score plus all applicable bonuses (unclamped)
        - bonus_results: One audit dict per applied bonus
    """
    if context is None:
        return base_score, []

    if bonuses is None:
        bonuses = create_default_bonus_chain()

    score = base_score
    bonus_results: List[Dict[str, Any]] = []

    for bonus in bonuses:
        if not bonus.applies_to(career_tier):
            continue

        points = bonus.clamp_points(bonus.calculate(context))
        bonus_results.append({
            "bonus_name": bonus.bonus_name,
            "input_score": round_to(score, 3),
            "points": round_to(points, 3),
            "output_score": round_to(score + points, 3),
            "description": bonus.describe(context, points),
        })
        score += points

    return score, bonus_results


def create_default_bonus_chain() -> List[TierBonus]:
    """
    Create the default bonus chain.

    Returns:
        Bonuses in application order:
        1. InternationalCoverageBonus (tier 3+)
        2. NetworkManagementBonus (tier 4+)
        3. DepartmentBonus (tier 5)
    """
    from career_progression.review_bonuses.international import InternationalCoverageBonus
    from career_progression.review_bonuses.network import NetworkManagementBonus
    from career_progression.review_bonuses.department import DepartmentBonus

    return [
        InternationalCoverageBonus(),
        NetworkManagementBonus(),
        DepartmentBonus(),
    ]
