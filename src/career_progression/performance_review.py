"""
End-of-season performance review engine.

Scores a scout's season out of 100 from their submitted reports, adds
tier-specific bonuses for tier 3-5 scouts, and maps the total onto a
four-way outcome and a season-end reputation delta.

Base score:
    Reports       up to 25 (target 10 reports)
    Quality       up to 40 (target average quality 75)
    Signings      up to 25 (target 3 signed reports, any conviction)
    Table pounds  +10 if at least one table-pound report was signed
"""

import logging
from typing import Iterable, List, Optional

from career_progression.models import PerformanceReview
from career_progression.reputation import SeasonEnd, calculate_reputation_delta
from career_progression.review_bonuses import TierBonus, TierReviewContext, apply_bonus_chain
from scouting_core.enums import ConvictionLevel, ReviewOutcome
from scouting_core.models import Scout, ScoutReport
from scouting_core.utils import average, clamp, round_half_up, round_to

logger = logging.getLogger(__name__)

REPORT_POINTS = 25.0
REPORT_TARGET = 10
QUALITY_POINTS = 40.0
QUALITY_TARGET = 75.0
SIGNING_POINTS = 25.0
SIGNING_TARGET = 3
TABLE_POUND_BONUS = 10.0

PROMOTED_THRESHOLD = 85
RETAINED_THRESHOLD = 55
WARNING_THRESHOLD = 30


def determine_review_outcome(score: float) -> ReviewOutcome:
    """Map a review score onto promoted / retained / warning / fired."""
    if score >= PROMOTED_THRESHOLD:
        return ReviewOutcome.PROMOTED
    if score >= RETAINED_THRESHOLD:
        return ReviewOutcome.RETAINED
    if score >= WARNING_THRESHOLD:
        return ReviewOutcome.WARNING
    return ReviewOutcome.FIRED


def calculate_performance_review(
    scout: Scout,
    reports: Iterable[ScoutReport],
    season: int,
    tier_context: Optional[TierReviewContext] = None,
    bonuses: Optional[List[TierBonus]] = None
) -> PerformanceReview:
    """
    Calculate an end-of-season performance review.

    Args:
        scout: Scout under review
        reports: Reports to consider; filtered to this scout and season
        season: Season being reviewed
        tier_context: Tier 3-5 context; when None no tier bonus applies
        bonuses: Override the default tier bonus chain

    Returns:
        PerformanceReview with the score clamped to [0, 100]
    """
    season_reports = [
        r for r in reports
        if r.submitted_season == season and r.scout_id == scout.id
    ]

    reports_submitted = len(season_reports)
    average_quality = average(r.quality_score for r in season_reports)

    table_pound_reports = [
        r for r in season_reports if r.conviction == ConvictionLevel.TABLE_POUND
    ]
    table_pounds_successful = len([r for r in table_pound_reports if r.was_signed])
    successful_recommendations = len([r for r in season_reports if r.was_signed])

    report_score = min(REPORT_POINTS, (reports_submitted / REPORT_TARGET) * REPORT_POINTS)
    quality_score = min(QUALITY_POINTS, (average_quality / QUALITY_TARGET) * QUALITY_POINTS)
    signing_score = min(
        SIGNING_POINTS, (successful_recommendations / SIGNING_TARGET) * SIGNING_POINTS
    )
    table_pound_bonus = TABLE_POUND_BONUS if table_pounds_successful >= 1 else 0.0
    base_score = report_score + quality_score + signing_score + table_pound_bonus

    total, bonus_results = apply_bonus_chain(
        base_score, scout.career_tier, tier_context, bonuses
    )

    # Stacked tier bonuses cannot push the score past the scale
    total = clamp(total, 0.0, 100.0)

    outcome = determine_review_outcome(total)
    reputation_change = calculate_reputation_delta(SeasonEnd(outcome.to_season_rating()))

    breakdown = [
        {"component": "reports", "points": round_to(report_score, 3)},
        {"component": "quality", "points": round_to(quality_score, 3)},
        {"component": "signings", "points": round_to(signing_score, 3)},
        {"component": "table_pound", "points": table_pound_bonus},
    ]
    breakdown.extend(
        {"component": result["bonus_name"], "points": result["points"],
         "description": result["description"]}
        for result in bonus_results
    )

    logger.info(
        f"Season {season} review for {scout.id} (tier {scout.career_tier}): "
        f"{total:.1f} -> {outcome.value}"
    )

    return PerformanceReview(
        season=season,
        reports_submitted=reports_submitted,
        average_quality=round_half_up(average_quality),
        successful_recommendations=successful_recommendations,
        table_pounds_used=len(table_pound_reports),
        table_pounds_successful=table_pounds_successful,
        reputation_change=reputation_change,
        outcome=outcome,
        score=total,
        breakdown=tuple(breakdown),
    )
