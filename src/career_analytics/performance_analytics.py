"""
Performance analytics.

Monthly snapshots of accuracy, report quality and discovery rate, with
trend and comparison helpers for the analytics screens.
"""

from typing import Dict, List, Optional, Sequence

from config.career_settings import CareerSettings
from scouting_core.models import Scout, ScoutReport
from scouting_core.utils import average, clamp, round_to
from career_analytics.models import PerformanceSnapshot

RATING_WINDOW = 4


def create_performance_snapshot(
    scout: Scout,
    reports: Sequence[ScoutReport],
    week: int,
    season: int
) -> PerformanceSnapshot:
    """
    Snapshot the scout's performance from their reports.

    Reports by other scouts are ignored.
    """
    own = [r for r in reports if r.scout_id == scout.id]
    rated = [r.post_transfer_rating for r in own if r.post_transfer_rating is not None]
    unique_players = {r.player_id for r in own}

    return PerformanceSnapshot(
        season=season,
        week=week,
        accuracy=round_to(average(rated), 1),
        total_reports=len(own),
        avg_quality=round_to(average(r.quality_score for r in own), 1),
        discovery_rate=round_to(len(unique_players) / len(own), 3) if own else 0.0,
        skills=dict(scout.skills),
        reputation=scout.reputation,
    )


def is_snapshot_week(week: int) -> bool:
    """Snapshots run on weeks 1, 5, 9, ..."""
    return (week - 1) % CareerSettings.SNAPSHOT_INTERVAL_WEEKS == 0


def process_monthly_snapshot(
    scout: Scout,
    reports: Sequence[ScoutReport],
    week: int,
    season: int
) -> Optional[PerformanceSnapshot]:
    if not is_snapshot_week(week):
        return None
    return create_performance_snapshot(scout, reports, week, season)


def get_accuracy_trend(snapshots: Sequence[PerformanceSnapshot]) -> List[Dict[str, float]]:
    return [
        {"week": s.week, "season": s.season, "accuracy": s.accuracy}
        for s in snapshots
    ]


def get_skill_progression_trend(
    snapshots: Sequence[PerformanceSnapshot],
    skill: str
) -> List[Dict[str, Optional[int]]]:
    """Skill level per snapshot; None where the skill was not recorded."""
    return [
        {"week": s.week, "season": s.season, "level": s.skills.get(skill)}
        for s in snapshots
    ]


def get_overall_performance_rating(snapshots: Sequence[PerformanceSnapshot]) -> float:
    """
    Overall rating from the last four snapshots.

    0.4 × accuracy + 0.3 × quality + 0.3 × discovery rate (as a percentage),
    1 d.p., clamped to 0-100.
    """
    if not snapshots:
        return 0.0
    recent = list(snapshots)[-RATING_WINDOW:]
    rating = (
        average(s.accuracy for s in recent) * 0.4
        + average(s.avg_quality for s in recent) * 0.3
        + average(s.discovery_rate for s in recent) * 100 * 0.3
    )
    return clamp(round_to(rating, 1), 0, 100)


def compare_performance_periods(
    recent: Sequence[PerformanceSnapshot],
    previous: Sequence[PerformanceSnapshot]
) -> Dict[str, float]:
    """Change in averages between two periods; all zero if either is empty."""
    if not recent or not previous:
        return {"accuracy_change": 0.0, "quality_change": 0.0, "rate_change": 0.0}

    def delta(attr: str) -> float:
        return (
            average(getattr(s, attr) for s in recent)
            - average(getattr(s, attr) for s in previous)
        )

    return {
        "accuracy_change": round_to(delta("accuracy"), 1),
        "quality_change": round_to(delta("avg_quality"), 1),
        "rate_change": round_to(delta("discovery_rate"), 3),
    }
