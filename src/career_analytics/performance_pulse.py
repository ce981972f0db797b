"""
Performance pulse.

Every four weeks the scout's recent output is graded A-F. Grades move
reputation, and two F grades in one season put a club scout on notice.

Composite (0-100):
    20% reports submitted (4 in the window = full marks)
    30% average report quality
    25% prediction accuracy
    15% signings (0 = 30, 1 = 70, 2+ = 100)
    10% freshness (100 - fatigue)
"""

import logging
import math
from dataclasses import replace
from typing import List, Sequence, Tuple

from config.career_settings import CareerSettings
from scouting_core.enums import CareerPath
from scouting_core.models import InboxMessage, Scout, ScoutReport
from scouting_core.utils import clamp, round_half_up
from career_analytics.models import (
    AccuracyEntry,
    DiscoveryRecord,
    PerformancePulse,
    PulseGrade,
    PulseTrend,
)

logger = logging.getLogger(__name__)

GRADE_THRESHOLDS = (
    (80, PulseGrade.A),
    (60, PulseGrade.B),
    (40, PulseGrade.C),
    (20, PulseGrade.D),
)

GRADE_REPUTATION = {
    PulseGrade.A: 3,
    PulseGrade.B: 1,
    PulseGrade.C: 0,
    PulseGrade.D: -2,
    PulseGrade.F: -5,
}

GRADE_MESSAGES = {
    PulseGrade.A: (
        "Outstanding work this month! Your reputation continues to grow and your "
        "employer is very pleased with your performance."
    ),
    PulseGrade.B: "Solid month of work. You're performing well and maintaining a good standing.",
    PulseGrade.C: (
        "An average month. Nothing remarkable, but nothing concerning either. "
        "Consider pushing yourself harder."
    ),
    PulseGrade.D: (
        "Below expectations this month. Your employer has expressed concern about your "
        "recent performance. Two consecutive D grades may lead to assignment changes."
    ),
    PulseGrade.F: (
        "Poor performance this month. You've received a formal warning. Two F grades "
        "in a season may result in contract termination for club scouts."
    ),
}

TERMINATION_WARNING = (
    "You have received two F grades this season. Your club is seriously considering "
    "terminating your contract. Dramatic improvement is needed immediately."
)

NEUTRAL_ACCURACY = 50
TREND_THRESHOLD = 10


def should_generate_pulse(week: int) -> bool:
    """Pulses run on weeks 4, 8, 12, ..."""
    return week > 0 and week % CareerSettings.PULSE_INTERVAL_WEEKS == 0


def calculate_composite_score(
    reports_submitted: int,
    quality_avg: float,
    accuracy_rate: float,
    signings: int,
    fatigue: float
) -> int:
    report_score = min(100, reports_submitted / 4 * 100)
    if signings >= 2:
        signing_score = 100
    elif signings == 1:
        signing_score = 70
    else:
        signing_score = 30
    fatigue_score = max(0, 100 - fatigue)
    return round_half_up(
        report_score * 0.20
        + quality_avg * 0.30
        + accuracy_rate * 0.25
        + signing_score * 0.15
        + fatigue_score * 0.10
    )


def get_grade(score: float) -> PulseGrade:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return PulseGrade.F


def calculate_trend(previous_pulses: Sequence[PerformancePulse], current_score: int) -> PulseTrend:
    """Compare against the last pulse's composite, recomputed from its stored values."""
    if not previous_pulses:
        return PulseTrend.STABLE
    last = previous_pulses[-1]
    last_score = calculate_composite_score(
        last.reports_submitted,
        last.report_quality_avg,
        last.accuracy_rate,
        last.signing_success,
        last.fatigue_avg,
    )
    diff = current_score - last_score
    if diff > TREND_THRESHOLD:
        return PulseTrend.IMPROVING
    if diff < -TREND_THRESHOLD:
        return PulseTrend.DECLINING
    return PulseTrend.STABLE


def generate_performance_pulse(
    scout: Scout,
    reports: Sequence[ScoutReport],
    accuracy_history: Sequence[AccuracyEntry],
    discoveries: Sequence[DiscoveryRecord],
    previous_pulses: Sequence[PerformancePulse],
    week: int,
    season: int
) -> PerformancePulse:
    """
    Grade the last four weeks.

    Args:
        scout: Player scout (fatigue is read directly)
        reports: Scout's reports
        accuracy_history: Predictions checked against reality
        discoveries: Discovery records (placement_week marks a signing)
        previous_pulses: Earlier pulses, oldest first
        week: Current week
        season: Current season

    Returns:
        PerformancePulse with rounded component values
    """
    interval = CareerSettings.PULSE_INTERVAL_WEEKS
    window_start = week - interval
    period = math.ceil(week / interval)

    recent_reports = [
        r for r in reports
        if r.submitted_season == season and r.submitted_week > window_start
    ]
    quality_avg = 0.0
    if recent_reports:
        quality_avg = sum(r.quality_score for r in recent_reports) / len(recent_reports)

    recent_accuracy = [
        a for a in accuracy_history
        if a.season == season and a.week > window_start
    ]
    accuracy_rate = float(NEUTRAL_ACCURACY)
    if recent_accuracy:
        accuracy_rate = sum(
            max(0, 100 - abs(a.predicted_ca - a.actual_ca) * 2) for a in recent_accuracy
        ) / len(recent_accuracy)

    signings = len([
        d for d in discoveries
        if d.discovered_season == season
        and d.placement_week is not None
        and d.placement_week > window_start
    ])

    composite = calculate_composite_score(
        len(recent_reports), quality_avg, accuracy_rate, signings, scout.fatigue
    )
    grade = get_grade(composite)

    logger.debug(f"Pulse season {season} period {period}: composite {composite}, grade {grade.value}")
    return PerformancePulse(
        period=period,
        season=season,
        reports_submitted=len(recent_reports),
        report_quality_avg=round_half_up(quality_avg),
        accuracy_rate=round_half_up(accuracy_rate),
        signing_success=signings,
        fatigue_avg=round_half_up(scout.fatigue),
        grade=grade,
        trend=calculate_trend(previous_pulses, composite),
    )


def apply_pulse_consequences(
    scout: Scout,
    pulse: PerformancePulse,
    previous_pulses: Sequence[PerformancePulse],
    week: int,
    season: int
) -> Tuple[Scout, List[InboxMessage], Tuple[PerformancePulse, ...]]:
    """
    Apply a pulse's reputation change and build its inbox messages.

    Returns:
        Tuple of (updated scout, messages, pulse history with this pulse appended)
    """
    rep_change = GRADE_REPUTATION[pulse.grade]
    body = (
        f"{GRADE_MESSAGES[pulse.grade]}\n\n"
        f"Reports: {pulse.reports_submitted} | Quality: {pulse.report_quality_avg}% | "
        f"Accuracy: {pulse.accuracy_rate}% | Trend: {pulse.trend.value}"
    )
    if rep_change != 0:
        body += f"\nReputation {rep_change:+d}"

    messages = [InboxMessage(
        id=f"pulse_{season}_{pulse.period}",
        week=week,
        season=season,
        type="performance",
        title=f"Monthly Review: Grade {pulse.grade.value}",
        body=body,
        action_required=pulse.grade.is_failing,
    )]

    season_fails = len([
        p for p in previous_pulses if p.season == season and p.grade == PulseGrade.F
    ])
    if pulse.grade == PulseGrade.F:
        season_fails += 1
    if season_fails >= 2 and scout.career_path == CareerPath.CLUB:
        logger.warning(f"Scout {scout.id} received a termination warning in season {season}")
        messages.append(InboxMessage(
            id=f"pulse_termination_{season}_{pulse.period}",
            week=week,
            season=season,
            type="performance",
            title="Contract Termination Warning",
            body=TERMINATION_WARNING,
            action_required=True,
        ))

    updated = replace(scout, reputation=clamp(scout.reputation + rep_change, 0, 100))
    return updated, messages, tuple(previous_pulses) + (pulse,)
