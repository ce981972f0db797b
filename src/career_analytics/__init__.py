"""
Career Analytics.

Discovery tracking, monthly performance snapshots, four-weekly
performance pulses and the cross-career legacy profile.

Usage:
    from career_analytics import (
        record_discovery,
        process_season_discoveries,
        generate_performance_pulse,
        apply_pulse_consequences,
        generate_legacy_profile,
    )

Example:
    record = record_discovery(player, scout, week=12, season=2025)
    if should_generate_pulse(week):
        pulse = generate_performance_pulse(scout, reports, accuracy, discoveries, pulses, week, season)
        scout, messages, pulses = apply_pulse_consequences(scout, pulse, pulses, week, season)
"""

from career_analytics.models import (
    AccuracyEntry,
    CareerSnapshot,
    CareerSummary,
    CompletedCareer,
    DiscoveryRecord,
    LegacyPerk,
    LegacyPerkApplication,
    LegacyPerkType,
    LegacyProfile,
    PerformancePulse,
    PerformanceSnapshot,
    PulseGrade,
    PulseTrend,
)
from career_analytics.discovery_tracking import (
    add_season_snapshot,
    calculate_prediction_accuracy,
    get_discovery_stats,
    get_wonderkid_discoveries,
    process_season_discoveries,
    record_discovery,
)
from career_analytics.performance_analytics import (
    compare_performance_periods,
    create_performance_snapshot,
    get_accuracy_trend,
    get_overall_performance_rating,
    get_skill_progression_trend,
    process_monthly_snapshot,
)
from career_analytics.performance_pulse import (
    apply_pulse_consequences,
    generate_performance_pulse,
    should_generate_pulse,
)
from career_analytics.legacy import (
    LEGACY_PERK_DEFINITIONS,
    MAX_ACTIVE_PERKS,
    apply_legacy_perks,
    check_scenario_unlocks,
    generate_completed_career,
    generate_legacy_profile,
    get_available_perks,
    get_used_specializations,
    has_completed_career,
)

__all__ = [
    'AccuracyEntry',
    'CareerSnapshot',
    'CareerSummary',
    'CompletedCareer',
    'DiscoveryRecord',
    'LegacyPerk',
    'LegacyPerkApplication',
    'LegacyPerkType',
    'LegacyProfile',
    'PerformancePulse',
    'PerformanceSnapshot',
    'PulseGrade',
    'PulseTrend',
    'add_season_snapshot',
    'calculate_prediction_accuracy',
    'get_discovery_stats',
    'get_wonderkid_discoveries',
    'process_season_discoveries',
    'record_discovery',
    'compare_performance_periods',
    'create_performance_snapshot',
    'get_accuracy_trend',
    'get_overall_performance_rating',
    'get_skill_progression_trend',
    'process_monthly_snapshot',
    'apply_pulse_consequences',
    'generate_performance_pulse',
    'should_generate_pulse',
    'LEGACY_PERK_DEFINITIONS',
    'MAX_ACTIVE_PERKS',
    'apply_legacy_perks',
    'check_scenario_unlocks',
    'generate_completed_career',
    'generate_legacy_profile',
    'get_available_perks',
    'get_used_specializations',
    'has_completed_career',
]
