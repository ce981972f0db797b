"""
Tests for the performance pulse and the legacy profile.
"""

import pytest

from career_analytics.legacy import (
    LEGACY_PERK_DEFINITIONS,
    apply_legacy_perks,
    check_scenario_unlocks,
    generate_completed_career,
    generate_legacy_profile,
    get_available_perks,
    get_scenario_unlock_descriptions,
    get_used_specializations,
    has_completed_career,
)
from career_analytics.models import (
    AccuracyEntry,
    CareerSummary,
    LegacyProfile,
    PerformancePulse,
    PulseGrade,
    PulseTrend,
)
from career_analytics.performance_pulse import (
    apply_pulse_consequences,
    calculate_composite_score,
    calculate_trend,
    generate_performance_pulse,
    get_grade,
    should_generate_pulse,
)
from scouting_core.enums import CareerPath, Specialization


def _pulse(grade, period=1, season=2025, **overrides):
    values = {
        "period": period, "season": season, "reports_submitted": 0,
        "report_quality_avg": 0, "accuracy_rate": 50, "signing_success": 0,
        "fatigue_avg": 0, "grade": grade,
    }
    values.update(overrides)
    return PerformancePulse(**values)


@pytest.fixture
def summary():
    return CareerSummary(
        scout_name="Alex Morgan",
        specialization=Specialization.YOUTH,
        career_tier=3,
        career_high_tier=4,
        successful_finds=10,
        total_reports=20,
        discovery_count=12,
        total_seasons=0,
        current_season=2027,
        legacy_score_total=70.0,
        countries_scouted=3,
    )


class TestPulseScoring:
    """Tests for composite scoring, grades and trends."""

    def test_pulse_weeks(self):
        """Test that pulses run every fourth week."""
        assert [w for w in range(0, 13) if should_generate_pulse(w)] == [4, 8, 12]

    def test_composite(self):
        """Test the weighted composite for a typical month."""
        # 20 + 24 + 12.5 + 4.5 + 10
        assert calculate_composite_score(4, 80, 50, 0, 0) == 71

    def test_signing_steps(self):
        """Test the signing component steps."""
        base = calculate_composite_score(0, 0, 0, 0, 100)
        assert calculate_composite_score(0, 0, 0, 1, 100) - base == 6
        assert calculate_composite_score(0, 0, 0, 2, 100) - base == 10

    @pytest.mark.parametrize("score,grade", [
        (80, PulseGrade.A), (79, PulseGrade.B), (60, PulseGrade.B),
        (40, PulseGrade.C), (20, PulseGrade.D), (19, PulseGrade.F),
    ])
    def test_grades(self, score, grade):
        """Test grade boundaries."""
        assert get_grade(score) is grade

    def test_trend(self):
        """Test trend against the last pulse's recomputed composite."""
        # Previous composite: 12.5 + 4.5 + 10 = 27
        previous = [_pulse(PulseGrade.D)]
        assert calculate_trend([], 50) is PulseTrend.STABLE
        assert calculate_trend(previous, 38) is PulseTrend.IMPROVING
        assert calculate_trend(previous, 37) is PulseTrend.STABLE
        assert calculate_trend(previous, 16) is PulseTrend.DECLINING


class TestGeneratePulse:
    """Tests for generate_performance_pulse."""

    def test_window_filtering(self, sample_scout, make_report):
        """Test that only the last four weeks of this season count."""
        reports = [make_report(submitted_week=w, quality_score=80) for w in (9, 10, 11, 12)]
        reports += [make_report(submitted_week=8), make_report(submitted_season=2024, submitted_week=10)]
        pulse = generate_performance_pulse(
            sample_scout, reports, [], [], [], week=12, season=2025
        )
        assert pulse.period == 3
        assert pulse.reports_submitted == 4
        assert pulse.report_quality_avg == 80
        assert pulse.accuracy_rate == 50
        assert pulse.grade is PulseGrade.B
        assert pulse.trend is PulseTrend.STABLE

    def test_accuracy_history(self, sample_scout):
        """Test that accuracy entries score 100 - 2 x error."""
        history = [
            AccuracyEntry(season=2025, week=3, predicted_ca=100, actual_ca=110),
            AccuracyEntry(season=2025, week=4, predicted_ca=100, actual_ca=100),
        ]
        pulse = generate_performance_pulse(sample_scout, [], history, [], [], 4, 2025)
        assert pulse.accuracy_rate == 90


class TestPulseConsequences:
    """Tests for apply_pulse_consequences."""

    def test_grade_a(self, sample_scout):
        """Test the reputation gain and message for an A grade."""
        pulse = _pulse(PulseGrade.A, period=2)
        scout, messages, history = apply_pulse_consequences(sample_scout, pulse, [], 8, 2025)
        assert scout.reputation == 33
        assert len(messages) == 1
        assert messages[0].id == "pulse_2025_2"
        assert messages[0].type == "performance"
        assert messages[0].title == "Monthly Review: Grade A"
        assert messages[0].body.endswith("\nReputation +3")
        assert not messages[0].action_required
        assert history == (pulse,)

    def test_grade_c_has_no_reputation_line(self, sample_scout):
        """Test that a zero change adds no reputation line."""
        _, messages, _ = apply_pulse_consequences(sample_scout, _pulse(PulseGrade.C), [], 4, 2025)
        assert "Reputation" not in messages[0].body

    def test_second_fail_warns_club_scout(self, make_scout):
        """Test the termination warning on a second F in a season."""
        scout = make_scout(career_path=CareerPath.CLUB)
        previous = [_pulse(PulseGrade.F, period=1)]
        updated, messages, history = apply_pulse_consequences(
            scout, _pulse(PulseGrade.F, period=2), previous, 8, 2025
        )
        assert updated.reputation == 25
        assert [m.title for m in messages] == [
            "Monthly Review: Grade F", "Contract Termination Warning",
        ]
        assert all(m.action_required for m in messages)
        assert len(history) == 2

    def test_independent_scout_not_warned(self, make_scout):
        """Test that independents never get a termination warning."""
        scout = make_scout(career_path=CareerPath.INDEPENDENT, independent_tier=1)
        previous = [_pulse(PulseGrade.F, period=1)]
        _, messages, _ = apply_pulse_consequences(
            scout, _pulse(PulseGrade.F, period=2), previous, 8, 2025
        )
        assert len(messages) == 1

    def test_fails_from_last_season_ignored(self, make_scout):
        """Test that only this season's F grades count."""
        scout = make_scout(career_path=CareerPath.CLUB)
        previous = [_pulse(PulseGrade.F, season=2024)]
        _, messages, _ = apply_pulse_consequences(
            scout, _pulse(PulseGrade.F, period=2), previous, 8, 2025
        )
        assert len(messages) == 1


class TestLegacyProfile:
    """Tests for legacy profile generation and perks."""

    def test_completed_career(self, summary):
        """Test hit rate, season fallback and final tier."""
        career = generate_completed_career(summary, completed_at=1000.0)
        assert career.hit_rate == 0.5
        assert career.seasons_played == 3
        assert career.final_tier == 4
        assert career.completed_scenarios == ()

    def test_first_profile(self, summary):
        """Test aggregates, perks and scenarios after one career."""
        profile = generate_legacy_profile(summary, completed_at=1000.0)

        assert profile.id == "legacy-1000000"
        assert profile.total_discoveries == 12
        assert profile.highest_tier_reached == 4
        assert {p.id for p in profile.legacy_perks} == {
            "starting_network", "reputation_head_start", "regional_memory",
            "financial_cushion", "sharp_eye",
        }
        assert profile.unlocked_scenarios == (
            "the_rebuild", "moneyball", "wonderkid_hunter",
            "the_last_season", "zero_to_hero",
        )
        assert has_completed_career(profile)
        assert not has_completed_career(None)

    def test_second_career_prepends(self, summary):
        """Test that the newest career comes first and unlocks stack."""
        from dataclasses import replace

        first = generate_legacy_profile(summary, completed_at=1000.0)
        second_summary = replace(summary, specialization=Specialization.DATA, total_seasons=5)
        profile = generate_legacy_profile(second_summary, first, completed_at=2000.0)

        assert profile.id == first.id
        assert len(profile.completed_careers) == 2
        assert profile.completed_careers[0].specialization is Specialization.DATA
        assert profile.total_seasons_played == 8
        assert "iron_constitution" in {p.id for p in profile.legacy_perks}
        assert "rivalry" in profile.unlocked_scenarios
        assert get_used_specializations(profile) == [Specialization.DATA, Specialization.YOUTH]

    def test_apply_perks(self, summary):
        """Test that only three unlocked perks apply."""
        profile = generate_legacy_profile(summary, completed_at=1000.0)
        application = apply_legacy_perks(profile, [
            "reputation_head_start", "sharp_eye", "regional_memory", "financial_cushion",
        ])
        assert application.reputation_bonus == 10
        assert application.skill_bonuses == {"potential_assessment": 2}
        assert application.knowledge_retain_percent == 25
        assert application.budget_bonus_percent == 0

    def test_locked_perk_ignored(self, summary):
        """Test that a perk the profile has not unlocked does nothing."""
        profile = generate_legacy_profile(summary, completed_at=1000.0)
        assert apply_legacy_perks(profile, ["talent_magnet"]).reputation_bonus == 0

    def test_available_perks(self, summary):
        """Test that every perk is listed with its unlock state."""
        assert all(not unlocked for _, unlocked in get_available_perks(None))
        profile = generate_legacy_profile(summary, completed_at=1000.0)
        listed = get_available_perks(profile)
        assert len(listed) == len(LEGACY_PERK_DEFINITIONS)
        assert sum(1 for _, unlocked in listed if unlocked) == 5

    def test_scenarios_keep_existing(self):
        """Test that already-unlocked scenarios are preserved."""
        profile = LegacyProfile(id="x", unlocked_scenarios=("custom",))
        assert check_scenario_unlocks(profile) == ("custom",)
        assert "rivalry" in get_scenario_unlock_descriptions()

    def test_dict_round_trip(self, summary):
        """Test that a profile survives to_dict and from_dict."""
        profile = generate_legacy_profile(summary, completed_at=1000.0)
        assert LegacyProfile.from_dict(profile.to_dict()) == profile

    def test_newer_schema_rejected(self):
        """Test that a newer schema version raises ValueError."""
        with pytest.raises(ValueError, match="newer than supported"):
            LegacyProfile.from_dict({"schema_version": 99, "id": "x", "completed_careers": []})

    def test_missing_field_rejected(self):
        """Test that a missing required field raises ValueError."""
        with pytest.raises(ValueError, match="missing field"):
            LegacyProfile.from_dict({"id": "x"})
