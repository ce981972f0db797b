"""
Tests for shared records, enums and numeric helpers.
"""

import pytest

from scouting_core.enums import (
    ClubResponse,
    ConvictionLevel,
    ReviewOutcome,
    ScoutingPhilosophy,
    SeasonRating,
    Specialization,
)
from scouting_core.models import Club, FinancialRecord, RetainerContract, Scout
from scouting_core.enums import RetainerStatus
from scouting_core.utils import average, clamp, round_half_up, round_to


class TestRounding:
    """Tests for round_half_up and round_to."""

    def test_half_rounds_up(self):
        """Test that .5 rounds toward +infinity, not to even."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_negative_half_rounds_toward_zero(self):
        """Test that -2.5 rounds to -2."""
        assert round_half_up(-2.5) == -2

    def test_round_to_places(self):
        """Test rounding to three places."""
        assert round_to(60.8333333, 3) == pytest.approx(60.833)

    def test_clamp_and_average(self):
        """Test clamp bounds and the empty average."""
        assert clamp(120, 0, 100) == 100
        assert clamp(-3, 0, 100) == 0
        assert average([]) == 0.0
        assert average([2, 4]) == 3.0


class TestScout:
    """Tests for the Scout record."""

    def test_defaults(self, sample_scout):
        """Test default counters and relationship state."""
        assert sample_scout.reports_submitted == 0
        assert sample_scout.club_trust == 50.0
        assert sample_scout.board_directives == ()
        assert sample_scout.full_name == "Alex Morgan"

    def test_reputation_out_of_range(self, make_scout):
        """Test that reputation above 100 raises ValueError."""
        with pytest.raises(ValueError, match="reputation"):
            make_scout(reputation=101)

    def test_tier_out_of_range(self, make_scout):
        """Test that career tier 6 raises ValueError."""
        with pytest.raises(ValueError, match="career_tier"):
            make_scout(career_tier=6)

    def test_scout_is_frozen(self, sample_scout):
        """Test that scouts cannot be mutated in place."""
        with pytest.raises(AttributeError):
            sample_scout.reputation = 40


class TestReportAndClub:
    """Tests for ScoutReport and Club validation."""

    def test_report_quality_bounds(self, make_report):
        """Test that a quality of 0 raises ValueError."""
        with pytest.raises(ValueError, match="quality_score"):
            make_report(quality_score=0)

    def test_was_signed(self, signed_table_pound, make_report):
        """Test the was_signed convenience property."""
        assert signed_table_pound.was_signed is True
        assert make_report(club_response=ClubResponse.SHORTLISTED).was_signed is False

    def test_club_reputation_bounds(self):
        """Test that a club reputation below 0 raises ValueError."""
        with pytest.raises(ValueError, match="reputation"):
            Club(id="c", name="C", reputation=-1,
                 scouting_philosophy=ScoutingPhilosophy.WIN_NOW)


class TestFinancialRecord:
    """Tests for FinancialRecord."""

    def test_active_retainer_count(self):
        """Test that only active retainers are counted."""
        record = FinancialRecord(
            balance=1000,
            retainer_contracts=(
                RetainerContract(id="r1", club_id="a", monthly_fee=200),
                RetainerContract(id="r2", club_id="b", monthly_fee=300,
                                 status=RetainerStatus.PAUSED),
            ),
        )
        assert record.active_retainer_count == 1


class TestEnums:
    """Tests for enum helpers."""

    def test_specialization_from_camel_case(self):
        """Test that camelCase first-team parses."""
        assert Specialization.from_string("firstTeam") is Specialization.FIRST_TEAM

    def test_specialization_unknown_raises(self):
        """Test that an unknown specialization raises ValueError."""
        with pytest.raises(ValueError, match="Unknown specialization"):
            Specialization.from_string("goalkeeping")

    def test_conviction_is_bold(self):
        """Test which conviction levels count as bold."""
        assert ConvictionLevel.TABLE_POUND.is_bold
        assert ConvictionLevel.STRONG_RECOMMEND.is_bold
        assert not ConvictionLevel.RECOMMEND.is_bold

    def test_review_outcome_maps_to_rating(self):
        """Test the review outcome to season rating mapping."""
        assert ReviewOutcome.PROMOTED.to_season_rating() is SeasonRating.EXCELLENT
        assert ReviewOutcome.FIRED.to_season_rating() is SeasonRating.POOR

    def test_philosophy_affinity(self):
        """Test that academy-first clubs prefer youth scouts first."""
        assert ScoutingPhilosophy.ACADEMY_FIRST.get_affinity()[0] is Specialization.YOUTH
