"""
Tests for the reputation ledger.
"""

import pytest

from career_progression.reputation import (
    DiscoveryCredit,
    FailedSigning,
    ReportSubmitted,
    SeasonEnd,
    SuccessfulSigning,
    TablePoundFailure,
    TablePoundSuccess,
    apply_reputation_events,
    calculate_reputation_delta,
    update_reputation,
)
from scouting_core.enums import ConvictionLevel, SeasonRating, WonderkidTier


class TestReputationDeltas:
    """Tests for per-event reputation deltas."""

    def test_report_submitted_scales_with_quality(self):
        """Test that report deltas run 0.5 at quality 0 to 2.0 at quality 100."""
        assert ReportSubmitted(quality=0).calculate_delta() == pytest.approx(0.5)
        assert ReportSubmitted(quality=100).calculate_delta() == pytest.approx(2.0)
        assert ReportSubmitted(quality=60).calculate_delta() == pytest.approx(1.4)

    @pytest.mark.parametrize("conviction,expected", [
        (ConvictionLevel.NOTE, 1.0),
        (ConvictionLevel.RECOMMEND, 3.0),
        (ConvictionLevel.STRONG_RECOMMEND, 5.0),
        (ConvictionLevel.TABLE_POUND, 10.0),
    ])
    def test_successful_signing_neutral_performance(self, conviction, expected):
        """Test signing bases at neutral (50) player performance."""
        assert SuccessfulSigning(conviction).calculate_delta() == pytest.approx(expected)

    def test_successful_signing_performance_scaling(self):
        """Test that a perfect performer adds 25% to the base."""
        event = SuccessfulSigning(ConvictionLevel.TABLE_POUND, player_performance=100)
        assert event.calculate_delta() == pytest.approx(12.5)

    def test_failed_signing_penalties(self):
        """Test that failed table pounds cost the most."""
        assert FailedSigning(ConvictionLevel.NOTE).calculate_delta() == -0.5
        assert FailedSigning(ConvictionLevel.TABLE_POUND).calculate_delta() == -15.0

    def test_discovery_credit(self):
        """Test discovery credit by wonderkid tier."""
        assert DiscoveryCredit(WonderkidTier.JOURNEYMAN).calculate_delta() == 2.0
        assert DiscoveryCredit(WonderkidTier.GENERATIONAL).calculate_delta() == 30.0

    def test_table_pound_events(self):
        """Test table-pound success and failure deltas."""
        assert TablePoundSuccess().calculate_delta() == 5.0
        assert TablePoundFailure().calculate_delta() == -10.0

    def test_season_end(self):
        """Test season-end deltas for each rating."""
        assert SeasonEnd(SeasonRating.EXCELLENT).calculate_delta() == 5.0
        assert SeasonEnd(SeasonRating.ACCEPTABLE).calculate_delta() == 0.0
        assert SeasonEnd(SeasonRating.POOR).calculate_delta() == -5.0

    def test_non_event_raises(self):
        """Test that a non-event raises TypeError."""
        with pytest.raises(TypeError, match="Expected ReputationEvent"):
            calculate_reputation_delta("signing")


class TestUpdateReputation:
    """Tests for update_reputation and apply_reputation_events."""

    def test_update_returns_new_scout(self, sample_scout):
        """Test that the input scout is not modified."""
        updated = update_reputation(sample_scout, TablePoundSuccess())
        assert updated.reputation == 35.0
        assert sample_scout.reputation == 30.0

    def test_clamped_at_upper_bound(self, make_scout):
        """Test that reputation never exceeds 100."""
        scout = make_scout(reputation=95)
        assert update_reputation(scout, DiscoveryCredit(WonderkidTier.GENERATIONAL)).reputation == 100

    def test_clamped_at_lower_bound(self, make_scout):
        """Test that reputation never drops below 0."""
        scout = make_scout(reputation=4)
        assert update_reputation(scout, FailedSigning(ConvictionLevel.TABLE_POUND)).reputation == 0

    def test_only_reputation_changes(self, sample_scout):
        """Test that other scout fields are untouched."""
        updated = update_reputation(sample_scout, SeasonEnd(SeasonRating.GOOD))
        assert updated.career_tier == sample_scout.career_tier
        assert updated.club_trust == sample_scout.club_trust

    def test_events_applied_in_order_with_clamping(self, make_scout):
        """Test that clamping happens after every event, not once at the end."""
        scout = make_scout(reputation=98)
        events = [DiscoveryCredit(WonderkidTier.QUALITY_PRO), TablePoundFailure()]
        # 98 + 5 clamps to 100, then -10 gives 90 (not 93)
        assert apply_reputation_events(scout, events).reputation == 90
