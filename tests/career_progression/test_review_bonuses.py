"""
Tests for the tier review bonus chain.
"""

import pytest

from career_progression.performance_review import calculate_performance_review
from career_progression.review_bonuses import (
    DepartmentBonus,
    InternationalCoverageBonus,
    NetworkManagementBonus,
    TierReviewContext,
    apply_bonus_chain,
    create_default_bonus_chain,
)
from club_relations.models import BoardDirective, ManagerRelationship
from npc_network.models import NPCScout
from scouting_core.enums import BoardDirectiveType, Specialization


def _npc(npc_id, morale=7, reports=0):
    return NPCScout(
        id=npc_id, first_name="Sam", last_name="Hale", quality=3,
        specialization=Specialization.REGIONAL, salary=400,
        morale=morale, reports_submitted=reports,
    )


def _directive(directive_id, completed, penalty=0):
    return BoardDirective(
        id=directive_id, type=BoardDirectiveType.CUT_COSTS,
        description="Reduce spend", deadline=2025,
        completed=completed, penalty_reputation=penalty,
    )


class TestInternationalCoverageBonus:
    """Tests for InternationalCoverageBonus."""

    @pytest.fixture
    def bonus(self):
        return InternationalCoverageBonus()

    def test_no_countries_scores_zero(self, bonus):
        """Test that an empty season earns nothing."""
        assert bonus.calculate(TierReviewContext()) == 0.0

    def test_points_per_international_country(self, bonus):
        """Test +2 per non-home country."""
        context = TierReviewContext(
            countries_scouted_this_season=("england", "france", "spain"),
            home_country="england",
        )
        assert bonus.calculate(context) == 4.0

    def test_capped_at_ten(self, bonus):
        """Test that breadth is capped at +10."""
        context = TierReviewContext(
            countries_scouted_this_season=("a", "b", "c", "d", "e", "f", "g"),
            home_country="a",
        )
        assert bonus.calculate(context) == 10.0

    def test_single_foreign_country(self, bonus):
        """Test that one foreign country nets +2 - 5."""
        context = TierReviewContext(
            countries_scouted_this_season=("france", "france"),
            home_country="england",
        )
        assert bonus.calculate(context) == -3.0

    def test_home_only(self, bonus):
        """Test that a home-only season costs 10."""
        context = TierReviewContext(
            countries_scouted_this_season=("england",),
            home_country="england",
        )
        assert bonus.calculate(context) == -10.0


class TestNetworkManagementBonus:
    """Tests for NetworkManagementBonus."""

    def test_full_marks(self):
        """Test that a perfect network and manager earn 15."""
        context = TierReviewContext(
            npc_scouts=(_npc("n1", morale=10, reports=5), _npc("n2", morale=10, reports=9)),
            manager_relationship=ManagerRelationship(manager_name="Boss", trust=100),
            directives_fulfilled=2,
            directives_issued=2,
        )
        assert NetworkManagementBonus().calculate(context) == pytest.approx(15.0)

    def test_partial_network(self):
        """Test morale and volume scoring for a half-busy network."""
        context = TierReviewContext(npc_scouts=(_npc("n1", morale=5, reports=2),))
        # morale 5/10*4 = 2, volume 2/5*4 = 1.6
        assert NetworkManagementBonus().calculate(context) == pytest.approx(3.6)

    def test_no_directives_issued(self):
        """Test that a manager with no directives scores trust only."""
        context = TierReviewContext(
            manager_relationship=ManagerRelationship(manager_name="Boss", trust=50),
        )
        assert NetworkManagementBonus().calculate(context) == pytest.approx(2.0)


class TestDepartmentBonus:
    """Tests for DepartmentBonus."""

    def test_all_completed_with_output(self):
        """Test completion plus full department output."""
        context = TierReviewContext(
            board_directives=(_directive("d1", True), _directive("d2", True)),
            department_report_count=20,
            department_average_quality=70,
        )
        assert DepartmentBonus().calculate(context) == 20.0

    def test_failed_directives_penalised(self):
        """Test the completion bonus less the failure penalty."""
        context = TierReviewContext(
            board_directives=(_directive("d1", True), _directive("d2", False, penalty=12)),
        )
        # round(0.5 * 12) = 6, penalty round(12 / 5) = 2
        assert DepartmentBonus().calculate(context) == 4.0

    def test_failure_penalty_capped(self):
        """Test that the failure penalty never exceeds 10."""
        context = TierReviewContext(
            board_directives=(_directive("d1", False, penalty=40), _directive("d2", False, penalty=40)),
        )
        assert DepartmentBonus().board_points(context) == -10.0


class TestApplyBonusChain:
    """Tests for apply_bonus_chain."""

    def test_no_context_no_bonus(self):
        """Test that a missing context skips every bonus."""
        assert apply_bonus_chain(50.0, 5, None) == (50.0, [])

    def test_tier_three_only_international(self):
        """Test that a tier 3 scout only receives the international bonus."""
        context = TierReviewContext(
            countries_scouted_this_season=("england", "france"),
            home_country="england",
            manager_relationship=ManagerRelationship(manager_name="Boss", trust=100),
        )
        score, results = apply_bonus_chain(50.0, 3, context)
        assert [r["bonus_name"] for r in results] == ["international_coverage"]
        assert score == 52.0

    def test_bonuses_are_clamped(self):
        """Test that a raw bonus outside its bounds is clamped."""
        context = TierReviewContext(
            board_directives=(_directive("d1", False, penalty=100),),
        )
        _, results = apply_bonus_chain(50.0, 5, context, [DepartmentBonus()])
        assert results[0]["points"] == -10.0

    def test_default_chain_order(self):
        """Test the default chain runs tier 3, 4, then 5."""
        assert [b.min_tier for b in create_default_bonus_chain()] == [3, 4, 5]

    def test_review_total_clamped_to_hundred(self, make_scout, make_report):
        """Test that stacked bonuses cannot push the review past 100."""
        from scouting_core.enums import ClubResponse, ConvictionLevel

        scout = make_scout(career_tier=5)
        reports = [
            make_report(quality_score=95, conviction=ConvictionLevel.TABLE_POUND,
                        club_response=ClubResponse.SIGNED)
            for _ in range(10)
        ]
        context = TierReviewContext(
            countries_scouted_this_season=("a", "b", "c", "d", "e", "f"),
            home_country="a",
            department_report_count=20,
            department_average_quality=80,
        )
        review = calculate_performance_review(scout, reports, 2025, context)
        assert review.score == 100.0
        assert len(review.breakdown) == 7
