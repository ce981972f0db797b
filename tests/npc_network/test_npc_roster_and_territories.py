"""
Tests for NPC roster generation and territory assignment.
"""

import pytest

from mocks.scripted_random_source import ScriptedRandomSource
from npc_network.models import NPCScout, Territory
from npc_network.roster import (
    FIRST_NAMES,
    LAST_NAMES,
    QUALITY_BY_TIER,
    SALARY_BY_QUALITY,
    generate_npc_scout_roster,
)
from npc_network.territories import (
    assign_territory,
    format_country_name,
    generate_territories,
    unassign_territory,
)
from scouting_core.enums import Specialization
from scouting_core.models import League


class TestGenerateRoster:
    """Tests for generate_npc_scout_roster."""

    def test_zero_count(self, rng, sample_scout):
        """Test that a non-positive count yields an empty roster."""
        assert generate_npc_scout_roster(rng, sample_scout, 0) == []

    def test_scripted_draws(self, make_scout):
        """Test draw order: names, quality, specialization, salary, id, morale."""
        scout = make_scout(career_tier=5)
        rng = ScriptedRandomSource(default=0.0)
        [npc] = generate_npc_scout_roster(rng, scout, 1)

        assert npc.first_name == FIRST_NAMES[0]
        assert npc.last_name == LAST_NAMES[0]
        assert npc.quality == 3
        assert npc.specialization is Specialization.YOUTH
        assert npc.salary == 1000
        assert npc.id == f"npc_{format(100000, 'x')}"
        assert npc.morale == 6
        assert npc.fatigue == 0.0
        assert npc.territory_id is None
        assert rng.uniform_draws == 7

    @pytest.mark.parametrize("tier", [1, 2, 3, 4, 5])
    def test_quality_and_salary_bands(self, rng, make_scout, tier):
        """Test that every NPC lands in its tier's quality and salary bands."""
        roster = generate_npc_scout_roster(rng, make_scout(career_tier=tier), 25)
        low, high = QUALITY_BY_TIER[tier]
        for npc in roster:
            assert low <= npc.quality <= high
            salary_low, salary_high = SALARY_BY_QUALITY[npc.quality]
            assert salary_low <= npc.salary <= salary_high
            assert 6 <= npc.morale <= 9


class TestTerritories:
    """Tests for territory generation and assignment."""

    @pytest.fixture
    def leagues(self):
        return [
            League(id="eng_1", name="Premier", country_key="england"),
            League(id="eng_2", name="Championship", country_key="england"),
            League(id="eng_3", name="League One", country_key="england"),
            League(id="cr_1", name="Primera", country_key="costa_rica"),
        ]

    @pytest.fixture
    def npc(self):
        return NPCScout(id="npc_1", first_name="Sven", last_name="Bauer", quality=3,
                        specialization=Specialization.REGIONAL, salary=1200)

    def test_format_country_name(self):
        """Test underscore keys are title-cased."""
        assert format_country_name("costa_rica") == "Costa Rica"
        assert format_country_name("england") == "England"

    def test_one_territory_per_country(self, leagues):
        """Test ids, league grouping and capacity."""
        england, costa_rica, empty = generate_territories(
            ["england", "costa_rica", "iceland"], leagues
        )
        assert england.id == "territory_england"
        assert england.league_ids == ("eng_1", "eng_2", "eng_3")
        assert england.max_scouts == 2
        assert costa_rica.name == "Costa Rica"
        assert costa_rica.max_scouts == 1
        assert empty.league_ids == ()
        assert empty.max_scouts == 1

    def test_assign_updates_both_sides(self, npc, leagues):
        """Test that assignment mirrors the id on scout and territory."""
        territory = generate_territories(["costa_rica"], leagues)[0]
        scout, updated = assign_territory(npc, territory)
        assert scout.territory_id == territory.id
        assert updated.assigned_scout_ids == ("npc_1",)
        assert not updated.has_capacity

    def test_assign_twice_no_duplicate(self, npc, leagues):
        """Test that reassigning the same NPC does not duplicate its id."""
        territory = generate_territories(["england"], leagues)[0]
        scout, territory = assign_territory(npc, territory)
        scout, territory = assign_territory(scout, territory)
        assert territory.assigned_scout_ids == ("npc_1",)

    def test_capacity_not_enforced(self, npc):
        """Test that a full territory still accepts assignments."""
        territory = Territory(id="t", name="T", country="t", league_ids=(),
                              max_scouts=1, assigned_scout_ids=("other",))
        _, updated = assign_territory(npc, territory)
        assert updated.assigned_scout_ids == ("other", "npc_1")

    def test_unassign(self, npc, leagues):
        """Test that unassigning clears both sides."""
        territory = generate_territories(["england"], leagues)[0]
        scout, territory = assign_territory(npc, territory)
        scout, territory = unassign_territory(scout, territory)
        assert scout.territory_id is None
        assert territory.assigned_scout_ids == ()
