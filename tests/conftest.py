"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Seeded and scripted random sources
- Sample scouts, players, clubs and reports
"""

import sys
from pathlib import Path

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"


def pytest_configure(config):
    """Configure pytest - runs very early in startup.

    src/ must come first so engine packages are never shadowed by the
    same-named test directories; tests/ follows so mocks/ is importable.
    """
    seen = set()
    new_path = []
    for p in sys.path:
        if p not in seen and p not in (str(src_path), str(tests_path)):
            seen.add(p)
            new_path.append(p)

    new_path.insert(0, str(tests_path))
    new_path.insert(0, str(src_path))

    sys.path[:] = new_path


pytest_configure(None)


from scouting_core.enums import (  # noqa: E402
    ClubResponse,
    ConvictionLevel,
    ScoutingPhilosophy,
    Specialization,
)
from scouting_core.models import Club, Player, Scout, ScoutReport  # noqa: E402
from scouting_core.random_source import SeededRandomSource  # noqa: E402


# ============================================================================
# RANDOM SOURCE FIXTURES
# ============================================================================

@pytest.fixture
def rng():
    """Seeded random source; same seed, same draws."""
    return SeededRandomSource(seed=42)


# ============================================================================
# SCOUT / WORLD FIXTURES
# ============================================================================

@pytest.fixture
def make_scout():
    """Factory for scouts with sensible defaults."""
    def _make(**overrides):
        values = {
            "id": "scout_1",
            "first_name": "Alex",
            "last_name": "Morgan",
            "reputation": 30.0,
            "career_tier": 1,
            "primary_specialization": Specialization.YOUTH,
            "skills": {"player_judgment": 8, "potential_assessment": 7},
            "attributes": {"networking": 10, "persuasion": 10},
        }
        values.update(overrides)
        return Scout(**values)
    return _make


@pytest.fixture
def sample_scout(make_scout):
    return make_scout()


@pytest.fixture
def make_report():
    """Factory for scout reports."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        values = {
            "id": f"report_{counter['n']}",
            "scout_id": "scout_1",
            "player_id": f"player_{counter['n']}",
            "submitted_season": 2025,
            "submitted_week": 10,
            "quality_score": 70,
            "conviction": ConvictionLevel.RECOMMEND,
            "club_response": None,
        }
        values.update(overrides)
        return ScoutReport(**values)
    return _make


@pytest.fixture
def make_player():
    """Factory for players with a full set of observable attributes."""
    def _make(**overrides):
        values = {
            "id": "player_1",
            "first_name": "Tom",
            "last_name": "Reed",
            "age": 24,
            "current_ability": 110,
            "potential_ability": 130,
            "position": "CM",
            "club_id": "club_a",
            "attributes": {
                "first_touch": 12, "passing": 13, "dribbling": 11, "shooting": 10,
                "heading": 9, "pace": 14, "strength": 12, "stamina": 15,
                "agility": 13, "composure": 11, "positioning": 12, "work_rate": 16,
                "decision_making": 12, "off_the_ball": 11, "pressing": 14,
                "defensive_awareness": 10,
            },
        }
        values.update(overrides)
        return Player(**values)
    return _make


@pytest.fixture
def players(make_player):
    """Eight players keyed by id."""
    roster = [
        make_player(id=f"player_{i}", age=17 + i, current_ability=80 + i * 10,
                    potential_ability=120 + i * 8, club_id=f"club_{i % 3}")
        for i in range(8)
    ]
    return {p.id: p for p in roster}


@pytest.fixture
def clubs():
    """Clubs spread across the reputation range, keyed by id."""
    roster = [
        Club(id="club_low", name="Harbour Town", reputation=5,
             scouting_philosophy=ScoutingPhilosophy.ACADEMY_FIRST),
        Club(id="club_mid_youth", name="Vale Rovers", reputation=25,
             scouting_philosophy=ScoutingPhilosophy.ACADEMY_FIRST),
        Club(id="club_mid_win", name="Castle United", reputation=30,
             scouting_philosophy=ScoutingPhilosophy.WIN_NOW),
        Club(id="club_upper", name="Northbridge City", reputation=50,
             scouting_philosophy=ScoutingPhilosophy.MARKET_SMART),
        Club(id="club_elite", name="Royal Athletic", reputation=85,
             scouting_philosophy=ScoutingPhilosophy.GLOBAL_RECRUITER),
    ]
    return {c.id: c for c in roster}


@pytest.fixture
def signed_table_pound(make_report):
    """A quality-80 table-pound report the club signed."""
    return make_report(
        quality_score=80,
        conviction=ConvictionLevel.TABLE_POUND,
        club_response=ClubResponse.SIGNED,
    )
