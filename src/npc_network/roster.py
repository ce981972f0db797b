"""
NPC scout roster generation.

Higher-tier player scouts can hire better NPC scouts: the quality band
widens upward with career tier, and salary follows quality.
"""

import logging
from typing import List

from scouting_core.enums import Specialization
from scouting_core.models import Scout
from scouting_core.random_source import RandomSource
from npc_network.models import NPCScout

logger = logging.getLogger(__name__)

FIRST_NAMES = (
    "Marco", "Luca", "Diego", "João", "Alejandro", "Rafaël", "Tomáš",
    "Sven", "Patrick", "Henrik", "Mihail", "Andrei", "Kwame", "Ibrahima",
    "Carlos", "Takashi", "Yusuf", "Ander", "Florian", "Matteo", "Emeka",
    "Stefan", "Viktor", "Ezra", "Rúben", "Lars", "Tariq", "Noel", "Björn",
)

LAST_NAMES = (
    "Santos", "Müller", "García", "Novák", "Andersen", "Okonkwo", "Ramos",
    "Eriksen", "Petrov", "López", "Kone", "Bauer", "Tanaka", "Öztürk",
    "Fernández", "Johansson", "Diallo", "Krejčí", "Reyes", "Svensson",
    "Adeyemi", "Hoffmann", "Nascimento", "Lindström", "Mbeki", "Watanabe",
    "Costa", "Kristiansen", "Yilmaz", "Papadopoulos",
)

# (min, max) NPC quality by player scout career tier
QUALITY_BY_TIER = {
    1: (1, 1),
    2: (1, 2),
    3: (1, 3),
    4: (2, 4),
    5: (3, 5),
}

# (min, max) weekly salary by NPC quality
SALARY_BY_QUALITY = {
    1: (200, 500),
    2: (500, 1000),
    3: (1000, 2000),
    4: (2000, 4000),
    5: (4000, 8000),
}

ALL_SPECIALIZATIONS = tuple(Specialization)


def generate_npc_scout_roster(rng: RandomSource, scout: Scout, count: int) -> List[NPCScout]:
    """
    Generate NPC scouts suited to the player scout's tier.

    Args:
        rng: Random source for this tick
        scout: Player scout (career tier sets the quality band)
        count: Number of NPC scouts to generate

    Returns:
        New NPC scouts, unassigned, with fatigue 0 and morale 6-9
    """
    if count <= 0:
        return []

    tier = max(1, min(5, scout.career_tier))
    quality_min, quality_max = QUALITY_BY_TIER[tier]

    roster = []
    for _ in range(count):
        first_name = rng.pick(FIRST_NAMES)
        last_name = rng.pick(LAST_NAMES)
        quality = rng.next_int(quality_min, quality_max)
        specialization = rng.pick(ALL_SPECIALIZATIONS)

        salary_min, salary_max = SALARY_BY_QUALITY[quality]
        salary = rng.next_int(salary_min, salary_max)

        id_suffix = format(rng.next_int(100000, 999999), "x")

        roster.append(NPCScout(
            id=f"npc_{id_suffix}",
            first_name=first_name,
            last_name=last_name,
            quality=quality,
            specialization=specialization,
            salary=salary,
            fatigue=0.0,
            morale=rng.next_int(6, 9),
            reports_submitted=0,
            territory_id=None,
        ))

    logger.info(f"Generated {len(roster)} NPC scouts for tier {tier} scout {scout.id}")
    return roster
