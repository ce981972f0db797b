"""
Territory generation and NPC assignment.

One territory per country. Capacity is one NPC scout per two leagues,
minimum one.
"""

import math
from dataclasses import replace
from typing import Iterable, List, Tuple

from scouting_core.models import League
from npc_network.models import NPCScout, Territory


def format_country_name(country_key: str) -> str:
    """Title-case an underscore country key: "costa_rica" -> "Costa Rica"."""
    return " ".join(
        word[:1].upper() + word[1:] for word in country_key.split("_")
    )


def generate_territories(countries: Iterable[str], leagues: Iterable[League]) -> List[Territory]:
    """
    Create one territory per country holding that country's leagues.

    Args:
        countries: Country keys active in the world
        leagues: Leagues with their country keys

    Returns:
        Territories in the order of countries
    """
    leagues = list(leagues)
    territories = []
    for country_key in countries:
        league_ids = tuple(l.id for l in leagues if l.country_key == country_key)
        id_suffix = "_".join(country_key.split()).lower()
        territories.append(Territory(
            id=f"territory_{id_suffix}",
            name=format_country_name(country_key),
            country=country_key,
            league_ids=league_ids,
            max_scouts=max(1, math.ceil(len(league_ids) / 2)),
            assigned_scout_ids=(),
        ))
    return territories


def assign_territory(npc_scout: NPCScout, territory: Territory) -> Tuple[NPCScout, Territory]:
    """
    Assign an NPC scout to a territory, updating both sides.

    Capacity is not enforced and any previous territory is not cleared;
    callers use unassign_territory() first when reassigning.

    Returns:
        Tuple of (updated NPC scout, updated territory)
    """
    updated_scout = replace(npc_scout, territory_id=territory.id)
    if npc_scout.id in territory.assigned_scout_ids:
        return updated_scout, territory
    updated_territory = replace(
        territory, assigned_scout_ids=territory.assigned_scout_ids + (npc_scout.id,)
    )
    return updated_scout, updated_territory


def unassign_territory(npc_scout: NPCScout, territory: Territory) -> Tuple[NPCScout, Territory]:
    """Remove an NPC scout from a territory, updating both sides."""
    updated_territory = replace(
        territory,
        assigned_scout_ids=tuple(
            sid for sid in territory.assigned_scout_ids if sid != npc_scout.id
        ),
    )
    updated_scout = npc_scout
    if npc_scout.territory_id == territory.id:
        updated_scout = replace(npc_scout, territory_id=None)
    return updated_scout, updated_territory
