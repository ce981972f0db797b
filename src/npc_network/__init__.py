"""
NPC Scouting Network.

Tier-4+ scouts hire NPC scouts, assign them to country territories and
receive coarse weekly reports from them.

Usage:
    from npc_network import (
        generate_npc_scout_roster,
        generate_territories,
        assign_territory,
        process_npc_scouting_week,
    )

Example:
    roster = generate_npc_scout_roster(rng, scout, count=3)
    territories = generate_territories(["england", "spain"], leagues)
    npc, territory = assign_territory(roster[0], territories[0])
    result = process_npc_scouting_week(rng, npc, territory, players, week=5, season=2025)
"""

from npc_network.models import (
    AttributeReading,
    NPCReportEvaluation,
    NPCScout,
    NPCScoutingWeekResult,
    NPCScoutReport,
    Territory,
)
from npc_network.roster import generate_npc_scout_roster
from npc_network.territories import (
    assign_territory,
    generate_territories,
    unassign_territory,
)
from npc_network.scouting_week import (
    OBSERVABLE_ATTRIBUTES,
    calculate_npc_report_quality,
    evaluate_npc_report,
    process_npc_scouting_week,
    rest_npc_scout,
)

__all__ = [
    'AttributeReading',
    'NPCReportEvaluation',
    'NPCScout',
    'NPCScoutingWeekResult',
    'NPCScoutReport',
    'Territory',
    'generate_npc_scout_roster',
    'assign_territory',
    'generate_territories',
    'unassign_territory',
    'OBSERVABLE_ATTRIBUTES',
    'calculate_npc_report_quality',
    'evaluate_npc_report',
    'process_npc_scouting_week',
    'rest_npc_scout',
]
