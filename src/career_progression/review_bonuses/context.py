"""
Tier review context.

Extra end-of-season data for tier 3-5 reviews. Every field is optional;
each tier bonus reads only the fields relevant to it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from club_relations.models import BoardDirective, ManagerRelationship
from npc_network.models import NPCScout


@dataclass(frozen=True)
class TierReviewContext:
    """
    Context for tier-specific review bonuses.

    Attributes:
        countries_scouted_this_season: Countries reports came from (tier 3)
        home_country: Scout's home country (tier 3)
        npc_scouts: NPC scouts managed this season (tier 4)
        manager_relationship: Manager relationship at season end (tier 4)
        directives_fulfilled: Manager directives fulfilled (tier 4)
        directives_issued: Manager directives issued (tier 4)
        board_directives: Board directives active this season (tier 5)
        department_report_count: NPC reports across the department (tier 5)
        department_average_quality: Average NPC report quality, 0-100 (tier 5)
    """

    countries_scouted_this_season: Tuple[str, ...] = ()
    home_country: Optional[str] = None
    npc_scouts: Tuple[NPCScout, ...] = ()
    manager_relationship: Optional[ManagerRelationship] = None
    directives_fulfilled: int = 0
    directives_issued: int = 0
    board_directives: Tuple[BoardDirective, ...] = ()
    department_report_count: int = 0
    department_average_quality: float = 0.0

    def __post_init__(self):
        if self.directives_fulfilled < 0 or self.directives_issued < 0:
            raise ValueError("directive counts must be non-negative")
