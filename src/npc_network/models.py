"""
NPC scouting network records.

NPCScout quality is on a 1-5 scale (not 1-20). Territory.assigned_scout_ids
is the canonical assignment list; NPCScout.territory_id mirrors it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from scouting_core.enums import NPCRecommendation, ReportQualityTier, Specialization


@dataclass(frozen=True)
class NPCScout:
    """
    Hired NPC scout (tier 4+ only).

    Attributes:
        id: NPC identifier
        first_name: Given name
        last_name: Family name
        quality: Ability on a 1-5 scale
        specialization: Scouting focus
        salary: Weekly salary
        fatigue: Current fatigue (0-100)
        morale: Current morale (1-10)
        reports_submitted: Cumulative reports
        territory_id: Assigned territory, if any
    """

    id: str
    first_name: str
    last_name: str
    quality: int
    specialization: Specialization
    salary: int
    fatigue: float = 0.0
    morale: int = 7
    reports_submitted: int = 0
    territory_id: Optional[str] = None

    def __post_init__(self):
        """Validate NPC scout values."""
        if not 1 <= self.quality <= 5:
            raise ValueError(f"quality must be 1-5, got {self.quality}")
        if not 0 <= self.fatigue <= 100:
            raise ValueError(f"fatigue must be 0-100, got {self.fatigue}")
        if not 1 <= self.morale <= 10:
            raise ValueError(f"morale must be 1-10, got {self.morale}")


@dataclass(frozen=True)
class Territory:
    """
    Country-scoped grouping of leagues.

    max_scouts is a soft capacity; assignment does not enforce it.
    """

    id: str
    name: str
    country: str
    league_ids: Tuple[str, ...]
    max_scouts: int
    assigned_scout_ids: Tuple[str, ...] = ()

    @property
    def has_capacity(self) -> bool:
        return len(self.assigned_scout_ids) < self.max_scouts


@dataclass(frozen=True)
class AttributeReading:
    """One simplified attribute reading. perceived_value is 1-20, confidence 0.1-0.9."""

    attribute: str
    perceived_value: int
    confidence: float


@dataclass(frozen=True)
class NPCScoutReport:
    """
    Report produced autonomously by an NPC scout.

    Attributes:
        id: Report identifier
        npc_scout_id: Author
        player_id: Player observed
        week: Week observed
        season: Season observed
        quality: Report quality (1-100)
        readings: 3-6 simplified attribute readings
        recommendation: Pursue, shortlist or monitor
        summary: Short templated narrative
        reviewed: Whether the player scout has reviewed it
    """

    id: str
    npc_scout_id: str
    player_id: str
    week: int
    season: int
    quality: int
    readings: Tuple[AttributeReading, ...]
    recommendation: NPCRecommendation
    summary: str
    reviewed: bool = False

    def __post_init__(self):
        if not 1 <= self.quality <= 100:
            raise ValueError(f"quality must be 1-100, got {self.quality}")


@dataclass(frozen=True)
class NPCReportEvaluation:
    """Quality tier of an NPC report and whether it is worth acting on."""

    useful: bool
    quality_tier: ReportQualityTier


@dataclass(frozen=True)
class NPCScoutingWeekResult:
    """Updated NPC scout and the reports produced in one weekly pass."""

    npc_scout: NPCScout
    reports: Tuple[NPCScoutReport, ...]
