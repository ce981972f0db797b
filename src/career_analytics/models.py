"""
Career analytics records.

Discovery tracking, monthly performance snapshots, performance pulses
and the legacy profile carried between careers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from scouting_core.enums import Specialization


class PulseGrade(Enum):
    """Monthly performance grade."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def is_failing(self) -> bool:
        return self in (PulseGrade.D, PulseGrade.F)


class PulseTrend(Enum):
    """Direction of the composite score against the previous pulse."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class LegacyPerkType(Enum):
    """What a legacy perk changes at the start of a new career."""

    STARTING_CONTACT = "starting_contact"
    REPUTATION_BOOST = "reputation_boost"
    KNOWLEDGE_RETAIN = "knowledge_retain"
    BUDGET_BONUS = "budget_bonus"
    SKILL_BONUS = "skill_bonus"
    FATIGUE_REDUCTION = "fatigue_reduction"


@dataclass(frozen=True)
class CareerSnapshot:
    """Where a discovered player was at the end of one season."""

    season: int
    club_id: str
    current_ability: int
    position: str
    age: int


@dataclass(frozen=True)
class DiscoveryRecord:
    """
    A player the scout discovered, tracked across seasons.

    Attributes:
        player_id: Discovered player
        discovered_week: Week of discovery
        discovered_season: Season of discovery
        initial_ca: Current ability at discovery
        initial_pa: Potential ability at discovery (the scout's prediction)
        career_snapshots: One snapshot per season, unique by season
        was_wonderkid: Age 21 or under with potential 150+ at discovery
        prediction_accuracy: Latest accuracy score (0-100), None until scored
        placement_week: Week the player was placed at a club, if any
    """

    player_id: str
    discovered_week: int
    discovered_season: int
    initial_ca: int
    initial_pa: int
    career_snapshots: Tuple[CareerSnapshot, ...] = ()
    was_wonderkid: bool = False
    prediction_accuracy: Optional[int] = None
    placement_week: Optional[int] = None


@dataclass(frozen=True)
class AccuracyEntry:
    """One prediction checked against reality, used by the monthly pulse."""

    season: int
    week: int
    predicted_ca: int
    actual_ca: int


@dataclass(frozen=True)
class PerformanceSnapshot:
    """
    Monthly analytics snapshot.

    Attributes:
        season: Season of the snapshot
        week: Week of the snapshot
        accuracy: Average post-transfer rating of rated reports (1 d.p.)
        total_reports: Reports submitted by the scout
        avg_quality: Average report quality (1 d.p.)
        discovery_rate: Unique players / total reports (3 d.p.)
        skills: Copy of the scout's skills
        reputation: Scout reputation at snapshot time
    """

    season: int
    week: int
    accuracy: float
    total_reports: int
    avg_quality: float
    discovery_rate: float
    skills: Dict[str, int] = field(default_factory=dict)
    reputation: float = 0.0


@dataclass(frozen=True)
class PerformancePulse:
    """
    Four-weekly performance pulse.

    Stored values are rounded, so a recomputed composite may differ from
    the one that produced the grade.
    """

    period: int
    season: int
    reports_submitted: int
    report_quality_avg: int
    accuracy_rate: int
    signing_success: int
    fatigue_avg: int
    grade: PulseGrade
    trend: PulseTrend = PulseTrend.STABLE


@dataclass(frozen=True)
class LegacyPerk:
    """A bonus unlocked by past careers and selectable for a new one."""

    id: str
    name: str
    description: str
    type: LegacyPerkType
    value: int
    unlocked_by: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "value": self.value,
            "unlocked_by": self.unlocked_by,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LegacyPerk":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            type=LegacyPerkType(data["type"]),
            value=int(data["value"]),
            unlocked_by=data["unlocked_by"],
        )


@dataclass(frozen=True)
class CareerSummary:
    """
    End-of-career facts the legacy system needs.

    Built by the caller from whatever holds the game state; the legacy
    module does not read game state directly.

    Attributes:
        scout_name: Display name of the scout
        specialization: Primary specialization
        career_tier: Tier at career end
        career_high_tier: Highest tier reached at any point
        successful_finds: Successful finds over the career
        total_reports: All reports submitted over the career
        discovery_count: Discovery records over the career
        total_seasons: Seasons recorded by the legacy score (0 if unknown)
        current_season: Final season played
        legacy_score_total: Legacy score at career end
        countries_scouted: Countries with at least one report
        active_scenario_id: Scenario being played, if any
    """

    scout_name: str
    specialization: Specialization
    career_tier: int
    career_high_tier: int
    successful_finds: int
    total_reports: int
    discovery_count: int
    total_seasons: int
    current_season: int
    legacy_score_total: float
    countries_scouted: int = 0
    active_scenario_id: Optional[str] = None


@dataclass(frozen=True)
class CompletedCareer:
    """Summary of one finished career inside the legacy profile."""

    scout_name: str
    final_tier: int
    seasons_played: int
    total_discoveries: int
    hit_rate: float
    specialization: Specialization
    completed_scenarios: Tuple[str, ...]
    legacy_score_total: float
    completed_at: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scout_name": self.scout_name,
            "final_tier": self.final_tier,
            "seasons_played": self.seasons_played,
            "total_discoveries": self.total_discoveries,
            "hit_rate": self.hit_rate,
            "specialization": self.specialization.value,
            "completed_scenarios": list(self.completed_scenarios),
            "legacy_score_total": self.legacy_score_total,
            "completed_at": self.completed_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompletedCareer":
        return cls(
            scout_name=data["scout_name"],
            final_tier=int(data["final_tier"]),
            seasons_played=int(data["seasons_played"]),
            total_discoveries=int(data["total_discoveries"]),
            hit_rate=float(data["hit_rate"]),
            specialization=Specialization.from_string(data["specialization"]),
            completed_scenarios=tuple(data.get("completed_scenarios", ())),
            legacy_score_total=float(data["legacy_score_total"]),
            completed_at=float(data["completed_at"]),
        )


LEGACY_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class LegacyProfile:
    """
    Cross-career legacy snapshot.

    Serialized with to_dict() and restored with from_dict(); callers own
    storage. completed_careers is newest first.
    """

    id: str
    completed_careers: Tuple[CompletedCareer, ...] = ()
    unlocked_scenarios: Tuple[str, ...] = ()
    legacy_perks: Tuple[LegacyPerk, ...] = ()
    total_discoveries: int = 0
    total_seasons_played: int = 0
    best_hit_rate: float = 0.0
    best_legacy_score: float = 0.0
    highest_tier_reached: int = 0
    schema_version: int = LEGACY_SCHEMA_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dictionary."""
        return {
            "schema_version": self.schema_version,
            "id": self.id,
            "completed_careers": [c.to_dict() for c in self.completed_careers],
            "unlocked_scenarios": list(self.unlocked_scenarios),
            "legacy_perks": [p.to_dict() for p in self.legacy_perks],
            "total_discoveries": self.total_discoveries,
            "total_seasons_played": self.total_seasons_played,
            "best_hit_rate": self.best_hit_rate,
            "best_legacy_score": self.best_legacy_score,
            "highest_tier_reached": self.highest_tier_reached,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LegacyProfile":
        """
        Restore a profile from to_dict() output.

        Raises:
            ValueError: If the schema version is newer than this engine
                understands or required fields are missing
        """
        version = data.get("schema_version", LEGACY_SCHEMA_VERSION)
        if version > LEGACY_SCHEMA_VERSION:
            raise ValueError(
                f"Legacy profile schema {version} is newer than supported "
                f"({LEGACY_SCHEMA_VERSION})"
            )
        try:
            return cls(
                id=data["id"],
                completed_careers=tuple(
                    CompletedCareer.from_dict(c) for c in data["completed_careers"]
                ),
                unlocked_scenarios=tuple(data.get("unlocked_scenarios", ())),
                legacy_perks=tuple(
                    LegacyPerk.from_dict(p) for p in data.get("legacy_perks", ())
                ),
                total_discoveries=int(data.get("total_discoveries", 0)),
                total_seasons_played=int(data.get("total_seasons_played", 0)),
                best_hit_rate=float(data.get("best_hit_rate", 0.0)),
                best_legacy_score=float(data.get("best_legacy_score", 0.0)),
                highest_tier_reached=int(data.get("highest_tier_reached", 0)),
                schema_version=LEGACY_SCHEMA_VERSION,
            )
        except KeyError as e:
            raise ValueError(f"Legacy profile missing field: {e}") from e


@dataclass(frozen=True)
class LegacyPerkApplication:
    """Starting bonuses for a new career from the selected perks."""

    reputation_bonus: int = 0
    extra_contacts: int = 0
    budget_bonus_percent: int = 0
    knowledge_retain_percent: int = 0
    fatigue_reduction: int = 0
    skill_bonuses: Dict[str, int] = field(default_factory=dict)
