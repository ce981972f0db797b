"""
Core records shared by every engine package.

Scout is the player-controlled agent. Player, Club, League and
ScoutReport form the read-only world snapshot the engine consumes.
FinancialRecord carries the money side of a career (balance, retainers,
courses).

All records are frozen dataclasses. Operations never mutate a record;
they return a new one via dataclasses.replace.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from scouting_core.enums import (
    CareerPath,
    ClubResponse,
    ConvictionLevel,
    RetainerStatus,
    ScoutingPhilosophy,
    Specialization,
)

if TYPE_CHECKING:
    from club_relations.models import BoardDirective, ManagerRelationship


def _validate_range(name: str, value: float, minimum: float, maximum: float) -> None:
    """Raise ValueError if value lies outside [minimum, maximum]."""
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} must be {minimum}-{maximum}, got {value}")


@dataclass(frozen=True)
class Scout:
    """
    The player-controlled scout.

    Attributes:
        id: Unique scout identifier
        first_name: Given name
        last_name: Family name
        reputation: Global reputation (0-100)
        career_tier: Career ladder rank (1-5)
        primary_specialization: Main scouting focus
        career_path: Undecided, club-employed or independent
        independent_tier: Independent ladder rank (1-5), independent path only
        secondary_specialization: Optional second focus (tier 3+)
        specialization_level: Depth in the primary specialization
        skills: Skill name -> level (1-20)
        attributes: Attribute name -> level (1-20), includes networking/persuasion
        fatigue: Current fatigue (0-100)
        current_club_id: Employer, if any
        contract_end_season: Season the current contract ends
        salary: Weekly salary
        club_trust: Employer trust (0-100)
        reports_submitted: Reports submitted (reset on a new job)
        successful_finds: Successful finds (reset on a new job)
        manager_relationship: Tier 4+ manager relationship
        board_directives: Tier 5 board directives for the current season
    """

    id: str
    first_name: str
    last_name: str
    reputation: float
    career_tier: int
    primary_specialization: Specialization
    career_path: CareerPath = CareerPath.UNDECIDED
    independent_tier: Optional[int] = None
    secondary_specialization: Optional[Specialization] = None
    specialization_level: int = 1
    skills: Dict[str, int] = field(default_factory=dict)
    attributes: Dict[str, int] = field(default_factory=dict)
    fatigue: float = 0.0
    current_club_id: Optional[str] = None
    contract_end_season: Optional[int] = None
    salary: int = 0
    club_trust: float = 50.0
    reports_submitted: int = 0
    successful_finds: int = 0
    manager_relationship: Optional["ManagerRelationship"] = None
    board_directives: Tuple["BoardDirective", ...] = ()

    def __post_init__(self):
        """Validate scout values."""
        _validate_range("reputation", self.reputation, 0, 100)
        _validate_range("career_tier", self.career_tier, 1, 5)
        _validate_range("fatigue", self.fatigue, 0, 100)
        _validate_range("club_trust", self.club_trust, 0, 100)
        if self.independent_tier is not None:
            _validate_range("independent_tier", self.independent_tier, 1, 5)
        if self.reports_submitted < 0:
            raise ValueError(
                f"reports_submitted must be non-negative, got {self.reports_submitted}"
            )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Player:
    """A footballer in the world snapshot."""

    id: str
    first_name: str
    last_name: str
    age: int
    current_ability: int
    potential_ability: int
    position: str
    club_id: str
    attributes: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        _validate_range("current_ability", self.current_ability, 0, 200)
        _validate_range("potential_ability", self.potential_ability, 0, 200)


@dataclass(frozen=True)
class Club:
    """A club in the world snapshot."""

    id: str
    name: str
    reputation: float
    scouting_philosophy: ScoutingPhilosophy
    league_id: str = ""

    def __post_init__(self):
        _validate_range("reputation", self.reputation, 0, 100)


@dataclass(frozen=True)
class League:
    """A league, keyed to the country it belongs to."""

    id: str
    name: str
    country_key: str


@dataclass(frozen=True)
class ScoutReport:
    """
    A report submitted by the player scout.

    Attributes:
        id: Report identifier
        scout_id: Submitting scout
        player_id: Player the report covers
        submitted_season: Season of submission
        submitted_week: Week of submission
        quality_score: Report quality (1-100)
        conviction: Conviction level attached to the report
        club_response: How the club acted on it, if it has yet
        post_transfer_rating: Retrospective accuracy rating (0-100)
        country: Country the player was scouted in
    """

    id: str
    scout_id: str
    player_id: str
    submitted_season: int
    submitted_week: int
    quality_score: float
    conviction: ConvictionLevel
    club_response: Optional[ClubResponse] = None
    post_transfer_rating: Optional[float] = None
    country: Optional[str] = None

    def __post_init__(self):
        _validate_range("quality_score", self.quality_score, 1, 100)

    @property
    def was_signed(self) -> bool:
        return self.club_response == ClubResponse.SIGNED


@dataclass(frozen=True)
class RetainerContract:
    """A retainer paid by a club to an independent scout."""

    id: str
    club_id: str
    monthly_fee: int
    status: RetainerStatus = RetainerStatus.ACTIVE


@dataclass(frozen=True)
class Transaction:
    """A single ledger entry."""

    week: int
    season: int
    amount: float
    description: str


@dataclass(frozen=True)
class CourseEnrollment:
    """An in-progress course enrollment."""

    course_id: str
    start_week: int
    start_season: int
    completion_week: int
    completion_season: int


@dataclass(frozen=True)
class FinancialRecord:
    """
    Money side of a career.

    Attributes:
        balance: Current balance in pounds
        career_path: Mirrors the scout's career path
        independent_tier: Mirrors the scout's independent tier
        retainer_contracts: Retainers held (independent path)
        employees: Employee identifiers (independent path)
        completed_courses: Ids of completed courses
        active_enrollment: Course currently in progress
        transactions: Ledger, oldest first
    """

    balance: float
    career_path: CareerPath = CareerPath.UNDECIDED
    independent_tier: Optional[int] = None
    retainer_contracts: Tuple[RetainerContract, ...] = ()
    employees: Tuple[str, ...] = ()
    completed_courses: Tuple[str, ...] = ()
    active_enrollment: Optional[CourseEnrollment] = None
    transactions: Tuple[Transaction, ...] = ()

    @property
    def active_retainer_count(self) -> int:
        return sum(
            1 for r in self.retainer_contracts if r.status == RetainerStatus.ACTIVE
        )


@dataclass(frozen=True)
class InboxMessage:
    """A message surfaced to the player by an engine operation."""

    id: str
    week: int
    season: int
    type: str
    title: str
    body: str
    action_required: bool = False
    related_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the UI layer."""
        return {
            "id": self.id,
            "week": self.week,
            "season": self.season,
            "type": self.type,
            "title": self.title,
            "body": self.body,
            "action_required": self.action_required,
            "related_id": self.related_id,
        }
