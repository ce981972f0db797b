"""
Career progression records.

PerformanceReview and JobOffer are produced by the review engine and the
job market. Course, CourseEffect and EnrollmentResult belong to the
course catalog. IndependentTierRequirement describes one rung of the
independent career ladder.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from scouting_core.enums import ReviewOutcome
from scouting_core.models import FinancialRecord


@dataclass(frozen=True)
class PerformanceReview:
    """
    End-of-season performance review.

    Attributes:
        season: Season reviewed
        reports_submitted: Reports the scout submitted that season
        average_quality: Average report quality, rounded
        successful_recommendations: Reports the club signed (any conviction)
        table_pounds_used: Table-pound reports submitted
        table_pounds_successful: Table-pound reports the club signed
        reputation_change: Season-end reputation delta from the outcome
        outcome: Promoted, retained, warning or fired
        score: Composite score (0-100)
        breakdown: Per-component audit of the score
    """

    season: int
    reports_submitted: int
    average_quality: int
    successful_recommendations: int
    table_pounds_used: int
    table_pounds_successful: int
    reputation_change: float
    outcome: ReviewOutcome
    score: float = 0.0
    breakdown: Tuple[Dict[str, Any], ...] = ()

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"score must be 0-100, got {self.score}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the UI layer."""
        return {
            "season": self.season,
            "reports_submitted": self.reports_submitted,
            "average_quality": self.average_quality,
            "successful_recommendations": self.successful_recommendations,
            "table_pounds_used": self.table_pounds_used,
            "table_pounds_successful": self.table_pounds_successful,
            "reputation_change": self.reputation_change,
            "outcome": self.outcome.value,
            "score": self.score,
            "breakdown": [dict(item) for item in self.breakdown],
        }


@dataclass(frozen=True)
class JobOffer:
    """
    Ephemeral employment proposal.

    Attributes:
        id: Offer identifier
        club_id: Offering club
        tier: Career tier the role carries
        role: Role title
        salary: Weekly salary
        contract_length: Contract length in seasons (1-3)
        expires_week: Last week the offer can be accepted (35-38)
    """

    id: str
    club_id: str
    tier: int
    role: str
    salary: int
    contract_length: int
    expires_week: int

    def __post_init__(self):
        if not 1 <= self.tier <= 5:
            raise ValueError(f"tier must be 1-5, got {self.tier}")
        if not 1 <= self.contract_length <= 3:
            raise ValueError(f"contract_length must be 1-3, got {self.contract_length}")


@dataclass(frozen=True)
class CourseEffect:
    """
    One effect granted by completing a course.

    type is one of reputation_bonus, skill_bonus, attribute_bonus, tier_gate.
    target names the skill, attribute or gated tier where relevant.
    """

    type: str
    value: float
    target: Optional[str] = None

    VALID_TYPES = ("reputation_bonus", "skill_bonus", "attribute_bonus", "tier_gate")

    def __post_init__(self):
        if self.type not in self.VALID_TYPES:
            raise ValueError(
                f"effect type must be one of {self.VALID_TYPES}, got {self.type}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourseEffect":
        return cls(type=data["type"], value=data["value"], target=data.get("target"))


@dataclass(frozen=True)
class Course:
    """A purchasable qualification."""

    id: str
    name: str
    description: str
    cost: int
    duration_weeks: int
    min_tier: int
    category: str
    prerequisites: Tuple[str, ...] = ()
    effects: Tuple[CourseEffect, ...] = ()

    @classmethod
    def from_dict(cls, course_id: str, data: Dict[str, Any]) -> "Course":
        """Create from a catalog JSON entry."""
        return cls(
            id=course_id,
            name=data["name"],
            description=data.get("description", ""),
            cost=data["cost"],
            duration_weeks=data["duration_weeks"],
            min_tier=data["min_tier"],
            category=data.get("category", "scouting"),
            prerequisites=tuple(data.get("prerequisites", [])),
            effects=tuple(CourseEffect.from_dict(e) for e in data.get("effects", [])),
        )


@dataclass(frozen=True)
class EnrollmentResult:
    """
    Outcome of a course enrollment attempt.

    On success finances carries the updated record and reason is empty.
    On failure finances is None and reason explains why.
    """

    success: bool
    finances: Optional[FinancialRecord] = None
    reason: str = ""

    @classmethod
    def succeeded(cls, finances: FinancialRecord) -> "EnrollmentResult":
        return cls(success=True, finances=finances)

    @classmethod
    def failed(cls, reason: str) -> "EnrollmentResult":
        return cls(success=False, reason=reason)


@dataclass(frozen=True)
class IndependentTierRequirement:
    """Thresholds for one rung of the independent ladder. All must hold."""

    min_reputation: float
    min_balance: float
    min_reports_submitted: int
    min_retainers: int = 0
    min_employees: int = 0
    required_courses: Tuple[str, ...] = field(default_factory=tuple)

    def unmet(self, reputation: float, balance: float, reports: int,
              retainers: int, employees: int, completed_courses) -> List[str]:
        """Return the names of the thresholds that are not met."""
        missing = []
        if reputation < self.min_reputation:
            missing.append("reputation")
        if balance < self.min_balance:
            missing.append("balance")
        if reports < self.min_reports_submitted:
            missing.append("reports_submitted")
        if retainers < self.min_retainers:
            missing.append("retainers")
        if employees < self.min_employees:
            missing.append("employees")
        for course_id in self.required_courses:
            if course_id not in completed_courses:
                missing.append(f"course:{course_id}")
        return missing
