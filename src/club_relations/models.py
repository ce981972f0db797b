"""
Club relationship records.

Manager relationships and directives (tier 4+), board directives (tier 5).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from scouting_core.enums import (
    BoardDirectiveType,
    MeetingTone,
    ScoutingPreference,
    ScoutingPriority,
)


@dataclass(frozen=True)
class ManagerRelationship:
    """
    Scout's working relationship with the first-team manager.

    Attributes:
        manager_name: Manager's display name
        trust: Manager's trust in the scout (0-100)
        influence: Scout's influence over transfer decisions (0-100)
        scouting_preference: What the manager values in reports
        meetings_this_season: Meetings held so far this season
    """

    manager_name: str
    trust: float = 50.0
    influence: float = 30.0
    scouting_preference: ScoutingPreference = ScoutingPreference.BALANCED
    meetings_this_season: int = 0

    def __post_init__(self):
        """Validate relationship ranges."""
        if not 0 <= self.trust <= 100:
            raise ValueError(f"trust must be 0-100, got {self.trust}")
        if not 0 <= self.influence <= 100:
            raise ValueError(f"influence must be 0-100, got {self.influence}")
        if self.meetings_this_season < 0:
            raise ValueError("meetings_this_season must be non-negative")


@dataclass(frozen=True)
class ScoutingDirective:
    """
    A request issued by the manager after a meeting.

    issued_week is the meeting ordinal within the season, not a calendar week.
    """

    id: str
    type: ScoutingPriority
    urgency: int
    description: str
    issued_week: int
    position: Optional[str] = None
    fulfilled: bool = False

    def __post_init__(self):
        if not 1 <= self.urgency <= 5:
            raise ValueError(f"urgency must be 1-5, got {self.urgency}")


@dataclass(frozen=True)
class BoardDirective:
    """
    Season objective set by the board for tier-5 scouts.

    Attributes:
        id: Directive identifier
        type: Directive type
        description: Player-facing text
        deadline: Season by which it must be completed
        completed: Whether the objective has been met
        reward_reputation: Reputation gained on completion
        penalty_reputation: Reputation lost on failure
    """

    id: str
    type: BoardDirectiveType
    description: str
    deadline: int
    completed: bool = False
    reward_reputation: int = 0
    penalty_reputation: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': self.type.value,
            'description': self.description,
            'deadline': self.deadline,
            'completed': self.completed,
            'reward_reputation': self.reward_reputation,
            'penalty_reputation': self.penalty_reputation,
        }


@dataclass(frozen=True)
class MeetingResult:
    """Outcome of one manager meeting."""

    relationship: ManagerRelationship
    tone: MeetingTone
    directive: Optional[ScoutingDirective] = None


@dataclass(frozen=True)
class BoardEvaluation:
    """
    End-of-season board directive evaluation.

    Directives neither completed nor past deadline appear in neither tuple.
    """

    completed: Tuple[BoardDirective, ...] = field(default_factory=tuple)
    failed: Tuple[BoardDirective, ...] = field(default_factory=tuple)
    reputation_change: int = 0

    def __post_init__(self):
        if not -30 <= self.reputation_change <= 30:
            raise ValueError(
                f"reputation_change must be -30 to 30, got {self.reputation_change}"
            )
