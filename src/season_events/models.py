"""
Narrative and season event records.

Narrative events are one-off story beats (a rival poaching a target, an
exclusive tip). Season events span a range of weeks and apply modifiers
while active; some offer a choice that replaces their base effects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from scouting_core.models import InboxMessage


class NarrativeEventType(Enum):
    """Kinds of narrative event."""

    RIVAL_POACH = "rival_poach"
    EXCLUSIVE_TIP = "exclusive_tip"
    RIVAL_RECRUITMENT = "rival_recruitment"
    MANAGER_FIRED = "manager_fired"
    DEBUT_HAT_TRICK = "debut_hat_trick"
    TARGET_INJURED = "target_injured"
    REPORT_CITED_IN_BOARD_MEETING = "report_cited_in_board_meeting"
    AGENT_DECEPTION = "agent_deception"


@dataclass(frozen=True)
class EventChoice:
    """A response the player can pick; effect is the tag the resolver switches on."""

    label: str
    effect: str


@dataclass(frozen=True)
class NarrativeEvent:
    """
    One-off narrative event.

    Attributes:
        id: Event identifier
        type: Event kind
        week: Week it fired
        season: Season it fired
        title: Headline
        description: Body text
        related_ids: Players, clubs or scouts involved
        acknowledged: Whether the player has dismissed it
        choices: Responses on offer (empty when none)
        selected_choice: Index of the chosen response, once resolved
    """

    id: str
    type: NarrativeEventType
    week: int
    season: int
    title: str
    description: str
    related_ids: Tuple[str, ...] = ()
    acknowledged: bool = False
    choices: Tuple[EventChoice, ...] = ()
    selected_choice: Optional[int] = None


@dataclass(frozen=True)
class EventChoiceResult:
    """Side effects of resolving a narrative event choice."""

    event: NarrativeEvent
    reputation_change: int
    messages: Tuple[InboxMessage, ...] = ()


class SeasonEffectType(Enum):
    """What a season event effect modifies."""

    TRANSFER_PRICE = "transfer_price"
    SCOUTING_COST = "scouting_cost"
    FATIGUE = "fatigue"
    REPUTATION_BONUS = "reputation_bonus"
    YOUTH_INTAKE = "youth_intake"
    PLAYER_AVAILABILITY = "player_availability"
    INJURY_RISK = "injury_risk"
    ATTRIBUTE_REVEAL = "attribute_reveal"


@dataclass(frozen=True)
class SeasonEventEffect:
    type: SeasonEffectType
    value: float


@dataclass(frozen=True)
class SeasonEventChoice:
    """A choice on a season event; its effects replace the event's base effects."""

    label: str
    effects: Tuple[SeasonEventEffect, ...] = ()


@dataclass(frozen=True)
class SeasonEvent:
    """
    Event active across a range of weeks within a season.

    Attributes:
        id: Event identifier
        name: Display name
        description: Body text
        start_week: First active week
        end_week: Last active week
        effects: Base effects while active
        choices: Optional choices
        resolved: Whether a choice has been made
        choice_selected: Index of the chosen choice, once resolved
    """

    id: str
    name: str
    description: str
    start_week: int
    end_week: int
    effects: Tuple[SeasonEventEffect, ...] = ()
    choices: Tuple[SeasonEventChoice, ...] = ()
    resolved: bool = False
    choice_selected: Optional[int] = None

    def __post_init__(self):
        if self.end_week < self.start_week:
            raise ValueError(
                f"end_week ({self.end_week}) before start_week ({self.start_week})"
            )

    def is_active(self, week: int) -> bool:
        return self.start_week <= week <= self.end_week


@dataclass(frozen=True)
class ActiveEffectModifiers:
    """Summed modifiers from every active season event."""

    transfer_price: float = 0.0
    scouting_cost: float = 0.0
    fatigue: float = 0.0
    reputation_bonus: float = 0.0
    youth_intake: float = 0.0
    player_availability_reduction: float = 0.0
    injury_risk: float = 0.0
    attribute_reveal_bonus: float = 0.0
