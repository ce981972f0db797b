"""
Reputation ledger.

Reputation events form a closed set: each concrete ReputationEvent
subclass implements calculate_delta(). update_reputation() applies one
event's delta to a scout and clamps the result to [0, 100].
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Iterable

from scouting_core.enums import ConvictionLevel, SeasonRating, WonderkidTier
from scouting_core.models import Scout
from scouting_core.utils import clamp

logger = logging.getLogger(__name__)

REPUTATION_MIN = 0.0
REPUTATION_MAX = 100.0

SIGNING_BASE_DELTA = {
    ConvictionLevel.NOTE: 1.0,
    ConvictionLevel.RECOMMEND: 3.0,
    ConvictionLevel.STRONG_RECOMMEND: 5.0,
    ConvictionLevel.TABLE_POUND: 10.0,
}

FAILED_SIGNING_DELTA = {
    ConvictionLevel.NOTE: -0.5,
    ConvictionLevel.RECOMMEND: -2.0,
    ConvictionLevel.STRONG_RECOMMEND: -5.0,
    ConvictionLevel.TABLE_POUND: -15.0,
}

DISCOVERY_DELTA = {
    WonderkidTier.JOURNEYMAN: 2.0,
    WonderkidTier.QUALITY_PRO: 5.0,
    WonderkidTier.WORLD_CLASS: 15.0,
    WonderkidTier.GENERATIONAL: 30.0,
}

SEASON_END_DELTA = {
    SeasonRating.EXCELLENT: 5.0,
    SeasonRating.GOOD: 2.0,
    SeasonRating.ACCEPTABLE: 0.0,
    SeasonRating.POOR: -5.0,
}


class ReputationEvent(ABC):
    """
    Abstract base class for reputation events.

    Subclasses must implement:
    - event_type: identifier used in logs
    - calculate_delta(): signed reputation change before clamping
    """

    @property
    @abstractmethod
    def event_type(self) -> str:
        pass

    @abstractmethod
    def calculate_delta(self) -> float:
        pass


@dataclass(frozen=True)
class ReportSubmitted(ReputationEvent):
    """A report was submitted. Delta scales 0.5-2.0 with report quality."""

    quality: float

    @property
    def event_type(self) -> str:
        return "report_submitted"

    def calculate_delta(self) -> float:
        return 0.5 + (clamp(self.quality, 0, 100) / 100) * 1.5


@dataclass(frozen=True)
class SuccessfulSigning(ReputationEvent):
    """
    A recommended player was signed.

    The conviction base is scaled by up to +/-25% from how the player
    performed after signing (0-100, 50 is neutral).
    """

    conviction: ConvictionLevel
    player_performance: float = 50.0

    @property
    def event_type(self) -> str:
        return "successful_signing"

    def calculate_delta(self) -> float:
        base = SIGNING_BASE_DELTA[self.conviction]
        return base * (1 + (self.player_performance - 50) / 200)


@dataclass(frozen=True)
class FailedSigning(ReputationEvent):
    """A recommended signing flopped."""

    conviction: ConvictionLevel

    @property
    def event_type(self) -> str:
        return "failed_signing"

    def calculate_delta(self) -> float:
        return FAILED_SIGNING_DELTA[self.conviction]


@dataclass(frozen=True)
class DiscoveryCredit(ReputationEvent):
    """The scout is credited with discovering a player."""

    wonderkid_tier: WonderkidTier

    @property
    def event_type(self) -> str:
        return "discovery_credit"

    def calculate_delta(self) -> float:
        return DISCOVERY_DELTA[self.wonderkid_tier]


@dataclass(frozen=True)
class TablePoundSuccess(ReputationEvent):

    @property
    def event_type(self) -> str:
        return "table_pound_success"

    def calculate_delta(self) -> float:
        return 5.0


@dataclass(frozen=True)
class TablePoundFailure(ReputationEvent):

    @property
    def event_type(self) -> str:
        return "table_pound_failure"

    def calculate_delta(self) -> float:
        return -10.0


@dataclass(frozen=True)
class SeasonEnd(ReputationEvent):
    """End-of-season rating derived from the performance review outcome."""

    season_rating: SeasonRating

    @property
    def event_type(self) -> str:
        return "season_end"

    def calculate_delta(self) -> float:
        return SEASON_END_DELTA[self.season_rating]


def calculate_reputation_delta(event: ReputationEvent) -> float:
    """
    Get the unclamped delta an event would apply.

    Raises:
        TypeError: If event is not a ReputationEvent
    """
    if not isinstance(event, ReputationEvent):
        raise TypeError(f"Expected ReputationEvent, got {type(event).__name__}")
    return event.calculate_delta()


def update_reputation(scout: Scout, event: ReputationEvent) -> Scout:
    """
    Apply a reputation event to a scout.

    Args:
        scout: Current scout
        event: Event to apply

    Returns:
        New Scout with reputation clamped to [0, 100]; nothing else changes
    """
    delta = calculate_reputation_delta(event)
    new_reputation = clamp(scout.reputation + delta, REPUTATION_MIN, REPUTATION_MAX)
    logger.debug(
        f"Reputation {event.event_type} for {scout.id}: "
        f"{scout.reputation:.2f} -> {new_reputation:.2f} ({delta:+.2f})"
    )
    return replace(scout, reputation=new_reputation)


def apply_reputation_events(scout: Scout, events: Iterable[ReputationEvent]) -> Scout:
    """Fold a sequence of events into the scout, in order."""
    for event in events:
        scout = update_reputation(scout, event)
    return scout
