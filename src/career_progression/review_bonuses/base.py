"""
Abstract base class for tier review bonuses.

A tier bonus adds a bounded number of points to the end-of-season
review score for scouts at or above its minimum tier.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from career_progression.review_bonuses.context import TierReviewContext


class TierBonus(ABC):
    """
    Abstract base class for tier review bonuses.

    Subclasses must implement:
    - bonus_name: Unique identifier for audit trails
    - min_tier: Lowest career tier the bonus applies to
    - bounds: (minimum, maximum) points the bonus can contribute
    - calculate(): Raw bonus points from the context
    - describe(): Human-readable explanation of the points

    Implementations:
    - InternationalCoverageBonus (tier 3, -10..10)
    - NetworkManagementBonus (tier 4, 0..15)
    - DepartmentBonus (tier 5, -10..20)
    """

    @property
    @abstractmethod
    def bonus_name(self) -> str:
        """
        Unique identifier for this bonus.

        Lowercase with underscores (e.g., "international_coverage").
        """
        pass

    @property
    @abstractmethod
    def min_tier(self) -> int:
        pass

    @property
    @abstractmethod
    def bounds(self) -> Tuple[float, float]:
        pass

    @abstractmethod
    def calculate(self, context: TierReviewContext) -> float:
        """
        Calculate the bonus points.

        Args:
            context: End-of-season tier context

        Returns:
            Points to add to the review score (may be negative)
        """
        pass

    @abstractmethod
    def describe(self, context: TierReviewContext, points: float) -> str:
        pass

    def applies_to(self, career_tier: int) -> bool:
        return career_tier >= self.min_tier

    def clamp_points(self, points: float) -> float:
        """Clamp raw points to this bonus's bounds."""
        low, high = self.bounds
        return max(low, min(high, points))
