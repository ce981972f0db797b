"""
Tier review bonuses for the end-of-season performance review.

Tier 3-5 scouts earn (or lose) extra points from international
coverage, network management and department delivery.
"""

from .context import TierReviewContext
from .base import TierBonus
from .international import InternationalCoverageBonus
from .network import NetworkManagementBonus
from .department import DepartmentBonus
from .chain import apply_bonus_chain, create_default_bonus_chain

__all__ = [
    'TierReviewContext',
    'TierBonus',
    'InternationalCoverageBonus',
    'NetworkManagementBonus',
    'DepartmentBonus',
    'apply_bonus_chain',
    'create_default_bonus_chain',
]
