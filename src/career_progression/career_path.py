"""
Career path and independent tier state machine.

At the tier 1->2 boundary the scout chooses, once, between club
employment and independent work. Independent scouts climb their own
ladder against a requirement table; their independent tier maps
directly onto the shared career tier.
"""

import logging
from dataclasses import replace
from typing import Dict, Optional, Tuple

from career_progression.models import IndependentTierRequirement
from scouting_core.enums import CareerPath
from scouting_core.exceptions import CareerPathError
from scouting_core.models import FinancialRecord, Scout

logger = logging.getLogger(__name__)

INDEPENDENT_PATH_MIN_REPUTATION = 15
INDEPENDENT_PATH_MIN_REPORTS = 1
INDEPENDENT_PATH_MIN_BALANCE = 500

INDEPENDENT_TIER_REQUIREMENTS: Dict[int, IndependentTierRequirement] = {
    1: IndependentTierRequirement(
        min_reputation=0, min_balance=0, min_reports_submitted=0
    ),
    2: IndependentTierRequirement(
        min_reputation=20, min_balance=1000, min_reports_submitted=5
    ),
    3: IndependentTierRequirement(
        min_reputation=40, min_balance=5000, min_reports_submitted=20, min_retainers=1
    ),
    4: IndependentTierRequirement(
        min_reputation=60, min_balance=15000, min_reports_submitted=50,
        min_retainers=3, min_employees=1
    ),
    5: IndependentTierRequirement(
        min_reputation=80, min_balance=50000, min_reports_submitted=100,
        min_retainers=5, min_employees=3
    ),
}


def can_choose_independent_path(scout: Scout, finances: FinancialRecord) -> bool:
    """Check the reputation, report and balance gates for going independent."""
    return (
        scout.reputation >= INDEPENDENT_PATH_MIN_REPUTATION
        and scout.reports_submitted >= INDEPENDENT_PATH_MIN_REPORTS
        and finances.balance >= INDEPENDENT_PATH_MIN_BALANCE
    )


def choose_career_path(
    scout: Scout,
    finances: FinancialRecord,
    path: CareerPath
) -> Tuple[Scout, FinancialRecord]:
    """
    Apply the one-time career path choice.

    Args:
        scout: Scout making the choice
        finances: Scout's financial record
        path: CLUB or INDEPENDENT

    Returns:
        Tuple of (updated scout, updated finances)

    Raises:
        CareerPathError: If the path was already chosen, the choice is
                         UNDECIDED, or the scout is not eligible to go
                         independent
    """
    if scout.career_path != CareerPath.UNDECIDED:
        raise CareerPathError(
            f"Scout {scout.id} already chose the {scout.career_path.value} path"
        )
    if path == CareerPath.UNDECIDED:
        raise CareerPathError("Cannot choose the undecided path")
    if path == CareerPath.INDEPENDENT and not can_choose_independent_path(scout, finances):
        raise CareerPathError(
            f"Scout {scout.id} does not meet the independent path requirements "
            f"(reputation {INDEPENDENT_PATH_MIN_REPUTATION}, "
            f"{INDEPENDENT_PATH_MIN_REPORTS} report, balance {INDEPENDENT_PATH_MIN_BALANCE})"
        )

    independent_tier = 1 if path == CareerPath.INDEPENDENT else None
    logger.info(f"{scout.id} chose the {path.value} path")

    return (
        replace(scout, career_path=path, independent_tier=independent_tier),
        replace(finances, career_path=path, independent_tier=independent_tier),
    )


def get_independent_tier_requirements(tier: int) -> IndependentTierRequirement:
    """
    Get the requirements for an independent tier.

    Raises:
        ValueError: If tier is not 1-5
    """
    if tier not in INDEPENDENT_TIER_REQUIREMENTS:
        raise ValueError(f"independent tier must be 1-5, got {tier}")
    return INDEPENDENT_TIER_REQUIREMENTS[tier]


def check_independent_tier_advancement(
    scout: Scout,
    finances: FinancialRecord
) -> Optional[int]:
    """
    Check whether an independent scout qualifies for the next tier.

    Returns:
        The next tier if every threshold holds, otherwise None
    """
    if scout.career_path != CareerPath.INDEPENDENT:
        return None

    current_tier = scout.independent_tier or 1
    next_tier = current_tier + 1
    if next_tier > 5:
        return None

    requirement = INDEPENDENT_TIER_REQUIREMENTS[next_tier]
    missing = requirement.unmet(
        reputation=scout.reputation,
        balance=finances.balance,
        reports=scout.reports_submitted,
        retainers=finances.active_retainer_count,
        employees=len(finances.employees),
        completed_courses=finances.completed_courses,
    )
    if missing:
        logger.debug(f"{scout.id} not ready for independent tier {next_tier}: {missing}")
        return None
    return next_tier


def advance_independent_tier(
    scout: Scout,
    finances: FinancialRecord,
    new_tier: int
) -> Tuple[Scout, FinancialRecord]:
    """
    Move an independent scout to a new tier.

    The independent tier maps directly onto the career tier.

    Raises:
        CareerPathError: If the scout is not independent or new_tier is
                         not exactly one above the current tier
    """
    if scout.career_path != CareerPath.INDEPENDENT:
        raise CareerPathError(f"Scout {scout.id} is not on the independent path")

    current_tier = scout.independent_tier or 1
    if new_tier != current_tier + 1 or new_tier > 5:
        raise CareerPathError(
            f"Independent tier must advance one step at a time: "
            f"{current_tier} -> {new_tier}"
        )

    logger.info(f"{scout.id} advanced to independent tier {new_tier}")
    return (
        replace(scout, independent_tier=new_tier, career_tier=new_tier),
        replace(finances, independent_tier=new_tier),
    )
