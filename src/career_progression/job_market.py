"""
Job market simulator.

Proposes employment offers one tier above the scout's current tier.
Clubs are filtered by a prestige window for the target tier and by how
well their scouting philosophy fits the scout's specialization.
"""

import logging
import math
from dataclasses import replace
from typing import Dict, List, Optional

from config.career_settings import CareerSettings
from career_progression.models import JobOffer
from scouting_core.enums import Specialization
from scouting_core.models import Club, Scout
from scouting_core.random_source import RandomSource
from scouting_core.utils import round_half_up

logger = logging.getLogger(__name__)

TIER_REPUTATION_REQUIREMENTS = {1: 0, 2: 25, 3: 50, 4: 70, 5: 90}

# Weekly salary bands (min, max) by tier
SALARY_BANDS = {
    1: (0, 0),
    2: (500, 1500),
    3: (1500, 4000),
    4: (4000, 10000),
    5: (10000, 25000),
}

ROLE_TITLES = {
    Specialization.YOUTH: {
        1: "Freelance Youth Scout",
        2: "Youth Scout",
        3: "Senior Youth Scout",
        4: "Head of Youth Scouting",
        5: "Youth Development Director",
    },
    Specialization.FIRST_TEAM: {
        1: "Freelance Scout",
        2: "First Team Scout",
        3: "Senior Scout",
        4: "Chief Scout",
        5: "Director of Football",
    },
    Specialization.REGIONAL: {
        1: "Freelance Regional Scout",
        2: "Regional Scout",
        3: "Senior Regional Scout",
        4: "Head of Regional Scouting",
        5: "Sporting Director",
    },
    Specialization.DATA: {
        1: "Freelance Data Analyst",
        2: "Data Analyst",
        3: "Lead Data Analyst",
        4: "Head of Analysis",
        5: "Director of Football Analytics",
    },
}

NARROW_WINDOW = 20
WIDE_WINDOW = 30
REPUTATION_PREMIUM_SHARE = 0.2

# Offers expire in the final four weeks of the season
OFFER_EXPIRY_START_WEEK = CareerSettings.WEEKS_PER_SEASON - 3


def determine_target_tier(scout: Scout) -> Optional[int]:
    """
    Get the tier an offer would carry, or None if the scout has no market.

    The target is the next tier up, provided it exists and the scout's
    reputation meets its threshold.
    """
    next_tier = scout.career_tier + 1
    if next_tier > 5:
        return None
    if scout.reputation < TIER_REPUTATION_REQUIREMENTS[next_tier]:
        return None
    return next_tier


def get_reputation_window(target_tier: int) -> tuple:
    """
    Get the (min, max) club reputation window for a target tier.

    Tiers 4-5 use a wider window: elite clubs span a broader prestige
    range and there are fewer of them.
    """
    width = WIDE_WINDOW if target_tier >= 4 else NARROW_WINDOW
    rep_min = max(0, (target_tier - 1) * width - 10)
    rep_max = min(100, target_tier * width)
    return rep_min, rep_max


def filter_candidate_clubs(
    clubs: Dict[str, Club],
    scout: Scout,
    target_tier: int,
    require_alignment: bool
) -> List[Club]:
    """
    Filter clubs to offer candidates.

    Args:
        clubs: All clubs keyed by id
        scout: Scout looking for work
        target_tier: Tier of the offered role
        require_alignment: Only keep clubs whose philosophy suits the
                           scout's primary specialization
    """
    rep_min, rep_max = get_reputation_window(target_tier)
    candidates = []
    for club in clubs.values():
        if club.reputation < rep_min or club.reputation > rep_max:
            continue
        if require_alignment and (
            scout.primary_specialization not in club.scouting_philosophy.get_affinity()
        ):
            continue
        candidates.append(club)
    return candidates


def _offer_count(rng: RandomSource, scout: Scout, target_tier: int) -> int:
    if target_tier >= 4:
        return 1
    if target_tier == 3:
        return rng.next_int(1, 2)
    return rng.next_int(1, min(3, math.ceil(scout.reputation / 30)))


def calculate_offer_salary(rng: RandomSource, scout: Scout, tier: int) -> int:
    """
    Draw a salary from the tier band plus a reputation premium.

    The premium is up to 20% of the band width; the result never exceeds
    the band maximum.
    """
    band_min, band_max = SALARY_BANDS[tier]
    base_salary = 0 if tier == 1 else rng.next_int(band_min, band_max)
    premium = round_half_up(
        ((scout.reputation - 25) / 75) * (band_max - band_min) * REPUTATION_PREMIUM_SHARE
    )
    return min(band_max, base_salary + max(0, premium))


def build_job_offer(
    rng: RandomSource,
    club: Club,
    scout: Scout,
    tier: int,
    season: int
) -> JobOffer:
    """Build one offer from a candidate club. Draw order is fixed."""
    salary = calculate_offer_salary(rng, scout, tier)
    role = ROLE_TITLES[scout.primary_specialization][tier]
    contract_length = rng.next_int(1, 3)
    expires_week = rng.next_int(OFFER_EXPIRY_START_WEEK, CareerSettings.WEEKS_PER_SEASON)
    offer_id = f"offer_{club.id}_s{season}_{rng.next_int(1000, 9999)}"

    return JobOffer(
        id=offer_id,
        club_id=club.id,
        tier=tier,
        role=role,
        salary=salary,
        contract_length=contract_length,
        expires_week=expires_week,
    )


def generate_job_offers(
    rng: RandomSource,
    scout: Scout,
    clubs: Dict[str, Club],
    season: int
) -> List[JobOffer]:
    """
    Generate job offers for a scout.

    Args:
        rng: Random source for this tick
        scout: Scout on the market
        clubs: All clubs keyed by id
        season: Current season

    Returns:
        Offers from distinct clubs; empty when the scout has no market
    """
    target_tier = determine_target_tier(scout)
    if target_tier is None:
        logger.debug(f"No job market for {scout.id} at tier {scout.career_tier}")
        return []

    candidates = filter_candidate_clubs(clubs, scout, target_tier, require_alignment=True)
    if not candidates and target_tier >= 3:
        candidates = filter_candidate_clubs(clubs, scout, target_tier, require_alignment=False)
    if not candidates:
        logger.debug(f"No candidate clubs for tier {target_tier} offers")
        return []

    count = _offer_count(rng, scout, target_tier)
    selected = rng.shuffle(candidates)[:count]

    offers = [build_job_offer(rng, club, scout, target_tier, season) for club in selected]
    logger.info(f"Generated {len(offers)} tier {target_tier} offers for {scout.id}")
    return offers


def accept_job_offer(
    scout: Scout,
    offer: JobOffer,
    current_season: Optional[int] = None
) -> Scout:
    """
    Apply an accepted offer to the scout.

    Sets tier, club and salary, resets club trust to a neutral 50 and
    resets the per-job counters. The contract end season is only set
    when the current season is known.
    """
    contract_end = (
        current_season + offer.contract_length
        if current_season is not None else scout.contract_end_season
    )
    logger.info(f"{scout.id} accepted {offer.role} at {offer.club_id}")
    return replace(
        scout,
        career_tier=offer.tier,
        current_club_id=offer.club_id,
        contract_end_season=contract_end,
        salary=offer.salary,
        club_trust=50.0,
        reports_submitted=0,
        successful_finds=0,
    )
