"""
Legacy carry-over between careers.

When a career ends it is folded into the LegacyProfile: aggregates are
recomputed, perks and scenarios unlock, and up to three perks can be
selected to boost the next career. The profile is a plain versioned
snapshot; reading and writing it is left to the caller.
"""

import logging
import time
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from scouting_core.enums import Specialization
from career_analytics.models import (
    CareerSummary,
    CompletedCareer,
    LegacyPerk,
    LegacyPerkApplication,
    LegacyPerkType,
    LegacyProfile,
)

logger = logging.getLogger(__name__)

MAX_ACTIVE_PERKS = 3
# Fallback when the legacy score never recorded a season count
FIRST_SEASON = 2025

LEGACY_PERK_DEFINITIONS: Tuple[LegacyPerk, ...] = (
    LegacyPerk(
        id="starting_network",
        name="Starting Network",
        description=(
            "Begin with 2 extra contacts from your prior career's knowledge. "
            "Your network opens doors faster."
        ),
        type=LegacyPerkType.STARTING_CONTACT,
        value=2,
        unlocked_by="career_completed",
    ),
    LegacyPerk(
        id="reputation_head_start",
        name="Reputation Head Start",
        description=(
            "Your name precedes you. Start with +10 reputation from your prior "
            "career's track record."
        ),
        type=LegacyPerkType.REPUTATION_BOOST,
        value=10,
        unlocked_by="tier_3_reached",
    ),
    LegacyPerk(
        id="regional_memory",
        name="Regional Memory",
        description=(
            "Retain 25% of regional knowledge from previous careers. "
            "You remember the lay of the land."
        ),
        type=LegacyPerkType.KNOWLEDGE_RETAIN,
        value=25,
        unlocked_by="3_countries_scouted",
    ),
    LegacyPerk(
        id="financial_cushion",
        name="Financial Cushion",
        description=(
            "Start with 20% more funds. Smart career management pays dividends "
            "in your next life."
        ),
        type=LegacyPerkType.BUDGET_BONUS,
        value=20,
        unlocked_by="tier_4_reached",
    ),
    LegacyPerk(
        id="veteran_instinct",
        name="Veteran Instinct",
        description="Your eye for talent is sharper. Start with +2 to Player Judgment skill.",
        type=LegacyPerkType.SKILL_BONUS,
        value=2,
        unlocked_by="25_discoveries",
    ),
    LegacyPerk(
        id="iron_constitution",
        name="Iron Constitution",
        description=(
            "Years of travel have toughened you. Start with 15 less fatigue "
            "and recover faster."
        ),
        type=LegacyPerkType.FATIGUE_REDUCTION,
        value=15,
        unlocked_by="2_careers_completed",
    ),
    LegacyPerk(
        id="elite_network",
        name="Elite Network",
        description=(
            "Begin with 4 extra contacts. Your legendary reputation attracts "
            "top-tier connections."
        ),
        type=LegacyPerkType.STARTING_CONTACT,
        value=4,
        unlocked_by="tier_5_reached",
    ),
    LegacyPerk(
        id="talent_magnet",
        name="Talent Magnet",
        description=(
            "Your reputation for accurate scouting precedes you. Start with +20 reputation."
        ),
        type=LegacyPerkType.REPUTATION_BOOST,
        value=20,
        unlocked_by="legacy_score_100",
    ),
    LegacyPerk(
        id="sharp_eye",
        name="Sharp Eye",
        description=(
            "Your potential assessment is second to none. Start with +2 to "
            "Potential Assessment skill."
        ),
        type=LegacyPerkType.SKILL_BONUS,
        value=2,
        unlocked_by="hit_rate_50",
    ),
    LegacyPerk(
        id="deep_knowledge",
        name="Deep Knowledge",
        description="Retain 50% of regional knowledge. Your maps are etched in memory.",
        type=LegacyPerkType.KNOWLEDGE_RETAIN,
        value=50,
        unlocked_by="legacy_score_100",
    ),
)

# Skill-bonus perks and the skill each one raises
PERK_SKILL_TARGETS = {
    "veteran_instinct": "player_judgment",
    "sharp_eye": "potential_assessment",
}

SCENARIO_UNLOCK_CONDITIONS: Tuple[Tuple[str, Callable[[LegacyProfile], bool], str], ...] = (
    ("the_rebuild", lambda p: len(p.completed_careers) >= 1, "Complete one career"),
    ("moneyball", lambda p: p.highest_tier_reached >= 3, "Reach tier 3 in any career"),
    ("wonderkid_hunter", lambda p: p.total_discoveries >= 10,
     "Discover 10+ players across careers"),
    ("the_last_season", lambda p: p.best_legacy_score >= 60,
     "Achieve legacy score 60+ in a career"),
    ("rivalry", lambda p: len(p.completed_careers) >= 2, "Complete two careers"),
    ("zero_to_hero", lambda p: p.highest_tier_reached >= 4, "Reach tier 4 in any career"),
)


def generate_completed_career(
    summary: CareerSummary,
    completed_at: Optional[float] = None
) -> CompletedCareer:
    """
    Summarise a finished career.

    Args:
        summary: End-of-career facts
        completed_at: Completion timestamp in seconds (defaults to now)
    """
    hit_rate = 0.0
    if summary.total_reports > 0:
        hit_rate = summary.successful_finds / summary.total_reports

    seasons_played = summary.total_seasons
    if seasons_played <= 0:
        seasons_played = max(1, summary.current_season - FIRST_SEASON + 1)

    scenarios = (summary.active_scenario_id,) if summary.active_scenario_id else ()

    return CompletedCareer(
        scout_name=summary.scout_name,
        final_tier=max(summary.career_high_tier, summary.career_tier),
        seasons_played=seasons_played,
        total_discoveries=summary.discovery_count,
        hit_rate=min(1.0, max(0.0, hit_rate)),
        specialization=summary.specialization,
        completed_scenarios=scenarios,
        legacy_score_total=summary.legacy_score_total,
        completed_at=completed_at if completed_at is not None else time.time(),
    )


def _is_perk_condition_met(condition: str, profile: LegacyProfile, countries_scouted: int) -> bool:
    careers = len(profile.completed_careers)
    checks = {
        "career_completed": lambda: careers >= 1,
        "2_careers_completed": lambda: careers >= 2,
        "tier_3_reached": lambda: profile.highest_tier_reached >= 3,
        "tier_4_reached": lambda: profile.highest_tier_reached >= 4,
        "tier_5_reached": lambda: profile.highest_tier_reached >= 5,
        "10_discoveries": lambda: profile.total_discoveries >= 10,
        "25_discoveries": lambda: profile.total_discoveries >= 25,
        "legacy_score_100": lambda: profile.best_legacy_score >= 100,
        "hit_rate_50": lambda: profile.best_hit_rate >= 0.5,
        "3_countries_scouted": lambda: countries_scouted >= 3 or any(
            "international_assignment" in c.completed_scenarios
            for c in profile.completed_careers
        ),
    }
    check = checks.get(condition)
    return check() if check else False


def check_scenario_unlocks(profile: LegacyProfile) -> Tuple[str, ...]:
    """Scenario ids unlocked by the profile, unioned with those already unlocked."""
    unlocked = list(profile.unlocked_scenarios)
    for scenario_id, condition, _ in SCENARIO_UNLOCK_CONDITIONS:
        if scenario_id not in unlocked and condition(profile):
            unlocked.append(scenario_id)
    return tuple(unlocked)


def get_scenario_unlock_descriptions() -> Dict[str, str]:
    return {scenario_id: text for scenario_id, _, text in SCENARIO_UNLOCK_CONDITIONS}


def generate_legacy_profile(
    summary: CareerSummary,
    existing: Optional[LegacyProfile] = None,
    completed_at: Optional[float] = None
) -> LegacyProfile:
    """
    Fold a finished career into the legacy profile.

    Args:
        summary: End-of-career facts
        existing: Profile from earlier careers, if any
        completed_at: Completion timestamp in seconds (defaults to now)

    Returns:
        New profile with the career prepended, aggregates recomputed,
        perks re-evaluated and scenarios unlocked
    """
    career = generate_completed_career(summary, completed_at)
    base = existing or LegacyProfile(id=f"legacy-{int(career.completed_at * 1000)}")

    careers = (career,) + base.completed_careers
    profile = replace(
        base,
        completed_careers=careers,
        total_discoveries=sum(c.total_discoveries for c in careers),
        total_seasons_played=sum(c.seasons_played for c in careers),
        best_hit_rate=max([c.hit_rate for c in careers] + [0.0]),
        best_legacy_score=max([c.legacy_score_total for c in careers] + [0.0]),
        highest_tier_reached=max([c.final_tier for c in careers] + [0]),
    )

    perks = tuple(
        perk for perk in LEGACY_PERK_DEFINITIONS
        if _is_perk_condition_met(perk.unlocked_by, profile, summary.countries_scouted)
    )
    profile = replace(profile, legacy_perks=perks)
    profile = replace(profile, unlocked_scenarios=check_scenario_unlocks(profile))

    logger.info(
        f"Legacy profile updated: {len(careers)} careers, "
        f"{len(perks)} perks, {len(profile.unlocked_scenarios)} scenarios"
    )
    return profile


def apply_legacy_perks(
    profile: LegacyProfile,
    selected_perk_ids: Sequence[str]
) -> LegacyPerkApplication:
    """
    Combine the selected perks into starting bonuses.

    Only the first three selections count, and only perks the profile has
    unlocked. Knowledge retention takes the best perk; everything else sums.
    """
    active_ids = list(selected_perk_ids)[:MAX_ACTIVE_PERKS]
    active = [p for p in profile.legacy_perks if p.id in active_ids]

    totals = {perk_type: 0 for perk_type in LegacyPerkType}
    skill_bonuses: Dict[str, int] = {}
    for perk in active:
        if perk.type == LegacyPerkType.KNOWLEDGE_RETAIN:
            totals[perk.type] = max(totals[perk.type], perk.value)
        elif perk.type == LegacyPerkType.SKILL_BONUS:
            skill = PERK_SKILL_TARGETS.get(perk.id)
            if skill:
                skill_bonuses[skill] = skill_bonuses.get(skill, 0) + perk.value
        else:
            totals[perk.type] += perk.value

    return LegacyPerkApplication(
        reputation_bonus=totals[LegacyPerkType.REPUTATION_BOOST],
        extra_contacts=totals[LegacyPerkType.STARTING_CONTACT],
        budget_bonus_percent=totals[LegacyPerkType.BUDGET_BONUS],
        knowledge_retain_percent=totals[LegacyPerkType.KNOWLEDGE_RETAIN],
        fatigue_reduction=totals[LegacyPerkType.FATIGUE_REDUCTION],
        skill_bonuses=skill_bonuses,
    )


def get_available_perks(profile: Optional[LegacyProfile]) -> List[Tuple[LegacyPerk, bool]]:
    """Every perk paired with whether the profile has unlocked it."""
    unlocked_ids = {p.id for p in profile.legacy_perks} if profile else set()
    return [(perk, perk.id in unlocked_ids) for perk in LEGACY_PERK_DEFINITIONS]


def get_used_specializations(profile: LegacyProfile) -> List[Specialization]:
    """Distinct specializations played, most recent first."""
    used: List[Specialization] = []
    for career in profile.completed_careers:
        if career.specialization not in used:
            used.append(career.specialization)
    return used


def has_completed_career(profile: Optional[LegacyProfile]) -> bool:
    return profile is not None and len(profile.completed_careers) > 0
