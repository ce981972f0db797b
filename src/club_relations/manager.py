"""
Manager relationship engine (tier 4+).

Satisfaction blends trust, report quality weighted by the manager's
scouting style, and how well directives have been fulfilled. Meetings
shift trust and influence and may produce a new directive.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from scouting_core.enums import MeetingTone, ScoutingPreference, ScoutingPriority
from scouting_core.models import Scout, ScoutReport
from scouting_core.random_source import RandomSource
from scouting_core.utils import clamp, round_half_up
from club_relations.models import ManagerRelationship, MeetingResult, ScoutingDirective

logger = logging.getLogger(__name__)

MEETING_TRUST_DELTA = {
    MeetingTone.POSITIVE: 8,
    MeetingTone.NEUTRAL: 0,
    MeetingTone.NEGATIVE: -6,
}

MEETING_INFLUENCE_DELTA = {
    MeetingTone.POSITIVE: 3,
    MeetingTone.NEUTRAL: 0,
    MeetingTone.NEGATIVE: -2,
}

DIRECTIVE_PROBABILITY = {
    MeetingTone.POSITIVE: 0.6,
    MeetingTone.NEUTRAL: 0.3,
    MeetingTone.NEGATIVE: 0.0,
}

MEETING_NOISE_STDDEV = 8

OUTFIELD_POSITIONS = ("CB", "LB", "RB", "CDM", "CM", "CAM", "LW", "RW", "ST")

PRIORITY_WEIGHTS: Dict[ScoutingPreference, List[Tuple[ScoutingPriority, float]]] = {
    ScoutingPreference.DATA_FIRST: [
        (ScoutingPriority.BUDGET_OPTION, 30),
        (ScoutingPriority.SPECIFIC_POSITION, 25),
        (ScoutingPriority.LOAN_TARGET, 20),
        (ScoutingPriority.YOUTH_PROSPECT, 15),
        (ScoutingPriority.FIRST_TEAM_READY, 8),
        (ScoutingPriority.WORLD_CLASS, 2),
    ],
    ScoutingPreference.EYE_TEST: [
        (ScoutingPriority.FIRST_TEAM_READY, 30),
        (ScoutingPriority.WORLD_CLASS, 20),
        (ScoutingPriority.SPECIFIC_POSITION, 20),
        (ScoutingPriority.YOUTH_PROSPECT, 15),
        (ScoutingPriority.LOAN_TARGET, 10),
        (ScoutingPriority.BUDGET_OPTION, 5),
    ],
    ScoutingPreference.BALANCED: [
        (ScoutingPriority.SPECIFIC_POSITION, 20),
        (ScoutingPriority.FIRST_TEAM_READY, 20),
        (ScoutingPriority.YOUTH_PROSPECT, 20),
        (ScoutingPriority.BUDGET_OPTION, 15),
        (ScoutingPriority.LOAN_TARGET, 15),
        (ScoutingPriority.WORLD_CLASS, 10),
    ],
    ScoutingPreference.RESULTS_BASED: [
        (ScoutingPriority.FIRST_TEAM_READY, 35),
        (ScoutingPriority.SPECIFIC_POSITION, 25),
        (ScoutingPriority.WORLD_CLASS, 15),
        (ScoutingPriority.BUDGET_OPTION, 10),
        (ScoutingPriority.LOAN_TARGET, 10),
        (ScoutingPriority.YOUTH_PROSPECT, 5),
    ],
}

DIRECTIVE_DESCRIPTIONS = {
    ScoutingPriority.FIRST_TEAM_READY:
        "Find a ready-now player who can step into the first team immediately.",
    ScoutingPriority.YOUTH_PROSPECT:
        "Identify a high-ceiling youth player for long-term development.",
    ScoutingPriority.SPECIFIC_POSITION:
        "Scout options for the {position} position.",
    ScoutingPriority.LOAN_TARGET:
        "Locate a loan candidate who fits our short-term needs within budget.",
    ScoutingPriority.BUDGET_OPTION:
        "Find a cost-effective signing that represents strong value for money.",
    ScoutingPriority.WORLD_CLASS:
        "Scout a world-class talent capable of transforming the squad.",
}


def calculate_style_multiplier(
    preference: ScoutingPreference,
    reports: Sequence[ScoutReport]
) -> float:
    """
    Multiplier applied to the quality component for the manager's style.

    Returns 1.0 for balanced managers or when there are no reports.
    """
    if not reports or preference == ScoutingPreference.BALANCED:
        return 1.0

    total = len(reports)
    if preference == ScoutingPreference.DATA_FIRST:
        share = len([r for r in reports if r.quality_score >= 80]) / total
        return 0.85 + share * 0.4
    if preference == ScoutingPreference.EYE_TEST:
        share = len([r for r in reports if r.conviction.is_bold]) / total
        return 0.85 + share * 0.4

    share = len([
        r for r in reports
        if r.club_response is not None and r.club_response.is_actioned
    ]) / total
    return 0.75 + share * 0.5


def calculate_manager_satisfaction(
    relationship: ManagerRelationship,
    reports: Sequence[ScoutReport],
    directives: Sequence[ScoutingDirective]
) -> int:
    """
    Manager satisfaction with the scout, 0-100.

    Components:
        trust: up to 30
        report quality (style weighted): up to 40, 0 with no reports
        directive fulfilment (urgency weighted): up to 30, 15 with no directives
    """
    trust_component = round_half_up(relationship.trust / 100 * 30)

    quality_component = 0
    if reports:
        avg_quality = sum(r.quality_score for r in reports) / len(reports)
        multiplier = calculate_style_multiplier(relationship.scouting_preference, reports)
        quality_component = min(40, round_half_up(avg_quality / 70 * 40 * multiplier))

    if directives:
        fulfilled = [d for d in directives if d.fulfilled]
        total_weight = sum(d.urgency for d in directives)
        if total_weight > 0:
            rate = sum(d.urgency for d in fulfilled) / total_weight
        else:
            rate = len(fulfilled) / len(directives)
        directive_component = min(30, round_half_up(rate * 30))
    else:
        directive_component = 15

    total = trust_component + quality_component + directive_component
    return int(clamp(total, 0, 100))


def _meeting_tone(effective_trust: float) -> MeetingTone:
    if effective_trust >= 65:
        return MeetingTone.POSITIVE
    if effective_trust >= 35:
        return MeetingTone.NEUTRAL
    return MeetingTone.NEGATIVE


def process_manager_meeting(
    rng: RandomSource,
    scout: Scout,
    relationship: ManagerRelationship
) -> MeetingResult:
    """
    Hold a meeting with the manager.

    Networking and persuasion add up to 15 points of effective trust,
    Gaussian noise (sd 8) models the mood on the day. The tone sets the
    trust and influence deltas and the chance of a new directive.

    Args:
        rng: Random source for this tick
        scout: Player scout attending
        relationship: Relationship before the meeting

    Returns:
        MeetingResult with the updated relationship, tone and any directive
    """
    networking = scout.attributes.get("networking", 1)
    persuasion = scout.attributes.get("persuasion", 1)
    skill_bonus = (networking + persuasion - 2) / 38 * 15

    noise = rng.gaussian(0, MEETING_NOISE_STDDEV)
    effective_trust = clamp(relationship.trust + skill_bonus + noise, 0, 100)
    tone = _meeting_tone(effective_trust)

    updated = replace(
        relationship,
        trust=clamp(relationship.trust + MEETING_TRUST_DELTA[tone], 0, 100),
        influence=clamp(relationship.influence + MEETING_INFLUENCE_DELTA[tone], 0, 100),
        meetings_this_season=relationship.meetings_this_season + 1,
    )

    directive = None
    if rng.chance(DIRECTIVE_PROBABILITY[tone]):
        directive = generate_manager_directive(
            rng, relationship.scouting_preference, updated.meetings_this_season
        )

    logger.debug(
        f"Meeting with {relationship.manager_name}: {tone.value} "
        f"(trust {relationship.trust:.0f} -> {updated.trust:.0f}, "
        f"directive={'yes' if directive else 'no'})"
    )
    return MeetingResult(relationship=updated, tone=tone, directive=directive)


def generate_manager_directive(
    rng: RandomSource,
    preference: ScoutingPreference,
    issued_week: int
) -> ScoutingDirective:
    """Draw a directive from the manager's preference-weighted priority table."""
    priority = rng.pick_weighted(PRIORITY_WEIGHTS[preference])
    urgency = rng.next_int(1, 5)

    position: Optional[str] = None
    if priority == ScoutingPriority.SPECIFIC_POSITION:
        position = rng.pick(OUTFIELD_POSITIONS)

    description = DIRECTIVE_DESCRIPTIONS[priority].format(position=position or "unknown")

    return ScoutingDirective(
        id=f"directive_{issued_week}_{rng.next_int(10000, 99999)}",
        type=priority,
        urgency=urgency,
        description=description,
        issued_week=issued_week,
        position=position,
        fulfilled=False,
    )


def reset_meetings_for_new_season(relationship: ManagerRelationship) -> ManagerRelationship:
    return replace(relationship, meetings_this_season=0)
