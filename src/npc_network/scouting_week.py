"""
Weekly NPC scouting pass.

Each week an assigned NPC scout observes 2-5 players from its territory,
files a coarse report on each, and accrues fatigue. Rested scouts recover.

Draw order per week (one RandomSource for the whole tick):
    1. observation count, then shuffle of the pool
    2. per player: quality noise, reading shuffle, one gaussian per
       reading, report id
"""

import logging
from dataclasses import replace
from typing import Dict, List

from config.career_settings import CareerSettings
from scouting_core.enums import NPCRecommendation, ReportQualityTier, Specialization
from scouting_core.models import Player
from scouting_core.random_source import RandomSource
from scouting_core.utils import clamp, round_half_up
from npc_network.models import (
    AttributeReading,
    NPCReportEvaluation,
    NPCScout,
    NPCScoutingWeekResult,
    NPCScoutReport,
    Territory,
)

logger = logging.getLogger(__name__)

OBSERVABLE_ATTRIBUTES = (
    "first_touch", "passing", "dribbling", "shooting", "heading",
    "pace", "strength", "stamina", "agility",
    "composure", "positioning", "work_rate", "decision_making",
    "off_the_ball", "pressing", "defensive_awareness",
)

DEFAULT_ATTRIBUTE_VALUE = 10

QUALITY_DESCRIPTORS = {
    ReportQualityTier.EXCELLENT: "highly impressive",
    ReportQualityTier.GOOD: "promising",
    ReportQualityTier.DECENT: "worth monitoring",
    ReportQualityTier.POOR: "limited",
}


def calculate_npc_report_quality(npc_scout: NPCScout, player: Player) -> int:
    """
    Base quality of an NPC report before noise.

    quality × 20, +10 when the NPC's specialization suits the player,
    -15 when the NPC is badly fatigued. Clamped to [1, 100].
    """
    quality = npc_scout.quality * 20
    if _specialization_matches_player(npc_scout.specialization, player):
        quality += 10
    if npc_scout.fatigue > CareerSettings.NPC_FATIGUE_PENALTY_THRESHOLD:
        quality -= 15
    return int(clamp(quality, 1, 100))


def _specialization_matches_player(specialization: Specialization, player: Player) -> bool:
    if specialization == Specialization.YOUTH:
        return player.age < 21
    if specialization == Specialization.FIRST_TEAM:
        return player.current_ability >= 130
    if specialization == Specialization.DATA:
        return player.current_ability >= 100
    # Regional NPCs cover a fixed area and always match
    return True


def _is_player_in_territory_league(player: Player, territory: Territory) -> bool:
    # TODO: thread club -> league data through so players can be matched
    # to territory leagues; until then the pass falls back to the full pool.
    return False


def _resolve_pool(territory: Territory, players: Dict[str, Player]) -> List[Player]:
    league_ids = set(territory.league_ids)
    eligible = [
        p for p in players.values()
        if p.club_id in league_ids or _is_player_in_territory_league(p, territory)
    ]
    return eligible if eligible else list(players.values())


def _generate_readings(
    rng: RandomSource,
    npc_scout: NPCScout,
    player: Player,
    quality: int
) -> List[AttributeReading]:
    count = int(clamp(round_half_up(3 + quality / 100 * 3), 3, 6))
    attributes = rng.shuffle(OBSERVABLE_ATTRIBUTES)[:count]

    threshold = CareerSettings.NPC_FATIGUE_QUALITY_THRESHOLD
    degradation = 0.0
    if npc_scout.fatigue > threshold:
        degradation = (npc_scout.fatigue - threshold) / 100

    stddev = max(1.0, 5 - quality / 100 * 3 + degradation * 3)
    confidence = clamp(0.3 + quality / 100 * 0.3 - degradation * 0.1, 0.1, 0.9)

    readings = []
    for attribute in attributes:
        true_value = player.attributes.get(attribute, DEFAULT_ATTRIBUTE_VALUE)
        perceived = int(clamp(round_half_up(rng.gaussian(true_value, stddev)), 1, 20))
        readings.append(AttributeReading(
            attribute=attribute,
            perceived_value=perceived,
            confidence=confidence,
        ))
    return readings


def _derive_recommendation(quality: int, player: Player) -> NPCRecommendation:
    signal = quality * 0.7 + player.current_ability / 200 * 100 * 0.3
    if signal >= 75:
        return NPCRecommendation.PURSUE
    if signal >= 45:
        return NPCRecommendation.SHORTLIST
    return NPCRecommendation.MONITOR


def _build_summary(
    npc_scout: NPCScout,
    player: Player,
    quality: int,
    readings: List[AttributeReading]
) -> str:
    tier = _quality_tier(quality)
    if npc_scout.specialization == Specialization.YOUTH:
        focus = "youth potential"
    else:
        focus = "current ability"

    summary = f"{player.first_name} {player.last_name} shows {QUALITY_DESCRIPTORS[tier]} {focus}."
    if readings:
        top = max(readings, key=lambda r: r.perceived_value)
        summary += f" Standout attribute: {top.attribute} (rated ~{top.perceived_value})."
    return summary + f" Report confidence: {tier.value}."


def _apply_weekly_fatigue(npc_scout: NPCScout) -> NPCScout:
    new_fatigue = clamp(npc_scout.fatigue + CareerSettings.NPC_WEEKLY_FATIGUE_GAIN, 0, 100)
    exhaustion = CareerSettings.NPC_EXHAUSTION_THRESHOLD
    morale = npc_scout.morale
    if new_fatigue >= exhaustion and npc_scout.fatigue < exhaustion:
        morale -= 1
    return replace(npc_scout, fatigue=new_fatigue, morale=int(clamp(morale, 1, 10)))


def process_npc_scouting_week(
    rng: RandomSource,
    npc_scout: NPCScout,
    territory: Territory,
    players: Dict[str, Player],
    week: int,
    season: int
) -> NPCScoutingWeekResult:
    """
    Run one week of autonomous scouting for an assigned NPC scout.

    Args:
        rng: Random source for this tick
        npc_scout: NPC scout doing the work
        territory: Territory the NPC is assigned to
        players: World player snapshot keyed by id
        week: Current week
        season: Current season

    Returns:
        NPCScoutingWeekResult with the fatigued NPC and its reports
    """
    pool = _resolve_pool(territory, players)
    if not pool:
        logger.debug(f"{npc_scout.id}: empty player pool, no reports this week")
        return NPCScoutingWeekResult(npc_scout=_apply_weekly_fatigue(npc_scout), reports=())

    observation_count = rng.next_int(min(2, len(pool)), min(5, len(pool)))
    observed = rng.shuffle(pool)[:observation_count]

    reports = []
    for player in observed:
        base_quality = calculate_npc_report_quality(npc_scout, player)
        quality = int(clamp(round_half_up(rng.gaussian(base_quality, 10)), 1, 100))

        readings = _generate_readings(rng, npc_scout, player, quality)
        id_suffix = format(rng.next_int(100000, 999999), "x")

        reports.append(NPCScoutReport(
            id=f"npc_report_{id_suffix}",
            npc_scout_id=npc_scout.id,
            player_id=player.id,
            week=week,
            season=season,
            quality=quality,
            readings=tuple(readings),
            recommendation=_derive_recommendation(quality, player),
            summary=_build_summary(npc_scout, player, quality, readings),
            reviewed=False,
        ))

    updated = replace(
        _apply_weekly_fatigue(npc_scout),
        reports_submitted=npc_scout.reports_submitted + len(reports),
    )
    logger.debug(
        f"{npc_scout.id}: filed {len(reports)} reports in {territory.id} "
        f"(fatigue {npc_scout.fatigue:.0f} -> {updated.fatigue:.0f})"
    )
    return NPCScoutingWeekResult(npc_scout=updated, reports=tuple(reports))


def rest_npc_scout(npc_scout: NPCScout) -> NPCScout:
    """Rest week: fatigue recovers and morale ticks up."""
    return replace(
        npc_scout,
        fatigue=clamp(npc_scout.fatigue - CareerSettings.NPC_REST_FATIGUE_RECOVERY, 0, 100),
        morale=min(10, npc_scout.morale + 1),
    )


def _quality_tier(quality: float) -> ReportQualityTier:
    if quality >= 80:
        return ReportQualityTier.EXCELLENT
    if quality >= 55:
        return ReportQualityTier.GOOD
    if quality >= 30:
        return ReportQualityTier.DECENT
    return ReportQualityTier.POOR


def evaluate_npc_report(report: NPCScoutReport) -> NPCReportEvaluation:
    """Classify an NPC report; anything above poor is useful."""
    tier = _quality_tier(report.quality)
    return NPCReportEvaluation(useful=tier != ReportQualityTier.POOR, quality_tier=tier)
