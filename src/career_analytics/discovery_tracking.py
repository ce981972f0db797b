"""
Discovery tracking.

Records players the scout discovered and scores how well the scout's
potential prediction held up as the player's career unfolded.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Sequence

from scouting_core.models import Player, Scout
from scouting_core.utils import clamp, round_half_up, round_to
from career_analytics.models import CareerSnapshot, DiscoveryRecord

logger = logging.getLogger(__name__)

WONDERKID_PA_THRESHOLD = 150
WONDERKID_MAX_AGE = 21
HIGH_CEILING_CA_THRESHOLD = 150


def record_discovery(player: Player, scout: Scout, week: int, season: int) -> DiscoveryRecord:
    """Start tracking a newly discovered player."""
    was_wonderkid = (
        player.age <= WONDERKID_MAX_AGE
        and player.potential_ability >= WONDERKID_PA_THRESHOLD
    )
    logger.debug(
        f"Scout {scout.id} discovered {player.id}"
        f"{' (wonderkid)' if was_wonderkid else ''}"
    )
    return DiscoveryRecord(
        player_id=player.id,
        discovered_week=week,
        discovered_season=season,
        initial_ca=player.current_ability,
        initial_pa=player.potential_ability,
        career_snapshots=(),
        was_wonderkid=was_wonderkid,
        prediction_accuracy=None,
    )


def add_season_snapshot(record: DiscoveryRecord, player: Player, season: int) -> DiscoveryRecord:
    """Add the player's end-of-season snapshot, replacing any for the same season."""
    snapshot = CareerSnapshot(
        season=season,
        club_id=player.club_id,
        current_ability=player.current_ability,
        position=player.position,
        age=player.age,
    )
    kept = tuple(s for s in record.career_snapshots if s.season != season)
    return replace(record, career_snapshots=kept + (snapshot,))


def calculate_prediction_accuracy(record: DiscoveryRecord, player: Player) -> int:
    """
    Score the scout's potential prediction against the player's current ability.

    Tiers:
        predicted high, reached high: 90-100, closer is better
        predicted high, fell short: 30-50 by how close the player got
        missed a player who reached high: 10-30 by initial ability
        otherwise: 100 - |predicted - current| / 2, 0-100
    """
    predicted = record.initial_pa
    current = player.current_ability
    predicted_high = predicted >= HIGH_CEILING_CA_THRESHOLD
    reached_high = current >= HIGH_CEILING_CA_THRESHOLD

    if predicted_high and reached_high:
        score = 100 - abs(predicted - current) * 0.5
        return round_half_up(clamp(score, 90, 100))

    if predicted_high:
        score = 30 + current / HIGH_CEILING_CA_THRESHOLD * 20
        return round_half_up(clamp(score, 30, 50))

    if reached_high:
        proximity = min(1, record.initial_ca / HIGH_CEILING_CA_THRESHOLD)
        return round_half_up(clamp(10 + proximity * 20, 10, 30))

    score = 100 - abs(predicted - current) / 2
    return round_half_up(clamp(score, 0, 100))


def process_season_discoveries(
    discoveries: Sequence[DiscoveryRecord],
    players: Dict[str, Player],
    season: int
) -> List[DiscoveryRecord]:
    """Snapshot and re-score every discovery; players no longer in the world are left as-is."""
    processed = []
    for record in discoveries:
        player = players.get(record.player_id)
        if player is None:
            processed.append(record)
            continue
        updated = add_season_snapshot(record, player, season)
        processed.append(replace(
            updated, prediction_accuracy=calculate_prediction_accuracy(updated, player)
        ))
    return processed


def get_wonderkid_discoveries(discoveries: Sequence[DiscoveryRecord]) -> List[DiscoveryRecord]:
    return [d for d in discoveries if d.was_wonderkid]


def get_discovery_stats(discoveries: Sequence[DiscoveryRecord]) -> Dict[str, float]:
    """
    Summary statistics.

    Returns:
        Dict with total, wonderkids and avg_accuracy (1 d.p., scored records only)
    """
    scored = [d.prediction_accuracy for d in discoveries if d.prediction_accuracy is not None]
    avg_accuracy = sum(scored) / len(scored) if scored else 0.0
    return {
        "total": len(discoveries),
        "wonderkids": len([d for d in discoveries if d.was_wonderkid]),
        "avg_accuracy": round_to(avg_accuracy, 1),
    }
