"""
Board directives (tier 5).

The board sets one to three season objectives weighted by the scout's
specialization. At season end completed objectives pay out reputation
(with a bonus when the objective suits the specialization) and missed
ones cost reputation. The net swing is capped at 30 either way.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from scouting_core.enums import BoardDirectiveType, Specialization
from scouting_core.models import Scout
from scouting_core.random_source import RandomSource
from scouting_core.utils import clamp, round_half_up
from club_relations.models import BoardDirective, BoardEvaluation

logger = logging.getLogger(__name__)

MAX_REPUTATION_SWING = 30
AFFINITY_MULTIPLIER = 1.2

SPECIALIZATION_AFFINITY: Dict[Specialization, Tuple[BoardDirectiveType, ...]] = {
    Specialization.YOUTH: (
        BoardDirectiveType.FIND_WONDERKID, BoardDirectiveType.BUILD_PIPELINE,
    ),
    Specialization.FIRST_TEAM: (
        BoardDirectiveType.BUILD_PIPELINE, BoardDirectiveType.IMPROVE_ACCURACY,
    ),
    Specialization.REGIONAL: (
        BoardDirectiveType.EXPAND_TERRITORY, BoardDirectiveType.BUILD_PIPELINE,
    ),
    Specialization.DATA: (
        BoardDirectiveType.IMPROVE_ACCURACY, BoardDirectiveType.CUT_COSTS,
    ),
}

DIRECTIVE_WEIGHTS: Dict[Specialization, List[Tuple[BoardDirectiveType, float]]] = {
    Specialization.YOUTH: [
        (BoardDirectiveType.FIND_WONDERKID, 35),
        (BoardDirectiveType.BUILD_PIPELINE, 30),
        (BoardDirectiveType.EXPAND_TERRITORY, 20),
        (BoardDirectiveType.IMPROVE_ACCURACY, 10),
        (BoardDirectiveType.CUT_COSTS, 5),
    ],
    Specialization.FIRST_TEAM: [
        (BoardDirectiveType.BUILD_PIPELINE, 25),
        (BoardDirectiveType.IMPROVE_ACCURACY, 25),
        (BoardDirectiveType.FIND_WONDERKID, 20),
        (BoardDirectiveType.EXPAND_TERRITORY, 15),
        (BoardDirectiveType.CUT_COSTS, 15),
    ],
    Specialization.REGIONAL: [
        (BoardDirectiveType.EXPAND_TERRITORY, 40),
        (BoardDirectiveType.BUILD_PIPELINE, 25),
        (BoardDirectiveType.FIND_WONDERKID, 20),
        (BoardDirectiveType.CUT_COSTS, 10),
        (BoardDirectiveType.IMPROVE_ACCURACY, 5),
    ],
    Specialization.DATA: [
        (BoardDirectiveType.IMPROVE_ACCURACY, 35),
        (BoardDirectiveType.CUT_COSTS, 25),
        (BoardDirectiveType.BUILD_PIPELINE, 20),
        (BoardDirectiveType.FIND_WONDERKID, 10),
        (BoardDirectiveType.EXPAND_TERRITORY, 10),
    ],
}

# type -> (description, (reward min, max), (penalty min, max))
DIRECTIVE_META = {
    BoardDirectiveType.EXPAND_TERRITORY: (
        "Extend the scouting network into at least two new countries this season.",
        (5, 10), (3, 8),
    ),
    BoardDirectiveType.CUT_COSTS: (
        "Reduce the department's wage bill by consolidating the NPC scout roster.",
        (4, 8), (5, 10),
    ),
    BoardDirectiveType.FIND_WONDERKID: (
        "Identify and submit a report on a player of world-class potential "
        "before the window closes.",
        (8, 15), (5, 12),
    ),
    BoardDirectiveType.BUILD_PIPELINE: (
        "Establish a minimum of three active scouting territories with assigned NPC scouts.",
        (6, 12), (4, 9),
    ),
    BoardDirectiveType.IMPROVE_ACCURACY: (
        "Raise the department's average report quality above 70 by season end.",
        (5, 10), (3, 7),
    ),
}


def _directive_count(reputation: float) -> int:
    if reputation >= 80:
        return 3
    if reputation >= 50:
        return 2
    return 1


def generate_board_directives(
    rng: RandomSource,
    scout: Scout,
    season: int
) -> List[BoardDirective]:
    """
    Set the board's objectives for the season.

    Args:
        rng: Random source for this tick
        scout: Player scout (reputation sets the count, specialization the mix)
        season: Season the directives run for; also their deadline

    Returns:
        1-3 directives with distinct types
    """
    weights = DIRECTIVE_WEIGHTS[scout.primary_specialization]
    used = set()
    directives = []

    for _ in range(_directive_count(scout.reputation)):
        available = [(t, w) for t, w in weights if t not in used]
        if not available:
            break

        directive_type = rng.pick_weighted(available)
        used.add(directive_type)
        description, reward_band, penalty_band = DIRECTIVE_META[directive_type]

        id_number = rng.next_int(10000, 99999)
        directives.append(BoardDirective(
            id=f"board_{directive_type.value}_s{season}_{id_number}",
            type=directive_type,
            description=description,
            deadline=season,
            completed=False,
            reward_reputation=rng.next_int(*reward_band),
            penalty_reputation=rng.next_int(*penalty_band),
        ))

    logger.info(
        f"Board set {len(directives)} directives for season {season}: "
        f"{', '.join(d.type.value for d in directives)}"
    )
    return directives


def evaluate_board_directives(
    scout: Scout,
    directives: Sequence[BoardDirective],
    season: int
) -> BoardEvaluation:
    """
    Settle board directives at season end.

    Completed directives pay their reward (× 1.2 when the type suits the
    scout's primary specialization). Uncompleted directives at or past their
    deadline cost their penalty. Others are left pending.
    """
    completed = [d for d in directives if d.completed]
    failed = [d for d in directives if not d.completed and d.deadline <= season]

    affinity = SPECIALIZATION_AFFINITY[scout.primary_specialization]
    change = 0
    for directive in completed:
        multiplier = AFFINITY_MULTIPLIER if directive.type in affinity else 1.0
        change += round_half_up(directive.reward_reputation * multiplier)
    for directive in failed:
        change -= directive.penalty_reputation

    change = int(clamp(change, -MAX_REPUTATION_SWING, MAX_REPUTATION_SWING))

    logger.info(
        f"Board evaluation season {season}: {len(completed)} completed, "
        f"{len(failed)} failed, reputation {change:+d}"
    )
    return BoardEvaluation(
        completed=tuple(completed),
        failed=tuple(failed),
        reputation_change=change,
    )
