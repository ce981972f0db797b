"""
Career Season Service.

Threads scout state through the engines in a fixed order each week and
at the season boundary:

    NPC network (weekly, tier 4+)
    -> reputation ledger (report, signing and discovery events)
    -> manager meetings (tier 4+) and board directives (tier 5)
    -> performance review at season end
    -> reputation change, then job offers

All draws for a tick go through the one RandomSource the service holds,
so the same seed and inputs reproduce identical output.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config.career_settings import CareerSettings
from career_progression.job_market import generate_job_offers
from career_progression.models import JobOffer, PerformanceReview
from career_progression.performance_review import calculate_performance_review
from career_progression.reputation import (
    ReputationEvent,
    SeasonEnd,
    apply_reputation_events,
    update_reputation,
)
from career_progression.review_bonuses import TierReviewContext
from club_relations.board import evaluate_board_directives, generate_board_directives
from club_relations.manager import process_manager_meeting, reset_meetings_for_new_season
from club_relations.models import BoardEvaluation, MeetingResult
from npc_network.models import NPCScout, NPCScoutReport, Territory
from npc_network.scouting_week import process_npc_scouting_week, rest_npc_scout
from scouting_core.models import Club, Player, Scout, ScoutReport
from scouting_core.random_source import RandomSource
from scouting_core.utils import average, clamp


@dataclass(frozen=True)
class NPCWeekOutcome:
    """Result of one weekly NPC pass across the roster."""

    npc_scouts: Tuple[NPCScout, ...]
    reports: Tuple[NPCScoutReport, ...]


@dataclass(frozen=True)
class SeasonCloseResult:
    """
    Everything the season boundary produced.

    Attributes:
        scout: Scout after the review and board reputation changes
        review: Performance review
        board_evaluation: Board settlement (tier 5 only)
        job_offers: Offers on the table for next season
    """

    scout: Scout
    review: PerformanceReview
    board_evaluation: Optional[BoardEvaluation]
    job_offers: Tuple[JobOffer, ...]


class CareerSeasonService:
    """
    Orchestrates the career engines for one scout.

    The service holds no game state of its own beyond the random source;
    every method takes state in and returns new state out.
    """

    def __init__(self, rng: RandomSource, settings: type = CareerSettings):
        """
        Initialize the service.

        Args:
            rng: Random source shared by every engine call
            settings: Settings class (CareerSettings or a subclass)
        """
        self.rng = rng
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    # ================================================================
    # WEEKLY
    # ================================================================

    def process_npc_week(
        self,
        scout: Scout,
        npc_scouts: Sequence[NPCScout],
        territories: Sequence[Territory],
        players: Dict[str, Player],
        week: int,
        season: int
    ) -> NPCWeekOutcome:
        """
        Run the weekly NPC pass.

        Assigned NPCs scout their territory. Unassigned NPCs, and NPCs whose
        territory no longer exists, rest. Below the network tier nothing runs.
        """
        if scout.career_tier < self.settings.NPC_NETWORK_MIN_TIER:
            return NPCWeekOutcome(npc_scouts=tuple(npc_scouts), reports=())

        territory_by_id = {t.id: t for t in territories}
        updated: List[NPCScout] = []
        reports: List[NPCScoutReport] = []

        for npc in npc_scouts:
            territory = territory_by_id.get(npc.territory_id) if npc.territory_id else None
            if territory is None:
                if npc.territory_id:
                    self.logger.warning(
                        f"NPC {npc.id} assigned to unknown territory {npc.territory_id}; resting"
                    )
                updated.append(rest_npc_scout(npc))
                continue

            result = process_npc_scouting_week(self.rng, npc, territory, players, week, season)
            updated.append(result.npc_scout)
            reports.extend(result.reports)

        self.logger.debug(
            f"Week {week}: {len(npc_scouts)} NPC scouts filed {len(reports)} reports"
        )
        return NPCWeekOutcome(npc_scouts=tuple(updated), reports=tuple(reports))

    def absorb_reputation_events(self, scout: Scout, events: Iterable[ReputationEvent]) -> Scout:
        """Fold the week's reputation events into the scout, in order."""
        return apply_reputation_events(scout, events)

    def is_meeting_week(self, week: int) -> bool:
        interval = self.settings.MANAGER_MEETING_INTERVAL_WEEKS
        return week > 0 and week % interval == 0

    def hold_manager_meeting(self, scout: Scout) -> Tuple[Scout, Optional[MeetingResult]]:
        """
        Meet the manager (tier 4+ with a relationship).

        Returns:
            Tuple of (scout with the updated relationship, meeting result
            or None when no meeting took place)
        """
        if (
            scout.career_tier < self.settings.NPC_NETWORK_MIN_TIER
            or scout.manager_relationship is None
        ):
            return scout, None

        result = process_manager_meeting(self.rng, scout, scout.manager_relationship)
        return replace(scout, manager_relationship=result.relationship), result

    # ================================================================
    # SEASON BOUNDARY
    # ================================================================

    def start_season(self, scout: Scout, season: int) -> Scout:
        """
        Reset per-season relationship state and set board directives (tier 5).

        Directives still pending from earlier seasons are kept.
        """
        if scout.manager_relationship is not None:
            scout = replace(
                scout,
                manager_relationship=reset_meetings_for_new_season(scout.manager_relationship),
            )
        if scout.career_tier >= self.settings.BOARD_DIRECTIVES_MIN_TIER:
            directives = generate_board_directives(self.rng, scout, season)
            scout = replace(scout, board_directives=scout.board_directives + tuple(directives))
        return scout

    def close_season(
        self,
        scout: Scout,
        reports: Sequence[ScoutReport],
        clubs: Dict[str, Club],
        season: int,
        tier_context: Optional[TierReviewContext] = None,
        npc_scouts: Sequence[NPCScout] = (),
        npc_reports: Sequence[NPCScoutReport] = ()
    ) -> SeasonCloseResult:
        """
        Settle the season.

        Order: board evaluation (tier 5), performance review, review
        reputation change, board reputation change, then job offers
        against the updated scout.

        Args:
            scout: Scout at season end
            reports: Reports submitted (filtered to scout and season by the review)
            clubs: All clubs keyed by id
            season: Season being closed
            tier_context: Tier 3-5 review context; built from the scout's
                relationship, directives and the NPC arguments when omitted
                at tier 4+
            npc_scouts: NPC roster at season end
            npc_reports: NPC reports filed this season

        Returns:
            SeasonCloseResult
        """
        evaluation = None
        if scout.career_tier >= self.settings.BOARD_DIRECTIVES_MIN_TIER and scout.board_directives:
            evaluation = evaluate_board_directives(scout, scout.board_directives, season)

        if tier_context is None and scout.career_tier >= self.settings.NPC_NETWORK_MIN_TIER:
            tier_context = TierReviewContext(
                npc_scouts=tuple(npc_scouts),
                manager_relationship=scout.manager_relationship,
                board_directives=scout.board_directives,
                department_report_count=len(npc_reports),
                department_average_quality=average(r.quality for r in npc_reports),
            )

        review = calculate_performance_review(scout, reports, season, tier_context)
        updated = update_reputation(scout, SeasonEnd(review.outcome.to_season_rating()))

        if evaluation is not None:
            settled = {d.id for d in evaluation.completed + evaluation.failed}
            updated = replace(
                updated,
                reputation=clamp(updated.reputation + evaluation.reputation_change, 0, 100),
                board_directives=tuple(
                    d for d in updated.board_directives if d.id not in settled
                ),
            )

        offers = generate_job_offers(self.rng, updated, clubs, season)

        self.logger.info(
            f"Closed season {season} for {scout.id}: {review.outcome.value}, "
            f"reputation {scout.reputation:.1f} -> {updated.reputation:.1f}, "
            f"{len(offers)} offers"
        )
        return SeasonCloseResult(
            scout=updated,
            review=review,
            board_evaluation=evaluation,
            job_offers=tuple(offers),
        )
