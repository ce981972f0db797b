"""
Season Cycle.

CareerSeasonService runs the career engines in order for each week and
at the season boundary.

Usage:
    from season_cycle import CareerSeasonService

Example:
    service = CareerSeasonService(SeededRandomSource(42))
    scout = service.start_season(scout, season=2025)
    outcome = service.process_npc_week(scout, npcs, territories, players, week=1, season=2025)
    result = service.close_season(
        scout, reports, clubs, season=2025,
        npc_scouts=outcome.npc_scouts, npc_reports=season_npc_reports,
    )
"""

from season_cycle.career_season_service import (
    CareerSeasonService,
    NPCWeekOutcome,
    SeasonCloseResult,
)

__all__ = [
    'CareerSeasonService',
    'NPCWeekOutcome',
    'SeasonCloseResult',
]
