"""
Club Relations.

Manager relationship and directives (tier 4+), board directives (tier 5)
and secondary specialization unlocks.

Usage:
    from club_relations import (
        calculate_manager_satisfaction,
        process_manager_meeting,
        generate_board_directives,
        evaluate_board_directives,
    )

Example:
    result = process_manager_meeting(rng, scout, relationship)
    directives = generate_board_directives(rng, scout, season=2025)
    evaluation = evaluate_board_directives(scout, directives, season=2025)
"""

from club_relations.models import (
    BoardDirective,
    BoardEvaluation,
    ManagerRelationship,
    MeetingResult,
    ScoutingDirective,
)
from club_relations.manager import (
    calculate_manager_satisfaction,
    calculate_style_multiplier,
    generate_manager_directive,
    process_manager_meeting,
    reset_meetings_for_new_season,
)
from club_relations.board import (
    evaluate_board_directives,
    generate_board_directives,
)
from club_relations.specialization import (
    can_unlock_secondary_spec,
    unlock_secondary_specialization,
)

__all__ = [
    'BoardDirective',
    'BoardEvaluation',
    'ManagerRelationship',
    'MeetingResult',
    'ScoutingDirective',
    'calculate_manager_satisfaction',
    'calculate_style_multiplier',
    'generate_manager_directive',
    'process_manager_meeting',
    'reset_meetings_for_new_season',
    'evaluate_board_directives',
    'generate_board_directives',
    'can_unlock_secondary_spec',
    'unlock_secondary_specialization',
]
