"""
Season Events.

Narrative event choice resolution and season event modifiers.

Usage:
    from season_events import resolve_event_choice, apply_weekly_effects

Example:
    result = resolve_event_choice(event, choice_index=0, week=10, season=2025)
    scout = apply_weekly_effects(scout, [e for e in season_events if e.is_active(week)])
"""

from season_events.models import (
    ActiveEffectModifiers,
    EventChoice,
    EventChoiceResult,
    NarrativeEvent,
    NarrativeEventType,
    SeasonEffectType,
    SeasonEvent,
    SeasonEventChoice,
    SeasonEventEffect,
)
from season_events.narrative import (
    acknowledge_event,
    get_active_events,
    resolve_event_choice,
)
from season_events.season_effects import (
    apply_weekly_effects,
    build_decision_messages,
    get_active_effect_modifiers,
    get_effective_effects,
    resolve_season_event_choice,
)

__all__ = [
    'ActiveEffectModifiers',
    'EventChoice',
    'EventChoiceResult',
    'NarrativeEvent',
    'NarrativeEventType',
    'SeasonEffectType',
    'SeasonEvent',
    'SeasonEventChoice',
    'SeasonEventEffect',
    'acknowledge_event',
    'get_active_events',
    'resolve_event_choice',
    'apply_weekly_effects',
    'build_decision_messages',
    'get_active_effect_modifiers',
    'get_effective_effects',
    'resolve_season_event_choice',
]
