"""
Season event effects.

Active season events sum into ActiveEffectModifiers. Only reputation and
fatigue touch the scout directly; the other modifiers are read by the
transfer, cost and youth systems.
"""

import logging
from dataclasses import replace
from typing import List, Sequence, Tuple

from scouting_core.models import InboxMessage, Scout
from scouting_core.utils import clamp, round_half_up
from season_events.models import (
    ActiveEffectModifiers,
    SeasonEffectType,
    SeasonEvent,
    SeasonEventEffect,
)

logger = logging.getLogger(__name__)

# Effect type -> modifier field
MODIFIER_FIELDS = {
    SeasonEffectType.TRANSFER_PRICE: "transfer_price",
    SeasonEffectType.SCOUTING_COST: "scouting_cost",
    SeasonEffectType.FATIGUE: "fatigue",
    SeasonEffectType.REPUTATION_BONUS: "reputation_bonus",
    SeasonEffectType.YOUTH_INTAKE: "youth_intake",
    SeasonEffectType.PLAYER_AVAILABILITY: "player_availability_reduction",
    SeasonEffectType.INJURY_RISK: "injury_risk",
    SeasonEffectType.ATTRIBUTE_REVEAL: "attribute_reveal_bonus",
}

FATIGUE_SCALE = 10


def get_effective_effects(event: SeasonEvent) -> Tuple[SeasonEventEffect, ...]:
    """The chosen option's effects once resolved, otherwise the base effects."""
    index = event.choice_selected
    if event.resolved and index is not None and 0 <= index < len(event.choices):
        return event.choices[index].effects
    return event.effects


def get_active_effect_modifiers(active_events: Sequence[SeasonEvent]) -> ActiveEffectModifiers:
    """Sum the effective effects of every active event."""
    totals = {name: 0.0 for name in MODIFIER_FIELDS.values()}
    for event in active_events:
        for effect in get_effective_effects(event):
            value = effect.value
            if effect.type == SeasonEffectType.PLAYER_AVAILABILITY:
                value = abs(value)
            totals[MODIFIER_FIELDS[effect.type]] += value
    return ActiveEffectModifiers(**totals)


def apply_weekly_effects(scout: Scout, active_events: Sequence[SeasonEvent]) -> Scout:
    """
    Apply this week's reputation and fatigue modifiers to the scout.

    Fatigue changes by round(fatigue modifier × 10). Both values are
    clamped to 0-100.
    """
    if not active_events:
        return scout

    mods = get_active_effect_modifiers(active_events)
    updated = scout
    if mods.reputation_bonus != 0:
        updated = replace(
            updated, reputation=clamp(updated.reputation + mods.reputation_bonus, 0, 100)
        )
    if mods.fatigue != 0:
        change = round_half_up(mods.fatigue * FATIGUE_SCALE)
        updated = replace(updated, fatigue=clamp(updated.fatigue + change, 0, 100))
    return updated


def build_decision_messages(
    active_events: Sequence[SeasonEvent],
    week: int,
    season: int
) -> List[InboxMessage]:
    """Decision prompts for unresolved events with choices, on their first week."""
    return [
        InboxMessage(
            id=f"se_choice_{event.id}",
            week=week,
            season=season,
            type="event",
            title=f"{event.name}: Decision Required",
            body=(
                f"{event.description}. You have a decision to make regarding your "
                f"scouting strategy during this period."
            ),
            action_required=True,
            related_id=event.id,
        )
        for event in active_events
        if event.choices and not event.resolved and event.start_week == week
    ]


def resolve_season_event_choice(
    events: Sequence[SeasonEvent],
    event_id: str,
    choice_index: int
) -> List[SeasonEvent]:
    """
    Record a choice on a season event.

    Unknown ids, already-resolved events and out-of-range indices leave
    the events unchanged.
    """
    resolved = []
    for event in events:
        if (
            event.id == event_id
            and not event.resolved
            and 0 <= choice_index < len(event.choices)
        ):
            logger.debug(f"Season event {event.id}: choice {choice_index} selected")
            event = replace(event, resolved=True, choice_selected=choice_index)
        resolved.append(event)
    return resolved
