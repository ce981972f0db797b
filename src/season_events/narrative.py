"""
Narrative event choice resolution.

Each event type maps the chosen effect tag to a reputation change and a
follow-up inbox message. Event generation lives with the content pipeline;
this module only handles the player's response.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from scouting_core.models import InboxMessage
from season_events.models import EventChoiceResult, NarrativeEvent, NarrativeEventType

logger = logging.getLogger(__name__)


def _rival_poach(effect: str) -> Tuple[int, str]:
    if effect == "rush_report":
        return 3, (
            "You moved quickly and submitted your report ahead of the rival. "
            "The club has acknowledged receipt and the player is now on their shortlist. "
            "Your responsiveness didn't go unnoticed."
        )
    reputation = -1 if effect == "ignore" else 0
    return reputation, (
        "You elected not to rush. The rival scout submitted their report first, "
        "and the club is now considering their recommendation. Your earlier "
        "groundwork may still carry weight, but momentum is against you."
    )


def _exclusive_tip(effect: str) -> Tuple[int, str]:
    if effect == "investigate":
        return 5, (
            "You followed up on the tip and spent time observing the player in "
            "question. The contact's lead appears genuine; there's something worth "
            "monitoring here. Add them to your watchlist and continue gathering data."
        )
    return 0, (
        "You decided the tip wasn't worth pursuing this week. The window to act "
        "may have passed, but you've conserved your schedule for existing priorities."
    )


def _rival_recruitment(effect: str) -> Tuple[int, str]:
    if effect == "engage":
        return 4, (
            "You entered into exploratory conversations with the rival club. Word "
            "travels fast in scouting circles and your market value is now evident "
            "to all parties. Whether or not anything comes of it, your negotiating "
            "position at your current employer has quietly improved."
        )
    reputation = 1 if effect == "decline" else 0
    return reputation, (
        "You declined the approach with professionalism. The rival club respected "
        "your loyalty, and your current employer's management took quiet note. "
        "Trust is a currency that compounds over time."
    )


CHOICE_RESOLVERS: Dict[NarrativeEventType, Callable[[str], Tuple[int, str]]] = {
    NarrativeEventType.RIVAL_POACH: _rival_poach,
    NarrativeEventType.EXCLUSIVE_TIP: _exclusive_tip,
    NarrativeEventType.RIVAL_RECRUITMENT: _rival_recruitment,
}


def resolve_event_choice(
    event: NarrativeEvent,
    choice_index: int,
    week: Optional[int] = None,
    season: Optional[int] = None
) -> EventChoiceResult:
    """
    Apply the player's response to a narrative event.

    Args:
        event: Event being answered
        choice_index: Zero-based index into event.choices
        week: Current week for the follow-up message (defaults to the event's)
        season: Current season for the follow-up message (defaults to the event's)

    Returns:
        EventChoiceResult with the event marked resolved, the reputation
        change and any follow-up message

    Raises:
        IndexError: If the event has no choices or the index is out of range
    """
    if not event.choices:
        raise IndexError(f"Event {event.id} has no choices")
    if not 0 <= choice_index < len(event.choices):
        raise IndexError(
            f"Choice index {choice_index} out of range "
            f"(event {event.id} has {len(event.choices)} choices)"
        )

    updated = replace(event, selected_choice=choice_index)
    resolver = CHOICE_RESOLVERS.get(event.type)
    if resolver is None:
        return EventChoiceResult(event=updated, reputation_change=0)

    effect = event.choices[choice_index].effect
    reputation_change, body = resolver(effect)
    message = InboxMessage(
        id=f"msg_{event.id}_followup",
        week=week if week is not None else event.week,
        season=season if season is not None else event.season,
        type="event",
        title=f"Follow-up: {event.title}",
        body=body,
        action_required=False,
        related_id=event.id,
    )

    logger.debug(f"Resolved {event.type.value} event {event.id} with '{effect}': {reputation_change:+d}")
    return EventChoiceResult(
        event=updated,
        reputation_change=reputation_change,
        messages=(message,),
    )


def get_active_events(events: Sequence[NarrativeEvent]) -> List[NarrativeEvent]:
    """Events the player has not yet acknowledged."""
    return [e for e in events if not e.acknowledged]


def acknowledge_event(events: Sequence[NarrativeEvent], event_id: str) -> List[NarrativeEvent]:
    """Return a new list with the matching event acknowledged."""
    return [
        replace(e, acknowledged=True) if e.id == event_id else e
        for e in events
    ]
