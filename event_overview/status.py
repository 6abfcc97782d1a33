"""Event lifecycle status computation.

This is the only place a status is derived from dates. The result is stored on
the event when it is created or updated and is never recomputed on read.
"""

import dataclasses
from datetime import datetime
from typing import Optional

from .models.event import Event, EventStatus
from .utils.timezone import ensure_utc, now_utc, parse_instant


def _instant(event, name: str) -> Optional[datetime]:
    return parse_instant(getattr(event, name, None))


def compute_status(event, now: Optional[datetime] = None) -> EventStatus:
    """
    Compute the lifecycle status of an event from its dates.

    Rules are evaluated top to bottom and the first match wins. A missing or
    unparsable date makes a rule not match, so a later rule can still apply to
    events with partial timelines. All windows are inclusive at both ends.

    Args:
        event: Any object exposing is_postponed and the registration, event
               and review dates (typically an Event)
        now: Reference instant (defaults to the current time, naive is UTC)

    Returns:
        EventStatus: The computed status; never Cancelled
    """
    if getattr(event, 'is_postponed', False):
        return EventStatus.POSTPONED

    now = ensure_utc(now) if now is not None else now_utc()
    reg_start = _instant(event, 'registration_start')
    reg_end = _instant(event, 'registration_end')
    evt_start = _instant(event, 'event_start')
    evt_end = _instant(event, 'event_end')
    review_start = _instant(event, 'review_start')
    review_end = _instant(event, 'review_end')

    if reg_start is not None and now < reg_start:
        return EventStatus.UPCOMING

    if reg_start is not None and reg_end is not None and reg_start <= now <= reg_end:
        return EventStatus.OPEN_FOR_REGISTRATION
    # Missing start means registration is already open
    if reg_start is None and reg_end is not None and now <= reg_end:
        return EventStatus.OPEN_FOR_REGISTRATION

    if reg_end is not None and evt_start is not None and reg_end < now < evt_start:
        return EventStatus.REGISTRATION_CLOSED

    if evt_start is not None and evt_end is not None and evt_start <= now <= evt_end:
        return EventStatus.ONGOING

    if evt_end is not None and review_end is not None and evt_end < now <= review_end:
        if review_start is None or now >= review_start:
            return EventStatus.IN_REVIEW

    if evt_end is not None and now > evt_end:
        if review_end is None or now > review_end:
            return EventStatus.COMPLETED

    if evt_start is not None and now < evt_start:
        return EventStatus.UPCOMING

    return EventStatus.UPCOMING


def with_computed_status(event: Event, now: Optional[datetime] = None) -> Event:
    """
    Return a copy of the event carrying its freshly computed status.

    Cancelled events are returned unchanged: cancellation is terminal and is
    not something the dates can undo.
    """
    if event.status == EventStatus.CANCELLED:
        return event
    return dataclasses.replace(event, status=compute_status(event, now))
