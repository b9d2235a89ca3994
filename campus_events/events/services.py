"""Event catalog operations.

``approved_count`` is never stored: it is aggregated from registrations each
time events are read.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING
from typing import Any

from django.db import transaction
from django.db.models import Count
from django.db.models import F
from django.db.models import Q

from campus_events.core import fallback
from campus_events.core.exceptions import InvalidId
from campus_events.core.exceptions import NotFound
from campus_events.events.models import Event
from campus_events.registrations.models import Registration

if TYPE_CHECKING:
    from django.db.models import QuerySet

logger = logging.getLogger(__name__)

EVENT_NOT_FOUND = "Event not found"
INVALID_EVENT_ID = "Invalid event ID"
EVENT_FIELDS = (
    "name",
    "short_description",
    "description",
    "date",
    "time",
    "venue",
    "capacity",
)


def parse_event_id(value: Any) -> uuid.UUID:
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidId(INVALID_EVENT_ID) from exc


def annotated_events() -> QuerySet[Event]:
    return (
        Event.objects.select_related("organizer")
        .annotate(
            organizer_name=F("organizer__name"),
            approved_count=Count(
                "registrations",
                filter=Q(registrations__status=Registration.Status.APPROVED),
            ),
        )
        .order_by("date", "time")
    )


def list_events() -> QuerySet[Event]:
    return annotated_events()


def get_event(event_id: Any) -> Event:
    pk = parse_event_id(event_id)
    event = annotated_events().filter(pk=pk).first()
    if event is None:
        raise NotFound(EVENT_NOT_FOUND)
    return event


def create_event(*, organizer, **fields: Any) -> Event:
    """Persist a new event owned by ``organizer``.

    The organizer's role is deliberately not checked here; assigning the
    right account is left to the admin.
    """
    fallback.require_store()
    event = Event.objects.create(organizer=organizer, **_event_fields(fields))
    logger.info("Created event %s (%s)", event.pk, event.name)
    return event


def update_event(event_id: Any, *, organizer=None, **fields: Any) -> Event:
    pk = parse_event_id(event_id)
    fallback.require_store()
    event = Event.objects.filter(pk=pk).first()
    if event is None:
        raise NotFound(EVENT_NOT_FOUND)
    for name, value in _event_fields(fields).items():
        setattr(event, name, value)
    if organizer is not None:
        event.organizer = organizer
    event.save()
    logger.info("Updated event %s", event.pk)
    return event


def delete_event(event_id: Any) -> int:
    """Delete an event together with all of its registrations.

    Both deletes run in one transaction, so readers never observe the event
    gone with registrations left behind (or the reverse). Returns the number
    of registrations removed.
    """
    pk = parse_event_id(event_id)
    fallback.require_store()
    with transaction.atomic():
        event = Event.objects.select_for_update().filter(pk=pk).first()
        if event is None:
            raise NotFound(EVENT_NOT_FOUND)
        removed, _ = Registration.objects.filter(event=event).delete()
        event.delete()
    logger.info("Deleted event %s and %s registration(s)", pk, removed)
    return removed


def _event_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {name: fields[name] for name in EVENT_FIELDS if name in fields}
