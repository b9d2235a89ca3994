from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:  # import for type checking only
    from campus_events.events.models import Event
from campus_events.realtime.socketio import broadcast

EVENT_CREATED = "event_created"
EVENT_UPDATED = "event_updated"
EVENT_DELETED = "event_deleted"


def build_event_payload(event: Event) -> dict[str, Any]:
    return {
        "id": str(event.pk),
        "name": event.name,
        "organizer_id": str(event.organizer_id),
    }


def publish_event_created(event: Event) -> None:
    broadcast(EVENT_CREATED, build_event_payload(event))


def publish_event_updated(event: Event) -> None:
    payload = build_event_payload(event)
    broadcast(EVENT_UPDATED, payload)


def publish_event_deleted(event_id: Any) -> None:
    broadcast(EVENT_DELETED, {"id": str(event_id)})
