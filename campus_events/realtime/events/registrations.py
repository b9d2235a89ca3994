from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from django.core.exceptions import ObjectDoesNotExist

if TYPE_CHECKING:  # import for type checking only
    from campus_events.registrations.models import Registration
from campus_events.realtime.socketio import broadcast

REGISTRATION_CREATED = "registration_created"
REGISTRATION_UPDATED = "registration_updated"


def _student_name(registration: Registration) -> str | None:
    # The student reference is not enforced by the store and may dangle.
    try:
        return registration.student.name
    except ObjectDoesNotExist:
        return None


def publish_registration_created(registration: Registration) -> None:
    """Announce a new pending registration; organizers refetch their queue."""

    payload: dict[str, Any] = {
        "id": str(registration.pk),
        "event_id": str(registration.event_id),
        "student_id": str(registration.student_id),
        "student_name": _student_name(registration),
    }
    broadcast(REGISTRATION_CREATED, payload)


def publish_registration_updated(registration: Registration) -> None:
    payload: dict[str, Any] = {
        "id": str(registration.pk),
        "event_id": str(registration.event_id),
        "event_name": registration.event.name,
        "student_name": _student_name(registration),
        "status": registration.status,
    }
    broadcast(REGISTRATION_UPDATED, payload)
