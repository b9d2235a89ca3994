from __future__ import annotations

import datetime as dt
import itertools
from typing import Any

from campus_events.events.models import Event
from campus_events.registrations.models import Registration

_sequence = itertools.count(1)


def create_event(*, organizer, **overrides: Any) -> Event:
    fields: dict[str, Any] = {
        "name": f"Event {next(_sequence)}",
        "short_description": "Short description",
        "description": "A longer description of the event.",
        "date": dt.date(2030, 1, 15),
        "time": dt.time(9, 0),
        "venue": "Main Hall",
        "capacity": 50,
    }
    fields.update(overrides)
    return Event.objects.create(organizer=organizer, **fields)


def create_registration(*, event: Event, student, status: str | None = None):
    return Registration.objects.create(
        event=event,
        student=student,
        status=status or Registration.Status.PENDING,
    )


def event_payload(organizer_id, **overrides: Any) -> dict[str, Any]:
    """JSON body accepted by the create/update endpoints."""
    payload: dict[str, Any] = {
        "name": "Robotics Workshop",
        "short_description": "Build a line follower",
        "description": "Hands-on robotics session for beginners.",
        "date": "2030-04-02",
        "time": "14:30",
        "venue": "Lab 3",
        "capacity": 20,
        "organizerId": organizer_id,
    }
    payload.update(overrides)
    return payload
