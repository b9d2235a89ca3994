"""Degraded mode: a fixed demo dataset served when the store is unavailable.

Store availability is a single boolean. It is ``False`` when
``CAMPUS_EVENTS_DEMO_MODE`` is switched on, or when the default database
does not answer a ``SELECT 1`` probe. Read-only catalog endpoints and login
then answer from the dataset below; everything that needs to write, or to
read per-user state, refuses with ``StoreUnavailable``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.utils.crypto import constant_time_compare

from campus_events.core.exceptions import StoreUnavailable
from campus_events.core.store import store_available

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoUser:
    id: str
    email: str
    name: str
    role: str


DEMO_USERS: tuple[DemoUser, ...] = (
    DemoUser(id="1", email="admin@campus.edu", name="Admin User", role="admin"),
    DemoUser(
        id="2", email="organizer@demo.com", name="Demo Organizer", role="organizer"
    ),
    DemoUser(id="3", email="student@demo.com", name="Demo Student", role="student"),
)

DEMO_ORGANIZERS: tuple[dict[str, str], ...] = (
    {"id": "2", "name": "Demo Organizer", "email": "organizer@demo.com"},
    {"id": "4", "name": "Event Coordinator", "email": "coordinator@demo.com"},
)

DEMO_EVENTS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "name": "Tech Conference 2024",
        "short_description": "Annual technology conference",
        "description": (
            "Join us for the biggest tech event of the year with keynotes, "
            "workshops, and networking."
        ),
        "date": "2024-03-15",
        "time": "09:00",
        "venue": "Main Auditorium",
        "capacity": 100,
        "organizer_id": "2",
        "organizer_name": "Demo Organizer",
        "approved_count": 15,
    },
    {
        "id": "2",
        "name": "Career Fair",
        "short_description": "Connect with top employers",
        "description": (
            "Meet representatives from leading companies and explore career "
            "opportunities."
        ),
        "date": "2024-03-20",
        "time": "10:00",
        "venue": "Student Center",
        "capacity": 200,
        "organizer_id": "2",
        "organizer_name": "Demo Organizer",
        "approved_count": 45,
    },
)


def demo_mode_active() -> bool:
    if getattr(settings, "CAMPUS_EVENTS_DEMO_MODE", False):
        return True
    if not store_available():
        logger.warning("Store probe failed, serving demo dataset")
        return True
    return False


def require_store() -> None:
    """Refuse operations that cannot be answered from the demo dataset."""
    if demo_mode_active():
        raise StoreUnavailable


def authenticate_demo_user(email: str, password: str, role: str) -> DemoUser | None:
    expected = getattr(settings, "CAMPUS_EVENTS_DEMO_PASSWORD", "")
    if not expected or not constant_time_compare(password, expected):
        return None
    normalized = email.strip().lower()
    for user in DEMO_USERS:
        if user.email == normalized and user.role == role:
            return user
    return None


def demo_events() -> list[dict[str, Any]]:
    return [dict(event) for event in DEMO_EVENTS]


def demo_event(event_id: str) -> dict[str, Any] | None:
    for event in DEMO_EVENTS:
        if event["id"] == str(event_id):
            return dict(event)
    return None


def demo_organizers() -> list[dict[str, str]]:
    return [dict(organizer) for organizer in DEMO_ORGANIZERS]
