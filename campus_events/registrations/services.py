"""Registration lifecycle: ``pending -> approved | rejected``.

Only ``register`` creates registrations and it always starts them as
``pending``; ``set_registration_status`` only ever writes a terminal status.
Capacity is not consulted anywhere: over-capacity registrations are accepted.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING
from typing import Any

from django.db import IntegrityError
from django.db import transaction

from campus_events.core import fallback
from campus_events.core.exceptions import DuplicateRegistration
from campus_events.core.exceptions import Forbidden
from campus_events.core.exceptions import InvalidId
from campus_events.core.exceptions import InvalidStatus
from campus_events.core.exceptions import NotFound
from campus_events.events.models import Event
from campus_events.events.services import EVENT_NOT_FOUND
from campus_events.events.services import parse_event_id
from campus_events.registrations.models import Registration
from campus_events.users.models import User

if TYPE_CHECKING:
    from django.db.models import QuerySet

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = (Registration.Status.APPROVED, Registration.Status.REJECTED)


def parse_registration_id(value: Any) -> uuid.UUID:
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError) as exc:
        msg = "Invalid registration ID"
        raise InvalidId(msg) from exc


def _user_pk(value: Any) -> int | None:
    try:
        return int(str(value))
    except (TypeError, ValueError):
        return None


def register(event_id: Any, student) -> Registration:
    """Create a pending registration of ``student`` for the event.

    A duplicate is caught by the pre-check in the common case and by the
    unique constraint when two requests race; both surface as
    ``DuplicateRegistration``. An insert that fails because the event was
    deleted in the meantime surfaces as ``NotFound``.
    """
    pk = parse_event_id(event_id)
    fallback.require_store()

    event = Event.objects.filter(pk=pk).first()
    if event is None:
        raise NotFound(EVENT_NOT_FOUND)

    student_user = User.objects.filter(
        pk=_user_pk(student.id),
        role=User.Role.STUDENT,
    ).first()
    if student_user is None:
        msg = "Student account not found"
        raise NotFound(msg)

    if Registration.objects.filter(event=event, student=student_user).exists():
        raise DuplicateRegistration

    try:
        with transaction.atomic():
            registration = Registration.objects.create(
                event=event,
                student=student_user,
                status=Registration.Status.PENDING,
            )
    except IntegrityError as exc:
        if not Event.objects.filter(pk=pk).exists():
            raise NotFound(EVENT_NOT_FOUND) from exc
        raise DuplicateRegistration from exc

    logger.info(
        "Student %s registered for event %s (%s)",
        student_user.pk,
        event.pk,
        registration.pk,
    )
    return registration


def list_my_registrations(student_id: Any) -> QuerySet[Registration]:
    fallback.require_store()
    return (
        Registration.objects.filter(student_id=_user_pk(student_id))
        .select_related("event")
        .order_by("-created_at")
    )


def list_pending_for_organizer(organizer_id: Any) -> QuerySet[Registration]:
    """Pending registrations on the organizer's events, oldest first."""
    fallback.require_store()
    return (
        Registration.objects.filter(
            status=Registration.Status.PENDING,
            event__organizer_id=_user_pk(organizer_id),
        )
        .select_related("event", "student")
        .order_by("created_at")
    )


def set_registration_status(registration_id: Any, new_status: Any, actor) -> Registration:
    pk = parse_registration_id(registration_id)
    if new_status not in TERMINAL_STATUSES:
        raise InvalidStatus
    fallback.require_store()

    registration = (
        Registration.objects.select_related("event").filter(pk=pk).first()
    )
    if registration is None:
        msg = "Registration not found"
        raise NotFound(msg)

    if not can_review(actor, registration):
        logger.warning(
            "User %s (%s) may not review registration %s",
            getattr(actor, "id", None),
            getattr(actor, "role", None),
            registration.pk,
        )
        raise Forbidden

    # No check of the current status: repeating a decision rewrites it.
    registration.status = new_status
    registration.save(update_fields=["status", "updated_at"])
    logger.info("Registration %s %s", registration.pk, new_status)
    return registration


def can_review(actor, registration: Registration) -> bool:
    role = getattr(actor, "role", "")
    if role == User.Role.ADMIN:
        return True
    if role != User.Role.ORGANIZER:
        return False
    return str(registration.event.organizer_id) == str(getattr(actor, "id", ""))
