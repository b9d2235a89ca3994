from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings
from django.contrib.auth.hashers import check_password
from django.db import IntegrityError
from django.db import transaction

from campus_events.core import fallback
from campus_events.core.exceptions import InvalidCredentials
from campus_events.core.exceptions import InvalidInput
from campus_events.users.models import User

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from campus_events.core.fallback import DemoUser

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = (User.Role.STUDENT, User.Role.ORGANIZER)
DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


def register_user(*, email: str, password: str, name: str, role: str) -> User:
    fallback.require_store()
    email = email.strip().lower()
    if role not in SELF_SERVICE_ROLES:
        msg = "Invalid role. Only student and organizer registration allowed."
        raise InvalidInput(msg)
    if User.objects.filter(email=email).exists():
        raise InvalidInput(DUPLICATE_EMAIL_MESSAGE)
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                name=name.strip(),
                role=role,
            )
    except IntegrityError as exc:
        # Lost a race against a concurrent signup with the same email
        raise InvalidInput(DUPLICATE_EMAIL_MESSAGE) from exc
    logger.info("Registered %s account %s", user.role, user.email)
    return user


def authenticate(*, email: str, password: str, role: str) -> User | DemoUser:
    """Resolve ``(email, role)`` and verify the password.

    Raises ``InvalidCredentials`` for an unknown pair or a wrong password; a
    valid email/password under the wrong role fails the same way.
    """
    if fallback.demo_mode_active():
        logger.info("Using demo credentials for %s", email)
        demo_user = fallback.authenticate_demo_user(email, password, role)
        if demo_user is None:
            raise InvalidCredentials
        return demo_user

    user = User.objects.filter(email=email.strip().lower(), role=role).first()
    if user is None or not check_password(password, user.password):
        logger.info("Rejected login for %s as %s", email, role)
        raise InvalidCredentials
    return user


def list_organizers() -> QuerySet[User]:
    return User.objects.filter(role=User.Role.ORGANIZER).order_by("name")


def ensure_bootstrap_admin() -> User | None:
    """Create the configured admin when the store has no users at all."""
    if User.objects.exists():
        return None
    admin = User.objects.create_user(
        email=settings.CAMPUS_EVENTS_ADMIN_EMAIL,
        password=settings.CAMPUS_EVENTS_ADMIN_PASSWORD,
        name=settings.CAMPUS_EVENTS_ADMIN_NAME,
        role=User.Role.ADMIN,
        is_staff=True,
    )
    logger.info("Created initial admin user %s", admin.email)
    return admin
