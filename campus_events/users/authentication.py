"""Credential issuance and the stateless user rebuilt from its claims.

A credential asserts ``{id, email, role, name}`` at the moment it is issued.
Requests are authorized against that snapshot only; the stored user is never
re-read, so a role change takes effect on the next login.

Credentials handed out in degraded mode also carry ``demo: true``. Demo ids
overlap real primary keys, so such a credential is only honoured while
degraded mode is still active.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Protocol

from django.utils.functional import cached_property
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.tokens import AccessToken

from campus_events.core import fallback

logger = logging.getLogger(__name__)

DEMO_CLAIM = "demo"
DEMO_SESSION_ENDED = "Demo session has ended, please log in again"


class Identity(Protocol):
    id: Any
    email: str
    name: str
    role: str


class CampusTokenUser(TokenUser):
    """Request user backed solely by the verified access token."""

    @cached_property
    def id(self) -> str:  # type: ignore[override]
        return str(self.token["id"])

    @cached_property
    def pk(self) -> str:  # type: ignore[override]
        return self.id

    @cached_property
    def email(self) -> str:
        return self.token.get("email", "")

    @cached_property
    def name(self) -> str:
        return self.token.get("name", "")

    @cached_property
    def role(self) -> str:
        return self.token.get("role", "")

    @cached_property
    def username(self) -> str:  # type: ignore[override]
        return self.email

    def has_role(self, *roles: str) -> bool:
        return self.role in roles


def is_demo_token(token: Any) -> bool:
    return bool(token.get(DEMO_CLAIM, False))


def demo_token_expired(token: Any) -> bool:
    """A demo credential outlives degraded mode only until the store answers."""
    return is_demo_token(token) and not fallback.demo_mode_active()


class CampusJWTAuthentication(JWTStatelessUserAuthentication):
    """Stateless JWT auth that stops honouring demo credentials after recovery."""

    def get_user(self, validated_token):
        if demo_token_expired(validated_token):
            logger.warning(
                "Refused demo credential for %s outside degraded mode",
                validated_token.get("email", ""),
            )
            raise InvalidToken(DEMO_SESSION_ENDED)
        return super().get_user(validated_token)


def issue_token(identity: Identity) -> str:
    token = AccessToken()
    token["id"] = str(identity.id)
    token["email"] = identity.email
    token["role"] = identity.role
    token["name"] = identity.name
    if isinstance(identity, fallback.DemoUser):
        token[DEMO_CLAIM] = True
    return str(token)


def user_payload(identity: Identity) -> dict[str, Any]:
    return {
        "id": str(identity.id),
        "email": identity.email,
        "name": identity.name,
        "role": identity.role,
    }
