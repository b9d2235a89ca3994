"""Role gates for the API.

The role comes from the credential's claim snapshot (see
``campus_events.users.authentication``), never from the stored user.
"""

from rest_framework.permissions import BasePermission

from campus_events.users.models import User

ROLE_STUDENT = User.Role.STUDENT
ROLE_ORGANIZER = User.Role.ORGANIZER
ROLE_ADMIN = User.Role.ADMIN


def user_role(user) -> str:
    return str(getattr(user, "role", "") or "")


class _RolePermission(BasePermission):
    """Base helper to gate access by role names."""

    allowed_roles: tuple[str, ...] = ()
    message = "Insufficient permissions"

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if not (user and getattr(user, "is_authenticated", False)):
            return False
        return user_role(user) in self.allowed_roles


class IsStudent(_RolePermission):
    allowed_roles = (ROLE_STUDENT,)


class IsOrganizer(_RolePermission):
    allowed_roles = (ROLE_ORGANIZER,)


class IsAdmin(_RolePermission):
    allowed_roles = (ROLE_ADMIN,)


class IsOrganizerOrAdmin(_RolePermission):
    allowed_roles = (ROLE_ORGANIZER, ROLE_ADMIN)
