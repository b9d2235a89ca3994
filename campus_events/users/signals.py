from __future__ import annotations

from django.conf import settings
from django.db.models.signals import post_migrate
from django.dispatch import receiver


@receiver(post_migrate, dispatch_uid="campus_events.users.bootstrap_admin")
def bootstrap_admin(sender, **kwargs):
    """Seed one admin the first time migrations leave the store without users.

    Runs once per migrate for the users app only; a no-op whenever any user
    already exists.
    """

    if getattr(sender, "label", None) != "users":
        return
    if not getattr(settings, "CAMPUS_EVENTS_BOOTSTRAP_ADMIN", False):
        return

    from campus_events.users.services import ensure_bootstrap_admin  # noqa: PLC0415

    ensure_bootstrap_admin()
