from __future__ import annotations

from django.core.management.base import BaseCommand

from campus_events.users.services import ensure_bootstrap_admin


class Command(BaseCommand):
    help = "Create the initial admin account when no users exist yet"

    def handle(self, *args, **options) -> str | None:
        admin = ensure_bootstrap_admin()
        if admin is None:
            self.stdout.write("Users already exist; nothing to do.")
            return None
        self.stdout.write(self.style.SUCCESS(f"Created admin {admin.email}"))
        return None
