from rest_framework import status

from campus_events.events.models import Event
from tests.permissions.mixins import ALL_ROLES
from tests.permissions.mixins import ROLE_ADMIN
from tests.permissions.mixins import ROLE_ORGANIZER
from tests.permissions.mixins import ROLE_STUDENT
from tests.permissions.mixins import RoleAPITestCase


class EventPermissionTests(RoleAPITestCase):
    def test_every_role_reads_catalog(self):
        for role in ALL_ROLES:
            with self.subTest(role=role):
                self.assert_allowed(self.get("api:event-list", role=role))
                self.assert_allowed(
                    self.get(
                        "api:event-detail",
                        role=role,
                        reverse_kwargs={"pk": self.event.pk},
                    )
                )

    def test_anonymous_cannot_read_catalog(self):
        self.client.credentials()
        response = self.client.get("/api/events")
        self.assert_denied(response, status.HTTP_401_UNAUTHORIZED)

    def test_only_admin_creates(self):
        for role in (ROLE_ORGANIZER, ROLE_STUDENT):
            with self.subTest(role=role):
                self.assert_denied(
                    self.post("api:event-list", role=role, payload=self.event_payload())
                )
        self.assert_allowed(
            self.post("api:event-list", role=ROLE_ADMIN, payload=self.event_payload())
        )
        assert Event.objects.filter(name="Matrix Event").count() == 1

    def test_only_admin_updates(self):
        kwargs = {"pk": self.event.pk}
        for role in (ROLE_ORGANIZER, ROLE_STUDENT):
            with self.subTest(role=role):
                self.assert_denied(
                    self.put(
                        "api:event-detail",
                        role=role,
                        payload=self.event_payload(),
                        reverse_kwargs=kwargs,
                    )
                )
        self.assert_allowed(
            self.put(
                "api:event-detail",
                role=ROLE_ADMIN,
                payload=self.event_payload(),
                reverse_kwargs=kwargs,
            )
        )

    def test_only_admin_deletes(self):
        kwargs = {"pk": self.foreign_event.pk}
        for role in (ROLE_ORGANIZER, ROLE_STUDENT):
            with self.subTest(role=role):
                self.assert_denied(
                    self.delete("api:event-detail", role=role, reverse_kwargs=kwargs)
                )
        self.assert_allowed(
            self.delete("api:event-detail", role=ROLE_ADMIN, reverse_kwargs=kwargs)
        )
        assert not Event.objects.filter(pk=self.foreign_event.pk).exists()

    def test_only_admin_lists_organizers(self):
        for role in (ROLE_ORGANIZER, ROLE_STUDENT):
            with self.subTest(role=role):
                self.assert_denied(self.get("api:organizer-list", role=role))
        self.assert_allowed(self.get("api:organizer-list", role=ROLE_ADMIN))
