from __future__ import annotations

import datetime as dt

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from campus_events.events.models import Event
from campus_events.registrations.models import Registration
from campus_events.users.authentication import issue_token
from campus_events.users.models import User
from campus_events.users.tests.factories import create_user_with_role

ROLE_ADMIN = User.Role.ADMIN
ROLE_ORGANIZER = User.Role.ORGANIZER
ROLE_STUDENT = User.Role.STUDENT
ALL_ROLES = [ROLE_ADMIN, ROLE_ORGANIZER, ROLE_STUDENT]


class RoleAPITestCase(APITestCase):
    """Base test case to streamline role fixtures and helpers."""

    def setUp(self):
        super().setUp()
        self.users: dict[str, User] = {
            ROLE_ADMIN: create_user_with_role("admin", role=ROLE_ADMIN),
            ROLE_ORGANIZER: create_user_with_role("organizer", role=ROLE_ORGANIZER),
            ROLE_STUDENT: create_user_with_role("student", role=ROLE_STUDENT),
        }
        self.others = {
            "organizer": create_user_with_role("other_org", role=ROLE_ORGANIZER),
            "student": create_user_with_role("other_student", role=ROLE_STUDENT),
        }
        self.event = self._create_event(self.users[ROLE_ORGANIZER], "Owned")
        self.foreign_event = self._create_event(self.others["organizer"], "Foreign")
        self.registrations = {
            "own": Registration.objects.create(
                event=self.event,
                student=self.others["student"],
            ),
            "foreign": Registration.objects.create(
                event=self.foreign_event,
                student=self.others["student"],
            ),
        }

    # Utilities -------------------------------------------------------------
    def _create_event(self, organizer: User, name: str) -> Event:
        return Event.objects.create(
            name=name,
            short_description="Short",
            description="Long",
            date=dt.date(2030, 9, 1),
            time=dt.time(10, 0),
            venue="Hall",
            capacity=10,
            organizer=organizer,
        )

    def authenticate(self, role: str):
        token = issue_token(self.users[role])
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def get(self, url_name: str, *, role: str, reverse_kwargs=None, **kwargs):
        self.authenticate(role)
        url = reverse(url_name, kwargs=reverse_kwargs)
        return self.client.get(url, **kwargs)

    def post(
        self, url_name: str, *, role: str, payload=None, reverse_kwargs=None, **kwargs
    ):
        self.authenticate(role)
        url = reverse(url_name, kwargs=reverse_kwargs)
        return self.client.post(url, data=payload or {}, format="json", **kwargs)

    def put(
        self, url_name: str, *, role: str, payload=None, reverse_kwargs=None, **kwargs
    ):
        self.authenticate(role)
        url = reverse(url_name, kwargs=reverse_kwargs)
        return self.client.put(url, data=payload or {}, format="json", **kwargs)

    def delete(self, url_name: str, *, role: str, reverse_kwargs=None, **kwargs):
        self.authenticate(role)
        url = reverse(url_name, kwargs=reverse_kwargs)
        return self.client.delete(url, **kwargs)

    def event_payload(self, **overrides):
        payload = {
            "name": "Matrix Event",
            "short_description": "Short",
            "description": "Long",
            "date": "2030-10-10",
            "time": "18:00",
            "venue": "Hall B",
            "capacity": 25,
            "organizerId": self.users[ROLE_ORGANIZER].pk,
        }
        payload.update(overrides)
        return payload

    def assert_allowed(self, response):
        assert response.status_code in (
            status.HTTP_200_OK,
            status.HTTP_201_CREATED,
        ), response.data

    def assert_denied(self, response, code=status.HTTP_403_FORBIDDEN):
        assert response.status_code == code, response.data
