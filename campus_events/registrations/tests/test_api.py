import uuid

import pytest
from rest_framework import status

from campus_events.events.tests.factories import create_event
from campus_events.events.tests.factories import create_registration
from campus_events.registrations.models import Registration

pytestmark = pytest.mark.django_db

MY_URL = "/api/registrations"
QUEUE_URL = "/api/organizer/registrations"


def register_url(event_pk) -> str:
    return f"/api/events/{event_pk}/register"


def status_url(registration_pk) -> str:
    return f"/api/registrations/{registration_pk}"


class TestRegisterEndpoint:
    def test_student_registers(self, client_for, student, event):
        r = client_for(student).post(register_url(event.pk))
        assert r.status_code == status.HTTP_201_CREATED, r.content
        assert r.data["message"] == "Registration submitted successfully"
        registration = Registration.objects.get(pk=r.data["id"])
        assert registration.status == Registration.Status.PENDING

    def test_double_registration(self, client_for, student, event):
        client = client_for(student)
        client.post(register_url(event.pk))
        r = client.post(register_url(event.pk))
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data == {"error": "Already registered for this event"}

    def test_malformed_and_missing_event(self, client_for, student):
        client = client_for(student)
        assert client.post(register_url("xyz")).status_code == status.HTTP_400_BAD_REQUEST
        r = client.post(register_url(uuid.uuid4()))
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.data == {"error": "Event not found"}

    @pytest.mark.parametrize("fixture_name", ["organizer", "admin_account"])
    def test_only_students_register(self, request, client_for, event, fixture_name):
        user = request.getfixturevalue(fixture_name)
        r = client_for(user).post(register_url(event.pk))
        assert r.status_code == status.HTTP_403_FORBIDDEN
        assert r.data == {"error": "Insufficient permissions"}


class TestMyRegistrations:
    def test_lists_own_registrations_with_event_details(
        self, client_for, student, other_student, event
    ):
        mine = create_registration(event=event, student=student)
        create_registration(event=event, student=other_student)

        r = client_for(student).get(MY_URL)

        assert r.status_code == status.HTTP_200_OK
        assert len(r.data) == 1
        row = r.data[0]
        assert row["id"] == str(mine.pk)
        assert row["event_id"] == str(event.pk)
        assert row["event_name"] == "Tech Talk"
        assert row["status"] == "pending"
        assert row["date"] == "2030-01-15"
        assert row["time"] == "09:00"
        assert row["venue"] == "Main Hall"

    def test_organizer_cannot_list(self, client_for, organizer):
        r = client_for(organizer).get(MY_URL)
        assert r.status_code == status.HTTP_403_FORBIDDEN

    def test_unavailable_in_demo_mode(self, client_for, student, demo_mode):
        r = client_for(student).get(MY_URL)
        assert r.status_code == status.HTTP_503_SERVICE_UNAVAILABLE


class TestOrganizerQueue:
    def test_pending_for_owned_events(
        self, client_for, organizer, other_organizer, student, other_student, event
    ):
        pending = create_registration(event=event, student=student)
        create_registration(
            event=event, student=other_student, status=Registration.Status.REJECTED
        )
        create_registration(event=create_event(organizer=other_organizer), student=student)

        r = client_for(organizer).get(QUEUE_URL)

        assert r.status_code == status.HTTP_200_OK
        assert [row["id"] for row in r.data] == [str(pending.pk)]
        assert r.data[0]["student_name"] == "Sam Student"
        assert r.data[0]["event_name"] == "Tech Talk"

    @pytest.mark.parametrize("fixture_name", ["student", "admin_account"])
    def test_only_organizers(self, request, client_for, fixture_name):
        user = request.getfixturevalue(fixture_name)
        r = client_for(user).get(QUEUE_URL)
        assert r.status_code == status.HTTP_403_FORBIDDEN


class TestStatusUpdate:
    def test_owner_approves(self, client_for, organizer, student, event):
        registration = create_registration(event=event, student=student)
        r = client_for(organizer).put(
            status_url(registration.pk), {"status": "approved"}, format="json"
        )
        assert r.status_code == status.HTTP_200_OK, r.content
        assert r.data == {"message": "Registration approved successfully"}

        r = client_for(student).get(f"/api/events/{event.pk}")
        assert r.data["approved_count"] == 1

    def test_admin_rejects(self, client_for, admin_account, student, event):
        registration = create_registration(event=event, student=student)
        r = client_for(admin_account).put(
            status_url(registration.pk), {"status": "rejected"}, format="json"
        )
        assert r.status_code == status.HTTP_200_OK
        assert r.data == {"message": "Registration rejected successfully"}

    def test_other_organizer_gets_unauthorized(
        self, client_for, other_organizer, student, event
    ):
        registration = create_registration(event=event, student=student)
        r = client_for(other_organizer).put(
            status_url(registration.pk), {"status": "approved"}, format="json"
        )
        assert r.status_code == status.HTTP_403_FORBIDDEN
        assert r.data == {"error": "Unauthorized"}

    def test_invalid_status(self, client_for, organizer, student, event):
        registration = create_registration(event=event, student=student)
        r = client_for(organizer).put(
            status_url(registration.pk), {"status": "pending"}, format="json"
        )
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data == {"error": "Invalid status"}

    def test_missing_registration(self, client_for, organizer):
        r = client_for(organizer).put(
            status_url(uuid.uuid4()), {"status": "approved"}, format="json"
        )
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.data == {"error": "Registration not found"}

    def test_student_cannot_review(self, client_for, student, event):
        registration = create_registration(event=event, student=student)
        r = client_for(student).put(
            status_url(registration.pk), {"status": "approved"}, format="json"
        )
        assert r.status_code == status.HTTP_403_FORBIDDEN
        assert r.data == {"error": "Insufficient permissions"}
