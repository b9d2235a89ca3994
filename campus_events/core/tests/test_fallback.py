from http import HTTPStatus
from unittest import mock

import pytest

from campus_events.core import fallback
from campus_events.core.exceptions import StoreUnavailable

PROBE = "campus_events.core.fallback.store_available"


@pytest.mark.django_db
def test_store_available_by_default():
    assert fallback.demo_mode_active() is False
    fallback.require_store()


def test_demo_flag_forces_degraded_mode(settings):
    settings.CAMPUS_EVENTS_DEMO_MODE = True
    assert fallback.demo_mode_active() is True
    with pytest.raises(StoreUnavailable):
        fallback.require_store()


def test_failed_probe_means_degraded(settings):
    settings.CAMPUS_EVENTS_DEMO_MODE = False
    with mock.patch(PROBE, return_value=False):
        assert fallback.demo_mode_active() is True


class TestDemoAuthentication:
    def test_matches_email_role_and_password(self, settings):
        settings.CAMPUS_EVENTS_DEMO_PASSWORD = "pw-123456"  # noqa: S105
        user = fallback.authenticate_demo_user(" Student@Demo.com", "pw-123456", "student")
        assert user is not None
        assert user.id == "3"

    def test_role_must_match(self, settings):
        settings.CAMPUS_EVENTS_DEMO_PASSWORD = "pw-123456"  # noqa: S105
        assert fallback.authenticate_demo_user("student@demo.com", "pw-123456", "admin") is None

    def test_blank_demo_password_disables_login(self, settings):
        settings.CAMPUS_EVENTS_DEMO_PASSWORD = ""
        assert fallback.authenticate_demo_user("student@demo.com", "", "student") is None


def test_demo_data_is_copied():
    events = fallback.demo_events()
    events[0]["name"] = "mutated"
    assert fallback.demo_events()[0]["name"] == "Tech Conference 2024"
    assert fallback.demo_event("1")["id"] == "1"
    assert fallback.demo_event("missing") is None
    assert [o["id"] for o in fallback.demo_organizers()] == ["2", "4"]


@pytest.mark.django_db
def test_unreachable_store_serves_demo_catalog(client_for, student):
    client = client_for(student)
    with mock.patch(PROBE, return_value=False):
        r = client.get("/api/events")
        assert r.status_code == HTTPStatus.OK
        assert [e["id"] for e in r.data] == ["1", "2"]

        r = client.post(f"/api/events/{'0' * 8}-0000-4000-8000-{'0' * 12}/register")
        assert r.status_code == HTTPStatus.SERVICE_UNAVAILABLE
