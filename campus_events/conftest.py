import pytest
from rest_framework.test import APIClient

from campus_events.events.tests.factories import create_event
from campus_events.users.models import User
from campus_events.users.tests.factories import authenticate
from campus_events.users.tests.factories import create_user_with_role


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def student(db) -> User:
    return create_user_with_role("student", role=User.Role.STUDENT, name="Sam Student")


@pytest.fixture
def other_student(db) -> User:
    return create_user_with_role("other_student", role=User.Role.STUDENT)


@pytest.fixture
def organizer(db) -> User:
    return create_user_with_role(
        "organizer",
        role=User.Role.ORGANIZER,
        name="Olivia Organizer",
    )


@pytest.fixture
def other_organizer(db) -> User:
    return create_user_with_role("other_organizer", role=User.Role.ORGANIZER)


@pytest.fixture
def admin_account(db) -> User:
    return create_user_with_role("admin", role=User.Role.ADMIN, name="Ada Admin")


@pytest.fixture
def event(organizer):
    return create_event(organizer=organizer, name="Tech Talk")


@pytest.fixture
def client_for():
    """Build an API client authenticated as the given user."""

    def _make(user) -> APIClient:
        return authenticate(APIClient(), user)

    return _make


@pytest.fixture
def demo_mode(settings):
    settings.CAMPUS_EVENTS_DEMO_MODE = True
    settings.CAMPUS_EVENTS_DEMO_PASSWORD = "demo1234"  # noqa: S105
    return settings
