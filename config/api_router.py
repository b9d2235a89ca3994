from django.urls import path
from rest_framework.routers import SimpleRouter

from campus_events.events.api.views import EventViewSet
from campus_events.registrations.api.views import OrganizerRegistrationListView
from campus_events.registrations.api.views import RegistrationViewSet
from campus_events.users.api.views import LoginView
from campus_events.users.api.views import OrganizerListView
from campus_events.users.api.views import RegisterView

from .health import api_root
from .health import health

# Frontend calls every endpoint without a trailing slash.
router = SimpleRouter(trailing_slash=False)

router.register("events", EventViewSet, basename="event")
router.register("registrations", RegistrationViewSet, basename="registration")


app_name = "api"
urlpatterns = [
    path("", api_root, name="root"),
    path("health", health, name="health"),
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("organizers", OrganizerListView.as_view(), name="organizer-list"),
    path(
        "organizer/registrations",
        OrganizerRegistrationListView.as_view(),
        name="organizer-registrations",
    ),
    *router.urls,
]
