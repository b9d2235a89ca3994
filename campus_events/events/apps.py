from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class EventsConfig(AppConfig):
    name = "campus_events.events"
    label = "events"
    verbose_name = _("Events")

    def ready(self):
        import campus_events.events.signals  # noqa: F401, PLC0415
