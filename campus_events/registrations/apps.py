from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class RegistrationsConfig(AppConfig):
    name = "campus_events.registrations"
    label = "registrations"
    verbose_name = _("Registrations")

    def ready(self):
        import campus_events.registrations.signals  # noqa: F401, PLC0415
