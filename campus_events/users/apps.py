from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class UsersConfig(AppConfig):
    name = "campus_events.users"
    label = "users"
    verbose_name = _("Users")

    def ready(self):
        import campus_events.users.api.schema  # noqa: F401, PLC0415
        import campus_events.users.signals  # noqa: F401, PLC0415
