import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Event(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    short_description = models.CharField(max_length=500)
    description = models.TextField()
    date = models.DateField()
    time = models.TimeField()
    venue = models.CharField(max_length=255)
    # Advisory only: registrations beyond capacity are still accepted.
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="organized_events",
        help_text=_("Organizer who reviews registrations for this event"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gte=1),
                name="event_capacity_at_least_one",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.date})"
