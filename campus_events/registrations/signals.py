from django.db.models.signals import post_save
from django.db.transaction import on_commit
from django.dispatch import receiver

from campus_events.realtime.events.registrations import publish_registration_created
from campus_events.realtime.events.registrations import publish_registration_updated

from .models import Registration


@receiver(post_save, sender=Registration)
def send_registration_ws(sender, instance, created, **kwargs):
    # Every status write is announced, repeated identical writes included.
    if created:
        on_commit(lambda: publish_registration_created(instance))
    else:
        on_commit(lambda: publish_registration_updated(instance))
