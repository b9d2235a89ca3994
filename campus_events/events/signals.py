from django.db.models.signals import post_delete
from django.db.models.signals import post_save
from django.db.transaction import on_commit
from django.dispatch import receiver

from campus_events.realtime.events.catalog import publish_event_created
from campus_events.realtime.events.catalog import publish_event_deleted
from campus_events.realtime.events.catalog import publish_event_updated

from .models import Event


@receiver(post_save, sender=Event)
def send_event_saved_ws(sender, instance, created, **kwargs):
    if created:
        on_commit(lambda: publish_event_created(instance))
    else:
        on_commit(lambda: publish_event_updated(instance))


@receiver(post_delete, sender=Event)
def send_event_deleted_ws(sender, instance, **kwargs):
    event_id = instance.pk
    on_commit(lambda: publish_event_deleted(event_id))
