from django.contrib.auth import get_user_model
from rest_framework import serializers

from campus_events.events.models import Event

User = get_user_model()

TIME_FORMAT = "%H:%M"


class EventSerializer(serializers.ModelSerializer):
    """Read shape of an event, including the read-time annotations."""

    id = serializers.CharField(read_only=True)
    organizer_id = serializers.CharField(read_only=True)
    organizer_name = serializers.CharField(read_only=True, default=None)
    approved_count = serializers.IntegerField(read_only=True, default=0)
    time = serializers.TimeField(format=TIME_FORMAT)

    class Meta:
        model = Event
        fields = [
            "id",
            "name",
            "short_description",
            "description",
            "date",
            "time",
            "venue",
            "capacity",
            "organizer_id",
            "organizer_name",
            "approved_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class EventWriteSerializer(serializers.Serializer):
    """Full set of event fields; used for both create and full replace."""

    name = serializers.CharField(max_length=255)
    short_description = serializers.CharField(max_length=500)
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(input_formats=[TIME_FORMAT, "%H:%M:%S"])
    venue = serializers.CharField(max_length=255)
    capacity = serializers.IntegerField(min_value=1)
    organizerId = serializers.PrimaryKeyRelatedField(  # noqa: N815
        source="organizer",
        queryset=User.objects.all(),
    )


class EventUpdateSerializer(EventWriteSerializer):
    organizerId = serializers.PrimaryKeyRelatedField(  # noqa: N815
        source="organizer",
        queryset=User.objects.all(),
        required=False,
    )


class EventCreatedSerializer(serializers.Serializer):
    id = serializers.CharField()
    message = serializers.CharField()


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()
