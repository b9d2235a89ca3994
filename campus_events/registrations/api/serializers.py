from rest_framework import serializers

from campus_events.registrations.models import Registration

TIME_FORMAT = "%H:%M"


class MyRegistrationSerializer(serializers.ModelSerializer):
    """A student's registration joined with the event it refers to."""

    id = serializers.CharField(read_only=True)
    event_id = serializers.CharField(read_only=True)
    event_name = serializers.CharField(source="event.name", read_only=True)
    date = serializers.DateField(source="event.date", read_only=True)
    time = serializers.TimeField(
        source="event.time", format=TIME_FORMAT, read_only=True
    )
    venue = serializers.CharField(source="event.venue", read_only=True)

    class Meta:
        model = Registration
        fields = [
            "id",
            "status",
            "created_at",
            "updated_at",
            "event_id",
            "event_name",
            "date",
            "time",
            "venue",
        ]
        read_only_fields = fields


class PendingRegistrationSerializer(serializers.ModelSerializer):
    """Organizer review queue row."""

    id = serializers.CharField(read_only=True)
    event_id = serializers.CharField(read_only=True)
    student_id = serializers.CharField(read_only=True)
    event_name = serializers.CharField(source="event.name", read_only=True)
    student_name = serializers.CharField(source="student.name", read_only=True)

    class Meta:
        model = Registration
        fields = [
            "id",
            "status",
            "created_at",
            "event_id",
            "event_name",
            "student_id",
            "student_name",
        ]
        read_only_fields = fields


class RegistrationStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class RegistrationCreatedSerializer(serializers.Serializer):
    id = serializers.CharField()
    message = serializers.CharField()
