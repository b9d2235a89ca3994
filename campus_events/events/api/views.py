"""Event catalog endpoints plus the student's register action."""

import logging

from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from campus_events.core import fallback
from campus_events.core.exceptions import NotFound
from campus_events.events import services
from campus_events.registrations import services as registration_services
from campus_events.registrations.api.serializers import RegistrationCreatedSerializer
from campus_events.users.api.permissions import IsAdmin
from campus_events.users.api.permissions import IsStudent

from .serializers import EventCreatedSerializer
from .serializers import EventSerializer
from .serializers import EventUpdateSerializer
from .serializers import EventWriteSerializer
from .serializers import MessageSerializer

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(tags=["Events"], responses=EventSerializer(many=True)),
    retrieve=extend_schema(tags=["Events"], responses=EventSerializer),
    create=extend_schema(
        tags=["Events"],
        request=EventWriteSerializer,
        responses={201: EventCreatedSerializer},
    ),
    update=extend_schema(
        tags=["Events"],
        request=EventUpdateSerializer,
        responses=MessageSerializer,
    ),
    destroy=extend_schema(tags=["Events"], responses=MessageSerializer),
    register=extend_schema(
        tags=["Registrations"],
        request=None,
        responses={201: RegistrationCreatedSerializer},
    ),
)
class EventViewSet(viewsets.ViewSet):
    """Catalog reads for any signed-in user; writes for admins only."""

    permission_classes = [IsAuthenticated]
    lookup_value_regex = "[^/]+"

    def get_permissions(self):
        if self.action in ("create", "update", "destroy"):
            return [IsAdmin()]
        if self.action == "register":
            return [IsStudent()]
        return [p() for p in self.permission_classes]

    def list(self, request):
        if fallback.demo_mode_active():
            logger.info("Using demo events fallback")
            return Response(fallback.demo_events())
        serializer = EventSerializer(services.list_events(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        if fallback.demo_mode_active():
            event = fallback.demo_event(pk)
            if event is None:
                raise NotFound(services.EVENT_NOT_FOUND)
            return Response(event)
        event = services.get_event(pk)
        return Response(EventSerializer(event).data)

    def create(self, request):
        fallback.require_store()
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = services.create_event(**serializer.validated_data)
        return Response(
            {"id": str(event.pk), "message": "Event created successfully"},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        services.parse_event_id(pk)
        fallback.require_store()
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_event(pk, **serializer.validated_data)
        return Response({"message": "Event updated successfully"})

    def destroy(self, request, pk=None):
        services.delete_event(pk)
        return Response({"message": "Event deleted successfully"})

    @action(detail=True, methods=["post"], url_path="register")
    def register(self, request, pk=None):
        registration = registration_services.register(pk, request.user)
        return Response(
            {
                "id": str(registration.pk),
                "message": "Registration submitted successfully",
            },
            status=status.HTTP_201_CREATED,
        )
