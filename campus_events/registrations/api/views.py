from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import viewsets
from rest_framework.generics import ListAPIView
from rest_framework.response import Response

from campus_events.events.api.serializers import MessageSerializer
from campus_events.registrations import services
from campus_events.users.api.permissions import IsOrganizer
from campus_events.users.api.permissions import IsOrganizerOrAdmin
from campus_events.users.api.permissions import IsStudent

from .serializers import MyRegistrationSerializer
from .serializers import PendingRegistrationSerializer
from .serializers import RegistrationStatusSerializer


@extend_schema_view(
    list=extend_schema(
        tags=["Registrations"],
        responses=MyRegistrationSerializer(many=True),
    ),
    update=extend_schema(
        tags=["Registrations"],
        request=RegistrationStatusSerializer,
        responses=MessageSerializer,
    ),
)
class RegistrationViewSet(viewsets.ViewSet):
    """
    - list: the signed-in student's registrations, newest first
    - update: approve or reject (event's organizer, or any admin)
    """

    permission_classes = [IsStudent]
    lookup_value_regex = "[^/]+"

    def get_permissions(self):
        if self.action == "update":
            return [IsOrganizerOrAdmin()]
        return [p() for p in self.permission_classes]

    def list(self, request):
        registrations = services.list_my_registrations(request.user.id)
        return Response(MyRegistrationSerializer(registrations, many=True).data)

    def update(self, request, pk=None):
        new_status = request.data.get("status") if hasattr(request.data, "get") else None
        registration = services.set_registration_status(pk, new_status, request.user)
        return Response(
            {"message": f"Registration {registration.status} successfully"},
        )


@extend_schema(tags=["Registrations"])
class OrganizerRegistrationListView(ListAPIView):
    """Pending registrations awaiting review on the organizer's own events."""

    serializer_class = PendingRegistrationSerializer
    permission_classes = [IsOrganizer]
    pagination_class = None

    def get_queryset(self):
        return services.list_pending_for_organizer(self.request.user.id)
