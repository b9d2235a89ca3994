import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import ListAPIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from campus_events.core import fallback
from campus_events.users import services
from campus_events.users.authentication import issue_token
from campus_events.users.authentication import user_payload

from .permissions import IsAdmin
from .serializers import AuthResponseSerializer
from .serializers import LoginSerializer
from .serializers import OrganizerSerializer
from .serializers import RegisterSerializer

logger = logging.getLogger(__name__)


@extend_schema(
    tags=["Authentication"],
    request=RegisterSerializer,
    responses={201: AuthResponseSerializer},
)
class RegisterView(APIView):
    """Self-service signup for students and organizers."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.register_user(**serializer.validated_data)
        return Response(
            {"token": issue_token(user), "user": user_payload(user)},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(
    tags=["Authentication"],
    request=LoginSerializer,
    responses={200: AuthResponseSerializer},
)
class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identity = services.authenticate(**serializer.validated_data)
        logger.info("Issued credential for %s (%s)", identity.email, identity.role)
        return Response({"token": issue_token(identity), "user": user_payload(identity)})


@extend_schema(tags=["Users"])
class OrganizerListView(ListAPIView):
    """Organizers an admin can assign to events, ordered by name."""

    serializer_class = OrganizerSerializer
    permission_classes = [IsAdmin]
    pagination_class = None

    def get_queryset(self):
        return services.list_organizers()

    def list(self, request, *args, **kwargs):
        if fallback.demo_mode_active():
            return Response(fallback.demo_organizers())
        return super().list(request, *args, **kwargs)
