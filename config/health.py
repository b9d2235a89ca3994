from __future__ import annotations

from django.conf import settings
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view
from rest_framework.decorators import authentication_classes
from rest_framework.decorators import permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from campus_events.core.store import check_db


@extend_schema(tags=["Service"])
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Campus Events API",
            "version": settings.CAMPUS_EVENTS_API_VERSION,
            "timestamp": timezone.now().isoformat(),
        },
    )


@extend_schema(tags=["Service"])
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health(request):
    db = check_db()
    components = {"db": db}

    all_ok = all(v.get("ok", False) for v in components.values())
    status = "ok" if all_ok else "down"
    http_status = 200 if all_ok else 503

    return Response(
        {
            "status": status,
            "message": "Campus Events API is running",
            "database": "Connected" if db.get("ok") else "Disconnected",
            "components": components,
            "version": settings.CAMPUS_EVENTS_API_VERSION,
            "timestamp": timezone.now().isoformat(),
        },
        status=http_status,
    )
