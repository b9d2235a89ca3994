"""Domain errors and the API boundary that renders them.

Every error leaves the API as ``{"error": "<message>"}``; serializer
validation errors also carry the per-field ``details``.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import DatabaseError
from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class InvalidInput(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"
    default_code = "invalid_input"


class InvalidId(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid ID"
    default_code = "invalid_id"


class InvalidStatus(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid status"
    default_code = "invalid_status"


class DuplicateRegistration(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Already registered for this event"
    default_code = "duplicate_registration"


class InvalidCredentials(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class Forbidden(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Unauthorized"
    default_code = "forbidden"


class NotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class StoreUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Event store is unavailable"
    default_code = "store_unavailable"


def _first_message(detail: Any) -> str:
    """Pull the first human-readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            if key in ("non_field_errors", "detail"):
                return message
            return f"{key}: {message}"
        return ""
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    # Constraint violations are not outages.
    if isinstance(exc, DatabaseError) and not isinstance(exc, IntegrityError):
        logger.error("Store error during %s: %s", _view_name(context), exc)
        exc = StoreUnavailable()

    response = exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", _view_name(context), exc_info=exc)
        return Response(
            {"error": GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    data: dict[str, Any] = {"error": _first_message(response.data)}
    if isinstance(exc, ValidationError) and isinstance(response.data, dict):
        data["details"] = response.data
    response.data = data
    return response


def _view_name(context: dict[str, Any]) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown view"
