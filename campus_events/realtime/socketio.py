"""Global Socket.IO server for the frontend.

Current frontend convention:
- URL base: ws://<host>:8000
- Socket.IO path: /socket.io/ (``SOCKETIO_PATH``)
- Auth: optional ``query.token`` or ``auth.token`` (JWT access token)

Every broadcast goes to all connected clients. ``join_room`` tags a
connection with ``user_<id>`` but nothing is delivered per room yet.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qs

import socketio
from asgiref.sync import async_to_sync
from asgiref.sync import sync_to_async
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from campus_events.core import fallback
from campus_events.users.authentication import is_demo_token

logger = logging.getLogger(__name__)


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins="*",
    logger=False,
    engineio_logger=False,
)


def room_for_user(user_id: int | str) -> str:
    return f"user_{str(user_id).strip()}"


def _claims_from_access_token(token: str) -> dict[str, Any]:
    validated = AccessToken(token)
    return {
        "user_id": str(validated["id"]),
        "role": validated.get("role", ""),
        "name": validated.get("name", ""),
        "demo": is_demo_token(validated),
    }


def _extract_token(environ: dict[str, Any], auth: Any | None) -> str | None:
    """Extract JWT token from Socket.IO environ/auth.

    Handles python-socketio environ shapes across ASGI/WSGI servers.
    """

    scope: Any = environ
    if isinstance(environ, dict) and "asgi.scope" in environ:
        inner = environ.get("asgi.scope")
        if isinstance(inner, dict):
            scope = inner

    query_string: str | bytes = ""
    if isinstance(scope, dict) and "query_string" in scope:
        query_string = scope.get("query_string", b"")
    elif isinstance(scope, dict) and "QUERY_STRING" in scope:
        query_string = scope.get("QUERY_STRING", "")

    if isinstance(query_string, (bytes, bytearray)):
        query_string = query_string.decode(errors="ignore")

    token = parse_qs(str(query_string)).get("token", [None])[0]
    if isinstance(token, str) and token:
        return token

    # Allow `auth: { token }` as fallback.
    if isinstance(auth, dict):
        auth_token = auth.get("token")
        if isinstance(auth_token, str) and auth_token:
            return auth_token

    return None


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    token = _extract_token(environ, auth)
    if not token:
        # Anonymous listeners still receive the global broadcasts.
        logger.debug("Socket %s connected without credentials", sid)
        return

    try:
        claims = _claims_from_access_token(token)
    except TokenError as exc:
        message = str(exc)
        if "expired" in message.lower():
            msg = "jwt_expired"
            raise ConnectionRefusedError(msg) from exc
        msg = "unauthorized"
        raise ConnectionRefusedError(msg) from exc
    except KeyError as exc:  # token without an id claim
        msg = "unauthorized"
        raise ConnectionRefusedError(msg) from exc

    if claims.pop("demo") and not await sync_to_async(fallback.demo_mode_active)():
        msg = "unauthorized"
        raise ConnectionRefusedError(msg)

    await sio.save_session(sid, claims)
    await sio.enter_room(sid, room_for_user(claims["user_id"]))
    logger.info("Socket %s connected for user %s", sid, claims["user_id"])


@sio.event
async def join_room(sid: str, user_id: Any):
    if user_id is None or str(user_id).strip() == "":
        return
    await sio.enter_room(sid, room_for_user(user_id))
    logger.info("Socket %s joined %s", sid, room_for_user(user_id))


@sio.event
async def disconnect(sid: str, *args: Any):
    logger.debug("Socket %s disconnected %s", sid, args)


def broadcast(event: str, payload: dict[str, Any]) -> None:
    """Emit an event to every connected client from sync Django code.

    Fire-and-forget: a failed emit is logged and never reaches the caller.
    """

    try:
        async_to_sync(sio.emit)(event, payload)
    except Exception:
        logger.exception("Broadcast of %s failed", event)
