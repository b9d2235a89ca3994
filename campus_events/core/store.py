from __future__ import annotations

from typing import Any

from django.db import connection


def check_db() -> dict[str, Any]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001 - probe must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def store_available() -> bool:
    return bool(check_db().get("ok"))
