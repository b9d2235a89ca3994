"""drf-spectacular post-processing: one tag group per API area."""

from __future__ import annotations

from typing import Any

_HTTP_METHODS = {"get", "post", "put", "patch", "delete", "options", "head"}


# First match wins, so the more specific prefixes come first.
PATTERN_TAGS = [
    ("/api/auth/", "Authentication"),
    ("/api/events", "Events"),
    ("/api/registrations", "Registrations"),
    ("/api/organizer/", "Registrations"),
    ("/api/organizers", "Users"),
    ("/api/health", "Service"),
]

ALL_TAGS = list(dict.fromkeys(t for _, t in PATTERN_TAGS))


def assign_group_tag(path: str) -> str | None:
    if path.startswith("/api/events/") and path.endswith("/register"):
        return "Registrations"
    for prefix, tag in PATTERN_TAGS:
        if path.startswith(prefix):
            return tag
    if path == "/api/":
        return "Service"
    return None


def group_tags(result: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
    """Overwrite each operation's ``tags`` with exactly one logical group."""
    for path, path_item in result.get("paths", {}).items():
        tag = assign_group_tag(path)
        if not tag:
            continue
        for method, op_obj in path_item.items():
            if method.lower() not in _HTTP_METHODS or not isinstance(op_obj, dict):
                continue
            op_obj["tags"] = [tag]

    existing = {t.get("name") for t in result.get("tags", [])}
    tag_list = result.setdefault("tags", [])
    for tag in ALL_TAGS:
        if tag not in existing:
            tag_list.append({"name": tag})
    return result
