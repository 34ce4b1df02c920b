"""Account listing and moderation calls used by the user pages."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from services.api_client import ApiClient

log = logging.getLogger(__name__)

ACTIVE = "active"
INACTIVE = "inactive"


def is_active(user: Dict[str, Any]) -> bool:
    return user.get("is_deleted") == ACTIVE


def fetch_users(
    client: ApiClient, role: str, viewer_role: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Return accounts with ``role``.

    Staff viewers only see active accounts; admins see everything.
    """

    users = client.get("users") or []
    selected = [user for user in users if user.get("role") == role]
    if viewer_role == "staff":
        selected = [user for user in selected if is_active(user)]
    log.debug("Fetched %d %s accounts", len(selected), role)
    return selected


def soft_delete_user(client: ApiClient, user_id: Any) -> Any:
    """Toggle an account between active and inactive."""
    return client.put(f"user/{user_id}/soft-delete")


def force_delete_user(client: ApiClient, user_id: Any) -> Any:
    return client.delete(f"user/{user_id}")


def update_user(client: ApiClient, user_id: Any, changes: Dict[str, Any]) -> Any:
    return client.put(f"user/{user_id}", changes)


__all__ = [
    "ACTIVE",
    "INACTIVE",
    "fetch_users",
    "force_delete_user",
    "is_active",
    "soft_delete_user",
    "update_user",
]
