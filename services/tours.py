"""Tour catalogue calls used by the tours and reviews pages."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Dict, List, Optional

from services.api_client import ApiClient

log = logging.getLogger(__name__)

ACTIVE = "active"


def fetch_tours(
    client: ApiClient, viewer_role: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Return the tour catalogue; only admins see deactivated tours."""

    tours = client.get("tours") or []
    if viewer_role != "admin":
        tours = [tour for tour in tours if tour.get("is_deleted") == ACTIVE]
    log.debug("Fetched %d tours", len(tours))
    return tours


def toggle_tour(client: ApiClient, tour_id: Any) -> Any:
    """Switch a tour between active and inactive."""
    return client.post(f"tours/{tour_id}/toggle")


def delete_tour(client: ApiClient, tour_id: Any) -> Any:
    return client.delete(f"tours/{tour_id}")


def tour_image_url(backend_url: str, image: Optional[str]) -> Optional[str]:
    """Return the public URL of an uploaded tour image, or ``None``."""

    if not image:
        return None
    if image.startswith(("http://", "https://")):
        return image
    base = backend_url if backend_url.endswith("/") else backend_url + "/"
    return urllib.parse.urljoin(base, f"storage/{image.lstrip('/')}")


__all__ = ["delete_tour", "fetch_tours", "toggle_tour", "tour_image_url"]
