"""Review listing queries."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from services.api_client import ApiClient


def build_review_params(
    *,
    tour_id: Optional[int] = None,
    page: Optional[int] = None,
    rating: Optional[int] = None,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """Return the query parameters for ``reviews``, dropping unset filters.

    Zero and empty values count as unset, so ``rating=0`` means "any rating".
    """

    params = {"tour_id": tour_id, "page": page, "rating": rating, "search": search}
    return {key: value for key, value in params.items() if value}


def get_reviews(client: ApiClient, **filters: Any) -> Any:
    return client.get("reviews", **build_review_params(**filters))


def unpack_reviews(payload: Any) -> Tuple[List[Dict[str, Any]], int]:
    """Split a ``reviews`` response into its rows and last page number.

    The endpoint wraps a paginator object in ``data``; a bare list is
    accepted as a single page.
    """

    if isinstance(payload, list):
        return payload, 1
    if not isinstance(payload, dict):
        return [], 1
    body = payload.get("data", payload)
    if isinstance(body, list):
        return body, int(payload.get("last_page") or 1)
    rows = body.get("data") or []
    last_page = body.get("last_page") or payload.get("last_page") or 1
    return list(rows), int(last_page)


def delete_review(client: ApiClient, review_id: Any) -> Any:
    return client.delete(f"reviews/{review_id}")


__all__ = ["build_review_params", "delete_review", "get_reviews", "unpack_reviews"]
