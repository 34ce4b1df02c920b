"""JSON client for the tour admin REST API."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Mapping, Optional

from utils.exceptions import ApiError
from utils.settings import Settings

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiClient:
    """Thin wrapper over :mod:`urllib.request` with bearer-token injection.

    Every request carries JSON ``Content-Type``/``Accept`` headers and the
    ``ngrok-skip-browser-warning`` header the tunnelled backends expect. When a
    token is set it is sent as ``Authorization: Bearer <token>``.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.token = token
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiClient":
        return cls(settings.api_url, settings.access_token)

    def headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "ngrok-skip-browser-warning": "true",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def url_for(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        url = urllib.parse.urljoin(self.base_url, path.lstrip("/"))
        if params:
            url += "?" + urllib.parse.urlencode(params)
        return url

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        payload: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (``None`` if empty)."""

        url = self.url_for(path, params)
        data = None if payload is None else json.dumps(payload).encode("utf-8")
        request = urllib.request.Request(
            url, data=data, headers=self.headers(), method=method
        )
        log.info("%s %s", method, url)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            snippet = exc.read().decode("utf-8", errors="ignore")[:200]
            raise ApiError(
                f"{method} {path} failed: {exc.reason}. Response: {snippet}",
                status=exc.code,
                url=url,
            ) from exc
        except urllib.error.URLError as exc:
            raise ApiError(f"{method} {path} failed: {exc.reason}", url=url) from exc

        if not body:
            return None
        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as exc:
            raise ApiError(f"{method} {path} returned invalid JSON", url=url) from exc

    def get(self, path: str, **params: Any) -> Any:
        return self.request("GET", path, params=params or None)

    def post(self, path: str, payload: Any = None) -> Any:
        return self.request("POST", path, payload=payload)

    def put(self, path: str, payload: Any = None) -> Any:
        return self.request("PUT", path, payload=payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


__all__ = ["ApiClient", "DEFAULT_TIMEOUT"]
