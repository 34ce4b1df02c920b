"""Shared context handed to every console page."""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from services.api_client import ApiClient
from utils.settings import Settings

Worker = Callable[[Callable[[], Any]], "Future[Any]"]
ToastFn = Callable[[str, str], None]


@dataclass(frozen=True)
class DashboardContext:
    """Dependency bundle for dashboard pages: API access and session role.

    ``run_async`` is supplied by the hosting window and runs a callable on its
    background executor. Without one, :meth:`submit` runs the callable inline
    and returns an already-completed future.
    """

    api: ApiClient
    settings: Settings
    run_async: Optional[Worker] = None
    show_toast: Optional[ToastFn] = None

    @property
    def role(self) -> str:
        return self.settings.role

    def submit(self, worker: Callable[[], Any]) -> "Future[Any]":
        if self.run_async is not None:
            return self.run_async(worker)
        future: Future[Any] = Future()
        try:
            future.set_result(worker())
        except Exception as exc:
            future.set_exception(exc)
        return future

    def toast(self, kind: str, message: str) -> None:
        if self.show_toast is not None:
            self.show_toast(kind, message)

    def with_overrides(self, **changes: Any) -> "DashboardContext":
        """Return a cloned context with updated attributes."""
        return replace(self, **changes)


__all__ = ["DashboardContext", "ToastFn", "Worker"]
