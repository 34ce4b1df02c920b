"""Navigation scaffolding for the console's sidebar and page stack."""
from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from PyQt6.QtWidgets import QWidget

from .context import DashboardContext

log = logging.getLogger(__name__)

PageFactory = Callable[[DashboardContext], QWidget]


@dataclass(frozen=True)
class PageEntry:
    key: str
    title: str
    factory: PageFactory


class PageRegistry:
    """Ordered registry mapping navigation keys to page factories."""

    def __init__(self) -> None:
        self._entries: Dict[str, PageEntry] = OrderedDict()

    def register(self, key: str, title: str, factory: PageFactory) -> None:
        if key in self._entries:
            raise KeyError(f"Page '{key}' already registered")
        self._entries[key] = PageEntry(key, title, factory)

    def keys(self) -> Iterable[str]:
        return self._entries.keys()

    def title(self, key: str) -> str:
        return self._entries[key].title

    def build(self, key: str, context: DashboardContext) -> QWidget:
        return self._entries[key].factory(context)


class NavigationController:
    """Tracks the selected page and notifies listeners on changes."""

    def __init__(self, registry: PageRegistry) -> None:
        self._registry = registry
        self._current_key: Optional[str] = None
        self._listeners: List[Callable[[Optional[str]], None]] = []

    @property
    def current_key(self) -> Optional[str]:
        return self._current_key

    def add_listener(self, callback: Callable[[Optional[str]], None]) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[Optional[str]], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def set_current(self, key: str) -> None:
        if key not in self._registry.keys():
            raise KeyError(f"Unknown page '{key}'")
        changed = self._current_key != key
        self._current_key = key
        if changed:
            log.debug("Navigated to %s", key)
        self._emit()

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self._current_key)


__all__ = ["NavigationController", "PageEntry", "PageFactory", "PageRegistry"]
