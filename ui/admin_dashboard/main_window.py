"""Console main window: sidebar navigation, header and page stack."""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Set

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from ui.components import NavButton
from ui.dashboard_core import DashboardContext, NavigationController, PageRegistry
from ui.theme import _toggle_theme

from .pages import ReviewsPage, ToursPage, UsersPage

log = logging.getLogger(__name__)


def default_registry() -> PageRegistry:
    registry = PageRegistry()
    registry.register(
        "customers",
        "Customers",
        lambda ctx: UsersPage("customer", "Customer Accounts"),
    )
    registry.register(
        "employees",
        "Employees",
        lambda ctx: UsersPage("staff", "Employee Accounts"),
    )
    registry.register("tours", "Tours", lambda ctx: ToursPage("Tour Catalogue"))
    registry.register("reviews", "Reviews", lambda ctx: ReviewsPage("Tour Reviews"))
    return registry


class MainWindow(QMainWindow):
    """Admin console window; pages are built on first visit."""

    def __init__(
        self,
        context: DashboardContext,
        registry: Optional[PageRegistry] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Tour Admin Console")
        self.resize(1200, 760)
        self.setStatusBar(QStatusBar())
        self._executor = ThreadPoolExecutor(max_workers=2)
        self._background_futures: Set[Future[Any]] = set()
        self._context = context.with_overrides(
            run_async=self._submit_background,
            show_toast=self._show_toast,
        )
        self._registry = registry or default_registry()
        self._navigation = NavigationController(self._registry)
        self._navigation.add_listener(self._on_nav_changed)
        self.pages: Dict[str, QWidget] = {}

        central = QWidget()
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        sidebar = QFrame()
        sidebar.setObjectName("Sidebar")
        side = QVBoxLayout(sidebar)
        side.setContentsMargins(10, 12, 10, 12)
        side.setSpacing(6)
        side.addWidget(QLabel("Tour Admin"))

        self.nav_buttons: Dict[str, NavButton] = {}
        for key in self._registry.keys():
            button = NavButton(f"  {self._registry.title(key)}")
            button.clicked.connect(lambda _checked=False, k=key: self._go(k))
            side.addWidget(button)
            self.nav_buttons[key] = button
        side.addStretch()

        header = QFrame()
        header.setObjectName("Header")
        h = QHBoxLayout(header)
        h.setContentsMargins(18, 10, 18, 10)
        self.title_label = QLabel("Dashboard")
        self.title_label.setObjectName("Title")
        h.addWidget(self.title_label)
        h.addStretch()
        role = QLabel(f"Signed in as {self._context.role}")
        h.addWidget(role, alignment=Qt.AlignmentFlag.AlignRight)

        self.stack = QStackedWidget()

        right = QWidget()
        rv = QVBoxLayout(right)
        rv.setContentsMargins(0, 0, 0, 0)
        rv.setSpacing(0)
        rv.addWidget(header)
        rv.addWidget(self.stack)

        root.addWidget(sidebar)
        root.addWidget(right)
        root.setStretchFactor(right, 1)
        sidebar.setFixedWidth(210)
        self.setCentralWidget(central)

        self._build_menu()

        first = next(iter(self._registry.keys()), None)
        if first is not None:
            self._go(first)

    @property
    def context(self) -> DashboardContext:
        return self._context

    @property
    def current_key(self) -> Optional[str]:
        return self._navigation.current_key

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = self.menuBar().addMenu("&View")
        reload_action = QAction("Reload", self)
        reload_action.triggered.connect(self._reload_current)
        view_menu.addAction(reload_action)
        theme_action = QAction("Toggle Dark Mode", self)
        theme_action.triggered.connect(lambda: _toggle_theme(self.statusBar()))
        view_menu.addAction(theme_action)

    def _go(self, key: str) -> None:
        try:
            self._navigation.set_current(key)
        except KeyError:
            log.warning("Ignoring navigation to unknown page %s", key)

    def _on_nav_changed(self, key: Optional[str]) -> None:
        for name, button in self.nav_buttons.items():
            button.setChecked(name == key)
        if key is None:
            return
        page = self.pages.get(key)
        if page is None:
            page = self._registry.build(key, self._context)
            self.pages[key] = page
            self.stack.addWidget(page)
            attach = getattr(page, "attach", None)
            if callable(attach):
                attach(self._context)
        else:
            self._refresh_page(page)
        self.stack.setCurrentWidget(page)
        self.title_label.setText(self._registry.title(key))
        self.statusBar().showMessage(f"Ready • {self._registry.title(key)}")

    def _reload_current(self) -> None:
        key = self.current_key
        if key in self.pages:
            self._refresh_page(self.pages[key])

    def _submit_background(self, worker: Callable[[], Any]) -> Future[Any]:
        future = self._executor.submit(worker)
        self._background_futures.add(future)
        future.add_done_callback(self._background_done)
        return future

    def _background_done(self, future: Future[Any]) -> None:
        self._background_futures.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log.error("Background task failed", exc_info=exc)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        for future in list(self._background_futures):
            future.cancel()
        self._executor.shutdown(wait=False)
        super().closeEvent(event)

    @staticmethod
    def _refresh_page(page: QWidget) -> None:
        refresh = getattr(page, "refresh", None)
        if callable(refresh):
            refresh()

    def _show_toast(self, kind: str, message: str) -> None:
        prefixes = {
            "success": "SUCCESS",
            "error": "ERROR",
            "warning": "WARN",
            "info": "INFO",
        }
        prefix = prefixes.get(kind, kind.upper())
        self.statusBar().showMessage(f"[{prefix}] {message}", 5000)


__all__ = ["MainWindow", "default_registry"]
