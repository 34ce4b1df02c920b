"""Base class for console pages."""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Callable, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QMessageBox, QVBoxLayout, QWidget

from ui.components import Card, section_title
from ui.custom_button import CustomButton
from ui.dashboard_core.context import DashboardContext
from ui.notifier import Notifier
from utils.exceptions import ApiError

DoneFn = Callable[[Any, Optional[ApiError]], None]
ConfirmFn = Callable[[str, str, CustomButton], bool]


def confirm_dialog(parent: QWidget) -> ConfirmFn:
    """Return a confirm callback backed by a modal :class:`QMessageBox`."""

    def confirm(title: str, text: str, button: CustomButton) -> bool:
        box = QMessageBox(parent)
        box.setWindowTitle(title)
        box.setText(text)
        box.addButton(
            CustomButton("Cancel", custom_type="cancel"),
            QMessageBox.ButtonRole.RejectRole,
        )
        box.addButton(button, QMessageBox.ButtonRole.AcceptRole)
        box.exec()
        return box.clickedButton() is button

    return confirm


class DashboardPage(QWidget):
    """Titled card page with its own message bar.

    Subclasses fill ``self.card`` and implement :meth:`refresh`, which runs
    once the shared context is attached and again on every navigation.
    Network calls go through :meth:`run_in_background` so the window keeps
    painting while a request is in flight.
    """

    # (callback, result, error) delivered on the GUI thread
    _workFinished = pyqtSignal(object, object, object)

    def __init__(self, title: str = "", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.title = title
        self._context: Optional[DashboardContext] = None
        self.notifier = Notifier(self)
        self._workFinished.connect(self._deliver)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 18, 18, 18)
        layout.setSpacing(18)

        self.card = Card()
        self.card.layout().addWidget(section_title(title))
        layout.addWidget(self.card)

    @property
    def context(self) -> DashboardContext:
        if self._context is None:
            raise RuntimeError("DashboardContext not attached yet")
        return self._context

    def attach(self, context: DashboardContext) -> None:
        self._context = context
        self.refresh()

    def refresh(self) -> None:
        """Reload the page's data; called by the navigation controller."""

    def run_in_background(
        self, work: Callable[[], Any], on_done: DoneFn
    ) -> "Future[Any]":
        """Run ``work`` on the context's executor.

        ``on_done(result, error)`` is called on the GUI thread afterwards;
        ``error`` is the :class:`ApiError` raised by ``work``, if any. Other
        exceptions are left on the returned future.
        """

        def worker() -> Any:
            try:
                result = work()
            except ApiError as exc:
                self._workFinished.emit(on_done, None, exc)
                return None
            self._workFinished.emit(on_done, result, None)
            return result

        return self.context.submit(worker)

    def _deliver(self, on_done: DoneFn, result: Any, error: Optional[ApiError]) -> None:
        on_done(result, error)


__all__ = ["ConfirmFn", "DashboardPage", "DoneFn", "confirm_dialog"]
