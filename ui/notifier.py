"""Transient status messages rendered above list pages."""
from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict, Optional, Tuple

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QLabel, QWidget

log = logging.getLogger(__name__)

CloseFn = Optional[Callable[[], None]]

SHORT_DURATION = 1.2
LOADING_DURATION = 2.5

_PREFIXES = {
    "success": "✔",
    "error": "✖",
    "warning": "⚠",
    "loading": "…",
    "info": "ℹ",
}


class Notifier:
    """Owns a message bar widget and the helpers that post to it.

    ``context_holder`` is the widget a page places in its layout (usually by
    handing it to :class:`~ui.table_generic.TableGeneric`). Every message
    expires after its own duration and then runs its ``on_close`` callback.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        self.context_holder = QLabel(parent)
        self.context_holder.setObjectName("Notifier")
        self.context_holder.setWordWrap(True)
        self.context_holder.setVisible(False)
        self._ids = itertools.count(1)
        self._current: Optional[int] = None
        self._timers: Dict[int, Tuple[QTimer, CloseFn]] = {}

    @property
    def current_text(self) -> str:
        return self.context_holder.text() if self._current is not None else ""

    @property
    def current_kind(self) -> Optional[str]:
        if self._current is None:
            return None
        return self.context_holder.property("kind")

    def open(
        self,
        kind: str,
        content: str,
        *,
        duration: float = SHORT_DURATION,
        on_close: CloseFn = None,
    ) -> int:
        """Show ``content`` styled for ``kind`` and return the message id."""

        message_id = next(self._ids)
        prefix = _PREFIXES.get(kind, "")
        label = self.context_holder
        label.setProperty("kind", kind)
        label.setText(f"{prefix} {content}".strip())
        # re-polish so the [kind=...] selector in the theme applies
        label.style().unpolish(label)
        label.style().polish(label)
        label.setVisible(True)
        self._current = message_id

        timer = QTimer(label)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._expire(message_id))
        timer.start(int(duration * 1000))
        self._timers[message_id] = (timer, on_close)

        level = logging.WARNING if kind == "error" else logging.DEBUG
        log.log(level, "[%s] %s", kind, content)
        return message_id

    def close(self, message_id: int) -> None:
        """Expire a message early; its ``on_close`` still runs once."""

        entry = self._timers.get(message_id)
        if entry is not None:
            entry[0].stop()
            self._expire(message_id)

    def _expire(self, message_id: int) -> None:
        entry = self._timers.pop(message_id, None)
        if entry is None:
            return
        timer, on_close = entry
        timer.deleteLater()
        if self._current == message_id:
            self._current = None
            self.context_holder.setVisible(False)
            self.context_holder.clear()
        if on_close is not None:
            on_close()

    def notify_success(self, content: str, on_close: CloseFn = None) -> int:
        return self.open("success", content, on_close=on_close)

    def notify_error(self, content: str, on_close: CloseFn = None) -> int:
        return self.open("error", content, on_close=on_close)

    def notify_warning(self, content: str, on_close: CloseFn = None) -> int:
        return self.open("warning", content, on_close=on_close)

    def notify_loading(self, content: str, on_close: CloseFn = None) -> int:
        return self.open(
            "loading", content, duration=LOADING_DURATION, on_close=on_close
        )

    def show_toast(self, kind: str, message: str) -> None:
        """Adapter matching the dashboard ``ToastFn`` signature."""

        self.open(kind, message)


__all__ = ["LOADING_DURATION", "Notifier", "SHORT_DURATION"]
