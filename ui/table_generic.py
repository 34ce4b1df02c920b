"""Paginated record table with an optional per-row actions menu."""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QColor, QIcon, QPixmap
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMenu,
    QProgressBar,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from .table_model import (
    DEFAULT_ROW_KEY,
    ActionFactory,
    Column,
    MenuItem,
    Paginator,
    T,
    find_duplicate_keys,
    merge_columns,
    record_key,
)

log = logging.getLogger(__name__)

DANGER_COLOR = "#cf1322"
KEY_ROLE = Qt.ItemDataRole.UserRole


def _danger_icon() -> QIcon:
    pixmap = QPixmap(10, 10)
    pixmap.fill(QColor(DANGER_COLOR))
    return QIcon(pixmap)


class TableGeneric(QWidget):
    """Render one page of ``data`` using a caller-defined column schema.

    When ``get_actions`` is supplied an ``Action`` column is appended whose
    cells hold a trigger button opening that row's menu. The factory is called
    once for every visible row on every render pass and its result is never
    cached. ``context_holder`` is placed above the table as given.

    Records may be mappings or plain objects; each must expose the
    ``row_key`` field, checked whenever new data arrives.
    """

    pageChanged = pyqtSignal(int)

    def __init__(
        self,
        data: Optional[Sequence[T]] = None,
        columns: Optional[Sequence[Column]] = None,
        *,
        loading: bool = False,
        row_key: str = DEFAULT_ROW_KEY,
        get_actions: Optional[ActionFactory] = None,
        context_holder: Optional[QWidget] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._row_key = row_key
        self._data: List[T] = self._validated(data or [])
        self._columns: List[Column] = list(columns or [])
        self._get_actions = get_actions
        self._page = 1
        self._loading = False
        self._context_holder = context_holder
        self._row_menus: List[Optional[QMenu]] = []
        self._row_items: List[List[MenuItem]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        if context_holder is not None:
            layout.addWidget(context_holder)

        self.busy = QProgressBar()
        self.busy.setObjectName("TableBusy")
        self.busy.setRange(0, 0)
        self.busy.setTextVisible(False)
        self.busy.setMaximumHeight(4)
        self.busy.setVisible(False)
        layout.addWidget(self.busy)

        self.table = QTableWidget(0, 0)
        self.table.setObjectName("TableGeneric")
        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.setWordWrap(False)
        layout.addWidget(self.table)

        pager = QHBoxLayout()
        pager.setContentsMargins(0, 0, 0, 0)
        pager.addStretch()
        self.prev_button = QPushButton("‹")
        self.prev_button.setObjectName("PagePrev")
        self.page_label = QLabel()
        self.page_label.setObjectName("PageLabel")
        self.next_button = QPushButton("›")
        self.next_button.setObjectName("PageNext")
        pager.addWidget(self.prev_button)
        pager.addWidget(self.page_label)
        pager.addWidget(self.next_button)
        layout.addLayout(pager)

        self.prev_button.clicked.connect(lambda: self.set_page(self._page - 1))
        self.next_button.clicked.connect(lambda: self.set_page(self._page + 1))

        self._render()
        self.set_loading(loading)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    @property
    def context_holder(self) -> Optional[QWidget]:
        return self._context_holder

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def row_key(self) -> str:
        return self._row_key

    def set_data(self, data: Sequence[T]) -> None:
        self._data = self._validated(data)
        self._page = self._paginator().clamp(self._page)
        self._render()

    def set_columns(self, columns: Sequence[Column]) -> None:
        self._columns = list(columns)
        self._render()

    def set_actions(self, get_actions: Optional[ActionFactory]) -> None:
        self._get_actions = get_actions
        self._render()

    def configure(
        self,
        data: Sequence[T],
        columns: Sequence[Column],
        get_actions: Optional[ActionFactory] = None,
    ) -> None:
        """Replace data, schema and action factory in a single render pass."""

        self._columns = list(columns)
        self._get_actions = get_actions
        self._data = self._validated(data)
        self._page = self._paginator().clamp(self._page)
        self._render()

    def set_loading(self, loading: bool) -> None:
        """Show the busy indicator and block interaction while ``loading``."""

        self._loading = bool(loading)
        self.busy.setVisible(self._loading)
        self.table.setEnabled(not self._loading)
        self._sync_pager()

    def set_page(self, page: int) -> None:
        page = self._paginator().clamp(page)
        if page == self._page:
            return
        self._page = page
        self._render()
        self.pageChanged.emit(page)

    def refresh(self) -> None:
        """Re-run a render pass, rebuilding every visible row's menu."""
        self._render()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    @property
    def current_page(self) -> int:
        return self._page

    @property
    def page_count(self) -> int:
        return self._paginator().page_count

    def merged_columns(self) -> List[Column]:
        return merge_columns(self._columns, self._get_actions)

    def header_labels(self) -> List[str]:
        labels = []
        for col in range(self.table.columnCount()):
            item = self.table.horizontalHeaderItem(col)
            labels.append(item.text() if item is not None else "")
        return labels

    def row_keys(self) -> List[Any]:
        keys = []
        for row in range(self.table.rowCount()):
            item = self.table.item(row, 0)
            keys.append(item.data(KEY_ROLE) if item is not None else None)
        return keys

    def menu_for_row(self, row: int) -> Optional[QMenu]:
        if 0 <= row < len(self._row_menus):
            return self._row_menus[row]
        return None

    def action_items_for_row(self, row: int) -> List[MenuItem]:
        if 0 <= row < len(self._row_items):
            return list(self._row_items[row])
        return []

    def action_trigger_for_row(self, row: int) -> Optional[QToolButton]:
        if self._get_actions is None:
            return None
        widget = self.table.cellWidget(row, len(self._columns))
        return widget if isinstance(widget, QToolButton) else None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _validated(self, data: Sequence[T]) -> List[T]:
        records = list(data)
        find_duplicate_keys(records, self._row_key)
        return records

    def _paginator(self) -> Paginator[T]:
        return Paginator(len(self._data))

    def _render(self) -> None:
        merged = self.merged_columns()
        action_index = len(self._columns) if self._get_actions is not None else None
        rows = self._paginator().slice(self._data, self._page)
        self.table.clear()
        self.table.setRowCount(0)
        self.table.setColumnCount(len(merged))
        self.table.setHorizontalHeaderLabels([column.title for column in merged])
        self.table.setRowCount(len(rows))
        self._row_menus = []
        self._row_items = []

        for row, record in enumerate(rows):
            key = record_key(record, self._row_key)
            menu: Optional[QMenu] = None
            items: List[MenuItem] = []
            for col, column in enumerate(merged):
                value = column.cell_value(record)
                if col == action_index:
                    items = list(value)
                    trigger = self._build_action_trigger(items)
                    menu = trigger.menu()
                    self.table.setItem(row, col, QTableWidgetItem(""))
                    self.table.setCellWidget(row, col, trigger)
                elif isinstance(value, QWidget):
                    self.table.setItem(row, col, QTableWidgetItem(""))
                    self.table.setCellWidget(row, col, value)
                else:
                    self.table.setItem(row, col, QTableWidgetItem(str(value)))
            first = self.table.item(row, 0)
            if first is not None:
                first.setData(KEY_ROLE, key)
            self._row_menus.append(menu)
            self._row_items.append(items)

        self._sync_pager()
        log.debug(
            "Rendered page %s/%s: %s rows, %s columns",
            self._page,
            self.page_count,
            len(rows),
            len(merged),
        )

    def _build_action_trigger(self, items: Sequence[MenuItem]) -> QToolButton:
        trigger = QToolButton()
        trigger.setObjectName("ActionTrigger")
        trigger.setText("⋯")
        trigger.setAutoRaise(True)
        trigger.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        trigger.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)

        menu = QMenu(trigger)
        menu.setObjectName("ActionMenu")
        for item in items:
            action = QAction(item.label, menu)
            action.setData(item.key)
            action.setEnabled(not item.disabled)
            action.setProperty("danger", item.danger)
            if item.danger:
                font = action.font()
                font.setBold(True)
                action.setFont(font)
                action.setIcon(_danger_icon())
            action.triggered.connect(partial(self._dispatch, item))
            menu.addAction(action)
        trigger.setMenu(menu)
        return trigger

    @staticmethod
    def _dispatch(item: MenuItem, *_args: Any) -> None:
        item.trigger()

    def _sync_pager(self) -> None:
        count = self.page_count
        self.page_label.setText(f"Page {self._page} / {count}")
        self.prev_button.setEnabled(not self._loading and self._page > 1)
        self.next_button.setEnabled(not self._loading and self._page < count)


__all__ = ["TableGeneric"]
