"""Qt-free data model behind :class:`ui.table_generic.TableGeneric`.

Row menus are rebuilt on every render pass. Which columns appear and what a
row's menu contains is decided here so it can be exercised without a display.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from utils.exceptions import RowKeyError

log = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_ROW_KEY = "id"
ACTION_COLUMN_KEY = "action"
ACTION_COLUMN_TITLE = "Action"

CellRenderer = Callable[[Any, Any], Any]


def _lookup(record: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-style record."""

    if isinstance(record, Mapping):
        return record[name]
    try:
        return getattr(record, name)
    except AttributeError:
        raise KeyError(name) from None


def record_key(record: Any, row_key: str = DEFAULT_ROW_KEY) -> Any:
    """Return the identifier of ``record``.

    Raises :class:`RowKeyError` when the record has no ``row_key`` field.
    """

    try:
        return _lookup(record, row_key)
    except KeyError:
        raise RowKeyError(row_key, record) from None


@dataclass(frozen=True)
class Column:
    """Describes how one field of a record is projected into a cell.

    ``render`` receives ``(value, record)`` where ``value`` is the field named
    by ``data_index`` (``None`` when no index is given) and returns either
    display text or a widget.
    """

    key: str
    title: str
    data_index: Optional[str] = None
    render: Optional[CellRenderer] = None

    def cell_value(self, record: Any) -> Any:
        value = None
        if self.data_index is not None:
            try:
                value = _lookup(record, self.data_index)
            except KeyError:
                value = None
        if self.render is not None:
            return self.render(value, record)
        return "" if value is None else value


@dataclass(frozen=True)
class TableAction:
    """One row-scoped command offered in the actions menu."""

    key: str
    label: str
    on_click: Optional[Callable[[], Any]] = None
    danger: bool = False
    disabled: bool = False


ActionFactory = Callable[[T], Sequence[TableAction]]


@dataclass(frozen=True)
class MenuItem:
    """View model of a :class:`TableAction` as shown in a row menu."""

    key: str
    label: str
    disabled: bool = False
    danger: bool = False
    handler: Optional[Callable[[], Any]] = field(default=None, repr=False)

    @classmethod
    def from_action(cls, action: TableAction) -> "MenuItem":
        return cls(
            key=action.key,
            label=action.label,
            disabled=bool(action.disabled),
            danger=bool(action.danger),
            handler=action.on_click,
        )

    @property
    def enabled(self) -> bool:
        return not self.disabled and self.handler is not None

    def trigger(self) -> bool:
        """Run the handler once; disabled items are a silent no-op.

        Returns whether the handler ran. Handler exceptions propagate.
        """

        if not self.enabled:
            return False
        self.handler()
        return True


def build_menu_items(record: T, get_actions: ActionFactory) -> List[MenuItem]:
    """Call ``get_actions`` once for ``record`` and map its result in order."""

    return [MenuItem.from_action(action) for action in get_actions(record)]


def action_column(get_actions: ActionFactory) -> Column:
    """Return the synthetic trailing column holding each row's menu items."""

    return Column(
        key=ACTION_COLUMN_KEY,
        title=ACTION_COLUMN_TITLE,
        render=lambda _value, record: build_menu_items(record, get_actions),
    )


def merge_columns(
    columns: Sequence[Column],
    get_actions: Optional[ActionFactory] = None,
) -> List[Column]:
    """Return ``columns`` plus one trailing action column when actions exist.

    The input sequence is copied, never mutated, and its order is preserved.
    """

    merged = list(columns)
    if get_actions is not None:
        merged.append(action_column(get_actions))
    return merged


class Paginator(Generic[T]):
    """1-based client-side pagination, always ``DEFAULT_PAGE_SIZE`` rows a page."""

    page_size = DEFAULT_PAGE_SIZE

    def __init__(self, total: int) -> None:
        self.total = max(0, total)

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    def clamp(self, page: int) -> int:
        return min(max(1, page), self.page_count)

    def bounds(self, page: int) -> tuple[int, int]:
        page = self.clamp(page)
        start = (page - 1) * self.page_size
        return start, min(start + self.page_size, self.total)

    def slice(self, data: Sequence[T], page: int) -> List[T]:
        start, stop = self.bounds(page)
        return list(data[start:stop])


def find_duplicate_keys(
    records: Sequence[Any], row_key: str = DEFAULT_ROW_KEY
) -> List[Any]:
    """Return identifiers appearing more than once, in first-seen order."""

    seen: set = set()
    duplicates: List[Any] = []
    for record in records:
        key = record_key(record, row_key)
        try:
            if key in seen and key not in duplicates:
                duplicates.append(key)
            seen.add(key)
        except TypeError:
            # unhashable identifiers cannot collide in a set; skip them
            continue
    if duplicates:
        log.debug("Duplicate row keys %s for field '%s'", duplicates, row_key)
    return duplicates


__all__ = [
    "ACTION_COLUMN_KEY",
    "ACTION_COLUMN_TITLE",
    "ActionFactory",
    "Column",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_ROW_KEY",
    "MenuItem",
    "Paginator",
    "TableAction",
    "action_column",
    "build_menu_items",
    "find_duplicate_keys",
    "merge_columns",
    "record_key",
]
