from types import SimpleNamespace

import pytest

from ui.table_model import (
    ACTION_COLUMN_KEY,
    ACTION_COLUMN_TITLE,
    DEFAULT_PAGE_SIZE,
    Column,
    MenuItem,
    Paginator,
    TableAction,
    build_menu_items,
    find_duplicate_keys,
    merge_columns,
    record_key,
)
from utils.exceptions import RowKeyError


def _columns():
    return [
        Column("name", "Name", data_index="name"),
        Column("email", "Email", data_index="email"),
    ]


def test_merge_without_actions_keeps_columns_exactly():
    columns = _columns()
    merged = merge_columns(columns)
    assert merged == columns
    assert merged is not columns
    assert [c.key for c in merged] == ["name", "email"]


def test_merge_with_actions_appends_one_trailing_column():
    columns = _columns()
    merged = merge_columns(columns, lambda record: [])
    assert len(merged) == len(columns) + 1
    assert merged[:-1] == columns
    assert merged[-1].key == ACTION_COLUMN_KEY
    assert merged[-1].title == ACTION_COLUMN_TITLE == "Action"


def test_merge_does_not_mutate_input():
    columns = _columns()
    merge_columns(columns, lambda record: [])
    assert len(columns) == 2


def test_merge_of_empty_schema():
    assert merge_columns([]) == []
    assert [c.title for c in merge_columns([], lambda r: [])] == ["Action"]


def test_action_column_cell_builds_menu_items_for_that_record():
    seen = []

    def get_actions(record):
        seen.append(record["id"])
        return [TableAction("view", f"View {record['id']}")]

    column = merge_columns(_columns(), get_actions)[-1]
    items = column.cell_value({"id": 7})
    assert seen == [7]
    assert [item.label for item in items] == ["View 7"]


def test_menu_items_preserve_factory_order():
    actions = [
        TableAction("edit", "Edit"),
        TableAction("disable", "Disable"),
        TableAction("delete", "Delete", danger=True),
    ]
    items = build_menu_items({"id": 1}, lambda record: actions)
    assert [item.key for item in items] == ["edit", "disable", "delete"]
    assert [item.danger for item in items] == [False, False, True]


def test_factory_is_called_once_per_build():
    calls = []
    build_menu_items({"id": 1}, lambda record: calls.append(record) or [])
    assert len(calls) == 1


def test_enabled_item_invokes_handler_exactly_once_without_arguments():
    calls = []
    item = MenuItem.from_action(TableAction("del", "Delete", on_click=lambda: calls.append("x")))
    assert item.trigger() is True
    assert calls == ["x"]


def test_disabled_item_never_invokes_handler():
    calls = []
    item = MenuItem.from_action(
        TableAction("del", "Delete", on_click=lambda: calls.append("x"), disabled=True)
    )
    assert item.disabled
    assert item.trigger() is False
    assert calls == []


def test_item_without_handler_is_inert():
    item = MenuItem.from_action(TableAction("noop", "Nothing"))
    assert not item.enabled
    assert item.trigger() is False


def test_handler_errors_propagate():
    def boom():
        raise RuntimeError("caller bug")

    item = MenuItem.from_action(TableAction("boom", "Boom", on_click=boom))
    with pytest.raises(RuntimeError, match="caller bug"):
        item.trigger()


def test_danger_defaults():
    action = TableAction("edit", "Edit")
    assert action.danger is False
    assert action.disabled is False


def test_column_cell_value_projects_mapping_and_attributes():
    column = Column("name", "Name", data_index="name")
    assert column.cell_value({"name": "A"}) == "A"
    assert column.cell_value(SimpleNamespace(name="B")) == "B"
    assert column.cell_value({}) == ""


def test_column_render_receives_value_and_record():
    column = Column(
        "name",
        "Name",
        data_index="name",
        render=lambda value, record: f"{record['id']}:{value.upper()}",
    )
    assert column.cell_value({"id": 3, "name": "ann"}) == "3:ANN"


def test_record_key_defaults_to_id_and_validates():
    assert record_key({"id": 5}) == 5
    assert record_key(SimpleNamespace(uuid="u1"), "uuid") == "u1"
    with pytest.raises(RowKeyError) as excinfo:
        record_key({"name": "no id"})
    assert excinfo.value.row_key == "id"


def test_duplicate_keys_are_reported_not_fatal():
    records = [{"id": 1}, {"id": 2}, {"id": 1}, {"id": 1}]
    assert find_duplicate_keys(records) == [1]
    assert find_duplicate_keys([{"id": [1]}, {"id": [1]}]) == []


def test_paginator_uses_fixed_page_size_of_ten():
    data = list(range(23))
    pager = Paginator(len(data))
    assert pager.page_size == DEFAULT_PAGE_SIZE == 10
    assert pager.page_count == 3
    assert pager.slice(data, 1) == list(range(10))
    assert pager.slice(data, 3) == [20, 21, 22]


def test_paginator_clamps_pages():
    pager = Paginator(15)
    assert pager.clamp(0) == 1
    assert pager.clamp(9) == 2
    empty = Paginator(0)
    assert empty.page_count == 1
    assert empty.slice([], 1) == []


def test_paginator_page_size_is_not_configurable():
    with pytest.raises(TypeError):
        Paginator(5, page_size=20)
    assert Paginator(95).page_count == 10
