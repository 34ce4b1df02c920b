import pytest

pytest.importorskip("PyQt6.QtWidgets")

from ui.custom_button import (
    CustomButton,
    resolve_button_type,
    resolve_danger,
    resolve_icon,
)


def test_button_type_explicit_value_wins():
    assert resolve_button_type("link", "cancel") == "link"


def test_cancel_defaults_to_default_type():
    assert resolve_button_type(None, "cancel") == "default"
    assert resolve_button_type(None, "delete") == "primary"
    assert resolve_button_type(None, None) == "primary"


@pytest.mark.parametrize(
    "custom_type, expected",
    [("delete", True), ("disable", True), ("forceDelete", True), ("enable", False), ("cancel", False), (None, False)],
)
def test_danger_derived_from_custom_type(custom_type, expected):
    assert resolve_danger(None, custom_type) is expected


def test_explicit_danger_wins():
    assert resolve_danger(False, "delete") is False
    assert resolve_danger(True, "enable") is True


def test_icon_resolution():
    assert resolve_icon(None, "enable", False) == "✔"
    assert resolve_icon("★", "enable", False) == "★"
    assert resolve_icon("★", "enable", True) == "⟳"
    assert resolve_icon(None, None, False) == ""


def test_widget_state(qapp):
    clicks = []
    button = CustomButton("Delete", custom_type="delete", on_click=lambda: clicks.append(1))
    assert button.danger is True
    assert button.property("variant") == "primary"
    assert button.text() == "🗑 Delete"
    button.click()
    assert clicks == [1]

    button.set_loading(True)
    assert not button.isEnabled()
    assert button.text().startswith("⟳")
    button.click()
    assert clicks == [1]


def test_widget_rejects_unknown_types(qapp):
    with pytest.raises(ValueError):
        CustomButton("x", custom_type="explode")
