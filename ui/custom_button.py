"""Push button presets for confirm dialogs and toolbar actions."""
from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtWidgets import QPushButton, QWidget

CUSTOM_TYPES = ("delete", "disable", "enable", "cancel", "forceDelete")
BUTTON_TYPES = ("primary", "default", "dashed", "link", "text")

ICON_GLYPHS = {
    "cancel": "✖",
    "delete": "🗑",
    "disable": "⊘",
    "enable": "✔",
    "forceDelete": "🗑",
}
LOADING_GLYPH = "⟳"

_DANGER_TYPES = {"delete", "disable", "forceDelete"}


def resolve_button_type(
    button_type: Optional[str], custom_type: Optional[str]
) -> str:
    """Explicit ``button_type`` wins; cancel buttons default to ``default``."""

    if button_type is not None:
        return button_type
    return "default" if custom_type == "cancel" else "primary"


def resolve_danger(danger: Optional[bool], custom_type: Optional[str]) -> bool:
    if danger is not None:
        return danger
    return custom_type in _DANGER_TYPES


def resolve_icon(
    icon: Optional[str], custom_type: Optional[str], loading: bool
) -> str:
    if loading:
        return LOADING_GLYPH
    if icon is not None:
        return icon
    return ICON_GLYPHS.get(custom_type or "", "")


class CustomButton(QPushButton):
    """Button whose glyph, emphasis and style follow its ``custom_type``.

    ``button_type`` and ``danger`` are exposed as dynamic properties
    (``variant`` and ``danger``) so the theme can style them.
    """

    def __init__(
        self,
        text: str,
        *,
        custom_type: Optional[str] = None,
        button_type: Optional[str] = None,
        danger: Optional[bool] = None,
        loading: bool = False,
        icon: Optional[str] = None,
        on_click: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        if custom_type is not None and custom_type not in CUSTOM_TYPES:
            raise ValueError(f"Unknown custom_type '{custom_type}'")
        if button_type is not None and button_type not in BUTTON_TYPES:
            raise ValueError(f"Unknown button_type '{button_type}'")
        self.setObjectName("CustomButton")
        self._label = text
        self._custom_type = custom_type
        self._icon = icon
        self.button_type = resolve_button_type(button_type, custom_type)
        self.danger = resolve_danger(danger, custom_type)
        self.setProperty("variant", self.button_type)
        self.setProperty("danger", self.danger)
        self._loading = False
        if on_click is not None:
            self.clicked.connect(lambda *_: on_click())
        self.set_loading(loading)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def glyph(self) -> str:
        return resolve_icon(self._icon, self._custom_type, self._loading)

    def set_loading(self, loading: bool) -> None:
        self._loading = bool(loading)
        self.setEnabled(not self._loading)
        glyph = self.glyph
        self.setText(f"{glyph} {self._label}" if glyph else self._label)


__all__ = ["CustomButton", "resolve_button_type", "resolve_danger", "resolve_icon"]
