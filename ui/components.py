"""Reusable UI components for consistent styling."""

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt


class NavButton(QToolButton):
    """Navigation button used in the sidebar."""

    def __init__(self, text: str, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("NavButton")
        self.setText(text)
        self.setCheckable(True)
        self.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)


class Card(QFrame):
    """Framed container with standard padding and layout."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Minimum)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 18, 18, 18)
        layout.setSpacing(10)


def section_title(text: str) -> QLabel:
    """Create a standardized section header label."""

    label = QLabel(text)
    label.setObjectName("SectionTitle")
    return label


def status_label(active: bool, on_text: str, off_text: str) -> QWidget:
    """Return a pill label whose ``active`` property drives its colour."""

    label = QLabel(on_text if active else off_text)
    label.setObjectName("StatusPill")
    label.setProperty("active", bool(active))
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label
