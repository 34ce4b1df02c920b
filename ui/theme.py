from __future__ import annotations

from typing import Optional
from PyQt6.QtWidgets import QApplication, QStatusBar

LIGHT_QSS = """
/* App */
QWidget {
    background: #f5f7fa;
    color: #1f2933;
    font-family: 'Segoe UI', 'Noto Sans', Arial;
    font-size: 14px;
}

/* Sidebar */
#Sidebar {
    background: #001529;
    border: none;
}
#Sidebar QLabel {
    color: #ffffff;
    font-weight: 600;
    padding: 8px 10px;
}
#NavButton {
    color: #d9e2ec;
    background: transparent;
    padding: 10px 14px;
    margin: 4px 8px;
    border-radius: 8px;
    text-align: left;
}
#NavButton:hover { background: #0f2a44; }
#NavButton:checked {
    background: #1677ff;
    color: #ffffff;
}

/* Header */
#Header {
    background: #ffffff;
    border-bottom: 1px solid #e4e7eb;
}
#Title {
    font-size: 20px;
    font-weight: 700;
}

/* Cards and content */
QFrame#Card {
    background: #ffffff;
    border: 1px solid #e4e7eb;
    border-radius: 10px;
}
QLabel#SectionTitle {
    font-size: 16px;
    font-weight: 700;
}

/* Generic table */
QTableWidget#TableGeneric {
    background: #ffffff;
    alternate-background-color: #fafafa;
    border: 1px solid #f0f0f0;
    gridline-color: #f0f0f0;
}
QTableWidget#TableGeneric:disabled { color: #bfbfbf; }
QHeaderView::section {
    background: #fafafa;
    border: none;
    border-bottom: 1px solid #f0f0f0;
    padding: 8px;
    font-weight: 600;
}
QToolButton#ActionTrigger {
    border: none;
    font-size: 18px;
    padding: 0 12px;
}
QToolButton#ActionTrigger::menu-indicator { image: none; }
QMenu#ActionMenu::item:disabled { color: #bfbfbf; }
QProgressBar#TableBusy { border: none; background: #e6f4ff; }
QProgressBar#TableBusy::chunk { background: #1677ff; }
QLabel#PageLabel { padding: 0 8px; }

QLabel#StatusPill {
    border-radius: 10px;
    padding: 2px 8px;
    color: #389e0d;
    background: #f6ffed;
}
QLabel#StatusPill[active="false"] { color: #cf1322; background: #fff1f0; }

/* Messages */
QLabel#Notifier {
    border-radius: 8px;
    padding: 8px 12px;
    background: #ffffff;
    border: 1px solid #d9d9d9;
}
QLabel#Notifier[kind="success"] { color: #389e0d; border-color: #b7eb8f; }
QLabel#Notifier[kind="error"] { color: #cf1322; border-color: #ffa39e; }
QLabel#Notifier[kind="warning"] { color: #d48806; border-color: #ffe58f; }
QLabel#Notifier[kind="loading"] { color: #1677ff; border-color: #91caff; }
QLabel#FormError { color: #cf1322; }
QLabel#ReviewSummary { color: #595959; }

/* Buttons */
QPushButton {
    background: #ffffff;
    color: #1f2933;
    border: 1px solid #d9d9d9;
    padding: 6px 14px;
    border-radius: 6px;
}
QPushButton:hover { border-color: #1677ff; color: #1677ff; }
QPushButton:disabled { color: #bfbfbf; background: #f5f5f5; }
QPushButton#CustomButton[variant="primary"] {
    background: #1677ff;
    color: #ffffff;
    border: none;
}
QPushButton#CustomButton[variant="primary"][danger="true"] { background: #ff4d4f; }
QPushButton#CustomButton[variant="default"][danger="true"] {
    color: #ff4d4f;
    border-color: #ff4d4f;
}
QPushButton#CustomButton[variant="dashed"] { border-style: dashed; }
QPushButton#CustomButton[variant="link"],
QPushButton#CustomButton[variant="text"] {
    background: transparent;
    border: none;
}
QPushButton#CustomButton[variant="link"] { color: #1677ff; }

QStatusBar { background: #ffffff; border-top: 1px solid #e4e7eb; }
"""

DARK_QSS = """
QWidget {
    background: #141414;
    color: #e8e8e8;
    font-family: 'Segoe UI', 'Noto Sans', Arial;
    font-size: 14px;
}
#Sidebar { background: #000c17; }
#Sidebar QLabel { color: #ffffff; }
#NavButton {
    color: #bfbfbf;
    background: transparent;
    padding: 10px 14px;
    margin: 4px 8px;
    border-radius: 8px;
}
#NavButton:hover { background: #111d2c; }
#NavButton:checked { background: #1668dc; color: #ffffff; }
#Header {
    background: #1f1f1f;
    border-bottom: 1px solid #303030;
}
#Title { color: #ffffff; }
QFrame#Card {
    background: #1f1f1f;
    border: 1px solid #303030;
    border-radius: 10px;
}
QLabel#SectionTitle {
    font-size: 16px;
    font-weight: 700;
    color: #ffffff;
}
QTableWidget#TableGeneric {
    background: #1f1f1f;
    alternate-background-color: #262626;
    border: 1px solid #303030;
    gridline-color: #303030;
}
QTableWidget#TableGeneric:disabled { color: #595959; }
QHeaderView::section {
    background: #262626;
    border: none;
    border-bottom: 1px solid #303030;
    padding: 8px;
    font-weight: 600;
}
QToolButton#ActionTrigger {
    border: none;
    font-size: 18px;
    padding: 0 12px;
}
QToolButton#ActionTrigger::menu-indicator { image: none; }
QMenu#ActionMenu::item:disabled { color: #595959; }
QProgressBar#TableBusy { border: none; background: #111a2c; }
QProgressBar#TableBusy::chunk { background: #1668dc; }
QLabel#StatusPill {
    border-radius: 10px;
    padding: 2px 8px;
    color: #73d13d;
    background: #162312;
}
QLabel#StatusPill[active="false"] { color: #ff7875; background: #2a1215; }
QLabel#Notifier {
    border-radius: 8px;
    padding: 8px 12px;
    background: #1f1f1f;
    border: 1px solid #424242;
}
QLabel#Notifier[kind="success"] { color: #73d13d; }
QLabel#Notifier[kind="error"] { color: #ff7875; }
QLabel#Notifier[kind="warning"] { color: #ffc53d; }
QLabel#Notifier[kind="loading"] { color: #4096ff; }
QLabel#FormError { color: #ff7875; }
QLabel#ReviewSummary { color: #a6a6a6; }
QPushButton {
    background: #1f1f1f;
    color: #e8e8e8;
    border: 1px solid #424242;
    padding: 6px 14px;
    border-radius: 6px;
}
QPushButton:disabled { color: #595959; }
QPushButton#CustomButton[variant="primary"] {
    background: #1668dc;
    color: #ffffff;
    border: none;
}
QPushButton#CustomButton[variant="primary"][danger="true"] { background: #dc4446; }
QPushButton#CustomButton[variant="default"][danger="true"] {
    color: #dc4446;
    border-color: #dc4446;
}
QStatusBar { background: #141414; border-top: 1px solid #303030; }
"""


def apply_theme(app: QApplication, dark: bool = False) -> None:
    app.setStyleSheet(DARK_QSS if dark else LIGHT_QSS)


def _toggle_theme(status_bar: Optional[QStatusBar] = None) -> None:
    """Toggle between light and dark themes."""
    app = QApplication.instance()
    if app is None:
        return
    is_dark = "141414" in app.styleSheet()
    apply_theme(app, dark=not is_dark)
    if status_bar is not None:
        status_bar.showMessage("Light theme" if is_dark else "Dark theme")
