import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication for widget tests (offscreen platform)."""
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep developer environment variables out of the settings tests."""
    for name in (
        "ADMIN_API_URL",
        "ADMIN_BACKEND_URL",
        "ADMIN_ACCESS_TOKEN",
        "ADMIN_ROLE",
        "ADMIN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
