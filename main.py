import logging
import sys

from PyQt6.QtWidgets import QApplication

from services.api_client import ApiClient
from ui.admin_dashboard import MainWindow
from ui.dashboard_core import DashboardContext
from ui.theme import apply_theme
from utils.settings import load_settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    settings = load_settings()
    _configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    apply_theme(app)
    context = DashboardContext(api=ApiClient.from_settings(settings), settings=settings)
    window = MainWindow(context)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
