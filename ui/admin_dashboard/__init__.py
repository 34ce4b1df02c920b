"""Admin console window and its pages."""

from .main_window import MainWindow, default_registry

__all__ = ["MainWindow", "default_registry"]
