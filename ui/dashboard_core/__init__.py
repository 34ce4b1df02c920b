"""Shared dashboard infrastructure used by the console window and pages."""
from __future__ import annotations

from .context import DashboardContext, ToastFn, Worker
from .navigation import NavigationController, PageEntry, PageFactory, PageRegistry

__all__ = [
    "DashboardContext",
    "ToastFn",
    "Worker",
    "NavigationController",
    "PageEntry",
    "PageRegistry",
    "PageFactory",
]
