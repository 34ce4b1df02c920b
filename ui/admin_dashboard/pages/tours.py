"""Tour catalogue list."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from PyQt6.QtWidgets import QLabel, QWidget

from services.tours import delete_tour, fetch_tours, toggle_tour, tour_image_url
from ui.components import status_label
from ui.custom_button import CustomButton
from ui.table_generic import TableGeneric
from ui.table_model import Column, TableAction
from utils.exceptions import ApiError
from utils.format import format_currency_vnd

from .base import ConfirmFn, DashboardPage, confirm_dialog

log = logging.getLogger(__name__)

Tour = Dict[str, Any]

TOGGLE = "toggle-status"
FORCE_DELETE = "force-delete"


def _money(value: Any) -> str:
    return format_currency_vnd(None if value == "" else value)


def _image_link(url: Optional[str]) -> QWidget:
    if url is None:
        return QLabel("No image")
    label = QLabel(f'<a href="{url}">Open image</a>')
    label.setOpenExternalLinks(True)
    return label


class ToursPage(DashboardPage):
    """Tours with prices in dong and admin/staff moderation actions."""

    def __init__(
        self,
        title: str,
        parent: Optional[QWidget] = None,
        *,
        confirm: Optional[ConfirmFn] = None,
    ) -> None:
        super().__init__(title, parent)
        self.tours: List[Tour] = []
        self.confirm: ConfirmFn = confirm or confirm_dialog(self)
        self.table = TableGeneric(
            row_key="tour_id",
            context_holder=self.notifier.context_holder,
        )
        self.card.layout().addWidget(self.table)

    @property
    def viewer_role(self) -> str:
        return self.context.role

    def columns(self) -> List[Column]:
        backend_url = self.context.settings.backend_url
        columns = [
            Column("tour_id", "ID", data_index="tour_id"),
            Column("tour_name", "Tour", data_index="tour_name"),
            Column(
                "image",
                "Image",
                data_index="image",
                render=lambda value, _tour: _image_link(
                    tour_image_url(backend_url, value)
                ),
            ),
            Column(
                "category",
                "Category",
                data_index="category",
                render=lambda value, _tour: (value or {}).get("category_name", ""),
            ),
            Column(
                "price",
                "Price",
                data_index="price",
                render=lambda value, _tour: _money(value),
            ),
            Column(
                "discount_price",
                "Discount price",
                data_index="discount_price",
                render=lambda value, _tour: _money(value),
            ),
        ]
        if self.viewer_role == "admin":
            columns.append(
                Column(
                    "is_deleted",
                    "Status",
                    data_index="is_deleted",
                    render=lambda value, _tour: status_label(
                        value == "active", "Active", "Inactive"
                    ),
                )
            )
        return columns

    def get_actions(self, tour: Tour) -> List[TableAction]:
        tour_id = tour["tour_id"]
        active = tour.get("is_deleted") == "active"
        if self.viewer_role == "admin":
            return [
                TableAction(
                    TOGGLE,
                    "Disable" if active else "Enable",
                    on_click=lambda: self.handle_action(tour_id, TOGGLE, active),
                ),
                TableAction(
                    "delete",
                    "Delete permanently",
                    on_click=lambda: self.handle_action(tour_id, FORCE_DELETE, active),
                    danger=True,
                ),
            ]
        return [
            TableAction(
                "delete",
                "Delete",
                on_click=lambda: self.handle_action(tour_id, TOGGLE, active),
                danger=True,
                disabled=not active,
            )
        ]

    def refresh(self) -> None:
        self.table.configure(self.tours, self.columns(), self.get_actions)
        self.table.set_loading(True)
        api, viewer = self.context.api, self.viewer_role
        self.run_in_background(lambda: fetch_tours(api, viewer), self._on_tours_loaded)

    def _on_tours_loaded(self, tours: Optional[List[Tour]], error: Optional[ApiError]) -> None:
        self.table.set_loading(False)
        if error is not None:
            log.warning("Loading tours failed: %s", error)
            self.notifier.notify_error("Failed to load the tour list")
            return
        self.tours = tours or []
        self.table.configure(self.tours, self.columns(), self.get_actions)

    def handle_action(self, tour_id: Any, action: str, active: bool) -> None:
        if action == FORCE_DELETE:
            prompt = (
                "Confirm permanent deletion",
                "Delete this tour permanently? This cannot be undone.",
                CustomButton("Delete", custom_type="forceDelete"),
            )
            message = "Tour permanently deleted"
        elif self.viewer_role != "admin":
            prompt = (
                "Confirm tour deletion",
                "Are you sure you want to delete this tour?",
                CustomButton("Delete", custom_type="delete"),
            )
            message = "Tour deleted"
        elif active:
            prompt = (
                "Confirm tour deactivation",
                "Are you sure you want to disable this tour?",
                CustomButton("Disable", custom_type="disable"),
            )
            message = "Tour disabled"
        else:
            prompt = (
                "Confirm tour activation",
                "Are you sure you want to enable this tour again?",
                CustomButton("Enable", custom_type="enable"),
            )
            message = "Tour enabled"
        if not self.confirm(*prompt):
            return

        api = self.context.api
        if action == FORCE_DELETE:
            work = lambda: delete_tour(api, tour_id)
        else:
            work = lambda: toggle_tour(api, tour_id)
        self.table.set_loading(True)
        self.run_in_background(
            work, lambda _result, error: self._on_action_done(tour_id, message, error)
        )

    def _on_action_done(self, tour_id: Any, message: str, error: Optional[ApiError]) -> None:
        self.table.set_loading(False)
        if error is not None:
            log.warning("Action on tour %s failed: %s", tour_id, error)
            self.notifier.notify_error("Action failed")
            return
        self.notifier.notify_success(message)
        self.refresh()


__all__ = ["ToursPage"]
