"""Customer and employee account lists."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from PyQt6.QtWidgets import QWidget

from services.users import (
    ACTIVE,
    INACTIVE,
    fetch_users,
    force_delete_user,
    is_active,
    soft_delete_user,
    update_user,
)
from ui.components import status_label
from ui.custom_button import CustomButton
from ui.table_generic import TableGeneric
from ui.table_model import Column, TableAction
from ui.user_edit_dialog import edit_user
from utils.exceptions import ApiError

from .base import ConfirmFn, DashboardPage, confirm_dialog

log = logging.getLogger(__name__)

User = Dict[str, Any]
EditFn = Callable[[User, str], Optional[Dict[str, Any]]]

DISABLE = "disable"
ENABLE = "enable"
FORCE_DELETE = "force-delete"


class UsersPage(DashboardPage):
    """Accounts with one ``role`` shown in a :class:`TableGeneric`.

    Row actions depend on the signed-in role: admins can disable, re-enable
    and permanently delete accounts, staff can only soft-delete active ones.
    Every destructive action is confirmed before the API call, and every
    request runs in the background while the table shows its busy state.
    """

    def __init__(
        self,
        role: str,
        title: str,
        parent: Optional[QWidget] = None,
        *,
        confirm: Optional[ConfirmFn] = None,
        editor: Optional[EditFn] = None,
    ) -> None:
        super().__init__(title, parent)
        self.role = role
        self.users: List[User] = []
        self.confirm: ConfirmFn = confirm or confirm_dialog(self)
        self.editor: EditFn = editor or (
            lambda user, viewer_role: edit_user(user, viewer_role, self)
        )

        self.table = TableGeneric(
            row_key="id",
            context_holder=self.notifier.context_holder,
        )
        self.card.layout().addWidget(self.table)

    @property
    def viewer_role(self) -> str:
        return self.context.role

    # ------------------------------------------------------------------
    # Table schema
    # ------------------------------------------------------------------
    def columns(self) -> List[Column]:
        columns = [
            Column("id", "ID", data_index="id"),
            Column("full_name", "Full name", data_index="full_name"),
            Column("email", "Email", data_index="email"),
            Column("phone", "Phone", data_index="phone"),
            Column("role", "Role", data_index="role"),
            Column(
                "is_verified",
                "Verified",
                data_index="is_verified",
                render=lambda value, _user: status_label(
                    value is True, "Verified", "Unverified"
                ),
            ),
        ]
        if self.viewer_role == "admin":
            columns.append(
                Column(
                    "is_deleted",
                    "Status",
                    data_index="is_deleted",
                    render=lambda value, _user: status_label(
                        value == ACTIVE, "Active", "Inactive"
                    ),
                )
            )
        return columns

    def get_actions(self, user: User) -> List[TableAction]:
        user_id = user["id"]
        actions = [
            TableAction("edit", "Edit", on_click=lambda: self.request_edit(user)),
        ]
        if self.viewer_role == "admin":
            if is_active(user):
                actions.append(
                    TableAction(
                        DISABLE,
                        "Disable",
                        on_click=lambda: self.handle_action(user_id, DISABLE),
                    )
                )
            else:
                actions.append(
                    TableAction(
                        ENABLE,
                        "Enable",
                        on_click=lambda: self.handle_action(user_id, ENABLE),
                    )
                )
            actions.append(
                TableAction(
                    "delete",
                    "Delete permanently",
                    on_click=lambda: self.handle_action(user_id, FORCE_DELETE),
                    danger=True,
                )
            )
        elif self.viewer_role == "staff":
            actions.append(
                TableAction(
                    "delete",
                    "Delete",
                    on_click=lambda: self.handle_action(user_id, DISABLE),
                    danger=True,
                    disabled=user.get("is_deleted") == INACTIVE,
                )
            )
        return actions

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        self.table.configure(self.users, self.columns(), self.get_actions)
        self.table.set_loading(True)
        api, role, viewer = self.context.api, self.role, self.viewer_role
        self.run_in_background(
            lambda: fetch_users(api, role, viewer), self._on_users_loaded
        )

    def _on_users_loaded(self, users: Optional[List[User]], error: Optional[ApiError]) -> None:
        self.table.set_loading(False)
        if error is not None:
            # keep whatever was shown before the failed reload
            log.warning("Loading %s accounts failed: %s", self.role, error)
            self.notifier.notify_error("Failed to load the account list")
            return
        self.users = users or []
        self.table.configure(self.users, self.columns(), self.get_actions)

    def request_edit(self, user: User) -> None:
        if user.get("is_deleted") == INACTIVE:
            self.notifier.notify_error(
                "This account is disabled and cannot be edited."
            )
            return
        changes = self.editor(user, self.viewer_role)
        if not changes:
            return
        api, user_id = self.context.api, user["id"]
        self.table.set_loading(True)
        self.run_in_background(
            lambda: update_user(api, user_id, changes),
            lambda _result, error: self._on_action_done(
                user_id, "edit", "Account updated", error
            ),
        )

    def handle_action(self, user_id: Any, action: str) -> None:
        title, text, button = self._confirmation(action)
        if not self.confirm(title, text, button):
            return
        api = self.context.api
        if action == FORCE_DELETE:
            work = lambda: force_delete_user(api, user_id)
            message = "Account permanently deleted"
        else:
            work = lambda: soft_delete_user(api, user_id)
            message = "Account disabled" if action == DISABLE else "Account enabled"
        self.table.set_loading(True)
        self.run_in_background(
            work,
            lambda _result, error: self._on_action_done(
                user_id, action, message, error
            ),
        )

    def _on_action_done(
        self, user_id: Any, action: str, message: str, error: Optional[ApiError]
    ) -> None:
        self.table.set_loading(False)
        if error is not None:
            log.warning("Action %s on user %s failed: %s", action, user_id, error)
            self.notifier.notify_error("Action failed")
            return
        self.notifier.notify_success(message)
        self.context.toast("success", f"{message} (#{user_id})")
        self.refresh()

    def _confirmation(self, action: str) -> tuple[str, str, CustomButton]:
        staff = self.viewer_role == "staff"
        if action == DISABLE and staff:
            return (
                "Confirm account deletion",
                "Are you sure you want to delete this account?",
                CustomButton("Delete", custom_type="delete"),
            )
        if action == DISABLE:
            return (
                "Confirm account deactivation",
                "Are you sure you want to disable this account?",
                CustomButton("Disable", custom_type="disable"),
            )
        if action == ENABLE:
            return (
                "Confirm account activation",
                "Are you sure you want to enable this account again?",
                CustomButton("Enable", custom_type="enable"),
            )
        return (
            "Confirm permanent deletion",
            "Are you sure you want to delete this account permanently? "
            "This cannot be undone.",
            CustomButton("Delete", custom_type="forceDelete"),
        )


__all__ = ["UsersPage"]
