"""Dialog for editing an account's profile fields."""

from __future__ import annotations

from typing import Any, Dict, Optional

from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QWidget,
)

from utils.exceptions import ValidationError
from utils.validation import (
    validate_email,
    validate_full_name,
    validate_password,
    validate_phone,
)

ROLES = ("customer", "staff", "admin")


class UserEditDialog(QDialog):
    """Edit name, email, phone and optionally password and role.

    The role selector is only shown to admins. An empty password field keeps
    the current password.
    """

    def __init__(
        self,
        user: Dict[str, Any],
        viewer_role: str,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.user = user
        self.setWindowTitle("Update account")
        self._changes: Optional[Dict[str, Any]] = None

        self.full_name_edit = QLineEdit(str(user.get("full_name") or ""))
        self.email_edit = QLineEdit(str(user.get("email") or ""))
        self.phone_edit = QLineEdit(str(user.get("phone") or ""))
        self.password_edit = QLineEdit()
        self.password_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.password_edit.setPlaceholderText("Leave blank to keep the current password")

        self.role_combo: Optional[QComboBox] = None
        if viewer_role == "admin":
            self.role_combo = QComboBox()
            for role in ROLES:
                self.role_combo.addItem(role.capitalize(), role)
            index = self.role_combo.findData(user.get("role") or "customer")
            self.role_combo.setCurrentIndex(max(index, 0))

        self.error_label = QLabel()
        self.error_label.setObjectName("FormError")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.submit)
        buttons.rejected.connect(self.reject)

        layout = QFormLayout(self)
        layout.addRow("Full name", self.full_name_edit)
        layout.addRow("Email", self.email_edit)
        layout.addRow("Phone", self.phone_edit)
        layout.addRow("New password", self.password_edit)
        if self.role_combo is not None:
            layout.addRow("Role", self.role_combo)
        layout.addRow(self.error_label)
        layout.addRow(buttons)

    def collect(self) -> Dict[str, Any]:
        """Return the validated changes; raises :class:`ValidationError`."""

        changes: Dict[str, Any] = {
            "full_name": validate_full_name(self.full_name_edit.text()),
            "email": validate_email(self.email_edit.text()),
            "phone": validate_phone(self.phone_edit.text()),
        }
        password = self.password_edit.text()
        if password.strip():
            changes["password"] = validate_password(password)
        if self.role_combo is not None:
            changes["role"] = self.role_combo.currentData()
        return changes

    def submit(self) -> None:
        try:
            self._changes = self.collect()
        except ValidationError as exc:
            self.error_label.setText(exc.message)
            self.error_label.setVisible(True)
            return
        self.error_label.setVisible(False)
        self.accept()

    @property
    def changes(self) -> Optional[Dict[str, Any]]:
        return self._changes


def edit_user(
    user: Dict[str, Any], viewer_role: str, parent: Optional[QWidget] = None
) -> Optional[Dict[str, Any]]:
    """Run the dialog modally; return the changes or ``None`` if cancelled."""

    dialog = UserEditDialog(user, viewer_role, parent)
    if dialog.exec() != QDialog.DialogCode.Accepted:
        return None
    return dialog.changes


__all__ = ["UserEditDialog", "edit_user"]
