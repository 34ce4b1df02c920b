import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtWidgets import QDialog

from ui.user_edit_dialog import UserEditDialog

USER = {
    "id": 1,
    "full_name": "An",
    "email": "an@x.vn",
    "phone": "0912345678",
    "role": "staff",
}


def test_fields_are_prefilled_and_role_only_for_admins(qapp):
    dialog = UserEditDialog(USER, "admin")
    assert dialog.full_name_edit.text() == "An"
    assert dialog.role_combo.currentData() == "staff"
    assert UserEditDialog(USER, "staff").role_combo is None


def test_valid_form_is_accepted_without_blank_password(qapp):
    dialog = UserEditDialog(USER, "staff")
    dialog.full_name_edit.setText("  An Nguyen ")
    dialog.submit()
    assert dialog.result() == QDialog.DialogCode.Accepted
    assert dialog.changes == {
        "full_name": "An Nguyen",
        "email": "an@x.vn",
        "phone": "0912345678",
    }


def test_invalid_phone_keeps_dialog_open(qapp):
    dialog = UserEditDialog(USER, "admin")
    dialog.phone_edit.setText("12345")
    dialog.submit()
    assert dialog.changes is None
    assert not dialog.error_label.isHidden()
    assert dialog.error_label.text() == "Invalid phone number"


def test_short_password_is_rejected(qapp):
    dialog = UserEditDialog(USER, "admin")
    dialog.password_edit.setText("abc")
    dialog.submit()
    assert dialog.changes is None
    assert "at least 6" in dialog.error_label.text()

    dialog.password_edit.setText("abcdef")
    dialog.role_combo.setCurrentIndex(dialog.role_combo.findData("admin"))
    dialog.submit()
    assert dialog.changes["password"] == "abcdef"
    assert dialog.changes["role"] == "admin"
