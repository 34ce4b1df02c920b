"""Input rules used by the account edit form."""

from __future__ import annotations

import re
from typing import Optional

from utils.exceptions import ValidationError

PHONE_RE = re.compile(r"^(0|\+84)[0-9]{9,10}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def _require(value: Optional[str], message: str, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(message, field=field)
    return text


def validate_full_name(value: Optional[str]) -> str:
    return _require(value, "Please enter a full name", "full_name")


def validate_email(value: Optional[str]) -> str:
    text = _require(value, "Invalid email address", "email")
    if not EMAIL_RE.match(text):
        raise ValidationError("Invalid email address", field="email")
    return text


def validate_phone(value: Optional[str]) -> str:
    """Accept Vietnamese numbers starting with ``0`` or ``+84``."""

    text = _require(value, "Please enter a phone number", "phone")
    if not PHONE_RE.match(text):
        raise ValidationError("Invalid phone number", field="phone")
    return text


def validate_password(value: Optional[str]) -> str:
    # Passwords are checked as typed; surrounding whitespace is significant.
    if not value:
        raise ValidationError("Please enter a password", field="password")
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            field="password",
        )
    return value


__all__ = [
    "validate_email",
    "validate_full_name",
    "validate_password",
    "validate_phone",
]
