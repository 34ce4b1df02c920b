import pytest

from utils.exceptions import ValidationError
from utils.validation import (
    validate_email,
    validate_full_name,
    validate_password,
    validate_phone,
)


def test_full_name_required():
    assert validate_full_name("  Nguyen Van A ") == "Nguyen Van A"
    with pytest.raises(ValidationError) as excinfo:
        validate_full_name("   ")
    assert excinfo.value.field == "full_name"


@pytest.mark.parametrize("value", ["a@b.co", "first.last@example.com"])
def test_email_accepts_addresses(value):
    assert validate_email(value) == value


@pytest.mark.parametrize("value", ["", None, "no-at-sign", "a@b", "a b@c.d"])
def test_email_rejects_invalid(value):
    with pytest.raises(ValidationError):
        validate_email(value)


@pytest.mark.parametrize("value", ["0912345678", "+84912345678", "09123456789"])
def test_phone_accepts_vietnamese_numbers(value):
    assert validate_phone(value) == value


@pytest.mark.parametrize("value", ["912345678", "091234567", "+8491234567890", "09abc45678"])
def test_phone_rejects_invalid(value):
    with pytest.raises(ValidationError, match="Invalid phone number"):
        validate_phone(value)


def test_phone_required_message():
    with pytest.raises(ValidationError, match="Please enter a phone number"):
        validate_phone("")


def test_password_length():
    assert validate_password("secret") == "secret"
    with pytest.raises(ValidationError, match="at least 6"):
        validate_password("12345")
    with pytest.raises(ValidationError, match="Please enter a password"):
        validate_password("")
