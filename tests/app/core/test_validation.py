from datetime import date
from types import SimpleNamespace

import pytest

from src.app.core.validation import (
    BLANK_ERROR,
    CUIT_ERROR,
    EMAIL_ERROR,
    GENERAL_PHONE_ERROR,
    STRICT_PHONE_ERROR,
    ClientValidator,
    PhonePolicy,
    validate_cell_phone,
    validate_cuit,
)
from src.shared.exceptions import EntityValidationFailed


def candidate(**overrides):
    fields = dict(
        first_name="Juan",
        last_name="Pérez",
        corporate_name="Pérez SRL",
        cuit="20-12345678-9",
        birthdate=date(1985, 3, 14),
        cell_phone="1123456789",
        email="juan@perez.com.ar",
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.mark.parametrize("value", ["20-12345678-9", " 27-00000000-0 "])
def test_valid_cuit(value):
    assert validate_cuit(value) == value.strip()


@pytest.mark.parametrize(
    "value",
    ["2012345678-9", "20-1234567-9", "20-12345678-99", "AB-12345678-9", "٢٠-12345678-9", ""],
)
def test_invalid_cuit(value):
    with pytest.raises(ValueError, match="Invalid CUIT"):
        validate_cuit(value)


def test_strict_phone_requires_exactly_ten_digits():
    assert validate_cell_phone("1123456789") == "1123456789"
    for value in ["112345678", "11234567890", "11-2345-6789", "+541123456789"]:
        with pytest.raises(ValueError, match="10 consecutive numbers"):
            validate_cell_phone(value, PhonePolicy.STRICT)


@pytest.mark.parametrize("value", ["+54 11 2345-6789", "(011) 4567.8901", "1123456789", "4567890"])
def test_general_phone_accepts_common_formats(value):
    assert validate_cell_phone(value, PhonePolicy.GENERAL) == value


@pytest.mark.parametrize("value", ["123456", "1234567890123456", "11 2345 abcd", "54+1123456789"])
def test_general_phone_rejects_malformed_numbers(value):
    with pytest.raises(ValueError, match="Invalid phone number"):
        validate_cell_phone(value, PhonePolicy.GENERAL)


def test_validator_accepts_valid_candidate():
    assert ClientValidator().validate(candidate()) == []


def test_validator_reports_every_failing_field():
    # Arrange
    bad = candidate(first_name="  ", cuit="123", cell_phone="12-34", email="not-an-email")

    # Act
    errors = ClientValidator(PhonePolicy.STRICT).validate(bad)

    # Assert
    assert {(e.field, e.message) for e in errors} == {
        ("firstName", BLANK_ERROR),
        ("cuit", CUIT_ERROR),
        ("cellPhone", STRICT_PHONE_ERROR),
        ("email", EMAIL_ERROR),
    }


def test_validator_does_not_pattern_check_blank_fields():
    errors = ClientValidator().validate(candidate(cuit=""))

    assert [(e.field, e.message) for e in errors] == [("cuit", BLANK_ERROR)]


def test_validator_uses_configured_phone_policy():
    formatted = candidate(cell_phone="+54 11 2345-6789")

    assert ClientValidator(PhonePolicy.GENERAL).validate(formatted) == []
    assert [e.field for e in ClientValidator("strict").validate(formatted)] == ["cellPhone"]


def test_general_policy_message():
    errors = ClientValidator(PhonePolicy.GENERAL).validate(candidate(cell_phone="12"))

    assert [e.message for e in errors] == [GENERAL_PHONE_ERROR]


def test_ensure_valid_groups_messages_by_field():
    with pytest.raises(EntityValidationFailed) as exc_info:
        ClientValidator().ensure_valid(candidate(cuit="x", email="nope"))

    assert exc_info.value.errors == {"cuit": [CUIT_ERROR], "email": [EMAIL_ERROR]}
