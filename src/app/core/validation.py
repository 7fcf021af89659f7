"""
Field-format rules for client records.

The rule functions raise ValueError so they can back pydantic field
validators directly. ClientValidator applies the same rules, with the
configured phone policy, and collects every failure instead of stopping at
the first one.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from email_validator import EmailNotValidError, validate_email

from src.shared.exceptions import EntityValidationFailed

CUIT_PATTERN = re.compile(r"^\d{2}-\d{8}-\d$", re.ASCII)
STRICT_PHONE_PATTERN = re.compile(r"^\d{10}$", re.ASCII)
GENERAL_PHONE_PATTERN = re.compile(r"^\+?[\d\s().-]+$", re.ASCII)
GENERAL_PHONE_MIN_DIGITS = 7
GENERAL_PHONE_MAX_DIGITS = 15

BLANK_ERROR = "Field cannot be blank or only whitespace"
CUIT_ERROR = "Invalid CUIT. Must be XX-XXXXXXXX-X"
STRICT_PHONE_ERROR = "Invalid phone number. Must be 10 consecutive numbers only."
GENERAL_PHONE_ERROR = "Invalid phone number."
EMAIL_ERROR = "Invalid email address."


class PhonePolicy(str, Enum):
    """Which cell phone format is accepted."""
    STRICT = "strict"
    GENERAL = "general"


def require_text(value: str) -> str:
    """Return the trimmed value, rejecting blank or whitespace-only text."""
    if not value or not value.strip():
        raise ValueError(BLANK_ERROR)
    return value.strip()


def validate_cuit(value: str) -> str:
    value = value.strip()
    if not CUIT_PATTERN.fullmatch(value):
        raise ValueError(CUIT_ERROR)
    return value


def validate_cell_phone(value: str, policy: PhonePolicy = PhonePolicy.STRICT) -> str:
    value = value.strip()
    if policy is PhonePolicy.STRICT:
        if not STRICT_PHONE_PATTERN.fullmatch(value):
            raise ValueError(STRICT_PHONE_ERROR)
        return value

    digits = sum(c.isdigit() for c in value)
    if (
        not GENERAL_PHONE_PATTERN.fullmatch(value)
        or not GENERAL_PHONE_MIN_DIGITS <= digits <= GENERAL_PHONE_MAX_DIGITS
    ):
        raise ValueError(GENERAL_PHONE_ERROR)
    return value


def validate_email_syntax(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(EMAIL_ERROR) from e
    return value


class ClientCandidate(Protocol):
    first_name: str
    last_name: str
    corporate_name: str
    cuit: str
    cell_phone: str
    email: str


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


# (attribute, API field name)
_TEXT_FIELDS = (
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("corporate_name", "corporateName"),
    ("cuit", "cuit"),
    ("cell_phone", "cellPhone"),
    ("email", "email"),
)


class ClientValidator:
    """Checks a candidate client against every format rule. Never touches storage."""

    def __init__(self, phone_policy: PhonePolicy = PhonePolicy.STRICT):
        self.phone_policy = PhonePolicy(phone_policy)

    def validate(self, candidate: ClientCandidate) -> list[FieldError]:
        errors: list[FieldError] = []
        blank: set[str] = set()

        for attribute, field in _TEXT_FIELDS:
            value = getattr(candidate, attribute, None)
            if not isinstance(value, str) or not value.strip():
                errors.append(FieldError(field, BLANK_ERROR))
                blank.add(field)

        checks = (
            ("cuit", "cuit", validate_cuit),
            ("cell_phone", "cellPhone", lambda v: validate_cell_phone(v, self.phone_policy)),
            ("email", "email", validate_email_syntax),
        )
        for attribute, field, check in checks:
            if field in blank:
                continue
            try:
                check(str(getattr(candidate, attribute)))
            except ValueError as e:
                errors.append(FieldError(field, str(e)))

        return errors

    def ensure_valid(self, candidate: ClientCandidate) -> None:
        """
        Raises:
            EntityValidationFailed: With the messages grouped by field, if any rule fails
        """
        errors = self.validate(candidate)
        if errors:
            grouped: dict[str, list[str]] = {}
            for error in errors:
                grouped.setdefault(error.field, []).append(error.message)
            raise EntityValidationFailed("Client", grouped)
