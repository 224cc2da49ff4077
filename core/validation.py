# =============================================================================
# core/validation.py - Form Validation
# =============================================================================
# Field-level validation for contract forms, the login form and AI assist
# requests. Messages are user-facing and keyed by the camelCase field names
# the web client uses, so the form can show each error next to its input.
#
# Usage:
#   from core.validation import validate_contract_data
#   result = validate_contract_data({"client_name": "", "amount": 0})
#   result.errors  # {"clientName": "Client name is required", "amount": "..."}
# =============================================================================

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from core.models.ai import AIContentRequest
from core.models.user import VendorType
from lib.formatting import parse_event_date
from lib.html_text import has_visible_text

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELD = "This field is required"
INVALID_EMAIL = "Please enter a valid email address"
INVALID_DATE = "Please enter a valid date"
INVALID_AMOUNT = "Please enter a valid amount"

VENDOR_TYPES = [v.value for v in VendorType]

# snake_case attribute -> camelCase form field
FIELD_NAMES = {
    "client_name": "clientName",
    "event_date": "eventDate",
    "event_venue": "eventVenue",
    "service_package": "servicePackage",
    "amount": "amount",
    "content": "content",
}


@dataclass
class ValidationResult:
    """Outcome of validating a single value."""
    is_valid: bool
    error: str | None = None


@dataclass
class ContractValidationResult:
    """Outcome of validating a contract form."""
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


_OK = ValidationResult(is_valid=True)


# =============================================================================
# Single-Value Validators
# =============================================================================

def validate_required(value: str | None, field_name: str | None = None) -> ValidationResult:
    """Value must contain non-whitespace text."""
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error=f"{field_name} is required" if field_name else REQUIRED_FIELD,
        )
    return _OK


def validate_email(email: str | None) -> ValidationResult:
    if email is None or not email.strip():
        return ValidationResult(is_valid=False, error=REQUIRED_FIELD)
    if not EMAIL_RE.match(email.strip()):
        return ValidationResult(is_valid=False, error=INVALID_EMAIL)
    return _OK


def validate_password(password: str | None) -> ValidationResult:
    if not password:
        return ValidationResult(is_valid=False, error=REQUIRED_FIELD)
    return _OK


def validate_event_date(value: str | None, today: date | None = None) -> ValidationResult:
    """
    Event date must parse and must not be in the past (today is allowed).

    Args:
        value: ISO date string
        today: Reference date (defaults to the server's local date)
    """
    if value is None or not str(value).strip():
        return ValidationResult(is_valid=False, error=REQUIRED_FIELD)

    try:
        event_date = parse_event_date(str(value))
    except ValueError:
        return ValidationResult(is_valid=False, error=INVALID_DATE)

    if event_date < (today or date.today()):
        return ValidationResult(is_valid=False, error="Event date cannot be in the past")
    return _OK


def parse_amount(value: Any) -> float | None:
    """
    Coerce a form amount (number or numeric string) to float.

    Returns None when the value is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


def validate_amount(value: Any) -> ValidationResult:
    amount = parse_amount(value)
    if amount is None or amount < 0:
        return ValidationResult(is_valid=False, error=INVALID_AMOUNT)
    if amount == 0:
        return ValidationResult(is_valid=False, error="Amount must be greater than 0")
    return _OK


def validate_content(value: str | None) -> ValidationResult:
    """Rich text content must render some visible text."""
    if value is None or not has_visible_text(value):
        return ValidationResult(is_valid=False, error="Contract content is required")
    return _OK


# =============================================================================
# Form Validators
# =============================================================================

def validate_contract_data(
    data: dict[str, Any],
    today: date | None = None,
) -> ContractValidationResult:
    """
    Validate the contract fields present in data.

    Missing keys are skipped, which makes this usable for both create
    (all keys supplied) and partial update (only changed keys).

    Args:
        data: snake_case field -> value
        today: Reference date for the past-date check

    Returns:
        ContractValidationResult with camelCase field errors
    """
    checks = {
        "client_name": lambda v: validate_required(v, "Client name"),
        "event_date": lambda v: validate_event_date(v, today=today),
        "event_venue": lambda v: validate_required(v, "Event venue"),
        "service_package": lambda v: validate_required(v, "Service package"),
        "amount": validate_amount,
        "content": validate_content,
    }

    result = ContractValidationResult()
    for name, check in checks.items():
        if name not in data:
            continue
        outcome = check(data[name])
        if not outcome.is_valid:
            result.errors[FIELD_NAMES[name]] = outcome.error
    return result


def validate_new_contract(data: dict[str, Any], today: date | None = None) -> ContractValidationResult:
    """Validate a full contract form: every field is treated as supplied."""
    complete = {name: data.get(name) for name in FIELD_NAMES}
    return validate_contract_data(complete, today=today)


def validate_login_form(email: str | None, password: str | None) -> dict[str, str]:
    """
    Returns:
        field -> error message; empty when the form is valid
    """
    errors = {}
    email_result = validate_email(email)
    if not email_result.is_valid:
        errors["email"] = email_result.error
    password_result = validate_password(password)
    if not password_result.is_valid:
        errors["password"] = password_result.error
    return errors


def validate_ai_request(request: AIContentRequest) -> list[str]:
    """
    List every problem with an AI assist request.

    Returns:
        Error messages in form order; empty when the request is usable
    """
    errors = []

    if not (request.vendor_type or "").strip():
        errors.append("Vendor type is required")
    elif request.vendor_type not in VENDOR_TYPES:
        errors.append(f"Vendor type must be one of: {', '.join(VENDOR_TYPES)}")
    if not (request.client_name or "").strip():
        errors.append("Client name is required")
    if not (request.event_date or "").strip():
        errors.append("Event date is required")
    else:
        try:
            parse_event_date(request.event_date)
        except ValueError:
            errors.append("Event date must be a valid date")
    if not (request.event_venue or "").strip():
        errors.append("Event venue is required")
    if not (request.service_package or "").strip():
        errors.append("Service package is required")
    amount = parse_amount(request.amount)
    if amount is None or amount <= 0:
        errors.append("Valid amount is required")
    if not (request.vendor_name or "").strip():
        errors.append("Vendor name is required")

    return errors
