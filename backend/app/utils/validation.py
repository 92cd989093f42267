"""
Validation utilities for input validation and error handling.
"""
import re
from typing import Any
from fastapi import HTTPException

from ..schemas.candidate import INTEGER_MAX, INTEGER_MIN, CandidateCreate
from .error_handlers import ValidationError

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

MIN_CANDIDATE_AGE = 18
DEFAULT_STATUS = "Applied"


def validate_email(email: str) -> str:
    """Validate email format."""
    if not email or not isinstance(email, str):
        raise HTTPException(status_code=400, detail="Email is required")

    email = email.strip().lower()
    if len(email) > 255:
        raise HTTPException(status_code=400, detail="Email too long (max 255 characters)")

    if not re.match(EMAIL_PATTERN, email):
        raise HTTPException(status_code=400, detail="Invalid email format")

    return email


def validate_string_field(
    value: Any,
    field_name: str,
    min_length: int = 1,
    required: bool = True,
) -> str | None:
    """Validate a string field with common rules."""
    if value is None:
        if required:
            raise HTTPException(status_code=400, detail=f"{field_name} is required")
        return None

    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{field_name} must be a string")

    value = value.strip()

    if required and not value:
        raise HTTPException(status_code=400, detail=f"{field_name} cannot be empty")

    if len(value) < min_length:
        raise HTTPException(
            status_code=400,
            detail=f"{field_name} must be at least {min_length} characters"
        )

    return value


def validate_integer_field(
    value: Any,
    field_name: str,
    min_value: int | None = None,
    max_value: int | None = None,
    required: bool = True,
) -> int | None:
    """Validate an integer field.

    Only JSON numbers are accepted (no numeric strings, no booleans); whole
    floats such as ``30.0`` are narrowed to ``int``.
    """
    if value is None:
        if required:
            raise HTTPException(status_code=400, detail=f"{field_name} is required")
        return None

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise HTTPException(status_code=400, detail=f"{field_name} must be a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise HTTPException(status_code=400, detail=f"{field_name} must be a whole number")
        value = int(value)

    if min_value is not None and value < min_value:
        raise HTTPException(
            status_code=400,
            detail=f"{field_name} must be at least {min_value}"
        )

    if max_value is not None and value > max_value:
        raise HTTPException(
            status_code=400,
            detail=f"{field_name} must not exceed {max_value}"
        )

    return value


def validate_candidate_payload(payload: Any) -> CandidateCreate:
    """
    Validate a raw candidate-creation body and apply defaults.

    Every rule is checked; on failure a ValidationError listing all
    ``(field, message)`` pairs is raised. Unknown keys are ignored.
    """
    if not isinstance(payload, dict):
        raise ValidationError([("body", "Request body must be a JSON object")])

    errors: list[tuple[str, str]] = []
    cleaned: dict[str, Any] = {}

    rules = {
        "name": lambda v: validate_string_field(v, "Name", min_length=2),
        "age": lambda v: validate_integer_field(
            v, "Age", min_value=MIN_CANDIDATE_AGE, max_value=INTEGER_MAX
        ),
        "email": validate_email,
        "phone": lambda v: validate_string_field(v, "Phone", min_length=0, required=False) or "",
        "skills": lambda v: validate_string_field(v, "Skills", min_length=0, required=False) or "",
        "experience": lambda v: validate_integer_field(
            v, "Experience", min_value=INTEGER_MIN, max_value=INTEGER_MAX, required=False
        ) or 0,
        "appliedPosition": lambda v: validate_string_field(v, "Applied position"),
        "status": lambda v: validate_string_field(
            v, "Status", min_length=0, required=False
        ) or DEFAULT_STATUS,
    }

    for field, rule in rules.items():
        try:
            cleaned[field] = rule(payload.get(field))
        except HTTPException as e:
            errors.append((field, str(e.detail)))

    if errors:
        raise ValidationError(errors)

    return CandidateCreate(
        name=cleaned["name"],
        age=cleaned["age"],
        email=cleaned["email"],
        phone=cleaned["phone"],
        skills=cleaned["skills"],
        experience=cleaned["experience"],
        applied_position=cleaned["appliedPosition"],
        status=cleaned["status"],
    )
