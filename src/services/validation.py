"""Field validation for credential operations.

Each ``validate_*`` function returns a mapping of field name to error
messages. An empty mapping means the input is acceptable.
"""

from collections.abc import Callable, Mapping
from typing import Any

from email_validator import EmailNotValidError, validate_email

from src.services.errors import FieldErrors

# A rule receives (field, value, data) and returns an error message or None
Rule = Callable[[str, Any, Mapping[str, Any]], str | None]


def attribute_name(field: str) -> str:
    """Human-readable name of a field, as used in messages."""
    return field.replace("_", " ")


def required_message(field: str) -> str:
    return f"The {attribute_name(field)} field is required."


def string_message(field: str) -> str:
    return f"The {attribute_name(field)} must be a string."


def unique_message(field: str) -> str:
    return f"The {attribute_name(field)} has already been taken."


def is_missing(value: Any) -> bool:
    """Check if a value counts as absent for the required rule."""
    return value is None or (isinstance(value, str) and not value.strip())


def max_length(limit: int) -> Rule:
    def rule(field: str, value: Any, data: Mapping[str, Any]) -> str | None:
        if len(value) > limit:
            return f"The {attribute_name(field)} must not be greater than {limit} characters."
        return None

    return rule


def min_length(limit: int) -> Rule:
    def rule(field: str, value: Any, data: Mapping[str, Any]) -> str | None:
        if len(value) < limit:
            return f"The {attribute_name(field)} must be at least {limit} characters."
        return None

    return rule


def plain_text(field: str, value: Any, data: Mapping[str, Any]) -> str | None:
    """Reject text that cannot be stored or hashed: NUL bytes and lone surrogates."""
    if "\x00" in value:
        return f"The {attribute_name(field)} contains invalid characters."
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return f"The {attribute_name(field)} contains invalid characters."
    return None


def email(field: str, value: Any, data: Mapping[str, Any]) -> str | None:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return f"The {attribute_name(field)} must be a valid email address."
    return None


def confirmed(field: str, value: Any, data: Mapping[str, Any]) -> str | None:
    if data.get(f"{field}_confirmation") != value:
        return f"The {attribute_name(field)} confirmation does not match."
    return None


def check(data: Mapping[str, Any], rules: Mapping[str, list[Rule]]) -> FieldErrors:
    """Apply string fields' rules to ``data``.

    Every field listed in ``rules`` is required and must be a string. A field
    that fails either check gets only that message; otherwise all of its
    rules run and every failure is reported, except that nothing runs after
    a failed ``plain_text``.
    """
    errors: FieldErrors = {}
    for field, field_rules in rules.items():
        value = data.get(field)
        if is_missing(value):
            errors[field] = [required_message(field)]
            continue
        if not isinstance(value, str):
            errors[field] = [string_message(field)]
            continue

        messages = []
        for rule in field_rules:
            message = rule(field, value, data)
            if message:
                messages.append(message)
                # Later rules assume well-formed text
                if rule is plain_text:
                    break
        if messages:
            errors[field] = messages
    return errors


def validate_registration(data: Mapping[str, Any], password_min_length: int = 6) -> FieldErrors:
    """Validate name, email, password and password_confirmation."""
    return check(
        data,
        {
            "name": [plain_text, max_length(255)],
            "email": [plain_text, email, max_length(255)],
            "password": [plain_text, min_length(password_min_length), confirmed],
        },
    )


def validate_login(data: Mapping[str, Any]) -> FieldErrors:
    """Validate email and password."""
    return check(data, {"email": [plain_text, email], "password": []})


def validate_password_update(
    data: Mapping[str, Any], password_min_length: int = 6
) -> FieldErrors:
    """Validate current_password, new_password and new_password_confirmation."""
    return check(
        data,
        {
            "current_password": [],
            "new_password": [plain_text, min_length(password_min_length), confirmed],
        },
    )
