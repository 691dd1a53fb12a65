"""Errors raised by the credential service."""

FieldErrors = dict[str, list[str]]

INVALID_CREDENTIALS = "Invalid email or password"
INCORRECT_CURRENT_PASSWORD = "Current password is incorrect"  # noqa: S105
UNAUTHENTICATED = "Unauthenticated."


class CredentialError(Exception):
    """Base class for failures that end a credential operation."""

    status_code = 400


class ValidationError(CredentialError):
    """Malformed or missing input, reported per field."""

    status_code = 422

    def __init__(self, errors: FieldErrors):
        super().__init__(errors)
        self.errors = errors


class ConflictError(ValidationError):
    """A uniqueness constraint (email) was violated."""


class AuthenticationError(CredentialError):
    """Bad credentials, an unusable token, or a wrong current password."""

    status_code = 401

    def __init__(self, message: str = UNAUTHENTICATED):
        super().__init__(message)
        self.message = message
