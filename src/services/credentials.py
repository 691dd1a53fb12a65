"""Credential service: registration, login, logout and password rotation."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.services.errors import (
    INCORRECT_CURRENT_PASSWORD,
    INVALID_CREDENTIALS,
    AuthenticationError,
    ConflictError,
    ValidationError,
)
from src.services.passwords import PasswordHasher
from src.services.tokens import RequestIdentity, TokenIssuer
from src.services.validation import (
    unique_message,
    validate_login,
    validate_password_update,
    validate_registration,
)

logger = logging.getLogger(__name__)


class CredentialService:
    """Service for the user credential lifecycle.

    The database session, password hasher and token issuer are passed in;
    authenticated operations receive the caller's identity explicitly.
    """

    def __init__(
        self,
        db: Session,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        password_min_length: int = 6,
    ):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens
        self.password_min_length = password_min_length

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case."""
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        password_confirmation: str | None,
    ) -> tuple[User, str]:
        """Create a user and issue its first token.

        Raises:
            ConflictError: the email is taken and nothing else is wrong.
            ValidationError: any other input problem.
        """
        errors = validate_registration(
            {
                "name": name,
                "email": email,
                "password": password,
                "password_confirmation": password_confirmation,
            },
            self.password_min_length,
        )
        if "email" not in errors and self.get_user_by_email(email) is not None:
            errors["email"] = [unique_message("email")]
            if len(errors) == 1:
                raise ConflictError(errors)
        if errors:
            raise ValidationError(errors)

        user = User(name=name, email=email, password_hash=self.hasher.hash(password))
        self.db.add(user)
        try:
            self.db.flush()
            token = self.tokens.issue(user)
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            logger.info("Registration rejected by unique constraint on email")
            raise ConflictError({"email": [unique_message("email")]}) from None

        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user, token

    def login(self, email: str | None, password: str | None) -> tuple[User, str]:
        """Check credentials and issue a new token.

        Unknown email and wrong password fail identically.
        """
        errors = validate_login({"email": email, "password": password})
        if errors:
            raise ValidationError(errors)

        user = self.get_user_by_email(email)
        if user is None:
            self.hasher.dummy_verify()
            logger.warning("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Failed login attempt for user {user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.tokens.issue(user)
        self.db.commit()
        logger.info(f"User {user.id} logged in")
        return user, token

    def logout(self, identity: RequestIdentity) -> None:
        """Revoke the token the caller authenticated with, and only that one."""
        if not self.tokens.revoke(identity.token):
            raise AuthenticationError()
        self.db.commit()
        logger.info(f"User {identity.user.id} logged out")

    def update_password(
        self,
        identity: RequestIdentity,
        current_password: str | None,
        new_password: str | None,
        new_password_confirmation: str | None,
    ) -> None:
        """Replace the caller's password after checking the current one.

        Other tokens of the user stay valid.
        """
        errors = validate_password_update(
            {
                "current_password": current_password,
                "new_password": new_password,
                "new_password_confirmation": new_password_confirmation,
            },
            self.password_min_length,
        )
        if errors:
            raise ValidationError(errors)

        user = identity.user
        if not self.hasher.verify(current_password, user.password_hash):
            logger.warning(f"Incorrect current password for user {user.id}")
            raise AuthenticationError(INCORRECT_CURRENT_PASSWORD)

        user.password_hash = self.hasher.hash(new_password)
        self.db.commit()
        logger.info(f"Password updated for user {user.id}")
