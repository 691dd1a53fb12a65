"""Password hashing."""

from typing import Protocol

from passlib.context import CryptContext

from src.config import get_settings

settings = get_settings()


class PasswordHasher(Protocol):
    """Capability for one-way password hashing."""

    def hash(self, plain_password: str) -> str: ...

    def verify(self, plain_password: str, hashed_password: str) -> bool: ...

    def dummy_verify(self) -> bool: ...


class BcryptPasswordHasher:
    """bcrypt hashing through a passlib context."""

    def __init__(self, rounds: int = 12):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, plain_password: str) -> str:
        """Hash a password."""
        return self.context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash.

        Passwords bcrypt cannot take (NUL bytes, unencodable text) never match.
        """
        try:
            return self.context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    def dummy_verify(self) -> bool:
        """Spend the time of a real verification when there is nothing to verify."""
        return self.context.dummy_verify()


password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
