"""Personal access token issuing and resolution."""

import hashlib
import hmac
import secrets
import string
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from sqlalchemy.orm import Session

from src.models.access_token import AccessToken
from src.models.user import User

TOKEN_ALPHABET = string.ascii_letters + string.digits
SECRET_LENGTH = 40
# Largest id an INTEGER primary key can hold
MAX_TOKEN_ID = 2**31 - 1


@dataclass(frozen=True)
class RequestIdentity:
    """The caller resolved from a bearer token for one request."""

    user: User
    token: str


class TokenIssuer(Protocol):
    """Capability for issuing, revoking and resolving bearer tokens."""

    def issue(self, user: User) -> str: ...

    def revoke(self, plain_text_token: str) -> bool: ...

    def resolve(self, plain_text_token: str) -> User | None: ...


def hash_secret(secret: str) -> str:
    """Digest stored in place of a token secret."""
    return hashlib.sha256(secret.encode(errors="surrogatepass")).hexdigest()


class DatabaseTokenIssuer:
    """Tokens stored as hashed rows in ``personal_access_tokens``.

    Changes are flushed but never committed here; the caller owns the
    transaction so that a token can be created atomically with its user.
    """

    def __init__(self, db: Session, name: str = "authToken"):
        self.db = db
        self.name = name

    def issue(self, user: User) -> str:
        """Create a token for the user and return its plain text form."""
        secret = "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(SECRET_LENGTH))
        record = AccessToken(user=user, name=self.name, token=hash_secret(secret))
        self.db.add(record)
        self.db.flush()
        return f"{record.id}|{secret}"

    def find(self, plain_text_token: str) -> AccessToken | None:
        """Find the stored token matching a plain text token."""
        if "|" not in plain_text_token:
            return self.db.query(AccessToken).filter(
                AccessToken.token == hash_secret(plain_text_token)
            ).first()

        token_id, secret = plain_text_token.split("|", 1)
        if not token_id.isdecimal() or int(token_id) > MAX_TOKEN_ID:
            return None

        record = self.db.get(AccessToken, int(token_id))
        if record is None or not hmac.compare_digest(record.token, hash_secret(secret)):
            return None
        return record

    def resolve(self, plain_text_token: str) -> User | None:
        """Resolve a token to its user, recording when it was last used."""
        record = self.find(plain_text_token)
        if record is None:
            return None
        record.last_used_at = datetime.now(UTC)
        return record.user

    def revoke(self, plain_text_token: str) -> bool:
        """Delete the token. Returns False if it does not exist."""
        record = self.find(plain_text_token)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True
