"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.models.user import User
from src.services.credentials import CredentialService
from src.services.errors import AuthenticationError
from src.services.passwords import PasswordHasher, password_hasher
from src.services.tokens import DatabaseTokenIssuer, RequestIdentity, TokenIssuer

settings = get_settings()

security = HTTPBearer(auto_error=False)


def get_password_hasher() -> PasswordHasher:
    """Get the password hasher."""
    return password_hasher


def get_token_issuer(db: Annotated[Session, Depends(get_db)]) -> TokenIssuer:
    """Get a token issuer bound to the request's session."""
    return DatabaseTokenIssuer(db, name=settings.token_name)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
    db: Annotated[Session, Depends(get_db)],
) -> RequestIdentity:
    """Resolve the bearer token on the request to the calling user."""
    if credentials is None:
        raise AuthenticationError()

    user = tokens.resolve(credentials.credentials)
    if user is None:
        raise AuthenticationError()

    # Persist the token's last_used_at
    db.commit()
    return RequestIdentity(user=user, token=credentials.credentials)


def get_current_user(
    identity: Annotated[RequestIdentity, Depends(get_current_identity)],
) -> User:
    """Get the current authenticated user."""
    return identity.user


def get_credential_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CredentialService:
    """Get credential service with dependencies."""
    return CredentialService(
        db, hasher, tokens, password_min_length=settings.password_min_length
    )
