"""Authentication API endpoints.

Handlers are plain functions so FastAPI runs password hashing on its
threadpool instead of the event loop.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_credential_service, get_current_identity
from src.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UpdatePasswordRequest,
    UserResponse,
)
from src.services.credentials import CredentialService
from src.services.tokens import RequestIdentity

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Register a new user."""
    user, token = service.register(
        user_data.name,
        user_data.email,
        user_data.password,
        user_data.password_confirmation,
    )
    return AuthResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Login with email and password."""
    user, token = service.login(credentials.email, credentials.password)
    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    identity: Annotated[RequestIdentity, Depends(get_current_identity)],
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Revoke the token used for this request."""
    service.logout(identity)
    return MessageResponse(message="Logged out successfully")


@router.post("/update-password", response_model=MessageResponse)
def update_password(
    password_data: UpdatePasswordRequest,
    identity: Annotated[RequestIdentity, Depends(get_current_identity)],
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Change the current user's password."""
    service.update_password(
        identity,
        password_data.current_password,
        password_data.new_password,
        password_data.new_password_confirmation,
    )
    return MessageResponse(message="Password updated successfully")
