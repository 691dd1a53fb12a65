"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.models.enums import UserRole


class RegisterRequest(BaseModel):
    """User registration request.

    Field rules are checked by the credential service so that every problem
    is reported in one response.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = None


class LoginRequest(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class UpdatePasswordRequest(BaseModel):
    """Password change request."""

    current_password: str | None = None
    new_password: str | None = None
    new_password_confirmation: str | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: UserRole
    is_verified: bool
    cpf: str | None
    phone: str | None
    company_id: int | None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    message: str
    user: UserResponse
    token: str


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
