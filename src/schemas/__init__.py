"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UpdatePasswordRequest,
    UserResponse,
)
from src.schemas.finance import FinanceEntryResponse, FinanceSummaryResponse
from src.schemas.invoice import InvoiceCreate, InvoiceResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UpdatePasswordRequest",
    "UserResponse",
    "AuthResponse",
    "MessageResponse",
    "InvoiceCreate",
    "InvoiceResponse",
    "FinanceEntryResponse",
    "FinanceSummaryResponse",
]
