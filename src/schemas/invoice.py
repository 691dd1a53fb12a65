"""Invoice schemas."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.models.enums import InvoiceStatus


class InvoiceCreate(BaseModel):
    """Create a new invoice."""

    number: str = Field(..., min_length=1, max_length=50)
    description: str | None = Field(None, max_length=2000)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    issued_on: date
    due_on: date | None = None
    status: InvoiceStatus = InvoiceStatus.PENDING

    @field_validator("due_on")
    @classmethod
    def due_not_before_issue(cls, v: date | None, info: ValidationInfo) -> date | None:
        """Reject due dates earlier than the issue date."""
        issued_on = info.data.get("issued_on")
        if v is not None and issued_on is not None and v < issued_on:
            raise ValueError("The due on must be a date after or equal to issued on.")
        return v


class InvoiceResponse(BaseModel):
    """Invoice response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    number: str
    description: str | None
    amount: Decimal
    issued_on: date
    due_on: date | None
    status: InvoiceStatus
    created_at: datetime
    updated_at: datetime
