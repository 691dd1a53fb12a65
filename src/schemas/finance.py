"""Finance schemas."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from src.models.enums import FinanceKind


class FinanceEntryResponse(BaseModel):
    """Finance entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    kind: FinanceKind
    category: str | None
    description: str | None
    amount: Decimal
    occurred_on: date
    created_at: datetime


class FinanceSummaryResponse(BaseModel):
    """Finance entries with running totals."""

    entries: list[FinanceEntryResponse]
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
