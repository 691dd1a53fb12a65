"""Finance API endpoints."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.models.enums import FinanceKind
from src.models.finance import FinanceEntry
from src.models.user import User
from src.schemas.finance import FinanceEntryResponse, FinanceSummaryResponse

router = APIRouter(prefix="/finances", tags=["finances"])


@router.get("", response_model=FinanceSummaryResponse)
def get_finances(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get the current user's finance entries with income and expense totals."""
    entries = (
        db.query(FinanceEntry)
        .filter(FinanceEntry.user_id == current_user.id)
        .order_by(FinanceEntry.occurred_on.desc(), FinanceEntry.id.desc())
        .all()
    )

    totals = {kind: Decimal("0") for kind in FinanceKind}
    for entry in entries:
        totals[entry.kind] += entry.amount

    return FinanceSummaryResponse(
        entries=[FinanceEntryResponse.model_validate(entry) for entry in entries],
        total_income=totals[FinanceKind.INCOME],
        total_expense=totals[FinanceKind.EXPENSE],
        balance=totals[FinanceKind.INCOME] - totals[FinanceKind.EXPENSE],
    )
