"""Invoice API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.models.enums import InvoiceStatus
from src.models.invoice import Invoice
from src.models.user import User
from src.schemas.invoice import InvoiceCreate, InvoiceResponse

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=list[InvoiceResponse])
def get_invoices(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    status_filter: Annotated[InvoiceStatus | None, Query(alias="status")] = None,
):
    """Get the current user's invoices, most recently issued first."""
    query = db.query(Invoice).filter(Invoice.user_id == current_user.id)
    if status_filter is not None:
        query = query.filter(Invoice.status == status_filter)
    return query.order_by(Invoice.issued_on.desc(), Invoice.id.desc()).all()


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    invoice_data: InvoiceCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create an invoice owned by the current user."""
    invoice = Invoice(**invoice_data.model_dump(), user_id=current_user.id)
    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    return invoice
