"""Invoice model."""

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import InvoiceStatus
from src.models.mixins import TimestampMixin


class Invoice(Base, TimestampMixin):
    """Invoice issued by a user."""

    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    number = Column(String(50), nullable=False)
    description = Column(String, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    issued_on = Column(Date, nullable=False, index=True)
    due_on = Column(Date, nullable=True)
    status = Column(
        Enum(
            InvoiceStatus,
            name="invoicestatus",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=InvoiceStatus.PENDING,
        nullable=False,
    )

    # Relationships
    user = relationship("User", back_populates="invoices")
