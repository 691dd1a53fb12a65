"""Finance entry model."""

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import FinanceKind
from src.models.mixins import TimestampMixin


class FinanceEntry(Base, TimestampMixin):
    """Income or expense recorded by a user."""

    __tablename__ = "finance_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    kind = Column(
        Enum(
            FinanceKind,
            name="financekind",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    category = Column(String(100), nullable=True)  # "rent", "sales", "taxes", etc.
    description = Column(String, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    occurred_on = Column(Date, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="finance_entries")
