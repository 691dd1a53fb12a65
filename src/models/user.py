"""User model."""

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import UserRole
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and record ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    cpf = Column(String(11), unique=True, nullable=True)  # digits only
    phone = Column(String(20), nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    role = Column(
        Enum(
            UserRole,
            name="userrole",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=UserRole.USER,
        nullable=False,
    )

    # Relationships
    company = relationship("Company", back_populates="users")
    access_tokens = relationship(
        "AccessToken", back_populates="user", cascade="all, delete-orphan"
    )
    invoices = relationship("Invoice", back_populates="user", cascade="all, delete-orphan")
    finance_entries = relationship(
        "FinanceEntry", back_populates="user", cascade="all, delete-orphan"
    )
