"""Company model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Company(Base, TimestampMixin):
    """Tenant that groups users together."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    cnpj = Column(String(14), unique=True, nullable=False, index=True)  # digits only
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)

    # Relationships
    users = relationship("User", back_populates="company")
