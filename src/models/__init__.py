"""SQLAlchemy models."""

from src.models.access_token import AccessToken
from src.models.company import Company
from src.models.finance import FinanceEntry
from src.models.invoice import Invoice
from src.models.user import User

__all__ = [
    "Company",
    "User",
    "AccessToken",
    "Invoice",
    "FinanceEntry",
]
