"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Role tag carried by a user."""

    USER = "user"
    ADMIN = "admin"


class InvoiceStatus(str, Enum):
    """Lifecycle status of an invoice."""

    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


class FinanceKind(str, Enum):
    """Direction of a finance entry."""

    INCOME = "income"
    EXPENSE = "expense"
