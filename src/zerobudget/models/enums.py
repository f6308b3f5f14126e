"""
Enums for domain models.
Enums provide type safety and clarity. Validation for categorical fields.
"""

import enum


class CategoryType(str, enum.Enum):
    """Zero-based budgeting classification of a category."""

    NEED = "need"
    WANT = "want"
    SAVINGS = "savings"
    DEBT = "debt"


class PaymentMethod(str, enum.Enum):
    """How an expense was paid."""

    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"
    OTHER = "other"


class RecurringFrequency(str, enum.Enum):
    """Repeat unit for recurring incomes and expenses."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
