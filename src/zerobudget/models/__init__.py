"""Domain models package."""

from zerobudget.models.budget import Budget, BudgetCategory
from zerobudget.models.category import Category
from zerobudget.models.category_schemas import (
    CategoryCreate,
    CategoryRead,
    CategorySummary,
    CategoryTemplate,
    SeedResult,
)
from zerobudget.models.enums import CategoryType, PaymentMethod, RecurringFrequency
from zerobudget.models.expense import Expense
from zerobudget.models.income import Income
from zerobudget.models.user import User

__all__ = [
    "Budget",
    "BudgetCategory",
    "Category",
    "CategoryCreate",
    "CategoryRead",
    "CategorySummary",
    "CategoryTemplate",
    "CategoryType",
    "Expense",
    "Income",
    "PaymentMethod",
    "RecurringFrequency",
    "SeedResult",
    "User",
]
