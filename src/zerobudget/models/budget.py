# File: src/zerobudget/models/budget.py
"""Monthly budget and its per-category allocations."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zerobudget.core.db import Base
from zerobudget.utils.datetime import now_utc


class Budget(Base):
    """
    Zero-based budget for one month.

    total_income should end up fully allocated across budget_categories;
    the difference is what is left to assign.
    """

    __tablename__ = "budgets"
    __table_args__ = (UniqueConstraint("user_id", "month", name="uq_budgets_user_month"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # YYYY-MM
    month: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
        index=True,
    )

    total_income: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
    )

    total_allocated: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=now_utc)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=now_utc, onupdate=now_utc)

    budget_categories: Mapped[list["BudgetCategory"]] = relationship(
        "BudgetCategory",
        back_populates="budget",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def remaining_to_allocate(self) -> Decimal:
        return self.total_income - self.total_allocated

    def __repr__(self) -> str:
        return f"<Budget(month={self.month}, user_id={self.user_id})>"


class BudgetCategory(Base):
    """Amount allocated to one category within a monthly budget."""

    __tablename__ = "budget_categories"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    budget_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("budgets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    allocated: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=now_utc)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=now_utc, onupdate=now_utc)

    budget: Mapped["Budget"] = relationship("Budget", back_populates="budget_categories")

    def __repr__(self) -> str:
        return f"<BudgetCategory(budget_id={self.budget_id}, category_id={self.category_id}, allocated={self.allocated})>"
