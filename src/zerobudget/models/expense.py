"""Expense model."""

import uuid
from typing import Optional

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zerobudget.core.db import Base
from zerobudget.models.category import Category
from zerobudget.models.enums import PaymentMethod
from zerobudget.models.transaction_mixins import MoneyEntryMixin


class Expense(MoneyEntryMixin, Base):
    """Money spent against one of the user's categories."""

    __tablename__ = "expenses"

    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )

    payment_method: Mapped[PaymentMethod] = mapped_column(
        SQLEnum(
            PaymentMethod,
            name="payment_method",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )

    # File path or data URL
    receipt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    category: Mapped["Category"] = relationship("Category")

    def __repr__(self) -> str:
        return f"<Expense(amount={self.amount}, category_id={self.category_id}, date={self.date})>"
