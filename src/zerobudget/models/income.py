"""Income model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from zerobudget.core.db import Base
from zerobudget.models.transaction_mixins import MoneyEntryMixin


class Income(MoneyEntryMixin, Base):
    """Money received (salary, freelance, ...)."""

    __tablename__ = "incomes"

    source: Mapped[str] = mapped_column(String(100), nullable=False)
    taxable: Mapped[bool] = mapped_column(default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Income(amount={self.amount}, source={self.source}, date={self.date})>"
