"""Category model for classifying expenses and budget allocations."""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zerobudget.core.db import Base
from zerobudget.models.enums import CategoryType
from zerobudget.utils.datetime import now_utc

if TYPE_CHECKING:
    from zerobudget.models.user import User


class Category(Base):
    """
    User-owned label for expenses and budget lines.

    Categories form a tree through parent_id. The parent must belong to the
    same user and the chain must stay acyclic; both are checked in
    zerobudget.core.validators before a parent is assigned.
    """

    __tablename__ = "categories"
    __table_args__ = (
        # One default set per user: a second concurrent seeding pass fails on insert
        UniqueConstraint("user_id", "name", "is_default", name="uq_categories_user_name_default"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    # Hex colour, e.g. #ef4444
    color: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
    )

    # Icon key, e.g. FaHome
    icon: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    type: Mapped[CategoryType] = mapped_column(
        SQLEnum(
            CategoryType,
            name="category_type",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        index=True,
    )

    parent_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )

    is_default: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )

    is_active: Mapped[bool] = mapped_column(
        default=True,
        nullable=False,
        index=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=now_utc,
    )

    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=now_utc,
        onupdate=now_utc,
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="categories",
    )

    parent: Mapped[Optional["Category"]] = relationship(
        "Category",
        remote_side=[id],
        back_populates="children",
    )

    children: Mapped[list["Category"]] = relationship(
        "Category",
        back_populates="parent",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name}, type={self.type}, user_id={self.user_id})>"
