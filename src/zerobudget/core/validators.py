# File: src/zerobudget/core/validators.py
"""Validation for the category tree."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zerobudget.core.errors import NotFoundError, ValidationError
from zerobudget.models.category import Category


async def validate_parent_category(
    db: AsyncSession,
    user_id: UUID,
    parent_id: Optional[UUID],
    category_id: Optional[UUID] = None,
) -> Optional[Category]:
    """
    Check that parent_id is a valid parent for a category owned by user_id.

    Args:
        db: Database session
        user_id: Owner of the category being created or moved
        parent_id: Proposed parent (None means top level)
        category_id: The category being moved, None when creating

    Returns:
        The parent Category, or None for top level

    Raises:
        NotFoundError: If the parent does not exist or belongs to another user
        ValidationError: If the assignment would make the tree cyclic
    """
    if parent_id is None:
        return None

    if category_id is not None and parent_id == category_id:
        raise ValidationError(
            "A category cannot be its own parent",
            details={"category_id": str(category_id)},
        )

    parent = await db.get(Category, parent_id)
    # Other users' categories are reported as missing, not forbidden
    if parent is None or parent.user_id != user_id:
        raise NotFoundError("Category", str(parent_id))

    if category_id is not None:
        # Walk up from the proposed parent; meeting the moved category means a cycle
        seen: set[UUID] = set()
        ancestor_id: Optional[UUID] = parent.parent_id
        while ancestor_id is not None and ancestor_id not in seen:
            if ancestor_id == category_id:
                raise ValidationError(
                    "Category cannot be moved under one of its own descendants",
                    details={"category_id": str(category_id), "parent_id": str(parent_id)},
                )
            seen.add(ancestor_id)
            result = await db.execute(
                select(Category.parent_id).where(Category.id == ancestor_id)
            )
            ancestor_id = result.scalar_one_or_none()

    return parent
