"""Category endpoints scoped to the logged-in user."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zerobudget.api.auth import get_current_user
from zerobudget.core.db import get_db
from zerobudget.core.errors import ConflictError, NotFoundError
from zerobudget.core.logging import get_logger
from zerobudget.core.validators import validate_parent_category
from zerobudget.models.category import Category
from zerobudget.models.category_schemas import CategoryCreate, CategoryParentUpdate, CategoryRead
from zerobudget.models.enums import CategoryType
from zerobudget.models.user import User

logger = get_logger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])


async def _get_owned_category(db: AsyncSession, user: User, category_id: UUID) -> Category:
    category = await db.get(Category, category_id)
    if category is None or category.user_id != user.id or not category.is_active:
        raise NotFoundError("Category", str(category_id))
    return category


@router.get("", response_model=list[CategoryRead])
async def list_categories(
    type: CategoryType | None = Query(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the user's active categories, optionally filtered by type."""
    query = select(Category).where(
        Category.user_id == current_user.id,
        Category.is_active.is_(True),
    )

    if type:
        query = query.where(Category.type == type)

    result = await db.execute(query.order_by(Category.name))
    return result.scalars().all()


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a custom category, optionally under an existing parent."""
    result = await db.execute(
        select(Category.id).where(
            Category.user_id == current_user.id,
            Category.name == payload.name,
            Category.is_default.is_(False),
        )
    )
    if result.first() is not None:
        raise ConflictError(
            f"Category '{payload.name}' already exists",
            details={"name": payload.name},
        )

    await validate_parent_category(db, current_user.id, payload.parent_id)

    category = Category(
        **payload.model_dump(),
        user_id=current_user.id,
        is_default=False,
        is_active=True,
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)

    logger.info(
        "category.created",
        user_id=str(current_user.id),
        category_id=str(category.id),
        parent_id=str(category.parent_id) if category.parent_id else None,
    )
    return category


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(
    category_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a single category by ID."""
    return await _get_owned_category(db, current_user, category_id)


@router.patch("/{category_id}/parent", response_model=CategoryRead)
async def move_category(
    category_id: UUID,
    payload: CategoryParentUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Re-parent a category; null moves it to the top level."""
    category = await _get_owned_category(db, current_user, category_id)
    await validate_parent_category(db, current_user.id, payload.parent_id, category_id=category.id)

    category.parent_id = payload.parent_id
    await db.commit()
    await db.refresh(category)

    logger.info(
        "category.moved",
        user_id=str(current_user.id),
        category_id=str(category.id),
        parent_id=str(payload.parent_id) if payload.parent_id else None,
    )
    return category
