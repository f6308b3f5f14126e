"""Seed default categories for the logged-in user."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zerobudget.api.auth import get_current_user
from zerobudget.core.db import get_db
from zerobudget.core.errors import DatabaseError, SeedingError
from zerobudget.core.logging import get_logger
from zerobudget.core.seed import seed_default_categories
from zerobudget.models.category import Category
from zerobudget.models.category_schemas import (
    CategorySummary,
    SeedResponse,
    SeedStatusResponse,
    SessionUser,
)
from zerobudget.models.user import User

logger = get_logger(__name__)

router = APIRouter(prefix="/api/seed-categories", tags=["categories"])


@router.post("", response_model=SeedResponse)
async def seed_categories(
    force: Optional[str] = Query(None, description="\"true\" is logged; nothing is deleted"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> SeedResponse:
    """
    Create the default categories for the current user.

    The target user always comes from the session. force=true is logged but
    the request still goes through the normal idempotent path: deleting a user's
    categories is only possible from the CLI.
    """
    # Read before seeding: a rollback inside the seeding pass expires the loaded user
    session_user = SessionUser(id=current_user.id, name=current_user.name)
    log = logger.bind(user_id=str(session_user.id))

    log.info("seed_api.requested", user_name=session_user.name)

    if force == "true":
        log.warning("seed_api.force_requested")

    result = await seed_default_categories(db, session_user.id)

    if not result.success:
        log.error("seed_api.failed", error=result.error)
        raise SeedingError(details=result.error)

    log.info("seed_api.completed", message=result.message)
    return SeedResponse(
        success=True,
        message=result.message,
        skipped=result.skipped,
        user=session_user,
    )


@router.get("", response_model=SeedStatusResponse)
async def check_seeded_categories(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> SeedStatusResponse:
    """Report whether the current user has any categories, with a short listing."""
    try:
        result = await db.execute(
            select(Category)
            .where(Category.user_id == current_user.id)
            .order_by(Category.created_at, Category.name)
        )
        categories = result.scalars().all()
    except Exception as exc:
        logger.error("seed_api.check_failed", user_id=str(current_user.id), error=str(exc))
        raise DatabaseError("Failed to check categories", details=str(exc))

    return SeedStatusResponse(
        has_categories=len(categories) > 0,
        category_count=len(categories),
        categories=[
            CategorySummary(
                id=category.id,
                name=category.name,
                type=category.type,
                is_default=category.is_default,
            )
            for category in categories
        ],
        user=SessionUser(id=current_user.id, name=current_user.name),
    )
