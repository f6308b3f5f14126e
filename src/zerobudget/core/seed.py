"""Seed default categories for users."""

from collections import Counter
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from zerobudget.core.default_categories import get_default_categories
from zerobudget.core.logging import get_logger
from zerobudget.models.category import Category
from zerobudget.models.category_schemas import SeedResult

logger = get_logger(__name__)


async def _safe_rollback(db: AsyncSession, user_id: UUID) -> None:
    try:
        await db.rollback()
    except Exception as exc:
        logger.warning("seed.rollback_failed", user_id=str(user_id), error=str(exc))


async def user_has_categories(db: AsyncSession, user_id: UUID) -> bool:
    result = await db.execute(select(Category.id).where(Category.user_id == user_id).limit(1))
    return result.first() is not None


async def seed_default_categories(db: AsyncSession, user_id: UUID) -> SeedResult:
    """
    Create the default categories for a user unless they already have any.

    The user id is trusted. Every failure, connectivity included, is rolled
    back and reported in the result instead of raised. A second concurrent
    first-time pass for the same user trips the (user_id, name, is_default)
    unique constraint and comes back as a failure, leaving the first pass's
    rows in place.
    """
    try:
        if await user_has_categories(db, user_id):
            logger.info("seed.skipped", user_id=str(user_id))
            return SeedResult(
                success=True,
                skipped=True,
                message="Categories already exist for user",
            )

        categories = [
            Category(
                **template.model_dump(),
                user_id=user_id,
                is_active=True,
            )
            for template in get_default_categories()
        ]

        db.add_all(categories)
        await db.commit()
    except Exception as exc:
        await _safe_rollback(db, user_id)
        logger.error("seed.failed", user_id=str(user_id), error=str(exc))
        return SeedResult(success=False, error=str(exc))

    logger.info("seed.completed", user_id=str(user_id), count=len(categories))
    return SeedResult(
        success=True,
        count=len(categories),
        message=f"Successfully created {len(categories)} default categories",
    )


async def delete_user_categories(db: AsyncSession, user_id: UUID) -> int:
    """Delete every category owned by the user, returning the number removed."""
    result = await db.execute(delete(Category).where(Category.user_id == user_id))
    await db.flush()
    return result.rowcount or 0


async def reseed_default_categories(db: AsyncSession, user_id: UUID) -> tuple[int, SeedResult]:
    """
    Force re-seed: drop all of the user's categories, then seed the defaults.

    Returns (rows deleted, seed result). A failing delete is rolled back and
    reported the same way a failing insert is.
    """
    try:
        deleted = await delete_user_categories(db, user_id)
    except Exception as exc:
        await _safe_rollback(db, user_id)
        logger.error("seed.delete_failed", user_id=str(user_id), error=str(exc))
        return 0, SeedResult(success=False, error=str(exc))

    logger.info("seed.deleted_existing", user_id=str(user_id), deleted=deleted)
    return deleted, await seed_default_categories(db, user_id)


async def count_user_categories(db: AsyncSession, user_id: UUID) -> dict[str, int]:
    """Number of the user's categories per classification value."""
    result = await db.execute(select(Category.type).where(Category.user_id == user_id))
    counts = Counter(category_type.value for category_type in result.scalars())
    return dict(counts)
