# File: src/zerobudget/scripts/seed_categories.py
"""Seed default categories for one or all users.

Usage:
    zerobudget-seed-categories                          # every user
    zerobudget-seed-categories --email=user@example.com
    zerobudget-seed-categories --userId=<uuid>
    zerobudget-seed-categories --force                  # delete existing categories first
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from zerobudget.core.db import AsyncSessionLocal
from zerobudget.core.default_categories import get_default_categories
from zerobudget.core.logging import configure_logging, get_logger
from zerobudget.core.seed import (
    count_user_categories,
    reseed_default_categories,
    seed_default_categories,
)
from zerobudget.models.category_schemas import SeedResult
from zerobudget.models.user import User

logger = get_logger(__name__)


@dataclass
class SeedOptions:
    email: Optional[str] = None
    user_id: Optional[str] = None
    force: bool = False


@dataclass
class SeedSummary:
    succeeded: int = 0
    skipped: int = 0
    errors: int = 0

    def record(self, result: SeedResult) -> None:
        if not result.success:
            self.errors += 1
        elif result.skipped:
            self.skipped += 1
        else:
            self.succeeded += 1


def parse_args(argv: Optional[Sequence[str]] = None) -> SeedOptions:
    parser = argparse.ArgumentParser(description="Seed default budgeting categories for users.")
    parser.add_argument("--email", help="Seed only the user with this email")
    parser.add_argument(
        "--userId",
        "--user-id",
        dest="user_id",
        help="Seed only the user with this ID (wins over --email)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Delete the user's existing categories before seeding",
    )
    args = parser.parse_args(argv)
    return SeedOptions(email=args.email, user_id=args.user_id, force=args.force)


async def resolve_users(db: AsyncSession, options: SeedOptions) -> list[User]:
    """Users to seed, in the order the database returns them."""
    if options.user_id:
        print(f"🔍 Looking for user with ID: {options.user_id}")
        try:
            user_uuid = UUID(options.user_id)
        except ValueError:
            print(f"❌ User with ID {options.user_id} not found")
            return []
        user = await db.get(User, user_uuid)
        if user is None:
            print(f"❌ User with ID {options.user_id} not found")
            return []
        print(f"✅ Found user: {user.name} ({user.email})")
        return [user]

    if options.email:
        print(f"🔍 Looking for user with email: {options.email}")
        result = await db.execute(select(User).where(User.email == options.email).limit(1))
        user = result.scalar_one_or_none()
        if user is None:
            print(f"❌ User with email {options.email} not found")
            return []
        print(f"✅ Found user: {user.name} ({user.email})")
        return [user]

    print("🔍 Getting all users...")
    result = await db.execute(select(User))
    users = list(result.scalars().all())
    if not users:
        print("❌ No users found in the database")
        print("💡 Make sure you have users registered in your system first")
        return []
    print(f"✅ Found {len(users)} users")
    return users


async def seed_user(db: AsyncSession, user_id: UUID, user_name: str, force: bool) -> SeedResult:
    """Seed one user, printing what happened."""
    print(f"\n📂 Seeding categories for user: {user_name} ({user_id})")

    if force:
        deleted, result = await reseed_default_categories(db, user_id)
        print(f"  🗑️  Deleted {deleted} existing categories")
    else:
        result = await seed_default_categories(db, user_id)

    if not result.success:
        print(f"  ❌ Failed to seed categories: {result.error}")
        return result

    if result.skipped:
        print("  ⚠️  User already has categories")
        print("     Use --force flag to re-seed")
        return result

    print(f"  ✅ {result.message}")
    try:
        by_type = await count_user_categories(db, user_id)
    except Exception as exc:
        # Seeding is committed; only the breakdown is missing
        logger.warning("seed_script.count_failed", user_id=str(user_id), error=str(exc))
        return result

    print("  📊 Categories by type:")
    for category_type, count in by_type.items():
        print(f"     {category_type.upper()}: {count} categories")
    return result


async def run(
    options: SeedOptions,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> tuple[int, SeedSummary]:
    """Seed every resolved user in sequence. Returns (exit code, summary)."""
    print("🌱 Starting category seeding script...\n")
    summary = SeedSummary()

    async with session_factory() as db:
        users = await resolve_users(db, options)
        if not users:
            logger.error(
                "seed_script.no_users",
                email=options.email,
                user_id=options.user_id,
            )
            return 1, summary

        print(f"\n🎯 Will seed categories for {len(users)} user(s)")
        if options.force:
            print("⚠️  FORCE mode enabled - existing categories will be deleted")

        # Plain values only: a rollback inside one user's pass expires loaded User rows
        targets = [(user.id, user.name) for user in users]

        for user_id, user_name in targets:
            result = await seed_user(db, user_id, user_name, options.force)
            summary.record(result)

    print("\n📊 Seeding Summary:")
    print(f"   ✅ Successfully seeded: {summary.succeeded} users")
    print(f"   ⏭️  Skipped (already exists): {summary.skipped} users")
    print(f"   ❌ Errors: {summary.errors} users")
    print(f"   📂 Default categories available: {len(get_default_categories())}")
    print("\n🎉 Category seeding completed!")

    if summary.skipped > 0 and not options.force:
        print("\n💡 Tip: Use --force flag to re-seed existing categories")

    logger.info(
        "seed_script.completed",
        succeeded=summary.succeeded,
        skipped=summary.skipped,
        errors=summary.errors,
        force=options.force,
    )
    return 0, summary


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console entry point."""
    configure_logging()
    options = parse_args(argv)
    try:
        exit_code, _ = asyncio.run(run(options))
    except KeyboardInterrupt:
        print("\n\n❌ Cancelled\n")
        sys.exit(1)
    except Exception as e:
        logger.exception("seed_script.failed", error=str(e))
        print(f"❌ Script failed: {e}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
