# File: src/zerobudget/scripts/createuser.py
"""Interactive command for creating a user account."""

import asyncio
import sys
from getpass import getpass

from sqlalchemy import select

from zerobudget.core.db import AsyncSessionLocal
from zerobudget.core.logging import configure_logging, get_logger
from zerobudget.core.security import hash_password
from zerobudget.models.user import User

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 8


def validate_email(email: str) -> str | None:
    """Return an error message, or None when the address looks usable."""
    if not email:
        return "Email cannot be empty"
    local, _, domain = email.partition("@")
    if not local or "." not in domain:
        return "Enter a valid email address"
    return None


def prompt_for_email() -> str:
    while True:
        email = input("Email address: ").strip().lower()
        error = validate_email(email)
        if error:
            print(f"❌ {error}")
            continue
        return email


def prompt_for_password() -> str:
    while True:
        password = getpass("Password: ")

        if len(password) < MIN_PASSWORD_LENGTH:
            print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters")
            continue

        if password != getpass("Password (confirm): "):
            print("❌ Passwords don't match")
            continue

        return password


async def create_user() -> int:
    """Prompt for name, email and password and store the user. Returns exit code."""
    print("\n" + "=" * 50)
    print("ZeroBudget - Create user")
    print("=" * 50 + "\n")

    async with AsyncSessionLocal() as db:
        name = input("Name: ").strip()
        email = prompt_for_email()

        result = await db.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none():
            print(f"❌ User with email '{email}' already exists\n")
            return 1

        password = prompt_for_password()

        user = User(
            name=name,
            email=email,
            hashed_password=hash_password(password),
            is_active=True,
        )
        db.add(user)
        await db.commit()

    logger.info("createuser.created", user_id=str(user.id), email=email)
    print("\n✅ User created successfully!")
    print(f"   Email: {email}")
    print(f"   ID: {user.id}")
    print("   Run zerobudget-seed-categories --email=<address> to give them default categories\n")
    return 0


def main() -> None:
    configure_logging()
    try:
        sys.exit(asyncio.run(create_user()))
    except KeyboardInterrupt:
        print("\n\n❌ Cancelled\n")
        sys.exit(1)
    except Exception as e:
        logger.error("createuser_error", error=str(e))
        print(f"\n❌ Error: {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
