"""Authentication endpoints and dependencies."""

from uuid import UUID

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from zerobudget.core.db import get_db
from zerobudget.core.errors import UnauthorizedError
from zerobudget.core.logging import get_logger
from zerobudget.core.security import verify_password
from zerobudget.models.user import User

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    """Dependency to get current authenticated user from session."""
    user_id = request.session.get("user_id")

    if not user_id:
        raise UnauthorizedError(details="Not authenticated")

    try:
        user_uuid = UUID(user_id)
    except ValueError:
        request.session.clear()
        raise UnauthorizedError(details="Invalid user session")

    stmt = select(User).where(User.id == user_uuid, User.is_active.is_(True))
    result = await db.execute(stmt)
    user = result.scalar_one_or_none()

    if not user:
        request.session.clear()
        raise UnauthorizedError(details="User not found or inactive")

    return user


@router.post("/login")
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """Validate credentials and store the user in the signed session cookie."""
    email = email.strip().lower()
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if not verify_password(password, user.hashed_password if user else None):
        logger.warning("auth.login_failed", email=email)
        raise UnauthorizedError("Invalid email or password")

    if not user.is_active:
        logger.warning("auth.login_disabled_account", email=user.email, user_id=str(user.id))
        raise UnauthorizedError("Account is disabled")

    request.session["user_id"] = str(user.id)
    request.session["user_name"] = user.display_name

    logger.info("auth.login_success", email=user.email, user_id=str(user.id))
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"success": True, "user": {"id": str(user.id), "name": user.display_name}},
    )


@router.post("/logout")
async def logout(request: Request) -> JSONResponse:
    """Clear the session."""
    user_id = request.session.get("user_id")
    if user_id:
        logger.info("auth.logout", user_id=user_id)

    request.session.clear()
    return JSONResponse(content={"success": True})


@router.get("/logout")
async def logout_get(request: Request) -> JSONResponse:
    """Logout GET endpoint for browser links."""
    return await logout(request)
