# File: src/zerobudget/main.py
"""FastAPI application factory."""

import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from zerobudget import __version__
from zerobudget.core.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

SESSION_MAX_AGE_SECONDS = 14 * 24 * 60 * 60


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for startup and shutdown events."""
    start_time = datetime.now()
    logger.info("app.startup", message="ZeroBudget starting up", timestamp=start_time.isoformat())

    from zerobudget.api.health import set_app_start_time

    set_app_start_time(start_time)

    yield

    logger.info("app.shutdown", message="ZeroBudget shutting down gracefully")


def _setup_middleware(app: FastAPI, environment: str, session_secret_key: str) -> None:
    """Configure middleware (last added runs first)."""
    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret_key,
        max_age=SESSION_MAX_AGE_SECONDS,
        https_only=environment == "production",
        same_site="lax",
    )

    from zerobudget.middleware.logging import RequestIDMiddleware

    app.add_middleware(RequestIDMiddleware)


def _register_routers(app: FastAPI) -> None:
    from zerobudget.api.auth import router as auth_router
    from zerobudget.api.categories import router as categories_router
    from zerobudget.api.health import router as health_router
    from zerobudget.api.seed_categories import router as seed_categories_router

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(categories_router)
    app.include_router(seed_categories_router)


def create_app() -> FastAPI:
    """Application factory for ZeroBudget."""
    from zerobudget.core.sentry import init_sentry

    init_sentry()

    app = FastAPI(
        title="ZeroBudget API",
        description="Zero-based budgeting: incomes, expenses, categories and monthly budgets",
        version=__version__,
        lifespan=lifespan,
    )

    from zerobudget.core.exception_handlers import register_exception_handlers

    register_exception_handlers(app)

    session_secret_key = os.getenv("SESSION_SECRET_KEY", "dev-secret-key-change-in-production")
    environment = os.getenv("ENVIRONMENT", "development")

    if environment == "production" and session_secret_key == "dev-secret-key-change-in-production":
        logger.warning("app.insecure_session_key", message="SESSION_SECRET_KEY is not set")

    _setup_middleware(app, environment, session_secret_key)
    _register_routers(app)

    logger.info("app.configured", message="FastAPI application created successfully")

    return app


def run() -> None:
    """Development server entrypoint."""
    uvicorn.run(
        "zerobudget.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
