"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from article.config import DEFAULT_JWT_SECRET, Settings
from article.domain.service import MediaUploader
from article.interface.api.errors import register_exception_handlers
from article.interface.api.routes import admin, auth, health, posts, profile, upload
from article.interface.api.routes.health import Readiness
from article.persistence.database import SchemaMigrator
from article.util.di.container import create_container, setup_di
from article.util.observability import instrument_fastapi, instrument_httpx


async def check_readiness(container: AsyncContainer) -> Readiness:
    """Run startup migration and configuration checks.

    Failures are logged and recorded instead of stopping the process, so
    the service can still report its state.
    """
    readiness = Readiness()

    try:
        migrator = await container.get(SchemaMigrator)
        await migrator.migrate()
        readiness.database = True
    except Exception as e:
        logfire.error("Database migration failed", error=str(e))

    settings = await container.get(Settings)
    if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        logfire.error("JWT secret is still the placeholder; set AUTH__JWT_SECRET")
    else:
        readiness.auth = True

    uploader = await container.get(MediaUploader)
    if uploader.is_configured:
        readiness.media = True
    else:
        logfire.warn("Media storage credentials missing; uploads disabled")

    logfire.info(
        "Startup checks finished",
        database=readiness.database,
        auth=readiness.auth,
        media=readiness.media,
    )
    return readiness


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    container: AsyncContainer = app.state.dishka_container
    app.state.readiness = await check_readiness(container)
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; the start
    script does it in production and conftest.py in tests.

    Args:
        container: DI container to use (the production container if omitted)
    """
    # Instrument outbound HTTP (media uploads)
    instrument_httpx()

    app_instance = FastAPI(
        title="Article API",
        description="Backend API for a blogging platform: users, posts, tags and image uploads",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Wide open; browsers call this API from any origin
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(upload.router)
    app_instance.include_router(profile.router)

    return app_instance
