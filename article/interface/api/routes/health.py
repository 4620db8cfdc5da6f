"""Status banner and health check routes."""

from dataclasses import dataclass
from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from article.persistence.database import SchemaMigrator

router = APIRouter(tags=["health"], route_class=DishkaRoute)


@dataclass
class Readiness:
    """Outcome of the startup checks."""

    database: bool = False
    auth: bool = False
    media: bool = False


class StatusResponse(BaseModel):
    """Root status banner."""

    message: str
    status: str
    database: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    checks: dict[str, bool]


def get_readiness(request: Request) -> Readiness:
    return getattr(request.app.state, "readiness", Readiness())


@router.get("/", response_model=StatusResponse)
async def status_banner(
    request: Request, migrator: FromDishka[SchemaMigrator]
) -> StatusResponse:
    """Report that the service is up and whether the database answers."""
    connected = get_readiness(request).database and await migrator.ping()
    return StatusResponse(
        message="Article API is running",
        status="ok",
        database="connected" if connected else "disconnected",
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request, migrator: FromDishka[SchemaMigrator]
) -> HealthResponse:
    """Report readiness of each dependency checked at startup."""
    readiness = get_readiness(request)
    checks = {
        "database": readiness.database and await migrator.ping(),
        "auth": readiness.auth,
        "media": readiness.media,
    }
    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=request.app.version,
        checks=checks,
    )
