"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from passage.domain.error import StoreUnavailableError
from passage.domain.repository import EphemeralStore

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    ephemeral_store: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(store: FromDishka[EphemeralStore]) -> HealthResponse:
    """Basic health check endpoint.

    Reports whether the ephemeral store answers; the service itself is
    healthy as long as it can respond.
    """
    try:
        store_ok = await store.ping()
    except StoreUnavailableError:
        store_ok = False

    return HealthResponse(
        status="healthy" if store_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        ephemeral_store=store_ok,
    )
