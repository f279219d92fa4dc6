"""Health check endpoints: liveness and storage readiness."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_storage
from app.infrastructure.external.storage import StorageDispatcher
from app.schemas.health import HealthResponse, StorageHealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/storage", response_model=StorageHealthResponse)
def storage_health(
    storage: Annotated[StorageDispatcher, Depends(get_storage)],
) -> StorageHealthResponse:
    """Report the active storage provider and whether it initialized."""
    return StorageHealthResponse(
        status="ok" if storage.ready else "degraded",
        provider=storage.provider.value,
        ready=storage.ready,
    )
