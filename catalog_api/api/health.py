"""Health check endpoints."""

from fastapi import APIRouter, HTTPException, status

from catalog_api.core.deps import SettingsDep
from catalog_api.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """
    Health check endpoint.

    Reports service version and how many catalog sources are configured.
    Sources are not contacted; they are only reached when serving /filter.
    """
    source_count = len(settings.catalog_sources)
    return HealthResponse(
        status="healthy" if source_count else "unhealthy",
        version=settings.version,
        environment=settings.environment,
        checks={"catalog_sources": f"{source_count} configured"},
    )


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Liveness probe for Kubernetes/container orchestration.

    Simple check that the service is running.
    """
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness_check(settings: SettingsDep) -> dict[str, str]:
    """Readiness probe: ready once at least one catalog source is configured."""
    if not settings.catalog_sources:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No catalog sources configured",
        )
    return {"status": "ready"}
