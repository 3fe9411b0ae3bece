# This project was developed with assistance from AI tools.
"""Health check route."""

from fastapi import APIRouter

from ..schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Does not touch the placeholder pipelines."""
    return HealthResponse()
