# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness payload returned by the health endpoint."""

    status: str = "ok"
