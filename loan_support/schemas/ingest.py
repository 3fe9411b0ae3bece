# This project was developed with assistance from AI tools.
"""Document ingestion schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class IngestRequest(BaseModel):
    """Ingestion trigger. ``path`` falls back to the configured documents directory."""

    path: str | None = Field(default=None, description="Directory of PDFs to ingest.")


class IngestedCounts(BaseModel):
    pages: int
    chunks: int


class IngestResponse(BaseModel):
    """Ingestion summary."""

    status: Literal["ok"] = "ok"
    ingested: IngestedCounts
