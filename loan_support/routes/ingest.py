# This project was developed with assistance from AI tools.
"""Document ingestion route."""

from fastapi import APIRouter

from ..schemas.ingest import IngestRequest, IngestResponse
from ..services.ingest import ingest_documents

router = APIRouter()


@router.post("/ingest", response_model=IngestResponse)
async def ingest(req: IngestRequest | None = None) -> IngestResponse:
    """Ingest PDF documents from ``path`` (or the configured default directory).

    The body is optional; an empty POST ingests the default directory.
    """
    path = req.path if req is not None else None
    return await ingest_documents(path)
