# This project was developed with assistance from AI tools.
"""Placeholder document ingestion.

Stands in for the PDF parse / chunk / embed / index pipeline behind the
``/ingest`` contract. Nothing is read from ``path``; the page and chunk
counters are random so the front-end has something to display.
"""

import logging
import random

from ..core.config import settings
from ..schemas.ingest import IngestedCounts, IngestResponse
from .latency import simulate_latency

logger = logging.getLogger(__name__)

PAGES_RANGE = (50, 249)
CHUNKS_RANGE = (500, 2499)


async def ingest_documents(path: str | None = None) -> IngestResponse:
    """Pretend to ingest the PDFs under ``path`` and report what was indexed."""
    documents_path = path or settings.DEFAULT_DOCUMENTS_PATH
    counts = IngestedCounts(
        pages=random.randint(*PAGES_RANGE),
        chunks=random.randint(*CHUNKS_RANGE),
    )
    await simulate_latency(settings.INGEST_DELAY_MS)
    logger.info(
        "Ingested %s: pages=%d chunks=%d (placeholder)",
        documents_path,
        counts.pages,
        counts.chunks,
    )
    return IngestResponse(ingested=counts)
