# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .routes import chat, eligibility, health, ingest
from .schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def log_pipeline_status() -> None:
    """Log that ingest/ask are placeholders. Call at startup."""
    logger.warning("Document ingestion: PLACEHOLDER (random page/chunk counts)")
    logger.warning("Question answering: PLACEHOLDER (canned answers)")
    if settings.SIMULATE_LATENCY:
        logger.warning(
            "Simulated latency: ACTIVE (ingest=%dms, responses=%d-%dms)",
            settings.INGEST_DELAY_MS,
            settings.RESPONSE_DELAY_MIN_MS,
            settings.RESPONSE_DELAY_MAX_MS,
        )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    log_pipeline_status()
    yield


app = FastAPI(
    title="Loan Support RAG API",
    description="API for document ingestion, RAG queries, and loan eligibility calculations",
    version=__version__,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=None,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


def _build_error(
    status_code: int,
    detail: str,
    request: Request,
    missing_fields: list[str] | None = None,
) -> ErrorResponse:
    return ErrorResponse(
        type="about:blank",
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request.headers.get("x-request-id", str(uuid.uuid4())),
        instance=request.url.path,
        missing_fields=missing_fields or [],
    )


def _describe_validation_errors(errors: list[dict]) -> tuple[str, list[str]]:
    """Summarize pydantic errors, naming missing fields first."""
    missing: list[str] = []
    invalid: list[str] = []
    for err in errors:
        # loc is ("body", <field>, ...) for body fields, ("body",) for an absent body
        loc = [str(part) for part in err.get("loc", ())[1:]]
        if err.get("type") == "missing":
            missing.append(".".join(loc) if loc else "request body")
        else:
            invalid.append(f"{'.'.join(loc) or 'request body'}: {err.get('msg', 'invalid value')}")

    parts = []
    if missing:
        parts.append(f"Missing required fields: {', '.join(missing)}")
    parts.extend(invalid)
    return "; ".join(parts) or "Invalid request", missing


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    body = _build_error(exc.status_code, str(exc.detail), request)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to 400 Problem Details."""
    detail, missing = _describe_validation_errors(exc.errors())
    body = _build_error(400, detail, request, missing_fields=missing)
    return JSONResponse(status_code=400, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    body = _build_error(500, "An unexpected error occurred.", request)
    logger.exception("Unhandled exception (request_id=%s)", body.request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


# Include routers
app.include_router(health.router, prefix=settings.API_PREFIX, tags=["health"])
app.include_router(ingest.router, prefix=settings.API_PREFIX, tags=["ingest"])
app.include_router(chat.router, prefix=settings.API_PREFIX, tags=["chat"])
app.include_router(eligibility.router, prefix=settings.API_PREFIX, tags=["eligibility"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Loan Support API"}
