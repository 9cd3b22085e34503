"""FastAPI application entry point for the House Major API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from house_major.api.routes import (
    applications,
    auth,
    careers,
    contacts,
    health,
    investments,
    projects,
    services,
    team,
    uploads,
)
from house_major.api.schemas.common import ErrorResponse
from house_major.config import get_cors_origins

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from house_major.data.db import init_db

    init_db()
    yield


app = FastAPI(
    title="House Major API",
    description="API behind the House Major website and admin dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(
    status_code: int,
    message: str,
    details: list | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = jsonable_encoder(exc.errors())
    first = details[0] if details else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"Invalid {field}: {first.get('msg')}" if field else "Invalid request"
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message, details=details)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


app.include_router(health.router)
app.include_router(auth.router)
app.include_router(services.router)
app.include_router(projects.router)
app.include_router(careers.router)
app.include_router(applications.router)
app.include_router(applications.upload_router)
app.include_router(team.router)
app.include_router(investments.router)
app.include_router(contacts.router)
app.include_router(uploads.router)


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "house_major.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
